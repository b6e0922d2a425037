from pydantic import BaseModel, ConfigDict, Field, computed_field

from pokedex.type_chart import type_color, type_weaknesses


# --- Internal contract: records read from PokeAPI ---

class NamedResource(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    url: str


class SpeciesRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    # language tag -> display name
    names: dict[str, str] = Field(default_factory=dict)
    evolution_chain_url: str

    def localized_name(self, locale: str, fallback: str | None = None) -> str:
        return self.names.get(locale) or fallback or self.name


class CreatureRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int = Field(gt=0)
    name: str
    types: list[NamedResource]
    abilities: list[NamedResource]
    height: int  # decimetres
    weight: int  # hectograms
    image: str | None
    species: SpeciesRecord


# --- Public contract: the aggregate returned to API consumers ---

class EvolutionStage(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    image: str | None


class AggregateResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    image: str | None
    types: list[str]
    abilities: list[str]
    height: int
    weight: int
    evolution_stages: list[EvolutionStage]
    current_index: int = 0

    @computed_field
    @property
    def weaknesses(self) -> list[str]:
        return type_weaknesses(self.types)

    @computed_field
    @property
    def type_colors(self) -> dict[str, str]:
        return {type_name: type_color(type_name) for type_name in self.types}

    @property
    def height_m(self) -> float:
        return self.height / 10

    @property
    def weight_kg(self) -> float:
        return self.weight / 10


class ContextResponse(BaseModel):
    context: str


class ChatRequest(BaseModel):
    question: str


class ChatResponse(BaseModel):
    answer: str
