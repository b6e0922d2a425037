import logging
import re

from pydantic import ValidationError as ModelValidationError

from pokedex.clients.pokeapi_client import PokeAPIClient, image_from_sprites
from pokedex.errors import NetworkError, ValidationError
from pokedex.models import CreatureRecord, NamedResource, SpeciesRecord

logger = logging.getLogger(__name__)


def normalize_query(query: str) -> str:
    """
    Turns free-form input into a catalog identifier: trimmed, lower-case,
    numeric ids without leading zeros, inner whitespace as '-'.
    """
    normalized = (query or "").strip().lower()
    if not normalized:
        raise ValidationError("Please enter a Pokemon name or number.")
    if normalized.isdigit():
        return str(int(normalized))
    return re.sub(r"\s+", "-", normalized)


def parse_species(data: dict) -> SpeciesRecord:
    return SpeciesRecord(
        name=data["name"],
        names={
            entry["language"]["name"]: entry["name"]
            for entry in reversed(data.get("names", []))
        },
        evolution_chain_url=data["evolution_chain"]["url"],
    )


def parse_creature(data: dict, species: SpeciesRecord) -> CreatureRecord:
    return CreatureRecord(
        id=data["id"],
        name=data["name"],
        types=[NamedResource(**entry["type"]) for entry in data.get("types", [])],
        abilities=[NamedResource(**entry["ability"]) for entry in data.get("abilities", [])],
        height=data["height"],
        weight=data["weight"],
        image=image_from_sprites(data.get("sprites")),
        species=species,
    )


class SpeciesResolver:
    def __init__(self, poke_client: PokeAPIClient):
        self._poke_client = poke_client

    async def resolve(self, query: str) -> CreatureRecord:
        """
        Fetches the creature record for `query`, then its species record.
        The two reads are sequential: the species URL is only known after the first returns.
        """
        normalized = normalize_query(query)
        logger.info(f"Resolving Pokemon: {normalized}")

        creature_data = await self._poke_client.get_pokemon(normalized)
        try:
            species_url = creature_data["species"]["url"]
        except (KeyError, TypeError):
            raise NetworkError("PokeAPI returned an unexpected response format.")

        species_data = await self._poke_client.get_json(species_url)

        try:
            species = parse_species(species_data)
            return parse_creature(creature_data, species)
        except (KeyError, TypeError, ModelValidationError) as e:
            logger.error(f"Unexpected PokeAPI payload for '{normalized}': {e!r}")
            raise NetworkError("PokeAPI returned an unexpected response format.")
