import logging
import random

from pokedex.clients.chat_client import ChatClient
from pokedex.clients.pokeapi_client import PokeAPIClient
from pokedex.errors import NotFoundError, ValidationError
from pokedex.models import AggregateResult
from pokedex.services.expander import EvolutionExpander
from pokedex.services.species_resolver import SpeciesResolver

logger = logging.getLogger(__name__)

# Last national dex number the random lookup draws from
RANDOM_POKEMON_MAX_ID = 898


def pokemon_context(result: AggregateResult) -> str:
    """Plain-text summary of a result, embedded in chat prompts."""
    return "\n".join([
        f"Nombre: {result.name}",
        f"ID: #{result.id:03d}",
        f"Tipos: {', '.join(result.types)}",
        f"Altura: {result.height_m:.1f}m",
        f"Peso: {result.weight_kg:.1f}kg",
        f"Habilidades: {', '.join(result.abilities)}",
        f"Debilidades: {', '.join(result.weaknesses)}",
        f"Cadena Evolutiva: {' → '.join(stage.name for stage in result.evolution_stages)}",
    ])


class PokedexService:
    """The single search pipeline (resolve, then expand) every API surface goes through."""

    def __init__(self, poke_client: PokeAPIClient, chat_client: ChatClient, locale: str = "es"):
        self._resolver = SpeciesResolver(poke_client)
        self._expander = EvolutionExpander(poke_client, locale=locale)
        self._chat_client = chat_client

    async def search(self, query: str) -> AggregateResult:
        creature = await self._resolver.resolve(query)
        result = await self._expander.expand(creature)
        logger.info(
            f"Resolved '{query}' to #{result.id} {result.name} "
            f"({len(result.evolution_stages)} evolution stages)"
        )
        return result

    async def random_pokemon(self) -> AggregateResult:
        return await self.search(str(random.randint(1, RANDOM_POKEMON_MAX_ID)))

    async def step_evolution(self, result: AggregateResult, step: int) -> AggregateResult:
        """Searches the evolution stage `step` positions away from the current one (-1 previous, +1 next)."""
        target = result.current_index + step
        if not 0 <= target < len(result.evolution_stages):
            direction = "next" if step > 0 else "previous"
            raise NotFoundError(f"'{result.name}' has no {direction} evolution stage.")
        return await self.search(str(result.evolution_stages[target].id))

    async def chat(self, query: str, question: str) -> str:
        """
        Answers a free-text question about the Pokemon matching `query`.
        The question and the chat credential are checked before any catalog read.
        """
        if not (question or "").strip():
            raise ValidationError("Please enter a question about the Pokemon.")
        self._chat_client.ensure_configured()

        result = await self.search(query)
        return await self._chat_client.analyze(pokemon_context(result), question)
