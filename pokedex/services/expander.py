import asyncio
import logging

from pokedex.clients.pokeapi_client import PokeAPIClient, id_from_url, image_from_sprites, pick_localized_name
from pokedex.errors import AggregationError
from pokedex.models import AggregateResult, CreatureRecord, EvolutionStage

logger = logging.getLogger(__name__)


def chain_links(chain: dict) -> list[dict]:
    """Walks root -> evolves_to[0] -> ... and returns the visited links in order. Alternate branches are ignored."""
    links = []
    current = chain
    while current:
        links.append(current)
        successors = current.get("evolves_to") or []
        current = successors[0] if successors else None
    return links


def current_index(stages: list[EvolutionStage], creature_id: int) -> int:
    return next((index for index, stage in enumerate(stages) if stage.id == creature_id), 0)


async def gather_all_or_nothing(*coroutines):
    """Runs the coroutines concurrently. The first failure cancels the rest and is re-raised."""
    tasks = [asyncio.ensure_future(coroutine) for coroutine in coroutines]
    try:
        return await asyncio.gather(*tasks)
    finally:
        for task in tasks:
            if not task.done():
                task.cancel()
        # Let cancelled reads unwind before the error propagates
        await asyncio.gather(*tasks, return_exceptions=True)


class EvolutionExpander:
    """Localizes a resolved creature and expands its evolution line into an AggregateResult."""

    def __init__(self, poke_client: PokeAPIClient, locale: str = "es"):
        self._poke_client = poke_client
        self.locale = locale

    async def expand(self, creature: CreatureRecord) -> AggregateResult:
        types = [
            self._poke_client.get_localized_name(ref.url, self.locale, ref.name)
            for ref in creature.types
        ]
        abilities = [
            self._poke_client.get_localized_name(ref.url, self.locale, ref.name)
            for ref in creature.abilities
        ]

        try:
            *names, stages = await gather_all_or_nothing(
                *types,
                *abilities,
                self._evolution_stages(creature.species.evolution_chain_url),
            )
        except Exception as e:
            logger.error(f"Expansion of '{creature.name}' failed: {e!r}")
            raise AggregationError(e) from e

        return AggregateResult(
            id=creature.id,
            name=creature.species.localized_name(self.locale, creature.name),
            image=creature.image,
            types=names[:len(types)],
            abilities=names[len(types):],
            height=creature.height,
            weight=creature.weight,
            evolution_stages=stages,
            current_index=current_index(stages, creature.id),
        )

    async def _evolution_stages(self, chain_url: str) -> list[EvolutionStage]:
        chain_data = await self._poke_client.get_json(chain_url)
        links = chain_links(chain_data["chain"])
        logger.info(f"Evolution chain {chain_url}: {[link['species']['name'] for link in links]}")
        return list(await gather_all_or_nothing(*(self._stage(link) for link in links)))

    async def _stage(self, link: dict) -> EvolutionStage:
        species_ref = link["species"]
        pokemon_id = id_from_url(species_ref["url"])
        # The link's two reads are independent of each other
        pokemon_data, species_data = await gather_all_or_nothing(
            self._poke_client.get_pokemon(pokemon_id),
            self._poke_client.get_json(species_ref["url"]),
        )
        return EvolutionStage(
            id=pokemon_id,
            name=pick_localized_name(species_data, self.locale, species_ref["name"]),
            image=image_from_sprites(pokemon_data.get("sprites")),
        )
