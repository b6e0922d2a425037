import json
import logging
from urllib.parse import quote

import httpx
import redis.asyncio as aioredis

from pokedex.config import Settings, get_settings
from pokedex.errors import NetworkError, NotFoundError

logger = logging.getLogger(__name__)

CACHE_PREFIX = "pokeapi:"


def pick_localized_name(resource: dict, locale: str, fallback: str | None = None) -> str:
    """Returns the first `names[]` entry in `locale`, else the fallback or the resource's own name."""
    return next(
        (
            entry["name"]
            for entry in resource.get("names", [])
            if entry.get("language", {}).get("name") == locale
        ),
        fallback or resource.get("name", ""),
    )


def id_from_url(url: str) -> int:
    """'https://pokeapi.co/api/v2/pokemon-species/25/' -> 25"""
    return int(url.rstrip("/").rsplit("/", 1)[-1])


def image_from_sprites(sprites: dict | None) -> str | None:
    sprites = sprites or {}
    artwork = (sprites.get("other") or {}).get("official-artwork") or {}
    return artwork.get("front_default") or sprites.get("front_default")


class PokeAPIClient:
    """Read-only access to the PokeAPI catalog with an optional Redis response cache."""

    def __init__(self, settings: Settings | None = None):
        settings = settings or get_settings()
        self.base_url = settings.pokeapi_base_url.rstrip("/")
        self.cache_ttl = settings.cache_ttl
        self.client = httpx.AsyncClient(base_url=self.base_url, timeout=settings.pokeapi_timeout)
        self.redis = (
            aioredis.from_url(settings.redis_url, decode_responses=True)
            if settings.redis_url
            else None
        )

    async def get_json(self, url: str, not_found_detail: str | None = None) -> dict:
        """
        GET a catalog resource (absolute URL or path relative to the base URL).
        404 -> NotFoundError, any other failure -> NetworkError. Only successes are cached.
        """
        cache_key = f"{CACHE_PREFIX}{url}"
        if self.redis is not None:
            cached_data = await self.redis.get(cache_key)
            if cached_data:
                logger.info(f"Cache hit for: {url}")
                return json.loads(cached_data)
            logger.info(f"Cache miss for: {url}")

        try:
            response = await self.client.get(url)
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            if e.response.status_code == 404:
                detail = not_found_detail or f"Resource '{url}' not found."
                logger.info(f"PokeAPI 404: {url}")
                raise NotFoundError(detail)
            logger.error(f"PokeAPI failed with status {e.response.status_code}: {url}")
            raise NetworkError(f"PokeAPI failed with status {e.response.status_code}")
        except httpx.RequestError as e:
            # Timeouts, DNS failures and connection resets all land here
            logger.error(f"PokeAPI network error for {url}: {e!r}")
            raise NetworkError(f"PokeAPI network error: {e!r}")
        except ValueError:
            logger.error(f"PokeAPI returned a non-JSON body for {url}")
            raise NetworkError("PokeAPI returned an unexpected response format.")

        if self.redis is not None:
            await self.redis.setex(cache_key, self.cache_ttl, json.dumps(data))
        return data

    async def get_pokemon(self, id_or_name: str | int) -> dict:
        return await self.get_json(
            # Escaped so "?", "#" or "/" in a query stay part of the identifier
            f"/pokemon/{quote(str(id_or_name), safe='')}",
            not_found_detail=f"Pokemon '{id_or_name}' not found.",
        )

    async def get_localized_name(self, url: str, locale: str, fallback: str) -> str:
        """Reads a type/ability/species resource and picks its display name in `locale`."""
        resource = await self.get_json(url)
        return pick_localized_name(resource, locale, fallback)

    async def clear_cache(self):
        """Clear the catalog cache. Useful for testing."""
        if self.redis is None:
            return
        keys = await self.redis.keys(f"{CACHE_PREFIX}*")
        if keys:
            await self.redis.delete(*keys)

    async def close(self):
        """Close HTTP and Redis connections (call on app shutdown)."""
        await self.client.aclose()
        if self.redis is not None:
            await self.redis.aclose()
