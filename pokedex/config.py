import os
from functools import lru_cache

from pydantic import BaseModel


class Settings(BaseModel):
    pokeapi_base_url: str = "https://pokeapi.co/api/v2"
    pokeapi_timeout: float = 5.0
    locale: str = "es"
    # Response cache is off unless a Redis URL is configured
    redis_url: str | None = None
    cache_ttl: int = 3600
    gemini_api_key: str | None = None
    gemini_model: str = "gemini-2.0-flash"
    gemini_base_url: str = "https://generativelanguage.googleapis.com/v1beta"
    gemini_timeout: float = 30.0

    @classmethod
    def from_env(cls) -> "Settings":
        """Builds settings from environment variables, keeping defaults for unset ones."""
        env = {
            "pokeapi_base_url": os.getenv("POKEAPI_BASE_URL"),
            "pokeapi_timeout": os.getenv("POKEAPI_TIMEOUT"),
            "locale": os.getenv("POKEDEX_LOCALE"),
            "redis_url": os.getenv("REDIS_URL"),
            "cache_ttl": os.getenv("CACHE_TTL"),
            "gemini_api_key": os.getenv("GEMINI_API_KEY"),
            "gemini_model": os.getenv("GEMINI_MODEL"),
            "gemini_base_url": os.getenv("GEMINI_BASE_URL"),
            "gemini_timeout": os.getenv("GEMINI_TIMEOUT"),
        }
        # Empty strings count as unset
        return cls(**{key: value for key, value in env.items() if value})


@lru_cache
def get_settings() -> Settings:
    return Settings.from_env()
