"""Client modules for external API communication."""
from .pokeapi_client import PokeAPIClient
from .chat_client import ChatClient

__all__ = [
    'PokeAPIClient',
    'ChatClient',
]
