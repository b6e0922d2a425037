from fastapi import Depends

from pokedex.clients import ChatClient, PokeAPIClient
from pokedex.config import get_settings
from pokedex.services import PokedexService

_poke_client = None
_chat_client = None


def get_poke_client() -> PokeAPIClient:
    global _poke_client
    if _poke_client is None:
        _poke_client = PokeAPIClient()
    return _poke_client


def get_chat_client() -> ChatClient:
    global _chat_client
    if _chat_client is None:
        _chat_client = ChatClient()
    return _chat_client


def get_pokedex_service(
    poke_client: PokeAPIClient = Depends(get_poke_client),
    chat_client: ChatClient = Depends(get_chat_client),
) -> PokedexService:
    return PokedexService(
        poke_client=poke_client,
        chat_client=chat_client,
        locale=get_settings().locale,
    )


async def close_clients():
    global _poke_client, _chat_client
    if _poke_client is not None:
        await _poke_client.close()
        _poke_client = None
    if _chat_client is not None:
        await _chat_client.close()
        _chat_client = None
