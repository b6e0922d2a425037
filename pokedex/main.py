from contextlib import asynccontextmanager
from typing import Literal

from fastapi import Depends, FastAPI

from pokedex.dependencies import close_clients, get_pokedex_service
from pokedex.models import AggregateResult, ChatRequest, ChatResponse, ContextResponse
from pokedex.services.pokedex_service import PokedexService, pokemon_context


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    await close_clients()


app = FastAPI(
    title="Pokedex API",
    description="Looks up Pokemon in PokeAPI, localizes them and walks their evolution line.",
    lifespan=lifespan,
)

# Errors (400, 404, 502, 503) are PokedexError subclasses of HTTPException, so
# FastAPI renders them directly as {"detail": ...}.


# Declared before /pokemon/{query} so "random" is not taken as a name
@app.get(
    "/pokemon/random",
    response_model=AggregateResult,
    summary="Returns a random Pokemon",
)
async def get_random_pokemon(service: PokedexService = Depends(get_pokedex_service)):
    return await service.random_pokemon()


@app.get(
    "/pokemon/{query}",
    response_model=AggregateResult,
    summary="Returns localized Pokemon data with its evolution line",
)
async def get_pokemon(query: str, service: PokedexService = Depends(get_pokedex_service)):
    """`query` is a national dex number or a Pokemon name (case-insensitive)."""
    return await service.search(query)


@app.get(
    "/pokemon/{query}/evolution/{direction}",
    response_model=AggregateResult,
    summary="Returns the previous or next stage of the Pokemon's evolution line",
)
async def get_evolution_neighbor(
    query: str,
    direction: Literal["previous", "next"],
    service: PokedexService = Depends(get_pokedex_service),
):
    current = await service.search(query)
    return await service.step_evolution(current, -1 if direction == "previous" else 1)


@app.get(
    "/pokemon/{query}/context",
    response_model=ContextResponse,
    summary="Returns the plain-text summary used as chat context",
)
async def get_pokemon_context(query: str, service: PokedexService = Depends(get_pokedex_service)):
    return ContextResponse(context=pokemon_context(await service.search(query)))


@app.post(
    "/pokemon/{query}/chat",
    response_model=ChatResponse,
    summary="Answers a question about the Pokemon using Gemini",
)
async def chat_about_pokemon(
    query: str,
    body: ChatRequest,
    service: PokedexService = Depends(get_pokedex_service),
):
    return ChatResponse(answer=await service.chat(query, body.question))
