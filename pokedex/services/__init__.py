"""Service layer: the search pipeline and what is built on top of it."""
from .pokedex_service import PokedexService

__all__ = ['PokedexService']
