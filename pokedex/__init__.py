"""Pokedex aggregation service: PokeAPI lookup, localization and evolution lines."""
