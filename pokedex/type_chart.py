"""Static type tables keyed by the Spanish type names PokeAPI returns for locale 'es'."""
from types import MappingProxyType

DEFAULT_TYPE_COLOR = "#A8A878"

TYPE_COLORS = MappingProxyType({
    "Normal": "#A8A878",
    "Fuego": "#F08030",
    "Agua": "#6890F0",
    "Eléctrico": "#F8D030",
    "Planta": "#78C850",
    "Hielo": "#98D8D8",
    "Lucha": "#C03028",
    "Veneno": "#A040A0",
    "Tierra": "#E0C068",
    "Volador": "#A890F0",
    "Psíquico": "#F85888",
    "Bicho": "#A8B820",
    "Roca": "#B8A038",
    "Fantasma": "#705898",
    "Dragón": "#7038F8",
    "Siniestro": "#705848",
    "Acero": "#B8B8D0",
    "Hada": "#EE99AC",
})

TYPE_WEAKNESSES = MappingProxyType({
    "Normal": ("Lucha",),
    "Fuego": ("Agua", "Tierra", "Roca"),
    "Agua": ("Eléctrico", "Planta"),
    "Eléctrico": ("Tierra",),
    "Planta": ("Fuego", "Hielo", "Veneno", "Volador", "Bicho"),
    "Hielo": ("Fuego", "Lucha", "Roca", "Acero"),
    "Lucha": ("Volador", "Psíquico", "Hada"),
    "Veneno": ("Tierra", "Psíquico"),
    "Tierra": ("Agua", "Planta", "Hielo"),
    "Volador": ("Eléctrico", "Hielo", "Roca"),
    "Psíquico": ("Bicho", "Fantasma", "Siniestro"),
    "Bicho": ("Fuego", "Volador", "Roca"),
    "Roca": ("Agua", "Planta", "Lucha", "Tierra", "Acero"),
    "Fantasma": ("Fantasma", "Siniestro"),
    "Dragón": ("Hielo", "Dragón", "Hada"),
    "Siniestro": ("Lucha", "Bicho", "Hada"),
    "Acero": ("Fuego", "Lucha", "Tierra"),
    "Hada": ("Veneno", "Acero"),
})


def type_color(type_name: str) -> str:
    return TYPE_COLORS.get(type_name, DEFAULT_TYPE_COLOR)


def type_weaknesses(types: list[str]) -> list[str]:
    """
    Union of the weaknesses of every type, in first-seen order and without repeats.
    Unknown type names contribute nothing.
    """
    weaknesses = []
    for type_name in types:
        for weakness in TYPE_WEAKNESSES.get(type_name, ()):
            if weakness not in weaknesses:
                weaknesses.append(weakness)
    return weaknesses
