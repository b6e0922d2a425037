import pytest

from pokedex.clients.chat_client import ChatClient
from pokedex.clients.pokeapi_client import PokeAPIClient
from pokedex.config import Settings

BASE = "https://pokeapi.co/api/v2"
ARTWORK = "https://raw.githubusercontent.com/PokeAPI/sprites/master/sprites/pokemon/other/official-artwork"


def names(en: str, es: str) -> list[dict]:
    return [
        {"language": {"name": "ja"}, "name": f"{en} (ja)"},
        {"language": {"name": "es"}, "name": es},
        {"language": {"name": "en"}, "name": en},
    ]


def creature(pokemon_id: int, name: str) -> dict:
    # Pichu, Pikachu and Raichu share type and abilities
    return {
        "id": pokemon_id,
        "name": name,
        "height": {172: 3, 25: 4, 26: 8}[pokemon_id],
        "weight": {172: 20, 25: 60, 26: 300}[pokemon_id],
        "types": [{"slot": 1, "type": {"name": "electric", "url": f"{BASE}/type/13/"}}],
        "abilities": [
            {"ability": {"name": "static", "url": f"{BASE}/ability/9/"}, "is_hidden": False},
            {"ability": {"name": "lightning-rod", "url": f"{BASE}/ability/31/"}, "is_hidden": True},
        ],
        "sprites": {
            "front_default": f"https://example.test/sprites/{pokemon_id}.png",
            "other": {"official-artwork": {"front_default": f"{ARTWORK}/{pokemon_id}.png"}},
        },
        "species": {"name": name, "url": f"{BASE}/pokemon-species/{pokemon_id}/"},
    }


def species(pokemon_id: int, name: str) -> dict:
    return {
        "id": pokemon_id,
        "name": name,
        "names": names(name.capitalize(), name.capitalize()),
        "evolution_chain": {"url": f"{BASE}/evolution-chain/10/"},
    }


PIKACHU_CHAIN = {
    "id": 10,
    "chain": {
        "species": {"name": "pichu", "url": f"{BASE}/pokemon-species/172/"},
        "evolves_to": [
            {
                "species": {"name": "pikachu", "url": f"{BASE}/pokemon-species/25/"},
                "evolves_to": [
                    {
                        "species": {"name": "raichu", "url": f"{BASE}/pokemon-species/26/"},
                        "evolves_to": [],
                    },
                    # Alternate branch; never requested
                    {
                        "species": {"name": "raichu-alola", "url": f"{BASE}/pokemon-species/10100/"},
                        "evolves_to": [],
                    },
                ],
            }
        ],
    },
}

# Every read a "pikachu" search performs
PIKACHU_CATALOG = {
    f"{BASE}/pokemon/pikachu": creature(25, "pikachu"),
    f"{BASE}/pokemon-species/25/": species(25, "pikachu"),
    f"{BASE}/type/13/": {"name": "electric", "names": names("Electric", "Eléctrico")},
    f"{BASE}/ability/9/": {"name": "static", "names": names("Static", "Electricidad Estática")},
    f"{BASE}/ability/31/": {"name": "lightning-rod", "names": names("Lightning Rod", "Pararrayos")},
    f"{BASE}/evolution-chain/10/": PIKACHU_CHAIN,
    f"{BASE}/pokemon/172": creature(172, "pichu"),
    f"{BASE}/pokemon/25": creature(25, "pikachu"),
    f"{BASE}/pokemon/26": creature(26, "raichu"),
    f"{BASE}/pokemon-species/172/": species(172, "pichu"),
    f"{BASE}/pokemon-species/26/": species(26, "raichu"),
}


def register_catalog(httpx_mock, catalog: dict, only: list[str] | None = None):
    for url, payload in catalog.items():
        if only is None or url in only:
            httpx_mock.add_response(url=url, json=payload, status_code=200)


@pytest.fixture
def settings():
    """Defaults only, so local environment variables never leak into tests."""
    return Settings(gemini_api_key="test-key")


@pytest.fixture
def poke_client(settings):
    """PokeAPIClient without a response cache."""
    return PokeAPIClient(settings)


@pytest.fixture
def chat_client(settings):
    return ChatClient(settings)


@pytest.fixture
def pikachu_catalog():
    return dict(PIKACHU_CATALOG)


@pytest.fixture
def mock_catalog(httpx_mock):
    """Registers catalog responses: mock_catalog(catalog, only=[urls])."""
    def _register(catalog: dict, only: list[str] | None = None):
        register_catalog(httpx_mock, catalog, only)
    return _register
