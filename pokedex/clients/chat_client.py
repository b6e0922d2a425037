import logging

import httpx

from pokedex.config import Settings, get_settings
from pokedex.errors import ChatClientError, MissingCredentialError

logger = logging.getLogger(__name__)

PROMPT_TEMPLATE = """Eres un experto en Pokémon. Aquí están los datos del Pokémon actual:

{context}

Pregunta del usuario: {question}

Por favor, responde de manera clara y concisa, analizando las estadísticas, tipos, habilidades y debilidades según la pregunta. Usa formato Markdown para mejor legibilidad."""


def build_prompt(context: str, question: str) -> str:
    return PROMPT_TEMPLATE.format(context=context.strip(), question=question.strip())


class ChatClient:
    """One-shot question/answer against the Gemini generateContent REST endpoint."""

    def __init__(self, settings: Settings | None = None):
        settings = settings or get_settings()
        self.api_key = settings.gemini_api_key
        self.model = settings.gemini_model
        self.client = httpx.AsyncClient(
            base_url=settings.gemini_base_url.rstrip("/"), timeout=settings.gemini_timeout
        )

    def ensure_configured(self):
        # Presence only; the upstream decides whether the key is valid
        if not self.api_key:
            raise MissingCredentialError(
                "Gemini API key is not configured. Set GEMINI_API_KEY in the environment."
            )

    async def analyze(self, context: str, question: str) -> str:
        """Asks the model a question about the Pokemon described by `context`. Returns Markdown."""
        self.ensure_configured()
        prompt = build_prompt(context, question)
        url = f"/models/{self.model}:generateContent"

        try:
            response = await self.client.post(
                url,
                headers={"x-goog-api-key": self.api_key},
                json={"contents": [{"parts": [{"text": prompt}]}]},
            )
            response.raise_for_status()

            data = response.json()
            parts = data["candidates"][0]["content"]["parts"]
            return "".join(part.get("text", "") for part in parts)

        except httpx.HTTPStatusError as e:
            detail = f"Gemini API failed with status {e.response.status_code}. "
            if e.response.status_code == 429:
                detail += "Rate limit exceeded."
            logger.error(f"Gemini API error: {detail}")
            raise ChatClientError(detail)

        except httpx.RequestError as e:
            logger.error(f"Gemini API network error: {e!r}")
            raise ChatClientError(f"Gemini API network error: {e!r}")

        except (KeyError, IndexError, TypeError, ValueError):
            logger.error("Gemini API response parsing error.")
            raise ChatClientError("Gemini API returned an unexpected response format.")

    async def close(self):
        await self.client.aclose()
