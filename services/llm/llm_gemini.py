import json
import logging
from typing import Sequence

import httpx

from config.settings import settings
from schemas.chat import ChatTurn
from services.errors import UpstreamError
from services.llm.base import ChatClient

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = """You are a helpful academic assistant helping students with their CGPA, courses, and academic planning.
You should:
- Be friendly and encouraging
- Provide accurate academic advice
- Help with GPA calculations
- Suggest study strategies
- Assist with course planning
- Answer in a concise and clear manner

Always respond in a helpful, supportive tone."""


def build_contents(message: str, history: Sequence[ChatTurn]) -> list:
    """
    Gemini request contents.
    - history roles: assistant -> model, everything else -> user
    - the system prompt rides along with the first question of a conversation
    """
    contents = [
        {"role": "model" if turn.role == "assistant" else "user", "parts": [{"text": turn.content}]}
        for turn in history
    ]
    text = message if history else f"{SYSTEM_PROMPT}\n\nStudent question: {message}"
    contents.append({"role": "user", "parts": [{"text": text}]})
    return contents


def extract_text(data: dict) -> str:
    try:
        parts = data["candidates"][0]["content"]["parts"]
    except (KeyError, IndexError, TypeError):
        raise UpstreamError("gemini", "response has no candidates")
    return "".join(p.get("text", "") for p in parts).strip()


class GeminiChatClient(ChatClient):
    def __init__(self, api_key: str = None, model: str = None, timeout: float = None, transport=None):
        self.api_key = settings.GEMINI_API_KEY if api_key is None else api_key
        self.model = model or settings.GEMINI_MODEL
        self.timeout = settings.LLM_TIMEOUT if timeout is None else timeout
        self.url = f"{settings.GEMINI_BASE_URL.rstrip('/')}/models/{self.model}:generateContent"
        self.transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=httpx.Timeout(self.timeout, connect=10.0), transport=self.transport)

    async def chat(self, message: str, history: Sequence[ChatTurn]) -> str:
        if not self.api_key:
            raise UpstreamError("gemini", "GEMINI_API_KEY is not configured", status_code=503)

        body = {
            "generationConfig": {
                "temperature": settings.LLM_TEMPERATURE,
                "maxOutputTokens": settings.LLM_MAX_TOKENS,
            },
            "contents": build_contents(message, history),
        }

        async with self._client() as client:
            try:
                r = await client.post(self.url, params={"key": self.api_key}, json=body)
                r.raise_for_status()
                data = r.json()
            except httpx.HTTPStatusError as e:
                # the request URL carries the API key, keep it out of logs and messages
                logger.error("Gemini request failed with HTTP %s", e.response.status_code)
                raise UpstreamError("gemini", f"HTTP {e.response.status_code}") from e
            except httpx.HTTPError as e:
                logger.error("Gemini request failed: %s", type(e).__name__)
                raise UpstreamError("gemini", type(e).__name__) from e

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Gemini raw response: %s", json.dumps(data, ensure_ascii=False))
        return extract_text(data)


def get_chat_client() -> ChatClient:
    return GeminiChatClient()
