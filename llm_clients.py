# llm_clients.py - completion service clients

from dataclasses import dataclass
from typing import Dict, List, Optional, Protocol

import google.generativeai as genai
from groq import AsyncGroq
from loguru import logger

from config import Settings

Message = Dict[str, str]

JSON_OBJECT = "json_object"


@dataclass
class Completion:
    content: Optional[str]


class CompletionClient(Protocol):
    async def create(
        self,
        messages: List[Message],
        model: str,
        response_format: Optional[str] = None,
    ) -> List[Completion]:
        ...


class GroqCompletionClient:
    """Chat completions through the Groq API."""

    def __init__(self, api_key: Optional[str] = None) -> None:
        if not api_key:
            logger.error("GROQ_API_KEY not set in .env")
            raise EnvironmentError("Missing GROQ_API_KEY")
        self._client = AsyncGroq(api_key=api_key)

    async def create(
        self,
        messages: List[Message],
        model: str,
        response_format: Optional[str] = None,
    ) -> List[Completion]:
        kwargs = {}
        if response_format:
            kwargs["response_format"] = {"type": response_format}

        completion = await self._client.chat.completions.create(
            messages=messages,
            model=model,
            **kwargs,
        )
        return [Completion(content=choice.message.content) for choice in completion.choices]


class GeminiCompletionClient:
    """
    Chat completions through Google Gemini.

    System messages become the model's system instruction, assistant turns are
    sent with the "model" role, and a JSON response format maps to the
    application/json response MIME type. Each candidate is one completion.

    The google-generativeai SDK keeps its API key in module-level state, so the
    key is stored on the instance and re-applied before every request.
    """

    def __init__(self, api_key: Optional[str] = None) -> None:
        if not api_key:
            logger.error("GOOGLE_API_KEY not set in .env")
            raise EnvironmentError("Missing GOOGLE_API_KEY")
        self.api_key = api_key
        genai.configure(api_key=self.api_key)

    async def create(
        self,
        messages: List[Message],
        model: str,
        response_format: Optional[str] = None,
    ) -> List[Completion]:
        genai.configure(api_key=self.api_key)

        system_parts = [m["content"] for m in messages if m["role"] == "system"]
        contents = [
            {"role": "model" if m["role"] == "assistant" else "user", "parts": [m["content"]]}
            for m in messages
            if m["role"] != "system"
        ]

        generative_model = genai.GenerativeModel(
            model,
            system_instruction="\n\n".join(system_parts) or None,
        )

        generation_config = {}
        if response_format == JSON_OBJECT:
            generation_config["response_mime_type"] = "application/json"

        rsp = await generative_model.generate_content_async(
            contents,
            generation_config=generation_config or None,
        )

        completions = []
        for candidate in rsp.candidates:
            parts = candidate.content.parts if candidate.content else []
            text = "".join(part.text for part in parts if getattr(part, "text", None))
            completions.append(Completion(content=text or None))
        return completions


def build_completion_client(settings: Settings) -> CompletionClient:
    if settings.llm_provider == "gemini":
        return GeminiCompletionClient(api_key=settings.google_api_key)
    return GroqCompletionClient(api_key=settings.groq_api_key)
