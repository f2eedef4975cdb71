from typing import Protocol

import openai

from resipi.domain.aopenai import (
    DEFAULT_BASE_URL,
    DEFAULT_MODEL,
    openai_client_factory,
    quick_chat,
)
from resipi.domain.errors import ExternalServiceError


class TextGenerator(Protocol):
    async def generate_text(self, prompt: str) -> str:
        ...


class LLMService:
    def __init__(
        self,
        token: str | None = None,
        *,
        model: str = DEFAULT_MODEL,
        base_url: str = DEFAULT_BASE_URL,
        openai_client: openai.AsyncClient | None = None,
    ) -> None:
        if openai_client is None:
            if not token:
                raise ValueError("An api token or an openai client is required.")
            openai_client = openai_client_factory(token, base_url=base_url)
        self.openai_client = openai_client
        self.model = model

    async def generate_text(self, prompt: str) -> str:
        try:
            return await quick_chat(
                prompt, openai_client=self.openai_client, model=self.model
            )
        except (openai.OpenAIError, ValueError) as e:
            raise ExternalServiceError(
                f"Failed to generate text with {self.model}."
            ) from e

    async def close(self) -> None:
        await self.openai_client.close()
