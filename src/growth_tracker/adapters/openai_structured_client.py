"""OpenAI Responses API client for structured outputs."""

import json
from dataclasses import dataclass

import httpx
from openai import AsyncOpenAI

from growth_tracker.errors import MissingCredentialError
from growth_tracker.services.llm import StructuredClient


@dataclass
class OpenAIStructuredClient(StructuredClient):
    """Structured client backed by the OpenAI Responses API.

    The SDK client is built on first use. A missing key fails there, before
    any request is sent.
    """

    api_key: str | None = None
    http_client: httpx.AsyncClient | None = None
    client: AsyncOpenAI | None = None

    @classmethod
    def create(
        cls, api_key: str | None, timeout_seconds: float = 60.0
    ) -> "OpenAIStructuredClient":
        """Create a client with a managed httpx session."""
        return cls(
            api_key=api_key,
            http_client=httpx.AsyncClient(timeout=timeout_seconds),
        )

    def _openai(self) -> AsyncOpenAI:
        if self.client is None:
            if not self.api_key:
                raise MissingCredentialError(
                    "OPENAI_API_KEY is not set. "
                    "Add it to your environment or .env file."
                )
            self.client = AsyncOpenAI(
                api_key=self.api_key, http_client=self.http_client
            )
        return self.client

    async def generate(  # noqa: PLR0913
        self,
        *,
        model: str,
        reasoning_effort: str | None,
        store: bool,
        schema_name: str,
        schema: dict[str, object],
        prompt: str,
    ) -> dict[str, object]:
        """Call the Responses API with a strict JSON schema."""
        openai_client = self._openai()
        request_payload: dict[str, object] = {
            "model": model,
            "input": [
                {
                    "role": "user",
                    "content": [{"type": "input_text", "text": prompt}],
                }
            ],
            "text": {
                "format": {
                    "type": "json_schema",
                    "name": schema_name,
                    "strict": True,
                    "schema": schema,
                }
            },
            "store": store,
        }
        if reasoning_effort:
            request_payload["reasoning"] = {"effort": reasoning_effort}

        response = await openai_client.responses.create(**request_payload)
        output_text = response.output_text
        if not output_text:
            raise RuntimeError("OpenAI returned an empty response")
        return json.loads(output_text)

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        if self.http_client is not None:
            await self.http_client.aclose()
