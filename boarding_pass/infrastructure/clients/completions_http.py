from __future__ import annotations

import json
from typing import Any

import httpx

from boarding_pass.domain.ports.llm_port import ModelSessionPort


class CompletionsHttpClient(ModelSessionPort):
    """Model session over an OpenAI-compatible chat completions endpoint.

    ``is_available`` is the capability flag: false while no base_url is
    configured, in which case the pipeline skips the primary stage.
    """

    def __init__(
        self,
        base_url: str | None,
        timeout_seconds: int,
        *,
        api_key: str | None = None,
        model: str = "gpt-4o",
        temperature: float = 0.1,
        max_tokens: int = 800,
        verify_ssl: bool = True,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url
        self._timeout_seconds = timeout_seconds
        self._api_key = api_key
        self._model = model
        self._temperature = temperature
        self._max_tokens = max_tokens
        self._verify_ssl = verify_ssl
        self._transport = transport

    @property
    def is_available(self) -> bool:
        return bool(self._base_url)

    def _client(self) -> httpx.AsyncClient:
        if not self._base_url:
            raise RuntimeError("LLM base_url is not configured")
        headers = {"Authorization": f"Bearer {self._api_key}"} if self._api_key else None
        return httpx.AsyncClient(
            timeout=self._timeout_seconds,
            verify=self._verify_ssl,
            transport=self._transport,
            headers=headers,
        )

    async def respond(self, prompt: str) -> str:
        data = await self.complete(prompt)
        return self.extract_message_content(data)

    async def complete(self, content: str) -> dict[str, Any]:
        payload = {
            "model": self._model,
            "messages": [{"role": "user", "content": content}],
            "temperature": self._temperature,
            "max_tokens": self._max_tokens,
        }
        async with self._client() as client:
            resp = await client.post(self._base_url, json=payload)
            resp.raise_for_status()
            try:
                data = resp.json()
                if isinstance(data, dict):
                    return data
            except ValueError:
                pass
            # JSONL-style bodies: the last JSON object line carries the answer
            for line in reversed((resp.text or "").splitlines()):
                s = line.strip()
                if not s:
                    continue
                try:
                    obj = json.loads(s)
                except ValueError:
                    continue
                if isinstance(obj, dict):
                    return obj
            raise RuntimeError("LLM completion response not JSON")

    def extract_message_content(self, data: dict[str, Any]) -> str:
        choices = data.get("choices")
        if isinstance(choices, list) and choices and isinstance(choices[0], dict):
            first = choices[0]
            msg = first.get("message")
            if isinstance(msg, dict) and isinstance(msg.get("content"), str) and msg["content"].strip():
                return msg["content"]
            if isinstance(first.get("text"), str) and first["text"].strip():
                return first["text"]
        content = data.get("content") or data.get("Content")
        if isinstance(content, str) and content.strip():
            return content
        raise RuntimeError("LLM completion response has no message content")
