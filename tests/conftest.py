from __future__ import annotations

import json

import pytest

VALID_API_KEY = "AIza" + "x" * 35


class FakeTransport:
    """Records every send and answers with a canned response."""

    def __init__(self, status_code: int = 200, body: str = "", error: Exception | None = None):
        self.status_code = status_code
        self.body = body
        self.error = error
        self.calls: list[dict] = []

    async def send(self, url, method, headers, body):
        self.calls.append({"url": url, "method": method, "headers": headers, "body": body})
        if self.error is not None:
            raise self.error
        return self.status_code, self.body


def success_body(text: str | None = "Hello", grounding: dict | None = None) -> str:
    candidate: dict = {"finishReason": "STOP", "index": 0}
    if text is not None:
        candidate["content"] = {"role": "model", "parts": [{"text": text}]}
    if grounding is not None:
        candidate["groundingMetadata"] = grounding
    return json.dumps(
        {
            "candidates": [candidate],
            "usageMetadata": {
                "promptTokenCount": 4,
                "candidatesTokenCount": 2,
                "totalTokenCount": 6,
                "promptTokensDetails": [{"modality": "TEXT", "tokenCount": 4}],
            },
            "modelVersion": "gemini-2.0-flash",
        }
    )


@pytest.fixture()
def api_key() -> str:
    return VALID_API_KEY


@pytest.fixture()
def transport() -> FakeTransport:
    return FakeTransport(body=success_body())
