"""Fluent builder for generateContent requests."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable, Mapping

from gemini_client.errors import RequestBuildError
from gemini_client.images import ImageData, as_image_data
from gemini_client.models.enums import HarmBlockThreshold, HarmCategory, ResponseMimeType
from gemini_client.models.request import (
    Content,
    GenerateContentRequest,
    GenerationConfig,
    GoogleSearch,
    InlineData,
    Part,
    SafetySetting,
    Tool,
)

DEFAULT_GENERATION_CONFIG = GenerationConfig(
    temperature=1.0,
    topP=0.95,
    topK=40,
    maxOutputTokens=8192,
    responseMimeType=ResponseMimeType.TEXT.value,
)


@dataclass(frozen=True)
class _RequestDraft:
    prompt: str | None = None
    chat_history: tuple[Content, ...] = ()
    images: tuple[ImageData, ...] = ()
    system_instruction: str | None = None
    generation_config: GenerationConfig | None = None
    safety_settings: tuple[SafetySetting, ...] | None = None
    grounding: bool = False


class RequestBuilder:
    """Accumulates request options and freezes them with ``build``.

    Example::

        request = (
            RequestBuilder()
            .with_prompt("Hello")
            .with_default_generation_config()
            .disable_all_safety_settings()
            .build()
        )
    """

    def __init__(self):
        self._draft = _RequestDraft()

    def _update(self, **changes) -> RequestBuilder:
        self._draft = replace(self._draft, **changes)
        return self

    def with_prompt(self, prompt: str) -> RequestBuilder:
        return self._update(prompt=prompt)

    def with_chat_history(self, messages: Iterable[Content]) -> RequestBuilder:
        return self._update(chat_history=tuple(messages))

    def with_base64_images(self, images: Iterable[str]) -> RequestBuilder:
        """Attach images to the current user turn, after any already attached."""
        normalized = tuple(as_image_data(image) for image in images)
        return self._update(images=self._draft.images + normalized)

    def with_system_instruction(self, instruction: str) -> RequestBuilder:
        return self._update(system_instruction=instruction)

    def with_default_generation_config(self) -> RequestBuilder:
        return self._update(generation_config=DEFAULT_GENERATION_CONFIG)

    def with_generation_config(self, config: GenerationConfig) -> RequestBuilder:
        return self._update(generation_config=config)

    def disable_all_safety_settings(self) -> RequestBuilder:
        return self.with_safety_settings(
            {category: HarmBlockThreshold.OFF for category in HarmCategory}
        )

    def with_safety_settings(
        self, thresholds: Mapping[HarmCategory, HarmBlockThreshold]
    ) -> RequestBuilder:
        settings = tuple(
            SafetySetting(category=category, threshold=threshold)
            for category, threshold in thresholds.items()
        )
        return self._update(safety_settings=settings)

    def enable_grounding(self) -> RequestBuilder:
        return self._update(grounding=True)

    def build(self) -> GenerateContentRequest:
        """Return the frozen request.

        Raises:
            RequestBuildError: neither a prompt nor a chat history was given.
        """
        draft = self._draft
        has_prompt = draft.prompt is not None and draft.prompt.strip() != ""
        if not has_prompt and not draft.chat_history:
            raise RequestBuildError("A prompt or a chat history is required.")

        parts = []
        if has_prompt:
            parts.append(Part(text=draft.prompt))
        for image in draft.images:
            parts.append(
                Part(
                    inlineData=InlineData(
                        mimeType=image.mime_type.value,
                        data=image.base64_data,
                    )
                )
            )

        contents = list(draft.chat_history)
        if parts:
            contents.append(Content(role="user", parts=tuple(parts)))

        system_instruction = None
        if draft.system_instruction:
            system_instruction = Content(
                role="user", parts=(Part(text=draft.system_instruction),)
            )

        return GenerateContentRequest(
            contents=tuple(contents),
            generationConfig=draft.generation_config,
            safetySettings=draft.safety_settings,
            systemInstruction=system_instruction,
            tools=(Tool(googleSearch=GoogleSearch()),) if draft.grounding else None,
        )
