"""Request models for the generateContent endpoint."""

from typing import Any, Literal

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, model_validator

from .enums import HarmBlockThreshold, HarmCategory, ResponseMimeType


class FrozenModel(BaseModel):
    """Base for wire models that never change once built."""

    model_config = ConfigDict(frozen=True)


class InlineData(FrozenModel):
    """Inline data for image content."""

    mimeType: str = Field(..., description="MIME type of the data")
    data: str = Field(..., description="Base64 encoded data")


class FunctionCall(FrozenModel):
    """Function call emitted by the model."""

    name: str = Field(..., description="Function name")
    args: dict[str, Any] | None = Field(default=None, description="Call arguments")


class Part(FrozenModel):
    """Part of content, can be text or inline data."""

    text: str | None = Field(default=None, description="Text content")
    inlineData: InlineData | None = Field(default=None, description="Inline data")
    functionCall: FunctionCall | None = Field(
        default=None, description="Function call returned by the model"
    )


class Content(FrozenModel):
    """Content with role and parts."""

    role: Literal["user", "model"] = Field(default="user", description="Role of the content")
    parts: tuple[Part, ...] | None = Field(default=(), description="Parts of the content")


class GenerationConfig(FrozenModel):
    """Generation configuration.

    Setting ``responseSchema`` forces ``responseMimeType`` to JSON.
    """

    temperature: float | None = Field(default=None, description="Temperature for generation")
    topP: float | None = Field(default=None, description="Top P for generation")
    topK: int | None = Field(default=None, description="Top K for generation")
    maxOutputTokens: int | None = Field(default=None, description="Maximum output tokens")
    responseMimeType: str | None = Field(default=None, description="Response MIME type")
    responseSchema: dict[str, Any] | None = Field(
        default=None, description="Schema of structured output"
    )

    @model_validator(mode="before")
    @classmethod
    def _schema_implies_json(cls, data: Any) -> Any:
        if not isinstance(data, dict) or data.get("responseSchema") is None:
            return data
        mime_type = data.get("responseMimeType")
        if mime_type != ResponseMimeType.JSON.value:
            if mime_type is not None:
                logger.warning(
                    f"responseSchema set with responseMimeType={mime_type}, using JSON"
                )
            data = {**data, "responseMimeType": ResponseMimeType.JSON.value}
        return data

    def model_copy(self, *, update: dict[str, Any] | None = None, deep: bool = False):
        # Copies are revalidated so an added schema still forces JSON
        copied = super().model_copy(update=update, deep=deep)
        return type(self).model_validate(copied.model_dump())

    @property
    def requests_json_output(self) -> bool:
        return (
            self.responseMimeType == ResponseMimeType.JSON.value
            or self.responseSchema is not None
        )


class SafetySetting(FrozenModel):
    """Safety setting for content generation."""

    category: HarmCategory = Field(..., description="Safety category")
    threshold: HarmBlockThreshold = Field(
        default=HarmBlockThreshold.OFF, description="Safety threshold"
    )


class GoogleSearch(FrozenModel):
    """Google Search tool configuration."""
    pass


class Tool(FrozenModel):
    """Tool configuration."""

    googleSearch: GoogleSearch | None = Field(default=None, description="Google Search tool")


class GenerateContentRequest(FrozenModel):
    """Request model for generateContent endpoint."""

    contents: tuple[Content, ...] = Field(..., description="Contents to generate from")
    generationConfig: GenerationConfig | None = Field(
        default=None, description="Generation configuration"
    )
    safetySettings: tuple[SafetySetting, ...] | None = Field(
        default=None, description="Safety settings"
    )
    systemInstruction: Content | None = Field(
        default=None, description="System instruction"
    )
    tools: tuple[Tool, ...] | None = Field(default=None, description="Tools configuration")

    @property
    def uses_tools(self) -> bool:
        return bool(self.tools)

    def to_json(self) -> str:
        """Serialize to the wire JSON form."""
        return self.model_dump_json(exclude_none=True)
