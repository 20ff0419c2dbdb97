"""Normalized results returned to callers."""

from pydantic import BaseModel, ConfigDict, Field

FALLBACK_CONTENT = "Failed to generate content"


class GroundingSource(BaseModel):
    domain: str | None = Field(default=None, description="Title of the web source")
    url: str | None = Field(default=None, description="URL of the web source")


class GroundingDetail(BaseModel):
    """Citations derived from a candidate's grounding metadata."""

    rendered_content_as_html: str | None = Field(
        default=None, description="Search entry point HTML, when requested"
    )
    search_suggestions: list[str] | None = Field(
        default=None, description="Web search queries used by the model"
    )
    reliable_information: list[str] | None = Field(
        default=None, description="Supported segments, most confident first"
    )
    sources: list[GroundingSource] | None = Field(
        default=None, description="Web sources in response order"
    )


class ModelResponse(BaseModel):
    content: str = Field(..., description="Generated text")
    grounding_detail: GroundingDetail | None = Field(default=None)


class ResponseOptions(BaseModel):
    """Which optional parts of the grounding metadata reach the result.

    The search entry point only shows up alongside grounding detail, and the
    generator refuses to turn it on before grounding detail is included.
    """

    model_config = ConfigDict(frozen=True)

    include_grounding_detail: bool = False
    include_search_entry_point: bool = False
