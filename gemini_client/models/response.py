"""Response models for the generateContent endpoint."""

from pydantic import BaseModel, Field, ValidationError

from .request import Content


class Segment(BaseModel):
    """Span of the generated text backed by a grounding source."""

    startIndex: int | None = Field(default=None, description="Start offset")
    endIndex: int | None = Field(default=None, description="End offset")
    text: str | None = Field(default=None, description="Segment text")


class GroundingSupport(BaseModel):
    """Link between a text segment and the chunks that support it."""

    segment: Segment | None = Field(default=None, description="Supported segment")
    groundingChunkIndices: list[int] | None = Field(
        default=None, description="Indices into groundingChunks"
    )
    confidenceScores: list[float | None] | None = Field(
        default=None, description="Confidence of each supporting chunk"
    )

    @property
    def max_confidence(self) -> float:
        scores = self.confidenceScores or []
        return max((s for s in scores if s is not None), default=0.0)


class WebSource(BaseModel):
    uri: str | None = Field(default=None, description="Source URL")
    title: str | None = Field(default=None, description="Source title or domain")


class GroundingChunk(BaseModel):
    web: WebSource | None = Field(default=None, description="Web source")


class SearchEntryPoint(BaseModel):
    renderedContent: str | None = Field(
        default=None, description="HTML/CSS snippet of the search suggestions"
    )


class GroundingMetadata(BaseModel):
    """Search grounding attached to a candidate."""

    searchEntryPoint: SearchEntryPoint | None = Field(default=None)
    webSearchQueries: list[str] | None = Field(default=None)
    groundingSupports: list[GroundingSupport] | None = Field(default=None)
    groundingChunks: list[GroundingChunk] | None = Field(default=None)


class SafetyRating(BaseModel):
    category: str | None = Field(default=None, description="Harm category")
    probability: str | None = Field(default=None, description="Harm probability")


class Candidate(BaseModel):
    """Candidate response from the model."""

    content: Content | None = Field(default=None, description="Content of the candidate")
    finishReason: str | None = Field(default=None, description="Reason for finishing")
    index: int | None = Field(default=None, description="Index of the candidate")
    groundingMetadata: GroundingMetadata | None = Field(
        default=None, description="Grounding metadata"
    )
    safetyRatings: list[SafetyRating] | None = Field(default=None)


class ModalityTokenCount(BaseModel):
    modality: str | None = Field(default=None, description="Token modality")
    tokenCount: int | None = Field(default=None, description="Token count")


class UsageMetadata(BaseModel):
    """Usage metadata for the response."""

    promptTokenCount: int = Field(default=0, description="Prompt token count")
    candidatesTokenCount: int = Field(default=0, description="Candidates token count")
    totalTokenCount: int = Field(default=0, description="Total token count")
    promptTokensDetails: list[ModalityTokenCount] | None = Field(default=None)


class GenerateContentResponse(BaseModel):
    """Success shape of the generateContent endpoint."""

    candidates: list[Candidate] = Field(..., description="Candidates from generation")
    usageMetadata: UsageMetadata = Field(
        default_factory=UsageMetadata, description="Usage metadata"
    )
    modelVersion: str | None = Field(default=None, description="Model version used")


class ErrorDetail(BaseModel):
    """Error detail in response."""

    code: int = Field(..., description="Error code")
    message: str = Field(..., description="Error message")
    status: str = Field(..., description="Error status")


class ErrorResponse(BaseModel):
    """Failure shape of the generateContent endpoint."""

    error: ErrorDetail = Field(..., description="Error details")


def decode_error(body: str) -> ErrorResponse | None:
    """Decode the failure shape, ``None`` if the body is not one."""
    try:
        return ErrorResponse.model_validate_json(body)
    except ValidationError:
        return None


def decode_response(
    status_code: int, body: str
) -> GenerateContentResponse | ErrorResponse | None:
    """Resolve a raw body into the shape its HTTP status announces.

    Failure bodies that do not decode give ``None``. Success bodies that do
    not decode raise ``ValidationError``.
    """
    if 200 <= status_code < 300:
        return GenerateContentResponse.model_validate_json(body)
    return decode_error(body)
