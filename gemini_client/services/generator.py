"""Content generation against the Gemini generateContent endpoint."""

from __future__ import annotations

from loguru import logger

from gemini_client.builder import RequestBuilder
from gemini_client.capabilities import (
    ModelDescriptor,
    ModelVersion,
    find_descriptor,
    get_descriptor,
    latest_stable_model_version,
)
from gemini_client.config import settings
from gemini_client.errors import (
    GeminiError,
    InvalidArgumentError,
    InvalidCredentialError,
    InvalidStateError,
    ResponseParseError,
    TransportError,
    UnsupportedFeatureError,
    UpstreamError,
)
from gemini_client.models.request import GenerateContentRequest
from gemini_client.models.response import (
    Candidate,
    GenerateContentResponse,
    GroundingMetadata,
    decode_response,
)
from gemini_client.models.result import (
    FALLBACK_CONTENT,
    GroundingDetail,
    GroundingSource,
    ModelResponse,
    ResponseOptions,
)
from gemini_client.services.transport import CurlTransport, Transport
from gemini_client.validation import can_be_valid_api_key

VALIDATION_PROMPT = "Say `Hello World` to me!"


def check_capabilities(
    request: GenerateContentRequest, descriptor: ModelDescriptor
) -> None:
    """Reject requests that use features the model lacks.

    Raises:
        UnsupportedFeatureError: grounding or JSON output is not supported.
    """
    if request.uses_tools and not descriptor.supports_grounding:
        raise UnsupportedFeatureError(
            f"Grounding is not supported for {descriptor.wire_name}."
        )

    config = request.generationConfig
    if config is None or not config.requests_json_output:
        return
    if not descriptor.supports_json_output:
        if config.responseSchema is not None:
            raise UnsupportedFeatureError(
                f"{descriptor.wire_name} does not support JSON output; "
                "choose a model that does or remove the responseSchema."
            )
        raise UnsupportedFeatureError(
            f"JSON output is not supported for {descriptor.wire_name}."
        )


def candidate_text(candidate: Candidate) -> str:
    """Trimmed text of the first part, or the fallback if there is none."""
    content = candidate.content
    if content is None or not content.parts or content.parts[0].text is None:
        return FALLBACK_CONTENT
    return content.parts[0].text.strip()


def derive_grounding_detail(
    metadata: GroundingMetadata, include_search_entry_point: bool
) -> GroundingDetail:
    """Summarize grounding metadata.

    Supports are ranked by their highest confidence score, descending; ties
    keep response order. Supports without segment text and chunks without a
    web source are skipped.
    """
    rendered = None
    if include_search_entry_point and metadata.searchEntryPoint is not None:
        rendered = metadata.searchEntryPoint.renderedContent

    reliable_information = None
    if metadata.groundingSupports is not None:
        ranked = sorted(
            metadata.groundingSupports,
            key=lambda support: support.max_confidence,
            reverse=True,
        )
        reliable_information = [
            support.segment.text
            for support in ranked
            if support.segment is not None and support.segment.text is not None
        ]

    sources = None
    if metadata.groundingChunks is not None:
        sources = [
            GroundingSource(domain=chunk.web.title, url=chunk.web.uri)
            for chunk in metadata.groundingChunks
            if chunk.web is not None
        ]

    return GroundingDetail(
        rendered_content_as_html=rendered,
        search_suggestions=metadata.webSearchQueries,
        reliable_information=reliable_information,
        sources=sources,
    )


def to_model_response(
    response: GenerateContentResponse, options: ResponseOptions
) -> ModelResponse:
    """Map a decoded success body to the normalized result."""
    if not response.candidates:
        raise ValueError("Response contains no candidates")

    candidate = response.candidates[0]
    grounding_detail = None
    if candidate.groundingMetadata is not None and options.include_grounding_detail:
        grounding_detail = derive_grounding_detail(
            candidate.groundingMetadata, options.include_search_entry_point
        )

    return ModelResponse(
        content=candidate_text(candidate),
        grounding_detail=grounding_detail,
    )


class Generator:
    """Client for the generateContent endpoint.

    Authenticates either with an API key (sent as the ``key`` query
    parameter) or with Google Cloud project credentials (sent as headers).

    The response options are replaced, never mutated, and each call reads
    them once. Toggling them while calls are in flight on the same instance
    gives those calls either value; pass ``options`` per call instead.
    """

    def __init__(
        self,
        api_key: str | None = None,
        transport: Transport | None = None,
        options: ResponseOptions | None = None,
        *,
        _project_headers: dict[str, str] | None = None,
    ):
        if _project_headers is None:
            if not can_be_valid_api_key(api_key):
                raise InvalidCredentialError("Invalid or expired API key.")
            api_key = api_key.strip()
        else:
            api_key = None

        self._api_key = api_key
        self._headers = _project_headers or {}
        self.transport = transport or CurlTransport()
        self._options = options if options is not None else ResponseOptions()

    @classmethod
    def from_project_credentials(
        cls,
        cloud_project_name: str,
        cloud_project_id: str,
        bearer: str,
        transport: Transport | None = None,
        options: ResponseOptions | None = None,
    ) -> Generator:
        """Create a generator authenticated with project credentials.

        Raises:
            InvalidCredentialError: one of the three values is empty.
        """
        if not cloud_project_name:
            raise InvalidCredentialError("Google Cloud project name is required.")
        if not cloud_project_id:
            raise InvalidCredentialError("Google Cloud project ID is required.")
        if not bearer:
            raise InvalidCredentialError("Bearer token is required.")

        headers = {
            cloud_project_name: cloud_project_id,
            "Accept": "application/json",
            "Authorization": f"Bearer {bearer}",
        }
        return cls(transport=transport, options=options, _project_headers=headers)

    @property
    def options(self) -> ResponseOptions:
        return self._options

    def includes_grounding_detail_in_response(self) -> Generator:
        if not self._options.include_grounding_detail:
            self._options = self._options.model_copy(
                update={"include_grounding_detail": True}
            )
        return self

    def excludes_grounding_detail_from_response(self) -> Generator:
        if self._options.include_grounding_detail:
            self._options = self._options.model_copy(
                update={"include_grounding_detail": False}
            )
        return self

    def includes_search_entry_point_in_response(self) -> Generator:
        """Include the rendered search entry point in grounding detail.

        Raises:
            InvalidStateError: grounding detail is not included yet.
        """
        if not self._options.include_grounding_detail:
            raise InvalidStateError(
                "Grounding detail must be included in the response to include search entry point."
            )
        if not self._options.include_search_entry_point:
            self._options = self._options.model_copy(
                update={"include_search_entry_point": True}
            )
        return self

    def excludes_search_entry_point_from_response(self) -> Generator:
        if self._options.include_search_entry_point:
            self._options = self._options.model_copy(
                update={"include_search_entry_point": False}
            )
        return self

    @staticmethod
    def latest_stable_model_version() -> ModelVersion:
        return latest_stable_model_version()

    def _resolve_model(
        self, model: ModelVersion | str | None
    ) -> tuple[str, ModelDescriptor | None]:
        if model is None:
            model = latest_stable_model_version()
        if isinstance(model, ModelVersion):
            descriptor = get_descriptor(model)
            return descriptor.wire_name, descriptor
        if not model or not model.strip():
            raise InvalidArgumentError("Model alias is required.")
        descriptor = find_descriptor(model.strip())
        if descriptor is None:
            # Unknown aliases go to the API as-is, unchecked
            return model.strip(), None
        return descriptor.wire_name, descriptor

    def _endpoint(self, wire_name: str) -> tuple[str, dict[str, str]]:
        url = f"{settings.api_base}/{wire_name}:generateContent"
        if self._api_key:
            # API key and credential headers are exclusive
            return f"{url}?key={self._api_key}", {}
        return url, dict(self._headers)

    async def generate_content(
        self,
        request: GenerateContentRequest,
        model: ModelVersion | str | None = None,
        *,
        options: ResponseOptions | None = None,
    ) -> ModelResponse:
        """
        Generate content for a built request.

        Args:
            request: Request produced by ``RequestBuilder.build``
            model: Model version, known wire name or free alias; defaults to
                the latest stable model version
            options: Response options for this call only

        Returns:
            The normalized model response

        Raises:
            UnsupportedFeatureError: the model cannot serve the request
            TransportError: the request could not be sent
            UpstreamError: the API answered with an error status
            ResponseParseError: the success body could not be mapped
        """
        if options is None:
            options = self._options
        wire_name, descriptor = self._resolve_model(model)
        if descriptor is not None:
            try:
                check_capabilities(request, descriptor)
            except UnsupportedFeatureError as e:
                logger.warning(f"Rejected request for model {wire_name}: {e}")
                raise

        url, headers = self._endpoint(wire_name)
        request_json = request.to_json()

        logger.info(f"Sending generateContent request to model: {wire_name}")
        try:
            status_code, body = await self.transport.send(
                url, "POST", headers, request_json
            )
        except Exception as e:
            logger.error(f"Failed to send request to {wire_name}: {e}")
            raise TransportError(
                f"Failed to send request to Gemini: {e}\n{request_json}",
                request_json=request_json,
            ) from e

        return self._map_response(status_code, body, request_json, options)

    def _map_response(
        self,
        status_code: int,
        body: str,
        request_json: str,
        options: ResponseOptions,
    ) -> ModelResponse:
        try:
            decoded = decode_response(status_code, body)
            if isinstance(decoded, GenerateContentResponse):
                return to_model_response(decoded, options)
        except Exception as e:
            logger.error(
                f"Failed to parse response (status {status_code}): {body[:500] if body else 'empty'}"
            )
            raise ResponseParseError(
                f"Failed to parse response from JSON:\n{body}",
                raw_body=body,
                request_json=request_json,
            ) from e

        if decoded is None:
            logger.error(f"API request failed - status: {status_code}, undecodable body")
            raise UpstreamError(
                "Undefined",
                http_status=status_code,
                raw_body=body,
                request_json=request_json,
            )

        error = decoded.error
        logger.error(
            f"API request failed - status: {status_code}, "
            f"error: {error.status} ({error.code}): {error.message}"
        )
        raise UpstreamError(
            f"{error.status} ({error.code}): {error.message}",
            http_status=status_code,
            status=error.status,
            code=error.code,
            raw_body=body,
            request_json=request_json,
        )

    async def is_valid_api_key(self) -> bool:
        """Send a minimal request and report whether the API accepted it."""
        request = (
            RequestBuilder()
            .with_prompt(VALIDATION_PROMPT)
            .disable_all_safety_settings()
            .with_default_generation_config()
            .build()
        )
        try:
            await self.generate_content(request, latest_stable_model_version())
            return True
        except GeminiError as e:
            logger.info(f"API key validation failed: {e}")
            return False


async def is_valid_api_key(api_key: str, transport: Transport | None = None) -> bool:
    """Return True if the API accepts ``api_key``, False on any client error."""
    try:
        generator = Generator(api_key, transport=transport)
    except InvalidCredentialError:
        return False
    return await generator.is_valid_api_key()
