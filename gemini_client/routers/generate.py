"""Demo endpoints that forward to the generator."""

from fastapi import APIRouter, Body, Depends, HTTPException, Query
from loguru import logger

from gemini_client.builder import RequestBuilder
from gemini_client.capabilities import ModelVersion, latest_stable_model_version
from gemini_client.errors import GeminiError
from gemini_client.models.result import ModelResponse
from gemini_client.services.generator import Generator, is_valid_api_key
from gemini_client.services.transport import CurlTransport, Transport


router = APIRouter(prefix="/api")


def get_transport() -> Transport:
    """Transport used by the demo endpoints."""
    return CurlTransport()


def bad_request(error: GeminiError) -> HTTPException:
    logger.warning(f"Request failed: {error}")
    return HTTPException(status_code=400, detail=str(error))


@router.post(
    "/text-generation/images",
    response_model=str,
    summary="Generate text from a prompt and images",
)
async def generate_with_images(
    base64_images: list[str] = Body(..., description="Bare base64 strings or data URIs"),
    api_key: str = Query(..., description="Gemini API key"),
    prompt: str = Query(..., description="Prompt"),
    transport: Transport = Depends(get_transport),
) -> str:
    try:
        generator = Generator(api_key, transport=transport)
        request = (
            RequestBuilder()
            .with_prompt(prompt)
            .with_base64_images(base64_images)
            .with_default_generation_config()
            .disable_all_safety_settings()
            .build()
        )
        response = await generator.generate_content(
            request, ModelVersion.GEMINI_20_FLASH_LITE
        )
    except GeminiError as e:
        raise bad_request(e)
    return response.content


@router.post(
    "/text-generation/system-instruction",
    response_model=str,
    summary="Generate text under a system instruction",
)
async def generate_with_system_instruction(
    instruction: str = Body(..., description="System instruction"),
    api_key: str = Query(..., description="Gemini API key"),
    prompt: str = Query(..., description="Prompt"),
    transport: Transport = Depends(get_transport),
) -> str:
    try:
        generator = Generator(api_key, transport=transport)
        request = (
            RequestBuilder()
            .with_prompt(prompt)
            .with_system_instruction(instruction)
            .with_default_generation_config()
            .disable_all_safety_settings()
            .build()
        )
        response = await generator.generate_content(
            request, ModelVersion.GEMINI_20_FLASH_LITE
        )
    except GeminiError as e:
        raise bad_request(e)
    return response.content


@router.post(
    "/text-generation/validate-api-key",
    response_model=bool,
    summary="Check an API key against the API",
)
async def validate_api_key(
    api_key: str = Query(..., description="Gemini API key"),
    transport: Transport = Depends(get_transport),
) -> bool:
    return await is_valid_api_key(api_key, transport=transport)


@router.post(
    "/grounding",
    response_model=ModelResponse,
    summary="Generate text grounded on Google Search",
)
async def generate_with_grounding(
    api_key: str = Query(..., description="Gemini API key"),
    prompt: str = Query(..., description="Prompt"),
    transport: Transport = Depends(get_transport),
) -> ModelResponse:
    try:
        generator = (
            Generator(api_key, transport=transport)
            .includes_grounding_detail_in_response()
            .includes_search_entry_point_in_response()
        )
        request = (
            RequestBuilder()
            .with_prompt(prompt)
            .enable_grounding()
            .with_chat_history([])
            .with_default_generation_config()
            .disable_all_safety_settings()
            .build()
        )
        return await generator.generate_content(request, latest_stable_model_version())
    except GeminiError as e:
        raise bad_request(e)
