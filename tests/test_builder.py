import json

import pytest
from pydantic import ValidationError

from gemini_client.builder import RequestBuilder
from gemini_client.errors import RequestBuildError
from gemini_client.models.enums import HarmBlockThreshold, HarmCategory
from gemini_client.models.request import Content, GenerationConfig, Part


def test_build_without_prompt_or_history_fails():
    with pytest.raises(RequestBuildError):
        RequestBuilder().with_default_generation_config().build()


def test_blank_prompt_counts_as_missing():
    with pytest.raises(RequestBuildError):
        RequestBuilder().with_prompt("   ").build()


def test_build_with_prompt_only():
    request = RequestBuilder().with_prompt("Hi").build()

    assert len(request.contents) == 1
    assert request.contents[0].role == "user"
    assert request.contents[0].parts[0].text == "Hi"


def test_build_with_history_only_keeps_order():
    history = [
        Content(role="user", parts=(Part(text="one"),)),
        Content(role="model", parts=(Part(text="two"),)),
    ]

    request = RequestBuilder().with_chat_history(history).build()

    assert [c.role for c in request.contents] == ["user", "model"]
    assert [c.parts[0].text for c in request.contents] == ["one", "two"]


def test_prompt_follows_history():
    history = [Content(role="model", parts=(Part(text="earlier"),))]

    request = RequestBuilder().with_chat_history(history).with_prompt("now").build()

    assert [c.parts[0].text for c in request.contents] == ["earlier", "now"]


def test_with_prompt_overwrites():
    request = RequestBuilder().with_prompt("first").with_prompt("second").build()

    assert request.contents[-1].parts[0].text == "second"


def test_images_are_attached_to_current_turn():
    request = (
        RequestBuilder()
        .with_prompt("Describe")
        .with_base64_images(["data:image/png;base64,AAAA", "BBBB"])
        .with_base64_images(["data:image/webp;base64,CCCC"])
        .build()
    )

    parts = request.contents[-1].parts
    assert parts[0].text == "Describe"
    assert [(p.inlineData.mimeType, p.inlineData.data) for p in parts[1:]] == [
        ("image/png", "AAAA"),
        ("image/jpeg", "BBBB"),
        ("image/webp", "CCCC"),
    ]


def test_default_generation_config_has_no_schema():
    request = RequestBuilder().with_prompt("Hi").with_default_generation_config().build()

    config = request.generationConfig
    assert config.responseMimeType == "text/plain"
    assert config.responseSchema is None
    assert not config.requests_json_output


def test_response_schema_is_accepted_at_build_time():
    config = GenerationConfig(
        responseMimeType="text/plain",
        responseSchema={"type": "OBJECT"},
    )

    request = RequestBuilder().with_prompt("Hi").with_generation_config(config).build()

    assert request.generationConfig.responseMimeType == "application/json"
    assert request.generationConfig.requests_json_output


def test_schema_added_by_copy_forces_json():
    config = GenerationConfig(responseMimeType="text/plain").model_copy(
        update={"responseSchema": {"type": "OBJECT"}}
    )

    assert isinstance(config, GenerationConfig)
    assert config.responseMimeType == "application/json"
    assert config.responseSchema == {"type": "OBJECT"}


def test_copy_without_schema_keeps_mime_type():
    config = GenerationConfig(responseMimeType="text/plain").model_copy(
        update={"temperature": 0.2}
    )

    assert config.responseMimeType == "text/plain"
    assert config.temperature == 0.2


def test_disable_all_safety_settings_turns_every_category_off():
    request = RequestBuilder().with_prompt("Hi").disable_all_safety_settings().build()

    assert {s.category for s in request.safetySettings} == set(HarmCategory)
    assert {s.threshold for s in request.safetySettings} == {HarmBlockThreshold.OFF}


def test_with_safety_settings():
    request = (
        RequestBuilder()
        .with_prompt("Hi")
        .with_safety_settings({HarmCategory.HARASSMENT: HarmBlockThreshold.BLOCK_ONLY_HIGH})
        .build()
    )

    assert len(request.safetySettings) == 1
    assert request.safetySettings[0].threshold == HarmBlockThreshold.BLOCK_ONLY_HIGH


def test_enable_grounding_adds_search_tool():
    request = RequestBuilder().with_prompt("Hi").enable_grounding().build()

    assert request.uses_tools
    assert json.loads(request.to_json())["tools"] == [{"googleSearch": {}}]


def test_wire_json_shape():
    request = (
        RequestBuilder()
        .with_prompt("Hi")
        .with_system_instruction("Be brief")
        .with_default_generation_config()
        .disable_all_safety_settings()
        .build()
    )

    payload = json.loads(request.to_json())
    assert payload["contents"] == [{"role": "user", "parts": [{"text": "Hi"}]}]
    assert payload["systemInstruction"]["parts"] == [{"text": "Be brief"}]
    assert payload["generationConfig"]["maxOutputTokens"] == 8192
    assert payload["safetySettings"][0] == {
        "category": "HARM_CATEGORY_HARASSMENT",
        "threshold": "OFF",
    }
    assert "tools" not in payload


def test_built_request_is_immutable():
    request = RequestBuilder().with_prompt("Hi").build()

    with pytest.raises(ValidationError):
        request.systemInstruction = None


def test_builder_changes_after_build_do_not_leak():
    builder = RequestBuilder().with_prompt("Hi")
    first = builder.build()

    builder.with_prompt("Other").enable_grounding()

    assert first.contents[-1].parts[0].text == "Hi"
    assert first.tools is None
