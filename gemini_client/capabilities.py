"""Known model versions and the features each one supports."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ModelVersion(str, Enum):
    """Model identifiers, declared from oldest to newest."""

    GEMINI_15_FLASH = "gemini_15_flash"
    GEMINI_15_PRO = "gemini_15_pro"
    GEMINI_20_FLASH_THINKING = "gemini_20_flash_thinking"
    GEMINI_20_FLASH_LITE = "gemini_20_flash_lite"
    GEMINI_20_FLASH = "gemini_20_flash"


@dataclass(frozen=True)
class ModelDescriptor:
    version: ModelVersion
    wire_name: str
    stability_rank: int
    supports_grounding: bool
    supports_json_output: bool


MODEL_DESCRIPTORS: dict[ModelVersion, ModelDescriptor] = {
    ModelVersion.GEMINI_15_FLASH: ModelDescriptor(
        version=ModelVersion.GEMINI_15_FLASH,
        wire_name="gemini-1.5-flash",
        stability_rank=1,
        supports_grounding=True,
        supports_json_output=True,
    ),
    ModelVersion.GEMINI_15_PRO: ModelDescriptor(
        version=ModelVersion.GEMINI_15_PRO,
        wire_name="gemini-1.5-pro",
        stability_rank=2,
        supports_grounding=True,
        supports_json_output=True,
    ),
    # Experimental: never picked as the default.
    ModelVersion.GEMINI_20_FLASH_THINKING: ModelDescriptor(
        version=ModelVersion.GEMINI_20_FLASH_THINKING,
        wire_name="gemini-2.0-flash-thinking-exp-01-21",
        stability_rank=0,
        supports_grounding=False,
        supports_json_output=False,
    ),
    ModelVersion.GEMINI_20_FLASH_LITE: ModelDescriptor(
        version=ModelVersion.GEMINI_20_FLASH_LITE,
        wire_name="gemini-2.0-flash-lite",
        stability_rank=3,
        supports_grounding=False,
        supports_json_output=True,
    ),
    ModelVersion.GEMINI_20_FLASH: ModelDescriptor(
        version=ModelVersion.GEMINI_20_FLASH,
        wire_name="gemini-2.0-flash",
        stability_rank=4,
        supports_grounding=True,
        supports_json_output=True,
    ),
}


def get_descriptor(version: ModelVersion) -> ModelDescriptor:
    """Return the static descriptor of a model version."""
    return MODEL_DESCRIPTORS[version]


def find_descriptor(name: str) -> ModelDescriptor | None:
    """Look a model up by identifier or wire name, ``None`` if unknown."""
    for descriptor in MODEL_DESCRIPTORS.values():
        if name in (descriptor.version.value, descriptor.wire_name):
            return descriptor
    return None


def latest_stable_model_version() -> ModelVersion:
    """Return the model version with the highest stability rank."""
    best = max(MODEL_DESCRIPTORS.values(), key=lambda d: d.stability_rank)
    return best.version
