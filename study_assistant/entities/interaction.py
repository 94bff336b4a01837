from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict


class InteractionMode(StrEnum):
    CHAT = "chat"
    HOMEWORK_ANALYSIS = "homework"
    IMAGE_GENERATION = "creative"
    IMAGE_EDITING = "editor"


class AspectRatio(StrEnum):
    SQUARE = "1:1"
    WIDESCREEN = "16:9"
    STANDARD = "4:3"


class ImageParameters(BaseModel):
    model_config = ConfigDict(frozen=True)

    aspect_ratio: AspectRatio = AspectRatio.SQUARE


class ModelConfig(BaseModel):
    """
    Backend model plus request configuration for one interaction mode.

    Instances are immutable and compared by value; a configuration change
    always produces a new instance.
    """

    model_config = ConfigDict(frozen=True, protected_namespaces=())

    model_id: str
    system_instruction: str
    tools: tuple[str, ...] = ()
    image_parameters: ImageParameters | None = None
