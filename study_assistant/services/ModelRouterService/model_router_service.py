"""
Model routing for the four interaction modes.

| mode      | toggle | model                   | tools      |
|-----------|--------|-------------------------|------------|
| chat      | on     | chat_search_model       | web-search |
| chat      | off    | chat_reasoning_model    | -          |
| homework  | -      | vision_model            | -          |
| creative  | -      | image_model (+ aspect)  | -          |
| editor    | -      | image_model             | -          |
"""

from __future__ import annotations

from google.genai import types

from study_assistant.entities.interaction import (
    AspectRatio,
    ImageParameters,
    InteractionMode,
    ModelConfig,
)
from study_assistant.services.ModelRouterService.model_router_service_interface import (
    ModelRouterServiceInterface,
)
from study_assistant.services.ModelRouterService.prompts import (
    HOMEWORK_SYSTEM_INSTRUCTION,
    IMAGE_SYSTEM_INSTRUCTION,
    TUTOR_SYSTEM_INSTRUCTION,
)
from study_assistant.tools import WEB_SEARCH, build_tools


DEFAULT_CHAT_SEARCH_MODEL = "gemini-2.5-flash"
DEFAULT_CHAT_REASONING_MODEL = "gemini-3-pro-preview"
DEFAULT_VISION_MODEL = "gemini-3-pro-preview"
DEFAULT_IMAGE_MODEL = "gemini-2.5-flash-image"


def _coerce_aspect_ratio(aspect_ratio: AspectRatio | str) -> AspectRatio:
    # Unsupported ratios fall back to square
    try:
        return AspectRatio(aspect_ratio)
    except ValueError:
        return AspectRatio.SQUARE


class ModelRouterService(ModelRouterServiceInterface):
    """Pure mapping from (mode, toggle) to an immutable ModelConfig. No I/O."""

    def __init__(
        self,
        chat_search_model: str = DEFAULT_CHAT_SEARCH_MODEL,
        chat_reasoning_model: str = DEFAULT_CHAT_REASONING_MODEL,
        vision_model: str = DEFAULT_VISION_MODEL,
        image_model: str = DEFAULT_IMAGE_MODEL,
    ) -> None:
        self.chat_search_model = chat_search_model
        self.chat_reasoning_model = chat_reasoning_model
        self.vision_model = vision_model
        self.image_model = image_model

    def route(
        self,
        mode: InteractionMode,
        toggle: bool = False,
        aspect_ratio: AspectRatio = AspectRatio.SQUARE,
    ) -> ModelConfig:
        """
        Map an interaction mode to its backend configuration.

        Args:
            mode: The interaction mode
            toggle: Search toggle, only meaningful for chat. Anything other
                than ``True`` selects the search-disabled branch.
            aspect_ratio: Only used for image generation. Unsupported values
                fall back to 1:1.

        Returns:
            A new ModelConfig; equal inputs give equal configs.
        """
        if mode is InteractionMode.CHAT:
            if toggle is True:
                return ModelConfig(
                    model_id=self.chat_search_model,
                    system_instruction=TUTOR_SYSTEM_INSTRUCTION,
                    tools=(WEB_SEARCH,),
                )
            return ModelConfig(
                model_id=self.chat_reasoning_model,
                system_instruction=TUTOR_SYSTEM_INSTRUCTION,
            )

        if mode is InteractionMode.HOMEWORK_ANALYSIS:
            return ModelConfig(
                model_id=self.vision_model,
                system_instruction=HOMEWORK_SYSTEM_INSTRUCTION,
            )

        if mode is InteractionMode.IMAGE_GENERATION:
            return ModelConfig(
                model_id=self.image_model,
                system_instruction=IMAGE_SYSTEM_INSTRUCTION,
                image_parameters=ImageParameters(
                    aspect_ratio=_coerce_aspect_ratio(aspect_ratio)
                ),
            )

        return ModelConfig(
            model_id=self.image_model,
            system_instruction=IMAGE_SYSTEM_INSTRUCTION,
        )


def build_generate_content_config(config: ModelConfig) -> types.GenerateContentConfig:
    """Translate a ModelConfig into the SDK request configuration."""
    kwargs: dict = {}
    if config.system_instruction:
        kwargs["system_instruction"] = config.system_instruction
    if config.tools:
        kwargs["tools"] = build_tools(config.tools)
    if config.image_parameters is not None:
        kwargs["image_config"] = types.ImageConfig(
            aspect_ratio=config.image_parameters.aspect_ratio.value
        )
    return types.GenerateContentConfig(**kwargs)
