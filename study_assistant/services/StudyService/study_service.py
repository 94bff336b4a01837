"""
StudyService: the four interaction entry points.

Each entry point routes the request, performs one backend call and runs the
response through the normalizer. SDK faults are logged here and re-raised as
BackendFailureError so no backend detail reaches the UI layer.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from google.genai import types
from langfuse import get_client, observe

from study_assistant.components.genai_client import GenAIClientProvider
from study_assistant.config import MAX_UPLOAD_BYTES
from study_assistant.entities.interaction import AspectRatio, InteractionMode, ModelConfig
from study_assistant.entities.media import MediaPayload, ensure_within_upload_limit
from study_assistant.entities.results import NormalizedResult
from study_assistant.errors import BackendFailureError, NoUsablePayloadError
from study_assistant.services.ModelRouterService.model_router_service import (
    build_generate_content_config,
)
from study_assistant.services.ModelRouterService.model_router_service_interface import (
    ModelRouterServiceInterface,
)
from study_assistant.services.ModelRouterService.prompts import (
    DEFAULT_HOMEWORK_INSTRUCTION,
    HOMEWORK_PROMPT_PREFIX,
)
from study_assistant.services.ResponseNormalizer.response_normalizer import normalize
from study_assistant.services.StudyService.study_service_interface import (
    StudyServiceInterface,
)

if TYPE_CHECKING:
    from google.genai.chats import AsyncChat


class StudyService(StudyServiceInterface):
    def __init__(
        self,
        router: ModelRouterServiceInterface,
        client_provider: GenAIClientProvider,
        logger: logging.Logger,
        max_upload_bytes: int = MAX_UPLOAD_BYTES,
    ) -> None:
        self.router = router
        self.client_provider = client_provider
        self.logger = logger
        self.max_upload_bytes = max_upload_bytes

    # The session holds the SDK client and its API key; only the text is traced
    @observe(capture_input=False)
    async def chat_turn(self, session: AsyncChat, text: str) -> NormalizedResult:
        """
        Send ``text`` on ``session`` and normalize the reply.

        The turn runs against the session passed in, even if the session
        manager has replaced it in the meantime.

        Raises:
            ValueError: If ``text`` is blank.
            BackendFailureError: On any transport or backend fault.
            NoUsablePayloadError: If the reply carries no text.
        """
        if not text or not text.strip():
            raise ValueError("Chat message must not be empty")

        get_client().update_current_span(input={"text": text})

        try:
            response = await session.send_message(text)
        except Exception as e:
            self.logger.error("Chat turn failed: %s", e, exc_info=True)
            raise BackendFailureError("Chat turn failed") from e

        return self._normalize(InteractionMode.CHAT, response)

    @observe(capture_input=False)
    async def analyze_homework(
        self, image: MediaPayload, instruction: str = ""
    ) -> NormalizedResult:
        """
        Analyze a homework photo, explaining the solution step by step.

        Args:
            image: The uploaded photo
            instruction: Optional question about the exercise. When empty the
                default step-by-step instruction is used.
        """
        if image is None:
            raise ValueError("An image is required for homework analysis")
        ensure_within_upload_limit(image.size_bytes, self.max_upload_bytes)

        config = self.router.route(InteractionMode.HOMEWORK_ANALYSIS)
        instruction = (instruction or "").strip() or DEFAULT_HOMEWORK_INSTRUCTION
        parts = [
            types.Part.from_bytes(data=image.to_bytes(), mime_type=image.mime_type),
            types.Part.from_text(text=f"{HOMEWORK_PROMPT_PREFIX} {instruction}"),
        ]

        response = await self._generate(InteractionMode.HOMEWORK_ANALYSIS, config, parts)
        return self._normalize(InteractionMode.HOMEWORK_ANALYSIS, response)

    @observe(capture_output=False)
    async def generate_image(
        self, prompt: str, aspect_ratio: AspectRatio = AspectRatio.SQUARE
    ) -> NormalizedResult:
        if not prompt or not prompt.strip():
            raise ValueError("Image prompt must not be empty")

        config = self.router.route(
            InteractionMode.IMAGE_GENERATION, aspect_ratio=aspect_ratio
        )
        parts = [types.Part.from_text(text=prompt)]

        response = await self._generate(InteractionMode.IMAGE_GENERATION, config, parts)
        return self._normalize(InteractionMode.IMAGE_GENERATION, response)

    @observe(capture_input=False, capture_output=False)
    async def edit_image(self, image: MediaPayload, instruction: str) -> NormalizedResult:
        if image is None:
            raise ValueError("An image is required for editing")
        if not instruction or not instruction.strip():
            raise ValueError("Edit instruction must not be empty")
        ensure_within_upload_limit(image.size_bytes, self.max_upload_bytes)

        config = self.router.route(InteractionMode.IMAGE_EDITING)
        parts = [
            types.Part.from_bytes(data=image.to_bytes(), mime_type=image.mime_type),
            types.Part.from_text(text=instruction),
        ]

        response = await self._generate(InteractionMode.IMAGE_EDITING, config, parts)
        return self._normalize(InteractionMode.IMAGE_EDITING, response)

    async def _generate(
        self,
        mode: InteractionMode,
        config: ModelConfig,
        parts: list[types.Part],
    ) -> types.GenerateContentResponse:
        """
        Run a single stateless generate-content call.

        Raises:
            MissingCredentialError: Before any request when no key is configured.
            BackendFailureError: On any transport or backend fault.
        """
        client = self.client_provider.get_client()

        self.logger.info("Sending %s request to model %s", mode, config.model_id)
        try:
            return await client.aio.models.generate_content(
                model=config.model_id,
                contents=[types.Content(role="user", parts=parts)],
                config=build_generate_content_config(config),
            )
        except Exception as e:
            self.logger.error("%s request failed: %s", mode, e, exc_info=True)
            raise BackendFailureError(f"{mode} request failed") from e

    def _normalize(
        self, mode: InteractionMode, response: types.GenerateContentResponse
    ) -> NormalizedResult:
        try:
            return normalize(mode, response)
        except NoUsablePayloadError:
            self.logger.warning("No usable payload in %s response", mode)
            raise
