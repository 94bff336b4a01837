"""
Chat session lifecycle.

Holds at most one live chat session, bound to the ModelConfig it was created
with. A different config replaces the session; the previous conversation
history stays with the discarded session and is not carried over.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from study_assistant.components.genai_client import GenAIClientProvider
from study_assistant.entities.interaction import ModelConfig
from study_assistant.errors import BackendFailureError, StudyAssistantError
from study_assistant.services.ModelRouterService.model_router_service import (
    build_generate_content_config,
)
from study_assistant.services.SessionService.session_service_interface import (
    SessionServiceInterface,
)

if TYPE_CHECKING:
    from google.genai.chats import AsyncChat


class SessionService(SessionServiceInterface):
    def __init__(
        self,
        client_provider: GenAIClientProvider,
        logger: logging.Logger,
    ) -> None:
        self.client_provider = client_provider
        self.logger = logger
        self._session: AsyncChat | None = None
        self._config: ModelConfig | None = None

    @property
    def session_config(self) -> ModelConfig | None:
        return self._config

    def ensure_session(self, config: ModelConfig) -> AsyncChat:
        """
        Return the session bound to ``config``, creating it if needed.

        Idempotent while the config is unchanged. Calls already awaiting a
        reply on a replaced session keep their own reference and finish there.

        Raises:
            MissingCredentialError: If no credential is configured.
            BackendFailureError: If the SDK fails to create the session.
        """
        if self._session is not None and self._config == config:
            return self._session

        if self._session is not None:
            self.logger.info(
                "Replacing chat session (model %s -> %s)",
                self._config.model_id if self._config else None,
                config.model_id,
            )
            self.invalidate()

        try:
            client = self.client_provider.get_client()
            session = client.aio.chats.create(
                model=config.model_id,
                config=build_generate_content_config(config),
            )
        except StudyAssistantError:
            raise
        except Exception as e:
            self.logger.error("Failed to create chat session: %s", e, exc_info=True)
            raise BackendFailureError("Chat session could not be created") from e

        self._session = session
        self._config = config
        self.logger.info(
            "Chat session created. Model: %s, Tools: %s",
            config.model_id,
            list(config.tools),
        )
        return session

    def current_session(self) -> AsyncChat | None:
        return self._session

    def invalidate(self) -> None:
        self._session = None
        self._config = None
