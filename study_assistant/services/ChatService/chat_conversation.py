"""
Chat conversation state for the tutoring screen.

Owns the append-only message log, the search toggle and the in-flight guard.
Toggling search drops the live session; the next turn opens a new one and
the backend no longer sees the earlier turns. The log itself is kept.
"""

from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone

from study_assistant.entities.interaction import InteractionMode
from study_assistant.entities.message import Message
from study_assistant.entities.results import GroundingCitation, TextResult
from study_assistant.errors import StudyAssistantError
from study_assistant.messages import WELCOME_MESSAGE, error_message
from study_assistant.services.ModelRouterService.model_router_service_interface import (
    ModelRouterServiceInterface,
)
from study_assistant.services.SessionService.session_service_interface import (
    SessionServiceInterface,
)
from study_assistant.services.StudyService.study_service_interface import (
    StudyServiceInterface,
)


def _new_message(
    role: str,
    content: str,
    is_error: bool = False,
    grounding_citations: list[GroundingCitation] | None = None,
) -> Message:
    return Message(
        id=uuid.uuid4().hex,
        role=role,  # type: ignore[typeddict-item]
        content=content,
        timestamp=datetime.now(timezone.utc),
        is_error=is_error,
        grounding_citations=grounding_citations or [],
    )


class ChatConversation:
    def __init__(
        self,
        router: ModelRouterServiceInterface,
        session_service: SessionServiceInterface,
        study_service: StudyServiceInterface,
        logger: logging.Logger,
    ) -> None:
        self.router = router
        self.session_service = session_service
        self.study_service = study_service
        self.logger = logger
        self.search_enabled = False
        self.is_busy = False
        self._messages: list[Message] = [_new_message("assistant", WELCOME_MESSAGE)]

    @property
    def messages(self) -> tuple[Message, ...]:
        return tuple(self._messages)

    def set_search_enabled(self, enabled: bool) -> None:
        enabled = enabled is True
        if enabled == self.search_enabled:
            return
        self.search_enabled = enabled
        self.session_service.invalidate()
        self.logger.info("Web search %s; chat session reset", "on" if enabled else "off")

    async def send(self, text: str) -> Message | None:
        """
        Send one user turn and append the reply to the log.

        Returns:
            The appended assistant message, or None when the input was blank
            or another turn is still in flight.
        """
        if not text or not text.strip() or self.is_busy:
            return None

        self._messages.append(_new_message("user", text))
        self.is_busy = True
        try:
            config = self.router.route(InteractionMode.CHAT, self.search_enabled)
            session = self.session_service.ensure_session(config)
            result = await self.study_service.chat_turn(session, text)
        except StudyAssistantError as e:
            self.logger.warning("Chat turn ended with %s", e.kind)
            reply = _new_message(
                "assistant", error_message(e, InteractionMode.CHAT), is_error=True
            )
        else:
            citations = list(result.citations) if isinstance(result, TextResult) else []
            reply = _new_message(
                "assistant",
                getattr(result, "text", ""),
                grounding_citations=citations,
            )
        finally:
            self.is_busy = False

        self._messages.append(reply)
        return reply
