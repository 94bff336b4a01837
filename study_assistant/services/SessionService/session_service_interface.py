from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from study_assistant.entities.interaction import ModelConfig

if TYPE_CHECKING:
    from google.genai.chats import AsyncChat


class SessionServiceInterface(ABC):
    @abstractmethod
    def ensure_session(self, config: ModelConfig) -> AsyncChat:
        """Return the live session for ``config``, replacing any other one."""

    @abstractmethod
    def current_session(self) -> AsyncChat | None:
        """Return the live session, if any."""

    @abstractmethod
    def invalidate(self) -> None:
        """Drop the live session without any network call."""
