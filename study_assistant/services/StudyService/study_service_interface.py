from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from study_assistant.entities.interaction import AspectRatio
from study_assistant.entities.media import MediaPayload
from study_assistant.entities.results import NormalizedResult

if TYPE_CHECKING:
    from google.genai.chats import AsyncChat


class StudyServiceInterface(ABC):
    @abstractmethod
    async def chat_turn(self, session: AsyncChat, text: str) -> NormalizedResult:
        """Send one user turn on a live chat session."""

    @abstractmethod
    async def analyze_homework(
        self, image: MediaPayload, instruction: str = ""
    ) -> NormalizedResult:
        """Explain the exercise in a homework photo."""

    @abstractmethod
    async def generate_image(
        self, prompt: str, aspect_ratio: AspectRatio = AspectRatio.SQUARE
    ) -> NormalizedResult:
        """Generate an illustration from a text prompt."""

    @abstractmethod
    async def edit_image(self, image: MediaPayload, instruction: str) -> NormalizedResult:
        """Edit an uploaded image following a free-text instruction."""
