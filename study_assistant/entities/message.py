from datetime import datetime
from typing import Literal, TypedDict

from study_assistant.entities.results import GroundingCitation


class Message(TypedDict):
    """Entry of the append-only conversation log shown by the chat screen."""

    id: str
    role: Literal["user", "assistant"]
    content: str
    timestamp: datetime
    is_error: bool
    grounding_citations: list[GroundingCitation]
