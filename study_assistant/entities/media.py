from __future__ import annotations

import base64

from pydantic import BaseModel, ConfigDict

from study_assistant.config import MAX_UPLOAD_BYTES
from study_assistant.errors import MediaTooLargeError


PNG_MIME_TYPE = "image/png"


def ensure_within_upload_limit(size_bytes: int, max_bytes: int = MAX_UPLOAD_BYTES) -> None:
    """Reject media larger than ``max_bytes`` before any request is built."""
    if size_bytes > max_bytes:
        raise MediaTooLargeError(size_bytes, max_bytes)


class MediaPayload(BaseModel):
    """Image bytes carried as a base64 string, for uploads and generated output."""

    model_config = ConfigDict(frozen=True)

    data: str
    mime_type: str

    @classmethod
    def from_bytes(
        cls, raw: bytes, mime_type: str, max_bytes: int = MAX_UPLOAD_BYTES
    ) -> MediaPayload:
        ensure_within_upload_limit(len(raw), max_bytes)
        return cls(data=base64.b64encode(raw).decode("ascii"), mime_type=mime_type)

    @classmethod
    def from_data_url(cls, data_url: str) -> MediaPayload:
        """
        Build a payload from a ``data:<mime>;base64,<data>`` URL.

        Used at the UI boundary, where browser uploads arrive as data URLs;
        the terminal client reads files through ``from_bytes`` instead.
        """
        header, _, data = data_url.partition(",")
        if not header.startswith("data:") or not header.endswith(";base64") or not data:
            raise ValueError("Expected a base64 data URL")
        mime_type = header[len("data:") : -len(";base64")]
        return cls(data=data, mime_type=mime_type)

    @property
    def size_bytes(self) -> int:
        return len(self.to_bytes())

    def to_bytes(self) -> bytes:
        return base64.b64decode(self.data, validate=True)

    def to_data_url(self) -> str:
        return f"data:{self.mime_type};base64,{self.data}"
