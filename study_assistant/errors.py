"""
Failure taxonomy surfaced by the interaction layer.

Every exception that crosses the StudyService boundary is one of the
StudyAssistantError subclasses below. None of them carry backend text.
"""

from enum import StrEnum


class OperationErrorKind(StrEnum):
    MISSING_CREDENTIAL = "missing_credential"
    NETWORK_OR_BACKEND_FAILURE = "network_or_backend_failure"
    NO_USABLE_PAYLOAD = "no_usable_payload"


class StudyAssistantError(Exception):
    """Base class for failures the UI layer is expected to render."""

    kind: OperationErrorKind


class MissingCredentialError(StudyAssistantError):
    """No API key is configured. Not recoverable without reconfiguration."""

    kind = OperationErrorKind.MISSING_CREDENTIAL


class BackendFailureError(StudyAssistantError):
    """Transport or backend fault. The user may retry."""

    kind = OperationErrorKind.NETWORK_OR_BACKEND_FAILURE


class NoUsablePayloadError(StudyAssistantError):
    """The response held nothing usable for the requested mode."""

    kind = OperationErrorKind.NO_USABLE_PAYLOAD


class MediaTooLargeError(ValueError):
    """Uploaded media exceeds the upload limit; raised before any request."""

    def __init__(self, size_bytes: int, max_bytes: int) -> None:
        super().__init__(
            f"Media of {size_bytes} bytes exceeds the {max_bytes} byte limit"
        )
        self.size_bytes = size_bytes
        self.max_bytes = max_bytes
