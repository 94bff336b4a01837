import base64

import pytest

from study_assistant.config import MAX_UPLOAD_BYTES
from study_assistant.entities.media import MediaPayload, ensure_within_upload_limit
from study_assistant.errors import MediaTooLargeError


@pytest.mark.unit
class TestUploadLimit:
    """Test cases for the upload size threshold."""

    def test_limit_is_five_mebibytes(self) -> None:
        assert MAX_UPLOAD_BYTES == 5 * 1024 * 1024

    def test_exact_limit_is_accepted(self) -> None:
        ensure_within_upload_limit(MAX_UPLOAD_BYTES)

    def test_over_limit_is_rejected(self) -> None:
        with pytest.raises(MediaTooLargeError) as exc_info:
            ensure_within_upload_limit(6 * 1024 * 1024)

        assert exc_info.value.size_bytes == 6 * 1024 * 1024
        assert exc_info.value.max_bytes == MAX_UPLOAD_BYTES

    def test_from_bytes_rejects_oversized_upload(self) -> None:
        with pytest.raises(MediaTooLargeError):
            MediaPayload.from_bytes(b"\x00" * (MAX_UPLOAD_BYTES + 1), "image/png")

    def test_custom_limit(self) -> None:
        with pytest.raises(MediaTooLargeError):
            MediaPayload.from_bytes(b"12345", "image/png", max_bytes=4)


@pytest.mark.unit
class TestMediaPayload:
    """Test cases for base64 media handling."""

    def test_from_bytes_encodes_base64(self) -> None:
        payload = MediaPayload.from_bytes(b"\x89PNG\r\n", "image/png")

        assert payload.data == base64.b64encode(b"\x89PNG\r\n").decode("ascii")
        assert payload.to_bytes() == b"\x89PNG\r\n"
        assert payload.size_bytes == 6

    def test_data_url(self) -> None:
        payload = MediaPayload.from_bytes(b"abc", "image/jpeg")

        assert payload.to_data_url() == "data:image/jpeg;base64,YWJj"
        assert MediaPayload.from_data_url(payload.to_data_url()) == payload

    @pytest.mark.parametrize(
        "url", ["YWJj", "data:image/png,YWJj", "data:image/png;base64,", "http://x/y.png"]
    )
    def test_from_data_url_rejects_other_formats(self, url: str) -> None:
        with pytest.raises(ValueError):
            MediaPayload.from_data_url(url)

    def test_payload_is_immutable(self) -> None:
        payload = MediaPayload.from_bytes(b"abc", "image/png")

        with pytest.raises(Exception):
            payload.mime_type = "image/jpeg"  # type: ignore[misc]
