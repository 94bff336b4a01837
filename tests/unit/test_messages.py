import pytest

from study_assistant.entities.interaction import InteractionMode
from study_assistant.errors import (
    BackendFailureError,
    MediaTooLargeError,
    MissingCredentialError,
    NoUsablePayloadError,
)
from study_assistant.messages import (
    MEDIA_TOO_LARGE_MESSAGE,
    MISSING_CREDENTIAL_MESSAGE,
    error_message,
    refusal_message,
)


@pytest.mark.unit
class TestErrorMessage:
    """Test cases for user-facing error text."""

    @pytest.mark.parametrize("mode", list(InteractionMode))
    def test_missing_credential_is_mode_independent(self, mode: InteractionMode) -> None:
        assert error_message(MissingCredentialError("x"), mode) == MISSING_CREDENTIAL_MESSAGE

    def test_backend_failure_per_mode(self) -> None:
        error = BackendFailureError("x")

        assert error_message(error, InteractionMode.CHAT) == (
            "Ocorreu um erro ao processar sua mensagem. Tente novamente."
        )
        assert error_message(error, InteractionMode.IMAGE_EDITING) == (
            "Erro ao editar imagem. Verifique sua conexão ou tente outra imagem."
        )

    def test_no_usable_payload_for_editing(self) -> None:
        assert error_message(NoUsablePayloadError("x"), InteractionMode.IMAGE_EDITING) == (
            "Nenhuma imagem gerada. Tente uma instrução diferente."
        )

    def test_media_too_large(self) -> None:
        error = MediaTooLargeError(6, 5)

        assert error_message(error, InteractionMode.HOMEWORK_ANALYSIS) == MEDIA_TOO_LARGE_MESSAGE

    def test_backend_detail_never_leaks(self) -> None:
        error = BackendFailureError("503 backend exploded")

        for mode in InteractionMode:
            assert "exploded" not in error_message(error, mode)


@pytest.mark.unit
def test_refusal_message() -> None:
    assert refusal_message("Não posso.") == "A IA respondeu com texto: Não posso."
