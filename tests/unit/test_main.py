import base64
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

import main
from study_assistant.entities.interaction import AspectRatio
from study_assistant.entities.media import MediaPayload
from study_assistant.entities.results import ImageResult, RefusalResult, TextResult
from study_assistant.errors import BackendFailureError, MissingCredentialError
from study_assistant.messages import MISSING_CREDENTIAL_MESSAGE, REFUSAL_PREFIX


@pytest.fixture
def study_service() -> MagicMock:
    service = MagicMock()
    service.analyze_homework = AsyncMock(return_value=TextResult(text="Passo 1"))
    service.generate_image = AsyncMock()
    service.edit_image = AsyncMock()
    return service


@pytest.fixture
def photo(tmp_path: Path) -> Path:
    path = tmp_path / "dever.png"
    path.write_bytes(b"\x89PNG fake")
    return path


@pytest.mark.unit
class TestRunCommand:
    """Test cases for the terminal homework and image commands."""

    @pytest.mark.asyncio
    async def test_homework_sends_file_and_question(
        self, study_service: MagicMock, photo: Path
    ) -> None:
        reply = await main.run_command(study_service, f"/dever {photo} quanto é x?")

        assert reply == "Passo 1"
        image, question = study_service.analyze_homework.await_args.args
        assert image.mime_type == "image/png"
        assert image.to_bytes() == b"\x89PNG fake"
        assert question == "quanto é x?"

    @pytest.mark.asyncio
    async def test_backend_failure_shows_mode_message(
        self, study_service: MagicMock, photo: Path
    ) -> None:
        study_service.analyze_homework.side_effect = BackendFailureError("boom")

        reply = await main.run_command(study_service, f"/dever {photo}")

        assert reply == "Erro ao analisar a imagem. Tente novamente."

    @pytest.mark.asyncio
    async def test_missing_credential_message(self, study_service: MagicMock) -> None:
        study_service.generate_image.side_effect = MissingCredentialError("no key")

        reply = await main.run_command(study_service, "/imagem um gato")

        assert reply == MISSING_CREDENTIAL_MESSAGE

    @pytest.mark.asyncio
    async def test_generate_parses_aspect_ratio(self, study_service: MagicMock) -> None:
        study_service.generate_image.return_value = RefusalResult(text="Não posso.")

        reply = await main.run_command(study_service, "/imagem 16:9 um gato na praia")

        study_service.generate_image.assert_awaited_once_with(
            "um gato na praia", AspectRatio.WIDESCREEN
        )
        assert reply == f"{REFUSAL_PREFIX}Não posso."

    @pytest.mark.asyncio
    async def test_edit_saves_image(
        self,
        study_service: MagicMock,
        photo: Path,
        tmp_path: Path,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.chdir(tmp_path)
        edited = MediaPayload(
            data=base64.b64encode(b"edited").decode("ascii"), mime_type="image/png"
        )
        study_service.edit_image.return_value = ImageResult(media=edited)

        reply = await main.run_command(study_service, f"/editar {photo} deixe azul")

        saved = reply.removeprefix("Imagem salva em ")
        assert (tmp_path / saved).read_bytes() == b"edited"

    @pytest.mark.asyncio
    async def test_missing_file(self, study_service: MagicMock, tmp_path: Path) -> None:
        missing = tmp_path / "nada.png"

        reply = await main.run_command(study_service, f"/dever {missing}")

        assert reply == f"Não foi possível abrir o arquivo {missing}."
        study_service.analyze_homework.assert_not_awaited()

    @pytest.mark.asyncio
    @pytest.mark.parametrize("text", ["/dever", "/editar", "/imagem"])
    async def test_missing_arguments_show_help(
        self, study_service: MagicMock, text: str
    ) -> None:
        study_service.generate_image.side_effect = ValueError("empty")

        assert await main.run_command(study_service, text) == main.HELP
