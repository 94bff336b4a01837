import asyncio
import mimetypes
import uuid
from pathlib import Path

from study_assistant.bootstrap.bootstrapper import bootstrap_chat, bootstrap_study_service
from study_assistant.config import get_settings
from study_assistant.entities.interaction import AspectRatio, InteractionMode
from study_assistant.entities.media import MediaPayload
from study_assistant.entities.results import ImageResult, NormalizedResult, RefusalResult
from study_assistant.errors import MediaTooLargeError, StudyAssistantError
from study_assistant.messages import error_message, refusal_message
from study_assistant.services.StudyService.study_service_interface import (
    StudyServiceInterface,
)


SEARCH_COMMAND = "/busca"
HOMEWORK_COMMAND = "/dever"
GENERATE_COMMAND = "/imagem"
EDIT_COMMAND = "/editar"
EXIT_COMMANDS = {"/sair", "/exit"}

HELP = (
    f"{SEARCH_COMMAND} on|off  pesquisa na web\n"
    f"{HOMEWORK_COMMAND} <foto> [pergunta]  analisar tarefa\n"
    f"{GENERATE_COMMAND} [1:1|16:9|4:3] <descrição>  gerar imagem\n"
    f"{EDIT_COMMAND} <foto> <instrução>  editar imagem\n"
    "/sair  encerrar"
)


def load_image(path: str) -> MediaPayload:
    mime_type = mimetypes.guess_type(path)[0] or "image/jpeg"
    return MediaPayload.from_bytes(
        Path(path).read_bytes(), mime_type, max_bytes=get_settings().max_upload_bytes
    )


def render(result: NormalizedResult) -> str:
    if isinstance(result, ImageResult):
        output = Path(f"imagem-{uuid.uuid4().hex[:8]}.png")
        output.write_bytes(result.media.to_bytes())
        return f"Imagem salva em {output}"
    if isinstance(result, RefusalResult):
        return refusal_message(result.text)
    return result.text


async def run_command(study_service: StudyServiceInterface, text: str) -> str:
    command, _, rest = text.partition(" ")
    args = rest.split(" ", 1)

    if command == HOMEWORK_COMMAND:
        mode = InteractionMode.HOMEWORK_ANALYSIS
    elif command == GENERATE_COMMAND:
        mode = InteractionMode.IMAGE_GENERATION
    else:
        mode = InteractionMode.IMAGE_EDITING
    if mode is not InteractionMode.IMAGE_GENERATION and not args[0]:
        return HELP

    try:
        if mode is InteractionMode.HOMEWORK_ANALYSIS:
            question = args[1] if len(args) > 1 else ""
            result = await study_service.analyze_homework(load_image(args[0]), question)
        elif mode is InteractionMode.IMAGE_GENERATION:
            if args[0] in {ratio.value for ratio in AspectRatio} and len(args) > 1:
                result = await study_service.generate_image(args[1], AspectRatio(args[0]))
            else:
                result = await study_service.generate_image(rest)
        else:
            if len(args) < 2:
                return HELP
            result = await study_service.edit_image(load_image(args[0]), args[1])
    except (StudyAssistantError, MediaTooLargeError) as e:
        return error_message(e, mode)
    except OSError:
        return f"Não foi possível abrir o arquivo {args[0]}."
    except ValueError:
        return HELP

    return render(result)


async def main():
    conversation = bootstrap_chat()
    study_service = bootstrap_study_service()
    print(conversation.messages[0]["content"])
    print(HELP)

    while True:
        text = (await asyncio.to_thread(input, "> ")).strip()
        if text in EXIT_COMMANDS:
            break
        if text.startswith(SEARCH_COMMAND):
            conversation.set_search_enabled(text.endswith("on"))
            continue
        if text.split(" ", 1)[0] in {HOMEWORK_COMMAND, GENERATE_COMMAND, EDIT_COMMAND}:
            print(await run_command(study_service, text))
            continue

        reply = await conversation.send(text)
        if reply is None:
            continue
        print(reply["content"])
        for index, citation in enumerate(reply["grounding_citations"], start=1):
            print(f"  [{index}] {citation.title or citation.uri} - {citation.uri}")


if __name__ == "__main__":
    asyncio.run(main())
