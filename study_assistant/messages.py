"""
User-facing (pt-BR) text for failures and refusals.

The UI renders these instead of any backend error detail.
"""

from study_assistant.entities.interaction import InteractionMode
from study_assistant.errors import (
    MediaTooLargeError,
    OperationErrorKind,
    StudyAssistantError,
)


WELCOME_MESSAGE = (
    "Olá! Eu sou seu assistente de estudos do SAES! Como posso te ajudar hoje? "
    "Posso responder perguntas complexas ou buscar informações atualizadas na web."
)

MISSING_CREDENTIAL_MESSAGE = (
    "Chave de API não encontrada. Configure uma chave para continuar."
)

MEDIA_TOO_LARGE_MESSAGE = "A imagem deve ter no máximo 5MB."

REFUSAL_PREFIX = "A IA respondeu com texto: "

_BACKEND_FAILURE_MESSAGES: dict[InteractionMode, str] = {
    InteractionMode.CHAT: "Ocorreu um erro ao processar sua mensagem. Tente novamente.",
    InteractionMode.HOMEWORK_ANALYSIS: "Erro ao analisar a imagem. Tente novamente.",
    InteractionMode.IMAGE_GENERATION: (
        "Erro ao gerar imagem. Tente descrever de outra forma ou verifique sua conexão."
    ),
    InteractionMode.IMAGE_EDITING: (
        "Erro ao editar imagem. Verifique sua conexão ou tente outra imagem."
    ),
}

_NO_USABLE_PAYLOAD_MESSAGES: dict[InteractionMode, str] = {
    InteractionMode.CHAT: "Desculpe, não consegui gerar uma resposta.",
    InteractionMode.HOMEWORK_ANALYSIS: "Não foi possível analisar a imagem.",
    InteractionMode.IMAGE_GENERATION: (
        "Nenhuma imagem gerada. Tente descrever de outra forma."
    ),
    InteractionMode.IMAGE_EDITING: (
        "Nenhuma imagem gerada. Tente uma instrução diferente."
    ),
}


def error_message(error: StudyAssistantError | MediaTooLargeError, mode: InteractionMode) -> str:
    if isinstance(error, MediaTooLargeError):
        return MEDIA_TOO_LARGE_MESSAGE
    if error.kind is OperationErrorKind.MISSING_CREDENTIAL:
        return MISSING_CREDENTIAL_MESSAGE
    if error.kind is OperationErrorKind.NO_USABLE_PAYLOAD:
        return _NO_USABLE_PAYLOAD_MESSAGES[mode]
    return _BACKEND_FAILURE_MESSAGES[mode]


def refusal_message(text: str) -> str:
    return f"{REFUSAL_PREFIX}{text}"
