from study_assistant.config import get_settings
from study_assistant.dependencies.components import get_components
from study_assistant.dependencies.services import (
    get_chat_conversation,
    get_study_service,
)
from study_assistant.services.ChatService.chat_conversation import ChatConversation
from study_assistant.services.StudyService.study_service_interface import (
    StudyServiceInterface,
)


def bootstrap_chat(env: str | None = None) -> ChatConversation:
    components = get_components(env=env or get_settings().environment)
    return get_chat_conversation(components)


def bootstrap_study_service(env: str | None = None) -> StudyServiceInterface:
    components = get_components(env=env or get_settings().environment)
    return get_study_service(components)
