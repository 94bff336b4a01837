from study_assistant.bootstrap.components import Components
from study_assistant.components.genai_client import GenAIClientProvider
from study_assistant.components.logger import Logger
from study_assistant.config import Settings
from study_assistant.services.ChatService.chat_conversation import ChatConversation
from study_assistant.services.ModelRouterService.model_router_service import (
    ModelRouterService,
)
from study_assistant.services.ModelRouterService.model_router_service_interface import (
    ModelRouterServiceInterface,
)
from study_assistant.services.SessionService.session_service import SessionService
from study_assistant.services.SessionService.session_service_interface import (
    SessionServiceInterface,
)
from study_assistant.services.StudyService.study_service import StudyService
from study_assistant.services.StudyService.study_service_interface import (
    StudyServiceInterface,
)


def get_model_router_service(components: Components) -> ModelRouterServiceInterface:
    settings = components.get_component(Settings)
    return ModelRouterService(
        chat_search_model=settings.chat_search_model,
        chat_reasoning_model=settings.chat_reasoning_model,
        vision_model=settings.vision_model,
        image_model=settings.image_model,
    )


def get_session_service(components: Components) -> SessionServiceInterface:
    return SessionService(
        client_provider=components.get_component(GenAIClientProvider),
        logger=components.get_component(Logger).get_logger("SessionService"),
    )


def get_study_service(
    components: Components,
    router: ModelRouterServiceInterface | None = None,
) -> StudyServiceInterface:
    settings = components.get_component(Settings)
    return StudyService(
        router=router or get_model_router_service(components),
        client_provider=components.get_component(GenAIClientProvider),
        logger=components.get_component(Logger).get_logger("StudyService"),
        max_upload_bytes=settings.max_upload_bytes,
    )


def get_chat_conversation(components: Components) -> ChatConversation:
    """Each chat screen gets its own conversation and session."""
    router = get_model_router_service(components)
    return ChatConversation(
        router=router,
        session_service=get_session_service(components),
        study_service=get_study_service(components, router=router),
        logger=components.get_component(Logger).get_logger("ChatConversation"),
    )
