from abc import ABC, abstractmethod

from study_assistant.entities.interaction import AspectRatio, InteractionMode, ModelConfig


class ModelRouterServiceInterface(ABC):
    @abstractmethod
    def route(
        self,
        mode: InteractionMode,
        toggle: bool = False,
        aspect_ratio: AspectRatio = AspectRatio.SQUARE,
    ) -> ModelConfig:
        """Return the model and request configuration for an interaction mode."""
