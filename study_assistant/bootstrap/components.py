import os
import sys
from threading import Lock
from typing import Any, TypeVar, cast

from dotenv import load_dotenv
from openinference.instrumentation.google_genai import GoogleGenAIInstrumentor

from study_assistant.components.genai_client import GenAIClientProvider
from study_assistant.components.logger import Logger
from study_assistant.config import Settings, get_settings
from study_assistant.services.CredentialService.credential_service import (
    CredentialService,
)
from study_assistant.services.CredentialService.credential_service_interface import (
    CredentialServiceInterface,
)


load_dotenv()


def _is_test_environment() -> bool:
    """True under pytest or when TESTING is set."""
    if "pytest" in sys.modules:
        return True
    return os.getenv("TESTING", "").lower() in ("true", "1", "yes")


LANGFUSE_ENV_VARS = ("LANGFUSE_PUBLIC_KEY", "LANGFUSE_SECRET_KEY", "LANGFUSE_BASE_URL")
OTLP_ENV_VARS = ("OTEL_EXPORTER_OTLP_ENDPOINT", "OTEL_EXPORTER_OTLP_HEADERS")


def _missing_env_vars(names: tuple[str, ...]) -> list[str]:
    return [name for name in names if not os.getenv(name, "").strip()]


def _validate_tracing_env() -> None:
    """
    Check that SDK traces have an exporter before instrumenting.

    Either the Langfuse keys and base URL, or an OTLP endpoint with headers.

    Raises:
        RuntimeError: Naming the missing OTLP variables.
    """
    if not _missing_env_vars(LANGFUSE_ENV_VARS):
        return

    missing = _missing_env_vars(OTLP_ENV_VARS)
    if missing:
        raise RuntimeError(
            f"Tracing is not configured: missing {', '.join(missing)} "
            f"(or set {', '.join(LANGFUSE_ENV_VARS)})"
        )


_instrumented = False


def _instrument_genai() -> None:
    global _instrumented
    if _instrumented or _is_test_environment():
        return
    _validate_tracing_env()
    GoogleGenAIInstrumentor().instrument()
    _instrumented = True


T = TypeVar("T")


class ComponentsMeta(type):
    _instances: dict[tuple[type, str], "Components"] = {}
    _lock: Lock = Lock()

    def __call__(cls, *args, **kwargs):
        env = args[0] if args else kwargs.get("env")
        if env is None:
            raise ValueError("Environment must be provided")

        key = (cls, str(env))
        with cls._lock:
            if key not in cls._instances:
                cls._instances[key] = super().__call__(*args, **kwargs)
        return cls._instances[key]


class Components(metaclass=ComponentsMeta):
    def __init__(self, env: str, settings: Settings | None = None) -> None:
        self.__env: str = env
        self.__settings: Settings = settings or get_settings()
        self.__components: dict[type[Any], Any] = self.__bootstrap_components()

    def __bootstrap_components(self) -> dict[type[Any], Any]:
        if self.__env in {"development", "staging", "production"}:
            _instrument_genai()
            return self.__get_components()

        raise ValueError(f"Invalid environment: {self.__env}")

    def __get_components(self) -> dict[type[Any], Any]:
        logger = Logger(
            log_format=self.__settings.log_format,
            log_level=self.__settings.log_level,
        )

        credential_service: CredentialServiceInterface = CredentialService(
            logger=logger.get_logger("CredentialService"),
            env_var=self.__settings.credential_env_var,
        )

        client_provider = GenAIClientProvider(
            credential_service=credential_service,
            logger=logger.get_logger("GenAIClientProvider"),
        )

        logger.get_logger("Components").info(
            "Components bootstrapped for environment %s", self.__env
        )

        return {
            Settings: self.__settings,
            Logger: logger,
            CredentialServiceInterface: credential_service,
            GenAIClientProvider: client_provider,
        }

    def get_component(self, component_name: type[T]) -> T:
        if component_name not in self.__components:
            raise ValueError(f"Component {component_name} not found")

        return cast(T, self.__components[component_name])
