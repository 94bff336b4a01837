import logging
import os

from study_assistant.errors import MissingCredentialError
from study_assistant.services.CredentialService.credential_service_interface import (
    CredentialServiceInterface,
)


class CredentialService(CredentialServiceInterface):
    """
    Reads the Gemini API key from the process environment.

    The variable is read on every call so a key set after startup is picked up.
    """

    def __init__(self, logger: logging.Logger, env_var: str = "API_KEY") -> None:
        self.logger = logger
        self.env_var = env_var

    def resolve(self) -> str:
        credential = os.getenv(self.env_var, "").strip()
        if not credential:
            self.logger.error(
                "Environment variable %s is not set or is empty", self.env_var
            )
            raise MissingCredentialError(f"{self.env_var} is not configured")
        return credential
