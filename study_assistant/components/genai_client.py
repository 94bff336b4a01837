"""
Google GenAI client provider.

Resolves the credential before handing out a client, so a missing key fails
before any network attempt. Only the client for the current credential is
kept; a new key replaces it.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from google import genai

from study_assistant.services.CredentialService.credential_service_interface import (
    CredentialServiceInterface,
)

if TYPE_CHECKING:
    from google.genai import Client


class GenAIClientProvider:
    def __init__(
        self,
        credential_service: CredentialServiceInterface,
        logger: logging.Logger,
    ) -> None:
        self.credential_service = credential_service
        self.logger = logger
        self._client: Client | None = None
        self._credential: str | None = None

    def get_client(self) -> Client:
        """
        Get or create the client bound to the current credential.

        Sessions created from a replaced client keep working until they are
        dropped, so the old client is released rather than closed.

        Raises:
            MissingCredentialError: If no credential is configured.
        """
        credential = self.credential_service.resolve()
        if self._client is None or credential != self._credential:
            if self._client is not None:
                self.logger.info("API key changed; replacing GenAI client")
            self._client = genai.Client(api_key=credential)
            self._credential = credential
            self.logger.info("Initialized GenAI client")
        return self._client
