from abc import ABC, abstractmethod


class CredentialServiceInterface(ABC):
    @abstractmethod
    def resolve(self) -> str:
        """Return the API credential or raise MissingCredentialError."""
