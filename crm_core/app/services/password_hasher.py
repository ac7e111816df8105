from abc import ABC, abstractmethod


class PasswordHasher(ABC):
    """Credential store hashing contract"""

    @abstractmethod
    def hash(self, password: str) -> str:
        """Hash a plain password for storage"""
        pass

    @abstractmethod
    def verify(self, password: str, password_hash: str) -> bool:
        """Compare a plain password against a stored hash"""
        pass
