from abc import ABC, abstractmethod


class RateLimiter(ABC):
    """
    Admission counter keyed by normalized email or user id.

    Checks are synchronous and never suspend. Implementations backed by a
    shared store (atomic increment + TTL) can replace the in-memory one
    when running several server instances.
    """

    @abstractmethod
    def allow(self, key: str) -> bool:
        """Return True and count the attempt, or False once the window is full"""
        pass
