from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict


@dataclass(frozen=True)
class EmailTemplate:
    """Template identifier plus the values it is rendered with"""

    name: str
    data: Dict[str, str] = field(default_factory=dict)

    def __repr__(self) -> str:
        # Template data carries single-use links
        return f"EmailTemplate(name={self.name!r})"


PASSWORD_RESET_TEMPLATE = "password_reset"


class EmailSender(ABC):
    """Outbound email collaborator. Only the success flag matters to callers."""

    @abstractmethod
    async def send(self, to: str, template: EmailTemplate) -> bool:
        """Send a templated email. Returns False on any delivery failure."""
        pass
