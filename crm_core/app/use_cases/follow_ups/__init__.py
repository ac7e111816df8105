"""
Follow-up Use Cases

Dated reminders on clients.
"""

from .list_follow_ups_use_case import ListFollowUpsUseCase
from .create_follow_up_use_case import CreateFollowUpUseCase
from .update_follow_up_use_case import ToggleFollowUpUseCase, UpdateFollowUpUseCase
from .delete_follow_up_use_case import DeleteFollowUpUseCase
from .dtos import (
    CreateFollowUpCommand,
    DeleteFollowUpResponse,
    FollowUpInfo,
    FollowUpListResponse,
    UpdateFollowUpCommand,
)

__all__ = [
    "ListFollowUpsUseCase",
    "CreateFollowUpUseCase",
    "UpdateFollowUpUseCase",
    "ToggleFollowUpUseCase",
    "DeleteFollowUpUseCase",
    "CreateFollowUpCommand",
    "UpdateFollowUpCommand",
    "FollowUpInfo",
    "FollowUpListResponse",
    "DeleteFollowUpResponse",
]
