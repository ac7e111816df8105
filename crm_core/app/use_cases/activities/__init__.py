"""
Activity Use Cases

Client timeline entries.
"""

from .list_activities_use_case import ListActivitiesUseCase
from .create_activity_use_case import CreateActivityUseCase
from .delete_activity_use_case import DeleteActivityUseCase
from .dtos import (
    ActivityInfo,
    ActivityListResponse,
    CreateActivityCommand,
    DeleteActivityResponse,
)

__all__ = [
    "ListActivitiesUseCase",
    "CreateActivityUseCase",
    "DeleteActivityUseCase",
    "CreateActivityCommand",
    "ActivityInfo",
    "ActivityListResponse",
    "DeleteActivityResponse",
]
