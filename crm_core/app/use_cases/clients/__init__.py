"""
Client Use Cases

Clients of the current workspace.
"""

from .list_clients_use_case import ListClientsUseCase
from .get_client_use_case import GetClientUseCase
from .create_client_use_case import CreateClientUseCase
from .update_client_use_case import UpdateClientUseCase
from .delete_client_use_case import DeleteClientUseCase
from .dtos import (
    ClientInfo,
    ClientListResponse,
    CreateClientCommand,
    DeleteClientResponse,
    UpdateClientCommand,
)

__all__ = [
    "ListClientsUseCase",
    "GetClientUseCase",
    "CreateClientUseCase",
    "UpdateClientUseCase",
    "DeleteClientUseCase",
    "CreateClientCommand",
    "UpdateClientCommand",
    "ClientInfo",
    "ClientListResponse",
    "DeleteClientResponse",
]
