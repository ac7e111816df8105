"""
Signup Use Case

Creates a user together with their own workspace and OWNER membership.
"""

import logging

from crm_core.app.services.password_hasher import PasswordHasher
from crm_core.app.services.unit_of_work import UnitOfWork
from crm_core.app.use_cases.errors import EMAIL_EXISTS, server_error_boundary
from crm_core.domain.entities import Membership, MembershipRole, User, Workspace
from crm_core.domain.normalize import generate_slug, normalize_email
from crm_core.libs.result import Error, Result, Return

from .dtos import SignupCommand, SignupResponse, UserInfo, WorkspaceCreated
from .validators import SIGNUP_PASSWORD_MIN_LENGTH, validate_email, validate_name, validate_password

logger = logging.getLogger(__name__)


class SignupUseCase:
    """
    Signup Use Case

    Command/Response Pattern:
    - Input: SignupCommand (validated business intent)
    - Output: Result[SignupResponse] (structured response)

    Business Logic:
    1. Validate and normalize the email
    2. Reject an email that is already registered
    3. Hash password with bcrypt
    4. Derive a unique workspace slug (suffix -1, -2, ... on collision)
    5. Create Workspace, User (with the workspace selected) and OWNER Membership
    6. Commit transaction atomically
    """

    def __init__(self, uow: UnitOfWork, password_hasher: PasswordHasher):
        self.uow = uow
        self.password_hasher = password_hasher

    async def _unique_slug(self, base_slug: str) -> str:
        slug = base_slug
        counter = 1
        while await self.uow.workspaces.slug_exists(slug):
            slug = f"{base_slug}-{counter}"
            counter += 1
        return slug

    @server_error_boundary("Signup")
    async def execute(self, command: SignupCommand) -> Result[SignupResponse]:
        """
        Execute signup use case

        Args:
            command: SignupCommand with email, password, workspace_name and optional name

        Returns:
            Result[SignupResponse] with user and workspace data,
            or Error(VALIDATION_ERROR | EMAIL_EXISTS)
        """
        for check in (
            validate_name(command.workspace_name, "Workspace name", required=True),
            validate_name(command.name or "", "Name"),
            validate_email(command.email),
            validate_password(command.password, SIGNUP_PASSWORD_MIN_LENGTH),
        ):
            if check.is_err():
                return Return.err(check.error)

        email = normalize_email(command.email)

        async with self.uow:
            existing_user = await self.uow.users.get_by_email(email)
            if existing_user:
                return Return.err(Error(EMAIL_EXISTS, "Email already registered"))

            password_hash = self.password_hasher.hash(command.password)
            slug = await self._unique_slug(generate_slug(command.workspace_name))

            workspace = Workspace(name=command.workspace_name.strip(), slug=slug)
            workspace = await self.uow.workspaces.create(workspace)

            user = User(
                email=email,
                name=command.name or None,
                password_hash=password_hash,
                selected_workspace_id=workspace.id,
            )
            user = await self.uow.users.create(user)

            # First member of a workspace is always its owner
            membership = Membership(
                user_id=user.id,
                workspace_id=workspace.id,
                role=MembershipRole.owner,
            )
            await self.uow.memberships.create(membership)

            await self.uow.commit()

            logger.info("Workspace %s created by user %s", workspace.id, user.id)

            return Return.ok(
                SignupResponse(
                    user=UserInfo(id=str(user.id), email=user.email, name=user.name),
                    workspace=WorkspaceCreated(
                        id=str(workspace.id), name=workspace.name, slug=workspace.slug
                    ),
                )
            )
