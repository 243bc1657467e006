"""Request dependencies: container access and caller identity."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import Depends, Header, HTTPException, Request, status

from hostel_menu.domain.profiles import Profile, Role
from hostel_menu.errors import NotFoundError

if TYPE_CHECKING:
    from hostel_menu.containers import AppContainer


def _get_admin_token(request: Request) -> str:
    container: AppContainer = request.app.state.container
    return container.settings.admin_token


async def require_admin(
    x_admin_token: str | None = Header(default=None),
    admin_token: str = Depends(_get_admin_token),
) -> None:
    """Ensure requests include a valid admin token."""
    if not x_admin_token or x_admin_token != admin_token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)


def require_role(*roles: Role) -> Callable[..., Awaitable[Profile]]:
    """Build a dependency resolving the caller's profile from X-Profile-Id.

    The id is set by the upstream auth provider; this only checks the role.
    """

    async def dependency(
        request: Request, x_profile_id: UUID | None = Header(default=None)
    ) -> Profile:
        if x_profile_id is None:
            raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)
        container: AppContainer = request.app.state.container
        try:
            profile = container.profile_service.get_profile(x_profile_id)
        except NotFoundError as exc:
            raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED) from exc
        if roles and profile.role not in roles:
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN)
        return profile

    return dependency


require_student = require_role(Role.STUDENT)
require_caterer = require_role(Role.CATERER)
