"""FastAPI dependencies for identity resolution and DB sessions.

Resolving the caller never fails the request on its own: a missing or bad
token just leaves ``ActionContext.user`` empty. Handlers call
``require_user`` after the body has been validated, so shape errors are
reported before authentication errors.
"""

import logging
from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_session
from app.core.errors import Unauthorized
from app.core.security import decode_jwt

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


class Identity:
    """Resolved caller, as asserted by the auth service."""

    __slots__ = ("id",)

    def __init__(self, id: str) -> None:
        self.id = id


class ActionContext:
    """Request-scoped state handed to every action handler."""

    __slots__ = ("session", "user")

    def __init__(self, session: AsyncSession, user: Identity | None = None) -> None:
        self.session = session
        self.user = user


def _resolve_identity(credentials: HTTPAuthorizationCredentials | None) -> Identity | None:
    if credentials is None:
        return None
    try:
        payload = decode_jwt(credentials.credentials)
    except JWTError:
        logger.debug("Rejected bearer token", exc_info=True)
        return None
    subject = payload.get("sub")
    if not isinstance(subject, str) or not subject:
        logger.debug("Bearer token has no usable subject")
        return None
    return Identity(id=subject)


async def get_action_context(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
    session: Annotated[AsyncSession, Depends(get_session)],
) -> ActionContext:
    return ActionContext(session=session, user=_resolve_identity(credentials))


def require_user(context: ActionContext) -> Identity:
    if context.user is None:
        raise Unauthorized()
    return context.user


# Typed shorthand for use in route signatures
Context = Annotated[ActionContext, Depends(get_action_context)]
Session = Annotated[AsyncSession, Depends(get_session)]
