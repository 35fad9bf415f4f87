from __future__ import annotations

import secrets

from fastapi import Depends, Header, HTTPException, status

from srimitha.core.config import settings
from srimitha.db.session import get_session

SESSION_DEP = Depends(get_session)


def require_admin_token(authorization: str | None = Header(default=None)) -> None:
    expected = settings.admin_token
    scheme, _, token = (authorization or "").partition(" ")
    if (
        not expected
        or scheme.lower() != "bearer"
        or not secrets.compare_digest(token.strip(), expected)
    ):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized",
            headers={"WWW-Authenticate": "Bearer"},
        )


ADMIN_DEP = Depends(require_admin_token)
