"""Session check

Every route requires an X-User-Id header identifying the signed-in user,
unless AUTH_DISABLED is set.
"""

from typing import Optional
from fastapi import Depends, Header, status
from libs.result import Error
from orderdesk.api.error import ClientError
from orderdesk.depends import get_config


async def require_session(
    x_user_id: Optional[str] = Header(default=None, alias="X-User-Id"),
    config=Depends(get_config),
) -> Optional[str]:
    if config.AUTH_DISABLED:
        return x_user_id
    if not x_user_id or not x_user_id.strip():
        raise ClientError(
            Error(
                code="UNAUTHENTICATED",
                message="Sign in required",
                reason="Missing X-User-Id header",
            ),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )
    return x_user_id.strip()
