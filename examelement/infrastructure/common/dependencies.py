"""FastAPI dependencies shared by the routers."""

from fastapi import HTTPException, status

from examelement.config import get_settings


def require_content_generation() -> None:
    """
    Refuse generation requests when no AI provider is configured.

    Runs before the handler, so a disabled server never touches the
    caller's quota.

    Raises:
        HTTPException: 410 Gone if generation is disabled
    """
    if not get_settings().ai_enabled:
        raise HTTPException(
            status_code=status.HTTP_410_GONE,
            detail="Content generation is not enabled on this server",
        )
