"""
Common dependencies for FastAPI
"""

from fastapi import Request
import uuid

from storefront.core.config import settings
from storefront.core.exceptions import ValidationException

SESSION_KEY = "session_id"

def get_session_id(request: Request) -> str:
    """
    Resolve the caller's session id.

    A session id supplied by the hosting environment in the session header
    wins; otherwise an opaque id is kept in the signed session cookie,
    created on first use.
    """
    header_value = request.headers.get(settings.SESSION_HEADER)
    if header_value is not None:
        session_id = header_value.strip()
        if not session_id or len(session_id) > settings.SESSION_ID_MAX_LENGTH:
            raise ValidationException("Invalid session ID", error_code="INVALID_SESSION")
        return session_id

    session_id = request.session.get(SESSION_KEY)
    if not session_id:
        session_id = uuid.uuid4().hex
        request.session[SESSION_KEY] = session_id
    return session_id
