# =============================================================================
# app/exceptions.py - Custom Exception Handlers
# =============================================================================
# Centralized exception handling for the API.
#
# Agents never raise from run(); the only AgentErrors that reach the API are
# construction-time ones (missing credentials/model, empty intent list).
# Following the principle: "Errors should tell HOW to fix, not just WHAT failed."
# =============================================================================

from fastapi import Request
from fastapi.responses import JSONResponse

from agents.errors import AgentError


# HTTP status per agent error code; anything unlisted is a 500
AGENT_ERROR_STATUS_CODES: dict[str, int] = {
    "MISSING_CREDENTIAL": 503,
    "MISSING_MODEL": 503,
    "MISSING_INPUT": 422,
}


def status_code_for(exc: AgentError) -> int:
    """HTTP status code for an agent error."""
    return AGENT_ERROR_STATUS_CODES.get(exc.code, 500)


# =============================================================================
# Exception Handlers
# =============================================================================

async def agent_exception_handler(
    request: Request,
    exc: AgentError
) -> JSONResponse:
    """
    Convert AgentError to JSON response.

    Returns structured error with:
    - detail: Human-readable message
    - code: Machine-readable error code
    - suggestion: How to fix (if available)
    - details: Additional context
    """
    content = {
        "detail": exc.message,
        "code": exc.code,
    }
    if exc.suggestion:
        content["suggestion"] = exc.suggestion
    if exc.details:
        content["details"] = exc.details

    return JSONResponse(
        status_code=status_code_for(exc),
        content=content
    )


async def validation_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """
    Handle Pydantic validation errors.

    Converts validation errors to user-friendly messages.
    """
    return JSONResponse(
        status_code=422,
        content={
            "detail": "Validation error",
            "code": "VALIDATION_ERROR",
            "errors": str(exc)
        }
    )
