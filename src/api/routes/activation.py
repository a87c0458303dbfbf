"""Account activation endpoint."""

import functools
import html
from string import Template
from typing import Any, Awaitable, Callable

import structlog
from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import HTMLResponse
from slowapi.errors import RateLimitExceeded
from sqlalchemy.exc import SQLAlchemyError

from api.dependencies import get_activation_service
from api.schemas.common import StatusReply
from core.config import settings
from core.exceptions import AppException, MethodNotAllowedError, StorageFailureError
from core.rate_limit import READ_LIMIT, limiter
from domain.services.activation_service import ActivationService

logger = structlog.get_logger()

router = APIRouter(prefix="/activation", tags=["activation"])

ACTIVATED_MESSAGE = "Profile activated!"
ACTIVATION_METHODS = ["GET", "HEAD", "OPTIONS", "POST", "PUT", "PATCH", "DELETE"]

_PAGE = Template("""<!DOCTYPE html>
<html lang="en">
	<head>
		<meta charset="utf-8">
		<meta name="viewport" content="width=device-width, initial-scale=1, shrink-to-fit=no">
		<script>
			console.log($reply_json);
		</script>
		<title>Account Activation | Creepy Octo Meow</title>
	</head>
	<body>
		<h1>Creepy Octo Meow | Account Activation</h1>
		<hr>
		<p class="lead">$message&nbsp;<span class="badge $badge">Code:&nbsp;$status</span></p>
		<a class="btn btn-primary" href="$site_url">Sign In</a>
	</body>
</html>
""")


def render_activation_page(reply: StatusReply) -> str:
    """Render the activation page embedding the reply as JSON."""
    return _PAGE.substitute(
        reply_json=reply.model_dump_json().replace("</", "<\\/"),
        message=html.escape(reply.message),
        badge="badge-success" if reply.status == 200 else "badge-danger",
        status=f"{reply.status}&nbsp;OK!" if reply.status == 200 else str(reply.status),
        site_url=html.escape(settings.site_url, quote=True),
    )


def render_rate_limit_page(
    endpoint: Callable[..., Awaitable[HTMLResponse]],
) -> Callable[..., Awaitable[HTMLResponse]]:
    """Render a throttled activation request into the status page."""

    @functools.wraps(endpoint)
    async def wrapper(*args: Any, **kwargs: Any) -> HTMLResponse:
        try:
            return await endpoint(*args, **kwargs)
        except RateLimitExceeded as exc:
            logger.warning("activation_rate_limited", limit=exc.detail)
            reply = StatusReply(
                status=exc.status_code, message=f"Rate limit exceeded: {exc.detail}"
            )
            return HTMLResponse(render_activation_page(reply), status_code=reply.status)

    return wrapper


@router.api_route(
    "/",
    methods=ACTIVATION_METHODS,
    response_class=HTMLResponse,
    summary="Activate a profile",
    responses={
        200: {"description": "Profile activated"},
        400: {"description": "Malformed activation token"},
        404: {"description": "No pending profile owns this token"},
        405: {"description": "Only GET is supported"},
        429: {"description": "Too many activation attempts"},
    },
)
@render_rate_limit_page
@limiter.limit(READ_LIMIT)  # type: ignore[untyped-decorator]
async def activate_profile(
    request: Request,
    token: str | None = Query(None, description="32 character hex activation token"),
    service: ActivationService = Depends(get_activation_service),
) -> HTMLResponse:
    """
    Consume an activation token.

    Every failure is rendered into the same status/message reply; the HTTP
    status code mirrors the reply's status.
    """
    method = request.headers.get("X-HTTP-Method", request.method).upper()
    reply = StatusReply(status=200, message=ACTIVATED_MESSAGE)

    try:
        if method != "GET":
            raise MethodNotAllowedError(method)
        await service.activate(token)
    except AppException as exc:
        logger.info(
            "activation_rejected",
            error_code=exc.error_code.value,
            status=exc.status_code,
        )
        reply = StatusReply(status=exc.status_code, message=exc.message)
    except SQLAlchemyError as exc:
        logger.error("activation_storage_failure", error=str(exc), exc_info=True)
        failure = StorageFailureError()
        reply = StatusReply(status=failure.status_code, message=failure.message)
    except Exception as exc:
        logger.error(
            "activation_failed",
            error=str(exc),
            error_type=type(exc).__name__,
            exc_info=True,
        )
        reply = StatusReply(status=500, message="An unexpected error occurred")

    return HTMLResponse(render_activation_page(reply), status_code=reply.status)
