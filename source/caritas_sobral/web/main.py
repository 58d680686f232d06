"""Main web application entry point."""

import uuid
from collections.abc import Awaitable, Callable
from pathlib import Path

from caritas_sobral.exceptions.errors import (
    LoginRequiredError,
    NotFoundError,
    RemoteOperationError,
    UploadError,
)
from caritas_sobral.providers.config import ConfigProvider
from caritas_sobral.providers.logging import LoggingProvider
from caritas_sobral.services.auth import SESSION_KEY
from caritas_sobral.web import admin, pages, strings
from caritas_sobral.web.flash import flash
from caritas_sobral.web.templates_config import templates
from fastapi import FastAPI, Request
from fastapi.responses import RedirectResponse, Response
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.sessions import SessionMiddleware
from uvicorn.middleware.proxy_headers import ProxyHeadersMiddleware

REQUEST_ID_HEADER = "X-Request-ID"

config = ConfigProvider.get_config()
logger = LoggingProvider().get_logger()

app = FastAPI(title=strings.SITE_TITLE)


@app.middleware("http")
async def correlation_id_middleware(request: Request, call_next: Callable[[Request], Awaitable[Response]]) -> Response:
    """Tags every log line of a request with its correlation ID.

    Args:
        request: The incoming request.
        call_next: The next handler.

    Returns:
        The response, carrying the correlation ID in `X-Request-ID`.
    """
    correlation_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
    with LoggingProvider().set_correlation_id(correlation_id):
        response = await call_next(request)
    response.headers[REQUEST_ID_HEADER] = correlation_id
    return response


@app.middleware("http")
async def revoked_session_middleware(request: Request, call_next: Callable[[Request], Awaitable[Response]]) -> Response:
    """Sends the user to the sign-in page when their session closed mid-request.

    The admin guard flags the request when the same user signs out
    elsewhere while the page is being built. The page is discarded, the
    session cookie is emptied and the user is redirected.
    """
    response = await call_next(request)
    if getattr(request.state, "session_revoked", False):
        logger.info("Session closed during the request; redirecting to sign-in.")
        request.session.pop(SESSION_KEY, None)
        return await login_required_handler(request, LoginRequiredError(strings.SESSION_EXPIRED))
    return response


app.add_middleware(
    SessionMiddleware,
    secret_key=config.SESSION_SECRET_KEY,
    session_cookie=config.SESSION_COOKIE_NAME,
    max_age=config.SESSION_MAX_AGE_SECONDS,
    same_site="lax",
    https_only=config.SESSION_HTTPS_ONLY,
)
app.add_middleware(ProxyHeadersMiddleware, trusted_hosts="*")


static_path = Path(__file__).parent / "static"
app.mount("/static", StaticFiles(directory=static_path), name="static")

app.include_router(pages.router)
app.include_router(admin.router)


def _fallback_url(request: Request) -> str:
    """Returns the list page a failed admin action should go back to."""
    segments = [segment for segment in request.url.path.split("/") if segment]
    if len(segments) >= 2 and segments[0] == "admin":
        if segments[1] == "patrimonio" and len(segments) >= 3 and segments[2] not in ("novo", "relatorio"):
            return f"/admin/patrimonio/{segments[2]}"
        return f"/admin/{segments[1]}"
    return "/"


@app.exception_handler(LoginRequiredError)
async def login_required_handler(request: Request, exc: LoginRequiredError) -> Response:
    """Send visitors without a valid session to the sign-in page."""
    flash(request, strings.SESSION_EXPIRED, "error")
    return RedirectResponse(url="/login", status_code=303)


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError) -> Response:
    """Render the 404 page for missing records."""
    logger.info(str(exc))
    return templates.TemplateResponse(request, "404.html", status_code=404)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> Response:
    """Render the 404 page for unknown paths."""
    if exc.status_code == 404:
        return templates.TemplateResponse(request, "404.html", status_code=404)
    return Response(content=str(exc.detail), status_code=exc.status_code, headers=getattr(exc, "headers", None))


@app.exception_handler(UploadError)
@app.exception_handler(RemoteOperationError)
async def remote_operation_handler(request: Request, exc: Exception) -> Response:
    """Report a failed storage or database operation.

    Form submissions go back to the related page with a notification. A
    page that cannot be loaded at all renders an error page instead, so a
    broken backend cannot cause a redirect loop.
    """
    if request.method == "GET":
        return templates.TemplateResponse(request, "error.html", {"message": str(exc)}, status_code=503)
    flash(request, str(exc), "error")
    return RedirectResponse(url=_fallback_url(request), status_code=303)


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint.

    Returns:
        Status dictionary.
    """
    return {"status": "ok"}
