"""FastAPI dependency providers.

Routers never build services themselves; they declare one of these
providers, which tests replace through `app.dependency_overrides`.
"""

from collections.abc import Generator
from functools import lru_cache

from caritas_sobral.exceptions.errors import LoginRequiredError
from caritas_sobral.models.users import AuthSession
from caritas_sobral.providers.auth_state import AuthEvent, AuthStateEvent, AuthStateNotifier
from caritas_sobral.providers.cache import QueryCache
from caritas_sobral.providers.config import ConfigProvider
from caritas_sobral.providers.database import DatabaseManager
from caritas_sobral.providers.date import DateProvider
from caritas_sobral.providers.file_type import FileTypeProvider
from caritas_sobral.providers.gcs import GcsProvider
from caritas_sobral.repositories.bens_patrimoniais import BensPatrimoniaisRepository
from caritas_sobral.repositories.editais import EditaisRepository
from caritas_sobral.repositories.movimentacoes import MovimentacoesRepository
from caritas_sobral.repositories.noticias import NoticiasRepository
from caritas_sobral.repositories.users import UsersRepository
from caritas_sobral.services.auth import AuthService
from caritas_sobral.services.editais import EditaisService
from caritas_sobral.services.noticias import NoticiasService
from caritas_sobral.services.patrimonio import PatrimonioService
from caritas_sobral.services.uploads import UploadService
from fastapi import Depends, Request


@lru_cache(maxsize=1)
def get_query_cache() -> QueryCache:
    """Returns the process-wide query cache."""
    config = ConfigProvider.get_config()
    return QueryCache(ttl_seconds=config.QUERY_CACHE_TTL_SECONDS, max_entries=config.QUERY_CACHE_MAX_ENTRIES)


@lru_cache(maxsize=1)
def get_auth_notifier() -> AuthStateNotifier:
    """Returns the process-wide authentication state notifier."""
    return AuthStateNotifier()


def get_date_provider() -> DateProvider:
    """Returns a date provider for the reference timezone."""
    return DateProvider()


def get_upload_service() -> UploadService:
    """Builds the upload service."""
    return UploadService(GcsProvider(), FileTypeProvider())


def get_editais_service() -> EditaisService:
    """Builds the editais service."""
    return EditaisService(
        EditaisRepository(DatabaseManager.get_engine()),
        get_upload_service(),
        get_query_cache(),
        get_date_provider(),
    )


def get_noticias_service() -> NoticiasService:
    """Builds the news service."""
    return NoticiasService(NoticiasRepository(DatabaseManager.get_engine()), get_upload_service(), get_query_cache())


def get_patrimonio_service() -> PatrimonioService:
    """Builds the asset inventory service."""
    engine = DatabaseManager.get_engine()
    return PatrimonioService(
        BensPatrimoniaisRepository(engine),
        MovimentacoesRepository(engine),
        get_upload_service(),
        get_query_cache(),
        get_date_provider(),
    )


def get_auth_service() -> AuthService:
    """Builds the authentication service."""
    return AuthService(UsersRepository(DatabaseManager.get_engine()), get_auth_notifier())


def require_admin(
    request: Request,
    auth_service: AuthService = Depends(get_auth_service),  # noqa: B008
    notifier: AuthStateNotifier = Depends(get_auth_notifier),  # noqa: B008
) -> Generator[AuthSession, None, None]:
    """Guards the admin pages.

    While the request is handled, a listener watches for the user signing
    out in another request and marks this request's session as revoked;
    `revoked_session_middleware` then answers with the sign-in redirect.
    The listener is always removed when the request ends.

    Yields:
        The current session.

    Raises:
        LoginRequiredError: If no valid session exists.
    """
    session = auth_service.get_current_session(request.session)
    if session is None:
        raise LoginRequiredError("Sessão expirada")

    def on_auth_change(event: AuthStateEvent) -> None:
        if event.event is not AuthEvent.SIGNED_IN and event.email == session.email:
            request.state.session_revoked = True

    subscription = notifier.subscribe(on_auth_change)
    try:
        yield session
    finally:
        subscription.unsubscribe()
