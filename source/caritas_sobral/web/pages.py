"""Public web pages router."""

import json
from typing import Any
from uuid import UUID

from caritas_sobral.exceptions.errors import AuthenticationError, RemoteOperationError
from caritas_sobral.models.editais import EditalStatus
from caritas_sobral.providers.config import ConfigProvider
from caritas_sobral.providers.logging import LoggingProvider
from caritas_sobral.services.auth import AuthService
from caritas_sobral.services.editais import EditaisService
from caritas_sobral.services.links import build_whatsapp_url
from caritas_sobral.services.noticias import NoticiasService
from caritas_sobral.web import site_content, strings
from caritas_sobral.web.dependencies import get_auth_service, get_editais_service, get_noticias_service
from caritas_sobral.web.flash import flash
from caritas_sobral.web.presentation import pagination, parse_enum
from caritas_sobral.web.templates_config import templates
from fastapi import APIRouter, Depends, Form, Query, Request
from fastapi.responses import RedirectResponse

router = APIRouter()


@router.get("/", name="home")
def home(request: Request, service: NoticiasService = Depends(get_noticias_service)) -> Any:  # noqa: B008
    """Render the home page.

    A failure to load the news only hides the carousel; the rest of the
    page is static.

    Args:
        request: The request object.
        service: The news service.

    Returns:
        The rendered template response.
    """
    config = ConfigProvider.get_config()
    news_error = None
    try:
        noticias = service.list_carousel(config.NEWS_CAROUSEL_LIMIT)
    except RemoteOperationError as e:
        LoggingProvider().get_logger().error(f"Home page rendered without news: {e}")
        noticias = []
        news_error = str(e)

    context = {
        "noticias": noticias,
        "news_error": news_error,
        "content": site_content,
        "map_markers_json": json.dumps(site_content.map_markers(), ensure_ascii=False),
        "map_center": list(site_content.MAP_CENTER),
        "map_zoom": site_content.MAP_ZOOM,
    }
    return templates.TemplateResponse(request, "index.html", context)


@router.get("/editais", name="editais_public")
def editais_public(
    request: Request,
    busca: str = Query("", alias="q"),  # noqa: B008
    status: str = "",
    page: int = 1,
    service: EditaisService = Depends(get_editais_service),  # noqa: B008
) -> Any:
    """Render the public list of calls for proposals.

    Args:
        request: The request object.
        busca: The name search.
        status: The derived status filter.
        page: The page number.
        service: The editais service.

    Returns:
        The rendered template response.
    """
    config = ConfigProvider.get_config()
    status_filter = parse_enum(EditalStatus, status)
    result = service.list_public(page, config.PUBLIC_PAGE_SIZE, busca=busca.strip() or None, status=status_filter)
    context = {
        "editais": result.items,
        "pagination": pagination(result),
        "q": busca,
        "status": status_filter.value if status_filter else "",
    }
    return templates.TemplateResponse(request, "editais_public.html", context)


@router.get("/noticia/{noticia_id}", name="noticia_detail")
def noticia_detail(
    request: Request,
    noticia_id: UUID,
    service: NoticiasService = Depends(get_noticias_service),  # noqa: B008
) -> Any:
    """Render the page of a visible news article.

    Args:
        request: The request object.
        noticia_id: The article ID.
        service: The news service.

    Returns:
        The rendered template response.
    """
    noticia = service.get(noticia_id, only_active=True)
    return templates.TemplateResponse(request, "noticia_detail.html", {"noticia": noticia})


@router.post("/contato", name="contact")
def contact(
    request: Request,
    nome: str = Form(""),  # noqa: B008
    email: str = Form(""),  # noqa: B008
    telefone: str = Form(""),  # noqa: B008
    mensagem: str = Form(""),  # noqa: B008
) -> RedirectResponse:
    """Send the visitor to WhatsApp with the contact message prefilled.

    Args:
        request: The request object.
        nome: The visitor's name.
        email: The visitor's e-mail.
        telefone: The visitor's phone.
        mensagem: The message.

    Returns:
        A redirect to the messaging service, or back to the form when the
        name or the message is missing.
    """
    if not nome.strip() or not mensagem.strip():
        flash(request, strings.CONTACT_MISSING_FIELDS, "error")
        return RedirectResponse(url="/#contato", status_code=303)

    config = ConfigProvider.get_config()
    url = build_whatsapp_url(config.CONTACT_WHATSAPP_NUMBER, nome, mensagem, email=email, telefone=telefone)
    return RedirectResponse(url=url, status_code=303)


@router.get("/login", name="login")
def login_form(request: Request, auth_service: AuthService = Depends(get_auth_service)) -> Any:  # noqa: B008
    """Render the sign-in form, or go straight to the admin area when signed in.

    Args:
        request: The request object.
        auth_service: The authentication service.

    Returns:
        The rendered template response or a redirect.
    """
    if auth_service.get_current_session(request.session) is not None:
        return RedirectResponse(url="/admin", status_code=303)
    return templates.TemplateResponse(request, "login.html", {"email": "", "error": None})


@router.post("/login", name="login_submit")
def login_submit(
    request: Request,
    email: str = Form(""),  # noqa: B008
    password: str = Form(""),  # noqa: B008
    auth_service: AuthService = Depends(get_auth_service),  # noqa: B008
) -> Any:
    """Check the credentials and open the admin session.

    Args:
        request: The request object.
        email: The submitted e-mail.
        password: The submitted password.
        auth_service: The authentication service.

    Returns:
        A redirect to the admin area, or the form with an error message.
    """
    try:
        auth_service.sign_in(request.session, email, password)
    except AuthenticationError as e:
        return templates.TemplateResponse(
            request, "login.html", {"email": email, "error": str(e)}, status_code=401
        )
    return RedirectResponse(url="/admin", status_code=303)


@router.post("/logout", name="logout")
def logout(request: Request, auth_service: AuthService = Depends(get_auth_service)) -> RedirectResponse:  # noqa: B008
    """Close the admin session.

    Args:
        request: The request object.
        auth_service: The authentication service.

    Returns:
        A redirect to the sign-in page.
    """
    auth_service.sign_out(request.session)
    flash(request, strings.SIGNED_OUT, "info")
    return RedirectResponse(url="/login", status_code=303)
