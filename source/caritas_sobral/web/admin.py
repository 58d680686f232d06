"""Admin area router.

Every route depends on `require_admin`. Validation failures re-render the
form with field messages (HTTP 422); storage and database failures are
turned into a notification by the exception handlers in `main`.
"""

from typing import Any
from uuid import UUID

from caritas_sobral.exceptions.errors import ValidationFailedError
from caritas_sobral.models.editais import Edital, EditalStatus
from caritas_sobral.models.noticias import Noticia
from caritas_sobral.models.patrimonio import BemPatrimonial, EstadoConservacao
from caritas_sobral.models.users import AuthSession
from caritas_sobral.providers.config import ConfigProvider
from caritas_sobral.providers.date import DateProvider
from caritas_sobral.services.edital_status import can_set_in_progress
from caritas_sobral.services.editais import EditaisService
from caritas_sobral.services.noticias import NoticiasService
from caritas_sobral.services.patrimonio import PatrimonioService
from caritas_sobral.web import strings
from caritas_sobral.web.dependencies import (
    get_date_provider,
    get_editais_service,
    get_noticias_service,
    get_patrimonio_service,
    require_admin,
)
from caritas_sobral.web.flash import flash
from caritas_sobral.web.presentation import pagination, parse_bool, parse_enum, read_form
from caritas_sobral.web.templates_config import templates
from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import RedirectResponse, Response
from starlette.concurrency import run_in_threadpool

router = APIRouter(prefix="/admin")


def _redirect(url: str) -> RedirectResponse:
    return RedirectResponse(url=url, status_code=303)


def _render(request: Request, template: str, admin: AuthSession, context: dict[str, Any], status_code: int = 200) -> Any:
    return templates.TemplateResponse(request, template, {"admin": admin, **context}, status_code=status_code)


@router.get("", name="admin_home")
def admin_home(admin: AuthSession = Depends(require_admin)) -> RedirectResponse:  # noqa: B008
    """Send the admin to the default section."""
    return _redirect("/admin/editais")


# Editais


def _edital_form_context(
    edital: Edital | None,
    values: dict[str, Any],
    errors: dict[str, str],
    today: Any,
) -> dict[str, Any]:
    return {
        "edital": edital,
        "values": values,
        "errors": errors,
        "today": today.isoformat(),
        "in_progress_allowed": can_set_in_progress(values.get("data_finalizacao"), today),
    }


def _edital_values(edital: Edital) -> dict[str, Any]:
    return {
        "nome": edital.nome,
        "data_publicacao": edital.data_publicacao.isoformat(),
        "status": edital.status.value,
        "data_finalizacao": edital.data_finalizacao.isoformat() if edital.data_finalizacao else "",
        "descricao": edital.descricao or "",
    }


@router.get("/editais", name="admin_editais")
def editais_list(
    request: Request,
    busca: str = Query("", alias="q"),  # noqa: B008
    status: str = "",
    page: int = 1,
    admin: AuthSession = Depends(require_admin),  # noqa: B008
    service: EditaisService = Depends(get_editais_service),  # noqa: B008
) -> Any:
    """Render the admin list of calls for proposals.

    Args:
        request: The request object.
        busca: The name search.
        status: The stored status filter.
        page: The page number.
        admin: The current session.
        service: The editais service.

    Returns:
        The rendered template response.
    """
    config = ConfigProvider.get_config()
    status_filter = parse_enum(EditalStatus, status)
    result = service.list_admin(page, config.ADMIN_PAGE_SIZE, busca=busca.strip() or None, status=status_filter)
    context = {
        "editais": result.items,
        "pagination": pagination(result),
        "q": busca,
        "status": status_filter.value if status_filter else "",
    }
    return _render(request, "admin/editais_list.html", admin, context)


@router.get("/editais/novo", name="admin_edital_new")
def edital_new(
    request: Request,
    admin: AuthSession = Depends(require_admin),  # noqa: B008
    date_provider: DateProvider = Depends(get_date_provider),  # noqa: B008
) -> Any:
    """Render an empty edital form."""
    today = date_provider.today()
    values = {"status": EditalStatus.OPEN.value, "data_publicacao": today.isoformat()}
    return _render(request, "admin/edital_form.html", admin, _edital_form_context(None, values, {}, today))


@router.post("/editais", name="admin_edital_create")
async def edital_create(
    request: Request,
    admin: AuthSession = Depends(require_admin),  # noqa: B008
    service: EditaisService = Depends(get_editais_service),  # noqa: B008
    date_provider: DateProvider = Depends(get_date_provider),  # noqa: B008
) -> Any:
    """Create an edital from the submitted form."""
    data, files = await read_form(request, ("documento",))
    try:
        await run_in_threadpool(service.create, data, files["documento"])
    except ValidationFailedError as e:
        context = _edital_form_context(None, data, e.errors, date_provider.today())
        return _render(request, "admin/edital_form.html", admin, context, status_code=422)
    flash(request, strings.ADMIN_SAVED)
    return _redirect("/admin/editais")


@router.get("/editais/{edital_id}/editar", name="admin_edital_edit")
def edital_edit(
    request: Request,
    edital_id: UUID,
    admin: AuthSession = Depends(require_admin),  # noqa: B008
    service: EditaisService = Depends(get_editais_service),  # noqa: B008
    date_provider: DateProvider = Depends(get_date_provider),  # noqa: B008
) -> Any:
    """Render the form of an existing edital."""
    edital = service.get(edital_id)
    context = _edital_form_context(edital, _edital_values(edital), {}, date_provider.today())
    return _render(request, "admin/edital_form.html", admin, context)


@router.post("/editais/{edital_id}", name="admin_edital_update")
async def edital_update(
    request: Request,
    edital_id: UUID,
    admin: AuthSession = Depends(require_admin),  # noqa: B008
    service: EditaisService = Depends(get_editais_service),  # noqa: B008
    date_provider: DateProvider = Depends(get_date_provider),  # noqa: B008
) -> Any:
    """Update an edital from the submitted form."""
    data, files = await read_form(request, ("documento",))
    try:
        await run_in_threadpool(service.update, edital_id, data, files["documento"])
    except ValidationFailedError as e:
        edital = await run_in_threadpool(service.get, edital_id)
        context = _edital_form_context(edital, data, e.errors, date_provider.today())
        return _render(request, "admin/edital_form.html", admin, context, status_code=422)
    flash(request, strings.ADMIN_SAVED)
    return _redirect("/admin/editais")


@router.get("/editais/{edital_id}/excluir", name="admin_edital_confirm_delete")
def edital_confirm_delete(
    request: Request,
    edital_id: UUID,
    admin: AuthSession = Depends(require_admin),  # noqa: B008
    service: EditaisService = Depends(get_editais_service),  # noqa: B008
) -> Any:
    """Ask for confirmation before deleting an edital."""
    edital = service.get(edital_id)
    context = {"label": edital.nome, "action": f"/admin/editais/{edital_id}/excluir", "back": "/admin/editais"}
    return _render(request, "admin/confirm_delete.html", admin, context)


@router.post("/editais/{edital_id}/excluir", name="admin_edital_delete")
def edital_delete(
    request: Request,
    edital_id: UUID,
    admin: AuthSession = Depends(require_admin),  # noqa: B008
    service: EditaisService = Depends(get_editais_service),  # noqa: B008
) -> RedirectResponse:
    """Delete an edital."""
    service.delete(edital_id)
    flash(request, strings.ADMIN_DELETED)
    return _redirect("/admin/editais")


# Notícias


def _noticia_values(noticia: Noticia) -> dict[str, Any]:
    return {
        "titulo": noticia.titulo,
        "resumo": noticia.resumo,
        "conteudo": noticia.conteudo or "",
        "url": noticia.url or "",
        "data_publicacao": noticia.data_publicacao.isoformat(),
        "ativo": noticia.ativo,
        "autor": noticia.autor or "",
    }


async def _read_noticia_form(request: Request) -> tuple[dict[str, Any], dict[str, Any]]:
    data, files = await read_form(request, ("imagem",))
    data["ativo"] = "ativo" in data
    return data, files


@router.get("/noticias", name="admin_noticias")
def noticias_list(
    request: Request,
    busca: str = Query("", alias="q"),  # noqa: B008
    ativo: str = "",
    page: int = 1,
    admin: AuthSession = Depends(require_admin),  # noqa: B008
    service: NoticiasService = Depends(get_noticias_service),  # noqa: B008
) -> Any:
    """Render the admin list of news articles.

    Args:
        request: The request object.
        busca: The title search.
        ativo: "true", "false" or empty for all.
        page: The page number.
        admin: The current session.
        service: The news service.

    Returns:
        The rendered template response.
    """
    config = ConfigProvider.get_config()
    result = service.list_admin(page, config.ADMIN_PAGE_SIZE, busca=busca.strip() or None, ativo=parse_bool(ativo))
    context = {"noticias": result.items, "pagination": pagination(result), "q": busca, "ativo": ativo}
    return _render(request, "admin/noticias_list.html", admin, context)


@router.get("/noticias/novo", name="admin_noticia_new")
def noticia_new(
    request: Request,
    admin: AuthSession = Depends(require_admin),  # noqa: B008
    date_provider: DateProvider = Depends(get_date_provider),  # noqa: B008
) -> Any:
    """Render an empty news form."""
    values = {"ativo": True, "data_publicacao": date_provider.today().isoformat()}
    return _render(request, "admin/noticia_form.html", admin, {"noticia": None, "values": values, "errors": {}})


@router.post("/noticias", name="admin_noticia_create")
async def noticia_create(
    request: Request,
    admin: AuthSession = Depends(require_admin),  # noqa: B008
    service: NoticiasService = Depends(get_noticias_service),  # noqa: B008
) -> Any:
    """Create a news article from the submitted form."""
    data, files = await _read_noticia_form(request)
    try:
        await run_in_threadpool(service.create, data, files["imagem"])
    except ValidationFailedError as e:
        context = {"noticia": None, "values": data, "errors": e.errors}
        return _render(request, "admin/noticia_form.html", admin, context, status_code=422)
    flash(request, strings.ADMIN_SAVED)
    return _redirect("/admin/noticias")


@router.get("/noticias/{noticia_id}/editar", name="admin_noticia_edit")
def noticia_edit(
    request: Request,
    noticia_id: UUID,
    admin: AuthSession = Depends(require_admin),  # noqa: B008
    service: NoticiasService = Depends(get_noticias_service),  # noqa: B008
) -> Any:
    """Render the form of an existing news article."""
    noticia = service.get(noticia_id)
    context = {"noticia": noticia, "values": _noticia_values(noticia), "errors": {}}
    return _render(request, "admin/noticia_form.html", admin, context)


@router.post("/noticias/{noticia_id}", name="admin_noticia_update")
async def noticia_update(
    request: Request,
    noticia_id: UUID,
    admin: AuthSession = Depends(require_admin),  # noqa: B008
    service: NoticiasService = Depends(get_noticias_service),  # noqa: B008
) -> Any:
    """Update a news article from the submitted form."""
    data, files = await _read_noticia_form(request)
    try:
        await run_in_threadpool(service.update, noticia_id, data, files["imagem"])
    except ValidationFailedError as e:
        context = {"noticia": await run_in_threadpool(service.get, noticia_id), "values": data, "errors": e.errors}
        return _render(request, "admin/noticia_form.html", admin, context, status_code=422)
    flash(request, strings.ADMIN_SAVED)
    return _redirect("/admin/noticias")


@router.post("/noticias/{noticia_id}/alternar", name="admin_noticia_toggle")
def noticia_toggle(
    request: Request,
    noticia_id: UUID,
    admin: AuthSession = Depends(require_admin),  # noqa: B008
    service: NoticiasService = Depends(get_noticias_service),  # noqa: B008
) -> RedirectResponse:
    """Show or hide a news article on the public site."""
    service.toggle_active(noticia_id)
    flash(request, strings.ADMIN_TOGGLED)
    return _redirect("/admin/noticias")


@router.get("/noticias/{noticia_id}/excluir", name="admin_noticia_confirm_delete")
def noticia_confirm_delete(
    request: Request,
    noticia_id: UUID,
    admin: AuthSession = Depends(require_admin),  # noqa: B008
    service: NoticiasService = Depends(get_noticias_service),  # noqa: B008
) -> Any:
    """Ask for confirmation before deleting a news article."""
    noticia = service.get(noticia_id)
    context = {"label": noticia.titulo, "action": f"/admin/noticias/{noticia_id}/excluir", "back": "/admin/noticias"}
    return _render(request, "admin/confirm_delete.html", admin, context)


@router.post("/noticias/{noticia_id}/excluir", name="admin_noticia_delete")
def noticia_delete(
    request: Request,
    noticia_id: UUID,
    admin: AuthSession = Depends(require_admin),  # noqa: B008
    service: NoticiasService = Depends(get_noticias_service),  # noqa: B008
) -> RedirectResponse:
    """Delete a news article."""
    service.delete(noticia_id)
    flash(request, strings.ADMIN_DELETED)
    return _redirect("/admin/noticias")


# Patrimônio


def _bem_values(bem: BemPatrimonial) -> dict[str, Any]:
    return {
        "tipo": bem.tipo,
        "nome": bem.nome,
        "numero_serie": bem.numero_serie or "",
        "numero_tombamento": bem.numero_tombamento,
        "estado": bem.estado.value,
        "descricao": bem.descricao or "",
        "valor": str(bem.valor),
    }


@router.get("/patrimonio", name="admin_patrimonio")
def patrimonio_list(
    request: Request,
    busca: str = Query("", alias="q"),  # noqa: B008
    estado: str = "",
    page: int = 1,
    admin: AuthSession = Depends(require_admin),  # noqa: B008
    service: PatrimonioService = Depends(get_patrimonio_service),  # noqa: B008
) -> Any:
    """Render the asset inventory.

    Args:
        request: The request object.
        busca: The name or tag number search.
        estado: The condition filter.
        page: The page number.
        admin: The current session.
        service: The asset service.

    Returns:
        The rendered template response.
    """
    config = ConfigProvider.get_config()
    estado_filter = parse_enum(EstadoConservacao, estado)
    result = service.list_bens(page, config.ADMIN_PAGE_SIZE, busca=busca.strip() or None, estado=estado_filter)
    context = {
        "bens": result.items,
        "pagination": pagination(result),
        "q": busca,
        "estado": estado_filter.value if estado_filter else "",
    }
    return _render(request, "admin/patrimonio_list.html", admin, context)


@router.get("/patrimonio/novo", name="admin_bem_new")
def bem_new(request: Request, admin: AuthSession = Depends(require_admin)) -> Any:  # noqa: B008
    """Render an empty asset form."""
    values = {"estado": EstadoConservacao.BOM.value, "valor": "0"}
    return _render(request, "admin/bem_form.html", admin, {"bem": None, "values": values, "errors": {}})


@router.post("/patrimonio", name="admin_bem_create")
async def bem_create(
    request: Request,
    admin: AuthSession = Depends(require_admin),  # noqa: B008
    service: PatrimonioService = Depends(get_patrimonio_service),  # noqa: B008
) -> Any:
    """Register an asset from the submitted form."""
    data, files = await read_form(request, ("foto",))
    try:
        bem = await run_in_threadpool(service.create_bem, data, files["foto"])
    except ValidationFailedError as e:
        context = {"bem": None, "values": data, "errors": e.errors}
        return _render(request, "admin/bem_form.html", admin, context, status_code=422)
    flash(request, strings.ADMIN_SAVED)
    return _redirect(f"/admin/patrimonio/{bem.id}")


@router.get("/patrimonio/relatorio", name="admin_patrimonio_report")
def patrimonio_report(
    request: Request,
    tipo: str = "",
    estado: str = "",
    localizacao_atual: str = "",
    gerar: str = "",
    formato: str = "html",
    admin: AuthSession = Depends(require_admin),  # noqa: B008
    service: PatrimonioService = Depends(get_patrimonio_service),  # noqa: B008
) -> Any:
    """Render the printable inventory report, or download it as CSV.

    The report only runs once the filter form is submitted (`gerar`) or a
    CSV is requested.

    Args:
        request: The request object.
        tipo: A substring of the category.
        estado: The exact condition.
        localizacao_atual: A substring of the current location.
        gerar: Set when the filter form was submitted.
        formato: "html" or "csv".
        admin: The current session.
        service: The asset service.

    Returns:
        The rendered template response or the CSV file.
    """
    values = {"tipo": tipo, "estado": estado, "localizacao_atual": localizacao_atual}
    try:
        filtros = service.parse_filtros(values)
    except ValidationFailedError as e:
        context = {"values": values, "errors": e.errors, "bens": None}
        return _render(request, "admin/patrimonio_report.html", admin, context, status_code=422)

    if formato == "csv":
        content = service.relatorio_csv(service.relatorio(filtros))
        return Response(
            content="\ufeff" + content,
            media_type="text/csv; charset=utf-8",
            headers={"Content-Disposition": 'attachment; filename="relatorio-patrimonio.csv"'},
        )

    bens = service.relatorio(filtros) if gerar else None
    total = sum(bem.valor for bem in bens) if bens else 0
    context = {"values": values, "errors": {}, "bens": bens, "total": total}
    return _render(request, "admin/patrimonio_report.html", admin, context)


@router.get("/patrimonio/{bem_id}", name="admin_bem_detail")
def bem_detail(
    request: Request,
    bem_id: UUID,
    admin: AuthSession = Depends(require_admin),  # noqa: B008
    service: PatrimonioService = Depends(get_patrimonio_service),  # noqa: B008
    date_provider: DateProvider = Depends(get_date_provider),  # noqa: B008
) -> Any:
    """Render an asset with its movement history and the movement form."""
    context = {
        "bem": service.get_bem(bem_id),
        "movimentacoes": service.list_movimentacoes(bem_id),
        "values": {"data_movimentacao": date_provider.today().isoformat()},
        "errors": {},
        "today": date_provider.today().isoformat(),
    }
    return _render(request, "admin/bem_detail.html", admin, context)


@router.post("/patrimonio/{bem_id}/movimentacoes", name="admin_bem_move")
async def bem_move(
    request: Request,
    bem_id: UUID,
    admin: AuthSession = Depends(require_admin),  # noqa: B008
    service: PatrimonioService = Depends(get_patrimonio_service),  # noqa: B008
    date_provider: DateProvider = Depends(get_date_provider),  # noqa: B008
) -> Any:
    """Register a movement of an asset."""
    data, _ = await read_form(request)
    try:
        await run_in_threadpool(service.registrar_movimentacao, bem_id, data)
    except ValidationFailedError as e:
        context = {
            "bem": await run_in_threadpool(service.get_bem, bem_id),
            "movimentacoes": await run_in_threadpool(service.list_movimentacoes, bem_id),
            "values": data,
            "errors": e.errors,
            "today": date_provider.today().isoformat(),
        }
        return _render(request, "admin/bem_detail.html", admin, context, status_code=422)
    flash(request, strings.ADMIN_MOVEMENT_SAVED)
    return _redirect(f"/admin/patrimonio/{bem_id}")


@router.get("/patrimonio/{bem_id}/editar", name="admin_bem_edit")
def bem_edit(
    request: Request,
    bem_id: UUID,
    admin: AuthSession = Depends(require_admin),  # noqa: B008
    service: PatrimonioService = Depends(get_patrimonio_service),  # noqa: B008
) -> Any:
    """Render the form of an existing asset."""
    bem = service.get_bem(bem_id)
    return _render(request, "admin/bem_form.html", admin, {"bem": bem, "values": _bem_values(bem), "errors": {}})


@router.post("/patrimonio/{bem_id}", name="admin_bem_update")
async def bem_update(
    request: Request,
    bem_id: UUID,
    admin: AuthSession = Depends(require_admin),  # noqa: B008
    service: PatrimonioService = Depends(get_patrimonio_service),  # noqa: B008
) -> Any:
    """Update an asset from the submitted form."""
    data, files = await read_form(request, ("foto",))
    try:
        await run_in_threadpool(service.update_bem, bem_id, data, files["foto"])
    except ValidationFailedError as e:
        context = {"bem": await run_in_threadpool(service.get_bem, bem_id), "values": data, "errors": e.errors}
        return _render(request, "admin/bem_form.html", admin, context, status_code=422)
    flash(request, strings.ADMIN_SAVED)
    return _redirect(f"/admin/patrimonio/{bem_id}")


@router.get("/patrimonio/{bem_id}/excluir", name="admin_bem_confirm_delete")
def bem_confirm_delete(
    request: Request,
    bem_id: UUID,
    admin: AuthSession = Depends(require_admin),  # noqa: B008
    service: PatrimonioService = Depends(get_patrimonio_service),  # noqa: B008
) -> Any:
    """Ask for confirmation before deleting an asset."""
    bem = service.get_bem(bem_id)
    context = {
        "label": f"{bem.nome} ({bem.numero_tombamento})",
        "action": f"/admin/patrimonio/{bem_id}/excluir",
        "back": f"/admin/patrimonio/{bem_id}",
    }
    return _render(request, "admin/confirm_delete.html", admin, context)


@router.post("/patrimonio/{bem_id}/excluir", name="admin_bem_delete")
def bem_delete(
    request: Request,
    bem_id: UUID,
    admin: AuthSession = Depends(require_admin),  # noqa: B008
    service: PatrimonioService = Depends(get_patrimonio_service),  # noqa: B008
) -> RedirectResponse:
    """Delete an asset."""
    service.delete_bem(bem_id)
    flash(request, strings.ADMIN_DELETED)
    return _redirect("/admin/patrimonio")
