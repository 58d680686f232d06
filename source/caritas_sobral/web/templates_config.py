from pathlib import Path

from caritas_sobral.models.editais import EditalStatus
from caritas_sobral.models.patrimonio import EstadoConservacao, TipoBem
from caritas_sobral.providers.date import DateProvider
from caritas_sobral.services.links import noticia_link
from caritas_sobral.services.patrimonio import format_currency
from caritas_sobral.web.flash import pop_flashed_messages
from fastapi.templating import Jinja2Templates

from . import strings

STATUS_BADGES = {
    EditalStatus.OPEN: "badge-open",
    EditalStatus.IN_PROGRESS: "badge-progress",
    EditalStatus.FINISHED: "badge-finished",
    EditalStatus.CANCELLED: "badge-cancelled",
}


def estado_label(value: str | EstadoConservacao | None) -> str:
    """Returns the display name of an asset condition."""
    if value is None:
        return DateProvider.PLACEHOLDER
    try:
        return EstadoConservacao(value).label
    except ValueError:
        return str(value)


templates = Jinja2Templates(directory=Path(__file__).parent / "templates")

templates.env.globals["strings"] = strings
templates.env.globals["edital_statuses"] = list(EditalStatus)
templates.env.globals["estados"] = list(EstadoConservacao)
templates.env.globals["tipos_bem"] = list(TipoBem)
templates.env.globals["noticia_link"] = noticia_link
templates.env.globals["get_flashed_messages"] = pop_flashed_messages

templates.env.filters["date_br"] = DateProvider.format_date
templates.env.filters["currency"] = format_currency
templates.env.filters["estado_label"] = estado_label
templates.env.filters["status_badge"] = lambda status: STATUS_BADGES.get(status, "badge-open")
