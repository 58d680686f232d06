"""This module derives the status shown for a call for proposals.

The stored status is the last one chosen by an editor. What every viewer
sees is derived from it, the optional deadline and today's date in the
reference timezone. The same function runs when a record is saved and
whenever one is displayed, so the two can never disagree.
"""

from datetime import date, datetime

from caritas_sobral.models.editais import EditalStatus
from caritas_sobral.providers.date import DateProvider


def derive_status(
    stored_status: EditalStatus,
    deadline: date | datetime | str | None,
    today: date,
) -> EditalStatus:
    """Computes the status that must be displayed for an edital.

    Args:
        stored_status: The stored status.
        deadline: The optional deadline (`data_finalizacao`). Strings are
            parsed as calendar dates; malformed ones count as absent.
        today: The current date in the reference timezone.

    Returns:
        `CANCELLED` when cancelled. Otherwise, once the deadline has strictly
        passed, `IN_PROGRESS` if that was stored and `FINISHED` for anything
        else. In every other case the stored status is returned unchanged.
    """
    if stored_status is EditalStatus.CANCELLED:
        return EditalStatus.CANCELLED

    deadline_date = DateProvider.parse_calendar_date(deadline)
    if deadline_date is None:
        return stored_status

    if today > deadline_date:
        if stored_status is EditalStatus.IN_PROGRESS:
            return EditalStatus.IN_PROGRESS
        return EditalStatus.FINISHED
    return stored_status


def can_set_in_progress(deadline: date | datetime | str | None, today: date) -> bool:
    """Checks whether an editor may choose "Em andamento".

    Args:
        deadline: The deadline being saved.
        today: The current date in the reference timezone.

    Returns:
        True only when a well-formed deadline has already passed.
    """
    deadline_date = DateProvider.parse_calendar_date(deadline)
    return deadline_date is not None and today > deadline_date


def resolve_status_for_write(
    chosen_status: EditalStatus,
    deadline: date | datetime | str | None,
    today: date,
) -> EditalStatus:
    """Computes the status persisted when an edital is created or updated.

    Args:
        chosen_status: The status selected in the form.
        deadline: The deadline being saved.
        today: The current date in the reference timezone.

    Returns:
        The derived status, exactly as `derive_status` would display it.
    """
    return derive_status(chosen_status, deadline, today)
