"""
Regras de autorização do ciclo de vida dos eventos.

Funções puras: recebem a identidade e o estado atual do evento e decidem.
As funções ``ensure_*`` levantam o erro correspondente quando a ação é negada.
"""

from agenda.core.errors import InvalidTransition, Unauthorized
from agenda.models.enums import EventStatus

# campos do PUT que só supervisor/admin pode mexer
PRIVILEGED_FIELDS = frozenset({"google_calendar_event_id"})


def is_owner(identity, event) -> bool:
    return event.created_by == identity.id


def can_view(identity, event) -> bool:
    return identity.is_privileged or is_owner(identity, event) or event.status == EventStatus.approved


def can_list_pending(identity) -> bool:
    return identity.is_privileged


def can_edit(identity, event) -> bool:
    if identity.is_privileged:
        return True
    return is_owner(identity, event) and event.status == EventStatus.pending


def can_delete(identity, event) -> bool:
    # mesma janela do editar: dono só antes da decisão
    return can_edit(identity, event)


def can_decide(identity) -> bool:
    return identity.is_privileged


def can_manage_users(identity) -> bool:
    return identity.is_privileged


def ensure_can_view(identity, event) -> None:
    if not can_view(identity, event):
        raise Unauthorized("you cannot view this event")


def ensure_can_list_pending(identity) -> None:
    if not can_list_pending(identity):
        raise Unauthorized("only supervisors can list pending events")


def ensure_can_edit(identity, event, fields=()) -> None:
    if not can_edit(identity, event):
        raise Unauthorized("only the owner can edit a pending event")
    if not identity.is_privileged and PRIVILEGED_FIELDS.intersection(fields):
        raise Unauthorized("only supervisors can change the calendar sync id")


def ensure_can_delete(identity, event) -> None:
    if not can_delete(identity, event):
        raise Unauthorized("only the owner can delete a pending event")


def ensure_can_decide(identity, event) -> None:
    if not can_decide(identity):
        raise Unauthorized("only supervisors can approve or reject events")
    if event.status != EventStatus.pending:
        raise InvalidTransition(f"event is already {event.status.value}")


def ensure_can_manage_users(identity) -> None:
    if not can_manage_users(identity):
        raise Unauthorized("only supervisors can manage users")
