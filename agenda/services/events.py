import logging
from datetime import date

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from agenda.core.errors import Internal, InvalidTransition, NotFound, Unauthorized, ValidationError
from agenda.models.enums import EventStatus
from agenda.models.event import Event, utcnow
from agenda.repositories.events import EventStore
from agenda.schemas.event import EventCreate, EventPatch
from agenda.services import policy
from agenda.services.identity import Identity

logger = logging.getLogger(__name__)

NOT_NULL_FIELDS = ("title", "event_type", "start_date", "end_date", "all_day")


# ----------------------------
# Helpers
# ----------------------------
def _check_dates(start_date: date, end_date: date) -> None:
    if end_date < start_date:
        raise ValidationError("end_date must be on or after start_date")


def _load(store: EventStore, event_id: int) -> Event:
    event = store.get(event_id)
    if event is None:
        raise NotFound("event not found")
    return event


def _raise_lost_race(identity: Identity, message: str) -> None:
    # supervisor não tem guarda de dono/status: 0 linhas só se o evento sumiu
    if identity.is_privileged:
        raise NotFound("event not found")
    raise Unauthorized(message)


def _commit(db: Session) -> None:
    try:
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("commit failed")
        raise Internal()


# ----------------------------
# Leitura
# ----------------------------
def get_event(db: Session, identity: Identity, event_id: int) -> Event:
    event = _load(EventStore(db), event_id)
    policy.ensure_can_view(identity, event)
    return event


def list_my_events(db: Session, identity: Identity) -> list[Event]:
    return EventStore(db).list_by_owner(identity.id)


def list_approved_events(db: Session, identity: Identity) -> list[Event]:
    return EventStore(db).list_by_status(EventStatus.approved)


def list_pending_events(db: Session, identity: Identity) -> list[Event]:
    policy.ensure_can_list_pending(identity)
    return EventStore(db).list_by_status(EventStatus.pending)


# ----------------------------
# Escrita
# ----------------------------
def create_event(db: Session, identity: Identity, data: EventCreate) -> Event:
    _check_dates(data.start_date, data.end_date)

    fields = data.model_dump()
    if fields["all_day"]:
        fields["start_time"] = None
        fields["end_time"] = None

    now = utcnow()
    store = EventStore(db)
    try:
        event = store.add(
            Event(
                **fields,
                status=EventStatus.pending,
                created_by=identity.id,
                created_at=now,
                updated_at=now,
            )
        )
        event_id = event.id
    except SQLAlchemyError:
        db.rollback()
        logger.exception("could not insert event")
        raise Internal()
    _commit(db)

    logger.info("event %s created by user %s", event_id, identity.id)
    return store.get(event_id)


def update_event(db: Session, identity: Identity, event_id: int, patch: EventPatch) -> Event:
    changes = patch.changes()
    store = EventStore(db)
    event = _load(store, event_id)
    policy.ensure_can_edit(identity, event, changes)

    for name in NOT_NULL_FIELDS:
        if name in changes and changes[name] is None:
            raise ValidationError(f"{name} cannot be null")

    _check_dates(
        changes.get("start_date", event.start_date),
        changes.get("end_date", event.end_date),
    )

    all_day = changes.get("all_day", event.all_day)
    if all_day and {"all_day", "start_time", "end_time"}.intersection(changes):
        changes["start_time"] = None
        changes["end_time"] = None

    if not changes:
        return event

    owner_id = None if identity.is_privileged else identity.id
    affected = store.apply_patch(event_id, changes, owner_id=owner_id)
    if not affected:
        db.rollback()
        logger.info("update of event %s by user %s lost the race", event_id, identity.id)
        _raise_lost_race(identity, "event is no longer editable")
    _commit(db)

    logger.info("event %s updated by user %s (%s)", event_id, identity.id, ", ".join(sorted(changes)))
    return store.get(event_id)


def delete_event(db: Session, identity: Identity, event_id: int) -> None:
    store = EventStore(db)
    event = _load(store, event_id)
    policy.ensure_can_delete(identity, event)

    owner_id = None if identity.is_privileged else identity.id
    if not store.delete(event_id, owner_id=owner_id):
        db.rollback()
        _raise_lost_race(identity, "event is no longer deletable")
    _commit(db)

    logger.info("event %s deleted by user %s", event_id, identity.id)


def _decide(db: Session, identity: Identity, event_id: int, status: EventStatus) -> Event:
    store = EventStore(db)
    event = _load(store, event_id)
    policy.ensure_can_decide(identity, event)

    if not store.decide(event_id, status, identity.id):
        db.rollback()
        raise InvalidTransition("event is no longer pending")
    _commit(db)

    logger.info("event %s %s by user %s", event_id, status.value, identity.id)
    return store.get(event_id)


def approve_event(db: Session, identity: Identity, event_id: int) -> Event:
    return _decide(db, identity, event_id, EventStatus.approved)


def reject_event(db: Session, identity: Identity, event_id: int) -> Event:
    return _decide(db, identity, event_id, EventStatus.rejected)
