"""Tests for the event lifecycle service and the event store."""

from datetime import date, time

import pytest

from agenda.core.errors import InvalidTransition, NotFound, Unauthorized, ValidationError
from agenda.models.enums import EventStatus, EventType
from agenda.models.event import Event
from agenda.repositories.events import EventStore
from agenda.schemas.event import EventCreate, EventPatch
from agenda.services import events as event_service


def new_event(**overrides) -> EventCreate:
    data = {
        "title": "Semana da leitura",
        "event_type": EventType.projeto_pedagogico,
        "start_date": date(2025, 8, 4),
        "end_date": date(2025, 8, 8),
        "all_day": True,
    }
    data.update(overrides)
    return EventCreate(**data)


def test_create_sets_owner_and_pending(db, ana, identity):
    event = event_service.create_event(db, identity(ana), new_event())

    assert event.status == EventStatus.pending
    assert event.created_by == ana.id
    assert event.approved_by is None
    assert event.approved_at is None
    assert event.creator.email == "ana@escola.edu.br"


def test_create_validates_date_order(db, ana, identity):
    with pytest.raises(ValidationError):
        event_service.create_event(db, identity(ana), new_event(end_date=date(2025, 8, 1)))

    assert db.query(Event).count() == 0


def test_approve_then_approve_again(db, ana, beatriz, identity):
    event = event_service.create_event(db, identity(ana), new_event())

    approved = event_service.approve_event(db, identity(beatriz), event.id)
    first_decision = (approved.approved_by, approved.approved_at)
    assert approved.status == EventStatus.approved

    with pytest.raises(InvalidTransition):
        event_service.approve_event(db, identity(beatriz), event.id)
    with pytest.raises(InvalidTransition):
        event_service.reject_event(db, identity(beatriz), event.id)

    db.expire_all()
    current = event_service.get_event(db, identity(ana), event.id)
    assert current.status == EventStatus.approved
    assert (current.approved_by, current.approved_at) == first_decision


def test_denied_update_does_not_mutate(db, ana, caio, identity):
    event = event_service.create_event(db, identity(ana), new_event())

    with pytest.raises(Unauthorized):
        event_service.update_event(db, identity(caio), event.id, EventPatch(title="Outro"))

    db.expire_all()
    assert event_service.get_event(db, identity(ana), event.id).title == "Semana da leitura"


def test_owner_update_refreshes_updated_at(db, ana, identity):
    event = event_service.create_event(db, identity(ana), new_event())
    before = event.updated_at

    updated = event_service.update_event(
        db, identity(ana), event.id, EventPatch(all_day=False, start_time=time(14, 0), end_time=time(16, 0))
    )

    assert updated.all_day is False
    assert updated.start_time == time(14, 0)
    assert updated.updated_at >= before
    assert updated.created_at == event.created_at


def test_empty_patch_returns_event_unchanged(db, ana, identity):
    event = event_service.create_event(db, identity(ana), new_event())
    before = event.updated_at

    same = event_service.update_event(db, identity(ana), event.id, EventPatch())
    assert same.updated_at == before


def test_missing_event(db, beatriz, identity):
    with pytest.raises(NotFound):
        event_service.get_event(db, identity(beatriz), 42)
    with pytest.raises(NotFound):
        event_service.delete_event(db, identity(beatriz), 42)
    with pytest.raises(NotFound):
        event_service.reject_event(db, identity(beatriz), 42)


def test_pending_listing_requires_privilege(db, ana, beatriz, identity):
    event_service.create_event(db, identity(ana), new_event())

    with pytest.raises(Unauthorized):
        event_service.list_pending_events(db, identity(ana))
    assert len(event_service.list_pending_events(db, identity(beatriz))) == 1


def test_supervisor_deletes_rejected_event(db, ana, beatriz, identity):
    event = event_service.create_event(db, identity(ana), new_event())
    event_service.reject_event(db, identity(beatriz), event.id)

    with pytest.raises(Unauthorized):
        event_service.delete_event(db, identity(ana), event.id)

    event_service.delete_event(db, identity(beatriz), event.id)
    assert db.query(Event).count() == 0


# -----------------------------------------------------------------------------
# Store
# -----------------------------------------------------------------------------


def test_store_refuses_immutable_fields(db, ana, identity):
    event = event_service.create_event(db, identity(ana), new_event())

    with pytest.raises(ValidationError):
        EventStore(db).apply_patch(event.id, {"created_by": 999})
    with pytest.raises(ValidationError):
        EventStore(db).apply_patch(event.id, {"status": EventStatus.approved})


def test_store_owner_patch_is_guarded_by_status(db, ana, beatriz, identity):
    event = event_service.create_event(db, identity(ana), new_event())
    event_service.approve_event(db, identity(beatriz), event.id)

    store = EventStore(db)
    assert store.apply_patch(event.id, {"title": "x"}, owner_id=ana.id) == 0
    assert store.delete(event.id, owner_id=ana.id) == 0
    db.rollback()


def test_store_decide_only_from_pending(db, ana, beatriz, identity):
    event = event_service.create_event(db, identity(ana), new_event())
    store = EventStore(db)

    assert store.decide(event.id, EventStatus.rejected, beatriz.id) == 1
    assert store.decide(event.id, EventStatus.approved, beatriz.id) == 0
    db.commit()

    db.expire_all()
    assert store.get(event.id).status == EventStatus.rejected


def test_approver_reference_cannot_be_nulled_by_user_deletion():
    (fk,) = Event.__table__.c.approved_by.foreign_keys
    assert fk.ondelete == "RESTRICT"
