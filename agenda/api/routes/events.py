from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from agenda.db.session import get_db
from agenda.api.deps import get_current_user
from agenda.schemas.event import DecisionIn, EventCreate, EventEnvelope, EventListEnvelope, EventPatch
from agenda.services import events as event_service
from agenda.services.identity import Identity

router = APIRouter(prefix="/api/events", tags=["events"])


# ----------------------------
# LISTAS
# ----------------------------
@router.get("/my-events", response_model=EventListEnvelope)
def my_events(db: Session = Depends(get_db), current_user: Identity = Depends(get_current_user)):
    return {"events": event_service.list_my_events(db, current_user)}


@router.get("/approved", response_model=EventListEnvelope)
def approved_events(db: Session = Depends(get_db), current_user: Identity = Depends(get_current_user)):
    return {"events": event_service.list_approved_events(db, current_user)}


@router.get("/pending", response_model=EventListEnvelope)
def pending_events(db: Session = Depends(get_db), current_user: Identity = Depends(get_current_user)):
    return {"events": event_service.list_pending_events(db, current_user)}


# ----------------------------
# CRIAR / DECIDIR
# ----------------------------
@router.post("/create", response_model=EventEnvelope, status_code=status.HTTP_201_CREATED)
def create_event(
    payload: EventCreate,
    db: Session = Depends(get_db),
    current_user: Identity = Depends(get_current_user),
):
    return {"event": event_service.create_event(db, current_user, payload)}


@router.post("/approve", response_model=EventEnvelope)
def approve_event(
    payload: DecisionIn,
    db: Session = Depends(get_db),
    current_user: Identity = Depends(get_current_user),
):
    return {"event": event_service.approve_event(db, current_user, payload.event_id)}


@router.post("/reject", response_model=EventEnvelope)
def reject_event(
    payload: DecisionIn,
    db: Session = Depends(get_db),
    current_user: Identity = Depends(get_current_user),
):
    return {"event": event_service.reject_event(db, current_user, payload.event_id)}


# ----------------------------
# POR ID
# ----------------------------
@router.get("/{event_id}", response_model=EventEnvelope)
def get_event(event_id: int, db: Session = Depends(get_db), current_user: Identity = Depends(get_current_user)):
    return {"event": event_service.get_event(db, current_user, event_id)}


@router.put("/{event_id}", response_model=EventEnvelope)
def update_event(
    event_id: int,
    payload: EventPatch,
    db: Session = Depends(get_db),
    current_user: Identity = Depends(get_current_user),
):
    return {"event": event_service.update_event(db, current_user, event_id, payload)}


@router.delete("/{event_id}")
def delete_event(event_id: int, db: Session = Depends(get_db), current_user: Identity = Depends(get_current_user)):
    event_service.delete_event(db, current_user, event_id)
    return {"message": "Event deleted"}
