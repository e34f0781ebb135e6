from agenda.schemas.user import ProfileUpdate, UserCreate, UserOut, UserUpdate
from agenda.schemas.auth import LoginIn, LoginOut, VerifyOut
from agenda.schemas.event import (
    DecisionIn,
    EventCreate,
    EventEnvelope,
    EventListEnvelope,
    EventOut,
    EventPatch,
)
