from datetime import date, datetime, time

from pydantic import BaseModel, Field, field_validator

from agenda.models.enums import EventStatus, EventType


class EventCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    description: str | None = None
    event_type: EventType
    start_date: date
    end_date: date
    all_day: bool = False
    start_time: time | None = None
    end_time: time | None = None

    @field_validator("title", mode="before")
    @classmethod
    def strip_title(cls, value):
        if isinstance(value, str):
            value = value.strip()
        return value


class EventPatch(BaseModel):
    """Campos que podem ser alterados via PUT; qualquer outro campo é recusado."""

    title: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None
    event_type: EventType | None = None
    start_date: date | None = None
    end_date: date | None = None
    all_day: bool | None = None
    start_time: time | None = None
    end_time: time | None = None

    # só supervisor/admin
    google_calendar_event_id: str | None = Field(default=None, max_length=255)

    @field_validator("title", mode="before")
    @classmethod
    def strip_title(cls, value):
        if isinstance(value, str):
            value = value.strip()
        return value

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True)

    class Config:
        extra = "forbid"


class DecisionIn(BaseModel):
    event_id: int = Field(..., alias="eventId")

    class Config:
        populate_by_name = True


class CreatorOut(BaseModel):
    full_name: str | None
    email: str

    class Config:
        from_attributes = True


class EventOut(BaseModel):
    id: int
    title: str
    description: str | None
    start_date: date
    end_date: date
    start_time: time | None
    end_time: time | None
    all_day: bool
    event_type: EventType
    status: EventStatus
    created_by: int
    created_at: datetime
    updated_at: datetime
    approved_by: int | None
    approved_at: datetime | None
    google_calendar_event_id: str | None
    creator: CreatorOut | None = None

    class Config:
        from_attributes = True


class EventEnvelope(BaseModel):
    event: EventOut


class EventListEnvelope(BaseModel):
    events: list[EventOut]
