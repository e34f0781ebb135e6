from sqlalchemy import delete, select, update
from sqlalchemy.orm import Session, joinedload

from agenda.core.errors import ValidationError
from agenda.models.enums import EventStatus
from agenda.models.event import Event, utcnow

# únicos campos que um patch pode tocar; id, dono, status e decisão ficam de fora
MUTABLE_FIELDS = frozenset({
    "title",
    "description",
    "event_type",
    "start_date",
    "end_date",
    "start_time",
    "end_time",
    "all_day",
    "google_calendar_event_id",
})


class EventStore:
    """Acesso aos eventos no banco. Não faz commit: quem chama decide a transação."""

    def __init__(self, db: Session):
        self.db = db

    def _select(self):
        return select(Event).options(joinedload(Event.creator))

    def get(self, event_id: int) -> Event | None:
        return self.db.execute(
            self._select().where(Event.id == event_id)
        ).scalar_one_or_none()

    def list_by_owner(self, user_id: int) -> list[Event]:
        q = self._select().where(Event.created_by == user_id)
        return self.db.execute(q.order_by(Event.start_date, Event.id)).scalars().all()

    def list_by_status(self, status: EventStatus) -> list[Event]:
        q = self._select().where(Event.status == status)
        return self.db.execute(q.order_by(Event.start_date, Event.id)).scalars().all()

    def add(self, event: Event) -> Event:
        self.db.add(event)
        self.db.flush()
        return event

    def apply_patch(self, event_id: int, fields: dict, owner_id: int | None = None) -> int:
        """
        Atualiza só os campos informados e renova updated_at.

        Com ``owner_id`` o UPDATE só pega o evento se ele ainda for daquele
        dono e estiver pendente. Devolve o número de linhas afetadas.
        """
        blocked = sorted(set(fields) - MUTABLE_FIELDS)
        if blocked:
            raise ValidationError(f"fields cannot be changed: {', '.join(blocked)}")

        stmt = update(Event).where(Event.id == event_id)
        if owner_id is not None:
            stmt = stmt.where(Event.created_by == owner_id, Event.status == EventStatus.pending)

        result = self.db.execute(stmt.values(**fields, updated_at=utcnow()))
        return result.rowcount

    def decide(self, event_id: int, status: EventStatus, approver_id: int) -> int:
        """Aprova/rejeita só se ainda estiver pendente; 0 linhas = já decidido."""
        now = utcnow()
        result = self.db.execute(
            update(Event)
            .where(Event.id == event_id, Event.status == EventStatus.pending)
            .values(status=status, approved_by=approver_id, approved_at=now, updated_at=now)
        )
        return result.rowcount

    def delete(self, event_id: int, owner_id: int | None = None) -> int:
        stmt = delete(Event).where(Event.id == event_id)
        if owner_id is not None:
            stmt = stmt.where(Event.created_by == owner_id, Event.status == EventStatus.pending)
        return self.db.execute(stmt).rowcount
