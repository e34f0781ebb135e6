from sqlalchemy.orm import DeclarativeBase

class Base(DeclarativeBase):
    pass

# registra os models no metadata (alembic / create_all)
import agenda.models.user  # noqa: E402,F401
import agenda.models.event  # noqa: E402,F401
