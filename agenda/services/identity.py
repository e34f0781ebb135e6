from dataclasses import dataclass

from sqlalchemy.orm import Session

from agenda.core.config import settings
from agenda.core.errors import Unauthenticated
from agenda.core.security import sign, verify
from agenda.models.enums import AuthType, Role
from agenda.models.user import User


@dataclass(frozen=True)
class Identity:
    """Quem está fazendo a requisição; montado a partir do banco, nunca do token."""

    id: int
    email: str
    full_name: str | None
    role: Role
    auth_type: AuthType = AuthType.local
    active: bool = True
    avatar_url: str | None = None

    @property
    def is_privileged(self) -> bool:
        return self.role.is_privileged

    @classmethod
    def from_user(cls, user: User) -> "Identity":
        return cls(
            id=user.id,
            email=user.email,
            full_name=user.full_name,
            role=user.role,
            auth_type=user.auth_type,
            active=user.active,
            avatar_url=user.avatar_url,
        )


def issue_token(user: User) -> str:
    return sign({"sub": str(user.id)}, secret=settings.AUTH_SECRET, ttl_seconds=settings.TOKEN_TTL_SECONDS)


def resolve_identity(db: Session, token: str | None) -> Identity:
    if not token:
        raise Unauthenticated("missing bearer token")

    payload = verify(token, settings.AUTH_SECRET)
    if not payload:
        raise Unauthenticated("invalid or expired token")

    try:
        user_id = int(payload.get("sub"))
    except (TypeError, ValueError):
        raise Unauthenticated("invalid or expired token")

    user = db.get(User, user_id)
    if user is None or not user.active:
        raise Unauthenticated("user not found or inactive")

    return Identity.from_user(user)
