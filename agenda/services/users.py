import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from agenda.core.errors import AlreadyExists, NotFound, Unauthenticated
from agenda.core.security import hash_password, verify_password
from agenda.models.enums import AuthType, Role
from agenda.models.user import User
from agenda.schemas.user import ProfileUpdate, UserCreate, UserUpdate
from agenda.services import policy
from agenda.services.identity import Identity

logger = logging.getLogger(__name__)


def get_by_email(db: Session, email: str) -> User | None:
    return db.execute(select(User).where(User.email == email.lower())).scalar_one_or_none()


def authenticate_local(db: Session, email: str, password: str) -> User:
    user = get_by_email(db, email)
    if (
        user is None
        or not user.active
        or user.auth_type != AuthType.local
        or not verify_password(password, user.password_hash)
    ):
        raise Unauthenticated("invalid credentials")
    return user


def list_users(db: Session, identity: Identity) -> list[User]:
    policy.ensure_can_manage_users(identity)
    return db.execute(select(User).order_by(User.id)).scalars().all()


def get_user(db: Session, identity: Identity, user_id: int) -> User:
    policy.ensure_can_manage_users(identity)
    user = db.get(User, user_id)
    if not user:
        raise NotFound("user not found")
    return user


def get_profile(db: Session, identity: Identity) -> User:
    user = db.get(User, identity.id)
    if not user:
        raise NotFound("user not found")
    return user


def update_profile(db: Session, identity: Identity, payload: ProfileUpdate) -> User:
    # papel e status ficam de fora: só supervisor muda (update_user)
    user = get_profile(db, identity)

    changes = payload.model_dump(exclude_unset=True)
    if "full_name" in changes:
        user.full_name = changes["full_name"]
    if "avatar_url" in changes:
        user.avatar_url = changes["avatar_url"]

    db.commit()
    db.refresh(user)
    return user


def create_user(db: Session, identity: Identity, payload: UserCreate) -> User:
    policy.ensure_can_manage_users(identity)
    if get_by_email(db, payload.email):
        raise AlreadyExists("email already exists")

    user = User(
        email=payload.email.lower(),
        full_name=payload.full_name,
        avatar_url=payload.avatar_url,
        role=payload.role,
        auth_type=AuthType.local,
        password_hash=hash_password(payload.password),
        active=True,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info("user %s (%s) created by user %s", user.id, user.role.value, identity.id)
    return user


def update_user(db: Session, identity: Identity, user_id: int, payload: UserUpdate) -> User:
    user = get_user(db, identity, user_id)

    if payload.full_name is not None:
        user.full_name = payload.full_name
    if payload.role is not None and payload.role != user.role:
        logger.info("user %s role %s -> %s by user %s", user.id, user.role.value, payload.role.value, identity.id)
        user.role = payload.role
    if payload.active is not None:
        user.active = payload.active

    db.commit()
    db.refresh(user)
    return user


def ensure_admin(db: Session, email: str, password: str, full_name: str | None = None) -> User:
    """Cria a conta admin se não existir; se existir, garante papel privilegiado e ativa."""
    user = get_by_email(db, email)
    if not user:
        user = User(
            email=email.lower(),
            full_name=full_name,
            role=Role.admin,
            auth_type=AuthType.local,
            password_hash=hash_password(password),
            active=True,
        )
        db.add(user)
        db.commit()
        logger.info("[BOOTSTRAP] admin criado: %s", email)
    else:
        if not user.role.is_privileged or not user.active:
            user.role = Role.admin
            user.active = True
            db.commit()
        logger.info("[BOOTSTRAP] admin OK: %s", email)
    return user
