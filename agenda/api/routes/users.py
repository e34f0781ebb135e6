from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from agenda.db.session import get_db
from agenda.schemas import ProfileUpdate, UserCreate, UserOut, UserUpdate
from agenda.api.deps import get_current_user
from agenda.services import users as user_service
from agenda.services.identity import Identity

router = APIRouter(prefix="/api/users", tags=["users"])


@router.get("", response_model=list[UserOut])
def list_users(db: Session = Depends(get_db), current_user: Identity = Depends(get_current_user)):
    return user_service.list_users(db, current_user)


@router.post("", response_model=UserOut, status_code=status.HTTP_201_CREATED)
def create_user(payload: UserCreate, db: Session = Depends(get_db), current_user: Identity = Depends(get_current_user)):
    return user_service.create_user(db, current_user, payload)


# "/me" antes de "/{user_id}"
@router.get("/me", response_model=UserOut)
def get_me(db: Session = Depends(get_db), current_user: Identity = Depends(get_current_user)):
    return user_service.get_profile(db, current_user)


@router.patch("/me", response_model=UserOut)
def update_me(payload: ProfileUpdate, db: Session = Depends(get_db), current_user: Identity = Depends(get_current_user)):
    return user_service.update_profile(db, current_user, payload)


@router.get("/{user_id}", response_model=UserOut)
def get_user(user_id: int, db: Session = Depends(get_db), current_user: Identity = Depends(get_current_user)):
    return user_service.get_user(db, current_user, user_id)


@router.patch("/{user_id}", response_model=UserOut)
def update_user(user_id: int, payload: UserUpdate, db: Session = Depends(get_db), current_user: Identity = Depends(get_current_user)):
    return user_service.update_user(db, current_user, user_id, payload)
