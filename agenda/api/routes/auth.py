from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from agenda.db.session import get_db
from agenda.api.deps import get_current_user
from agenda.schemas.auth import LoginIn, LoginOut, VerifyOut
from agenda.schemas.user import UserOut
from agenda.services.identity import Identity, issue_token
from agenda.services.users import authenticate_local

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/login-local", response_model=LoginOut)
def login_local(payload: LoginIn, db: Session = Depends(get_db)):
    user = authenticate_local(db, payload.email, payload.password)
    return LoginOut(user=UserOut.model_validate(user), token=issue_token(user))


@router.post("/verify", response_model=VerifyOut)
def verify_token(current_user: Identity = Depends(get_current_user)):
    return VerifyOut(user=UserOut.model_validate(current_user))
