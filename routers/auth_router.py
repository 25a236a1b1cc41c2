from datetime import datetime, timedelta, timezone
from typing import Optional
import uuid

from fastapi import APIRouter, Depends, Header, HTTPException, Request
from sqlalchemy.orm import Session

from core.auth import extract_bearer_token, get_current_user
from core.config import settings
from core.database import get_db
from crud.session_crud import create_session, delete_session_by_token
from crud.user_crud import authenticate_user
from schemas.auth_schema import AuthTokenResponse, LoginRequest
from schemas.session_schema import SessionCreate
from schemas.user_schema import UserResponse

router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.post("/login", response_model=AuthTokenResponse)
def login(body: LoginRequest, request: Request, db: Session = Depends(get_db)):
    """
    Verify email and password and issue a bearer token.
    """
    user = authenticate_user(db, body.email, body.password)
    if not user:
        raise HTTPException(status_code=401, detail="Invalid credentials")

    # Issue session token
    token = uuid.uuid4().hex
    expires_at = datetime.now(timezone.utc) + timedelta(days=settings.SESSION_TTL_DAYS)
    ip = request.client.host if request.client else None
    ua = request.headers.get("user-agent")

    session = create_session(
        db,
        payload=SessionCreate(
            user_id=user.id,
            token=token,
            expires_at=expires_at,
            ip_address=ip,
            user_agent=ua,
        ),
    )

    return AuthTokenResponse(access_token=session.token, user=UserResponse.model_validate(user))


@router.get("/me", response_model=UserResponse)
def get_me(current_user = Depends(get_current_user)):
    return current_user


@router.post("/logout")
def logout(
    authorization: Optional[str] = Header(None),
    db: Session = Depends(get_db),
    current_user = Depends(get_current_user),
):
    delete_session_by_token(db, extract_bearer_token(authorization))
    return {"success": True}
