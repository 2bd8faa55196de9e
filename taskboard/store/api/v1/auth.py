"""Passwordless development sign-in.

A session is an opaque bearer token mapped to a user row. Signing in with an
unknown email creates the user.
"""

import logging

from fastapi import APIRouter, Depends, Response, status
from sqlmodel import Session

from ...db.crud import close_session, get_or_create_user, open_session
from ...db.models import User
from ...db.session import get_session
from ...schemas.auth import SessionOut, SignIn, UserOut
from ..deps import current_user, get_token

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth")


@router.post("/sign-in", response_model=SessionOut)
def sign_in(body: SignIn, session: Session = Depends(get_session)):
    user = get_or_create_user(session, body.email.strip().lower())
    auth = open_session(session, user)
    logger.info("Signed in user_id=%s", user.id)
    return SessionOut(access_token=auth.token, user=UserOut.model_validate(user))


@router.get("/user", response_model=UserOut)
def get_user(user: User = Depends(current_user)):
    return user


@router.post("/sign-out", status_code=status.HTTP_204_NO_CONTENT)
def sign_out(token: str = Depends(get_token), session: Session = Depends(get_session)):
    close_session(session, token)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
