"""
Authentication dependencies for FastAPI routes - Firebase Authentication
"""
import logging
from datetime import datetime

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session
from firebase_admin import auth as firebase_auth

from api.auth.firebase import verify_firebase_token
from src.classroom.service import ClassroomService
from src.database.db import get_db
from src.database.models import User

logger = logging.getLogger("api.auth.deps")

# HTTP Bearer security scheme
security = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security),
    db: Session = Depends(get_db)
) -> User:
    """
    Get the current authenticated user from Firebase ID token.

    - Verifies Firebase ID token
    - Creates user in database on first login
    - Updates last_login timestamp

    Raises HTTPException 401 if not authenticated.
    """
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Invalid or expired session",
        headers={"WWW-Authenticate": "Bearer"},
    )

    if not credentials:
        raise credentials_exception

    try:
        decoded_token = verify_firebase_token(credentials.credentials)
    except (firebase_auth.InvalidIdTokenError,
            firebase_auth.ExpiredIdTokenError,
            firebase_auth.RevokedIdTokenError) as e:
        logger.warning(f"Firebase token verification failed: {e}")
        raise credentials_exception
    except Exception as e:
        logger.error(f"Unexpected error verifying Firebase token: {e}")
        raise credentials_exception

    firebase_uid = decoded_token.get("uid")
    if not firebase_uid:
        raise credentials_exception

    user = db.query(User).filter(User.firebase_uid == firebase_uid).first()

    if not user:
        # First-time login - create user from Firebase data
        # Phone and anonymous sign-ins carry no email; store NULL so the unique index holds
        email = decoded_token.get("email")
        name = decoded_token.get("name") or (email.split("@")[0] if email else "User")

        user = User(
            firebase_uid=firebase_uid,
            email=email,
            full_name=name,
            avatar_url=decoded_token.get("picture"),
            is_verified=decoded_token.get("email_verified", False),
        )
        db.add(user)
        db.commit()
        db.refresh(user)

        logger.info(f"New user created from Firebase: {user.firebase_uid}")
    else:
        user.last_login = datetime.utcnow()

        if decoded_token.get("email_verified") and not user.is_verified:
            user.is_verified = True

        if decoded_token.get("picture") and user.avatar_url != decoded_token.get("picture"):
            user.avatar_url = decoded_token.get("picture")

        db.commit()

    return user


async def get_current_active_user(
    current_user: User = Depends(get_current_user)
) -> User:
    """
    Get current user and verify they are active.

    Raises HTTPException 403 if user is inactive.
    """
    if not current_user.is_active:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Your account has been deactivated"
        )
    return current_user


def get_classroom_service(db: Session = Depends(get_db)) -> ClassroomService:
    """Request-scoped ClassroomService bound to the request's session."""
    return ClassroomService(db)
