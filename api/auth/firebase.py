"""
Firebase kimlik doğrulama - ID token verification for classroom users
"""
import os
import json
import logging
from typing import Optional

import firebase_admin
from firebase_admin import credentials, auth

from config.settings import get_settings

logger = logging.getLogger("api.auth.firebase")

CREDENTIALS_JSON_ENV = "FIREBASE_CREDENTIALS_JSON"

_firebase_app: Optional[firebase_admin.App] = None


def _load_credentials() -> credentials.Certificate:
    """Service account from FIREBASE_CREDENTIALS_PATH, else inline JSON from the environment."""
    path = get_settings().firebase_credentials_path
    if path and os.path.exists(path):
        logger.info(f"Firebase service account loaded from {path}")
        return credentials.Certificate(path)

    raw = os.environ.get(CREDENTIALS_JSON_ENV)
    if raw:
        logger.info(f"Firebase service account loaded from {CREDENTIALS_JSON_ENV}")
        return credentials.Certificate(json.loads(raw))

    raise RuntimeError(
        f"Firebase credentials not found: set FIREBASE_CREDENTIALS_PATH to a service "
        f"account file or {CREDENTIALS_JSON_ENV} to its JSON contents"
    )


def get_firebase_app() -> firebase_admin.App:
    """Tek Firebase uygulaması; ilk çağrıda başlatılır."""
    global _firebase_app

    if _firebase_app is None:
        _firebase_app = firebase_admin.initialize_app(_load_credentials())
        logger.info("Firebase Admin SDK initialized")

    return _firebase_app


def verify_firebase_token(id_token: str) -> dict:
    """
    Decode a client's Firebase ID token.

    The result carries `uid` and, depending on the sign-in provider, `email`,
    `email_verified`, `name` and `picture`. Phone and anonymous sign-ins have
    no email.

    Raises the firebase_admin.auth token errors (invalid, expired, revoked).
    """
    get_firebase_app()
    return auth.verify_id_token(id_token)
