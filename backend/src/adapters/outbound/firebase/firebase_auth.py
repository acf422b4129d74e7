"""Firebase Authentication adapter.

Verifies Firebase ID tokens and maps them onto the request identity.
"""
from __future__ import annotations

import logging
from typing import Optional

import firebase_admin
from firebase_admin import auth, credentials

from backend.src.core.entities.user import User

logger = logging.getLogger(__name__)


class FirebaseAuthAdapter:
    """Implements UserAuthPort against the Firebase Admin SDK."""

    def __init__(self, credentials_path: str, project_id: str = "") -> None:
        if not firebase_admin._apps:
            cred = credentials.Certificate(credentials_path)
            options = {"projectId": project_id} if project_id else {}
            firebase_admin.initialize_app(cred, options)
            logger.info("Firebase Admin SDK initialized (project=%s)", project_id)

    async def verify_token(self, id_token: str) -> Optional[User]:
        """Return the token's user, or None if it is invalid or expired."""
        if not id_token:
            return None
        try:
            decoded = auth.verify_id_token(id_token)
        except auth.ExpiredIdTokenError as e:
            logger.warning("Expired Firebase token: %s", e)
            return None
        except auth.InvalidIdTokenError as e:
            logger.warning("Invalid Firebase token: %s", e)
            return None
        except Exception as e:
            logger.error("Firebase token verification failed: %s (type=%s)", e, type(e).__name__)
            return None

        sign_in_provider = decoded.get("firebase", {}).get("sign_in_provider", "")
        logger.debug("Token decoded OK: uid=%s", decoded.get("uid"))
        return User(
            id=decoded["uid"],
            email=decoded.get("email", ""),
            email_verified=bool(decoded.get("email_verified", False)),
            display_name=decoded.get("name", ""),
            provider=sign_in_provider,
            is_anonymous=sign_in_provider == "anonymous",
        )

    async def get_user_by_uid(self, uid: str) -> Optional[User]:
        try:
            record = auth.get_user(uid)
        except auth.UserNotFoundError:
            return None
        except Exception as e:
            logger.error("Failed to get Firebase user %s: %s", uid, e)
            return None
        return User(
            id=record.uid,
            email=record.email or "",
            email_verified=bool(record.email_verified),
            display_name=record.display_name or "",
        )
