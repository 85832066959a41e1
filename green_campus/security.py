from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional
import logging
import secrets

from jose import jwt, JWTError, ExpiredSignatureError
from passlib.context import CryptContext

from green_campus.config import settings
from green_campus.exceptions import Unauthenticated

logger = logging.getLogger(__name__)

USER_KIND = "user"
ADMIN_KIND = "admin"

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.bcrypt_rounds,
)


@dataclass(frozen=True)
class Identity:
    """Authenticated caller extracted from a bearer token."""
    kind: str
    id: Optional[int] = None
    email: Optional[str] = None
    username: Optional[str] = None

    @property
    def is_admin(self) -> bool:
        return self.kind == ADMIN_KIND


def hash_password(plain: str) -> str:
    # bcrypt only looks at the first 72 bytes
    if len(plain.encode("utf-8")) > 72:
        plain = plain.encode("utf-8")[:72].decode("utf-8", errors="ignore")
    return pwd_context.hash(plain)


def verify_password(plain: str, hashed: str) -> bool:
    if not plain or not hashed:
        return False
    if len(plain.encode("utf-8")) > 72:
        plain = plain.encode("utf-8")[:72].decode("utf-8", errors="ignore")
    try:
        return pwd_context.verify(plain, hashed)
    except ValueError:
        logger.warning("Stored password hash could not be parsed")
        return False


def create_access_token(claims: dict, expires_delta: Optional[timedelta] = None) -> str:
    """Sign a token for either identity kind; ``claims`` must carry ``kind``."""
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(days=settings.token_expire_days))
    payload = {**claims, "exp": expire}
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def create_user_token(user_id: int, email: str) -> str:
    return create_access_token({"kind": USER_KIND, "id": user_id, "email": email})


def create_admin_token(username: str) -> str:
    return create_access_token({"kind": ADMIN_KIND, "username": username, "isAdmin": True})


def check_admin_credentials(username: str, password: str) -> bool:
    """Compare against the single configured admin account."""
    username_ok = secrets.compare_digest(username.encode("utf-8"), settings.admin_username.encode("utf-8"))
    password_ok = secrets.compare_digest(password.encode("utf-8"), settings.admin_password.encode("utf-8"))
    return username_ok and password_ok


def decode_token(token: str) -> Identity:
    try:
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except ExpiredSignatureError:
        raise Unauthenticated("Token expired")
    except JWTError as e:
        logger.debug(f"JWT verification failed: {e}")
        raise Unauthenticated("Invalid or expired token")

    kind = payload.get("kind")
    if kind == USER_KIND and isinstance(payload.get("id"), int):
        return Identity(kind=USER_KIND, id=payload["id"], email=payload.get("email"))
    if kind == ADMIN_KIND and payload.get("isAdmin") is True and payload.get("username"):
        return Identity(kind=ADMIN_KIND, username=payload["username"])

    raise Unauthenticated("Malformed token payload")
