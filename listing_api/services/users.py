import hashlib
import hmac
import secrets
from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from listing_api.models.user import User
from listing_api.schemas.user import UserCreate

PBKDF2_ITERATIONS = 260000


class DuplicateUserError(Exception):
    """Raised when the email or phone number is already registered."""

    pass


def hash_password(password: str, salt: Optional[str] = None) -> str:
    salt = salt or secrets.token_hex(16)
    digest = hashlib.pbkdf2_hmac(
        "sha256", password.encode(), salt.encode(), PBKDF2_ITERATIONS
    ).hex()
    return f"pbkdf2_sha256${PBKDF2_ITERATIONS}${salt}${digest}"


def verify_password(password: str, stored: str) -> bool:
    try:
        _, iterations, salt, digest = stored.split("$")
    except ValueError:
        return False
    candidate = hashlib.pbkdf2_hmac(
        "sha256", password.encode(), salt.encode(), int(iterations)
    ).hex()
    return hmac.compare_digest(candidate, digest)


class UserService:
    def __init__(self, db: Session):
        self.db = db

    def create(self, data: UserCreate) -> User:
        fields = data.model_dump(exclude={"password"})
        user = User(**fields, password=hash_password(data.password))
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            raise DuplicateUserError(data.email) from e
        self.db.refresh(user)
        return user

    def get(self, user_id: int) -> Optional[User]:
        return self.db.query(User).filter(User.id == user_id).first()

    def list(self, skip: int = 0, limit: int = 50) -> List[User]:
        return (
            self.db.query(User)
            .order_by(User.id)
            .offset(skip)
            .limit(min(limit, 100))  # Security cap
            .all()
        )
