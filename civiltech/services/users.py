from typing import List, Optional

from sqlalchemy.orm import Session

from civiltech.core.errors import ClientError
from civiltech.core.security import get_password_hash, verify_password
from civiltech.db.models.user import User

DEFAULT_STATUS = "Active"


def register_user(
    db: Session,
    full_name: Optional[str],
    email: Optional[str],
    password: Optional[str],
    role: Optional[str] = None,
    status: Optional[str] = None,
    profile_image: Optional[str] = None,
) -> int:
    if not email or not password:
        raise ClientError("Email and password are required")
    existing = db.query(User).filter(User.email == email).first()
    if existing:
        raise ClientError("Email exists")

    user = User(
        full_name=full_name,
        email=email,
        password=get_password_hash(password),
        role=role,
        status=status or DEFAULT_STATUS,
        profile_image=profile_image,
    )
    db.add(user)
    db.commit()
    return user.id


def authenticate(db: Session, email: Optional[str], password: Optional[str]) -> dict:
    user = db.query(User).filter(User.email == email).first()
    if not user:
        raise ClientError("User not found")
    if not verify_password(password, user.password):
        raise ClientError("Invalid credentials")
    return {
        "id": user.id,
        "name": user.full_name,
        "email": user.email,
        "role": user.role,
        "profile_image": user.profile_image,
    }


def list_users(db: Session) -> List[User]:
    return db.query(User).order_by(User.id).all()
