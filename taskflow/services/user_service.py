"""User service"""

from sqlalchemy.orm import Session
from typing import List, Optional
from taskflow.models.user import User, default_settings
from taskflow.schemas.user import UserCreate, UserUpdate


def get_user_by_email(db: Session, email: str) -> Optional[User]:
    # comparaison exacte: "A@x.com" et "a@x.com" sont deux comptes différents
    return db.query(User).filter(User.email == email).first()


def list_users(db: Session) -> List[User]:
    return db.query(User).order_by(User.created_at.desc(), User.id.desc()).all()


def build_user(user_data: UserCreate) -> User:
    user = User(
        username=user_data.username,
        email=user_data.email,
        avatar=user_data.avatar,
        settings=user_data.settings.model_dump(),
    )
    user.set_password(user_data.password)
    return user


def apply_user_update(user: User, user_data: UserUpdate) -> User:
    update_data = user_data.model_dump(exclude_unset=True)

    password = update_data.pop("password", None)
    if password is not None:
        user.set_password(password)

    settings_update = update_data.pop("settings", None)
    if settings_update is not None:
        # nouveau dict pour que SQLAlchemy détecte le changement sur la colonne JSON
        merged = dict(user.settings or default_settings())
        merged.update({k: v for k, v in settings_update.items() if v is not None})
        user.settings = merged

    for field, value in update_data.items():
        setattr(user, field, value)
    return user
