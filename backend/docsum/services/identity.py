import logging
from dataclasses import dataclass
from sqlalchemy.orm import Session
from docsum.core.exceptions import NotFound
from docsum.models import User

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CallerContext:
    """The authenticated requester, as named by the identity provider."""

    subject: str


def resolve_user(db: Session, caller: CallerContext) -> User:
    user = find_user(db, caller)
    if not user:
        raise NotFound("User not found")
    return user


def find_user(db: Session, caller: CallerContext) -> User | None:
    return db.query(User).filter(User.external_id == caller.subject).first()


def ensure_user(db: Session, caller: CallerContext) -> User:
    """Return the caller's user row, creating it on first use. Flushes, does not commit."""
    user = find_user(db, caller)
    if user:
        return user
    user = User(external_id=caller.subject)
    db.add(user)
    db.flush()
    logger.info("User created", extra={"user_id": user.id})
    return user
