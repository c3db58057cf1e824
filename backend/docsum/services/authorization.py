import enum
import logging
from docsum.core.exceptions import Forbidden
from docsum.models import Document, User

logger = logging.getLogger(__name__)


class Decision(str, enum.Enum):
    ALLOWED = "allowed"
    FORBIDDEN = "forbidden"


def authorize(user: User, document: Document) -> Decision:
    if document.user_id == user.id:
        return Decision.ALLOWED
    return Decision.FORBIDDEN


def require_owner(user: User, document: Document) -> None:
    """Raise ``Forbidden`` unless ``user`` owns ``document``. Used by every read and write."""
    if authorize(user, document) is Decision.FORBIDDEN:
        logger.warning("Ownership check failed", extra={"document_id": document.id, "user_id": user.id})
        raise Forbidden("Unauthorized")
