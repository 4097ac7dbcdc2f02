# services/base.py
from typing import Callable, Generic, TypeVar
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from storefront.models.enums import ErrorKind
from storefront.services.result import Result
from storefront.utils.logging import get_logger

T = TypeVar("T")

logger = get_logger(__name__)


def _error_message(error: SQLAlchemyError) -> str:
    # DBAPIError wraps the driver exception, whose text is what callers want
    return str(getattr(error, "orig", None) or error)


class BaseService(Generic[T]):
    def __init__(self, db: Session):
        self.db = db

    async def _handle_db_operation(self, operation: Callable[[], Result], action: str) -> Result:
        try:
            result = operation()
            self.db.commit()
            return result
        except IntegrityError as e:
            self.db.rollback()
            logger.error("ERROR {}: {}", action.upper(), _error_message(e))
            return Result.fail(ErrorKind.CONSTRAINT, _error_message(e))
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error("ERROR {}: {}", action.upper(), _error_message(e))
            return Result.fail(ErrorKind.STORE, _error_message(e))
        except Exception as e:
            self.db.rollback()
            logger.error("ERROR {}: {}", action.upper(), str(e))
            return Result.fail(ErrorKind.STORE, str(e))
