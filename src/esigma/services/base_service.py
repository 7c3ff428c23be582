"""
Base service layer: the uniform result envelope and shared façade plumbing
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError

from esigma.database.connection import Database, RecordNotFoundError
from esigma.models.enums import ErrorType
from esigma.utils.error_handling import log_service_error

logger = logging.getLogger(__name__)

RequestT = TypeVar("RequestT", bound=BaseModel)

NOT_CONFIGURED_MESSAGE = "Database not configured"


def _serialize(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True)
    if isinstance(value, (list, tuple)):
        return [_serialize(item) for item in value]
    if isinstance(value, dict):
        return {key: _serialize(item) for key, item in value.items()}
    return value


@dataclass
class ServiceResult:
    """
    Result from service operation

    ``success`` is True exactly when the requested effect was applied (or the
    read completed). Failures always carry a non-empty ``message``; list reads
    that fail still carry an empty list in ``data``.
    """
    success: bool
    message: str
    data: Optional[Any] = None
    error_type: Optional[str] = None

    @classmethod
    def ok(cls, message: str, data: Any = None) -> "ServiceResult":
        return cls(success=True, message=message, data=data)

    @classmethod
    def fail(
        cls,
        message: str,
        error_type: Union[ErrorType, str] = ErrorType.EXECUTION_ERROR,
        data: Any = None
    ) -> "ServiceResult":
        if not message:
            raise ValueError("Failed results require a message")
        if isinstance(error_type, ErrorType):
            error_type = error_type.value
        return cls(success=False, message=message, data=data, error_type=error_type)

    def to_dict(self) -> Dict[str, Any]:
        """Wire envelope: {success, message, data?} with camelCase model data"""
        envelope: Dict[str, Any] = {"success": self.success, "message": self.message}
        if self.data is not None:
            envelope["data"] = _serialize(self.data)
        return envelope


class BaseService:
    """
    Base for every façade

    The backend is injected; ``None`` means demo mode. Façades hold no other
    state and every public operation returns a ServiceResult instead of raising.
    """

    def __init__(self, database: Optional[Database] = None):
        self.db = database

    @property
    def demo_mode(self) -> bool:
        return self.db is None

    def not_configured(self) -> ServiceResult:
        """Writes refuse to fake persistence in demo mode"""
        return ServiceResult.fail(NOT_CONFIGURED_MESSAGE, ErrorType.NOT_CONFIGURED)

    def demo_list(self, entity: str) -> ServiceResult:
        """Reads succeed empty in demo mode"""
        logger.info(f"{type(self).__name__}: database not configured, returning no {entity}")
        return ServiceResult.ok(f"Demo mode - no {entity}", [])

    def failure(
        self,
        operation: str,
        exception: Exception,
        message: str,
        data: Any = None,
        context: Optional[Dict[str, Any]] = None
    ) -> ServiceResult:
        """Log a caught exception and convert it into a failed envelope"""
        if isinstance(exception, ValidationError):
            logger.warning(f"{type(self).__name__}.{operation}: invalid payload: {exception}")
            return ServiceResult.fail(
                f"{message}: invalid data",
                ErrorType.VALIDATION_ERROR,
                data
            )

        log_service_error(type(self).__name__, operation, exception, context)

        error_type = ErrorType.NOT_FOUND if isinstance(exception, RecordNotFoundError) else ErrorType.EXECUTION_ERROR
        return ServiceResult.fail(message, error_type, data)

    @staticmethod
    def coerce(request: Union[RequestT, Dict[str, Any]], model: Type[RequestT]) -> RequestT:
        """Accept a request model or a plain dict (snake_case or camelCase keys)"""
        if isinstance(request, model):
            return request
        if isinstance(request, BaseModel):
            request = request.model_dump(exclude_unset=True)
        return model.model_validate(request)
