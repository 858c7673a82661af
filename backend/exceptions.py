"""Error taxonomy shared by the record store, the report service and the HTTP layer."""

from functools import wraps
import logging

from sqlalchemy.exc import DisconnectionError, OperationalError, TimeoutError as PoolTimeoutError

logger = logging.getLogger(__name__)


class FarmError(Exception):
    """Base exception for chicken farm errors."""
    status_code = 500
    error_code = "farm_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(FarmError):
    """Malformed or out-of-domain input (422)."""
    status_code = 422
    error_code = "validation_error"


class NotFoundError(FarmError):
    """Operation on an id that does not exist (404)."""
    status_code = 404
    error_code = "not_found"

    def __init__(self, entity: str, entity_id):
        super().__init__(f"{entity} with id {entity_id} not found")
        self.entity = entity
        self.entity_id = entity_id


class UpstreamUnavailable(FarmError):
    """The record store is unreachable or timed out (503). Safe to retry."""
    status_code = 503
    error_code = "upstream_unavailable"


UPSTREAM_ERRORS = (OperationalError, PoolTimeoutError, DisconnectionError)


def translate_db_errors(func):
    """Re-raise connection and timeout failures from the database as UpstreamUnavailable."""
    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except UPSTREAM_ERRORS as e:
            logger.error(f"Record store unavailable in {func.__name__}: {e}")
            raise UpstreamUnavailable("Record store is unavailable, please retry") from e
    return wrapper
