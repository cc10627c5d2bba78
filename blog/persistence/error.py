"""Translation of storage exceptions into domain error kinds."""

from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.exc import (
    DisconnectionError,
    InterfaceError,
    OperationalError,
    TimeoutError as PoolTimeoutError,
)

from blog.domain.error import TransientError


@contextmanager
def storage_errors(operation: str) -> Iterator[None]:
    """Re-raise connection and timeout failures as ``TransientError``.

    Anything else propagates unchanged.

    Args:
        operation: Name of the repository operation, used in the message
    """
    try:
        yield
    except (
        OperationalError,
        InterfaceError,
        DisconnectionError,
        PoolTimeoutError,
    ) as e:
        raise TransientError(
            f"Storage unavailable during {operation}, please retry"
        ) from e
