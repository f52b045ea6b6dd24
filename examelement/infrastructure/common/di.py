from collections.abc import Callable
from threading import Lock
from typing import TypeVar

from dependency_injector.providers import Provider

from examelement.core import container
from examelement.database import DatabaseSession

T = TypeVar("T")

# container.db is process-wide; sync dependencies run on a thread pool
_db_override_lock = Lock()


def inject_use_case(provider: Provider[T]) -> Callable[[DatabaseSession], T]:
    """
    FastAPI dependency that builds a use case bound to the request's session.

    The whole object graph is built while the session override is held, so
    every repository inside the use case keeps this request's session even
    after the override is reset for the next request.
    """

    def dependency(db: DatabaseSession) -> T:
        with _db_override_lock:
            container.db.override(db)
            try:
                return provider()
            finally:
                container.db.reset_override()

    return dependency
