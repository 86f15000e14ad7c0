"""Base service class for domain services."""

import asyncio
from typing import Awaitable, ClassVar, TypeVar

import logfire

from ombud.domain.error import StoreUnavailableError, TransientError

T = TypeVar("T")


class Service:
    """Base class for all domain services.

    Domain services contain business logic that doesn't naturally belong
    to a single entity or spans multiple entities/aggregates.
    """

    # Name used in outage logs and messages
    store_name: ClassVar[str] = "Store"

    store_timeout_seconds: float = 5.0

    async def _call_store(self, awaitable: Awaitable[T]) -> T:
        """Run a repository call, reporting outages as transient.

        Interrupted writes are not retried here: the write may have landed,
        and replaying a toggle would undo it.

        Raises:
            TransientError: If the store timed out or dropped the connection
        """
        try:
            return await bounded_store_call(awaitable, self.store_timeout_seconds)
        except StoreUnavailableError as e:
            logfire.error(f"{self.store_name} unavailable", error=str(e))
            raise TransientError(f"{self.store_name} unavailable, please retry") from e


async def bounded_store_call(awaitable: Awaitable[T], timeout: float) -> T:
    """Await a repository call, giving up after ``timeout`` seconds.

    Raises:
        StoreUnavailableError: If the call did not finish in time
    """
    try:
        return await asyncio.wait_for(awaitable, timeout=timeout)
    except asyncio.TimeoutError as e:
        raise StoreUnavailableError(f"Store call exceeded {timeout}s") from e
