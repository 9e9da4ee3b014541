"""Base service class for domain services."""

from collections.abc import Awaitable, Callable
from datetime import datetime, timezone
from typing import TypeVar

import logfire
from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_exception_type,
    stop_after_attempt,
    wait_random_exponential,
)

from tenancy.config import MembershipSettings
from tenancy.domain.error import ConflictError

T = TypeVar("T")


class Service:
    """Base class for the tenancy domain services.

    Services own the units of work for workspace, invite and membership
    writes. Writes are guarded by record versions, so subclasses wrap each
    write in ``retry_on_conflict``.
    """

    membership_settings: MembershipSettings

    @staticmethod
    def now() -> datetime:
        return datetime.now(timezone.utc)

    async def retry_on_conflict(
        self,
        operation: str,
        max_attempts: int,
        attempt: Callable[[], Awaitable[T]],
    ) -> T:
        """Run ``attempt`` until it stops hitting write conflicts.

        Each call to ``attempt`` must open its own unit of work so a retry
        starts from freshly read records. Conflicting attempts back off for
        a random, exponentially growing time. Any error other than a
        conflict propagates on the first occurrence.

        Args:
            operation: Name used in logs and the final error
            max_attempts: Upper bound on calls to ``attempt``
            attempt: Coroutine factory performing one try

        Returns:
            Result of the first attempt that did not conflict

        Raises:
            ConflictError: If every attempt conflicted
        """

        def log_conflict(retry_state: RetryCallState) -> None:
            logfire.warn(
                "Write conflict",
                operation=operation,
                attempt=retry_state.attempt_number,
                max_attempts=max_attempts,
                wait=retry_state.next_action.sleep if retry_state.next_action else 0,
                error=str(retry_state.outcome.exception()),
            )

        retrying = AsyncRetrying(
            retry=retry_if_exception_type(ConflictError),
            stop=stop_after_attempt(max_attempts),
            wait=wait_random_exponential(
                multiplier=self.membership_settings.retry_wait_multiplier,
                max=self.membership_settings.retry_wait_max,
            ),
            before_sleep=log_conflict,
            reraise=True,
        )
        try:
            return await retrying(attempt)
        except ConflictError as e:
            logfire.error(
                "Write conflict retries exhausted",
                operation=operation,
                attempts=max_attempts,
            )
            raise ConflictError(
                f"{operation} conflicted on all {max_attempts} attempts"
            ) from e
