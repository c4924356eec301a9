from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from services.oracle.instance_manager.models import LaunchedInstance


class OutcomeKind(str, Enum):
    SUCCESS = "success"
    RATE_LIMITED = "rate_limited"
    CAPACITY_EXHAUSTED = "capacity_exhausted"
    OTHER_ERROR = "other_error"


@dataclass(frozen=True)
class AttemptOutcome:
    """Result of one launch attempt; ``instance`` set on success, ``error`` on other errors."""

    kind: OutcomeKind
    instance: LaunchedInstance | None = None
    error: BaseException | None = None

    @classmethod
    def success(cls, instance: LaunchedInstance) -> AttemptOutcome:
        return cls(OutcomeKind.SUCCESS, instance=instance)

    @classmethod
    def other_error(cls, error: BaseException) -> AttemptOutcome:
        return cls(OutcomeKind.OTHER_ERROR, error=error)

    @property
    def succeeded(self) -> bool:
        return self.kind is OutcomeKind.SUCCESS


def backoff_delay(base_delay_seconds: int, attempt_index: int) -> int:
    """Delay before retry ``attempt_index + 1``: ``base * 2 ** attempt_index``."""
    return base_delay_seconds * 2**attempt_index


@dataclass
class BackoffState:
    """
    Exponential backoff bookkeeping for one domain's retry sequence.

    Attributes:
        base_delay_seconds: Delay before the first retry.
        max_attempts: Total launch attempts allowed for the domain.
        attempt_index: Attempts made so far.
    """

    base_delay_seconds: int
    max_attempts: int
    attempt_index: int = 0

    @property
    def exhausted(self) -> bool:
        return self.attempt_index >= self.max_attempts

    def record_attempt(self) -> int:
        """
        Count an attempt and return the delay that follows it.

        The delay is returned for the final attempt too; callers wait it out
        before moving on and check ``exhausted`` to stop retrying.
        """
        delay = backoff_delay(self.base_delay_seconds, self.attempt_index)
        self.attempt_index += 1
        return delay
