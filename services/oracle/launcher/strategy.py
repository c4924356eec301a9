"""
Domain iteration policies.

A strategy walks the availability domains of one cycle in listing order and
decides, from each attempt outcome, whether to retry, wait, move on or stop.
Success on any domain always ends the cycle, and no domain is revisited
within the same cycle.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol, Sequence

from services.oracle.instance_manager.errors import ConfigurationError
from services.oracle.instance_manager.models import AvailabilityDomain, LaunchedInstance
from services.oracle.launcher.attempt import InstanceLauncher
from services.oracle.launcher.timer import Waiter, silent_tick, wait_with_timer
from services.oracle.launcher.types import AttemptOutcome, BackoffState, OutcomeKind

if TYPE_CHECKING:
    from services.oracle.launcher.config import LauncherConfig

logger = logging.getLogger("oci_launcher")

SEQUENTIAL_POLICY = "sequential"
SINGLE_PASS_POLICY = "single-pass"
DOMAIN_POLICIES = (SEQUENTIAL_POLICY, SINGLE_PASS_POLICY)


class DomainStrategy(Protocol):
    name: str

    def run(
        self, domains: Sequence[AvailabilityDomain], launcher: InstanceLauncher
    ) -> LaunchedInstance | None: ...


class SequentialDomainStrategy:
    """
    Sequential iteration with per-domain exponential backoff.

    - RATE_LIMITED: wait ``base * 2**i`` seconds after rate-limited attempt
      ``i + 1`` and retry the same domain, for at most ``max_attempts``
      attempts in total. The wait after the final attempt is kept.
    - CAPACITY_EXHAUSTED: abandon the remaining domains for this cycle.
    - OTHER_ERROR: abandon this domain and move to the next.
    - SUCCESS: stop immediately.

    ``pacing_seconds`` is waited before each domain after the first.
    """

    name = SEQUENTIAL_POLICY

    def __init__(
        self,
        base_delay_seconds: int,
        max_attempts: int,
        pacing_seconds: int,
        wait: Waiter = wait_with_timer,
    ) -> None:
        self.base_delay_seconds = base_delay_seconds
        self.max_attempts = max_attempts
        self.pacing_seconds = pacing_seconds
        self.wait = wait

    def run(
        self, domains: Sequence[AvailabilityDomain], launcher: InstanceLauncher
    ) -> LaunchedInstance | None:
        for index, domain in enumerate(domains):
            if index > 0:
                self.wait(self.pacing_seconds)

            logger.info("Sending request to %s", domain.name)
            outcome = self._handle_domain(domain, launcher)

            if outcome.succeeded:
                return outcome.instance
            if outcome.kind is OutcomeKind.CAPACITY_EXHAUSTED:
                remaining = len(domains) - index - 1
                if remaining:
                    logger.info("Skipping %d remaining domain(s) this cycle", remaining)
                return None
        return None

    def _handle_domain(
        self, domain: AvailabilityDomain, launcher: InstanceLauncher
    ) -> AttemptOutcome:
        backoff = BackoffState(self.base_delay_seconds, self.max_attempts)
        while True:
            outcome = launcher.attempt(domain)
            if outcome.kind is not OutcomeKind.RATE_LIMITED:
                return outcome

            delay = backoff.record_attempt()
            logger.info("Waiting for %d seconds (rate limited in %s)", delay, domain.name)
            self.wait(delay, silent_tick)

            if backoff.exhausted:
                logger.warning(
                    "Giving up on %s after %d rate-limited attempts",
                    domain.name,
                    backoff.attempt_index,
                )
                return outcome


class SinglePassDomainStrategy:
    """
    Single pass over the domains with one global rate-limit wait.

    - RATE_LIMITED: wait ``long_wait_seconds`` and end the cycle.
    - CAPACITY_EXHAUSTED: wait ``pacing_seconds`` and try the next domain.
    - OTHER_ERROR: try the next domain.
    - SUCCESS: stop immediately.
    """

    name = SINGLE_PASS_POLICY

    def __init__(
        self,
        long_wait_seconds: int,
        pacing_seconds: int,
        wait: Waiter = wait_with_timer,
    ) -> None:
        self.long_wait_seconds = long_wait_seconds
        self.pacing_seconds = pacing_seconds
        self.wait = wait

    def run(
        self, domains: Sequence[AvailabilityDomain], launcher: InstanceLauncher
    ) -> LaunchedInstance | None:
        last_index = len(domains) - 1
        for index, domain in enumerate(domains):
            logger.info("Sending request to %s", domain.name)
            outcome = launcher.attempt(domain)

            if outcome.succeeded:
                return outcome.instance
            if outcome.kind is OutcomeKind.RATE_LIMITED:
                logger.warning(
                    "Rate limited; waiting %d seconds before the next cycle",
                    self.long_wait_seconds,
                )
                self.wait(self.long_wait_seconds)
                return None
            if outcome.kind is OutcomeKind.CAPACITY_EXHAUSTED and index < last_index:
                self.wait(self.pacing_seconds)
        return None


def build_strategy(config: LauncherConfig, wait: Waiter = wait_with_timer) -> DomainStrategy:
    """
    Create the domain strategy selected by ``config.domain_policy``.

    Raises:
        ConfigurationError: If the policy name is unknown.
    """
    if config.domain_policy == SEQUENTIAL_POLICY:
        return SequentialDomainStrategy(
            base_delay_seconds=config.initial_backoff_delay_seconds,
            max_attempts=config.max_backoff_attempts,
            pacing_seconds=config.ad_req_interval_seconds,
            wait=wait,
        )
    if config.domain_policy == SINGLE_PASS_POLICY:
        return SinglePassDomainStrategy(
            long_wait_seconds=config.long_wait_minutes * 60,
            pacing_seconds=config.ad_req_interval_seconds,
            wait=wait,
        )
    raise ConfigurationError(
        f"Unknown DOMAIN_POLICY {config.domain_policy!r}; expected one of {DOMAIN_POLICIES}"
    )
