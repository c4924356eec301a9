from __future__ import annotations

import logging
import threading

from services.oracle.instance_manager.manager import ComputeProvider
from services.oracle.instance_manager.models import LaunchedInstance
from services.oracle.launcher.attempt import InstanceLauncher
from services.oracle.launcher.classifier import ErrorClassifier
from services.oracle.launcher.config import LauncherConfig
from services.oracle.launcher.strategy import DomainStrategy, build_strategy
from services.oracle.launcher.timer import Waiter, wait_with_timer

logger = logging.getLogger("oci_launcher")


def run_cycle(
    provider: ComputeProvider,
    launcher: InstanceLauncher,
    strategy: DomainStrategy,
) -> LaunchedInstance | None:
    """
    Run one cycle: list the domains afresh, then let the strategy walk them.

    Returns:
        The launched instance, or None if no domain succeeded.

    Raises:
        DomainListError: If the domains cannot be listed.
    """
    domains = provider.list_availability_domains(launcher.template.compartment_id)
    if not domains:
        logger.warning("No availability domains returned for the compartment")
        return None
    logger.info(
        "Fetched %d availability domain(s): %s",
        len(domains),
        ", ".join(domain.name for domain in domains),
    )
    return strategy.run(domains, launcher)


def run_forever(
    provider: ComputeProvider,
    config: LauncherConfig,
    strategy: DomainStrategy | None = None,
    *,
    classifier: ErrorClassifier | None = None,
    wait: Waiter = wait_with_timer,
    stop_event: threading.Event | None = None,
    max_cycles: int | None = None,
) -> LaunchedInstance | None:
    """
    Run launch cycles until stopped, waiting ``retry_wait_seconds`` between cycles.

    Errors raised inside a cycle are logged and never end the loop. The loop
    ends only when ``stop_event`` is set, ``max_cycles`` cycles have run, or
    an instance is launched with ``config.stop_on_success`` enabled.

    Args:
        provider: Remote compute service.
        config: Launcher settings.
        strategy: Domain strategy; built from ``config.domain_policy`` if omitted.
        classifier: Launch error classifier; default rule table if omitted.
        wait: Waiter used between cycles and handed to the default strategy.
        stop_event: Checked at every cycle boundary.
        max_cycles: Upper bound on cycles; unbounded when None.

    Returns:
        The most recently launched instance, or None.
    """
    strategy = strategy or build_strategy(config, wait=wait)
    launcher = InstanceLauncher(provider, config.launch_spec(), classifier)
    last_instance: LaunchedInstance | None = None
    cycle = 0

    if not config.stop_on_success:
        logger.warning(
            "STOP_ON_SUCCESS is off: the loop keeps launching instances after a success"
        )

    def _should_stop() -> bool:
        if stop_event is not None and stop_event.is_set():
            return True
        return max_cycles is not None and cycle >= max_cycles

    while not _should_stop():
        cycle += 1
        logger.info("Starting cycle %d policy=%s", cycle, strategy.name)
        try:
            instance = run_cycle(provider, launcher, strategy)
        except Exception:  # noqa: BLE001 - one bad cycle must not stop the loop
            logger.exception("Unhandled error in cycle %d", cycle)
            instance = None

        if instance is not None:
            last_instance = instance
            if config.stop_on_success:
                logger.info("Instance %s launched, stopping", instance.id)
                return instance

        if _should_stop():
            break
        wait(config.retry_wait_seconds)

    logger.info("Launch loop stopped after %d cycle(s)", cycle)
    return last_instance
