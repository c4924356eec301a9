from __future__ import annotations

import logging

from services.oracle.instance_manager.manager import ComputeProvider
from services.oracle.instance_manager.models import AvailabilityDomain, LaunchSpec
from services.oracle.launcher.classifier import (
    ErrorClassifier,
    error_code,
    error_message,
    error_status,
)
from services.oracle.launcher.types import AttemptOutcome, OutcomeKind

logger = logging.getLogger("oci_launcher")


class InstanceLauncher:
    """Runs single launch attempts against one availability domain at a time."""

    def __init__(
        self,
        provider: ComputeProvider,
        template: LaunchSpec,
        classifier: ErrorClassifier | None = None,
    ) -> None:
        self.provider = provider
        self.template = template
        self.classifier = classifier or ErrorClassifier()

    def attempt(self, domain: AvailabilityDomain) -> AttemptOutcome:
        """
        Try to launch the template instance in ``domain``.

        Never raises for provider failures: every error is classified into
        an outcome.
        """
        spec = self.template.for_domain(domain.name)
        try:
            instance = self.provider.launch_instance(spec)
        except Exception as exc:  # noqa: BLE001 - classifier decides
            outcome = self.classifier.classify(exc)
            _log_failure(domain, exc, outcome)
            return outcome

        logger.info(
            "Instance created successfully in %s: id=%s name=%s state=%s",
            domain.name,
            instance.id,
            instance.display_name,
            instance.lifecycle_state,
        )
        return AttemptOutcome.success(instance)


def _log_failure(domain: AvailabilityDomain, exc: BaseException, outcome: AttemptOutcome) -> None:
    if outcome.kind is OutcomeKind.RATE_LIMITED:
        logger.warning("Too many requests in %s. Applying backoff strategy...", domain.name)
    elif outcome.kind is OutcomeKind.CAPACITY_EXHAUSTED:
        logger.info("%s: %s", domain.name, error_message(exc))
    else:
        logger.error(
            "Failed to create instance in %s: status=%s code=%s message=%s",
            domain.name,
            error_status(exc),
            error_code(exc),
            error_message(exc),
        )
