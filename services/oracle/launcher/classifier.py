"""
Provider error classification.

Launch failures are matched against an ordered table of rules. The first
rule that matches decides the outcome; unmatched errors become
``OTHER_ERROR``. New provider error shapes are handled by registering a rule.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from services.oracle.instance_manager.constants import (
    OUT_OF_HOST_CAPACITY_MESSAGE,
    TOO_MANY_REQUESTS_CODE,
    TOO_MANY_REQUESTS_STATUS,
)
from services.oracle.launcher.types import AttemptOutcome, OutcomeKind

logger = logging.getLogger("oci_launcher")


def error_status(exc: BaseException) -> int | None:
    status = getattr(exc, "status", None)
    if status is None:
        status = getattr(exc, "status_code", None)
    return status if isinstance(status, int) else None


def error_code(exc: BaseException) -> str | None:
    code = getattr(exc, "code", None)
    return code if isinstance(code, str) else None


def error_message(exc: BaseException) -> str:
    message = getattr(exc, "message", None)
    if isinstance(message, str):
        return message
    return str(exc)


@dataclass(frozen=True)
class ErrorRule:
    name: str
    matches: Callable[[BaseException], bool]
    kind: OutcomeKind


def status_is(status: int) -> Callable[[BaseException], bool]:
    return lambda exc: error_status(exc) == status


def code_is(code: str) -> Callable[[BaseException], bool]:
    return lambda exc: error_code(exc) == code


def message_is(message: str) -> Callable[[BaseException], bool]:
    return lambda exc: error_message(exc) == message


DEFAULT_RULES: tuple[ErrorRule, ...] = (
    ErrorRule("http-429", status_is(TOO_MANY_REQUESTS_STATUS), OutcomeKind.RATE_LIMITED),
    ErrorRule("too-many-requests", code_is(TOO_MANY_REQUESTS_CODE), OutcomeKind.RATE_LIMITED),
    ErrorRule(
        "out-of-host-capacity",
        message_is(OUT_OF_HOST_CAPACITY_MESSAGE),
        OutcomeKind.CAPACITY_EXHAUSTED,
    ),
)


class ErrorClassifier:
    """Ordered, extensible rule table mapping launch errors to outcomes."""

    def __init__(self, rules: tuple[ErrorRule, ...] | list[ErrorRule] = DEFAULT_RULES) -> None:
        self.rules: list[ErrorRule] = []
        for rule in rules:
            self.register(rule)

    def register(self, rule: ErrorRule, first: bool = False) -> None:
        """Add a rule at the end of the table, or ahead of the existing rules."""
        if rule.kind is OutcomeKind.SUCCESS:
            raise ValueError(f"Rule {rule.name!r} cannot map an error to success")
        if first:
            self.rules.insert(0, rule)
        else:
            self.rules.append(rule)

    def classify(self, exc: BaseException) -> AttemptOutcome:
        for rule in self.rules:
            if rule.matches(exc):
                logger.debug("Launch error matched rule %s", rule.name)
                if rule.kind is OutcomeKind.OTHER_ERROR:
                    return AttemptOutcome.other_error(exc)
                return AttemptOutcome(rule.kind)
        return AttemptOutcome.other_error(exc)
