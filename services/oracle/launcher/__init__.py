from __future__ import annotations

from services.oracle.launcher.attempt import InstanceLauncher
from services.oracle.launcher.classifier import (
    DEFAULT_RULES,
    ErrorClassifier,
    ErrorRule,
    code_is,
    message_is,
    status_is,
)
from services.oracle.launcher.config import (
    OPTIONAL_SETTINGS,
    REQUIRED_SETTINGS,
    LauncherConfig,
    check_env_variables,
    load_config,
)
from services.oracle.launcher.loop import run_cycle, run_forever
from services.oracle.launcher.strategy import (
    DOMAIN_POLICIES,
    SEQUENTIAL_POLICY,
    SINGLE_PASS_POLICY,
    DomainStrategy,
    SequentialDomainStrategy,
    SinglePassDomainStrategy,
    build_strategy,
)
from services.oracle.launcher.timer import silent_tick, wait_with_timer
from services.oracle.launcher.types import (
    AttemptOutcome,
    BackoffState,
    OutcomeKind,
    backoff_delay,
)

__all__ = [
    "AttemptOutcome",
    "OutcomeKind",
    "BackoffState",
    "backoff_delay",
    "wait_with_timer",
    "silent_tick",
    "ErrorRule",
    "ErrorClassifier",
    "DEFAULT_RULES",
    "status_is",
    "code_is",
    "message_is",
    "InstanceLauncher",
    "DomainStrategy",
    "SequentialDomainStrategy",
    "SinglePassDomainStrategy",
    "SEQUENTIAL_POLICY",
    "SINGLE_PASS_POLICY",
    "DOMAIN_POLICIES",
    "build_strategy",
    "REQUIRED_SETTINGS",
    "OPTIONAL_SETTINGS",
    "LauncherConfig",
    "check_env_variables",
    "load_config",
    "run_cycle",
    "run_forever",
]
