from __future__ import annotations

DEFAULT_DISPLAY_NAME = "myOciInstance"
DEFAULT_SHAPE = "VM.Standard.A1.Flex"
DEFAULT_OCPUS = 4.0
DEFAULT_MEMORY_IN_GBS = 24.0

DEFAULT_AD_REQ_INTERVAL_SECONDS = 5
DEFAULT_RETRY_WAIT_SECONDS = 64
DEFAULT_LONG_WAIT_MINUTES = 10
DEFAULT_INITIAL_BACKOFF_DELAY_SECONDS = 15
DEFAULT_MAX_BACKOFF_ATTEMPTS = 5

DEFAULT_REQUEST_TIMEOUT_SECONDS = 60
DEFAULT_CONNECT_TIMEOUT_SECONDS = 10
DEFAULT_CONFIG_PROFILE = "DEFAULT"
DEFAULT_LOG_LEVEL = "INFO"

# Provider error surface
TOO_MANY_REQUESTS_STATUS = 429
TOO_MANY_REQUESTS_CODE = "TooManyRequests"
OUT_OF_HOST_CAPACITY_MESSAGE = "Out of host capacity."
