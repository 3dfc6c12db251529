# conformance/constants.py

"""
Constants module.

Defaults used throughout the package. Each CONFORMANCE_* name maps one to one
onto an environment variable read by `conformance.config`.
"""

CONFORMANCE_DEV_MODE: bool = False
CONFORMANCE_LOG_LEVEL: str = "INFO"

# TASKS
CONFORMANCE_ATTACH_LOGGER: bool = True
CONFORMANCE_PREFIX_COLOR: str = "light_black"
CONFORMANCE_USE_COLORS: bool = True

DEFAULT_TASK_NAME: str = "Base"
HANDLER_PREFIX: str = "on_"
