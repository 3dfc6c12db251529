class ConformanceTaskError(Exception):
    """Base exception for conformance tasks."""

    pass


class InstallError(ConformanceTaskError):
    """Raised when `install` is called without a usable runner."""

    pass


class MissingHandlerError(ConformanceTaskError):
    """Raised when a task has no handler for a registered parse event."""

    def __init__(self, handler: str, task: str):
        self.handler = handler
        self.task = task
        super().__init__(f"{handler} must be on plugin :: [{task}]")


class TaskNotInstalledError(ConformanceTaskError):
    """Raised when a task is torn down without having been installed."""

    def __init__(self, task: str):
        self.task = task
        super().__init__(f"Task [{task}] has no runner; install it before destroy")
