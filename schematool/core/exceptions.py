"""Exception hierarchy for the schematool package."""


class SchemaToolPluginError(Exception):
    """Base exception for all schematool errors."""

    def __init__(self, message: str, context: dict | None = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


class ConfigError(SchemaToolPluginError):
    """Raised when a build file cannot be loaded or applied."""

    pass


class TaskRegistrationError(SchemaToolPluginError):
    """Raised when the host rejects a task registration."""

    pass


class TaskExecutionError(SchemaToolPluginError):
    """Raised when a task fails while executing."""

    pass
