"""Custom exceptions for pattern_catalog.

Provides clear, actionable error messages for misuse of the singleton
providers and the pattern demonstrations.
"""


class PatternCatalogError(Exception):
    """Base exception for all pattern_catalog errors."""

    pass


class ProviderNotInitializedError(PatternCatalogError):
    """Raised when an eager provider is accessed before initialization.

    Eager providers construct their instance up front, so the composition
    root must call ``initialize()`` (or ``SingletonRegistry.initialize_all()``)
    before any caller reaches ``get_instance()``.
    """

    def __init__(self, name: str | None = None, message: str | None = None):
        """Initialize with the provider name and an optional custom message.

        Args:
            name: Provider name or strategy label, used in the default message.
            message: Optional custom error message. If not provided, uses default.
        """
        self.name = name
        if message is None:
            message = self._default_message(name)
        super().__init__(message)

    @staticmethod
    def _default_message(name: str | None) -> str:
        """Generate default error message with setup instructions.

        Returns:
            Formatted error message with actionable steps.
        """
        target = f"'{name}'" if name else "eager provider"
        return (
            f"Provider {target} has not been initialized.\n\n"
            "Eager providers build their instance before first use. Call one of:\n"
            "  provider.initialize()\n"
            "  registry.initialize_all()\n"
            "from your composition root before handing the provider to callers."
        )


class ConstructionCancelledError(PatternCatalogError):
    """Raised when a slow construction is cancelled before it completes.

    The guard is left EMPTY and the creation counter is not incremented,
    so a later call may retry.
    """

    def __init__(self, elapsed: float | None = None):
        self.elapsed = elapsed
        if elapsed is None:
            message = "Construction was cancelled before it completed"
        else:
            message = f"Construction was cancelled after {elapsed:.3f}s"
        super().__init__(message)


class ProviderNotFoundError(PatternCatalogError, KeyError):
    """Raised when a registry lookup names an unknown provider."""

    def __init__(self, name: str, available: list[str] | None = None):
        self.name = name
        message = f"No provider registered under '{name}'"
        if available:
            message += f" (available: {', '.join(available)})"
        super().__init__(message)

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.args[0]


class ProviderAlreadyRegisteredError(PatternCatalogError):
    """Raised when a registry name is registered twice."""

    pass


class UnsupportedPlatformError(PatternCatalogError):
    """Raised when no widget factory exists for the requested OS."""

    pass


class UnknownDemoError(PatternCatalogError):
    """Raised when a catalog demo name is not registered."""

    pass


class InvalidConfigError(PatternCatalogError):
    """Raised when an environment variable holds an unusable value."""

    def __init__(self, variable: str, value: str, expected: str):
        self.variable = variable
        self.value = value
        super().__init__(f"{variable}={value!r} is invalid: expected {expected}")
