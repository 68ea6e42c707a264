"""Errors raised by the savings services."""


class StoreConfigurationError(RuntimeError):
    """The store cannot be built from the current settings."""


class DashboardUnavailableError(RuntimeError):
    """A store query failed; no dashboard can be rendered."""
