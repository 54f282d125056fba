class ForwardingError(RuntimeError):
    """Raised when a record could not be handed to the sheet endpoint."""
    pass


class ConfigurationError(ForwardingError):
    """Raised when the sheet endpoint URL is not configured."""
    pass


class TransportError(ForwardingError):
    """Raised when the sheet endpoint call fails (network error, timeout, non-2xx status)."""
    pass
