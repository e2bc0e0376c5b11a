"""Exception types raised by the rotating file transport."""


class TransportError(Exception):
    """Base class for all transport errors."""


class ConfigError(TransportError):
    pass


class TransportInitError(TransportError):
    """No usable log file path could be resolved."""


class RotationError(TransportError):
    """The active file could not be renamed to its archive name."""


class ScanError(TransportError):
    """The log directory could not be listed."""
