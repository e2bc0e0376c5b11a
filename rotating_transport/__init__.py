"""Size-triggered log file rotation with timestamped archives and retention."""

from rotating_transport.config import RotationPolicy, TransportConfig, load_config
from rotating_transport.errors import (
    ConfigError,
    RotationError,
    ScanError,
    TransportError,
    TransportInitError,
)
from rotating_transport.formatting import LogMessage
from rotating_transport.transport import FileTransport, open_transport

__all__ = [
    "ConfigError",
    "FileTransport",
    "LogMessage",
    "RotationError",
    "RotationPolicy",
    "ScanError",
    "TransportConfig",
    "TransportError",
    "TransportInitError",
    "load_config",
    "open_transport",
]
