"""File transport: append log lines with size-based rotation."""

import logging
import os
import threading
from datetime import datetime, timezone

from rotating_transport.active_file import ActiveFile
from rotating_transport.config import TransportConfig
from rotating_transport.console import log_console
from rotating_transport.errors import TransportInitError
from rotating_transport.formatting import LogMessage, format_message
from rotating_transport.paths import find_log_path
from rotating_transport.rotator import rotate

logger = logging.getLogger(__name__)


class FileTransport:
    """Write gate for one active log file.

    All writes, rotations and close go through one lock, so the handle is
    never written to while it is being swapped. Nothing raised by the file
    system escapes write(); failures are reported through the console sink.
    """

    def __init__(
        self,
        config: TransportConfig,
        path_resolver=find_log_path,
        formatter=format_message,
        console=log_console,
        time_func=None,
    ):
        self._config = config
        self._policy = config.policy
        self._path_resolver = path_resolver
        self._formatter = formatter
        self._console = console
        self._time_func = time_func or (lambda: datetime.now(timezone.utc))
        self._lock = threading.Lock()
        self._active: ActiveFile | None = None
        self._path: str | None = None
        self._disabled = not config.enabled

    @property
    def disabled(self) -> bool:
        return self._disabled

    @property
    def path(self) -> str | None:
        return self._path

    @property
    def size(self) -> int:
        return self._active.size if self._active is not None else 0

    def open(self) -> "FileTransport":
        """Resolve the path and open the active file.

        Raises TransportInitError if no usable path exists; the transport is
        then disabled for good.
        """
        with self._lock:
            self._ensure_open()
        return self

    def _disable(self, message: str, error=None):
        self._disabled = True
        self._console(message, error)
        raise TransportInitError(message) from error

    def _ensure_open(self):
        if self._disabled or self._active is not None:
            return

        if self._path is None:
            path = self._config.file or self._path_resolver(self._config.app_name)
            if not path:
                self._disable("Could not set a log file")
            path = os.path.abspath(path)
            try:
                os.makedirs(os.path.dirname(path), exist_ok=True)
                self._active = ActiveFile.open(path, self._config.stream_mode)
            except OSError as e:
                self._disable(f"Could not open log file {path}", e)
            self._path = path
            logger.debug("Opened log file %s (%d bytes)", path, self._active.size)
            return

        # Reopen after a failed rotation left no handle behind.
        self._active = ActiveFile.open(self._path, "a")

    def _needs_rotation(self) -> bool:
        return (
            self._policy.rotation_enabled
            and self._active is not None
            and self._active.size >= self._policy.max_size_bytes
        )

    def _rotate(self) -> str | None:
        current, self._active = self._active, None
        # A failed reopen leaves _active as None; write() retries the open.
        self._active, archived = rotate(
            current,
            self._policy,
            time_func=self._time_func,
            console=self._console,
            disambiguate=self._config.disambiguate_collisions,
        )
        return archived

    def write(self, text: str) -> str | None:
        """Append text. Returns the archive path if a rotation happened first."""
        with self._lock:
            if self._disabled:
                return None
            try:
                self._ensure_open()
            except TransportInitError:
                return None
            except OSError as e:
                self._console("Could not reopen log file", e)
                return None

            archived = None
            if self._needs_rotation():
                archived = self._rotate()

            try:
                self._ensure_open()
                self._active.write(text)
            except (OSError, ValueError) as e:
                self._console("Could not write to log file", e)
            return archived

    def log(self, level: str, *data) -> str | None:
        return self(LogMessage(level=level, data=data, date=datetime.now()))

    def __call__(self, msg: LogMessage) -> str | None:
        if self._disabled:
            return None
        try:
            text = self._formatter(msg) + os.linesep
        except Exception as e:
            # Formatters run arbitrary __str__ code.
            self._console("Could not format log message", e)
            return None
        return self.write(text)

    def close(self):
        with self._lock:
            if self._active is None:
                return
            try:
                self._active.close()
            except OSError as e:
                self._console("Could not close log file", e)
            self._active = None

    def __enter__(self):
        return self.open()

    def __exit__(self, *exc):
        self.close()
        return False


def open_transport(config: TransportConfig, **kwargs) -> FileTransport:
    """Construct a FileTransport and open it. Raises TransportInitError."""
    return FileTransport(config, **kwargs).open()
