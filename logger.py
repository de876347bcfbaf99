# File: logger.py
import os
import sys
from typing import Optional, TextIO


class TeeLogger:
    """
    Stream wrapper writing everything to a console stream and a log file.
    Used as a context manager it replaces sys.stderr for the duration of the
    block; stdout is never touched because it carries the protocol.
    """

    def __init__(self, filepath: str, stream: Optional[TextIO] = None):
        self.filepath = filepath
        self.terminal: TextIO = stream if stream is not None else sys.stderr
        self.log_file: Optional[TextIO] = None
        self._replaced: Optional[TextIO] = None

    def open(self) -> bool:
        """Opens (line-buffered) the log file. Returns False if it cannot be created."""
        log_dir = os.path.dirname(self.filepath)
        try:
            if log_dir:
                os.makedirs(log_dir, exist_ok=True)
            self.log_file = open(self.filepath, "a", encoding="utf-8", buffering=1)
        except OSError as e:
            self.terminal.write(f"ERROR: Could not open log file {self.filepath}: {e}\n")
            return False
        self.terminal.write(f"[TeeLogger] Mirroring stderr to: {self.filepath}\n")
        return True

    def write(self, message: str) -> int:
        written = self.terminal.write(message)
        if self.log_file is not None:
            try:
                self.log_file.write(message)
            except OSError as e:
                self.log_file = None
                self.terminal.write(f"Warning: log file disabled after write error: {e}\n")
        return written

    def flush(self) -> None:
        self.terminal.flush()
        if self.log_file is not None:
            self.log_file.flush()

    def close(self) -> None:
        if self.log_file is None:
            return
        log_file, self.log_file = self.log_file, None
        try:
            log_file.close()
        except OSError as e:
            self.terminal.write(f"Warning: error closing log file: {e}\n")

    def __enter__(self) -> "TeeLogger":
        self.open()
        self._replaced = sys.stderr
        sys.stderr = self  # type: ignore[assignment]
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._replaced is not None:
            sys.stderr = self._replaced
            self._replaced = None
        self.close()
