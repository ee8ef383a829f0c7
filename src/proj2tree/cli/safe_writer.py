"""Safe output writing utilities for proj2tree CLI.

This module provides a safe writing interface that handles
signals and interruptions gracefully.
"""

import errno
import os
import types
from pathlib import Path
from typing import Optional, Type, Union

from proj2tree.cli.signal_handler import signal_handler


class SafeWriter:
    """Safe writing interface for handling output with signal awareness.

    Writes go straight to a file descriptor, either one passed in (stdout) or one
    belonging to a file this writer creates. The file is created, or truncated, on
    construction.

    Attributes:
        file: Either a file path or file descriptor for output.
        fd: The actual file descriptor being written to.
    """

    def __init__(self, file: Union[int, str, Path]):
        """Initialize the safe writer.

        Args:
            file: Either a file descriptor (int) or a path for the output file.

        Raises:
            TypeError: If file is neither an int nor path-like.
            OSError: If the output file cannot be created.
        """
        self.file = file
        self._closed = False

        if isinstance(file, int):
            self.fd = file
            self._file_obj = None
        elif isinstance(file, (str, os.PathLike)):
            path = Path(file)
            self._file_obj = path.open("w", encoding="utf-8")
            self.fd = self._file_obj.fileno()
        else:
            raise TypeError(f"Expected int, str, or PathLike, got {type(file).__name__}")

    def write(self, data: str) -> None:
        """Safely write data with signal checking.

        Args:
            data: String data to write.

        Raises:
            BrokenPipeError: If SIGPIPE/SIGINT was received or the pipe is broken.
            OSError: If an I/O error occurs during writing.
            ValueError: If attempting to write to a closed writer.
        """
        if self._closed:
            raise ValueError("Cannot write to closed SafeWriter")

        if signal_handler.interrupted:
            raise BrokenPipeError()

        payload = data.encode("utf-8")
        try:
            # os.write may write fewer bytes than requested
            while payload:
                written = os.write(self.fd, payload)
                payload = payload[written:]
        except OSError as e:
            if e.errno == errno.EPIPE:
                raise BrokenPipeError()
            raise

    def close(self) -> None:
        """Close the file if it was opened by this class.

        The writer is marked as closed even if closing fails with a broken pipe.
        """
        if self._closed:
            return

        if self._file_obj is not None:
            try:
                self._file_obj.close()
            except OSError as e:
                if e.errno != errno.EPIPE:
                    raise

        self._closed = True

    def __enter__(self) -> "SafeWriter":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[types.TracebackType],
    ) -> None:
        try:
            self.close()
        except OSError:
            # Only suppress close errors if there was already an exception
            if exc_type is None:
                raise
