"""Growable byte buffer for captured command output.

Contains:
- CapturedOutput: Owned byte buffer with explicit length and capacity
"""

import logging
from typing import Optional

from llamacommit.capture.exceptions import CaptureMemoryError
from llamacommit.config import DEFAULT_INITIAL_CAPACITY

LOGGER = logging.getLogger(__name__)


class CapturedOutput:
    """Bytes captured from a command's stdout.

    ``length`` counts the bytes actually read; ``capacity`` is the allocated
    size. ``length <= capacity`` always holds. The buffer is size-terminated:
    only the first ``length`` bytes are ever exposed.
    """

    def __init__(self, initial_capacity: int = DEFAULT_INITIAL_CAPACITY):
        if initial_capacity <= 0:
            raise ValueError("initial_capacity must be positive")
        self._data = bytearray(initial_capacity)
        self.length = 0
        self.returncode: Optional[int] = None

    @property
    def capacity(self) -> int:
        return len(self._data)

    @property
    def free(self) -> int:
        return self.capacity - self.length

    def __len__(self) -> int:
        return self.length

    def __bool__(self) -> bool:
        return self.length > 0

    def reserve(self, needed: int) -> None:
        """Double the capacity until at least ``needed`` bytes are free.

        Raises:
            CaptureMemoryError: If the buffer cannot be grown.
        """
        while self.free < needed:
            new_capacity = self.capacity * 2
            try:
                self._data.extend(bytes(self.capacity))
            except MemoryError as e:
                raise CaptureMemoryError(
                    f"cannot grow capture buffer to {new_capacity} bytes"
                ) from e
            LOGGER.debug("Capture buffer grown to %d bytes", new_capacity)

    def fill_from(self, stream) -> int:
        """Read once from ``stream`` into the free space.

        Args:
            stream: Raw binary stream supporting ``readinto``.

        Returns:
            Number of bytes read; 0 means end of stream.
        """
        with memoryview(self._data) as view, view[self.length:] as window:
            n = stream.readinto(window)
        if n is None:
            raise BlockingIOError("stream has no data available")
        self.length += n
        return n

    def to_bytes(self) -> bytes:
        """Return exactly the captured bytes."""
        return bytes(self._data[: self.length])

    def text(self, encoding: str = "utf-8") -> str:
        """Return the captured bytes decoded as text.

        Undecodable bytes are kept as surrogate escapes so nothing is lost.
        """
        return self.to_bytes().decode(encoding, errors="surrogateescape")

    def release(self) -> None:
        """Drop the buffer contents."""
        self._data = bytearray()
        self.length = 0

    def __repr__(self) -> str:
        return f"CapturedOutput(length={self.length}, capacity={self.capacity})"
