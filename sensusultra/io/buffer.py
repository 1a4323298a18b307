# sensusultra/io/buffer.py
from __future__ import annotations

import struct

import numpy as np

from sensusultra.core.exceptions import DataFormatError, InvalidArgs

_U16 = struct.Struct("<H")
_U32 = struct.Struct("<I")

UNIT_SIZE = 4


class RawBuffer:
    """Bounds-checked, non-owning view over a downloaded dive buffer.

    Every read checks the length first and raises DataFormatError on a
    shortfall, so no partial value is ever returned. ``reads`` counts the
    field extractions performed on this buffer.
    """

    def __init__(self, data=b""):
        try:
            self._view = memoryview(data).cast("B")
        except TypeError as e:
            raise InvalidArgs(f"Expected a bytes-like object, got {type(data).__name__}.") from e
        self._data = data
        self.reads = 0

    def __len__(self) -> int:
        return self._view.nbytes

    @property
    def size(self) -> int:
        return self._view.nbytes

    def release(self) -> None:
        # Drop the references only: numpy views handed out by units() may
        # still export the underlying buffer.
        self._view = memoryview(b"")
        self._data = b""

    def require(self, size: int, what: str = "data") -> None:
        if self.size < size:
            raise DataFormatError(
                f"Buffer too short for {what}: need {size} bytes, have {self.size}."
            )

    def uint16_le(self, offset: int) -> int:
        self.require(offset + _U16.size, f"uint16 at offset {offset}")
        self.reads += 1
        return _U16.unpack_from(self._view, offset)[0]

    def uint32_le(self, offset: int) -> int:
        self.require(offset + _U32.size, f"uint32 at offset {offset}")
        self.reads += 1
        return _U32.unpack_from(self._view, offset)[0]

    def matches(self, offset: int, pattern: bytes) -> bool:
        end = offset + len(pattern)
        if offset < 0 or end > self.size:
            return False
        return self._view[offset:end] == pattern

    def find(self, pattern: bytes, start: int = 0) -> int:
        """Byte-granular search for `pattern`; -1 when absent."""
        data = self._data
        if not hasattr(data, "find"):
            # memoryview has no find(); the copy is scoped to this call
            data = self._view.tobytes()
        return data.find(pattern, start)

    def units(self, offset: int) -> np.ndarray:
        """Whole little-endian 4-byte units from `offset`, as a uint32 view."""
        count = (self.size - offset) // UNIT_SIZE
        self.reads += 1
        if count <= 0:
            return np.empty(0, dtype=np.uint32)
        return np.frombuffer(self._view, dtype="<u4", count=count, offset=offset)
