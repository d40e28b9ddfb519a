import io
import struct
from typing import IO, Union

from .errors import TruncatedStreamError

Source = Union[IO[bytes], bytes, bytearray, memoryview]


class ByteReader:
    """Reads big-endian values from a binary file object or bytes-like value."""

    def __init__(self, source: Source):
        if isinstance(source, (bytes, bytearray, memoryview)):
            source = io.BytesIO(source)
        self._stream = source

    def read_bytes(self, size: int) -> bytes:
        data = self._stream.read(size) or b""
        # raw streams may return less than asked before the end of the data
        while len(data) < size:
            chunk = self._stream.read(size - len(data))
            if not chunk:
                break
            data += chunk
        if len(data) != size:
            raise TruncatedStreamError(
                f"QOI.decode: Unexpected end of data, needed {size} bytes, got {len(data)}"
            )
        return data

    def read_u8(self) -> int:
        return self.read_bytes(1)[0]

    def read_u32(self) -> int:
        return struct.unpack(">I", self.read_bytes(4))[0]

    def exhausted(self) -> bool:
        return not self._stream.read(1)


class ByteWriter:
    """
    Collects big-endian values and hands them to `sink` on flush().

    Nothing reaches the sink before flush(), so an aborted encode leaves it
    untouched.
    """

    def __init__(self, sink: IO[bytes]):
        self._sink = sink
        self._buffer = bytearray()

    def __len__(self):
        return len(self._buffer)

    def write_u8(self, value: int) -> None:
        self._buffer.append(value & 0xFF)

    def write_bytes(self, data) -> None:
        self._buffer.extend(data)

    def write_u32(self, value: int) -> None:
        self._buffer.extend(struct.pack(">I", value))

    def flush(self) -> int:
        written = len(self._buffer)
        self._sink.write(bytes(self._buffer))
        self._buffer.clear()
        return written
