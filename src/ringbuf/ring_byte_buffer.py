import logging
import typing

from ringbuf.consts import RING_SIZE, MIN_RING_SIZE
from ringbuf.exceptions import ShiftOutOfRangeError


class RingByteBuffer:
    def __init__(self, size: int = RING_SIZE):
        if not isinstance(size, int) or size < MIN_RING_SIZE:
            raise ValueError(f"Ring size must be an integer of at least {MIN_RING_SIZE}, got {size!r}")
        self._buffer = bytearray(size)
        self._buflen = size
        self._start = 0
        self._end = 1
        self._overflows = 0

    def __len__(self):
        # start == end means full, not empty
        if self._start < self._end:
            return self._end - self._start
        else:
            return self._buflen - (self._start - self._end)

    def __bool__(self):
        return True

    def __iter__(self) -> typing.Iterator[int]:
        for i in range(len(self)):
            yield self._buffer[(self._start + i) % self._buflen]

    def __getitem__(self, index: int | slice) -> int | bytes:
        if isinstance(index, slice):
            return self.get_all()[index]
        if index < 0:
            index += len(self)
        value = self.read(index)
        if value is None:
            raise IndexError("RingByteBuffer index out of range")
        return value

    def __repr__(self):
        return f"{self.__class__.__name__}(capacity={self._buflen}, len={len(self)})"

    @property
    def capacity(self):
        return self._buflen

    @property
    def is_full(self):
        return self._start == self._end

    @property
    def overflow_count(self):
        return self._overflows

    def reset_overflow_count(self) -> int:
        count = self._overflows
        self._overflows = 0
        return count

    def len(self) -> int:
        return len(self)

    def clear(self):
        self._start = 0
        self._end = 1
        self._buffer[0] = 0

    def push(self, value: int) -> bool:
        if not isinstance(value, int) or not 0 <= value < 256:
            raise ValueError(f"{value!r} is not a byte value")

        start = self._start
        end = self._end

        self._buffer[end] = value
        if start == end:
            self._start = (start + 1) % self._buflen
            self._overflows += 1
            overflow = True
        else:
            overflow = False
        self._end = (end + 1) % self._buflen
        return overflow

    def append(self, data: typing.Iterable[int]) -> bool:
        """Only the overflow flag of the last push is returned. Use overflow_count to count evictions."""
        overflow = False
        overflows_before = self._overflows
        try:
            for value in data:
                overflow = self.push(value)
        finally:
            if self._overflows != overflows_before:
                logging.debug(f"{self!r} dropped {self._overflows - overflows_before} oldest byte(s)")
        return overflow

    def get_all(self) -> bytes:
        w = self._start + len(self)
        if w <= self._buflen:
            return bytes(self._buffer[self._start:w])
        else:
            return bytes(self._buffer[self._start:] + self._buffer[:w - self._buflen])

    def read(self, index: int) -> int | None:
        if 0 <= index < len(self):
            return self._buffer[(self._start + index) % self._buflen]
        return None

    def shift_l(self, count: int):
        length = len(self)
        if not 0 <= count < length:
            logging.debug(f"{self!r} rejected shift by {count}")
            raise ShiftOutOfRangeError(count, length)
        self._start = (self._start + count) % self._buflen

    def get_read_buffer(self) -> memoryview:
        if self._start < self._end:
            return memoryview(self._buffer)[self._start:self._end]
        else:
            return memoryview(self._buffer)[self._start:]

    def compact(self):
        length = len(self)
        if self._start == 0:
            pass
        elif self._start + length <= self._buflen:
            self._buffer[:length] = self._buffer[self._start:self._start + length]
        else:
            # https://cplusplus.com/reference/algorithm/rotate/
            f = 0
            m = self._start
            l = self._buflen
            n = m
            while f != n:
                self._buffer[f], self._buffer[n] = self._buffer[n], self._buffer[f]
                f += 1
                n += 1
                if n == l:
                    n = m
                elif f == m:
                    m = n
        self._start = 0
        self._end = length % self._buflen
