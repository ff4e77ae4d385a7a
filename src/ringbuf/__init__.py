from ringbuf.consts import RING_SIZE, MIN_RING_SIZE
from ringbuf.exceptions import ShiftOutOfRangeError
from ringbuf.ring_byte_buffer import RingByteBuffer

__all__ = ["RingByteBuffer", "ShiftOutOfRangeError", "RING_SIZE", "MIN_RING_SIZE"]
