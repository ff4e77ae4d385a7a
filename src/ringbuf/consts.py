RING_SIZE = 1024
MIN_RING_SIZE = 2
