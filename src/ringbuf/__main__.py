import argparse
import dataclasses
import logging
import sys

from ringbuf.consts import RING_SIZE
from ringbuf.exceptions import ShiftOutOfRangeError
from ringbuf.ring_byte_buffer import RingByteBuffer


@dataclasses.dataclass
class ArgumentTuple:
    values: list[str] = dataclasses.field(default_factory=list)
    capacity: int = RING_SIZE
    shifts: list[int] = dataclasses.field(default_factory=list)
    hex: bool = False
    verbose: bool = False


def parse_values(values: list[str], base: int) -> list[int]:
    return [int(x.strip(), base) for x in values if x.strip()]


def __main__(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser("ringbuf",
                                     description="Appends bytes to a fixed-size ring buffer and prints what remains.")
    defaults = ArgumentTuple()
    parser.add_argument("values", nargs="*",
                        default=defaults.values,
                        help="Byte values to append, oldest first.")
    parser.add_argument("-c", "--capacity", action="store", type=int,
                        dest="capacity", default=defaults.capacity,
                        help="Number of bytes the ring holds.")
    parser.add_argument("-s", "--shift", action="append", type=int,
                        dest="shifts", default=defaults.shifts,
                        help="Drop this many bytes from the front after appending. May be repeated.")
    parser.add_argument("-x", "--hex", action="store_true",
                        dest="hex", default=defaults.hex,
                        help="Read values as hexadecimal numbers.")
    parser.add_argument("-v", "--verbose", action="store_true",
                        dest="verbose", default=defaults.verbose,
                        help="Log buffer internals.")

    args = ArgumentTuple(**vars(parser.parse_args(argv)))

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, force=True,
                        format="%(asctime)s\t%(levelname)s\t%(message)s",
                        handlers=[
                            logging.StreamHandler(sys.stderr),
                        ])

    try:
        buf = RingByteBuffer(args.capacity)
        overflow = buf.append(parse_values(args.values, 16 if args.hex else 10))
        for count in args.shifts:
            buf.shift_l(count)

    except ShiftOutOfRangeError as e:
        logging.error(f"Cannot shift by {e.count}; only {e.length} byte(s) held")
        return 1

    except ValueError as e:
        logging.error(str(e))
        return 1

    logging.info(f"len={len(buf)} overflow={overflow} overflow_count={buf.overflow_count}")
    print(" ".join(f"{x:02x}" if args.hex else str(x) for x in buf.get_all()))
    return 0


if __name__ == "__main__":
    exit(__main__())
