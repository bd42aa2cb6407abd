import enum
import sys
from typing import Iterator, Optional, TextIO

from .errors import BufferTooShort, InvalidWordSize


class WordSize(enum.IntEnum):
    BYTE = 1
    HALF = 2
    WORD = 4
    DOUBLE = 8

    @classmethod
    def parse(cls, value: object) -> "WordSize":
        """Accept an int or a decimal string; anything outside 1/2/4/8 is refused."""
        if isinstance(value, cls):
            return value
        # only ints (not bool) and strings; floats are never truncated
        if isinstance(value, bool) or not isinstance(value, (int, str)):
            raise InvalidWordSize(value)
        try:
            return cls(int(value))
        except (TypeError, ValueError):
            raise InvalidWordSize(value) from None

    @property
    def bits(self) -> int:
        return self.value * 8

    @property
    def hex_width(self) -> int:
        return self.value * 2

    @property
    def row_length(self) -> int:
        # tokens per output row
        if self is WordSize.DOUBLE:
            return 4
        if self is WordSize.BYTE:
            return 16
        return 8


def word_count(word_size: int, total_size: int) -> int:
    return total_size // word_size + bool(total_size % word_size)


def padded(data: Optional[bytes], word_size: WordSize, in_size: Optional[int] = None) -> bytes:
    """Return the first in_size bytes of data zero-extended to a whole number of words."""
    if data is None:
        raise BufferTooShort(in_size or 0, 0)
    if in_size is None:
        in_size = len(data)
    if in_size > len(data):
        raise BufferTooShort(in_size, len(data))
    buf = bytes(data[:in_size])
    return buf + bytes(word_count(word_size, in_size) * word_size - in_size)


def iter_words(data: Optional[bytes], word_size: object, in_size: Optional[int] = None) -> Iterator[int]:
    """Yield the buffer as unsigned words in host byte order."""
    size = WordSize.parse(word_size)
    buf = padded(data, size, in_size)
    for i in range(0, len(buf), size):
        yield int.from_bytes(buf[i:i + size], sys.byteorder)


def dump_words(
    data: Optional[bytes],
    in_size: Optional[int],
    word_size: object,
    out: TextIO,
    prefix: str = "0x",
    separator: str = ",",
) -> None:
    size = WordSize.parse(word_size)
    words = list(iter_words(data, size, in_size))
    for i, word in enumerate(words, 1):
        out.write(f"{prefix}{word:0{size.hex_width}x}{separator}")
        if i % size.row_length == 0 and i < len(words):
            out.write("\n")
