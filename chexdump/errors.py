class ChexError(Exception):
    """Base class for everything the dumper raises on bad input."""


class InvalidWordSize(ChexError, ValueError):
    def __init__(self, value: object) -> None:
        super().__init__(f"unsupported word size: {value!r} (expected 1, 2, 4 or 8)")
        self.value = value


class BufferTooShort(ChexError, ValueError):
    def __init__(self, needed: int, available: int) -> None:
        super().__init__(f"buffer holds {available} byte(s), {needed} required")
        self.needed = needed
        self.available = available


class UnknownFormat(ChexError, ValueError):
    def __init__(self, name: object) -> None:
        super().__init__(f"unrecognised format: {name}")
        self.name = name
