import re
from typing import Optional

_NOT_IDENT = re.compile(r"[^A-Za-z0-9]")


def make_basename(name: str, prefix: Optional[str] = None, caps: bool = False) -> str:
    """Turn a file name into the variable name used in the emitted code.

    Every character that is not an ASCII letter or digit becomes an
    underscore. The prefix is prepended as given.
    """
    ident = _NOT_IDENT.sub("_", name)
    if caps:
        ident = ident.upper()
    return f"{prefix or ''}{ident}"
