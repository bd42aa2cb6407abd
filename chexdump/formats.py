import enum
import io
import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, TextIO, Tuple

from .errors import UnknownFormat
from .words import WordSize, dump_words, padded, word_count

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DumpRequest:
    basename: str
    word_size: WordSize = WordSize.BYTE
    # Carried through to every renderer; none of them reads it yet.
    options: Dict[str, str] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "word_size", WordSize.parse(self.word_size))


class Format(enum.Enum):
    LONG = "long"
    C_EXTERN_HEADER = "c-extern"
    C_SOURCE = "c-source"
    C_STATIC = "c-static"
    ZIG = "zig"


def _size_line(info: DumpRequest, in_size: int) -> str:
    return f"static const size_t {info.basename}_SIZE = {in_size};\n"


def _array_body(info: DumpRequest, data: Optional[bytes], in_size: int) -> str:
    body = io.StringIO()
    dump_words(data, in_size, info.word_size, body, "0x", ",")
    return body.getvalue()


def _c_array(info: DumpRequest, data: Optional[bytes], in_size: int, pfx: str) -> str:
    count = word_count(info.word_size, in_size)
    return (
        f"{pfx}uint{info.word_size.bits}_t {info.basename}[{count}] = {{\n"
        f"{_array_body(info, data, in_size)}"
        "\n};\n"
    )


def render_long(info: DumpRequest, data: Optional[bytes], in_size: int) -> str:
    return padded(data, WordSize.BYTE, in_size).hex()


def render_c_extern(info: DumpRequest, data: Optional[bytes], in_size: int) -> str:
    count = word_count(info.word_size, in_size)
    return f"extern uint{info.word_size.bits}_t {info.basename}[{count}];\n" + _size_line(info, in_size)


def render_c_source(info: DumpRequest, data: Optional[bytes], in_size: int) -> str:
    return _c_array(info, data, in_size, "")


def render_c_static(info: DumpRequest, data: Optional[bytes], in_size: int) -> str:
    return _size_line(info, in_size) + _c_array(info, data, in_size, "static const ")


def render_zig(info: DumpRequest, data: Optional[bytes], in_size: int) -> str:
    # Zig's length slot takes the byte count, not the word count.
    return (
        f"const {info.basename} [{in_size}]u{info.word_size.bits} = {{\n"
        f"{_array_body(info, data, in_size)}"
        "\n};\n"
    )


Renderer = Callable[[DumpRequest, Optional[bytes], int], str]


@dataclass(frozen=True)
class FormatSpec:
    format: Format
    description: str
    render: Renderer
    needs_data: bool = True

    @property
    def name(self) -> str:
        return self.format.value


FORMATS: Tuple[FormatSpec, ...] = (
    FormatSpec(Format.LONG, "Long one-line string of hex characters", render_long),
    FormatSpec(Format.C_EXTERN_HEADER, "C header extern declaration", render_c_extern, needs_data=False),
    FormatSpec(Format.C_SOURCE, "C source definition", render_c_source),
    FormatSpec(Format.C_STATIC, "C static definition", render_c_static),
    FormatSpec(Format.ZIG, "Zig array", render_zig),
)


def format_names() -> List[Tuple[str, str]]:
    return [(spec.name, spec.description) for spec in FORMATS]


def lookup(fmt: object) -> FormatSpec:
    """Find the table entry for a Format member or its command-line name."""
    for spec in FORMATS:
        if fmt is spec.format or fmt == spec.name:
            return spec
    raise UnknownFormat(fmt)


def render(info: DumpRequest, data: Optional[bytes], in_size: Optional[int], fmt: object) -> str:
    spec = lookup(fmt)
    if in_size is None:
        in_size = len(data) if data is not None else 0
    logger.debug(
        "rendering %s: %d byte(s) as %d-byte words, basename %r",
        spec.name, in_size, info.word_size, info.basename,
    )
    return spec.render(info, data, in_size)


def dump(info: DumpRequest, data: Optional[bytes], in_size: Optional[int], out: TextIO, fmt: object) -> None:
    """Render one format and write it to out.

    The emission is built completely before anything reaches out, so an
    error leaves the sink untouched.
    """
    out.write(render(info, data, in_size, fmt))
