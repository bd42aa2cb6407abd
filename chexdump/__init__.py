from .errors import BufferTooShort, ChexError, InvalidWordSize, UnknownFormat
from .formats import FORMATS, DumpRequest, Format, FormatSpec, dump, format_names, lookup, render
from .naming import make_basename
from .words import WordSize, dump_words, iter_words, word_count

__version__ = "0.1.0"

__all__ = [
    "BufferTooShort",
    "ChexError",
    "DumpRequest",
    "FORMATS",
    "Format",
    "FormatSpec",
    "InvalidWordSize",
    "UnknownFormat",
    "WordSize",
    "dump",
    "dump_words",
    "format_names",
    "iter_words",
    "lookup",
    "make_basename",
    "render",
    "word_count",
]
