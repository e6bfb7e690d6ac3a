from .api import (
    decode,
    decode_lenient,
    encode,
    encode_compact,
    encode_pipe_delimited,
    encode_readable,
    encode_tabular,
)
from .errors import (
    CountMismatchError,
    StrictModeError,
    ToonDecodeError,
    ToonEncodeError,
    ToonError,
    ToonIndentationError,
    ToonSyntaxError,
)
from .normalize import ToonSerializable, normalize_value
from .options import DecodeOptions, EncodeOptions
from .output_parser import ToonOutputParser
from .prompting import build_format_instructions
from .stats import FormatComparison, compare_with_json, estimate_tokens, toon_size

__version__ = "0.1.0"

__all__ = [
    "encode",
    "decode",
    "encode_compact",
    "encode_readable",
    "encode_tabular",
    "encode_pipe_delimited",
    "decode_lenient",
    "EncodeOptions",
    "DecodeOptions",
    "ToonSerializable",
    "normalize_value",
    "ToonError",
    "ToonEncodeError",
    "ToonDecodeError",
    "ToonSyntaxError",
    "StrictModeError",
    "CountMismatchError",
    "ToonIndentationError",
    "FormatComparison",
    "toon_size",
    "estimate_tokens",
    "compare_with_json",
    "ToonOutputParser",
    "build_format_instructions",
]
