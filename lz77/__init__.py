"""lz77: greedy LZ77 token codec with a bit-width ratio estimate."""

from .compressor import compress, decompress
from .config import CodecConfig
from .decoder import decode, decode_text
from .encoder import encode
from .errors import CorruptTokenError, EmptyInputError, EmptyTokenListError, FormatError, LZ77Error
from .ratio import estimate_ratio, ratio_report
from .serialization import format_token, format_tokens, parse_token, parse_tokens, read_tokens, write_tokens
from .types import CompressionResult, RatioEstimate, Token
from .validation import ConfigWarning, validate_config

__all__ = [
    "encode",
    "decode",
    "decode_text",
    "estimate_ratio",
    "ratio_report",
    "compress",
    "decompress",
    "CodecConfig",
    "CompressionResult",
    "RatioEstimate",
    "Token",
    "format_token",
    "format_tokens",
    "parse_token",
    "parse_tokens",
    "read_tokens",
    "write_tokens",
    "ConfigWarning",
    "validate_config",
    "LZ77Error",
    "EmptyInputError",
    "EmptyTokenListError",
    "FormatError",
    "CorruptTokenError",
]
