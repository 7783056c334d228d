"""Configuration checks."""

from __future__ import annotations

from dataclasses import dataclass
import warnings

from .config import CodecConfig

_RESERVED_FORMAT_CHARS = ("(", ")", ",")


@dataclass(frozen=True)
class ConfigWarning:
    field: str
    message: str


def validate_config(config: CodecConfig) -> list[ConfigWarning]:
    found: list[ConfigWarning] = []
    if 0 < config.symbol_bits < 8:
        found.append(
            ConfigWarning("symbol_bits", "symbol_bits below 8 undercounts the size of text symbols.")
        )
    if len(config.eof_literal) == 1:
        found.append(
            ConfigWarning("eof_literal", "A one-character eof_literal is indistinguishable from a literal symbol.")
        )
    if any(char in config.eof_literal for char in _RESERVED_FORMAT_CHARS):
        found.append(
            ConfigWarning("eof_literal", "eof_literal contains token delimiters and cannot be parsed back.")
        )
    return found


def require_valid_config(config: CodecConfig) -> CodecConfig:
    if config.symbol_bits <= 0:
        raise ValueError("symbol_bits must be positive.")
    if not config.eof_literal:
        raise ValueError("eof_literal must not be empty.")
    for warning in validate_config(config):
        warnings.warn(warning.message, RuntimeWarning, stacklevel=2)
    return config
