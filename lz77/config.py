"""Configuration for the LZ77 codec."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CodecConfig:
    symbol_bits: int = 8
    eof_literal: str = "eof"
    escape_symbols: bool = True
    encoding: str = "utf-8"
    verify: bool = False
