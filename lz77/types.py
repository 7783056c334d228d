"""Shared types for the LZ77 implementation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Hashable, Optional, Sequence

from .errors import CorruptTokenError

Symbol = Hashable
SymbolSeq = Sequence[Symbol]


@dataclass(frozen=True)
class Token:
    offset: int
    length: int
    next_symbol: Optional[Symbol] = None

    def __post_init__(self) -> None:
        if self.offset < 0 or self.length < 0:
            raise CorruptTokenError("Token offset and length must be non-negative.")

    @property
    def is_literal(self) -> bool:
        return self.length == 0

    @property
    def is_final(self) -> bool:
        return self.next_symbol is None


TokenSeq = Sequence[Token]


@dataclass(frozen=True)
class RatioEstimate:
    original_bits: int
    encoded_bits: int
    ratio: float
    offset_bits: int = 0
    length_bits: int = 0
    symbol_bits: int = 0
    bits_per_token: int = 0
    token_count: int = 0

    def as_tuple(self) -> tuple[int, int, float]:
        return self.original_bits, self.encoded_bits, self.ratio


@dataclass(frozen=True)
class CompressionResult:
    tokens: list[Token]
    original_length: int
    token_count: int
    estimate: RatioEstimate
