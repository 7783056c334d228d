"""Theoretical compression ratio of a token sequence.

The estimate models a fixed-width binary layout where every token spends
``ceil(log2(max_offset))`` bits on the offset, ``ceil(log2(max_length))`` bits
on the length and ``symbol_bits`` on the trailing symbol. It is unrelated to
the size of the text token format.
"""

from __future__ import annotations

from .config import CodecConfig
from .types import RatioEstimate, SymbolSeq, TokenSeq


def field_bits(max_value: int) -> int:
    # ceil(log2(v)) for v >= 1
    return (max(1, max_value) - 1).bit_length()


def ratio_report(symbols: SymbolSeq, tokens: TokenSeq, config: CodecConfig | None = None) -> RatioEstimate:
    cfg = config or CodecConfig()
    if not symbols or not tokens:
        return RatioEstimate(original_bits=0, encoded_bits=0, ratio=0.0)

    original_bits = len(symbols) * cfg.symbol_bits
    offset_bits = field_bits(max(token.offset for token in tokens))
    length_bits = field_bits(max(token.length for token in tokens))
    bits_per_token = offset_bits + length_bits + cfg.symbol_bits
    encoded_bits = len(tokens) * bits_per_token
    return RatioEstimate(
        original_bits=original_bits,
        encoded_bits=encoded_bits,
        ratio=original_bits / encoded_bits,
        offset_bits=offset_bits,
        length_bits=length_bits,
        symbol_bits=cfg.symbol_bits,
        bits_per_token=bits_per_token,
        token_count=len(tokens),
    )


def estimate_ratio(
    symbols: SymbolSeq, tokens: TokenSeq, config: CodecConfig | None = None
) -> tuple[int, int, float]:
    return ratio_report(symbols, tokens, config).as_tuple()
