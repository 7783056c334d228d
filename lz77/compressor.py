"""Core compression and decompression APIs."""

from __future__ import annotations

from .config import CodecConfig
from .decoder import decode
from .encoder import encode
from .ratio import ratio_report
from .types import CompressionResult, Symbol, SymbolSeq, TokenSeq
from .validation import require_valid_config


def compress(symbols: SymbolSeq, config: CodecConfig | None = None) -> CompressionResult:
    cfg = require_valid_config(config or CodecConfig())
    tokens = encode(symbols)
    result = CompressionResult(
        tokens=tokens,
        original_length=len(symbols),
        token_count=len(tokens),
        estimate=ratio_report(symbols, tokens, cfg),
    )

    if cfg.verify:
        roundtrip = decode(tokens)
        if roundtrip != list(symbols):
            raise ValueError("Round-trip verification failed.")

    return result


def decompress(tokens: TokenSeq, config: CodecConfig | None = None) -> list[Symbol]:
    require_valid_config(config or CodecConfig())
    return decode(tokens)
