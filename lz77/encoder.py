"""Greedy longest-match LZ77 encoder over an unbounded history window."""

from __future__ import annotations

from collections import defaultdict
from typing import Sequence

from .errors import EmptyInputError
from .types import Symbol, SymbolSeq, Token


def match_length(symbols: SymbolSeq, start: int, position: int) -> int:
    """Length of the run at ``start`` that repeats at ``position``.

    The run may not read past ``position`` on the history side.
    """
    n = len(symbols)
    length = 0
    while (
        position + length < n
        and start + length < position
        and symbols[start + length] == symbols[position + length]
    ):
        length += 1
    return length


def find_best_match(symbols: SymbolSeq, position: int, starts: Sequence[int]) -> tuple[int, int]:
    """Return ``(offset, length)`` of the best match for ``position``.

    ``starts`` holds candidate history indices in ascending order. Only a
    strictly longer match replaces the current best, so among equal lengths
    the most distant occurrence is kept.
    """
    best_offset = 0
    best_length = 0
    remaining = len(symbols) - position
    for start in starts:
        # offsets only shrink from here on, and a match never exceeds its offset
        if position - start <= best_length or best_length == remaining:
            break
        length = match_length(symbols, start, position)
        if length > best_length:
            best_length = length
            best_offset = position - start
    return best_offset, best_length


def encode(symbols: SymbolSeq) -> list[Token]:
    if symbols is None or len(symbols) == 0:
        raise EmptyInputError("Input sequence is empty.")

    n = len(symbols)
    starts_by_symbol: dict[Symbol, list[int]] = defaultdict(list)
    tokens: list[Token] = []
    position = 0
    indexed = 0

    while position < n:
        while indexed < position:
            starts_by_symbol[symbols[indexed]].append(indexed)
            indexed += 1
        offset, length = find_best_match(symbols, position, starts_by_symbol.get(symbols[position], ()))
        if length == 0:
            tokens.append(Token(0, 0, symbols[position]))
            position += 1
            continue
        tail = position + length
        next_symbol = symbols[tail] if tail < n else None
        tokens.append(Token(offset, length, next_symbol))
        position = tail + 1

    return tokens
