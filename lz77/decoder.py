"""LZ77 token replay."""

from __future__ import annotations

from .errors import CorruptTokenError, EmptyTokenListError
from .types import Symbol, TokenSeq


def decode(tokens: TokenSeq) -> list[Symbol]:
    if not tokens:
        raise EmptyTokenListError("Token list is empty.")

    output: list[Symbol] = []
    for index, token in enumerate(tokens):
        if not token.is_literal:
            if token.offset == 0:
                raise CorruptTokenError(f"Token {index} copies {token.length} symbols with offset 0.")
            start = len(output) - token.offset
            if start < 0:
                raise CorruptTokenError(
                    f"Token {index} reaches {token.offset} symbols back but only {len(output)} are decoded."
                )
            # output grows inside the loop, so offset < length repeats the run
            for k in range(token.length):
                output.append(output[start + k])
        if not token.is_final:
            output.append(token.next_symbol)
    return output


def decode_text(tokens: TokenSeq) -> str:
    return "".join(decode(tokens))
