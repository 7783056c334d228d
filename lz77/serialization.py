"""Text line format for token sequences: ``(offset,length,symbol)``."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Union

from .config import CodecConfig
from .errors import EmptyTokenListError, FormatError
from .types import Symbol, Token, TokenSeq

PathLike = Union[str, Path]

_ESCAPES = {"\\": "\\\\", "\n": "\\n", "\r": "\\r", ",": "\\c"}
_UNESCAPES = {escaped: symbol for symbol, escaped in _ESCAPES.items()}


def format_symbol(symbol: Symbol, config: CodecConfig | None = None) -> str:
    cfg = config or CodecConfig()
    if not isinstance(symbol, str) or len(symbol) != 1:
        raise FormatError(f"Only single-character symbols can be written as text, got {symbol!r}.")
    if cfg.escape_symbols:
        return _ESCAPES.get(symbol, symbol)
    if symbol in "\r\n,":
        raise FormatError(f"Symbol {symbol!r} requires escape_symbols.")
    return symbol


def format_token(token: Token, config: CodecConfig | None = None) -> str:
    cfg = config or CodecConfig()
    if token.is_final:
        tail = cfg.eof_literal
    else:
        tail = format_symbol(token.next_symbol, cfg)
    return f"({token.offset},{token.length},{tail})"


def format_tokens(tokens: TokenSeq, config: CodecConfig | None = None) -> list[str]:
    return [format_token(token, config) for token in tokens]


def _parse_count(value: str, line: str) -> int:
    if not (value.isascii() and value.isdigit()):
        raise FormatError(f"Invalid token format: {line!r}")
    return int(value)


def _parse_symbol(value: str, line: str, config: CodecConfig) -> Symbol | None:
    if value == config.eof_literal:
        return None
    if config.escape_symbols and value in _UNESCAPES:
        return _UNESCAPES[value]
    if len(value) != 1:
        raise FormatError(f"Invalid token format: {line!r}")
    return value


def parse_token(line: str, config: CodecConfig | None = None) -> Token:
    cfg = config or CodecConfig()
    body = line.rstrip("\r\n")
    if body.startswith("("):
        body = body[1:]
    if body.endswith(")"):
        body = body[:-1]
    fields = body.split(",")
    if len(fields) != 3:
        raise FormatError(f"Invalid token format: {line!r}")
    offset = _parse_count(fields[0], line)
    length = _parse_count(fields[1], line)
    return Token(offset, length, _parse_symbol(fields[2], line, cfg))


def parse_tokens(lines: Iterable[str], config: CodecConfig | None = None) -> list[Token]:
    cfg = config or CodecConfig()
    tokens: list[Token] = []
    for number, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        try:
            tokens.append(parse_token(line, cfg))
        except FormatError as exc:
            raise FormatError(f"Line {number}: {exc}") from exc
    if not tokens:
        raise EmptyTokenListError("No valid tokens found.")
    return tokens


def split_lines(text: str) -> list[str]:
    # only \n separates token lines; other Unicode line breaks are symbols
    return [line[:-1] if line.endswith("\r") else line for line in text.split("\n")]


def read_text(path: PathLike, config: CodecConfig | None = None) -> str:
    cfg = config or CodecConfig()
    with Path(path).open("r", encoding=cfg.encoding, newline="") as handle:
        return handle.read()


def write_text(path: PathLike, text: str, config: CodecConfig | None = None) -> None:
    cfg = config or CodecConfig()
    with Path(path).open("w", encoding=cfg.encoding, newline="") as handle:
        handle.write(text)


def read_tokens(path: PathLike, config: CodecConfig | None = None) -> list[Token]:
    cfg = config or CodecConfig()
    return parse_tokens(split_lines(read_text(path, cfg)), cfg)


def write_tokens(path: PathLike, tokens: TokenSeq, config: CodecConfig | None = None) -> None:
    lines = format_tokens(tokens, config)
    write_text(path, "".join(line + "\n" for line in lines), config)
