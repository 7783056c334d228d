"""Command line front end: encode, decode, ratio and tokens."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from .config import CodecConfig
from .decoder import decode_text
from .encoder import encode
from .errors import EmptyInputError
from .ratio import ratio_report
from .serialization import read_text, read_tokens, split_lines, write_text, write_tokens
from .validation import require_valid_config


def _read_source(path: str, config: CodecConfig) -> str:
    text = read_text(path, config)
    if not text:
        raise EmptyInputError(f"{path} is empty.")
    return text


def cmd_encode(args: argparse.Namespace, config: CodecConfig) -> None:
    tokens = encode(_read_source(args.source, config))
    write_tokens(args.tokens, tokens, config)
    print(f"Encoded {args.source} into {len(tokens)} tokens in {args.tokens}")


def cmd_decode(args: argparse.Namespace, config: CodecConfig) -> None:
    text = decode_text(read_tokens(args.tokens, config))
    write_text(args.target, text, config)
    print(f"Decoded {args.tokens} into {len(text)} symbols in {args.target}")


def cmd_ratio(args: argparse.Namespace, config: CodecConfig) -> None:
    text = _read_source(args.source, config)
    estimate = ratio_report(text, read_tokens(args.tokens, config), config)
    print(f"Original bits: {estimate.original_bits}")
    print(f"Encoded bits:  {estimate.encoded_bits}")
    print(f"Bits per token: {estimate.bits_per_token} "
          f"(offset {estimate.offset_bits}, length {estimate.length_bits}, symbol {estimate.symbol_bits})")
    print(f"Compression ratio: {estimate.ratio:.2f}")


def cmd_tokens(args: argparse.Namespace, config: CodecConfig) -> None:
    lines = [line for line in split_lines(read_text(args.tokens, config)) if line.strip()]
    for line in lines:
        print(line)
    print(f"Total tokens: {len(lines)}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="lz77", description="LZ77 token codec")
    parser.add_argument("--encoding", default="utf-8")
    parser.add_argument("--symbol-bits", type=int, default=8)
    parser.add_argument("--no-escape", action="store_true", help="write line-break symbols verbatim")
    commands = parser.add_subparsers(dest="command", required=True)

    encode_parser = commands.add_parser("encode", help="encode a text file into a token file")
    encode_parser.add_argument("source")
    encode_parser.add_argument("tokens")
    encode_parser.set_defaults(handler=cmd_encode)

    decode_parser = commands.add_parser("decode", help="decode a token file into a text file")
    decode_parser.add_argument("tokens")
    decode_parser.add_argument("target")
    decode_parser.set_defaults(handler=cmd_decode)

    ratio_parser = commands.add_parser("ratio", help="estimate the compression ratio")
    ratio_parser.add_argument("source")
    ratio_parser.add_argument("tokens")
    ratio_parser.set_defaults(handler=cmd_ratio)

    tokens_parser = commands.add_parser("tokens", help="list tokens and their count")
    tokens_parser.add_argument("tokens")
    tokens_parser.set_defaults(handler=cmd_tokens)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        config = require_valid_config(
            CodecConfig(
                symbol_bits=args.symbol_bits,
                encoding=args.encoding,
                escape_symbols=not args.no_escape,
            )
        )
        args.handler(args, config)
    except (OSError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
