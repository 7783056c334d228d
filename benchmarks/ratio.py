import argparse
import random
import statistics
import time

from lz77 import CodecConfig, compress


def generate_text(count: int, alphabet_size: int, seed: int) -> str:
    rng = random.Random(seed)
    alphabet = [chr(ord("a") + idx) for idx in range(alphabet_size)]
    return "".join(rng.choice(alphabet) for _ in range(count))


def main() -> None:
    parser = argparse.ArgumentParser(description="LZ77 estimated compression ratio benchmark")
    parser.add_argument("--symbols", type=int, default=4096)
    parser.add_argument("--alphabet", type=int, default=4)
    parser.add_argument("--runs", type=int, default=10)
    parser.add_argument("--seed", type=int, default=7)
    parser.add_argument("--verify", action="store_true")
    args = parser.parse_args()

    cfg = CodecConfig(verify=args.verify)
    ratios: list[float] = []
    token_ratios: list[float] = []
    timings: list[float] = []

    for offset in range(args.runs):
        text = generate_text(args.symbols, args.alphabet, args.seed + offset)
        started = time.perf_counter()
        result = compress(text, cfg)
        timings.append(time.perf_counter() - started)
        ratios.append(result.estimate.ratio)
        token_ratios.append(result.token_count / result.original_length)

    print(f"Runs: {args.runs}")
    print(f"Symbols: {args.symbols}")
    print(f"Alphabet size: {args.alphabet}")
    print(f"Mean estimated compression ratio: {statistics.mean(ratios):.4f}")
    print(f"Mean tokens per symbol: {statistics.mean(token_ratios):.4f}")
    print(f"Mean encode time: {statistics.mean(timings) * 1000:.1f} ms")


if __name__ == "__main__":
    main()
