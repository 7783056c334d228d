"""Basic usage example for the lz77 codec."""

from lz77 import CodecConfig, compress, decode_text, format_tokens


def main():
    # Example 1: Short repeat
    print("=" * 60)
    print("Example 1: Basic Encoding")
    print("=" * 60)

    config = CodecConfig(verify=True)
    result = compress("ABAB", config)

    print(f"Tokens:            {' '.join(format_tokens(result.tokens))}")
    print(f"Original bits:     {result.estimate.original_bits}")
    print(f"Encoded bits:      {result.estimate.encoded_bits}")
    print(f"Compression ratio: {result.estimate.ratio:.4f}")
    print(f"Lossless:          {decode_text(result.tokens) == 'ABAB'}")

    # Example 2: Prose
    print("\n" + "=" * 60)
    print("Example 2: Repeated Phrases")
    print("=" * 60)

    text = "That Sam-I-am, that Sam-I-am, I do not like that Sam-I-am."
    result = compress(text, config)

    print(f"Original length:   {result.original_length} symbols")
    print(f"Token count:       {result.token_count}")
    print(f"Bits per token:    {result.estimate.bits_per_token}")
    print(f"Compression ratio: {result.estimate.ratio:.4f}")

    # Example 3: Repetition strength
    print("\n" + "=" * 60)
    print("Example 3: Ratio by Repetition")
    print("=" * 60)

    for label, sample in [
        ("unique", "the quick brown fox"),
        ("phrase", "the quick brown fox " * 4),
        ("run", "z" * 80),
    ]:
        result = compress(sample, config)
        print(f"{label:8s}: {result.original_length} symbols -> {result.token_count} tokens "
              f"(ratio {result.estimate.ratio:.2f})")


if __name__ == "__main__":
    main()
