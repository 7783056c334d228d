import random

import pytest

SAMPLE_TEXTS = {
    "single": "A",
    "pair_repeat": "ABAB",
    "triple_repeat": "ABCABCABC",
    "run": "AAAAAAAAAA",
    "no_repeats": "abcdefghij",
    "prose": "That Sam-I-am, that Sam-I-am, I do not like that Sam-I-am.",
    "multiline": "first line\nsecond line\r\nfirst line\n",
    "punctuation": "(a,b),(a,b),(c))",
    "null_symbols": "A\0A\0\0\0B",
}


def random_text(seed: int, length: int, alphabet: str = "abc") -> str:
    rng = random.Random(seed)
    return "".join(rng.choice(alphabet) for _ in range(length))


@pytest.fixture(params=sorted(SAMPLE_TEXTS))
def sample_text(request):
    return SAMPLE_TEXTS[request.param]


@pytest.fixture
def random_texts():
    return [random_text(seed, length) for seed in range(20) for length in (1, 2, 7, 40, 120)]
