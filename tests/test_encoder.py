import pytest

from lz77 import EmptyInputError, Token, encode
from lz77.encoder import find_best_match, match_length


def naive_encode(symbols):
    tokens = []
    position = 0
    n = len(symbols)
    while position < n:
        best_offset = 0
        best_length = 0
        for start in range(position):
            length = 0
            while (
                position + length < n
                and start + length < position
                and symbols[start + length] == symbols[position + length]
            ):
                length += 1
            if length > best_length:
                best_length = length
                best_offset = position - start
        if best_length == 0:
            tokens.append(Token(0, 0, symbols[position]))
        else:
            tail = position + best_length
            tokens.append(Token(best_offset, best_length, symbols[tail] if tail < n else None))
        position += best_length + 1
    return tokens


def test_encode_abab():
    assert encode("ABAB") == [Token(0, 0, "A"), Token(0, 0, "B"), Token(2, 2, None)]


def test_encode_single_symbol():
    assert encode("A") == [Token(0, 0, "A")]


def test_encode_literal_only():
    text = "abcdefg"
    tokens = encode(text)
    assert len(tokens) == len(text)
    assert all(token.offset == 0 and token.length == 0 for token in tokens)
    assert [token.next_symbol for token in tokens] == list(text)


def test_encode_repeating_block():
    assert encode("ABCABCABC") == [
        Token(0, 0, "A"),
        Token(0, 0, "B"),
        Token(0, 0, "C"),
        Token(3, 3, "A"),
        Token(6, 2, None),
    ]


def test_tie_break_prefers_most_distant_match():
    tokens = encode("ABxAByAB")
    assert tokens[-1] == Token(6, 2, None)
    assert tokens[3] == Token(3, 2, "y")


def test_history_side_stops_at_current_position():
    # a run of one symbol can only copy what precedes the current position
    assert encode("AAAAA") == [Token(0, 0, "A"), Token(1, 1, "A"), Token(3, 2, None)]


def test_encoded_lengths_never_exceed_offsets(random_texts):
    for text in random_texts:
        for token in encode(text):
            assert token.length <= token.offset


def test_matches_exhaustive_scan(random_texts):
    for text in random_texts:
        assert encode(text) == naive_encode(text)


def test_encode_non_text_symbols():
    assert encode([1, 2, 1, 2, 0]) == [Token(0, 0, 1), Token(0, 0, 2), Token(2, 2, 0)]


def test_null_symbol_is_an_ordinary_literal():
    tokens = encode("A\0A\0")
    assert tokens == [Token(0, 0, "A"), Token(0, 0, "\0"), Token(2, 2, None)]


@pytest.mark.parametrize("empty", ["", [], (), None])
def test_encode_rejects_empty_input(empty):
    with pytest.raises(EmptyInputError):
        encode(empty)


def test_empty_input_error_is_value_error():
    with pytest.raises(ValueError):
        encode("")


def test_match_helpers():
    text = "ABxAByAB"
    assert match_length(text, 0, 6) == 2
    assert match_length(text, 3, 6) == 2
    assert match_length(text, 2, 6) == 0
    assert find_best_match(text, 6, [0, 3]) == (6, 2)
    assert find_best_match(text, 6, []) == (0, 0)
