# tests/test_tokenizer.py
import types

from autocorrector.context import decode_bytes, ends_in_token, split_input, tokenize


def test_lowercases_and_splits_on_punctuation():
    assert list(tokenize("Hello, World!")) == ["hello", "world"]


def test_inner_apostrophes_and_hyphens_kept():
    assert list(tokenize("Don't stop the well-known song")) == [
        "don't", "stop", "the", "well-known", "song",
    ]


def test_edge_apostrophes_and_hyphens_stripped():
    assert list(tokenize("'quoted' -dash- rock-")) == ["quoted", "dash", "rock"]
    assert list(tokenize("-- ' -'-")) == []


def test_digits_are_separators():
    assert list(tokenize("abc123def 42 7th")) == ["abc", "def", "th"]


def test_replacement_char_separates():
    text = decode_bytes(b"caf\xffbar")
    assert text == "caf�bar"
    assert list(tokenize(text)) == ["caf", "bar"]


def test_non_ascii_letters_separate():
    assert list(tokenize("naïve café")) == ["na", "ve", "caf"]


def test_long_s_folds_to_s():
    assert list(tokenize("ſtop Kiwi")) == ["stop", "kiwi"]
    assert split_input("the ſto") == ("the", "sto")


def test_tokenize_is_lazy():
    assert isinstance(tokenize("a b c"), types.GeneratorType)


def test_empty_input():
    assert list(tokenize("")) == []
    assert decode_bytes(b"") == ""


def test_ends_in_token():
    assert ends_in_token("the qu")
    assert ends_in_token("THE QU")
    assert not ends_in_token("the ")
    assert not ends_in_token("the.")
    assert not ends_in_token("don'")
    assert not ends_in_token("")


def test_split_input():
    assert split_input("the qu") == ("the", "qu")
    assert split_input("qu") == ("", "qu")
    assert split_input("the ") == ("the", "")
    assert split_input("a b c") == ("b", "c")
    assert split_input("Hello!") == ("hello", "")
    assert split_input("") == ("", "")
    assert split_input("123 ...") == ("", "")
