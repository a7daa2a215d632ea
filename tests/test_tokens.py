import pytest

from pipex.libft.tokens import (
    Tokenizer,
    split,
    split_whitespace,
    strpbrk,
    strspn,
    tokenize,
)


@pytest.mark.parametrize(
    "text, accept",
    [("   abc", " "), ("aabbc", "ab"), ("xyz", "ab"), ("", " "), ("abc", "")],
)
def test_strspn_prefix_invariant(text, accept):
    n = strspn(text, accept)
    assert 0 <= n <= len(text)
    assert all(ch in accept for ch in text[:n])
    if n < len(text):
        assert text[n] not in accept


def test_strspn_whole_string():
    assert strspn("aaaa", "a") == len("aaaa")


@pytest.mark.parametrize(
    "text, accept",
    [("hello world", " "), ("a,b;c", ";,"), ("abc", "xyz"), ("", "a")],
)
def test_strpbrk_finds_first_match(text, accept):
    index = strpbrk(text, accept)
    if index is None:
        assert not any(ch in accept for ch in text)
    else:
        assert text[index] in accept
        assert not any(ch in accept for ch in text[:index])


def test_strpbrk_empty_accept():
    assert strpbrk("abc", "") is None


def test_tokenizer_with_changing_delimiters():
    t = Tokenizer("key=value pair")
    assert t.next_token("=") == "key"
    assert t.next_token(" ") == "value"
    assert t.next_token(" ") == "pair"
    assert t.next_token(" ") is None
    assert t.next_token(" ") is None


def test_tokenizer_only_delimiters():
    t = Tokenizer("    ")
    assert t.next_token(" ") is None


def test_tokenize_multiple_delimiters():
    assert list(tokenize("a,b;;c", ",;")) == ["a", "b", "c"]


def test_tokenize_leading_and_trailing():
    assert list(tokenize("  ls  -l  ", " ")) == ["ls", "-l"]


def test_split_basic():
    assert split("ls -l  -a", " ") == ["ls", "-l", "-a"]


@pytest.mark.parametrize("text", ["", "   ", None])
def test_split_empty(text):
    assert split(text, " ") == []


def test_split_round_trip():
    fields = ["usr", "local", "bin"]
    assert split(":".join(fields), ":") == fields


def test_split_no_separator_present():
    assert split("single", ":") == ["single"]


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        split("a b", "  ")


def test_split_whitespace_spaces_only():
    assert split_whitespace("grep  foo") == ["grep", "foo"]
    assert split_whitespace("a\tb") == ["a\tb"]


def test_split_whitespace_matches_split():
    text = "  wc -l   file.txt "
    assert split_whitespace(text) == split(text, " ")