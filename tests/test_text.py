import pytest

from pipex.libft.text import (
    strchr,
    strdup,
    striteri,
    strjoin,
    strlcat,
    strlcpy,
    strlen,
    strmapi,
    strncmp,
    strncpy,
    strnstr,
    strrchr,
    substr,
    strtrim,
)


def test_strlen_counts_characters_and_none_is_empty():
    assert strlen("pipex") == len("pipex")
    assert strlen(None) == 0
    assert strlen("") == 0


@pytest.mark.parametrize("s,c", [("hello world", "o"), ("abcabc", "b"), ("x", "x")])
def test_strchr_finds_first_occurrence(s, c):
    index = strchr(s, c)
    assert s[index] == c
    assert c not in s[:index]


def test_strchr_missing_and_nul():
    assert strchr("abc", "z") is None
    assert strchr("abc", "\0") == len("abc")
    assert strchr("abc", ord("b")) == strchr("abc", "b")


@pytest.mark.parametrize("s,c", [("hello world", "o"), ("abcabc", "b")])
def test_strrchr_finds_last_occurrence(s, c):
    index = strrchr(s, c)
    assert s[index] == c
    assert c not in s[index + 1:]


def test_strrchr_missing_and_nul():
    assert strrchr("abc", "z") is None
    assert strrchr("abc", "\0") == len("abc")


def test_strchr_rejects_long_needle():
    with pytest.raises(ValueError):
        strchr("abc", "ab")


def test_strdup_equal_copy():
    assert strdup("command") == "command"
    with pytest.raises(TypeError):
        strdup(None)


def test_strlcpy_fits_whole_string():
    copied, wanted = strlcpy("ls -l", 64)
    assert copied == "ls -l"
    assert wanted == len("ls -l")


def test_strlcpy_truncates():
    src = "abcdefgh"
    copied, wanted = strlcpy(src, 4)
    assert len(copied) == 3
    assert src.startswith(copied)
    assert wanted == len(src)


def test_strlcpy_zero_size_copies_nothing():
    assert strlcpy("abc", 0) == ("", len("abc"))


def test_strlcat_appends_when_room():
    result, wanted = strlcat("/usr/bin", "/", 32)
    assert result == "/usr/bin/"
    assert wanted == len("/usr/bin/")


def test_strlcat_truncates_to_size():
    dst, src = "ab", "cdef"
    result, wanted = strlcat(dst, src, 4)
    assert len(result) == 3
    assert result.startswith(dst)
    assert (dst + src).startswith(result)
    assert wanted == len(dst) + len(src)


def test_strlcat_small_size_leaves_dst():
    result, wanted = strlcat("abcdef", "xyz", 3)
    assert result == "abcdef"
    assert wanted == 3 + len("xyz")


def test_strncmp_equal_and_limited():
    assert strncmp("here_doc", "here_doc", 8) == 0
    assert strncmp("here_docX", "here_docY", 8) == 0
    assert strncmp("abc", "abd", 0) == 0


def test_strncmp_sign_follows_order():
    assert strncmp("abc", "abd", 3) < 0
    assert strncmp("abd", "abc", 3) > 0
    assert strncmp("ab", "abc", 3) < 0
    assert strncmp("abc", "ab", 3) > 0


def test_strncmp_empty_and_none():
    assert strncmp("", "", 1) == 0
    assert strncmp("ls", "", 1) > 0
    assert strncmp(None, "abc", 3) == 0


def test_strncpy_pads_with_nul():
    assert strncpy("ab", 4) == "ab\0\0"


def test_strncpy_truncates():
    result = strncpy("abcdef", 3)
    assert len(result) == 3
    assert "abcdef".startswith(result)


def test_strncpy_stops_at_nul():
    result = strncpy("ab\0cd", 5)
    assert result.startswith("ab")
    assert set(result[2:]) == {"\0"}


def test_strnstr_path_prefix():
    assert strnstr("PATH=/bin:/usr/bin", "PATH", 4) == 0
    assert strnstr("XPATH=/bin", "PATH", 4) is None


def test_strnstr_finds_within_length():
    big, little = "echo awk hello", "awk"
    index = strnstr(big, little, len(big))
    assert big[index:index + len(little)] == little
    assert strnstr(big, little, index + len(little) - 1) is None
    assert strnstr(big, little, index + len(little)) == index


def test_strnstr_empty_needle_and_missing():
    assert strnstr("abc", "", 0) == 0
    assert strnstr("abc", "zz", 3) is None


def test_substr_slices():
    s = "pipex_bonus"
    part = substr(s, 2, 4)
    assert len(part) == 4
    assert part in s
    assert s.startswith(substr(s, 0, 5))


def test_substr_start_past_end_and_long_length():
    assert substr("abc", 3, 5) == ""
    assert substr("abc", 10, 1) == ""
    assert substr("abc", 1, 100) == "abc"[1:]


def test_strjoin_concatenates():
    a, b = "/bin", "/ls"
    joined = strjoin(a, b)
    assert joined.startswith(a)
    assert joined.endswith(b)
    assert len(joined) == len(a) + len(b)
    assert strjoin("", b) == b


def test_strjoin_rejects_none():
    with pytest.raises(TypeError):
        strjoin(None, "x")


def test_strtrim_quotes():
    assert strtrim("'{print $1}'", "'") == "{print $1}"


def test_strtrim_all_and_nothing():
    assert strtrim("''''", "'") == ""
    assert strtrim("abc", "") == "abc"
    assert strtrim("abc", "xyz") == "abc"


def test_strmapi_identity_and_indices():
    seen = []

    def record(index, ch):
        seen.append(index)
        return ch

    assert strmapi("hello", record) == "hello"
    assert seen == list(range(len("hello")))


def test_strmapi_upper():
    result = strmapi("abc", lambda i, c: c.upper())
    assert result == "abc".upper()


def test_striteri_replaces_only_returned():
    s = "abcd"
    result = striteri(s, lambda i, c: c.upper() if i % 2 == 0 else None)
    assert len(result) == len(s)
    assert result[1] == s[1] and result[3] == s[3]
    assert result[0] == s[0].upper() and result[2] == s[2].upper()


def test_striteri_none_keeps_string():
    calls = []
    assert striteri("xyz", lambda i, c: calls.append((i, c))) == "xyz"
    assert calls == list(enumerate("xyz"))