from msh.config import MAX_NUM_ARGUMENTS
from msh.parser import TokenVector, tokenize


def test_splits_on_runs_of_whitespace():
    tokens = tokenize("ls  -l\t /tmp\n")
    assert list(tokens) == ["ls", "-l", "/tmp"]
    assert len(tokens) == 3


def test_empty_words_are_dropped():
    tokens = tokenize("   \t\n")
    assert len(tokens) == 0
    assert tokens[0] is None


def test_slots_past_count_are_none():
    tokens = tokenize("echo hi")
    assert tokens.slots[2:] == (None,) * (MAX_NUM_ARGUMENTS - 2)
    assert tokens[5] is None
    assert tokens[MAX_NUM_ARGUMENTS + 3] is None


def test_truncates_to_capacity():
    line = " ".join(f"w{i}" for i in range(MAX_NUM_ARGUMENTS + 4))
    tokens = tokenize(line)
    assert len(tokens) == MAX_NUM_ARGUMENTS
    assert tokens.words[-1] == f"w{MAX_NUM_ARGUMENTS - 1}"


def test_fresh_vector_on_every_call():
    first = tokenize("a b c d e")
    second = tokenize("x")
    assert second[1] is None
    assert first[1] == "b"


def test_quotes_and_backslashes_are_plain_characters():
    tokens = tokenize("echo 'a b' c\\ d")
    assert list(tokens) == ["echo", "'a", "b'", "c\\", "d"]


def test_custom_capacity():
    tokens = tokenize("a b c", capacity=2)
    assert list(tokens) == ["a", "b"]
    assert tokens.capacity == 2


def test_slicing_returns_words():
    tokens = TokenVector(["cd", "/tmp"])
    assert tokens[1:] == ("/tmp",)
