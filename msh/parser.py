import shlex
from msh.config import MAX_NUM_ARGUMENTS, WHITESPACE


class TokenVector:
    """
    Fixed-capacity word vector produced by tokenize().
    Slots past the word count hold None.
    """

    def __init__(self, words, capacity=MAX_NUM_ARGUMENTS):
        words = tuple(words[:capacity])
        self.capacity = capacity
        self.count = len(words)
        self.slots = words + (None,) * (capacity - self.count)

    def __len__(self):
        return self.count

    def __getitem__(self, index):
        if isinstance(index, slice):
            return self.words[index]
        if 0 <= index < self.capacity:
            return self.slots[index]
        return None

    def __iter__(self):
        return iter(self.words)

    def __repr__(self):
        return f"TokenVector({list(self.words)!r})"

    @property
    def words(self):
        return self.slots[:self.count]


def tokenize(line, capacity=MAX_NUM_ARGUMENTS):
    """
    Split line into words on runs of space, tab and newline.
    Returns: TokenVector holding at most `capacity` words
    """
    lex = shlex.shlex(line, posix=True)
    lex.whitespace = WHITESPACE
    lex.whitespace_split = True
    lex.commenters = ""
    lex.quotes = ""
    lex.escape = ""

    words = []
    for tok in lex:
        if len(words) == capacity:
            break
        words.append(tok)

    return TokenVector(words, capacity)
