import pytest

# head -> heal -> teal -> tell -> tall -> tail, plus words that don't shorten it
LADDER_WORDS = ["head", "heal", "teal", "tell", "tall", "tail",
                "dead", "real", "bell", "fish", "zinc"]

# cold -> warm in 4 moves, two different ways (via card/ward or word/worm)
GOLF_WORDS = ["cold", "cord", "card", "ward", "warm", "bold", "word", "worm", "corn", "zinc"]

# A single line: each word one letter from the next and >= 2 letters from the rest.
LINE_WORDS = ["aaaa", "baaa", "bbaa", "bbba", "bbbb", "cbbb", "ccbb", "cccb", "cccc", "dccc"]


@pytest.fixture
def ladder_words():
    return list(LADDER_WORDS)


@pytest.fixture
def golf_words():
    return list(GOLF_WORDS)


@pytest.fixture
def line_words():
    return list(LINE_WORDS)
