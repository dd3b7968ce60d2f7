"""
The one transformation rule of a word ladder.

A move is legal iff the new word has the same length as the old one and
differs in exactly one position. The rule is blind to WHICH letter changed;
dictionary membership is checked elsewhere (the session / the path finder).
"""


def is_single_letter_change(word_a: str, word_b: str) -> bool:
    """
    Return True if `word_a` and `word_b` differ in exactly one position.

    Examples:
      is_single_letter_change("head", "heal") -> True
      is_single_letter_change("head", "head") -> False
      is_single_letter_change("head", "tail") -> False
      is_single_letter_change("cat", "cats")  -> False  (length mismatch)
    """
    if len(word_a) != len(word_b):
        return False

    diff = 0
    for a, b in zip(word_a, word_b):
        if a != b:
            diff += 1
            if diff > 1:
                return False  # early exit; can't get back to 1
    return diff == 1
