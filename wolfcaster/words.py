"""Splitting text into words on a set of separator characters."""


def split_words(text, separators):
    """Return the non-empty runs of characters of ``text`` not in ``separators``."""
    words = []
    current = []
    for char in text:
        if char in separators:
            if current:
                words.append("".join(current))
                current = []
        else:
            current.append(char)
    if current:
        words.append("".join(current))
    return words