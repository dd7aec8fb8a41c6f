""" Lexical analysis for shell commands. """
from constants import WHITESPACE


def split_fields(line: str, delimiters: str) -> list[str]:
    """
    Split line on any character of delimiters.
    Consecutive delimiters collapse, so no field is ever empty.
    There is no quoting: a delimiter always splits.
    """
    fields = []
    current = []

    for ch in line:
        if ch in delimiters:
            if current:
                fields.append("".join(current))
                current = []
        else:
            current.append(ch)

    if current:
        fields.append("".join(current))

    return fields


def split_words(line: str) -> list[str]:
    return split_fields(line, WHITESPACE)
