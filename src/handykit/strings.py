"""Case conversion helpers built on a shared word splitter."""
from __future__ import annotations

import re
from typing import List

WORD_SEPARATORS = re.compile(r"[\s_-]+")


def split_into_words(text: str) -> List[str]:
    """Split on runs of whitespace, underscores and hyphens.

    >>> split_into_words("hello-world_here")
    ['hello', 'world', 'here']
    """
    return [word for word in WORD_SEPARATORS.split(text) if word]


def to_uppercase(text: str) -> str:
    return text.upper()


def to_lowercase(text: str) -> str:
    return text.lower()


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:].lower()


def to_title_case(text: str) -> str:
    """``"HELLO_WORLD"`` -> ``"Hello World"``"""
    return " ".join(_capitalize(word) for word in split_into_words(text))


def to_sentence_case(text: str) -> str:
    """``"HELLO_WORLD"`` -> ``"Hello world"``"""
    words = split_into_words(text)
    if not words:
        return ""
    return " ".join([_capitalize(words[0]), *(word.lower() for word in words[1:])])


def to_camel_case(text: str) -> str:
    """``"hello world"`` -> ``"helloWorld"``"""
    words = split_into_words(text)
    if not words:
        return ""
    return words[0].lower() + "".join(_capitalize(word) for word in words[1:])


def to_snake_case(text: str) -> str:
    return "_".join(word.lower() for word in split_into_words(text))


def to_kebab_case(text: str) -> str:
    return "-".join(word.lower() for word in split_into_words(text))


def to_toggle_case(text: str) -> str:
    """``"Hello World"`` -> ``"hELLO wORLD"``"""
    return "".join(char.lower() if char == char.upper() else char.upper() for char in text)
