"""
String helpers: capitalization and kebab-case conversion.

Word boundary rules (shared by `words` and `kebab_case`):
    - Any run of non-alphanumeric characters separates words
      (spaces, tabs, hyphens, underscores, punctuation)
    - A lowercase letter or digit followed by an uppercase letter
      starts a new word:   fooBar    -> foo, Bar
    - The last capital of an acronym followed by a lowercase letter
      starts a new word:   XMLHttp   -> XML, Http

Case rules use str.islower()/str.isupper(), so they apply to any
script with case (caféBar -> café, Bar), not only ASCII.

Separators never survive into the output, so repeated or leading
separators collapse instead of producing empty words.
"""

from __future__ import annotations

import re
import unicodedata
from typing import List

from .errors import InvalidArgumentError


_SEPARATOR_RE = re.compile(r"[\W_]+")


def _require_text(value: object, func_name: str) -> str:
    if not isinstance(value, str):
        raise InvalidArgumentError(
            f"{func_name}() expects a str, got {type(value).__name__}"
        )
    return value


def _split_case(token: str) -> List[str]:
    """Split one separator-free token on case boundaries."""
    parts: List[str] = []
    start = 0
    for i in range(1, len(token)):
        prev, cur = token[i - 1], token[i]
        nxt = token[i + 1] if i + 1 < len(token) else ""
        if cur.isupper() and (prev.islower() or prev.isdigit()):
            parts.append(token[start:i])
            start = i
        elif prev.isupper() and cur.isupper() and nxt.islower():
            parts.append(token[start:i])
            start = i
    parts.append(token[start:])
    return parts


def _lower_word(word: str) -> str:
    # capitals with no lowercase mapping survive lower(); drop them
    return "".join(ch for ch in word.lower() if not ch.isupper())


def capitalize(text: str) -> str:
    """
    Upper-case the first character and leave the rest untouched.

    Unlike str.capitalize(), the remainder is NOT lowercased:
        capitalize("john doe")  -> "John doe"
        capitalize("john DOE")  -> "John DOE"
        capitalize("")          -> ""

    Raises:
        InvalidArgumentError: If text is not a str
    """
    text = _require_text(text, "capitalize")
    return text[:1].upper() + text[1:]


def words(text: str) -> List[str]:
    """
    Split text into words using the module's boundary rules.

    Examples:
        words("john doe")           -> ["john", "doe"]
        words("  --fooBar__baz ")   -> ["foo", "Bar", "baz"]
        words("XMLHttpRequest")     -> ["XML", "Http", "Request"]

    Original casing is preserved; callers decide how to re-case.
    """
    text = _require_text(text, "words")
    result: List[str] = []
    for token in _SEPARATOR_RE.split(text):
        if not token:
            continue
        result.extend(part for part in _split_case(token) if part)
    return result


def kebab_case(text: str) -> str:
    """
    Convert text to kebab-case: lowercased words joined by hyphens.

    Examples:
        kebab_case("john doe")        -> "john-doe"
        kebab_case("John   Doe")      -> "john-doe"
        kebab_case("johnDoe")         -> "john-doe"
        kebab_case("john_doe")        -> "john-doe"
        kebab_case("john-doe")        -> "john-doe"
        kebab_case("ℂomplex")         -> "complex"
        kebab_case("")                -> ""

    Text is NFKC-normalized first, so compatibility forms such as
    letterlike symbols and math alphanumerics fold to plain letters.
    The result never contains uppercase letters or whitespace.
    """
    text = _require_text(text, "kebab_case")
    text = unicodedata.normalize("NFKC", text)
    lowered = (_lower_word(word) for word in words(text))
    return "-".join(word for word in lowered if word)


__all__ = ["capitalize", "kebab_case", "words"]
