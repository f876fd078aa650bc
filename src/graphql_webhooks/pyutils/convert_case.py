"""Conversion between naming conventions"""

import re
from typing import List

__all__ = ["camel_case", "param_case", "split_words"]


# acronyms are kept together unless followed by a capitalized word
_re_words = re.compile(r"[A-Z]+(?=[A-Z][a-z])|[A-Z]?[a-z]+|[A-Z]+|\d+")


def split_words(s: str) -> List[str]:
    """Split a name into its words.

    Word boundaries are underscores, hyphens, other separators and changes of case,
    so ``"messageAdded_subscription"`` gives ``["message", "Added", "subscription"]``.
    """
    return _re_words.findall(s)


def camel_case(s: str) -> str:
    """Convert a name in any convention to lower camel case."""
    words = split_words(s)
    return "".join(
        word.lower() if i == 0 else word.capitalize() for i, word in enumerate(words)
    )


def param_case(s: str) -> str:
    """Convert a name in any convention to lower case words joined by hyphens."""
    return "-".join(word.lower() for word in split_words(s))
