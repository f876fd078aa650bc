"""Python Utils

This package contains dependency-free Python utility functions used throughout the
codebase.

These functions are not part of the module interface and are subject to change.
"""

from .convert_case import camel_case, param_case, split_words

__all__ = ["camel_case", "param_case", "split_words"]
