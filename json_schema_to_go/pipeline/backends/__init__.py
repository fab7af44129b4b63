"""
Code generation backends.

Render the IR as source text in the target language.
"""

from __future__ import annotations

from .base import CodeBackend
from .go_backend import GoBackend

__all__ = [
    "CodeBackend",
    "GoBackend",
]
