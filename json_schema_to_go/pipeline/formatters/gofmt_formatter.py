"""
gofmt formatter for Go code.
"""

from __future__ import annotations

from ..config import FormatterConfig
from .base import Formatter


class GofmtFormatter(Formatter):
    """Formats Go code with gofmt, simplifying it with -s when configured."""

    def arguments(self, config: FormatterConfig) -> list[str]:
        if config.simplify:
            return [config.command, "-s"]
        return [config.command]
