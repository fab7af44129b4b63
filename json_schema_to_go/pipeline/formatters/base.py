"""
Formatters piping generated code through an external program.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
from abc import ABC, abstractmethod

from ..config import FormatterConfig

logger = logging.getLogger(__name__)


class Formatter(ABC):
    """
    Runs an external formatter on generated code.

    Formatting is best effort: when the program is missing, fails or
    rejects the code, a warning is logged and the code is kept as is.
    """

    timeout = 30

    def __init__(self):
        # command -> found on the PATH
        self._available: dict[str, bool] = {}

    @abstractmethod
    def arguments(self, config: FormatterConfig) -> list[str]:
        """Command line reading code on stdin and writing it formatted on stdout."""

    def is_available(self, config: FormatterConfig) -> bool:
        if config.command not in self._available:
            self._available[config.command] = shutil.which(config.command) is not None
        return self._available[config.command]

    def format(self, code: str, config: FormatterConfig) -> str:
        if not self.is_available(config):
            logger.warning("%s not found, leaving generated code unformatted", config.command)
            return code

        try:
            result = subprocess.run(
                self.arguments(config),
                input=code,
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
        except (subprocess.SubprocessError, OSError) as e:
            logger.warning("%s failed: %s", config.command, e)
            return code

        if result.returncode != 0:
            logger.warning("%s rejected the generated code: %s", config.command, result.stderr.strip())
            return code

        return result.stdout
