"""
Base class for code generation backends.

Defines the interface that language-specific backends implement.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

import jinja2

from ..analyzer.ir_nodes import IR, FieldDescriptor, TypeDescriptor
from ..config import CodeGeneratorConfig


class CodeBackend(ABC):
    """Abstract base class for code generation backends."""

    # Type mapping from value categories to language types
    TYPE_MAP: dict[str, str] = {}

    # Template directory name
    TEMPLATE_LANG: str = ""

    # File extension
    FILE_EXTENSION: str = ""

    # Line comment marker
    COMMENT_PREFIX: str = "//"

    def __init__(self, config: CodeGeneratorConfig):
        """
        Initialize the backend.

        Args:
            config: Code generation configuration
        """
        self.config = config
        self._setup_templates()

    def _setup_templates(self) -> None:
        """Set up Jinja2 templates."""
        template_dir = Path(__file__).parent.parent.parent / "templates" / self.TEMPLATE_LANG
        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(template_dir)),
            lstrip_blocks=True,
            trim_blocks=True,
            keep_trailing_newline=True,
        )

        self.prefix_template = self.jinja_env.get_template(f"prefix.{self.FILE_EXTENSION}.jinja2")
        self.type_template = self.jinja_env.get_template(f"type.{self.FILE_EXTENSION}.jinja2")

    @abstractmethod
    def generate(self, ir: IR) -> str:
        """
        Generate code from IR.

        Args:
            ir: The intermediate representation

        Returns:
            Generated code as a string
        """

    @abstractmethod
    def translate_type(self, descriptor: TypeDescriptor, table: dict[str, TypeDescriptor]) -> str:
        """
        Translate a type descriptor to the language type it declares.

        Args:
            descriptor: The type descriptor
            table: All descriptors by path, for element references

        Returns:
            Language-specific type string
        """

    @abstractmethod
    def translate_field_type(self, field: FieldDescriptor, table: dict[str, TypeDescriptor]) -> str:
        """
        Translate a struct field's value type.

        Args:
            field: The field descriptor
            table: All descriptors by path, for references

        Returns:
            Language-specific type string
        """

    def _comment_lines(self, comment: str) -> list[str]:
        """Split a description into comment lines."""
        return [f"{self.COMMENT_PREFIX} {line}".rstrip() for line in comment.strip().splitlines()]
