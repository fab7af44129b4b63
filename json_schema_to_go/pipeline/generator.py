"""
Pipeline generator.

Runs the phases in order: parse the schema, analyze it into IR, render
the IR with the Go backend and optionally format the result.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from .analyzer import IR, SchemaAnalyzer
from .backends import GoBackend
from .config import CodeGeneratorConfig, OutputMode
from .formatters import GofmtFormatter
from .schema_ast import SchemaParser
from .writer import AtomicWriter

logger = logging.getLogger(__name__)


class PipelineGenerator:
    """Generates Go type declarations from a JSON Schema."""

    def __init__(
        self,
        name: str,
        schema: dict[str, Any],
        config: CodeGeneratorConfig | None = None,
        command: str = "json_schema_to_go",
    ):
        """
        Initialize the generator.

        Args:
            name: Name the root type is derived from, unless
                config.root_type_name is set
            schema: The JSON Schema dictionary
            config: Code generation configuration
            command: Command line quoted in the generation comment
        """
        self.name = name
        self.schema = schema
        self.config = config or CodeGeneratorConfig()
        self.command = command

        self.parser = SchemaParser()
        self.analyzer = SchemaAnalyzer(self.config)
        self.backend = GoBackend(self.config)
        self.formatter = GofmtFormatter()

        self.ir: IR | None = None

    def analyze(self) -> IR:
        """Run the parser and the analyzer, returning the resolved IR."""
        root = self.parser.parse(self.schema)
        ir = self.analyzer.analyze(root, self.name)
        if self.config.add_generation_comment:
            ir.generation_comment = f'generated by "{self.command}" -- DO NOT EDIT'
        self.ir = ir
        return ir

    def generate(self) -> str:
        """
        Generate the Go source.

        Returns:
            Generated code as a string

        Raises:
            SchemaResolutionError: If the schema can't be fully resolved
        """
        ir = self.analyze()
        code = self.backend.generate(ir)

        if self.config.formatter.enabled:
            code = self.formatter.format(code, self.config.formatter)

        return code

    @property
    def root_name(self) -> str:
        """Name of the root type (available once analyzed)."""
        if self.ir is None:
            self.analyze()
        return self.ir.root_name

    def default_output_path(self) -> Path:
        """Default output file: <root type in lower case>_schematype.go."""
        return Path(f"{self.root_name.lower()}_schematype.go")

    def write(self, output: Path, code: str | None = None) -> Path:
        """
        Generate (unless code is given) and write the result to output.

        Raises:
            FileExistsError: If output exists and the output mode forbids overwriting
            CodeWriteError: If the generated code fails validation
        """
        if code is None:
            code = self.generate()

        output_config = self.config.output
        keep_existing = output_config.mode == OutputMode.ERROR_IF_EXISTS

        if output_config.atomic_write:
            writer = AtomicWriter()
            if keep_existing:
                writer.write_if_not_exists(output, code, validate=output_config.validate_before_write)
            else:
                writer.write(output, code, validate=output_config.validate_before_write)
        else:
            if keep_existing and output.exists():
                raise FileExistsError(f"Output file already exists: {output}")
            output.write_text(code, encoding="utf-8")

        logger.info("Wrote %s", output)
        return output
