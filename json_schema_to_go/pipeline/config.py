"""
Configuration for the code generator pipeline.

Naming policy for the resolution engine, plus formatter and output options
for the emitting side.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import Enum


class OutputMode(str, Enum):
    """Output mode for file generation.

    Controls behavior when the output file already exists.
    """

    ERROR_IF_EXISTS = "error"  # Raise error if file exists
    FORCE = "force"  # Default: overwrite


@dataclass
class OutputConfig:
    """Configuration for output file handling.

    Attributes:
        mode: How to handle existing output files
        validate_before_write: Whether to validate code before writing
        atomic_write: Whether to use atomic file writes
    """

    mode: OutputMode = OutputMode.FORCE
    validate_before_write: bool = True
    atomic_write: bool = True


@dataclass
class FormatterConfig:
    """Configuration for post-processing with gofmt."""

    # Whether formatting is enabled
    enabled: bool = False

    # Executable to run
    command: str = "gofmt"

    # Pass -s (simplify code)
    simplify: bool = False


@dataclass
class CodeGeneratorConfig:
    """Configuration options for code generation."""

    # Name of the root type (empty = derived from the schema name)
    root_type_name: str = ""

    # Prefix for every non-root type name; implies exported names
    type_name_prefix: str = ""

    # Generate exported (upper-case) type names
    export_types: bool = False

    # Go package clause
    package_name: str = "main"

    # Add generation comment at top of file
    add_generation_comment: bool = True

    # Formatter configuration
    formatter: FormatterConfig = field(default_factory=FormatterConfig)

    # Output configuration
    output: OutputConfig = field(default_factory=OutputConfig)

    @property
    def exports_type_names(self) -> bool:
        """Whether non-root type names are exported (and prefixed)."""
        return self.export_types or bool(self.type_name_prefix)

    @staticmethod
    def from_dict(d: dict) -> CodeGeneratorConfig:
        """Create a config from a dictionary."""
        config = CodeGeneratorConfig()
        for k, v in d.items():
            if k == "formatter" and isinstance(v, dict):
                config.formatter = FormatterConfig(**v)
            elif k == "output" and isinstance(v, dict):
                mode = v.get("mode", OutputMode.FORCE)
                if isinstance(mode, str):
                    mode = OutputMode(mode)
                config.output = OutputConfig(
                    mode=mode,
                    validate_before_write=v.get("validate_before_write", True),
                    atomic_write=v.get("atomic_write", True),
                )
            elif hasattr(config, k) and k != "exports_type_names":
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a JSON-compatible dictionary (the --config file format)."""
        d = asdict(self)
        d["output"]["mode"] = self.output.mode.value
        return d
