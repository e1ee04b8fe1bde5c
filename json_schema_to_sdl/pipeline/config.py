"""
Configuration for the SDL generator pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class OutputMode(str, Enum):
    """Output mode for file generation.

    Controls behavior when the output file already exists.
    """

    ERROR_IF_EXISTS = "error"  # Default: raise error if file exists
    FORCE = "force"  # Overwrite


class ReferencePolicy(str, Enum):
    """What to do with a $ref that points to no definition."""

    ERROR = "error"  # Raise UnknownReferenceError
    PLACEHOLDER = "placeholder"  # Fall back to the referenced name or the placeholder scalar


class EmptyObjectPolicy(str, Enum):
    """What to do with an object whose merged field map is empty."""

    SKIP = "skip"  # Emit nothing for it
    ERROR = "error"  # Raise EmptyObjectError


@dataclass
class OutputConfig:
    """Configuration for output file handling.

    Attributes:
        mode: How to handle existing output files
        atomic_write: Whether to use atomic file writes
    """

    mode: OutputMode = OutputMode.ERROR_IF_EXISTS
    atomic_write: bool = True


@dataclass
class FormatterConfig:
    """Configuration for the SDL formatter."""

    # Whether formatting is enabled
    enabled: bool = True

    # Skip source locations when parsing; syntax errors still report them
    no_location: bool = True


@dataclass
class CodeGeneratorConfig:
    """Configuration options for SDL generation."""

    # Prefix stripped from $ref pointers before the table lookup
    ref_prefix: str = "#/definitions/"

    # Definition name mapped to the built-in ID scalar
    id_sentinel: str = "ID"

    # Type name used when nothing else can be inferred
    default_scalar: str = "Scalar"

    # Policy for $ref pointers with no matching definition
    unknown_reference: ReferencePolicy = ReferencePolicy.ERROR

    # Policy for objects without any field
    empty_object: EmptyObjectPolicy = EmptyObjectPolicy.SKIP

    # Add generation comment at top of the output
    add_generation_comment: bool = False

    formatter: FormatterConfig = field(default_factory=FormatterConfig)

    output: OutputConfig = field(default_factory=OutputConfig)

    @staticmethod
    def from_dict(d: dict) -> CodeGeneratorConfig:
        """Create a config from a dictionary."""
        config = CodeGeneratorConfig()
        for k, v in d.items():
            if k == "formatter" and isinstance(v, dict):
                config.formatter = FormatterConfig(**v)
            elif k == "output" and isinstance(v, dict):
                config.output = OutputConfig(
                    mode=OutputMode(v.get("mode", OutputMode.ERROR_IF_EXISTS)),
                    atomic_write=v.get("atomic_write", True),
                )
            elif k == "unknown_reference":
                config.unknown_reference = ReferencePolicy(v)
            elif k == "empty_object":
                config.empty_object = EmptyObjectPolicy(v)
            elif hasattr(config, k):
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "ref_prefix": self.ref_prefix,
            "id_sentinel": self.id_sentinel,
            "default_scalar": self.default_scalar,
            "unknown_reference": self.unknown_reference.value,
            "empty_object": self.empty_object.value,
            "add_generation_comment": self.add_generation_comment,
            "formatter": {
                "enabled": self.formatter.enabled,
                "no_location": self.formatter.no_location,
            },
            "output": {
                "mode": self.output.mode.value,
                "atomic_write": self.output.atomic_write,
            },
        }
