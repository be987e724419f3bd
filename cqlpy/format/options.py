"""Formatter configuration."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class FormatOptions:
    """Caller-supplied layout settings."""

    indent_size: int = 2

    def __post_init__(self) -> None:
        if self.indent_size < 1:
            raise ValueError(f"indent_size must be >= 1, got {self.indent_size}")

    def indent(self, level: int) -> str:
        return " " * (max(0, level) * self.indent_size)
