"""Operation context and shared output helpers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TextIO

import click

from ..output.formatters import format_output
from ..store.errors import EncodeError


@dataclass
class OperationContext:
    output: TextIO
    indent: int | None = None

    def write(self, data: Any) -> None:
        """Write a result to the output sink without a trailing newline."""
        try:
            text = format_output(data, indent=self.indent)
        except Exception as e:
            raise EncodeError(f"Error while marshaling users to json: {e}") from e
        click.echo(text, file=self.output, nl=False)
