"""Export of benchmark results as an AsciiDoc table."""

from __future__ import annotations

from collections.abc import Sequence

from cmdbench.markup import Alignment, MarkupExporter

_COLUMN_SPECS = {
    Alignment.LEFT: "<",
    Alignment.RIGHT: ">",
}


class AsciidocExporter(MarkupExporter):
    """Renders results as an AsciiDoc table."""

    def table_header(self, alignments: Sequence[Alignment]) -> str:
        """Render the column specification and the table opening."""
        cols = ",".join(_COLUMN_SPECS[a] for a in alignments)
        return f'[cols="{cols}"]\n|==='

    def table_footer(self, alignments: Sequence[Alignment]) -> str:
        """Render the table closing."""
        return "|===\n"

    def table_row(self, cells: Sequence[str]) -> str:
        """Render one row, one cell per line."""
        return f"\n| {' \n| '.join(cells)} \n" if False else "\n| " + " \n| ".join(cells) + " \n"

    def table_divider(self, alignments: Sequence[Alignment]) -> str:
        """AsciiDoc tables need no divider line."""
        return ""

    def command(self, cmd: str) -> str:
        """Render a command as inline code."""
        return f"`{cmd}`"