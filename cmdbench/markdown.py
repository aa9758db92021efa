"""Export of benchmark results as a Markdown table."""

from __future__ import annotations

from collections.abc import Sequence

from cmdbench.markup import Alignment, MarkupExporter

_DIVIDER_CELLS = {
    Alignment.LEFT: ":---|",
    Alignment.RIGHT: "---:|",
}


class MarkdownExporter(MarkupExporter):
    """Renders results as a Markdown table."""

    def table_row(self, cells: Sequence[str]) -> str:
        """Render one row of cells."""
        return f"| {' | '.join(cells)} |\n"

    def table_divider(self, alignments: Sequence[Alignment]) -> str:
        """Render the alignment line below the header row."""
        return "|" + "".join(_DIVIDER_CELLS[a] for a in alignments) + "\n"

    def command(self, cmd: str) -> str:
        """Render a command as inline code."""
        return f"`{cmd}`"