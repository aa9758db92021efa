"""Export of benchmark results as an Emacs org-mode table."""

from __future__ import annotations

from collections.abc import Sequence

from cmdbench.markup import Alignment, MarkupExporter


class OrgmodeExporter(MarkupExporter):
    """Renders results as an Emacs org-mode table."""

    def table_row(self, cells: Sequence[str]) -> str:
        """Render one row of cells; the first cell is set apart from the rest."""
        if not cells:
            raise ValueError("a table row needs at least one cell")
        first, *rest = cells
        return f"| {first}  |  {' |  '.join(rest)} |\n"

    def table_divider(self, alignments: Sequence[Alignment]) -> str:
        """Render the horizontal line below the header row."""
        if not alignments:
            raise ValueError("a table divider needs at least one column")
        return "|" + "--+" * (len(alignments) - 1) + "--|\n"

    def command(self, cmd: str) -> str:
        """Render a command as verbatim text."""
        return f"={cmd}="