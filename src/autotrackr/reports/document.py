#!/usr/bin/env python3
"""
Report Document Model

Reports are assembled as an ordered list of sections, each holding rows,
and only turned into text at the end. The same document can be rendered as
plain narrative text or as delimited CSV.

Row kinds:
- FIELD: a label and a value ("Purchase Price: $3,500.00" / "Profit,2575.00")
- TEXT:  a single free-text line
- TABLE: a row of cells (tab separated in text, comma separated in CSV)
"""

import csv
import io
from dataclasses import dataclass, field
from enum import Enum


class RowKind(Enum):
    """How a row is laid out when rendered."""

    FIELD = "field"
    TEXT = "text"
    TABLE = "table"


@dataclass(frozen=True)
class ReportRow:
    """One line of a report section."""

    kind: RowKind
    cells: tuple[str, ...]
    indent: int = 0

    @classmethod
    def field(cls, label: str, value: str, indent: int = 0) -> "ReportRow":
        return cls(kind=RowKind.FIELD, cells=(label, value), indent=indent)

    @classmethod
    def text(cls, line: str, indent: int = 0) -> "ReportRow":
        return cls(kind=RowKind.TEXT, cells=(line,), indent=indent)

    @classmethod
    def table(cls, *cells: str) -> "ReportRow":
        return cls(kind=RowKind.TABLE, cells=tuple(cells))

    @property
    def label(self) -> str | None:
        """Label of a FIELD row, None for other kinds."""
        return self.cells[0] if self.kind is RowKind.FIELD else None

    @property
    def value(self) -> str:
        """Value of a FIELD row, or the joined cells for other kinds."""
        if self.kind is RowKind.FIELD:
            return self.cells[1]
        return "\t".join(self.cells)


@dataclass
class ReportSection:
    """A titled group of rows. Sections are separated by a blank line."""

    heading: str | None
    rows: list[ReportRow] = field(default_factory=list)

    def add_field(self, label: str, value: str, indent: int = 0) -> "ReportSection":
        self.rows.append(ReportRow.field(label, value, indent))
        return self

    def add_text(self, line: str, indent: int = 0) -> "ReportSection":
        self.rows.append(ReportRow.text(line, indent))
        return self

    def add_table_row(self, *cells: str) -> "ReportSection":
        self.rows.append(ReportRow.table(*cells))
        return self

    def find(self, label: str) -> str | None:
        """Value of the first FIELD row with this label."""
        for row in self.rows:
            if row.label == label:
                return row.value
        return None


@dataclass
class ReportDocument:
    """Header rows followed by ordered sections."""

    header: list[ReportRow] = field(default_factory=list)
    sections: list[ReportSection] = field(default_factory=list)

    def add_section(self, heading: str | None) -> ReportSection:
        section = ReportSection(heading=heading)
        self.sections.append(section)
        return section

    def section(self, heading: str) -> ReportSection:
        """
        First section with the given heading.

        Raises:
            KeyError: If no section has that heading
        """
        for section in self.sections:
            if section.heading == heading:
                return section
        raise KeyError(heading)

    @property
    def headings(self) -> list[str]:
        return [section.heading for section in self.sections if section.heading is not None]


def _render_text_row(row: ReportRow) -> str:
    prefix = " " * row.indent
    if row.kind is RowKind.FIELD:
        return f"{prefix}{row.cells[0]}: {row.cells[1]}"
    return prefix + "\t".join(row.cells)


def render_text(document: ReportDocument) -> str:
    """Serialize a document as plain narrative text."""
    lines = [_render_text_row(row) for row in document.header]
    for section in document.sections:
        lines.append("")
        if section.heading is not None:
            lines.append(section.heading)
        lines.extend(_render_text_row(row) for row in section.rows)
    return "\n".join(lines) + "\n"


def render_csv(document: ReportDocument) -> str:
    """
    Serialize a document as CSV.

    Every row becomes one record; FIELD rows become two cells and TEXT rows
    one cell. Headings are single-cell records and sections are separated by
    an empty record.
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    for row in document.header:
        writer.writerow(row.cells)
    for section in document.sections:
        writer.writerow([])
        if section.heading is not None:
            writer.writerow([section.heading])
        for row in section.rows:
            writer.writerow(row.cells)
    return buffer.getvalue()
