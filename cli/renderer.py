"""
Arabic Root Index Renderer
==========================
Formats repository contents and index statistics for the terminal.

Features:
  - Aligned ASCII tables sized by display width (combining marks take no cell)
  - Vertical key: value mode for single records
  - Row count footer
  - Error rendering with a classification prefix
"""

import sys
import unicodedata
from typing import Any, Dict, Iterable, List, Optional, TextIO

from models.pattern import Pattern
from models.root import Root


def _display_width(text: str) -> int:
    """Terminal cells used by text. Arabic harakat and shadda take none."""
    return sum(1 for ch in text if not unicodedata.combining(ch))


class Renderer:
    """
    Table / vertical renderer writing to a text stream (stdout by default).
    """

    def __init__(self, output: TextIO = None):
        self.output = output or sys.stdout
        self.mode: str = "table"        # table, vertical
        self.show_headers: bool = True
        self.max_col_width: int = 50

    # ─── Public API ─────────────────────────────────────────────────

    def render_rows(self, rows: Iterable[Dict[str, Any]],
                    column_names: Optional[List[str]] = None) -> int:
        """Render dict rows. Returns number of rows rendered."""
        rows = list(rows)
        if self.mode == "vertical":
            count = self._render_vertical(rows, column_names)
        else:
            count = self._render_table(rows, column_names)
        self._print(f"\n{count} row(s)")
        return count

    def render_roots(self, roots: Iterable[Root]) -> int:
        return self.render_rows(
            ({"root": r.letters, "r1": r.r1, "r2": r.r2, "r3": r.r3} for r in roots),
            ["root", "r1", "r2", "r3"],
        )

    def render_patterns(self, patterns: Iterable[Pattern]) -> int:
        return self.render_rows(
            ({"id": p.pattern_id, "structure": p.structure,
              "category": p.category, "description": p.description}
             for p in patterns),
            ["id", "structure", "category", "description"],
        )

    def render_stats(self, stats: Dict[str, Any]) -> int:
        """Render a statistics mapping as a two-column table."""
        return self.render_rows(
            ({"metric": k, "value": v} for k, v in stats.items()),
            ["metric", "value"],
        )

    def render_message(self, message: str):
        if message:
            self._print(message)

    def render_error(self, error: Exception):
        """Render an error with classification prefix."""
        prefix = self._classify_error(type(error).__name__)
        self._print(f"{prefix}: {error}")

    # ─── Table Mode ─────────────────────────────────────────────────

    def _render_table(self, rows: List[Dict[str, Any]],
                      column_names: Optional[List[str]]) -> int:
        headers = column_names or (list(rows[0].keys()) if rows else [])
        if not headers:
            return 0

        widths = self._calculate_widths(headers, rows)

        if self.show_headers:
            self._print_table_separator(widths, headers)
            self._print_table_row(widths, headers, {h: h for h in headers})
            self._print_table_separator(widths, headers)

        for vals in rows:
            self._print_table_row(widths, headers, vals)

        if self.show_headers and rows:
            self._print_table_separator(widths, headers)

        return len(rows)

    def _calculate_widths(self, headers: List[str],
                          rows: List[Dict[str, Any]]) -> Dict[str, int]:
        """Column width in terminal cells, capped at max_col_width."""
        widths = {}
        for h in headers:
            cells = [self._cell_text(h)] + [self._cell_text(row.get(h)) for row in rows]
            widths[h] = max(_display_width(c) for c in cells)
        return widths

    def _cell_text(self, value) -> str:
        text = self._format_value(value)
        if _display_width(text) <= self.max_col_width:
            return text
        # Combining marks ride on the preceding letter and are kept with it
        kept, used = [], 0
        for ch in text:
            cost = 0 if unicodedata.combining(ch) else 1
            if used + cost > self.max_col_width - 3:
                break
            kept.append(ch)
            used += cost
        return "".join(kept) + "..."

    def _print_table_separator(self, widths: Dict[str, int], headers: List[str]):
        self._print("+" + "+".join("-" * (widths[h] + 2) for h in headers) + "+")

    def _print_table_row(self, widths: Dict[str, int], headers: List[str],
                         vals: Dict[str, Any]):
        """Numbers are right-aligned, text left-aligned."""
        cells = []
        for h in headers:
            raw = vals.get(h)
            text = self._cell_text(raw)
            pad = " " * (widths[h] - _display_width(text))
            numeric = isinstance(raw, (int, float)) and not isinstance(raw, bool)
            cells.append(f" {pad}{text} " if numeric else f" {text}{pad} ")
        self._print("|" + "|".join(cells) + "|")

    # ─── Vertical Mode ──────────────────────────────────────────────

    def _render_vertical(self, rows: List[Dict[str, Any]],
                         column_names: Optional[List[str]]) -> int:
        count = 0
        for vals in rows:
            headers = column_names or list(vals.keys())
            count += 1
            self._print(f"*** Record {count} ***")
            max_key_len = max(len(h) for h in headers) if headers else 0
            for h in headers:
                self._print(f"  {h:>{max_key_len}}: {self._format_value(vals.get(h))}")
        return count

    # ─── Helpers ────────────────────────────────────────────────────

    def _format_value(self, value) -> str:
        if value is None:
            return "-"
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, float):
            if value == int(value):
                return str(int(value))
            return f"{value:.4g}"
        return str(value)

    def _classify_error(self, error_type: str) -> str:
        """Map error class name to user-friendly prefix."""
        mapping = {
            "ValueError": "InvalidArgument",
            "FileNotFoundError": "FileError",
            "IsADirectoryError": "FileError",
            "PermissionError": "FileError",
            "UnicodeDecodeError": "FileError",
            "KeyboardInterrupt": "Interrupted",
        }
        return mapping.get(error_type, f"Error[{error_type}]")

    def _print(self, text: str):
        print(text, file=self.output)
