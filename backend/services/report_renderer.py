"""
Report Renderer - HTML table and standalone HTML report for diff records
"""

from __future__ import annotations

import html
from datetime import datetime

from models.diff import DiffKind, DiffRecord

ROW_CLASSES = {
    DiffKind.KEPT: "line-normal",
    DiffKind.REMOVED: "line-removed",
    DiffKind.ADDED: "line-added",
}

NO_DIFF_MESSAGE = "No differences"


class ReportRenderer:
    """Render diff records as a side-by-side HTML table"""

    DOCUMENT_HEAD = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>{title}</title>
<style>
td, th {{ word-break: break-all; font-size: 12pt; }}
tr {{ vertical-align: top; }}
.border {{ border-radius: 6px; border: 1px #a0a0a0 solid; box-shadow: 1px 1px 2px rgba(0, 0, 0, 0.15); overflow: hidden; }}
.ln {{ text-align: right; word-break: normal; background-color: lightgrey; min-width: 40px; }}
.title {{ color: white; padding: 4px 4px; background: linear-gradient(mediumblue, darkblue); }}
.line-normal {{ color: #000000; background-color: #ffffff; }}
.line-added {{ color: #000000; background-color: #c8f7c5; }}
.line-removed {{ color: #000000; background-color: #ffb3ba; }}
.no-diff-message {{ padding: 8px; color: #555555; }}
</style>
</head>
<body>
<h2>{title}</h2>
<p class="generated-at">Generated: {timestamp}</p>
"""

    DOCUMENT_FOOT = """</body>
</html>
"""

    def __init__(
        self,
        title: str = "Text File Diff Result",
        timestamp_format: str = "%Y-%m-%d %H:%M:%S",
    ):
        self.title = title
        self.timestamp_format = timestamp_format

    @staticmethod
    def escape_html(text: str | None) -> str:
        """Escape & < > " ' for embedding in markup"""
        if not text:
            return ""
        return html.escape(text, quote=True)

    def render_row(self, record: DiffRecord) -> str:
        """One table row; the side a record does not cover stays empty"""
        css_class = ROW_CLASSES[record.kind]
        left_num = record.left_line_number or ""
        right_num = record.right_line_number or ""
        left_content = self.escape_html(record.left_content) or "&nbsp;"
        right_content = self.escape_html(record.right_content) or "&nbsp;"

        return (
            "<tr>\n"
            f'<td class="ln">{left_num}</td>\n'
            f'<td class="{css_class}"><code>{left_content}</code></td>\n'
            f'<td class="ln">{right_num}</td>\n'
            f'<td class="{css_class}"><code>{right_content}</code></td>\n'
            "</tr>"
        )

    def _render_rows_table(
        self,
        records: list[DiffRecord],
        left_label: str,
        right_label: str,
    ) -> str:
        parts = [
            '<div class="border">',
            '<table class="diff-table" cellspacing="0" cellpadding="0" style="width: 100%; margin: 0; border: none;">',
            "<thead>",
            "<tr>",
            '<th class="title" style="width:1%"></th>',
            f'<th class="title" style="width:49%">{self.escape_html(left_label)}</th>',
            '<th class="title" style="width:1%"></th>',
            f'<th class="title" style="width:49%">{self.escape_html(right_label)}</th>',
            "</tr>",
            "</thead>",
            "<tbody>",
        ]
        parts.extend(self.render_row(record) for record in records)
        parts.extend(["</tbody>", "</table>", "</div>"])
        return "\n".join(parts)

    def render_table(
        self,
        records: list[DiffRecord],
        left_label: str,
        right_label: str,
    ) -> str:
        """Table fragment for a live view, or a notice when nothing differs"""
        if not any(record.kind != DiffKind.KEPT for record in records):
            return f'<div class="no-diff-message">{NO_DIFF_MESSAGE}</div>'
        return self._render_rows_table(records, left_label, right_label)

    def render_document(
        self,
        records: list[DiffRecord],
        left_label: str,
        right_label: str,
        generated_at: datetime | None = None,
    ) -> str:
        """Self-contained HTML document for download"""
        generated_at = generated_at or datetime.now()
        head = self.DOCUMENT_HEAD.format(
            title=self.escape_html(self.title),
            timestamp=self.escape_html(generated_at.strftime(self.timestamp_format)),
        )

        body = []
        if not any(record.kind != DiffKind.KEPT for record in records):
            body.append(f'<p class="no-diff-message">{NO_DIFF_MESSAGE}</p>')
        body.append(self._render_rows_table(records, left_label, right_label))

        return head + "\n".join(body) + "\n" + self.DOCUMENT_FOOT
