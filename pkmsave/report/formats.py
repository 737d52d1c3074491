"""Format decoded records as text, JSON, an HTML fragment or a full HTML page."""
from __future__ import annotations

from typing import Optional

from pkmsave.export.json_export import export_json
from pkmsave.report.html import render_html, render_page
from pkmsave.report.text import render_text
from pkmsave.save.models import DecodeStatus, TrainerRecord


def format_record(record: TrainerRecord, fmt: str = "text",
                  status: Optional[DecodeStatus] = None) -> str:
    """Format a trainer record in the specified format."""
    if fmt == "json":
        return export_json(record, status=status)
    elif fmt == "html":
        return render_html(record)
    elif fmt == "page":
        return render_page(record)
    elif fmt == "text":
        return render_text(record)
    raise ValueError(f"Unknown output format: {fmt}")
