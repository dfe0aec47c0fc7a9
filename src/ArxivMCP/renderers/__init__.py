"""Result projection and rendering for arxiv-mcp."""

from __future__ import annotations

from ArxivMCP.renderers.json import dumps_results, render_json, render_results, render_view
from ArxivMCP.renderers.mapper import FIELD_ALIASES, project_record, project_records, resolve_fields
from ArxivMCP.renderers.view_models import RecordView

__all__ = [
    "FIELD_ALIASES",
    "RecordView",
    "dumps_results",
    "project_record",
    "project_records",
    "render_json",
    "render_results",
    "render_view",
    "resolve_fields",
]
