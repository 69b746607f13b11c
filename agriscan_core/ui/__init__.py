"""Shared Streamlit building blocks for AgriScan pages."""
from .page_setup import setup_page, PAGES
from .components import (
    header,
    status_banner,
    stat_row,
    severity_badge,
    severity_chart,
    confidence_bar,
    add_grid,
)

__all__ = [
    "setup_page",
    "PAGES",
    "header",
    "status_banner",
    "stat_row",
    "severity_badge",
    "severity_chart",
    "confidence_bar",
    "add_grid",
]
