from __future__ import annotations
from typing import Dict, Optional

import pandas as pd
import plotly.graph_objects as go
import streamlit as st

from .theme import (PRIMARY_COLOR, TEXT_COLOR, SUBTLE_TEXT, GRID_COLOR,
                    CARD_BG_LIGHT, SEVERITY_COLORS, BANNER_STYLES)


def header(title: str, subtitle: str, icon: str = "🌾"):
    st.markdown(f"""
        <div class="main-header">
            <div style="display:flex;gap:1rem;align-items:center;">
                <div style="font-size:2.4rem;">{icon}</div>
                <div>
                    <h1 style="margin:0;font-size:1.6rem;color:white;">{title}</h1>
                    <p style="margin:.25rem 0 0 0;color:rgba(255,255,255,.9);font-size:.9rem">{subtitle}</p>
                </div>
            </div>
        </div>
    """, unsafe_allow_html=True)


def status_banner(text: str, kind: str = "online"):
    """Full-width connectivity banner; ``kind`` picks the palette."""
    bg, fg, border = BANNER_STYLES.get(kind, BANNER_STYLES["online"])
    st.markdown(
        f"<div class='status-banner' style='background:{bg};color:{fg};"
        f"border:1px solid {border};'>{text}</div>",
        unsafe_allow_html=True,
    )


def stat_row(stats: Dict[str, str], colors: Optional[Dict[str, str]] = None):
    """A row of small stat cards: {label: value}."""
    colors = colors or {}
    for col, (label, value) in zip(st.columns(len(stats)), stats.items()):
        color = colors.get(label, PRIMARY_COLOR)
        col.markdown(
            f"<div class='stat-card'><div class='value' style='color:{color}'>{value}</div>"
            f"<div class='label'>{label}</div></div>",
            unsafe_allow_html=True,
        )


def severity_badge(severity: str, suffix: str = "") -> str:
    color = SEVERITY_COLORS.get(severity, SUBTLE_TEXT)
    label = f"{severity} {suffix}".strip()
    return (f"<span class='severity-badge' style='color:{color};border-color:{color};"
            f"background:{color}14'>{label}</span>")


def add_grid(fig: go.Figure) -> go.Figure:
    fig.update_xaxes(showgrid=False, zeroline=False, showline=True, linecolor=GRID_COLOR,
                     tickfont=dict(color=SUBTLE_TEXT))
    fig.update_yaxes(showgrid=True, gridcolor=GRID_COLOR, zeroline=False,
                     tickfont=dict(color=SUBTLE_TEXT))
    fig.update_layout(plot_bgcolor=CARD_BG_LIGHT, paper_bgcolor=CARD_BG_LIGHT,
                      font=dict(family="Inter, sans-serif", size=12, color=TEXT_COLOR),
                      margin=dict(l=10, r=10, t=30, b=10), height=240)
    return fig


def severity_chart(counts: pd.Series) -> go.Figure:
    """Bar chart of disease counts per severity level."""
    fig = go.Figure(go.Bar(
        x=list(counts.index),
        y=list(counts.values),
        marker_color=[SEVERITY_COLORS.get(s, PRIMARY_COLOR) for s in counts.index],
        text=list(counts.values),
        textposition="outside",
    ))
    fig.update_layout(title="Diseases by severity", showlegend=False)
    return add_grid(fig)


def confidence_bar(confidence: float, severity: str):
    """Horizontal confidence meter for a detection result."""
    pct = int(round(confidence * 100))
    color = SEVERITY_COLORS.get(severity, PRIMARY_COLOR)
    st.markdown(
        f"<div style='background:{GRID_COLOR};border-radius:6px;height:8px;'>"
        f"<div style='width:{pct}%;background:{color};height:8px;border-radius:6px;'></div></div>",
        unsafe_allow_html=True,
    )
