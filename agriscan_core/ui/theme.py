import streamlit as st

# === COLOR PALETTE ===
PRIMARY_COLOR    = "#16a34a"
SECONDARY_COLOR  = "#65a30d"
SUCCESS_COLOR    = "#10b981"
WARNING_COLOR    = "#f59e0b"
DANGER_COLOR     = "#ef4444"
INFO_COLOR       = "#3b82f6"
TEXT_COLOR       = "#1f2937"
SUBTLE_TEXT      = "#4b5563"
GRID_COLOR       = "#e5e7eb"
BACKGROUND_COLOR = "#f9fafb"
CARD_BG_LIGHT    = "#ffffff"

SEVERITY_COLORS = {
    "High": DANGER_COLOR,
    "Medium": WARNING_COLOR,
    "Low": SUCCESS_COLOR,
}

# Banner palettes: (background, text, border)
BANNER_STYLES = {
    "online":  ("#f0fdf4", "#166534", "#bbf7d0"),
    "offline": ("#fef2f2", "#991b1b", "#fecaca"),
    "local":   ("#eff6ff", "#1e40af", "#bfdbfe"),
    "pending": ("#fefce8", "#854d0e", "#fef08a"),
}


def apply_css():
    """Mobile-first layout: narrow column, large tap targets."""
    st.markdown(f"""
        <style>
        .main .block-container {{
            max-width: 480px; padding-top: 1rem;
        }}
        .main {{
            background-color: {BACKGROUND_COLOR};
            color: {TEXT_COLOR};
            font-family: 'Inter','Segoe UI',sans-serif;
        }}
        .main-header {{
            background: linear-gradient(135deg, {PRIMARY_COLOR} 0%, {SECONDARY_COLOR} 100%);
            padding: 1.2rem; border-radius: 14px; margin-bottom: 1rem;
            box-shadow: 0 6px 20px rgba(22,163,74,.25);
        }}
        .status-banner {{
            padding: .75rem; border-radius: 10px; text-align: center;
            font-size: .9rem; font-weight: 500; margin-bottom: 1rem;
        }}
        .stat-card {{
            background: {CARD_BG_LIGHT}; padding: .75rem; border-radius: 10px; text-align: center;
            border: 1px solid {GRID_COLOR}; box-shadow: 0 2px 6px rgba(0,0,0,0.05);
        }}
        .stat-card .value {{ font-size: 1.2rem; font-weight: 700; }}
        .stat-card .label {{ font-size: .75rem; color: {SUBTLE_TEXT}; }}
        .feature-card {{
            background: {CARD_BG_LIGHT}; padding: 1rem; border-radius: 12px; margin: .5rem 0;
            border: 1px solid {GRID_COLOR}; box-shadow: 0 2px 6px rgba(0,0,0,0.05);
        }}
        .severity-badge {{
            display: inline-block; padding: .15rem .6rem; border-radius: 999px;
            font-size: .75rem; font-weight: 600; border: 1px solid;
        }}
        .stButton button {{
            width: 100%; min-height: 3rem; border-radius: 10px; font-weight: 600;
        }}
        h1,h2,h3,h4 {{ color: {TEXT_COLOR}; font-weight: 600; }}
        h3 {{ color: {PRIMARY_COLOR}; }}
        </style>
    """, unsafe_allow_html=True)
