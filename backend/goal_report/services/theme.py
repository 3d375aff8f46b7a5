"""
Colors and text styles shared by the page chrome and every section.

Colors are plain hex strings; PageCanvas converts them to ReportLab colors
when the document is finalized.
"""

from goal_report.services.canvas import TextStyle

# --- Brand Colors ---
# Consistent palette across all report sections. Easy to swap for white-labeling.
BRAND_PRIMARY = "#4F46E5"       # Indigo - header bar, table header
BRAND_SECONDARY = "#4338CA"     # Deep indigo - section titles
BRAND_ACCENT = "#E0E7FF"        # Pale indigo - title rules, header date
BRAND_TEXT = "#1F2937"          # Near black - body text
BRAND_BODY = "#4B5563"          # Dark gray - descriptions, comments
BRAND_MUTED = "#9CA3AF"         # Gray - placeholders, footer
BRAND_LABEL = "#6B7280"         # Medium gray - card labels
BRAND_WHITE = "#FFFFFF"

SUCCESS = "#10B981"
SUCCESS_BG = "#D1FAE5"
INFO = "#3B82F6"
INFO_BG = "#DBEAFE"
DANGER = "#EF4444"
DANGER_BG = "#FEE2E2"

# Detail card palette: (fill, border) per card
CARD_PALETTE = [
    ("#FEF3C7", "#F59E0B"),
    ("#DBEAFE", "#3B82F6"),
    ("#E0E7FF", "#6366F1"),
]

# Status badge palette: (fill, border/text)
STATUS_PALETTE = {
    "completed": (SUCCESS_BG, SUCCESS),
    "active": (INFO_BG, INFO),
    "abandoned": ("#F3F4F6", BRAND_LABEL),
}


def build_styles() -> dict[str, TextStyle]:
    """Create all text styles used in the goal report.

    Returns a dict of style_name → TextStyle. Centralizing styles
    here keeps the section renderers clean and makes restyling easy.
    """
    return {
        "brand": TextStyle("Helvetica-Bold", 18, BRAND_WHITE),
        "subtitle": TextStyle("Helvetica", 9, "#C7D2FE"),
        "date": TextStyle("Helvetica", 8, BRAND_ACCENT, align="right"),
        "footer": TextStyle("Helvetica", 8, BRAND_MUTED, align="center"),
        "section_title": TextStyle("Helvetica-Bold", 14, BRAND_SECONDARY),
        "goal_title": TextStyle("Helvetica-Bold", 16, "#0C4A6E"),
        "body": TextStyle("Helvetica", 10, BRAND_BODY, leading=14),
        "card_value": TextStyle("Helvetica-Bold", 12, BRAND_TEXT, align="center"),
        "card_label": TextStyle("Helvetica", 9, BRAND_LABEL, align="center"),
        "badge": TextStyle("Helvetica-Bold", 12, INFO, align="center"),
        "stat_value": TextStyle("Helvetica-Bold", 22, BRAND_TEXT, align="center"),
        "stat_label": TextStyle("Helvetica", 9, "#374151", align="center"),
        "table_header": TextStyle("Helvetica-Bold", 10, BRAND_WHITE),
        "day_badge": TextStyle("Helvetica-Bold", 9, BRAND_SECONDARY, align="center"),
        "status_done": TextStyle("Helvetica-Bold", 10, SUCCESS),
        "hours": TextStyle("Helvetica", 9, "#374151"),
        "hours_missing": TextStyle("Helvetica", 9, BRAND_MUTED),
        "comment": TextStyle("Helvetica", 8, BRAND_BODY),
        "comment_missing": TextStyle("Helvetica-Oblique", 8, BRAND_MUTED),
        "insight_header": TextStyle("Helvetica-Bold", 11, BRAND_WHITE),
        "insight_summary": TextStyle("Helvetica", 10, "#1E40AF", leading=14),
        "insight_meta": TextStyle("Helvetica-Oblique", 9, BRAND_LABEL),
        "list_header": TextStyle("Helvetica-Bold", 11, BRAND_TEXT),
        "bullet": TextStyle("Helvetica", 9, BRAND_TEXT, leading=12),
    }
