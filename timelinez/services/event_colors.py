# timelinez/services/event_colors.py
# Label -> display color, shared by the importer and the CRUD service.

DEFAULT_COLOR = "#d1d5db"

# First matching keyword wins; matching is a case-insensitive substring test.
KEYWORD_COLORS = (
    (("begins", "start"), "#93c5fd"),
    (("complete", "finish"), "#86efac"),
    (("departs",), "#fcd34d"),
    (("arrive",), "#c4b5fd"),
    (("installation",), "#5eead4"),
)


def color_for_label(label: str | None) -> str:
    lowered = (label or "").lower()
    for keywords, color in KEYWORD_COLORS:
        if any(k in lowered for k in keywords):
            return color
    return DEFAULT_COLOR
