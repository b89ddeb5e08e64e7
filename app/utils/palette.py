from typing import Dict, Sequence

DEFAULT_COLORS = ("green", "red", "blue", "yellow", "purple")

# fills used by the xlsx export
COLOR_HEX = {
    "green": "C6EFCE",
    "red": "FFC7CE",
    "blue": "BDD7EE",
    "yellow": "FFEB9C",
    "purple": "E4DFEC",
    "grey": "D9D9D9",
}


def color_for(position: int, palette: Sequence[str] = DEFAULT_COLORS) -> str:
    return palette[position % len(palette)]


def assign_colors(course_numbers: Sequence[str], palette: Sequence[str] = DEFAULT_COLORS) -> Dict[str, str]:
    """
    ["CS143", "MA101"] -> {"CS143": "green", "MA101": "red"}
    colour depends only on selection position; a repeated course keeps its first colour
    """
    out: Dict[str, str] = {}
    for i, number in enumerate(course_numbers):
        out.setdefault(number, color_for(i, palette))
    return out
