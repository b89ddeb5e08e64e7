from __future__ import annotations
from typing import Dict, List, Optional
from io import BytesIO
from datetime import datetime

from openpyxl import Workbook
from openpyxl.utils import get_column_letter
from openpyxl.styles import Font, Alignment, PatternFill

from app.utils.conflict import ConflictReport, Merged, WeeklyGrid
from app.utils.palette import COLOR_HEX
from app.utils.timeslots import DAYS_OF_WEEK, MIN_START_TIME, MAX_END_TIME

FREE_CELL = "X"


def hour_headers(min_hour: int = MIN_START_TIME, max_hour: int = MAX_END_TIME) -> List[str]:
    """7, 9 -> ["7:00 - 8:00", "8:00 - 9:00"]"""
    return [f"{h}:00 - {h + 1}:00" for h in range(min_hour, max_hour)]


def _fill(color: Optional[str]) -> Optional[PatternFill]:
    rgb = COLOR_HEX.get(color or "")
    if not rgb:
        return None
    return PatternFill(start_color=rgb, end_color=rgb, fill_type="solid")


def _write_grid(ws, grid: WeeklyGrid, colors: Dict[str, str], min_hour: int, max_hour: int):
    ws.append([""] + hour_headers(min_hour, max_hour))

    header_font = Font(bold=True)
    for col_idx in range(1, max_hour - min_hour + 2):
        cell = ws.cell(row=1, column=col_idx)
        cell.font = header_font
        cell.alignment = Alignment(horizontal="center", vertical="center")

    grey = _fill("grey")
    for row_idx, day in enumerate(DAYS_OF_WEEK, start=2):
        ws.cell(row=row_idx, column=1, value=day).font = header_font
        cells = grid.get(day, {})
        for col_idx, hour in enumerate(range(min_hour, max_hour), start=2):
            owner = cells.get(hour)
            cell = ws.cell(row=row_idx, column=col_idx, value=owner or FREE_CELL)
            cell.alignment = Alignment(horizontal="center", vertical="center")
            fill = _fill(colors.get(owner)) if owner else grey
            if fill is not None:
                cell.fill = fill

    ws.column_dimensions[get_column_letter(1)].width = 12
    for col_idx in range(2, max_hour - min_hour + 2):
        ws.column_dimensions[get_column_letter(col_idx)].width = 14


def schedule_to_xlsx_bytes(
    report: ConflictReport,
    colors: Dict[str, str],
    min_hour: int = MIN_START_TIME,
    max_hour: int = MAX_END_TIME,
) -> bytes:
    """
    merged -> one "Merged Schedule" sheet
    conflicted -> one sheet per course, same columns so they line up
    """
    wb = Workbook()
    ws = wb.active

    if isinstance(report, Merged):
        ws.title = "Merged Schedule"
        _write_grid(ws, report.grid, colors, min_hour, max_hour)
    else:
        wb.remove(ws)
        used = set()
        for course, grid in report.entries:
            title = course.course_number[:31]
            if title in used:
                continue
            used.add(title)
            sheet = wb.create_sheet(title=title)
            owned = {day: {h: course.course_number for h in hours} for day, hours in grid.items()}
            _write_grid(sheet, owned, colors, min_hour, max_hour)

    buf = BytesIO()
    wb.save(buf)
    return buf.getvalue()


def make_filename(prefix: str = "schedule") -> str:
    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    return f"{prefix}_{ts}.xlsx"
