from .report import format_report, format_row, format_table

__all__ = [
    "format_row",
    "format_table",
    "format_report",
]
