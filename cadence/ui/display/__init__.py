# cadence/ui/display/__init__.py
# Static report & plan rendering

from .report_table import build_report_table, build_report_summary, render_report, show_report
from .plan_table import build_plan_table, build_range_line, show_plan

__all__ = [
    "build_report_table",
    "build_report_summary",
    "render_report",
    "show_report",
    "build_plan_table",
    "build_range_line",
    "show_plan",
]
