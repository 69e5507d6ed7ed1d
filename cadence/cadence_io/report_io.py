# cadence/cadence_io/report_io.py
# Report export & re-import: saved reports carry the plan & history they were built from

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Any, Optional

from ..config.plan_store import plan_from_dict, plan_to_dict
from ..core.exceptions import PlanFormatError, ReportError
from ..core.report import build_report
from ..core.types import PresentationPlan, TimingReport
from .generics import read_json_safe, write_json_safe


# timestamped file name inside report_dir
def default_report_path(report_dir: Path, now: Optional[datetime] = None) -> Path:
    stamp = (now or datetime.now()).strftime("%Y%m%d-%H%M%S")
    return Path(report_dir) / f"report-{stamp}.json"


def report_payload(plan: PresentationPlan, report: TimingReport) -> dict[str, Any]:
    return {
        "generated_at": datetime.now().isoformat(timespec="seconds"),
        "plan": plan_to_dict(plan),
        "history": [row.actual_sec for row in report.rows],
        "report": report.to_dict(),
    }


# * Write report JSON (plan + history + computed rows)
def write_report(path: Path, plan: PresentationPlan, report: TimingReport) -> None:
    write_json_safe(report_payload(plan, report), path)


# * Rebuild a report from a saved report file or a bare history list + plan
def load_report(path: Path, plan: Optional[PresentationPlan] = None) -> tuple[PresentationPlan, TimingReport]:
    data = read_json_safe(path)

    if isinstance(data, list):
        history = data
        embedded_plan = None
    elif isinstance(data, dict) and isinstance(data.get("history"), list):
        history = data["history"]
        embedded_plan = data.get("plan")
    else:
        raise ReportError(
            f"{path} is neither a saved report nor a history list"
        )

    if plan is None:
        if embedded_plan is None:
            raise ReportError(f"{path} has no embedded plan; pass --plan")
        try:
            plan = plan_from_dict(embedded_plan, path)
        except PlanFormatError as e:
            raise ReportError(f"Embedded plan in {path} is invalid: {e}")

    return plan, build_report(plan.sections, history)
