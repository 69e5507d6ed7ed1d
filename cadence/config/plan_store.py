# cadence/config/plan_store.py
# JSON persistence for presentation plans, tolerant of legacy saved shapes

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

from ..cadence_io.generics import read_json_safe, write_json_safe
from ..core.exceptions import PlanFormatError
from ..core.types import PresentationPlan, Section
from ..core.verbose import vlog


# * Built-in three-section plan written by `cadence init`
def default_plan() -> PresentationPlan:
    return PresentationPlan(
        sections=[
            Section(name="Introduction", presenter="Presenter 1", planned_minutes=3),
            Section(name="Demo", presenter="Presenter 1", planned_minutes=5),
            Section(name="Closing", presenter="Presenter 1", planned_minutes=2),
        ],
        presenters=["Presenter 1"],
        min_time_minutes=10,
        max_time_minutes=15,
    )


# first key present in data, in priority order
def _first(data: dict[str, Any], *keys: str, default: Any = None) -> Any:
    for k in keys:
        if k in data:
            return data[k]
    return default


# legacy saves stored minutes under "duration" & had no "seconds"
def _section_from_dict(item: dict[str, Any]) -> Section:
    return Section(
        name=_first(item, "name", default=""),
        presenter=_first(item, "presenter", default=""),
        planned_minutes=_first(item, "minutes", "planned_minutes", "duration", default=0),
        planned_seconds=_first(item, "seconds", "planned_seconds", default=0),
    )


# * Parse a plan document; raises PlanFormatError when there is no sections list
def plan_from_dict(data: Any, path: Optional[Path] = None) -> PresentationPlan:
    if not isinstance(data, dict) or not isinstance(data.get("sections"), list):
        raise PlanFormatError("Plan must be a JSON object with a 'sections' list", path)

    skipped = sum(1 for item in data["sections"] if not isinstance(item, dict))
    if skipped:
        vlog("PLAN", f"Skipped {skipped} malformed section entries")
    sections = [
        _section_from_dict(item) for item in data["sections"] if isinstance(item, dict)
    ]

    presenters = data.get("presenters")
    if isinstance(presenters, list):
        presenter_list = [str(p) for p in presenters if p is not None]
    else:
        # derive from sections, keeping first-seen order
        presenter_list = list(dict.fromkeys(s.presenter for s in sections if s.presenter))

    return PresentationPlan(
        sections=sections,
        presenters=presenter_list,
        min_time_minutes=_first(data, "min_time", "minTime", default=0),
        max_time_minutes=_first(data, "max_time", "maxTime", default=0),
    )


# * Serialize a plan in the current (non-legacy) shape
def plan_to_dict(plan: PresentationPlan) -> dict[str, Any]:
    return {
        "min_time": plan.min_time_minutes,
        "max_time": plan.max_time_minutes,
        "presenters": list(plan.presenters),
        "sections": [
            {
                "name": s.name,
                "presenter": s.presenter,
                "minutes": s.planned_minutes,
                "seconds": s.planned_seconds,
            }
            for s in plan.sections
        ],
    }


# * File-backed plan store: load() -> plan or None when absent, save(plan)
class PlanStore:
    def __init__(self, path: Path | str):
        self.path = Path(path)

    def exists(self) -> bool:
        return self.path.exists()

    def load(self) -> Optional[PresentationPlan]:
        if not self.path.exists():
            return None
        plan = plan_from_dict(read_json_safe(self.path), self.path)
        vlog(
            "PLAN",
            f"Loaded {len(plan.sections)} sections from {self.path}",
            f"Total planned: {plan.total_planned_seconds:.0f}s, "
            f"range {plan.min_time_minutes:g}-{plan.max_time_minutes:g} min",
        )
        return plan

    def save(self, plan: PresentationPlan) -> None:
        write_json_safe(plan_to_dict(plan), self.path)
