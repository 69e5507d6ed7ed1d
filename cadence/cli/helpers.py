# cadence/cli/helpers.py
# Shared CLI helpers for plan resolution & loading

from __future__ import annotations

from pathlib import Path
from typing import Optional

from ..config.plan_store import PlanStore
from ..config.settings import CadenceSettings
from ..core.exceptions import PlanError
from ..core.types import PresentationPlan
from ..core.verbose import vlog_config


# explicit argument wins, then settings.plan_path
def resolve_plan_path(settings: CadenceSettings, plan: Optional[Path]) -> Path:
    path = plan if plan is not None else settings.plan_file
    vlog_config("plan_path", path)
    return path


# * Load plan from disk; a missing file is an error w/ a hint to run init
def load_plan(path: Path) -> PresentationPlan:
    plan = PlanStore(path).load()
    if plan is None:
        raise PlanError(f"Plan file not found: {path} (run 'cadence init' to create one)")
    return plan
