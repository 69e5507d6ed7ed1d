# cadence/config/__init__.py
# Settings & presentation plan persistence

from .settings import CadenceSettings, SettingsManager, settings_manager, get_settings
from .plan_store import PlanStore, default_plan, plan_from_dict, plan_to_dict

__all__ = [
    "CadenceSettings",
    "SettingsManager",
    "settings_manager",
    "get_settings",
    "PlanStore",
    "default_plan",
    "plan_from_dict",
    "plan_to_dict",
]
