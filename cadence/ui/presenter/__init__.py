# cadence/ui/presenter/__init__.py
# Interactive presenter screen

from .presenter_display import InteractivePresenter, run_presenter
from .presenter_input import KeyReader, PresenterInputHandler
from .presenter_renderer import PresenterRenderer

__all__ = [
    "InteractivePresenter",
    "run_presenter",
    "KeyReader",
    "PresenterInputHandler",
    "PresenterRenderer",
]
