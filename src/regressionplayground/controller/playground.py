"""
Playground Controller
=====================
Owns the ModelState and reacts to user actions coming from the view.

Why is this file needed?
------------------------
1. Single owner: Only the controller mutates the state; handlers are bound
   methods, not free functions touching globals.
2. Routing: Slider moves trigger a cheap line update, "New Problem" triggers a
   full chart rebuild, "Download CSV" goes through the IOManager.

Classes:
    PlaygroundView: Capability interface the window has to provide.
    PlaygroundController: The controller itself.
"""
from __future__ import annotations

import logging
from typing import Callable, Optional, Protocol

from regressionplayground.config import EXPORT_FILENAME
from regressionplayground.model.io import EmptyDatasetError, IOManager
from regressionplayground.model.state import ModelState
from regressionplayground.view.series import ViewModel, build_view_model

logger = logging.getLogger(__name__)


class PlaygroundView(Protocol):
    def on_parameter_change(self, handler: Callable[[str, float], None]) -> None: ...
    def on_regenerate(self, handler: Callable[[], None]) -> None: ...
    def on_export_request(self, handler: Callable[[], None]) -> None: ...
    def render_view(self, view_model: ViewModel, rebuild: bool) -> None: ...
    def show_notice(self, title: str, message: str) -> None: ...
    def show_error(self, title: str, message: str) -> None: ...
    def ask_export_path(self, default_name: str) -> Optional[str]: ...


class PlaygroundController:
    def __init__(self, state: ModelState, view: PlaygroundView) -> None:
        self.state = state
        self.view = view

        self.view.on_parameter_change(self.change_parameter)
        self.view.on_regenerate(self.regenerate)
        self.view.on_export_request(self.export)

    def start(self) -> None:
        """Generate the first problem and draw it."""
        self.regenerate()

    def regenerate(self) -> None:
        self.state.new_problem()
        self.refresh(rebuild=True)

    def change_parameter(self, name: str, value: float) -> None:
        self.state.set_parameter(name, value)
        self.refresh(rebuild=False)

    def refresh(self, rebuild: bool) -> None:
        view_model = build_view_model(self.state)
        self.view.render_view(view_model, rebuild=rebuild)

    def export(self) -> None:
        """Ask for a target file and write the dataset to it."""
        # Check before opening the dialog; nothing to save means no dialog
        if len(self.state.dataset) == 0:
            logger.warning("Export requested with an empty dataset.")
            self.view.show_notice("Download CSV", "No data to download")
            return

        filepath = self.view.ask_export_path(EXPORT_FILENAME)
        if not filepath:
            logger.debug("Export cancelled by user.")
            return

        try:
            IOManager.export_csv(self.state.dataset, filepath)
        except EmptyDatasetError as e:
            self.view.show_notice("Download CSV", str(e))
        except OSError as e:
            self.view.show_error("Error", f"Could not save the file:\n{e}")
