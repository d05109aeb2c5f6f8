"""
Main Application Window
=======================
The primary GUI container that holds the Menu Bar, the control panel and the chart.

Why is this file needed?
------------------------
1. Layout: It organizes the high-level visual structure of the application.
2. Capabilities: It implements the PlaygroundView protocol, so the controller
   can register handlers and push view models without knowing about Qt.
"""
from __future__ import annotations

import logging
from typing import Callable, Optional

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QSplitter, QGroupBox, QFormLayout,
    QLabel, QPushButton, QFileDialog, QMessageBox
)
from PySide6.QtCore import Qt
from PySide6.QtGui import QAction

from regressionplayground.config import (
    VISIBLE_APP_NAME, INTERCEPT_RANGE, SLOPE_RANGE, SLIDER_STEP, PARAM_DECIMALS,
    DEFAULT_INTERCEPT, DEFAULT_SLOPE, CSV_FILTER
)
from regressionplayground.view.series import ViewModel
from regressionplayground.view.widgets.chart import RegressionChart
from regressionplayground.view.widgets.parameter_slider import ParameterSlider

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self) -> None:
        super().__init__()
        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(1100, 650)

        # --- MAIN CONTAINER ---
        splitter = QSplitter(Qt.Horizontal)
        self.setCentralWidget(splitter)

        # --- LEFT SIDE: Controls ---
        controls = QWidget()
        layout = QVBoxLayout(controls)

        grp_params = QGroupBox("Model Parameters")
        l_params = QVBoxLayout(grp_params)

        self.slider_intercept = ParameterSlider(
            "Intercept (w0):", *INTERCEPT_RANGE, SLIDER_STEP, PARAM_DECIMALS, DEFAULT_INTERCEPT
        )
        l_params.addWidget(self.slider_intercept)

        self.slider_slope = ParameterSlider(
            "Slope (w1):", *SLOPE_RANGE, SLIDER_STEP, PARAM_DECIMALS, DEFAULT_SLOPE
        )
        l_params.addWidget(self.slider_slope)

        layout.addWidget(grp_params)

        grp_error = QGroupBox("Error")
        form_error = QFormLayout(grp_error)
        self.lbl_mse = QLabel("-")
        self.lbl_mse.setStyleSheet("font-weight: bold;")
        form_error.addRow("MSE:", self.lbl_mse)
        layout.addWidget(grp_error)

        self.btn_new = QPushButton("New Problem")
        self.btn_new.setMinimumHeight(40)
        layout.addWidget(self.btn_new)

        self.btn_export = QPushButton("Download CSV")
        layout.addWidget(self.btn_export)

        layout.addStretch()
        splitter.addWidget(controls)

        # --- RIGHT SIDE: Chart ---
        self.chart = RegressionChart()
        splitter.addWidget(self.chart)

        # Initial proportions (1 part sidebar : 2 parts chart)
        splitter.setSizes([350, 750])

        # --- ACTIONS & MENUS ---
        self._create_actions()
        self._create_menus()

    def _create_actions(self) -> None:
        self.act_new = QAction("New Problem", self)
        self.act_new.setShortcut("Ctrl+N")

        self.act_export = QAction("Download CSV...", self)
        self.act_export.setShortcut("Ctrl+S")

        self.act_exit = QAction("Exit", self)
        self.act_exit.triggered.connect(self.close)

    def _create_menus(self) -> None:
        file_menu = self.menuBar().addMenu("&File")
        file_menu.addAction(self.act_new)
        file_menu.addAction(self.act_export)
        file_menu.addSeparator()
        file_menu.addAction(self.act_exit)

    # --- HANDLER REGISTRATION ---

    def on_parameter_change(self, handler: Callable[[str, float], None]) -> None:
        self.slider_intercept.value_changed.connect(lambda v: handler("intercept", v))
        self.slider_slope.value_changed.connect(lambda v: handler("slope", v))

    def on_regenerate(self, handler: Callable[[], None]) -> None:
        # clicked/triggered carry a 'checked' flag the handler does not take
        self.btn_new.clicked.connect(lambda: handler())
        self.act_new.triggered.connect(lambda: handler())

    def on_export_request(self, handler: Callable[[], None]) -> None:
        self.btn_export.clicked.connect(lambda: handler())
        self.act_export.triggered.connect(lambda: handler())

    # --- RENDERING ---

    def render_view(self, view_model: ViewModel, rebuild: bool) -> None:
        if rebuild:
            # Move the handles back without re-triggering the controller
            self.slider_intercept.set_value(view_model.intercept)
            self.slider_slope.set_value(view_model.slope)
            self.chart.rebuild(view_model.series)
        else:
            self.chart.update_model_line(view_model.series.model)

        self.slider_intercept.set_readout_text(view_model.intercept_text)
        self.slider_slope.set_readout_text(view_model.slope_text)
        self.lbl_mse.setText(view_model.mse_text)

    # --- DIALOGS ---

    def show_notice(self, title: str, message: str) -> None:
        QMessageBox.warning(self, title, message)

    def show_error(self, title: str, message: str) -> None:
        QMessageBox.critical(self, title, message)

    def ask_export_path(self, default_name: str) -> Optional[str]:
        fname, _ = QFileDialog.getSaveFileName(self, "Download CSV", default_name, CSV_FILTER)
        if not fname:
            return None

        logger.debug(f"Export target chosen: {fname}")

        # Ensure extension
        if not fname.lower().endswith(".csv"):
            fname += ".csv"
        return fname
