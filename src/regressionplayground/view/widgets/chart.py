"""
Regression Chart
================
pyqtgraph plot showing the data scatter and the user's model line.

The chart has two refresh paths:
    rebuild: drop all items and create them again (new dataset).
    update_model_line: replace the data of the line item only (slider moves).
"""
from __future__ import annotations

import logging
from typing import Optional

import pyqtgraph as pg
from PySide6.QtWidgets import QWidget

from regressionplayground.config import (
    CHART_X_RANGE, CHART_Y_RANGE, CHART_X_TICK, CHART_Y_TICK,
    DATA_COLOR, MODEL_COLOR, DATA_POINT_SIZE, MODEL_LINE_WIDTH
)
from regressionplayground.view.series import ChartSeries, LineSeries

logger = logging.getLogger(__name__)


class RegressionChart(pg.PlotWidget):

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.data_item: Optional[pg.ScatterPlotItem] = None
        self.model_item: Optional[pg.PlotDataItem] = None

        self.setBackground('w')
        self.showGrid(x=True, y=True, alpha=0.3)
        self.setLabel('bottom', 'x', color='black')
        self.setLabel('left', 'y', color='black')
        for name in ('bottom', 'left'):
            self.getAxis(name).setPen('k')
            self.getAxis(name).setTextPen('k')
        self.getAxis('bottom').setTickSpacing(CHART_X_TICK, CHART_X_TICK / 2)
        self.getAxis('left').setTickSpacing(CHART_Y_TICK, CHART_Y_TICK / 2)

        # Fixed viewport, like a static figure
        self.setMouseEnabled(x=False, y=False)
        self.hideButtons()
        self._apply_range()

        self.addLegend(offset=(10, 10))

    def _apply_range(self) -> None:
        self.setXRange(*CHART_X_RANGE, padding=0)
        self.setYRange(*CHART_Y_RANGE, padding=0)

    def rebuild(self, series: ChartSeries) -> None:
        """Discard the current items and draw everything from scratch."""
        self.clear()

        self.data_item = pg.ScatterPlotItem(
            series.data.xs, series.data.ys,
            size=DATA_POINT_SIZE,
            brush=pg.mkBrush(DATA_COLOR),
            pen=pg.mkPen(DATA_COLOR),
            name='Data',
        )
        self.data_item.setZValue(0)
        self.addItem(self.data_item)

        self.model_item = pg.PlotDataItem(
            series.model.xs, series.model.ys,
            pen=pg.mkPen(color=MODEL_COLOR, width=MODEL_LINE_WIDTH),
            name='Model',
        )
        # Line drawn over the points
        self.model_item.setZValue(1)
        self.addItem(self.model_item)

        self._apply_range()
        logger.debug(f"Chart rebuilt with {len(series.data.xs)} points.")

    def update_model_line(self, line: LineSeries) -> None:
        """Cheap path: only the line data changes."""
        if self.model_item is None:
            logger.debug("Model line update requested before first build; ignored.")
            return
        self.model_item.setData(line.xs, line.ys)
