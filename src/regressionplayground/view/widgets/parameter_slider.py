"""Float-valued slider with a live numeric readout."""
from __future__ import annotations

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import QWidget, QHBoxLayout, QLabel, QSlider


class ParameterSlider(QWidget):
    """
    QSlider only knows integers, so the float range is mapped onto
    ``round(value / step)`` ticks.
    """
    # Emitted on user input with the new float value
    value_changed = Signal(float)

    def __init__(
        self,
        label: str,
        minimum: float,
        maximum: float,
        step: float,
        decimals: int,
        value: float,
        parent: QWidget | None = None
    ) -> None:
        super().__init__(parent)
        self.step = step
        self.decimals = decimals

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.lbl_name = QLabel(label)
        self.lbl_name.setMinimumWidth(90)
        layout.addWidget(self.lbl_name)

        self.slider = QSlider(Qt.Horizontal)
        self.slider.setRange(self._to_ticks(minimum), self._to_ticks(maximum))
        self.slider.setSingleStep(1)
        self.slider.setPageStep(10)
        layout.addWidget(self.slider, 1)

        self.lbl_value = QLabel()
        self.lbl_value.setMinimumWidth(50)
        self.lbl_value.setAlignment(Qt.AlignRight | Qt.AlignVCenter)
        layout.addWidget(self.lbl_value)

        self.set_value(value)
        self.slider.valueChanged.connect(self._on_slider_changed)

    def _to_ticks(self, value: float) -> int:
        return int(round(value / self.step))

    def value(self) -> float:
        return self.slider.value() * self.step

    def set_value(self, value: float) -> None:
        """Move the handle without emitting ``value_changed``."""
        self.slider.blockSignals(True)
        try:
            self.slider.setValue(self._to_ticks(value))
        finally:
            self.slider.blockSignals(False)
        self.set_readout(value)

    def set_readout(self, value: float) -> None:
        self.set_readout_text(f"{value:.{self.decimals}f}")

    def set_readout_text(self, text: str) -> None:
        self.lbl_value.setText(text)

    def _on_slider_changed(self, ticks: int) -> None:
        value = ticks * self.step
        self.set_readout(value)
        self.value_changed.emit(value)
