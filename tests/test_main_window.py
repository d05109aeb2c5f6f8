import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

pytest.importorskip("PySide6")
pytest.importorskip("pyqtgraph")

from PySide6.QtWidgets import QApplication  # noqa: E402

from regressionplayground.controller.playground import PlaygroundController  # noqa: E402
from regressionplayground.model.state import ModelState  # noqa: E402
from regressionplayground.view.main_window import MainWindow  # noqa: E402
from regressionplayground.view.series import build_view_model  # noqa: E402
from regressionplayground.view.widgets.parameter_slider import ParameterSlider  # noqa: E402


@pytest.fixture(scope="module")
def qapp() -> QApplication:
    return QApplication.instance() or QApplication([])


@pytest.fixture
def window(qapp: QApplication) -> MainWindow:
    win = MainWindow()
    yield win
    win.close()
    win.deleteLater()


def test_parameter_slider_maps_float_range(qapp: QApplication) -> None:
    slider = ParameterSlider("w1", -3.0, 3.0, 0.01, 2, 1.0)
    received: list[float] = []
    slider.value_changed.connect(received.append)

    assert slider.value() == pytest.approx(1.0)
    assert slider.lbl_value.text() == "1.00"

    slider.slider.setValue(-125)

    assert received == [pytest.approx(-1.25)]
    assert slider.lbl_value.text() == "-1.25"


def test_parameter_slider_set_value_is_silent(qapp: QApplication) -> None:
    slider = ParameterSlider("w0", -5.0, 5.0, 0.01, 2, 0.0)
    received: list[float] = []
    slider.value_changed.connect(received.append)

    slider.set_value(2.5)

    assert received == []
    assert slider.value() == pytest.approx(2.5)


def test_window_renders_state(window: MainWindow) -> None:
    controller = PlaygroundController(ModelState(seed=4), window)
    controller.start()

    assert window.lbl_mse.text() == f"{controller.state.mse:.3f}"
    assert len(window.chart.data_item.data) == 30
    assert len(window.chart.model_item.xData) == 26

    window.slider_intercept.slider.setValue(150)

    assert controller.state.params.intercept == pytest.approx(1.5)
    assert window.chart.model_item.yData[0] == pytest.approx(1.5 + 1.0 * -6.0)
    assert window.lbl_mse.text() == f"{controller.state.mse:.3f}"


def test_new_problem_button_resets_sliders(window: MainWindow) -> None:
    controller = PlaygroundController(ModelState(seed=9), window)
    controller.start()
    window.slider_slope.slider.setValue(-200)
    assert controller.state.params.slope == pytest.approx(-2.0)

    window.btn_new.click()

    assert controller.state.params.slope == 1.0
    assert window.slider_slope.value() == pytest.approx(1.0)
    assert window.slider_slope.lbl_value.text() == "1.00"


def test_readouts_come_from_view_model_text(window: MainWindow) -> None:
    controller = PlaygroundController(ModelState(seed=6), window)
    controller.start()
    window.slider_intercept.slider.setValue(-37)

    view_model = build_view_model(controller.state)
    window.render_view(view_model, rebuild=False)

    assert window.slider_intercept.lbl_value.text() == view_model.intercept_text == "-0.37"
    assert window.slider_slope.lbl_value.text() == view_model.slope_text == "1.00"
    assert window.lbl_mse.text() == view_model.mse_text


def test_chart_uses_symmetric_y_range(window: MainWindow) -> None:
    (x_min, x_max), (y_min, y_max) = window.chart.viewRange()
    assert (x_min, x_max) == (pytest.approx(-6.0), pytest.approx(6.5))
    assert (y_min, y_max) == (pytest.approx(-7.0), pytest.approx(7.0))
