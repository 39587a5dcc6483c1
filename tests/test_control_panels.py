import pytest

pytest.importorskip("python_qt_binding")

from polar_joystick.config_manager import (  # noqa: E402
    MAX_LOOP_INTERVAL,
    MAX_WIDTH_BORDER,
    MIN_LOOP_INTERVAL,
    ConfigurationManager,
    JoystickConfig,
)
from polar_joystick.control_panels import (  # noqa: E402
    AppearancePanel,
    ReportingPanel,
    swatch_color,
)


@pytest.mark.parametrize("interval", [MIN_LOOP_INTERVAL, 5, 750, MAX_LOOP_INTERVAL])
def test_interval_slider_covers_config_range(qapp, interval):
    panel = ReportingPanel(ConfigurationManager(JoystickConfig(loop_interval_ms=interval)))
    assert panel.interval_value() == interval


def test_border_width_slider_covers_config_range(qapp):
    panel = AppearancePanel(ConfigurationManager(JoystickConfig(border_width=MAX_WIDTH_BORDER)))
    assert panel.border_width_value() == MAX_WIDTH_BORDER


def test_swatch_keeps_alpha(qapp):
    assert swatch_color("transparent") == "rgba(0, 0, 0, 0)"
    assert swatch_color("#80ff0000") == "rgba(255, 0, 0, 128)"
    assert swatch_color("#112233") == "rgba(17, 34, 51, 255)"
