import io
import time

import pytest

from everest import apps
from everest.io import InputDevice


@pytest.fixture
def delays(monkeypatch):
    recorded = []
    monkeypatch.setattr(time, "sleep", recorded.append)
    return recorded


def device_with(keys):
    return InputDevice(io.StringIO(keys))


def lines(*values):
    return iter(values).__next__


def test_celldata_is_never_available():
    assert apps.is_celldata_available() is False


def test_run_app_loop_renders_until_back(delays):
    calls = []
    apps.run_app_loop(device_with("xyb"), lambda: calls.append(1), 0.01)
    assert len(calls) == 2
    assert delays == [0.01, 0.01]


def test_run_app_loop_accepts_uppercase_back(delays):
    calls = []
    apps.run_app_loop(device_with("B"), lambda: calls.append(1), 0.01)
    assert calls == []


def test_run_app_loop_leaves_later_keys_unread(delays):
    device = device_with("bz")
    apps.run_app_loop(device, lambda: None, 0.01)
    device.update()
    assert device.get_keypress() == "z"


def test_calculate_sum_and_divide():
    assert apps.calculate(2.5, 0.5, apps.OP_SUM) == 3.0
    assert apps.calculate(7.0, 2.0, apps.OP_DIVIDE) == 3.5


@pytest.mark.parametrize("x,y", [(1.5, 2.0), (-4.0, 8.0), (10.0, 0.25)])
def test_calculate_inverse_operations(x, y):
    total = apps.calculate(x, y, apps.OP_SUM)
    assert apps.calculate(total, y, apps.OP_SUBTRACT) == pytest.approx(x)
    product = apps.calculate(x, y, apps.OP_MULTIPLY)
    assert apps.calculate(product, y, apps.OP_DIVIDE) == pytest.approx(x)


@pytest.mark.parametrize("op", [0, 5, None])
def test_calculate_unknown_operation_gives_zero(op):
    assert apps.calculate(3.0, 4.0, op) == 0.0


def test_calculate_divide_by_zero_raises():
    with pytest.raises(ZeroDivisionError):
        apps.calculate(1.0, 0.0, apps.OP_DIVIDE)


def test_render_calc_shows_result(delays):
    out = io.StringIO()
    result = apps.render_calc(out, lines("3\n", "4\n", "3\n"))
    assert result == apps.calculate(3.0, 4.0, apps.OP_MULTIPLY)
    text = out.getvalue()
    assert "--- CALCULATOR ---" in text
    assert "Result: 12.000000" in text
    assert delays == [apps.RESULT_PAUSE]


def test_render_calc_division_by_zero_shows_nothing(delays):
    out = io.StringIO()
    assert apps.render_calc(out, lines("5\n", "0\n", "2\n")) is None
    assert "Result:" not in out.getvalue()
    assert delays == []


def test_render_calc_exit_operation(delays):
    out = io.StringIO()
    assert apps.render_calc(out, lines("5\n", "6\n", "9\n")) is None
    assert "Result:" not in out.getvalue()


def test_render_calc_bad_operation_resets_to_zero(delays):
    out = io.StringIO()
    assert apps.render_calc(out, lines("5\n", "6\n", "abc\n")) == 0.0
    assert "Result: 0.000000" in out.getvalue()


def test_render_calc_invalid_number_stops(delays):
    out = io.StringIO()
    assert apps.render_calc(out, lines("hello\n")) is None
    assert "Second number" not in out.getvalue()


def test_calc_app_renders_once_per_key(delays):
    out = io.StringIO()
    apps.calc_app(device_with("ab"), out, lines("1\n", "2\n", "1\n"))
    assert out.getvalue().count("--- CALCULATOR ---") == 1


def test_calls_register_screen(delays):
    out = io.StringIO()
    apps.render_calls_app(out)
    assert "--- CALLS REGISTER ---" in out.getvalue()
    assert "You haven't received any calls" in out.getvalue()


def test_calls_register_app_back_immediately(delays):
    out = io.StringIO()
    apps.calls_register_app(device_with("b"), out)
    assert out.getvalue() == ""


def test_contacts_app_renders(delays):
    out = io.StringIO()
    apps.contacts_app(device_with("xb"), out)
    assert out.getvalue().count("No contacts found") == 1
    assert delays == [apps.APP_TICK]


def test_settings_app_renders(delays):
    out = io.StringIO()
    apps.settings_app(device_with("xxb"), out)
    assert out.getvalue().count("--- SETTINGS ---") == 2


def test_dial_without_service(delays):
    out = io.StringIO()
    assert apps.dial("12345", out) is False
    assert "Service not found" in out.getvalue()
    assert delays == [apps.DIAL_PAUSE]


def test_dialer_app_reads_first_token(delays):
    out = io.StringIO()
    assert apps.dialer_app(out, lines("12345 extra\n")) == "12345"
    assert "Enter a number:" in out.getvalue()
    assert "Cannot dial this number" in out.getvalue()


def test_dialer_app_truncates_long_number(delays):
    out = io.StringIO()
    number = apps.dialer_app(out, lines("1" * 30 + "\n"))
    assert len(number) == apps.PHONE_NUMBER_LENGTH


def test_display_menu_lists_apps():
    out = io.StringIO()
    apps.display_menu(out)
    text = out.getvalue()
    for entry in ("--- MAIN MENU ---", "r. Call History", "d. Dialer", "m. Messages",
                  "c. Calculator", "s. Settings", "k. Contacts", "q. Power Off"):
        assert entry in text


def test_messages_app_closes_for_good(delays):
    app = apps.MessagesApp()
    out = io.StringIO()
    app.run(device_with("ab"), out)
    assert out.getvalue().count("No messages found") == 1
    assert app.running is False

    second = io.StringIO()
    device = device_with("xb")
    app.run(device, second)
    assert second.getvalue() == ""
    device.update()
    assert device.get_keypress() == "x"