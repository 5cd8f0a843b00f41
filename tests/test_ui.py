"""
Tests for BracketCalculator/UI.py, run on the Qt offscreen platform.
"""

import pytest

QtWidgets = pytest.importorskip("PySide6.QtWidgets")

from BracketCalculator import UI
from BracketCalculator import config_manager


@pytest.fixture(scope="module")
def app():
    application = QtWidgets.QApplication.instance() or QtWidgets.QApplication([])
    yield application


@pytest.fixture
def window(app):
    calculator_window = UI.CalculatorWindow()
    yield calculator_window
    calculator_window.close()


def press(window, keys):
    for key in keys:
        window.handle_button_press(key)


class TestCalculatorWindow:

    def test_buttons_are_built(self, window):
        for key in "0123456789.+-*/()":
            assert key in window.button_objects
        assert UI.EQUALS_KEY in window.button_objects
        assert UI.CANCEL_KEY in window.button_objects

    def test_button_press_appends(self, window):
        press(window, "12+3")
        assert window.problem == "12+3"
        assert window.display.text() == "12+3"

    def test_button_click_reaches_handler(self, window):
        window.button_objects["7"].click()
        assert window.display.text() == "7"

    def test_equals_shows_result(self, window):
        press(window, "2*(2+5)")
        window.handle_button_press(UI.EQUALS_KEY)
        assert window.display.text() == "14"

    def test_rounded_result(self, window):
        press(window, "1/3")
        window.handle_button_press(UI.EQUALS_KEY)
        assert window.display.text() == "≈ 0.3333333333"

    def test_cancel_clears(self, window):
        press(window, "9*9")
        window.handle_button_press(UI.CANCEL_KEY)
        assert window.problem == ""
        assert window.display.text() == ""

    def test_backspace(self, window):
        press(window, "123")
        window.handle_button_press(UI.BACKSPACE_KEY)
        assert window.display.text() == "12"

    def test_division_by_zero_in_display(self, window):
        press(window, "5/0")
        window.handle_button_press(UI.EQUALS_KEY)
        assert window.display.text() == "Error 3003: Division by Zero"

    def test_malformed_input_is_echoed(self, window):
        press(window, "(2+3")
        window.handle_button_press(UI.EQUALS_KEY)
        assert window.display.text() == "(2+3"

    def test_show_equation(self, window):
        window.setting_value_list["show_equation"] = True
        press(window, "10-2-3")
        window.handle_button_press(UI.EQUALS_KEY)
        assert window.display.text() == "10-2-3 = 5"

    def test_copy(self, window, monkeypatch):
        copied = []
        monkeypatch.setattr(UI.pyperclip, "copy", copied.append)
        press(window, "42")
        window.handle_button_press(UI.COPY_KEY)
        assert copied == ["42"]
        assert window.problem == "42"


class TestSettingsDialog:

    def test_widgets_per_setting(self, app):
        dialog = UI.SettingsDialog()
        assert isinstance(dialog.widgets["darkmode"], QtWidgets.QCheckBox)
        assert isinstance(dialog.widgets["decimal_places"], QtWidgets.QLineEdit)

    def test_decimal_places_minimum(self, app):
        dialog = UI.SettingsDialog()
        dialog.widgets["decimal_places"].setText("1")
        with pytest.raises(ValueError):
            dialog.read_widgets()

    def test_blank_input_keeps_value(self, app):
        dialog = UI.SettingsDialog()
        assert dialog.read_widgets()["decimal_places"] == 10

    def test_save_settings(self, app):
        dialog = UI.SettingsDialog()
        dialog.widgets["darkmode"].setChecked(True)
        dialog.widgets["decimal_places"].setText("4")
        dialog.save_settings()

        assert config_manager.load_setting_value("darkmode") is True
        assert config_manager.load_setting_value("decimal_places") == 4
