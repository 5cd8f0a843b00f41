# UI.py
"""""PySide6 user interface for the Bracket Calculator.

Structure
---------
- Calculator UI: main window with display and button grid
- Settings UI: modal dialog for user preferences

Responsibilities (Calculator)
-----------------------------
- Build window, display, layout and buttons
- Collect the problem one button press at a time (no validation)
- Hand the problem to MathEngine on '=' and render whatever comes back
- Show MathEngine errors in the display and as a dialog
- Clipboard copy of the display and dark/light mode


Responsibilities (Settings)
---------------------------

- Load Current Settings and Settings Descriptions via config_manager
- Validate user input (e.g. minimum decimal places)
- Save and apply theme changes immediately

The calculation itself is fast and bounded by the input length, so it runs
directly on the UI thread.
"""""

from PySide6 import QtWidgets
from PySide6.QtCore import Qt, Signal
import sys
import pyperclip
from . import error as E
from . import config_manager as config_manager
from . import MathEngine as MathEngine


SETTINGS_KEY = "\u2699"  # "⚙"
COPY_KEY = "\U0001F4CB"  # "📋"
EQUALS_KEY = "="
CANCEL_KEY = "C"
BACKSPACE_KEY = "<"


class SettingsDialog(QtWidgets.QDialog):
    """""

    Settings window. Boolean settings become checkboxes, integer settings input fields.
    Saves through config_manager when OK is pressed, ignores the changes on Cancel.

    """""

    settings_saved = Signal()  # Signal to tell the main window to update

    def __init__(self, parent=None):
        super().__init__(parent)
        self.widgets = {}  # Setting key -> widget, read back in save_settings

        # --- 1. Window Setup ---
        self.setWindowTitle("Calculator Settings")
        self.setMinimumSize(300, 200)

        main_layout = QtWidgets.QVBoxLayout(self)

        # --- 2. Load Settings ---
        self.setting_value_list = config_manager.load_setting_value("all")
        self.setting_description_list = config_manager.load_setting_description("all")

        # --- 3. Build Widgets ---
        for key_value, value in self.setting_value_list.items():
            description = self.setting_description_list.get(key_value, key_value)

            # --- 3a. Checkbox Builder (for Boolean settings) ---
            if isinstance(value, bool):
                checkbox = QtWidgets.QCheckBox(description)
                checkbox.setChecked(value)
                main_layout.addWidget(checkbox)
                self.widgets[key_value] = checkbox

            # --- 3b. Input Field Builder (for Integer settings) ---
            elif isinstance(value, int):
                row_h_layout = QtWidgets.QHBoxLayout()
                main_layout.addLayout(row_h_layout)
                label = QtWidgets.QLabel(description + " (min. 2):")
                input_field = QtWidgets.QLineEdit()
                input_field.setPlaceholderText(str(value))  # Show current value as placeholder

                row_h_layout.addWidget(label)
                row_h_layout.addWidget(input_field)
                row_h_layout.setStretch(1, 1)
                self.widgets[key_value] = input_field

        # --- 4. OK / Cancel Buttons ---
        button_box = QtWidgets.QDialogButtonBox(
            QtWidgets.QDialogButtonBox.StandardButton.Ok | QtWidgets.QDialogButtonBox.StandardButton.Cancel)
        main_layout.addWidget(button_box)
        main_layout.addStretch(1)

        button_box.accepted.connect(self.save_settings)
        button_box.rejected.connect(self.reject)

        self.update_darkmode()

    def read_widgets(self):
        """Collect the values from all widgets. Raises ValueError for invalid input fields."""
        new_settings = dict(self.setting_value_list)

        for key_value, widget in self.widgets.items():
            if isinstance(widget, QtWidgets.QCheckBox):
                new_settings[key_value] = widget.isChecked()

            elif isinstance(widget, QtWidgets.QLineEdit):
                new_value_str = widget.text().strip()

                # If user left it blank, keep the old value
                if new_value_str == "":
                    continue

                new_value_int = int(new_value_str)
                if key_value == "decimal_places" and new_value_int < 2:
                    raise ValueError(f"'{new_value_int}' is too small. Minimum is 2.")
                new_settings[key_value] = new_value_int

        return new_settings

    def save_settings(self):
        try:
            new_settings = self.read_widgets()
        except ValueError as e:
            # Show an error box and STOP the save process
            QtWidgets.QMessageBox.critical(self, "Invalid Input:",
                                           f"{e}\n\nPlease correct your input.")
            return

        saved_settings = config_manager.save_setting(new_settings)

        if saved_settings != {}:
            self.setting_value_list = saved_settings
            self.settings_saved.emit()
            self.update_darkmode()
            self.accept()
        else:
            QtWidgets.QMessageBox.critical(self, "Error",
                                           f"Error 5001: {E.ERROR_MESSAGES['5001']}")

    def update_darkmode(self):
        if self.setting_value_list["darkmode"] == True:
            self.setStyleSheet("""
                        QDialog {background-color: #121212;}
                        QLabel {color: white;}
                        QCheckBox {color: white;}
                        QLineEdit {background-color: #444444;color: white;border: 1px solid #666666;}
                        QDialogButtonBox QPushButton {background-color: #666666;color: white;}""")
        else:
            self.setStyleSheet("")


class CalculatorWindow(QtWidgets.QWidget):

    def __init__(self):
        super().__init__()

        # --- 1. Load Settings ---
        self.setting_value_list = config_manager.load_setting_value("all")

        # --- 2. Instance State Variables ---
        self.problem = ""  # The text built from button presses
        self.calculator_result = ""  # Text of the last result

        # --- 3. Window Setup ---
        self.button_objects = {}
        self.setWindowTitle("Calculator")
        self.resize(320, 450)
        main_v_layout = QtWidgets.QVBoxLayout(self)

        expanding_policy = QtWidgets.QSizePolicy(
            QtWidgets.QSizePolicy.Policy.Expanding,
            QtWidgets.QSizePolicy.Policy.Expanding
        )

        # --- 4. Display Setup ---
        self.display = QtWidgets.QLineEdit("")
        self.display.setAlignment(Qt.AlignmentFlag.AlignRight)
        self.display.setReadOnly(True)
        font = self.display.font()
        font.setPointSize(28)
        self.display.setFont(font)
        self.display.setSizePolicy(expanding_policy)
        main_v_layout.addWidget(self.display, 1)

        # --- 5. Button Grid Setup ---
        button_container = QtWidgets.QWidget()
        main_v_layout.addWidget(button_container, 4)
        button_grid = QtWidgets.QGridLayout(button_container)
        button_grid.setSpacing(0)
        button_grid.setContentsMargins(0, 0, 0, 0)

        # (text, row, column, column span)
        self.buttons = [
            (SETTINGS_KEY, 0, 0, 1), (COPY_KEY, 0, 1, 1), ('(', 0, 2, 1), (')', 0, 3, 1),
            ('7', 1, 0, 1), ('8', 1, 1, 1), ('9', 1, 2, 1), ('/', 1, 3, 1),
            ('4', 2, 0, 1), ('5', 2, 1, 1), ('6', 2, 2, 1), ('*', 2, 3, 1),
            ('1', 3, 0, 1), ('2', 3, 1, 1), ('3', 3, 2, 1), ('-', 3, 3, 1),
            ('.', 4, 0, 1), ('0', 4, 1, 1), (BACKSPACE_KEY, 4, 2, 1), ('+', 4, 3, 1),
            (CANCEL_KEY, 5, 0, 1), (EQUALS_KEY, 5, 1, 3)
        ]

        # --- 6. Button Creation Loop ---
        for text, row, col, col_span in self.buttons:
            button = QtWidgets.QPushButton(text)
            button.setSizePolicy(expanding_policy)

            if text == SETTINGS_KEY:
                button.clicked.connect(self.open_settings)
            else:
                button.clicked.connect(lambda checked=False, val=text: self.handle_button_press(val))

            button_grid.addWidget(button, row, col, 1, col_span)
            self.button_objects[text] = button

        self.update_darkmode()

    def handle_button_press(self, value):
        if value == EQUALS_KEY:
            self.calculate_expression()
            return

        elif value == CANCEL_KEY:
            self.problem = ""

        elif value == BACKSPACE_KEY:
            self.problem = self.problem[:-1]

        elif value == COPY_KEY:
            pyperclip.copy(self.display.text())
            return

        else:
            self.problem += value

        self.display.setText(self.problem)

    def calculate_expression(self):
        """Evaluate the current problem and show the result (or the error) in the display."""
        try:
            result = MathEngine.calculate(self.problem)

        except E.MathError as error_obj:
            self.calculator_result = error_obj.display_text()
            self.display.setText(self.calculator_result)
            self.show_error(error_obj)
            return self.calculator_result

        self.calculator_result = MathEngine.format_result(result)

        if self.setting_value_list["show_equation"] == True and not isinstance(result, str):
            self.display.setText(f"{self.problem} = {self.calculator_result}")
        else:
            self.display.setText(self.calculator_result)

        return self.calculator_result

    def show_error(self, error_obj):
        error_box = QtWidgets.QMessageBox(self)
        error_box.setIcon(QtWidgets.QMessageBox.Icon.Critical)
        error_box.setWindowTitle("Calculation error")
        error_box.setText(error_obj.display_text())
        error_box.setInformativeText(f"Details: {error_obj.message}\nEquation: {error_obj.equation}")
        error_box.setStandardButtons(QtWidgets.QMessageBox.StandardButton.Ok)
        error_box.setStyleSheet(self.get_message_box_stylesheet())
        # Non-blocking so a click on '=' never waits on the dialog
        error_box.open()

    def update_darkmode(self):
        darkmode = self.setting_value_list["darkmode"] == True

        for text, button in self.button_objects.items():
            if text == EQUALS_KEY:
                # '=' keeps its blue style in both modes
                button.setStyleSheet("background-color: #007bff; color: white; font-weight: bold;")
            elif darkmode:
                button.setStyleSheet("background-color: #121212; color: white; font-weight: bold;")
            else:
                button.setStyleSheet("font-weight: normal;")

        if darkmode:
            self.setStyleSheet("background-color: #121212;")
            self.display.setStyleSheet("background-color: #121212; color: white; font-weight: bold;")
        else:
            self.setStyleSheet("")
            self.display.setStyleSheet("font-weight: bold;")

    def open_settings(self):
        settings_dialog = SettingsDialog(self)
        settings_dialog.exec()  # modal

        # Reload settings after dialog closes so changes (like darkmode) are applied
        self.setting_value_list = config_manager.load_setting_value("all")
        self.update_darkmode()

    def get_message_box_stylesheet(self):
        if self.setting_value_list["darkmode"] == True:
            return """
                QMessageBox {
                    background-color: #121212;
                    color: white;
                }
                QLabel {
                    color: white;
                }
                QPushButton {
                    background-color: #2e2e2e;
                    color: white;
                    border: 1px solid #444444;
                    padding: 5px 15px;
                }
            """
        else:
            return ""


def main():
    # --- Main Application Entry Point ---
    app = QtWidgets.QApplication(sys.argv)
    window = CalculatorWindow()
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
