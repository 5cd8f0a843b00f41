class MathError(Exception):
    def __init__(self, message, code="9999", equation=None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.equation = equation

    def display_text(self):
        """Text the calculator screen shows for this error."""
        return f"Error {self.code}: {ERROR_MESSAGES.get(self.code, self.message)}"


class CalculationError(MathError):
    pass




Error_Dictionary = {

    "3" : "Calculator Error",
    "5" : "Configuration Error",
    "9" : "Unexpected Error"

}

#Error Messages are structured in:
# 1. Digit: Main Error
# 2. Digit: Specification
# 3. and 4. Digit: Error Number



ERROR_MESSAGES = {
    "3003" : "Division by Zero",
    "3004" : "Invalid Operator",


    "5001" : "Settings could not be saved",


    "9999" : "Unexpected Error"
}
