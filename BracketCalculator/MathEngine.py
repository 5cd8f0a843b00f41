# MathEngine.py
"""""
Core calculation engine for the Bracket Calculator.

Pipeline
--------
1) Brackets: the innermost '(' ... ')' pair is evaluated first and replaced by its value,
   repeated until no pair is left.
2) Multiplication / Division: every '*' and '/' chain is folded left-to-right.
3) Addition / Subtraction: the remaining numbers are folded left-to-right.
4) Formatter: renders results for the display.

Malformed input (stray characters, unbalanced brackets, empty numbers) is not an error:
the engine hands the expression back unchanged. Only calculation errors such as a
division by zero are raised, and compute() turns them into display text.
"""""

import sys
import re
import operator

from . import config_manager as config_manager
from . import error as E

# Operator levels, highest precedence first
MD_Operations = ["*", "/"]
AS_Operations = ["+", "-"]

# Digits with at most one '.', at least one digit; used with fullmatch
NUMBER_PATTERN = re.compile(r"[0-9]+\.?[0-9]*|\.[0-9]+")

# Largest float that is still shown as a plain integer
MAX_PLAIN_INTEGER = 1e16


# -----------------------------
# Operations
# -----------------------------

def divide(a, b):
    if b == 0:
        raise E.CalculationError("Division by zero", code="3003")
    return a / b


Operations = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": divide,
}


def combine(a, b, operator_symbol):
    """Apply one binary operation looked up by its symbol."""
    operation = Operations.get(operator_symbol)
    if operation is None:
        raise E.CalculationError(f"Unknown operator: {operator_symbol}", code="3004")
    return operation(a, b)


# -----------------------------
# Utilities / small helpers
# -----------------------------

def debug_enabled():
    """Debug toggle for optional prints in this module, read from the settings on every call."""
    return config_manager.load_setting_value("debug")


def number_text(value):
    """Plain text for a float: integral values lose their '.0'."""
    if value.is_integer() and abs(value) < MAX_PLAIN_INTEGER:
        return str(int(value))
    return repr(value)


def render(expression):
    """Join an item list (characters and substituted floats) back into text."""
    return "".join(item if isinstance(item, str) else number_text(item) for item in expression)


def to_number(buffer):
    """Return the float a number buffer stands for, or None if it is malformed.

    A buffer is either exactly one value substituted for a bracket pair,
    or a run of characters forming a decimal number.
    """
    if len(buffer) == 1 and isinstance(buffer[0], float):
        return buffer[0]

    # A substituted value glued to anything else, e.g. '2(3)'
    if not all(isinstance(item, str) for item in buffer):
        return None

    number_string = "".join(buffer)
    if NUMBER_PATTERN.fullmatch(number_string):
        return float(number_string)
    return None


def split(expression, operators):
    """Cut the expression at every item found in `operators`, scanning left to right.

    Returns:
        (segments, found_operators) with len(segments) == len(found_operators) + 1
    """
    segments = []
    found_operators = []
    buffer = []

    for item in expression:
        if item in operators:
            segments.append(buffer)
            found_operators.append(item)
            buffer = []
        else:
            buffer.append(item)

    # Catch the last segment left over from the loop
    segments.append(buffer)
    return segments, found_operators


# -----------------------------
# Brackets
# -----------------------------

def find_innermost_brackets(expression):
    """Return (open_index, close_index) of the innermost bracket pair, or None.

    Walks backwards to the last '(' that still has a ')' after it; the first ')'
    after it closes that pair.
    """
    items = list(expression)
    next_closed = None  # nearest ')' right of the current position

    for b in range(len(items) - 1, -1, -1):
        if items[b] == ")":
            next_closed = b
        elif items[b] == "(" and next_closed is not None:
            return (b, next_closed)

    return None


# -----------------------------
# Level solver
# -----------------------------

def solve(expression, operators):
    """Fold a flat expression on one precedence level, left-to-right.

    Everything that is not in `operators` belongs to a number. If one of the
    numbers cannot be read the expression is returned unchanged as text.
    """
    items = list(expression)
    segments, found_operators = split(items, operators)
    numbers = [to_number(segment) for segment in segments]

    if None in numbers:
        if debug_enabled() == True:
            print(f"Could not read a number in '{render(items)}' for {operators}")
        return render(items)

    result = numbers[0]
    for b in range(1, len(numbers)):
        result = combine(result, numbers[b], found_operators[b - 1])

    return result


def compute_md(expression):
    """Fold every '*'/'/' chain.

    Returns an item list of numbers joined by '+'/'-', or the expression as
    text if one of the chains could not be read.
    """
    items = list(expression)
    segments, found_operators = split(items, AS_Operations)
    values = [solve(segment, MD_Operations) for segment in segments]

    if any(isinstance(value, str) for value in values):
        return render(items)

    reduced = [values[0]]
    for operator_symbol, value in zip(found_operators, values[1:]):
        reduced.append(operator_symbol)
        reduced.append(value)
    return reduced


def compute_as(expression):
    """Fold the remaining '+'/'-' operations."""
    return solve(expression, AS_Operations)


# -----------------------------
# Evaluation
# -----------------------------

def evaluate(expression):
    """Evaluate brackets (innermost first), then '*'/'/', then '+'/'-'.

    Accepts text or an item list. Returns a float, or the given expression as
    text when it is malformed. Calculation errors propagate.
    """
    items = list(expression)

    brackets = find_innermost_brackets(items)
    while brackets is not None:
        open_bracket, closed_bracket = brackets

        # The inner part may hold values of brackets resolved before
        inner_value = evaluate(items[open_bracket + 1:closed_bracket])
        if isinstance(inner_value, str):
            return render(expression)

        items = items[:open_bracket] + [inner_value] + items[closed_bracket + 1:]
        brackets = find_innermost_brackets(items)

    if debug_enabled() == True:
        print(f"Flat expression: {render(items)}")

    reduced = compute_md(items)
    if isinstance(reduced, str):
        return render(expression)

    result = compute_as(reduced)
    if isinstance(result, str):
        return render(expression)
    return result


# -----------------------------
# Result formatting
# -----------------------------

def format_result(result, decimal_places=None):
    """Render a compute() result for the display.

    Text (error messages, unreadable input) is returned as-is. Integral values
    are shown without decimals; other values are rounded to `decimal_places`
    (setting 'decimal_places' by default) and marked with '≈' if rounding changed them.
    """
    if isinstance(result, str):
        return result

    result = float(result)
    if decimal_places is None:
        decimal_places = config_manager.load_setting_value("decimal_places")

    if result != result or result in (float("inf"), float("-inf")):
        return str(result)

    if result.is_integer():
        return number_text(result)

    rounded = round(result, decimal_places)
    if rounded == 0:
        rounded = 0.0  # no '-0'

    output_string = f"{rounded:.{decimal_places}f}".rstrip("0").rstrip(".")

    if rounded != result:
        return "≈ " + output_string
    return output_string


# -----------------------------
# Public entry point
# -----------------------------

def calculate(problem):
    """Main API: brackets → '*'/'/' → '+'/'-'.

    Returns the float result, or `problem` unchanged if it could not be read.
    Raises E.MathError with `equation` set for calculation errors.
    """
    problem = str(problem)
    try:
        result = evaluate(problem)

    # Re-raise our domain errors after attaching the source equation
    except E.MathError as e:
        e.equation = problem
        raise e
    # Convert unexpected Python exceptions to our unified error type
    except Exception as e:
        raise E.MathError(message=str(e), code="9999", equation=problem) from e

    if isinstance(result, str):
        if debug_enabled() == True:
            print(f"Returning '{problem}' unchanged.")
        return problem

    return result


def compute(expression):
    """Evaluate `expression`; calculation errors come back as display text instead of raising."""
    try:
        return calculate(expression)
    except E.MathError as e:
        print(f"Error whilst calculating result: {e.message} (equation: {e.equation})", file=sys.stderr)
        return e.display_text()


def test_main():
    """Simple REPL-like runner for manual testing of the engine."""
    print("Enter the problem (empty line to quit): ")
    problem = input()
    while problem:
        print(format_result(compute(problem)))
        problem = input()


if __name__ == "__main__":
    # Allow running this module directly for quick CLI tests:
    #   python -m BracketCalculator.MathEngine
    test_main()
