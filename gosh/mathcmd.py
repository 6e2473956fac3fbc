"""The ``math`` command."""

import math
from decimal import Decimal

from . import mathx


def _format_float(value):
    """Format a float the way the shell prints numbers."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    text = repr(value)
    if "e" in text:
        exponent = int(text.split("e")[1])
        if -4 <= exponent < 21:
            text = format(Decimal(text), "f")
    elif text.endswith(".0"):
        text = text[:-2]
    if "e" not in text and "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _parse_float(text):
    if text != text.strip():
        raise ValueError(text)
    return float(text)


def math_command(args):
    """Run ``math eval|sin|cos|tan`` and print the result."""
    if not args:
        print("usage: math <eval|sin|cos|tan> <expression|number>")
        return

    sub = args[0]
    if sub == "eval":
        if len(args) < 2:
            print("usage: math eval <expression>")
            return
        try:
            result = mathx.evaluate(args[1])
        except mathx.MathError as exc:
            print("error:", exc)
            return
        print(_format_float(result))
    elif sub in ("sin", "cos", "tan"):
        if len(args) < 2:
            print(f"usage: math {sub} <number>")
            return
        try:
            value = _parse_float(args[1])
        except ValueError:
            print("invalid number:", args[1])
            return
        function = {"sin": mathx.sin, "cos": mathx.cos, "tan": mathx.tan}[sub]
        print(_format_float(function(value)))
    else:
        print("unknown math subcommand:", sub)