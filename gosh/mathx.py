"""Evaluation of constant arithmetic expressions and trigonometry helpers."""

import ast
import math
import operator


class MathError(ValueError):
    """Raised when an expression cannot be evaluated."""


_INT_ONLY = {
    ast.Mod: operator.mod,
    ast.LShift: operator.lshift,
    ast.RShift: operator.rshift,
    ast.BitAnd: operator.and_,
    ast.BitOr: operator.or_,
    ast.BitXor: operator.xor,
}


def _divide(left, right):
    if right == 0:
        raise MathError("evaluation error:  division by zero")
    if isinstance(left, int) and isinstance(right, int):
        quotient = abs(left) // abs(right)
        return quotient if (left >= 0) == (right >= 0) else -quotient
    return left / right


def _int_mod(left, right):
    if right == 0:
        raise MathError("evaluation error:  division by zero")
    return left - right * _divide(left, right)


def _eval(node):
    if isinstance(node, ast.Expression):
        return _eval(node.body)
    if isinstance(node, ast.Constant):
        if isinstance(node.value, bool) or not isinstance(node.value, (int, float)):
            raise MathError("invalid expression")
        return node.value
    if isinstance(node, ast.UnaryOp):
        value = _eval(node.operand)
        if isinstance(node.op, ast.USub):
            return -value
        if isinstance(node.op, ast.UAdd):
            return value
        raise MathError("evaluation error:  unsupported operator")
    if isinstance(node, ast.BinOp):
        left, right = _eval(node.left), _eval(node.right)
        op = type(node.op)
        if op is ast.Add:
            return left + right
        if op is ast.Sub:
            return left - right
        if op is ast.Mult:
            return left * right
        if op is ast.Div:
            return _divide(left, right)
        if op in _INT_ONLY:
            if not (isinstance(left, int) and isinstance(right, int)):
                raise MathError("evaluation error:  operator requires integer operands")
            if op is ast.Mod:
                return _int_mod(left, right)
            if op in (ast.LShift, ast.RShift) and right < 0:
                raise MathError("evaluation error:  negative shift count")
            return _INT_ONLY[op](left, right)
        raise MathError("evaluation error:  unsupported operator")
    raise MathError("invalid expression")


def evaluate(expr):
    """Evaluate a constant arithmetic expression and return it as a float.

    Integer operands use integer division truncated toward zero.
    """
    try:
        tree = ast.parse(expr.strip(), mode="eval")
    except SyntaxError as exc:
        raise MathError(f"syntax error: {exc.msg}") from None
    try:
        result = _eval(tree)
    except OverflowError as exc:
        raise MathError(f"evaluation error:  {exc}") from None
    try:
        return float(result)
    except OverflowError:
        return math.copysign(math.inf, result)


def sin(x):
    """Sine of ``x`` radians."""
    return math.sin(x)


def cos(x):
    """Cosine of ``x`` radians."""
    return math.cos(x)


def tan(x):
    """Tangent of ``x`` radians."""
    return math.tan(x)