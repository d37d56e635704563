"""Arithmetic expression evaluator.

Parses an expression with the Python grammar and walks the resulting tree,
accepting only numeric literals, parentheses and arithmetic operators.
Names, calls, attribute access and every other construct are rejected
before anything is evaluated, so input can never reach the interpreter.
"""

from __future__ import annotations

import ast
import math
import operator
from typing import Any, Callable, Dict, List

from secpipe_demo.exceptions import EvaluationError, ExpressionError, InvalidExpressionError
from secpipe_demo.expression.base import EvalResult, Number
from secpipe_demo.logger import session_logger as logger
from secpipe_demo.logger.decorators import log_execution_time

MAX_EXPRESSION_LENGTH = 1000
MAX_INT_BITS = 4096
MAX_EXPONENT = 1000

UNARY_OPS: Dict[type, Callable[[Any], Any]] = {
    ast.UAdd: operator.pos,
    ast.USub: operator.neg,
}

BINARY_OPS: Dict[type, Callable[[Any, Any], Any]] = {
    ast.Add: operator.add,
    ast.Sub: operator.sub,
    ast.Mult: operator.mul,
    ast.Div: operator.truediv,
    ast.FloorDiv: operator.floordiv,
    ast.Mod: operator.mod,
    ast.Pow: operator.pow,
}

OPERATOR_SYMBOLS: Dict[type, str] = {
    ast.UAdd: "+",
    ast.USub: "-",
    ast.Add: "+",
    ast.Sub: "-",
    ast.Mult: "*",
    ast.Div: "/",
    ast.FloorDiv: "//",
    ast.Mod: "%",
    ast.Pow: "**",
}


class ArithmeticEvaluator:
    """Evaluates arithmetic expressions over int and float literals."""

    def __init__(self, max_length: int = MAX_EXPRESSION_LENGTH):
        self.max_length = max_length
        logger.info("ArithmeticEvaluator initialized", max_length=max_length)

    @log_execution_time
    def evaluate(self, expression: str) -> EvalResult:
        """
        Evaluate an arithmetic expression.

        Args:
            expression: Source text such as "2+2" or "(1.5 - 3) ** 2"

        Returns:
            EvalResult holding the numeric value

        Raises:
            InvalidExpressionError: If the text does not parse or uses unsupported syntax
            EvaluationError: If evaluation fails (division by zero, overflow, limits)
        """
        tree = self._parse(expression)

        try:
            value = self._eval(tree.body)
        except ExpressionError:
            raise
        except RecursionError as e:
            raise EvaluationError("RecursionError: expression is nested too deeply") from e
        except (ArithmeticError, ValueError, TypeError) as e:
            raise EvaluationError(
                f"{type(e).__name__}: {e}",
                details={"exception_type": type(e).__name__},
            ) from e

        logger.debug("Expression evaluated", expression=expression, dtype=type(value).__name__)

        return EvalResult(expression=expression, value=value)

    def _parse(self, expression: str) -> ast.Expression:
        """Parse expression text into an ast.Expression tree."""
        if len(expression) > self.max_length:
            raise InvalidExpressionError(
                f"ValueError: expression is longer than {self.max_length} characters",
                details={"length": len(expression)},
            )

        try:
            return ast.parse(expression.strip(), mode="eval")
        except SyntaxError as e:
            raise InvalidExpressionError(
                f"SyntaxError: {e.msg}",
                details={"offset": e.offset},
            ) from e
        except (ValueError, RecursionError, MemoryError) as e:
            raise InvalidExpressionError(f"{type(e).__name__}: {e}") from e

    def _eval(self, node: ast.AST) -> Number:
        if isinstance(node, ast.Constant):
            return self._literal(node.value)

        if isinstance(node, ast.UnaryOp):
            unary = UNARY_OPS.get(type(node.op))
            if unary is None:
                raise self._unsupported(node.op)
            return self._checked(unary(self._eval(node.operand)))

        if isinstance(node, ast.BinOp):
            binary = BINARY_OPS.get(type(node.op))
            if binary is None:
                raise self._unsupported(node.op)
            left = self._eval(node.left)
            right = self._eval(node.right)
            if isinstance(node.op, ast.Pow):
                self._check_power(left, right)
            return self._checked(binary(left, right))

        raise self._unsupported(node)

    def _literal(self, value: Any) -> Number:
        # bool is an int subclass and complex is numeric; neither is accepted
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise InvalidExpressionError(
                f"UnsupportedExpression: literal {value!r} is not a number"
            )
        return self._checked(value)

    def _check_power(self, base: Number, exponent: Number) -> None:
        if not isinstance(exponent, int):
            return
        if abs(exponent) > MAX_EXPONENT:
            raise EvaluationError(
                f"OverflowError: exponent {exponent} exceeds {MAX_EXPONENT}",
                details={"exponent": exponent},
            )
        if isinstance(base, int) and exponent > 0 and base.bit_length() * exponent > MAX_INT_BITS:
            raise EvaluationError(
                f"OverflowError: result would exceed {MAX_INT_BITS} bits"
            )

    def _checked(self, value: Any) -> Number:
        """Reject results that are not finite real numbers or are too large."""
        if isinstance(value, complex):
            raise EvaluationError("ValueError: result is not a real number")
        if isinstance(value, float) and not math.isfinite(value):
            raise EvaluationError("OverflowError: result is not finite")
        if isinstance(value, int) and value.bit_length() > MAX_INT_BITS:
            raise EvaluationError(f"OverflowError: result exceeds {MAX_INT_BITS} bits")
        return value

    @staticmethod
    def _unsupported(node: ast.AST) -> InvalidExpressionError:
        return InvalidExpressionError(
            f"UnsupportedExpression: {type(node).__name__} is not allowed",
            details={"node": type(node).__name__},
        )

    def list_operations(self) -> Dict[str, List[str]]:
        """List supported operators by arity."""
        return {
            "unary": sorted({OPERATOR_SYMBOLS[op] for op in UNARY_OPS}),
            "binary": sorted({OPERATOR_SYMBOLS[op] for op in BINARY_OPS}),
        }
