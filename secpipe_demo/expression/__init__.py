"""Expression evaluator behind the /vuln-eval route.

Only arithmetic over numeric literals is supported; see
secpipe_demo.expression.evaluator for the accepted grammar.
"""

from typing import Optional

from secpipe_demo.expression.base import EvalResult
from secpipe_demo.expression.evaluator import ArithmeticEvaluator

# Module-level singleton for convenience
_evaluator: Optional[ArithmeticEvaluator] = None


def get_evaluator() -> ArithmeticEvaluator:
    """Get or create the singleton ArithmeticEvaluator instance."""
    global _evaluator
    if _evaluator is None:
        _evaluator = ArithmeticEvaluator()
    return _evaluator


__all__ = [
    "EvalResult",
    "ArithmeticEvaluator",
    "get_evaluator",
]
