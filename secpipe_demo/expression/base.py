"""Result type for the expression evaluator."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Union

Number = Union[int, float]


@dataclass(frozen=True)
class EvalResult:
    """Result of evaluating one expression."""

    expression: str
    value: Number

    @property
    def dtype(self) -> str:
        return type(self.value).__name__

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the JSON body returned on success."""
        return {
            "ok": True,
            "result": self.value,
        }
