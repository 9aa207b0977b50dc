from __future__ import annotations

import operator
from enum import Enum
from typing import Any, Callable, Dict

from playground.core.capabilities import shout


class Comparison(str, Enum):
    EQ = "eq"
    NE = "ne"
    GT = "gt"
    GE = "ge"
    LT = "lt"
    LE = "le"


class Transform(str, Enum):
    UPCASE = "upcase"
    DOUBLE = "double"
    NEGATE = "negate"
    TO_STR = "to_str"


_COMPARISONS: Dict[Comparison, Callable[[Any, Any], bool]] = {
    Comparison.EQ: operator.eq,
    Comparison.NE: operator.ne,
    Comparison.GT: operator.gt,
    Comparison.GE: operator.ge,
    Comparison.LT: operator.lt,
    Comparison.LE: operator.le,
}

_TRANSFORMS: Dict[Transform, Callable[[Any], Any]] = {
    Transform.UPCASE: shout,
    Transform.DOUBLE: lambda x: x * 2,
    Transform.NEGATE: operator.neg,
    Transform.TO_STR: str,
}


def predicate(op: Comparison, value: Any) -> Callable[[Any], bool]:
    """Build `lambda x: x <op> value` from a closed set of comparisons."""
    cmp = _COMPARISONS[Comparison(op)]
    return lambda x: cmp(x, value)


def transform(kind: Transform) -> Callable[[Any], Any]:
    return _TRANSFORMS[Transform(kind)]
