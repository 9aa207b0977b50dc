from .ops import any_match, collect, delete_if, dup_delete_if, map_items, reject, reject_in_place
from .operators import Comparison, Transform, predicate, transform

__all__ = [
    "any_match",
    "collect",
    "delete_if",
    "dup_delete_if",
    "map_items",
    "reject",
    "reject_in_place",
    "Comparison",
    "Transform",
    "predicate",
    "transform",
]
