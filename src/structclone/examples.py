"""
Example values for demonstrating copy semantics.

Builds the structures used throughout the documentation: a matrix of
nested rows, a list with one nested list, shared rows, self-referencing
containers and a record with mixed value kinds.
"""
import datetime
from typing import Any, Dict, List


def build_matrix(rows: int = 3, cols: int = 3) -> List[List[int]]:
    """[[1, 2, 3], [4, 5, 6], [7, 8, 9]] for the default size."""
    return [[r * cols + c + 1 for c in range(cols)] for r in range(rows)]


def build_nested_list() -> List[Any]:
    """[1, 2, 3, 4, [5, 6, 7]]"""
    return [1, 2, 3, 4, [5, 6, 7]]


def build_shared_rows(count: int = 2) -> List[List[int]]:
    """The same row object referenced `count` times."""
    row = [0, 0, 0]
    return [row] * count


def build_self_referencing_list() -> List[Any]:
    """A list that contains itself: [1, 2, <itself>]"""
    items: List[Any] = [1, 2]
    items.append(items)
    return items


def build_mutual_cycle() -> Dict[str, Any]:
    """Two dicts referencing each other through their "peer" keys."""
    left: Dict[str, Any] = {"name": "left"}
    right: Dict[str, Any] = {"name": "right", "peer": left}
    left["peer"] = right
    return {"left": left, "right": right}


def build_deep_chain(depth: int) -> List[Any]:
    """[[[...[0]...]]] nested `depth` levels below the root list."""
    chain: List[Any] = [0]
    for _ in range(depth):
        chain = [chain]
    return chain


def build_profile(include_callable: bool = False) -> Dict[str, Any]:
    """
    A record mixing JSON-safe and non-JSON kinds.

    Contains a date, a set and bytes, none of which JSON can express.
    With include_callable=True it also carries a live function.
    """
    profile: Dict[str, Any] = {
        "name": "Ada",
        "tags": ["admin", "ops"],
        "scores": {"math": [90, 95], "art": [70]},
        "joined": datetime.date(2020, 1, 15),
        "roles": {"reader", "writer"},
        "avatar": b"\x89PNG",
    }
    if include_callable:
        profile["greet"] = lambda: f"Hello, {profile['name']}"
    return profile
