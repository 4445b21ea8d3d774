"""
structclone: shallow and deep copy semantics for nested containers.

A shallow copy duplicates only the top-level container; nested
containers remain shared with the source. A deep copy duplicates every
reachable container, so no instance is shared between source and result.

Entry points live in structclone.cloner:
    shallow_copy(source)
    deep_copy(source, strategy, *, limits=None)
"""

from structclone.cloner import deep_copy, shallow_copy
from structclone.errors import CloneError, CloneLimitExceeded, SharedReferenceWarning, UnsupportedValueKind
from structclone.options import CloneLimits, Strategy

__version__ = "0.1.0"

__all__ = [
    "CloneError",
    "CloneLimitExceeded",
    "CloneLimits",
    "SharedReferenceWarning",
    "Strategy",
    "UnsupportedValueKind",
    "deep_copy",
    "shallow_copy",
]
