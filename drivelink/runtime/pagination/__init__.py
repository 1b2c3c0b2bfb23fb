"""Generic paginated listing layer.

Architecture:
    - definitions.py: PageResult, the per-page and per-listing outcome
    - paginator.py: Paginator, the sequential request/parse/continue loop
    - telemetry.py: Structured logging
"""

from __future__ import annotations

from .definitions import PageResult
from .paginator import Paginator

__all__ = [
    "PageResult",
    "Paginator",
]
