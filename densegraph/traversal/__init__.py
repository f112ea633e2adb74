"""
Traversal module.

Provides a hook-driven graph walk and its fringe disciplines:
- Traversal: Generic fringe-driven traversal with visit/post-visit hooks
- FifoFringe / LifoFringe / PriorityFringe: Breadth-, depth-, best-first order
- breadth_first_traversal / depth_first_traversal / priority_traversal: Presets
"""

from densegraph.traversal.engine import (
    Traversal,
    breadth_first_traversal,
    depth_first_traversal,
    priority_traversal,
)
from densegraph.traversal.fringe import (
    FifoFringe,
    Fringe,
    LifoFringe,
    PriorityFringe,
    get_fringe,
)

__all__ = [
    "Traversal",
    "breadth_first_traversal",
    "depth_first_traversal",
    "priority_traversal",
    "Fringe",
    "FifoFringe",
    "LifoFringe",
    "PriorityFringe",
    "get_fringe",
]
