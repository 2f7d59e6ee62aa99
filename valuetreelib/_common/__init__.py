"""Common components shared across ValueTreeLib.

This internal package contains pure configuration code with no dependency
on the tree implementations. It should NOT be imported directly by users.

Important: This package must NEVER import from core or trees to avoid
circular dependencies.
"""

from .config import (
    TraversalConfig,
    TraversalStrategy,
    DataRequirement,
    FilterConfig,
    DepthConfig,
)

__all__ = [
    'TraversalConfig',
    'TraversalStrategy',
    'DataRequirement',
    'FilterConfig',
    'DepthConfig',
]
