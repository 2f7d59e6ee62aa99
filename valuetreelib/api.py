"""High-level API for ValueTreeLib.

This module provides simple, functional interfaces for common traversal
tasks. These functions wrap TraversalConfig and ExecutionPlan for the
cases where building them by hand would be noise.
"""

from dataclasses import fields
from typing import Any, Callable, Dict, Iterator, List, Optional, Tuple, Union

from .config import (
    DataRequirement,
    DepthConfig,
    FilterConfig,
    TraversalConfig,
    TraversalStrategy,
)
from .planning import ExecutionPlan
from .trees.base import Tree


def traverse_tree(
    tree: Tree,
    strategy: Union[TraversalStrategy, str] = TraversalStrategy.PRE_ORDER,
    max_depth: Optional[int] = None,
    min_depth: int = 0,
    include_filter: Optional[Callable[[Any], bool]] = None,
    exclude_filter: Optional[Callable[[Any], bool]] = None,
    on_error: Optional[Callable[[Any, Exception], None]] = None,
    **kwargs
) -> Iterator[Any]:
    """Simple interface for tree traversal.

    Args:
        tree: Tree to traverse
        strategy: Traversal strategy (pre_order, in_order, post_order, bfs, level)
        max_depth: Maximum depth to traverse (root = 0)
        min_depth: Minimum depth before yielding values
        include_filter: Predicate a value must satisfy to be yielded
        exclude_filter: Predicate that drops a value when it returns True
        on_error: Callback for errors raised by the filters; when given,
            failing values are skipped instead of aborting the traversal
        **kwargs: Additional TraversalConfig, DepthConfig or FilterConfig
            attributes (e.g. max_nodes, specific_depths, prune_on_exclude)

    Returns:
        Iterator of values that match the criteria

    Raises:
        TypeError: If a keyword names no configuration attribute

    Example:
        >>> tree = GeneralTree("ROOT")
        >>> tree.add("A")
        >>> list(traverse_tree(tree, strategy="bfs"))
        ['ROOT', 'A']
    """
    config = TraversalConfig(
        strategy=_parse_strategy(strategy),
        depth=DepthConfig(
            min_depth=min_depth,
            max_depth=max_depth
        ),
        filter=FilterConfig(
            include_filter=include_filter,
            exclude_filter=exclude_filter
        ),
        data_requirements=DataRequirement.VALUE,
        on_error=on_error,
        skip_errors=on_error is not None
    )

    _apply_options(config, kwargs)

    plan = ExecutionPlan(config, tree)
    return (value for value, _ in plan.execute())


def collect_tree_data(
    tree: Tree,
    data_requirement: DataRequirement = DataRequirement.VALUE,
    **kwargs
) -> Iterator[Tuple[Any, Any]]:
    """Traverse a tree and collect the requested data for each value.

    Args:
        tree: Tree to traverse
        data_requirement: What data to collect
        **kwargs: Additional traversal options (see traverse_tree)

    Returns:
        Iterator of (value, collected_data) tuples
    """
    config_kwargs = kwargs.copy()
    config_kwargs['data_requirement'] = data_requirement

    config = _build_config_from_kwargs(**config_kwargs)
    plan = ExecutionPlan(config, tree)

    return plan.execute()


def count_nodes(tree: Tree, **kwargs) -> int:
    """Count values in a tree that match criteria.

    Args:
        tree: Tree to traverse
        **kwargs: Traversal options (see traverse_tree)

    Returns:
        Number of values that match
    """
    count = 0
    for _ in traverse_tree(tree, **kwargs):
        count += 1
    return count


def find_values(
    tree: Tree,
    predicate: Callable[[Any], bool],
    **kwargs
) -> Iterator[Any]:
    """Find values that match a predicate.

    Args:
        tree: Tree to traverse
        predicate: Function that returns True for matching values
        **kwargs: Traversal options (see traverse_tree)

    Returns:
        Iterator of matching values in traversal order
    """
    kwargs['include_filter'] = predicate
    return traverse_tree(tree, **kwargs)


def get_tree_paths(tree: Tree, **kwargs) -> Iterator[List[Any]]:
    """Get the path of values from the root to each node.

    Example:
        >>> for path in get_tree_paths(tree, max_depth=2):
        ...     print(" -> ".join(map(str, path)))
    """
    return (path for _, path in collect_tree_data(tree, DataRequirement.PATH, **kwargs))


def get_leaf_values(tree: Tree, **kwargs) -> Iterator[Any]:
    """Get all values stored in leaves (nodes with no children)."""
    records = collect_tree_data(tree, DataRequirement.CHILDREN_COUNT, **kwargs)
    return (value for value, info in records if info['is_leaf'])


def get_tree_stats(tree: Tree, **kwargs) -> Dict[str, Any]:
    """Get statistics about a tree.

    Depths are counted in edges from the root (root = 0), so ``max_depth``
    is one less than ``tree.get_depth()`` for an unfiltered walk.

    Returns:
        Dictionary with tree statistics
    """
    stats = {
        'total_nodes': 0,
        'leaf_nodes': 0,
        'max_depth': 0,
        'depths': {}
    }

    for _, info in collect_tree_data(tree, DataRequirement.CHILDREN_COUNT, **kwargs):
        stats['total_nodes'] += 1

        if info['is_leaf']:
            stats['leaf_nodes'] += 1

        depth = info['depth']
        stats['max_depth'] = max(stats['max_depth'], depth)
        stats['depths'][depth] = stats['depths'].get(depth, 0) + 1

    stats['internal_nodes'] = stats['total_nodes'] - stats['leaf_nodes']
    stats['average_branching'] = (
        (stats['total_nodes'] - 1) / stats['internal_nodes']
        if stats['internal_nodes'] > 0 else 0
    )

    return stats


# Helper functions

def _parse_strategy(strategy: Union[TraversalStrategy, str]) -> TraversalStrategy:
    """Parse strategy from string or enum.

    Raises:
        ValueError: If the name is not recognized
    """
    if isinstance(strategy, TraversalStrategy):
        return strategy

    strategy_map = {
        'pre': TraversalStrategy.PRE_ORDER,
        'pre_order': TraversalStrategy.PRE_ORDER,
        'dfs': TraversalStrategy.PRE_ORDER,
        'dfs_pre': TraversalStrategy.PRE_ORDER,
        'in': TraversalStrategy.IN_ORDER,
        'in_order': TraversalStrategy.IN_ORDER,
        'post': TraversalStrategy.POST_ORDER,
        'post_order': TraversalStrategy.POST_ORDER,
        'dfs_post': TraversalStrategy.POST_ORDER,
        'bfs': TraversalStrategy.BREADTH_FIRST,
        'breadth_first': TraversalStrategy.BREADTH_FIRST,
        'level': TraversalStrategy.LEVEL_ORDER,
        'level_order': TraversalStrategy.LEVEL_ORDER,
    }

    strategy_lower = strategy.lower() if isinstance(strategy, str) else str(strategy)
    if strategy_lower in strategy_map:
        return strategy_map[strategy_lower]

    raise ValueError(f"Unknown traversal strategy: {strategy}")


def _build_config_from_kwargs(**kwargs) -> TraversalConfig:
    """Build TraversalConfig from keyword arguments."""
    config = TraversalConfig()

    if 'strategy' in kwargs:
        config.strategy = _parse_strategy(kwargs.pop('strategy'))

    if 'max_depth' in kwargs:
        config.depth.max_depth = kwargs.pop('max_depth')

    if 'min_depth' in kwargs:
        config.depth.min_depth = kwargs.pop('min_depth')

    if 'include_filter' in kwargs:
        config.filter.include_filter = kwargs.pop('include_filter')

    if 'exclude_filter' in kwargs:
        config.filter.exclude_filter = kwargs.pop('exclude_filter')

    if 'data_requirement' in kwargs:
        config.data_requirements = kwargs.pop('data_requirement')

    if 'on_error' in kwargs:
        config.on_error = kwargs.pop('on_error')
        config.skip_errors = True

    _apply_options(config, kwargs)

    return config


def _apply_options(config: TraversalConfig, options: Dict[str, Any]) -> None:
    """Set leftover keyword options on the config or its nested configs.

    Raises:
        TypeError: If an option is not a field of any of them
    """
    targets = (config, config.depth, config.filter)
    for key, value in options.items():
        for target in targets:
            if key in {f.name for f in fields(target)}:
                setattr(target, key, value)
                break
        else:
            raise TypeError(f"Unknown traversal option: {key!r}")
