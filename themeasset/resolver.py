# themeasset/resolver.py
"""
Dependency ordering for an asset group.

Resolution works in passes over a worklist of pending assets:
1. An asset with no remaining dependencies is emitted
2. Dependencies that were never registered are dropped (soft dependencies)
3. Dependencies already emitted are dropped
4. Self and mutual references raise immediately

A pass that makes no progress means the pending assets contain a longer
cycle, which is located and raised instead of looping forever.
"""

import logging
from typing import Dict, List, Mapping, Optional, Sequence

from .asset import AssetEntry
from .errors import CircularDependencyError, SelfDependencyError

logger = logging.getLogger(__name__)


def resolve_group(entries: Mapping[str, AssetEntry]) -> List[str]:
    """
    Return asset names so that every asset follows its dependencies.

    Ties are broken by insertion order of ``entries``.

    Args:
        entries: name -> AssetEntry for one group (not modified)

    Returns:
        Names in emission order

    Raises:
        SelfDependencyError: An asset depends on itself
        CircularDependencyError: Assets depend on each other
    """
    original = dict(entries)
    pending: Dict[str, List[str]] = {
        name: list(entry.dependencies) for name, entry in original.items()
    }
    placed: Dict[str, None] = {}

    while pending:
        progressed = False

        for name in list(pending):
            remaining = pending[name]

            if not remaining:
                placed[name] = None
                del pending[name]
                progressed = True
                continue

            for dependency in list(remaining):
                if dependency not in original:
                    logger.debug(f"Asset [{name}] ignores missing dependency [{dependency}]")
                    remaining.remove(dependency)
                    progressed = True
                elif dependency == name:
                    raise SelfDependencyError(name)
                elif dependency in pending and name in pending[dependency]:
                    raise CircularDependencyError(name, dependency)
                elif dependency in placed:
                    remaining.remove(dependency)
                    progressed = True

        if not progressed:
            cycle = find_cycle(pending)
            if cycle is None:
                # Unreachable when every pending dependency is itself pending
                names = list(pending)
                raise CircularDependencyError(names[0], names[-1])
            raise CircularDependencyError(cycle[0], cycle[1], cycle)

    return list(placed)


def find_cycle(graph: Mapping[str, Sequence[str]]) -> Optional[List[str]]:
    """
    Find one cycle in a name -> dependencies graph.

    Returns the cycle path with the first name repeated at the end,
    or None if the graph is acyclic.
    """
    done = set()

    for start in graph:
        if start in done:
            continue

        # Explicit stack: long dependency chains must not hit the recursion limit
        path = [start]
        on_path = {start}
        stack = [iter(graph[start])]

        while stack:
            for dependency in stack[-1]:
                if dependency not in graph or dependency in done:
                    continue
                if dependency in on_path:
                    return path[path.index(dependency):] + [dependency]
                path.append(dependency)
                on_path.add(dependency)
                stack.append(iter(graph[dependency]))
                break
            else:
                name = path.pop()
                on_path.discard(name)
                done.add(name)
                stack.pop()

    return None
