"""
--------------------------------------------------------------------------------
<sboldesign project>
src/sboldesign/sbol3/src/graph.py

Cycle detection over index-based adjacency tables.

Depth-first walk from every node with an "on stack" marker; reaching a marked
node closes a cycle, reported as the stack slice from that node. Iterative so
deep hierarchies do not hit the recursion limit. Each back edge is reported
once; rotations of the same cycle are deduplicated.

Module Author(s): sboldesign contributors
--------------------------------------------------------------------------------
"""

from __future__ import annotations

from typing import Iterable, Iterator, Mapping

_WHITE, _GRAY, _BLACK = 0, 1, 2


def _rotation_key(cycle: list[int]) -> tuple[int, ...]:
    i = cycle.index(min(cycle))
    return tuple(cycle[i:] + cycle[:i])


def find_cycles(adjacency: Mapping[int, Iterable[int]], nodes: Iterable[int]) -> list[list[int]]:
    color: dict[int, int] = {}
    cycles: list[list[int]] = []
    seen: set[tuple[int, ...]] = set()

    for root in nodes:
        if color.get(root, _WHITE) != _WHITE:
            continue
        color[root] = _GRAY
        path = [root]
        position = {root: 0}
        stack: list[tuple[int, Iterator[int]]] = [(root, iter(adjacency.get(root, ())))]
        while stack:
            node, edges = stack[-1]
            descended = False
            for nxt in edges:
                state = color.get(nxt, _WHITE)
                if state == _GRAY:
                    cycle = path[position[nxt] :]
                    key = _rotation_key(cycle)
                    if key not in seen:
                        seen.add(key)
                        cycles.append(cycle)
                elif state == _WHITE:
                    color[nxt] = _GRAY
                    position[nxt] = len(path)
                    path.append(nxt)
                    stack.append((nxt, iter(adjacency.get(nxt, ()))))
                    descended = True
                    break
            if not descended:
                stack.pop()
                path.pop()
                del position[node]
                color[node] = _BLACK
    return cycles
