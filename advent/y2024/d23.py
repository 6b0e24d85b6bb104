"""Finding groups of interconnected computers in a LAN."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import combinations

Graph = dict[str, set[str]]

_HISTORIAN_PREFIX = "t"
_GROUP_SIZE = 3


def parse_input(text: str) -> Graph:
    """Read ``a-b`` links into symmetric adjacency sets."""
    graph: Graph = {}
    for line in text.splitlines():
        parts = line.split("-")
        if len(parts) < 2:
            raise ValueError(f"invalid link {line!r}")
        first, second = parts[0], parts[1]
        graph.setdefault(first, set()).add(second)
        graph.setdefault(second, set()).add(first)
    return graph


def bron_kerbosch(
    r: Iterable[str], p: Iterable[str], x: Iterable[str], graph: Graph
) -> set[frozenset[str]]:
    """Every maximal clique extending ``r`` with nodes of ``p`` and none of ``x``."""
    r = frozenset(r)
    candidates = sorted(p)
    excluded = set(x)
    cliques: set[frozenset[str]] = set()
    if not candidates and not excluded:
        cliques.add(r)
    for idx, node in enumerate(candidates):
        adjacent = graph.get(node, set())
        remaining = [n for n in candidates[idx + 1:] if n in adjacent]
        cliques |= bron_kerbosch(
            r | {node}, remaining, [n for n in excluded if n in adjacent], graph
        )
        excluded.add(node)
    return cliques


def _cliques(text: str) -> set[frozenset[str]]:
    graph = parse_input(text)
    return bron_kerbosch((), graph.keys(), (), graph)


def part_one(text: str) -> int:
    """Number of three-computer groups with a computer whose name starts with t."""
    groups = {
        frozenset(group)
        for clique in _cliques(text)
        for group in combinations(sorted(clique), _GROUP_SIZE)
        if any(name.startswith(_HISTORIAN_PREFIX) for name in group)
    }
    return len(groups)


def part_two(text: str) -> int:
    """Size of the largest group of interconnected computers."""
    return max((len(clique) for clique in _cliques(text)), default=0)