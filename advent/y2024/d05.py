"""Ordering safety manual pages by precedence rules."""

from __future__ import annotations

import re

_UNSIGNED = re.compile(r"\+?[0-9]+")

Rule = tuple[int, int]
Graph = dict[int, list[int]]


def _parse_number(text: str) -> int:
    if not _UNSIGNED.fullmatch(text):
        raise ValueError(f"invalid page number {text!r}")
    return int(text)


def parse_input(text: str) -> tuple[list[list[int]], list[Rule]]:
    """Read the updates and the ``before|after`` rules."""
    updates: list[list[int]] = []
    rules: list[Rule] = []
    in_updates = False
    for line in text.splitlines():
        if not line:
            in_updates = True
        elif in_updates:
            updates.append([_parse_number(page) for page in line.split(",")])
        else:
            parts = line.split("|")
            if len(parts) < 2:
                raise ValueError(f"invalid rule {line!r}")
            rules.append((_parse_number(parts[0]), _parse_number(parts[1])))
    return updates, rules


def create_graph(rules: list[Rule], pages: list[int]) -> Graph:
    """Adjacency lists of the rules that concern only the given pages."""
    present = set(pages)
    graph: Graph = {}
    for node, child in rules:
        if node in present and child in present:
            graph.setdefault(node, []).append(child)
    for page in pages:
        graph.setdefault(page, [])
    return graph


def check_rules(rules: list[Rule], pages: list[int]) -> bool:
    """True when every applicable rule is respected by the page order."""
    positions = {page: idx for idx, page in enumerate(pages)}
    return all(
        positions[before] < positions[after]
        for before, after in rules
        if before in positions and after in positions
    )


def topological_sort(graph: Graph) -> list[int]:
    """Order the nodes so that every node comes before its children."""
    order: list[int] = []
    visited: set[int] = set()
    for root in graph:
        if root in visited:
            continue
        visited.add(root)
        stack = [(root, iter(graph[root]))]
        while stack:
            node, children = stack[-1]
            for child in children:
                if child not in visited:
                    visited.add(child)
                    stack.append((child, iter(graph[child])))
                    break
            else:
                stack.pop()
                order.append(node)
    order.reverse()
    return order


def _middle(pages: list[int]) -> int:
    return pages[len(pages) // 2]


def part_one(text: str) -> int:
    """Sum of the middle pages of correctly ordered updates."""
    updates, rules = parse_input(text)
    return sum(_middle(pages) for pages in updates if check_rules(rules, pages))


def part_two(text: str) -> int:
    """Sum of the middle pages of wrongly ordered updates, once reordered."""
    updates, rules = parse_input(text)
    return sum(
        _middle(topological_sort(create_graph(rules, pages)))
        for pages in updates
        if not check_rules(rules, pages)
    )