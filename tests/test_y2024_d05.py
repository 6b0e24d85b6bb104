import pytest

from advent.y2024.d05 import (
    check_rules,
    create_graph,
    parse_input,
    part_one,
    part_two,
    topological_sort,
)

EXAMPLE = """47|53
97|13
97|61
97|47
75|29
61|13
75|53
29|13
97|29
53|29
61|53
97|53
61|29
47|13
75|47
97|75
47|61
75|61
47|29
75|13
53|13

75,47,61,53,29
97,61,53,29,13
75,29,13
75,97,47,61,53
61,13,29
97,13,75,29,47
"""


def test_part_one_example():
    assert part_one(EXAMPLE) == 143


def test_part_two_example():
    assert part_two(EXAMPLE) == 123


def test_parse_input_reads_both_sections():
    updates, rules = parse_input(EXAMPLE)
    assert rules[0] == (47, 53)
    assert updates[0] == [75, 47, 61, 53, 29]
    assert len(updates) == 6


def test_check_rules_on_ordered_and_unordered():
    updates, rules = parse_input(EXAMPLE)
    assert check_rules(rules, updates[0])
    assert not check_rules(rules, updates[3])


def test_create_graph_ignores_absent_pages():
    graph = create_graph([(1, 2), (2, 3), (3, 4)], [1, 2, 3])
    assert graph == {1: [2], 2: [3], 3: []}


def test_sorted_updates_respect_all_rules():
    updates, rules = parse_input(EXAMPLE)
    for pages in updates:
        ordered = topological_sort(create_graph(rules, pages))
        assert sorted(ordered) == sorted(pages)
        assert check_rules(rules, ordered)


def test_topological_sort_orders_edges():
    graph = {3: [1], 1: [2], 2: []}
    order = topological_sort(graph)
    assert order.index(3) < order.index(1) < order.index(2)


def test_invalid_rule_raises():
    with pytest.raises(ValueError):
        parse_input("47-53\n\n47,53\n")