"""Property-based tests for dependency resolution.

Uses Hypothesis to generate arbitrary (possibly cyclic) package graphs and
checks the flattened set against a plain reachability computation.
"""

from __future__ import annotations

import hypothesis.strategies as st
from conftest import graph_client
from hypothesis import given, settings

from aptos_mock.constants import FRAMEWORK_ADDRESSES
from aptos_mock.resolver import resolve_dependencies
from aptos_mock.schema import PackageIdentity

FRAMEWORK_EDGES = [("0x1", "AptosFramework"), ("0x3", "AptosToken"), ("0x4", "AptosTokenObjects")]


def _node(i: int) -> tuple[str, str]:
    # Two packages per account so same-account edges are exercised too.
    return (f"0x{10 + i // 2:x}", f"Pkg{i}")


@st.composite
def package_graph(draw):
    n = draw(st.integers(min_value=1, max_value=12))
    edges = {}
    for i in range(n):
        targets = draw(st.lists(st.integers(min_value=0, max_value=n - 1), max_size=5))
        framework = draw(st.lists(st.sampled_from(FRAMEWORK_EDGES), max_size=2))
        edges[_node(i)] = [_node(t) for t in targets] + framework
    return edges


def _reachable(edges, root):
    seen = set()
    stack = [root]
    while stack:
        node = stack.pop()
        for dep in edges.get(node, []):
            if dep[0] in FRAMEWORK_ADDRESSES or dep == root or dep in seen:
                continue
            seen.add(dep)
            stack.append(dep)
    return seen


@settings(max_examples=150, deadline=None)
@given(package_graph())
def test_resolve_matches_reachable_set(edges) -> None:
    """Invariant: result == distinct non-framework identities reachable from the root."""
    root = _node(0)
    deps = resolve_dependencies(graph_client(edges), *root)

    expected = {PackageIdentity(a, p) for a, p in _reachable(edges, root)}
    assert set(deps) == expected
    assert len(deps) == len(expected)


@settings(max_examples=150, deadline=None)
@given(package_graph())
def test_resolve_fetches_each_package_at_most_once(edges) -> None:
    """Invariant: one resource fetch for the root plus one per resolved dependency."""
    client = graph_client(edges)
    deps = resolve_dependencies(client, *_node(0))
    assert len(client.resource_calls) == 1 + len(deps)


@settings(max_examples=100, deadline=None)
@given(package_graph())
def test_resolve_keys_match_values(edges) -> None:
    deps = resolve_dependencies(graph_client(edges), *_node(0))
    for identity, dep in deps.items():
        assert identity == dep.identity()
        assert dep.account not in FRAMEWORK_ADDRESSES
