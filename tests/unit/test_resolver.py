"""Tests for dot-path value resolution.

Lookups at every depth use one fixed class (the root's class, or the class
given to resolve_with_type); these tests pin that behaviour down.
"""

from __future__ import annotations

from dataclasses import dataclass

import pytest
from hypothesis import given
from hypothesis import strategies as st

from objutils.errors import NullObjectError
from objutils.reflection import resolve_from, resolve_path, resolve_with_type

# ---------------------------------------------------------------------------
# Helper types
# ---------------------------------------------------------------------------


@dataclass
class _Node:
    """Self-similar node: every level declares the same fields."""

    a: object = None
    b: object = None
    c: object = None


@dataclass
class _Container:
    name: str
    image: str


@dataclass
class _PodSpec:
    container: _Container
    node_name: str = ""


@dataclass
class _Pod:
    spec: _PodSpec
    name: str = "pod"


@dataclass
class _Outer:
    inner: object
    name: str = "outer"


@dataclass
class _Inner:
    name: str = "inner"
    secret: str = "hidden"


class _Faulty:
    __slots__ = ()
    status: str

    @property
    def status(self) -> str:  # noqa: F811
        raise RuntimeError("status backend unavailable")


def _make_tree() -> _Node:
    """{a: {b: {c: "leaf"}}}"""
    return _Node(a=_Node(b=_Node(c="leaf")))


def _make_pod() -> _Pod:
    return _Pod(spec=_PodSpec(container=_Container(name="web", image="nginx:1.27"), node_name="node-1"))


# =====================================================================
# resolve_from
# =====================================================================


class TestResolveFrom:
    def test_resolves_leaf(self) -> None:
        assert resolve_from(_make_tree(), "a.b.c") == "leaf"

    def test_stops_at_first_unresolvable_segment(self) -> None:
        tree = _make_tree()
        assert resolve_from(tree, "a.x.c") is tree.a

    def test_stops_at_none_value(self) -> None:
        tree = _make_tree()
        assert resolve_from(tree, "a.c.b") is tree.a

    def test_empty_path_returns_root(self) -> None:
        tree = _make_tree()
        assert resolve_from(tree, "") is tree
        assert resolve_from(tree, None) is tree

    def test_segments_are_trimmed(self) -> None:
        assert resolve_from(_make_tree(), " a . b .c ") == "leaf"

    def test_empty_segments_are_skipped(self) -> None:
        assert resolve_from(_make_tree(), "a..b.c.") == "leaf"

    def test_none_root_raises(self) -> None:
        with pytest.raises(NullObjectError):
            resolve_from(None, "a.b")

    def test_none_root_raises_for_empty_path(self) -> None:
        with pytest.raises(NullObjectError):
            resolve_from(None, "")

    def test_unreadable_field_stops_at_current_object(self) -> None:
        faulty = _Faulty()
        assert resolve_from(faulty, "status") is faulty
        assert resolve_with_type(faulty, _Faulty, ["status", "detail"]) is faulty

    def test_falsy_values_are_resolved(self) -> None:
        assert resolve_from(_Node(a=0), "a") == 0
        assert resolve_from(_Node(a=""), "a") == ""

    @given(path=st.text(alphabet=st.sampled_from(". \t"), max_size=10))
    def test_blank_paths_return_root(self, path: str) -> None:
        tree = _make_tree()
        assert resolve_from(tree, path) is tree


# =====================================================================
# Fixed lookup class
# =====================================================================


class TestFixedLookupClass:
    def test_nested_field_not_declared_on_root_class_stops(self) -> None:
        pod = _make_pod()
        # _Pod declares spec but not container, so the walk stops at spec.
        assert resolve_from(pod, "spec.container.image") is pod.spec

    def test_nested_field_with_root_class_name_is_read(self) -> None:
        # "name" is declared on _Outer and is read from the _Inner instance.
        assert resolve_from(_Outer(inner=_Inner()), "inner.name") == "inner"

    def test_nested_field_only_on_inner_class_stops(self) -> None:
        outer = _Outer(inner=_Inner())
        assert resolve_from(outer, "inner.secret") is outer.inner

    def test_resolve_with_type_uses_given_class_at_every_level(self) -> None:
        pod = _make_pod()
        assert resolve_with_type(pod.spec, _PodSpec, ["container"]) is pod.spec.container
        # _PodSpec does not declare image, so the walk stops at the container.
        assert resolve_with_type(pod.spec, _PodSpec, ["container", "image"]) is pod.spec.container

    def test_resolve_with_type_class_not_matching_root(self) -> None:
        pod = _make_pod()
        assert resolve_with_type(pod, _Container, ["spec"]) is pod
        assert resolve_with_type(pod, _Container, ["image"]) is pod
        assert resolve_with_type(pod, _Container, ["name"]) == "pod"
        assert resolve_with_type(pod, _Pod, ["name"]) == "pod"


# =====================================================================
# resolve_path / resolve_with_type
# =====================================================================


class TestResolvePath:
    def test_resolves_list_path(self) -> None:
        assert resolve_path(_make_tree(), ["a", "b", "c"]) == "leaf"

    def test_does_not_mutate_path(self) -> None:
        path = ["a", "b", "c"]
        resolve_path(_make_tree(), path)
        assert path == ["a", "b", "c"]

    def test_accepts_tuples(self) -> None:
        assert resolve_path(_make_tree(), ("a", "b")) == _Node(c="leaf")

    def test_empty_list_returns_root(self) -> None:
        tree = _make_tree()
        assert resolve_path(tree, []) is tree

    def test_none_root_raises(self) -> None:
        with pytest.raises(NullObjectError):
            resolve_path(None, [])

    def test_resolve_with_type_none_root_raises(self) -> None:
        with pytest.raises(NullObjectError):
            resolve_with_type(None, _Node, ["a"])
