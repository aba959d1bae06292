"""Tests for catalog.requirements: declaration and merging."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from colocale.catalog.requirements import (
    Requirement,
    define_requirement,
    iter_requirements,
    merge_requirements,
)
from tests.strategies import key_names, namespace_names


class TestRequirement:
    def test_keys_normalized_to_tuple(self) -> None:
        req = Requirement("common", ["submit", "cancel"])
        assert req.keys == ("submit", "cancel")

    def test_immutable(self) -> None:
        req = Requirement("common", ("submit",))
        with pytest.raises(AttributeError):
            req.namespace = "other"  # type: ignore[misc]

    def test_hashable_and_equal(self) -> None:
        assert Requirement("a", ["x"]) == Requirement("a", ("x",))
        assert len({Requirement("a", ["x"]), Requirement("a", ("x",))}) == 1

    def test_contains(self) -> None:
        req = Requirement("common", ["submit"])
        assert "submit" in req
        assert "cancel" not in req

    def test_empty_namespace_rejected(self) -> None:
        with pytest.raises(ValueError, match="namespace"):
            Requirement("", ["x"])

    def test_bare_string_keys_rejected(self) -> None:
        with pytest.raises(TypeError, match="sequence of strings"):
            Requirement("common", "submit")  # type: ignore[arg-type]

    def test_non_string_key_rejected(self) -> None:
        with pytest.raises(TypeError):
            Requirement("common", ["submit", 3])  # type: ignore[list-item]

    def test_empty_keys_allowed(self) -> None:
        assert Requirement("common", []).keys == ()

    def test_define_requirement(self) -> None:
        req = define_requirement("user", iter(["profile.name", "profile.email"]))
        assert req == Requirement("user", ("profile.name", "profile.email"))


class TestMergeRequirements:
    def test_flattens_nested_groups_in_order(self) -> None:
        a = Requirement("a", ["1"])
        b = Requirement("b", ["2"])
        c = Requirement("c", ["3"])
        assert merge_requirements(a, [b, [c]]) == [a, b, c]

    def test_no_deduplication(self) -> None:
        a = Requirement("common", ["submit"])
        assert merge_requirements(a, a, [a]) == [a, a, a]

    def test_empty(self) -> None:
        assert merge_requirements() == []
        assert merge_requirements([]) == []

    def test_string_rejected(self) -> None:
        with pytest.raises(TypeError):
            list(iter_requirements("common"))  # type: ignore[arg-type]

    @given(
        st.lists(
            st.builds(Requirement, namespace_names, st.lists(key_names, max_size=3)),
            max_size=6,
        )
    )
    def test_merge_preserves_length_and_order(self, reqs: list[Requirement]) -> None:
        """PROPERTY: merging a flat list is the identity (no dedup, no reordering)."""
        assert merge_requirements(*reqs) == reqs
        assert merge_requirements(reqs) == reqs
