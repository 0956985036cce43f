"""
Tests for the CSB fragment system.

These tests verify:
    - Rank order of fragment kinds
    - Rendering affixes
    - Fragment immutability
    - Label lookup used by serialization
"""

import pytest
from csb.fragments import Fragment, FragmentKind, Combinator, REQUIRED_ORDER


class TestFragmentKind:
    """Test fragment kind metadata."""

    def test_ranks(self):
        assert [kind.rank for kind in FragmentKind] == [0, 1, 2, 3, 4, 5]

    def test_unique_kinds(self):
        unique = {kind for kind in FragmentKind if kind.unique}
        assert unique == {FragmentKind.ELEMENT, FragmentKind.ID, FragmentKind.PSEUDO_ELEMENT}

    def test_required_order_text(self):
        assert REQUIRED_ORDER == "element, id, class, attribute, pseudo-class, pseudo-element"

    @pytest.mark.parametrize("kind", list(FragmentKind))
    def test_label_roundtrip(self, kind):
        assert FragmentKind.from_label(kind.label) is kind

    def test_unknown_label(self):
        with pytest.raises(ValueError):
            FragmentKind.from_label("universal")


class TestFragment:
    """Test fragment value objects."""

    def test_render(self):
        assert Fragment(FragmentKind.ATTRIBUTE, "data-x").render() == "[data-x]"
        assert Fragment(FragmentKind.PSEUDO_ELEMENT, "before").render() == "::before"

    def test_rank(self):
        assert Fragment(FragmentKind.PSEUDO_CLASS, "hover").rank == 4

    def test_immutable(self):
        fragment = Fragment(FragmentKind.CLASS, "x")
        with pytest.raises(AttributeError):
            fragment.value = "y"

    def test_equality(self):
        assert Fragment(FragmentKind.ID, "a") == Fragment(FragmentKind.ID, "a")


def test_combinator_values():
    assert {c.value for c in Combinator} == {" ", ">", "+", "~", "||"}
