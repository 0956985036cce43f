"""
Fragment System for CSB

A compound selector is an ordered list of fragments, never a raw string.
Each fragment has a kind and an opaque text value; the kind decides how the
value is rendered and where it may appear.

    element#id.class[attr]:pseudoClass::pseudoElement
              \\----/\\----/\\----------/
              Can be several occurrences

ARCHITECTURAL RULE:
    Fragments are structure only.
    Ordering and uniqueness rules are enforced by the builder (csb.model).
"""

from dataclasses import dataclass
from enum import Enum


class FragmentKind(Enum):
    """
    The six kinds of compound selector fragments.

    The enum value is the rank: a compound selector must list its
    fragments in non-decreasing rank order.

        element(0) < id(1) < class(2) < attribute(3)
            < pseudo-class(4) < pseudo-element(5)
    """

    ELEMENT = 0
    ID = 1
    CLASS = 2
    ATTRIBUTE = 3
    PSEUDO_CLASS = 4
    PSEUDO_ELEMENT = 5

    @property
    def rank(self) -> int:
        return self.value

    @property
    def label(self) -> str:
        """Human-readable name used in error messages and serialized data."""
        return _LABELS[self]

    @property
    def unique(self) -> bool:
        """True for kinds allowed at most once per compound selector."""
        return self in (FragmentKind.ELEMENT, FragmentKind.ID, FragmentKind.PSEUDO_ELEMENT)

    def render(self, value: str) -> str:
        prefix, suffix = _AFFIXES[self]
        return f"{prefix}{value}{suffix}"

    @classmethod
    def from_label(cls, label: str) -> "FragmentKind":
        for kind, name in _LABELS.items():
            if name == label:
                return kind
        raise ValueError(f"Unknown fragment kind: {label!r}")


_LABELS = {
    FragmentKind.ELEMENT: "element",
    FragmentKind.ID: "id",
    FragmentKind.CLASS: "class",
    FragmentKind.ATTRIBUTE: "attribute",
    FragmentKind.PSEUDO_CLASS: "pseudo-class",
    FragmentKind.PSEUDO_ELEMENT: "pseudo-element",
}

_AFFIXES = {
    FragmentKind.ELEMENT: ("", ""),
    FragmentKind.ID: ("#", ""),
    FragmentKind.CLASS: (".", ""),
    FragmentKind.ATTRIBUTE: ("[", "]"),
    FragmentKind.PSEUDO_CLASS: (":", ""),
    FragmentKind.PSEUDO_ELEMENT: ("::", ""),
}

REQUIRED_ORDER = ", ".join(_LABELS[kind] for kind in FragmentKind)


@dataclass(frozen=True)
class Fragment:
    """
    A single piece of a compound selector.

    Examples:
        Fragment(FragmentKind.ELEMENT, "a")               -> a
        Fragment(FragmentKind.ATTRIBUTE, 'href$=".png"')  -> [href$=".png"]
        Fragment(FragmentKind.PSEUDO_CLASS, "focus")      -> :focus

    IMPORTANT:
        The value is opaque text. Attribute expressions and pseudo-class
        arguments are not parsed or validated.
    """

    kind: FragmentKind
    value: str

    @property
    def rank(self) -> int:
        return self.kind.rank

    def render(self) -> str:
        return self.kind.render(self.value)


class Combinator(Enum):
    """
    Combinators joining two selectors into a composite selector.

    combine() accepts any text; these members are what strict mode allows.
    """

    DESCENDANT = " "
    CHILD = ">"
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"
    COLUMN = "||"
