"""Selector builder error types."""

from __future__ import annotations

from csb.fragments import FragmentKind, REQUIRED_ORDER


class SelectorError(Exception):
    """Base class for malformed selector construction."""


class DuplicateFragmentError(SelectorError):
    """Raised when element, id or pseudo-element is added a second time."""

    def __init__(self, kind: FragmentKind):
        self.kind = kind
        super().__init__(
            "Element, id and pseudo-element should not occur more then one time inside the selector"
        )


class OutOfOrderError(SelectorError):
    """Raised when a fragment ranks below the fragment added before it."""

    def __init__(self, kind: FragmentKind, previous: FragmentKind):
        self.kind = kind
        self.previous = previous
        super().__init__(
            f"Selector parts should be arranged in the following order: {REQUIRED_ORDER}"
        )


class EmptyFragmentError(SelectorError, ValueError):
    """Raised when a fragment value is empty or not a string."""

    def __init__(self, kind: FragmentKind, value: object):
        self.kind = kind
        self.value = value
        super().__init__(f"{kind.label} value must be a non-empty string, got {value!r}")


class CompositeSelectorError(SelectorError):
    """Raised when a fragment is added to a combined selector."""


class InvalidCombinatorError(SelectorError, ValueError):
    """Raised in strict mode for combinator text outside the known set."""

    def __init__(self, combinator: str):
        self.combinator = combinator
        super().__init__(f"Unknown combinator: {combinator!r}")
