"""
Core Selector Model Objects

Defines the two kinds of selector the builder produces:
    - SelectorBuilder (compound selector, built fragment by fragment)
    - CompositeSelector (selectors joined by a combinator)

ARCHITECTURAL RULE:
    Every fragment-adding call is validated immediately.
    A malformed chain fails at the call that breaks it, never at stringify().
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import List, NoReturn, Optional, Tuple

from csb.errors import (
    CompositeSelectorError,
    DuplicateFragmentError,
    EmptyFragmentError,
    OutOfOrderError,
)
from csb.fragments import Fragment, FragmentKind

logger = logging.getLogger(__name__)


class Selector(ABC):
    """
    Base class for anything that renders to selector text.

    combine() only relies on stringify(), so any object exposing it can be
    combined; this base exists for isinstance checks and str() support.
    """

    @abstractmethod
    def stringify(self) -> str:
        ...

    def __str__(self) -> str:
        return self.stringify()


class SelectorBuilder(Selector):
    """
    Accumulates one compound selector.

    Example:
        SelectorBuilder().id("main").class_("container").class_("editable")

    Renders as:
        #main.container.editable

    Rules enforced on every call:
        - element, id and pseudo-element occur at most once
          (DuplicateFragmentError)
        - fragments appear in rank order
          element, id, class, attribute, pseudo-class, pseudo-element
          (OutOfOrderError)

    Validation runs before the fragment is recorded, so a failed call
    leaves the builder as it was. Callers should still discard a builder
    once it has raised.

    IMPORTANT:
        Builders are mutable and owned by the call chain that created them.
        stringify() does not mutate and may be called from anywhere.
    """

    def __init__(self) -> None:
        self._fragments: List[Fragment] = []

    def element(self, value: str) -> SelectorBuilder:
        return self._add(FragmentKind.ELEMENT, value)

    def id(self, value: str) -> SelectorBuilder:
        return self._add(FragmentKind.ID, value)

    def class_(self, value: str) -> SelectorBuilder:
        return self._add(FragmentKind.CLASS, value)

    def attribute(self, value: str) -> SelectorBuilder:
        return self._add(FragmentKind.ATTRIBUTE, value)

    attr = attribute

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return self._add(FragmentKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        return self._add(FragmentKind.PSEUDO_ELEMENT, value)

    def add(self, fragment: Fragment) -> SelectorBuilder:
        """Add a prebuilt fragment, with the same checks as the named methods."""
        return self._add(fragment.kind, fragment.value)

    def stringify(self) -> str:
        return "".join(fragment.render() for fragment in self._fragments)

    @property
    def fragments(self) -> Tuple[Fragment, ...]:
        return tuple(self._fragments)

    @property
    def ranks(self) -> List[int]:
        """Rank of every fragment, in the order added."""
        return [fragment.rank for fragment in self._fragments]

    @property
    def has_element(self) -> bool:
        return self._has(FragmentKind.ELEMENT)

    @property
    def has_id(self) -> bool:
        return self._has(FragmentKind.ID)

    @property
    def has_pseudo_element(self) -> bool:
        return self._has(FragmentKind.PSEUDO_ELEMENT)

    def _has(self, kind: FragmentKind) -> bool:
        return any(fragment.kind is kind for fragment in self._fragments)

    def _last_kind(self) -> Optional[FragmentKind]:
        if not self._fragments:
            return None
        return self._fragments[-1].kind

    def _add(self, kind: FragmentKind, value: str) -> SelectorBuilder:
        if not isinstance(value, str) or not value:
            raise EmptyFragmentError(kind, value)

        if kind.unique and self._has(kind):
            logger.debug("Rejected duplicate %s %r after %r", kind.label, value, self.stringify())
            raise DuplicateFragmentError(kind)

        # The rank sequence was non-decreasing before this call, so comparing
        # against the last fragment is enough.
        previous = self._last_kind()
        if previous is not None and kind.rank < previous.rank:
            logger.debug(
                "Rejected %s %r after %s in %r", kind.label, value, previous.label, self.stringify()
            )
            raise OutOfOrderError(kind, previous)

        self._fragments.append(Fragment(kind, value))
        return self

    def __repr__(self) -> str:
        return f"SelectorBuilder({self.stringify()!r})"


class CompositeSelector(Selector):
    """
    Two selectors joined by a combinator, already rendered to text.

    Example:
        CompositeSelector("p:focus > a[href$=\\".png\\"]")

    A composite selector carries no fragments, so ordering and uniqueness
    rules do not apply to it. Adding fragments raises CompositeSelectorError;
    build the compound parts first, then combine them.
    """

    def __init__(self, text: str) -> None:
        self._text = text

    def stringify(self) -> str:
        return self._text

    def element(self, value: str) -> NoReturn:
        raise self._reject(FragmentKind.ELEMENT)

    def id(self, value: str) -> NoReturn:
        raise self._reject(FragmentKind.ID)

    def class_(self, value: str) -> NoReturn:
        raise self._reject(FragmentKind.CLASS)

    def attribute(self, value: str) -> NoReturn:
        raise self._reject(FragmentKind.ATTRIBUTE)

    attr = attribute

    def pseudo_class(self, value: str) -> NoReturn:
        raise self._reject(FragmentKind.PSEUDO_CLASS)

    def pseudo_element(self, value: str) -> NoReturn:
        raise self._reject(FragmentKind.PSEUDO_ELEMENT)

    def _reject(self, kind: FragmentKind) -> CompositeSelectorError:
        return CompositeSelectorError(
            f"Cannot add {kind.label} to combined selector {self._text!r}"
        )

    def __repr__(self) -> str:
        return f"CompositeSelector({self._text!r})"
