"""
Selector builder facade.

Stateless entry points: every fragment method starts a new SelectorBuilder,
and combine() joins two finished selectors into a CompositeSelector.

Example:
    builder = css_selector_builder

    builder.id("main").class_("container").class_("editable").stringify()
        => '#main.container.editable'

    builder.combine(
        builder.element("p").pseudo_class("focus"),
        ">",
        builder.element("a").attr('href$=".png"'),
    ).stringify()
        => 'p:focus > a[href$=".png"]'
"""

from __future__ import annotations

import logging
from typing import Protocol, Union

from csb.config import BuilderConfig
from csb.errors import InvalidCombinatorError
from csb.fragments import Combinator
from csb.model import CompositeSelector, SelectorBuilder

logger = logging.getLogger(__name__)

_KNOWN_COMBINATORS = {c.value for c in Combinator}


class SupportsStringify(Protocol):
    def stringify(self) -> str: ...


class SelectorFacade:
    """Factory for selector builders. Holds only its immutable config."""

    def __init__(self, config: BuilderConfig | None = None) -> None:
        self.config = config or BuilderConfig()

    def element(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().element(value)

    def id(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().id(value)

    def class_(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().class_(value)

    def attribute(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().attribute(value)

    attr = attribute

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().pseudo_class(value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        return SelectorBuilder().pseudo_element(value)

    def combine(
        self,
        left: SupportsStringify,
        combinator: Union[Combinator, str],
        right: SupportsStringify,
    ) -> CompositeSelector:
        """
        Join two selectors with a combinator.

        The combinator is padded with one space on each side. With the
        default config a descendant combinator (" ") therefore renders as
        three spaces, matching the established output format; set
        normalize_whitespace to collapse it to one.
        """
        text = combinator.value if isinstance(combinator, Combinator) else combinator
        if self.config.strict_combinators and text not in _KNOWN_COMBINATORS:
            raise InvalidCombinatorError(text)

        if self.config.normalize_whitespace:
            text = text.strip()
            joined = f" {text} " if text else " "
        else:
            joined = f" {text} "

        result = CompositeSelector(f"{left.stringify()}{joined}{right.stringify()}")
        logger.debug("Combined selector %r", result.stringify())
        return result


css_selector_builder = SelectorFacade()
