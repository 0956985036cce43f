"""
Example selectors for the demo and tests.

Covers every fragment kind, the common combinators and the nested combine()
example from the builder documentation.
"""
from typing import Dict

from csb.facade import SelectorFacade, css_selector_builder
from csb.fragments import Combinator
from csb.model import Selector


def build_nested_example(builder: SelectorFacade = css_selector_builder) -> Selector:
    # div#main.container.draggable + table#data ~ tr:nth-of-type(even)   td:nth-of-type(even)
    return builder.combine(
        builder.element("div").id("main").class_("container").class_("draggable"),
        Combinator.ADJACENT_SIBLING,
        builder.combine(
            builder.element("table").id("data"),
            Combinator.GENERAL_SIBLING,
            builder.combine(
                builder.element("tr").pseudo_class("nth-of-type(even)"),
                Combinator.DESCENDANT,
                builder.element("td").pseudo_class("nth-of-type(even)"),
            ),
        ),
    )


def build_example_selectors(builder: SelectorFacade = css_selector_builder) -> Dict[str, Selector]:
    examples: Dict[str, Selector] = {}

    examples["id_and_classes"] = builder.id("main").class_("container").class_("editable")
    examples["image_link_focus"] = builder.element("a").attr('href$=".png"').pseudo_class("focus")
    examples["full_compound"] = (
        builder.element("p")
        .id("intro")
        .class_("lead")
        .attribute("lang|=en")
        .pseudo_class("first-of-type")
        .pseudo_element("first-line")
    )
    examples["pseudo_element_only"] = builder.pseudo_element("selection")

    examples["child"] = builder.combine(
        builder.element("p").pseudo_class("focus"),
        Combinator.CHILD,
        builder.element("a").attr('href$=".png"'),
    )
    examples["nested"] = build_nested_example(builder)

    return examples
