"""
Test the example selectors used by the demo.

Validates that every example builds without error and renders the
expected text, including the nested combine() example.
"""

from csb.examples import build_example_selectors, build_nested_example
from csb.facade import SelectorFacade
from csb.config import BuilderConfig


def test_example_selectors_render():
    examples = build_example_selectors()

    assert examples["id_and_classes"].stringify() == "#main.container.editable"
    assert examples["image_link_focus"].stringify() == 'a[href$=".png"]:focus'
    assert examples["full_compound"].stringify() == "p#intro.lead[lang|=en]:first-of-type::first-line"
    assert examples["pseudo_element_only"].stringify() == "::selection"
    assert examples["child"].stringify() == 'p:focus > a[href$=".png"]'


def test_nested_example_default_format():
    assert build_nested_example().stringify() == (
        "div#main.container.draggable + table#data ~ tr:nth-of-type(even)   td:nth-of-type(even)"
    )


def test_nested_example_normalized():
    facade = SelectorFacade(BuilderConfig(normalize_whitespace=True, strict_combinators=True))
    assert build_nested_example(facade).stringify() == (
        "div#main.container.draggable + table#data ~ tr:nth-of-type(even) td:nth-of-type(even)"
    )
