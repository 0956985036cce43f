#!/usr/bin/env python3
"""
Demo: Build CSS selectors with the fluent builder.

Prints every example selector, the nested combine() example in both
whitespace modes, and the errors raised by malformed chains.
"""

import logging

from csb import SelectorError, SelectorFacade, css_selector_builder
from csb.config import BuilderConfig
from csb.examples import build_example_selectors, build_nested_example
from csb.serialization import selector_to_yaml


def main():
    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    builder = css_selector_builder

    print("=" * 80)
    print("SELECTOR BUILDER DEMO")
    print("=" * 80)

    for name, selector in build_example_selectors().items():
        print(f"{name:20} {selector.stringify()}")

    print("\nNESTED COMBINE:")
    print("-" * 80)
    print(f"default    {build_nested_example().stringify()!r}")
    normalized = SelectorFacade(BuilderConfig(normalize_whitespace=True))
    print(f"normalized {build_nested_example(normalized).stringify()!r}")

    print("\nMALFORMED CHAINS:")
    print("-" * 80)
    attempts = [
        lambda: builder.element("div").element("span"),
        lambda: builder.attr("href").class_("link"),
        lambda: builder.pseudo_element("before").pseudo_element("after"),
    ]
    for attempt in attempts:
        try:
            attempt()
        except SelectorError as e:
            print(f"{type(e).__name__}: {e}")

    print("\nSERIALIZED (YAML):")
    print("-" * 80)
    print(selector_to_yaml(builder.element("a").class_("nav").pseudo_class("hover")))


if __name__ == "__main__":
    main()
