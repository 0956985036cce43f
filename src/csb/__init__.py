"""
CSS Selector Builder (CSB) Package

Fluent construction of CSS compound and composite selectors:

    element#id.class[attr]:pseudoClass::pseudoElement

Compound selectors are validated as they are built (fragment order,
single element/id/pseudo-element). Composite selectors join finished
selectors with a combinator.

This package does NOT parse selector text or match selectors against
documents. It only builds and renders them.
"""

from csb.errors import (
    CompositeSelectorError,
    DuplicateFragmentError,
    EmptyFragmentError,
    InvalidCombinatorError,
    OutOfOrderError,
    SelectorError,
)
from csb.facade import SelectorFacade, css_selector_builder
from csb.fragments import Combinator, Fragment, FragmentKind
from csb.model import CompositeSelector, Selector, SelectorBuilder

__version__ = "0.1.0"

__all__ = [
    "Combinator",
    "CompositeSelector",
    "CompositeSelectorError",
    "DuplicateFragmentError",
    "EmptyFragmentError",
    "Fragment",
    "FragmentKind",
    "InvalidCombinatorError",
    "OutOfOrderError",
    "Selector",
    "SelectorBuilder",
    "SelectorError",
    "SelectorFacade",
    "css_selector_builder",
]
