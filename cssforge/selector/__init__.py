"""CSS selector construction."""

from cssforge.selector.builder import CombinedSelector, CompoundSelector, Selector
from cssforge.selector.facade import CssSelectorBuilder, css_selector_builder

__all__ = [
    "CombinedSelector",
    "CompoundSelector",
    "CssSelectorBuilder",
    "Selector",
    "css_selector_builder",
]
