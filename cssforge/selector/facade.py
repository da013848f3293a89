"""Entry points for building CSS selectors.

Usage::

    b = css_selector_builder
    b.element("a").attr('href$=".png"').pseudo_class("focus").stringify()
    # 'a[href$=".png"]:focus'
"""

from __future__ import annotations

from cssforge.selector.builder import CombinedSelector, CompoundSelector, Selector


class CssSelectorBuilder:
    """Stateless facade: every call starts a fresh selector."""

    def element(self, value: str) -> CompoundSelector:
        return CompoundSelector().element(value)

    def id(self, value: str) -> CompoundSelector:
        return CompoundSelector().id(value)

    def class_(self, value: str) -> CompoundSelector:
        return CompoundSelector().class_(value)

    def attr(self, value: str) -> CompoundSelector:
        return CompoundSelector().attr(value)

    def pseudo_class(self, value: str) -> CompoundSelector:
        return CompoundSelector().pseudo_class(value)

    def pseudo_element(self, value: str) -> CompoundSelector:
        return CompoundSelector().pseudo_element(value)

    def combine(self, left: Selector, combinator: str, right: Selector) -> CombinedSelector:
        return CombinedSelector(left, combinator, right)


css_selector_builder = CssSelectorBuilder()
