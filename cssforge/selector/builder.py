"""Compound and combined CSS selector builders."""

from __future__ import annotations

from abc import ABC, abstractmethod

import structlog

from cssforge.exceptions import DuplicateCategoryError, OrderViolationError
from cssforge.types import CATEGORY_RANK, ONCE_ONLY_CATEGORIES, SelectorCategory

logger = structlog.get_logger(__name__)

DUPLICATE_MESSAGE = (
    "Element, id and pseudo-element should not occur more then one time inside the selector"
)
ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: "
    "element, id, class, attribute, pseudo-class, pseudo-element"
)


class Selector(ABC):
    """Anything that renders to selector text."""

    @abstractmethod
    def stringify(self) -> str:
        """Return the selector text."""

    def __str__(self) -> str:
        return self.stringify()


class CompoundSelector(Selector):
    """Fluent builder for one compound selector like ``a#id.cls[attr]:hover::before``.

    Parts must be added in the order element, id, class, attribute,
    pseudo-class, pseudo-element. Element, id and pseudo-element may each be
    added once. A rejected call leaves the builder untouched.
    """

    def __init__(self) -> None:
        self._text = ""
        self._used: set[SelectorCategory] = set()
        self._last_rank = 0

    @property
    def text(self) -> str:
        return self._text

    @property
    def last_rank(self) -> int:
        return self._last_rank

    def element(self, value: str) -> CompoundSelector:
        return self._append(SelectorCategory.ELEMENT, value)

    def id(self, value: str) -> CompoundSelector:
        return self._append(SelectorCategory.ID, f"#{value}")

    def class_(self, value: str) -> CompoundSelector:
        return self._append(SelectorCategory.CLASS, f".{value}")

    def attr(self, value: str) -> CompoundSelector:
        return self._append(SelectorCategory.ATTRIBUTE, f"[{value}]")

    def pseudo_class(self, value: str) -> CompoundSelector:
        return self._append(SelectorCategory.PSEUDO_CLASS, f":{value}")

    def pseudo_element(self, value: str) -> CompoundSelector:
        return self._append(SelectorCategory.PSEUDO_ELEMENT, f"::{value}")

    def stringify(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"CompoundSelector({self._text!r})"

    def _append(self, category: SelectorCategory, fragment: str) -> CompoundSelector:
        """Validate, then append ``fragment`` and advance the rank."""
        rank = CATEGORY_RANK[category]

        if category in ONCE_ONLY_CATEGORIES and category in self._used:
            logger.debug(
                "selector_fragment_rejected",
                category=category.value,
                reason="duplicate",
                selector=self._text,
            )
            raise DuplicateCategoryError(DUPLICATE_MESSAGE, category)

        if self._last_rank > rank:
            logger.debug(
                "selector_fragment_rejected",
                category=category.value,
                reason="order",
                selector=self._text,
            )
            raise OrderViolationError(ORDER_MESSAGE, category)

        self._text += fragment
        if category in ONCE_ONLY_CATEGORIES:
            self._used.add(category)
        self._last_rank = rank
        return self


class CombinedSelector(Selector):
    """Two selectors joined by a combinator (``' '``, ``'+'``, ``'~'``, ``'>'``).

    The combinator is taken verbatim. Either side may itself be combined. Both
    sides are rendered when the combination is made; later changes to them
    do not show up here.
    """

    def __init__(self, left: Selector, combinator: str, right: Selector) -> None:
        self.left_text = left.stringify()
        self.combinator = combinator
        self.right_text = right.stringify()
        logger.debug("selector_combined", combinator=combinator)

    def stringify(self) -> str:
        return f"{self.left_text} {self.combinator} {self.right_text}"

    def __repr__(self) -> str:
        return f"CombinedSelector({self.left_text!r}, {self.combinator!r}, {self.right_text!r})"
