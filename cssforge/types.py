"""Enums and ordering tables for cssforge."""

from enum import StrEnum


class SelectorCategory(StrEnum):
    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudo-class"
    PSEUDO_ELEMENT = "pseudo-element"


class Combinator(StrEnum):
    DESCENDANT = " "
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"
    CHILD = ">"


# Required order inside a compound selector: element first, pseudo-element last
CATEGORY_ORDER: list[SelectorCategory] = [
    SelectorCategory.ELEMENT,
    SelectorCategory.ID,
    SelectorCategory.CLASS,
    SelectorCategory.ATTRIBUTE,
    SelectorCategory.PSEUDO_CLASS,
    SelectorCategory.PSEUDO_ELEMENT,
]

CATEGORY_RANK: dict[SelectorCategory, int] = {c: i for i, c in enumerate(CATEGORY_ORDER, start=1)}

ONCE_ONLY_CATEGORIES: frozenset[SelectorCategory] = frozenset(
    {
        SelectorCategory.ELEMENT,
        SelectorCategory.ID,
        SelectorCategory.PSEUDO_ELEMENT,
    }
)
