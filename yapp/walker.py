"""
# Yapp: walker.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Application of a rule set to every chapter of a book.
"""

from yapp.book import Book, BookItem
from yapp.rules import RuleSet


def apply_rule_set_to_items(items: list[BookItem], rule_set: RuleSet) -> list[BookItem]:
    """
    Apply a rule set to the content of every chapter among items, depth-first in document order.

    Items without content are passed through as they are, in the same position.
    """
    processed_items = []
    for item in items:
        if item.has_content:
            content = rule_set.replace(item.content)
            sub_items = apply_rule_set_to_items(item.sub_items, rule_set)
            item = item.with_content(content, sub_items)

        processed_items.append(item)

    return processed_items


def apply_rule_set(book: Book, rule_set: RuleSet) -> Book:
    return book.with_sections(apply_rule_set_to_items(book.sections, rule_set))
