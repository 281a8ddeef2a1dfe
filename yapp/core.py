"""
# Yapp: core.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

The preprocessor.

Yapp applies a set of literal replacement rules to the content of every chapter of a book.
"""

from yapp.book import Book
from yapp.constants import PREPROCESSOR_NAME, UNSUPPORTED_RENDERER_NAME
from yapp.protocol import PreprocessorContext
from yapp.rules import RuleSet
from yapp.walker import apply_rule_set


class YappPreprocessor:
    _rule_set: RuleSet

    def __init__(self, rule_set: RuleSet):
        self._rule_set = rule_set

    @property
    def name(self) -> str:
        return PREPROCESSOR_NAME

    @property
    def rule_set(self) -> RuleSet:
        return self._rule_set

    def run(self, context: PreprocessorContext, book: Book) -> Book:
        return apply_rule_set(book, self._rule_set)

    @staticmethod
    def supports_renderer(renderer: str) -> bool:
        return renderer != UNSUPPORTED_RENDERER_NAME
