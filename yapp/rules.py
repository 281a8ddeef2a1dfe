"""
# Yapp: rules.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Replacement rules and the rule set that applies them.
"""

import re
import sys
from typing import Iterable, NamedTuple, Optional

from yapp.constants import VERBOSE_MODE_DIVIDER_SYMBOL_COUNT
from yapp.exceptions import CommittedMutateException, EmptyPatternException, UncommittedApplyException
from yapp.utilities import sort_longest_first


class Rule(NamedTuple):
    pattern: str
    replacement: str


class RuleSet:
    """
    An ordered set of literal replacement rules.

    Rules are registered with `add_rule(...)` and the set is then frozen by `commit()`.
    Registering a pattern a second time overwrites its replacement
    but keeps the position at which the pattern was first registered.

    `replace(string)` makes a single left-to-right pass over the string:
    - at each position, the longest pattern matching there is replaced;
    - among patterns of equal length, the earliest-registered wins;
    - scanning resumes after the matched pattern, so replacements are never re-scanned;
    - characters not starting a match are kept as is.
    """
    _is_committed: bool
    _replacement_from_pattern: dict[str, str]
    _regex_pattern_compiled: Optional[re.Pattern]
    _verbose_mode_enabled: bool

    def __init__(self, verbose_mode_enabled: bool = False):
        self._is_committed = False
        self._replacement_from_pattern = {}
        self._regex_pattern_compiled = None
        self._verbose_mode_enabled = verbose_mode_enabled

    @classmethod
    def from_mapping(cls, replacement_from_pattern: dict[str, str], verbose_mode_enabled: bool = False) -> 'RuleSet':
        rule_set = cls(verbose_mode_enabled)
        for pattern, replacement in replacement_from_pattern.items():
            rule_set.add_rule(pattern, replacement)
        rule_set.commit()

        return rule_set

    @property
    def is_committed(self) -> bool:
        return self._is_committed

    @property
    def rules(self) -> tuple[Rule, ...]:
        return tuple(
            Rule(pattern, replacement)
            for pattern, replacement in self._replacement_from_pattern.items()
        )

    def __len__(self) -> int:
        return len(self._replacement_from_pattern)

    def add_rule(self, pattern: str, replacement: str):
        if self._is_committed:
            raise CommittedMutateException('error: cannot call `add_rule(...)` after `commit()`')

        if len(pattern) == 0:
            raise EmptyPatternException('error: pattern must not be empty')

        self._replacement_from_pattern[pattern] = replacement

    def commit(self):
        if len(self._replacement_from_pattern) > 0:
            self._regex_pattern_compiled = re.compile(
                pattern=RuleSet.build_regex_pattern(self._replacement_from_pattern),
            )
        self._is_committed = True

    @staticmethod
    def build_regex_pattern(patterns: Iterable[str]) -> str:
        """
        Build an alternation of escaped literal patterns, longest first.

        Alternation in `re` takes the first alternative that matches at a position,
        so ordering by length gives longest-match, and the stable sort gives earliest-registered on ties.
        """
        return '|'.join(
            re.escape(pattern)
            for pattern in sort_longest_first(list(patterns))
        )

    def _substitute_function(self, match: re.Match) -> str:
        return self._replacement_from_pattern[match.group()]

    def replace(self, string: str) -> str:
        if not self._is_committed:
            raise UncommittedApplyException('error: cannot call `replace(string)` before `commit()`')

        if self._regex_pattern_compiled is None:
            return string

        string_before = string
        string_after = self._regex_pattern_compiled.sub(self._substitute_function, string)

        if self._verbose_mode_enabled and string_before != string_after:
            print('<' * VERBOSE_MODE_DIVIDER_SYMBOL_COUNT + ' BEFORE', file=sys.stderr)
            print(string_before, file=sys.stderr)
            print('=' * VERBOSE_MODE_DIVIDER_SYMBOL_COUNT, file=sys.stderr)
            print(string_after, file=sys.stderr)
            print('>' * VERBOSE_MODE_DIVIDER_SYMBOL_COUNT + ' AFTER', file=sys.stderr)

        return string_after
