"""
# Yapp: test_walker.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Perform unit testing for `walker.py`.
"""

import unittest

from yapp.book import Book, Chapter, OpaqueItem, PartTitle, Separator
from yapp.rules import RuleSet
from yapp.walker import apply_rule_set, apply_rule_set_to_items


class TestWalker(unittest.TestCase):
    def test_apply_rule_set_chapter_and_separator(self):
        book = Book([
            Chapter('Intro', 'Hello-World', number=[1], path='intro.md'),
            Separator(),
        ])
        processed_book = apply_rule_set(book, RuleSet.from_mapping({'-': ' '}))

        self.assertEqual(len(processed_book.sections), 2)
        chapter, separator = processed_book.sections
        self.assertEqual(chapter.content, 'Hello World')
        self.assertEqual(chapter.name, 'Intro')
        self.assertEqual(chapter.number, [1])
        self.assertEqual(chapter.path, 'intro.md')
        self.assertEqual(separator, Separator())

    def test_apply_rule_set_nested_chapters(self):
        book = Book([
            PartTitle('Part-One'),
            Chapter(
                'A-1', 'a-1',
                sub_items=[
                    Chapter('A-1-1', 'a-1-1', parent_names=['A-1']),
                    Separator(),
                    Chapter(
                        'A-1-2', 'a-1-2', parent_names=['A-1'],
                        sub_items=[Chapter('A-1-2-1', 'a-1-2-1', parent_names=['A-1', 'A-1-2'])],
                    ),
                ],
            ),
            OpaqueItem({'Unknown-Kind': 'x-y'}),
        ])
        processed_book = apply_rule_set(book, RuleSet.from_mapping({'-': '.'}))

        self.assertEqual(
            processed_book,
            Book([
                PartTitle('Part-One'),
                Chapter(
                    'A-1', 'a.1',
                    sub_items=[
                        Chapter('A-1-1', 'a.1.1', parent_names=['A-1']),
                        Separator(),
                        Chapter(
                            'A-1-2', 'a.1.2', parent_names=['A-1'],
                            sub_items=[Chapter('A-1-2-1', 'a.1.2.1', parent_names=['A-1', 'A-1-2'])],
                        ),
                    ],
                ),
                OpaqueItem({'Unknown-Kind': 'x-y'}),
            ]),
        )

    def test_apply_rule_set_leaves_input_book_untouched(self):
        book = Book([Chapter('Intro', 'x', sub_items=[Chapter('Sub', 'x')])], extra_fields={'__non_exhaustive': None})
        processed_book = apply_rule_set(book, RuleSet.from_mapping({'x': 'y'}))

        self.assertEqual(book.sections[0].content, 'x')
        self.assertEqual(book.sections[0].sub_items[0].content, 'x')
        self.assertEqual(processed_book.sections[0].content, 'y')
        self.assertEqual(processed_book.sections[0].sub_items[0].content, 'y')
        self.assertEqual(processed_book.extra_fields, {'__non_exhaustive': None})

    def test_apply_rule_set_output_does_not_share_containers_with_input(self):
        book = Book([
            Chapter('Intro', 'x', number=[1], parent_names=['P'], extra_fields={'future_field': 1}),
        ])
        processed_book = apply_rule_set(book, RuleSet.from_mapping({'x': 'y'}))

        processed_chapter = processed_book.sections[0]
        processed_chapter.parent_names.append('Q')
        processed_chapter.number.append(2)
        processed_chapter.extra_fields['other_field'] = 2
        processed_chapter.sub_items.append(Separator())

        chapter = book.sections[0]
        self.assertEqual(chapter.parent_names, ['P'])
        self.assertEqual(chapter.number, [1])
        self.assertEqual(chapter.extra_fields, {'future_field': 1})
        self.assertEqual(chapter.sub_items, [])

    def test_apply_rule_set_to_items_visits_in_document_order(self):
        visited_contents = []

        class RecordingRuleSet(RuleSet):
            def replace(self, string: str) -> str:
                visited_contents.append(string)
                return super().replace(string)

        rule_set = RecordingRuleSet()
        rule_set.commit()
        items = [
            Chapter('1', '1', sub_items=[Chapter('1.1', '1.1'), Chapter('1.2', '1.2')]),
            Separator(),
            Chapter('2', '2'),
        ]
        self.assertEqual(apply_rule_set_to_items(items, rule_set), items)
        self.assertEqual(visited_contents, ['1', '1.1', '1.2', '2'])

    def test_apply_rule_set_empty_book(self):
        self.assertEqual(apply_rule_set(Book(), RuleSet.from_mapping({'x': 'y'})), Book())


if __name__ == '__main__':
    unittest.main()
