"""
# Yapp: test_core.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Perform unit testing for `core.py`.
"""

import unittest

from yapp.book import Book, Chapter, Separator
from yapp.core import YappPreprocessor
from yapp.protocol import PreprocessorContext
from yapp.rules import RuleSet


class TestCore(unittest.TestCase):
    def test_yapp_preprocessor_name(self):
        self.assertEqual(YappPreprocessor(RuleSet.from_mapping({})).name, 'yapp-preprocessor')

    def test_yapp_preprocessor_supports_renderer(self):
        self.assertTrue(YappPreprocessor.supports_renderer('html'))
        self.assertTrue(YappPreprocessor.supports_renderer('markdown'))
        self.assertTrue(YappPreprocessor.supports_renderer(''))
        self.assertFalse(YappPreprocessor.supports_renderer('not-supported'))

    def test_yapp_preprocessor_run(self):
        preprocessor = YappPreprocessor(RuleSet.from_mapping({'{{version}}': '1.2.3', '{{': '<<'}))
        context = PreprocessorContext(root='.', config={}, renderer='html', mdbook_version='0.4.40')
        book = Book([
            Chapter('Install', 'pip install yapp=={{version}} {{ x', sub_items=[Separator()]),
        ])

        self.assertEqual(
            preprocessor.run(context, book),
            Book([
                Chapter('Install', 'pip install yapp==1.2.3 << x', sub_items=[Separator()]),
            ]),
        )


if __name__ == '__main__':
    unittest.main()
