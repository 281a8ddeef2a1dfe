"""
# Yapp: protocol.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

The mdBook preprocessor protocol.

mdBook writes a JSON array `[«context», «book»]` to the preprocessor's standard input,
and expects the processed book as JSON on standard output.
Book items are serialised as
- `{"Chapter": {"name": ..., "content": ..., "sub_items": [...], ...}}`,
- `"Separator"`,
- `{"PartTitle": "«title»"}`.
"""

import json
import warnings
from typing import Any, NamedTuple, Optional, TextIO

from packaging.specifiers import SpecifierSet
from packaging.version import InvalidVersion, Version

from yapp.book import Book, BookItem, Chapter, OpaqueItem, PartTitle, Separator
from yapp.constants import SUPPORTED_MDBOOK_VERSIONS
from yapp.exceptions import HostProtocolException


class PreprocessorContext(NamedTuple):
    root: str
    config: dict[str, Any]
    renderer: str
    mdbook_version: str


_CHAPTER_FIELD_NAMES = (
    'name',
    'content',
    'number',
    'sub_items',
    'path',
    'source_path',
    'parent_names',
)


def item_from_json(value: Any) -> BookItem:
    if value == 'Separator':
        return Separator()

    if isinstance(value, dict) and len(value) == 1:
        if 'PartTitle' in value and isinstance(value['PartTitle'], str):
            return PartTitle(value['PartTitle'])

        if 'Chapter' in value:
            return chapter_from_json(value['Chapter'])

    return OpaqueItem(value)


def chapter_from_json(value: Any) -> Chapter:
    if not isinstance(value, dict):
        raise HostProtocolException(f'chapter must be an object, got {type(value).__name__}')

    content = value.get('content')
    if not isinstance(content, str):
        raise HostProtocolException(f'chapter `{value.get("name")}` is missing string field `content`')

    sub_items = value.get('sub_items') or []
    if not isinstance(sub_items, list):
        raise HostProtocolException(f'chapter `{value.get("name")}` has non-list field `sub_items`')

    return Chapter(
        name=value.get('name', ''),
        content=content,
        number=value.get('number'),
        sub_items=[item_from_json(sub_item) for sub_item in sub_items],
        path=value.get('path'),
        source_path=value.get('source_path'),
        parent_names=value.get('parent_names'),
        extra_fields={
            field_name: field_value
            for field_name, field_value in value.items()
            if field_name not in _CHAPTER_FIELD_NAMES
        },
    )


def item_to_json(item: BookItem) -> Any:
    if isinstance(item, Chapter):
        return {'Chapter': chapter_to_json(item)}

    if isinstance(item, Separator):
        return 'Separator'

    if isinstance(item, PartTitle):
        return {'PartTitle': item.title}

    return item.raw


def chapter_to_json(chapter: Chapter) -> dict[str, Any]:
    return {
        'name': chapter.name,
        'content': chapter.content,
        'number': chapter.number,
        'sub_items': [item_to_json(sub_item) for sub_item in chapter.sub_items],
        'path': chapter.path,
        'source_path': chapter.source_path,
        'parent_names': chapter.parent_names,
        **chapter.extra_fields,
    }


def book_from_json(value: Any) -> Book:
    if not isinstance(value, dict):
        raise HostProtocolException(f'book must be an object, got {type(value).__name__}')

    sections = value.get('sections')
    if not isinstance(sections, list):
        raise HostProtocolException('book is missing list field `sections`')

    return Book(
        sections=[item_from_json(section) for section in sections],
        extra_fields={
            field_name: field_value
            for field_name, field_value in value.items()
            if field_name != 'sections'
        },
    )


def book_to_json(book: Book) -> dict[str, Any]:
    return {
        'sections': [item_to_json(section) for section in book.sections],
        **book.extra_fields,
    }


def context_from_json(value: Any) -> PreprocessorContext:
    if not isinstance(value, dict):
        raise HostProtocolException(f'context must be an object, got {type(value).__name__}')

    mdbook_version = value.get('mdbook_version')
    if not isinstance(mdbook_version, str):
        raise HostProtocolException('context is missing string field `mdbook_version`')

    return PreprocessorContext(
        root=value.get('root', ''),
        config=value.get('config') or {},
        renderer=value.get('renderer', ''),
        mdbook_version=mdbook_version,
    )


def parse_input(input_file: TextIO) -> tuple[PreprocessorContext, Book]:
    try:
        value = json.load(input_file)
    except (json.JSONDecodeError, UnicodeDecodeError) as error:
        raise HostProtocolException(f'unable to parse the input: {error}') from error

    if not isinstance(value, list) or len(value) != 2:
        raise HostProtocolException('input must be a JSON array `[context, book]`')

    context_json, book_json = value

    return context_from_json(context_json), book_from_json(book_json)


def write_output(book: Book, output_file: TextIO):
    json.dump(book_to_json(book), output_file, ensure_ascii=False)


def check_mdbook_version(
    mdbook_version: str,
    preprocessor_name: str,
    supported_versions: Optional[str] = None,
) -> bool:
    """
    Check the host's version against the supported range, warning on mismatch.

    Returns whether the version is supported; raises HostProtocolException if it cannot be parsed.
    """
    if supported_versions is None:
        supported_versions = SUPPORTED_MDBOOK_VERSIONS

    try:
        version = Version(mdbook_version)
    except InvalidVersion as invalid_version:
        raise HostProtocolException(f'invalid mdbook version `{mdbook_version}`') from invalid_version

    is_supported = SpecifierSet(supported_versions).contains(version, prereleases=True)
    if not is_supported:
        warnings.warn(
            f'warning: the {preprocessor_name} plugin supports mdbook versions {supported_versions}, '
            f'but is being called from version {mdbook_version}'
        )

    return is_supported
