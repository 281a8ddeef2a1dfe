"""
# Yapp: book.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Document tree of a book, as handed over by mdBook.

Items of the tree form a closed set of variants,
distinguished by `has_content`:
- Chapter (has textual content, subject to replacement);
- Separator, PartTitle, and OpaqueItem (passed through untouched).
"""

import abc
import copy
from typing import Any, Optional


class BookItem(abc.ABC):
    """
    Base class for an item of the document tree.
    """
    has_content: bool = False

    @property
    @abc.abstractmethod
    def kind(self) -> str:
        raise NotImplementedError


class Chapter(BookItem):
    """
    A chapter, with textual content and possibly nested sub-chapters.

    Host fields not modelled here are kept in `extra_fields` and passed back as received.
    """
    has_content = True

    _name: str
    _content: str
    _number: Optional[list[int]]
    _sub_items: list[BookItem]
    _path: Optional[str]
    _source_path: Optional[str]
    _parent_names: list[str]
    _extra_fields: dict[str, Any]

    def __init__(
        self,
        name: str,
        content: str,
        number: Optional[list[int]] = None,
        sub_items: Optional[list[BookItem]] = None,
        path: Optional[str] = None,
        source_path: Optional[str] = None,
        parent_names: Optional[list[str]] = None,
        extra_fields: Optional[dict[str, Any]] = None,
    ):
        self._name = name
        self._content = content
        self._number = copy.copy(number)
        self._sub_items = list(sub_items) if sub_items is not None else []
        self._path = path
        self._source_path = source_path
        self._parent_names = list(parent_names) if parent_names is not None else []
        self._extra_fields = dict(extra_fields) if extra_fields is not None else {}

    @property
    def kind(self) -> str:
        return 'Chapter'

    @property
    def name(self) -> str:
        return self._name

    @property
    def content(self) -> str:
        return self._content

    @property
    def number(self) -> Optional[list[int]]:
        return self._number

    @property
    def sub_items(self) -> list[BookItem]:
        return self._sub_items

    @property
    def path(self) -> Optional[str]:
        return self._path

    @property
    def source_path(self) -> Optional[str]:
        return self._source_path

    @property
    def parent_names(self) -> list[str]:
        return self._parent_names

    @property
    def extra_fields(self) -> dict[str, Any]:
        return self._extra_fields

    def with_content(self, content: str, sub_items: list[BookItem]) -> 'Chapter':
        """
        Return a copy of this chapter with new content and sub-items, all else kept.
        """
        return Chapter(
            name=self._name,
            content=content,
            number=self._number,
            sub_items=sub_items,
            path=self._path,
            source_path=self._source_path,
            parent_names=self._parent_names,
            extra_fields=self._extra_fields,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Chapter):
            return NotImplemented

        return (
            self._name == other._name
            and self._content == other._content
            and self._number == other._number
            and self._sub_items == other._sub_items
            and self._path == other._path
            and self._source_path == other._source_path
            and self._parent_names == other._parent_names
            and self._extra_fields == other._extra_fields
        )

    def __repr__(self) -> str:
        return f'Chapter(name={self._name!r}, content={self._content!r}, sub_items={self._sub_items!r})'


class Separator(BookItem):
    @property
    def kind(self) -> str:
        return 'Separator'

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Separator)

    def __repr__(self) -> str:
        return 'Separator()'


class PartTitle(BookItem):
    _title: str

    def __init__(self, title: str):
        self._title = title

    @property
    def kind(self) -> str:
        return 'PartTitle'

    @property
    def title(self) -> str:
        return self._title

    def __eq__(self, other: object) -> bool:
        return isinstance(other, PartTitle) and self._title == other._title

    def __repr__(self) -> str:
        return f'PartTitle({self._title!r})'


class OpaqueItem(BookItem):
    """
    An item of a kind not known to Yapp, kept exactly as the host sent it.
    """
    _raw: Any

    def __init__(self, raw: Any):
        self._raw = raw

    @property
    def kind(self) -> str:
        return 'Opaque'

    @property
    def raw(self) -> Any:
        return self._raw

    def __eq__(self, other: object) -> bool:
        return isinstance(other, OpaqueItem) and self._raw == other._raw

    def __repr__(self) -> str:
        return f'OpaqueItem({self._raw!r})'


class Book:
    _sections: list[BookItem]
    _extra_fields: dict[str, Any]

    def __init__(self, sections: Optional[list[BookItem]] = None, extra_fields: Optional[dict[str, Any]] = None):
        self._sections = list(sections) if sections is not None else []
        self._extra_fields = dict(extra_fields) if extra_fields is not None else {}

    @property
    def sections(self) -> list[BookItem]:
        return self._sections

    @property
    def extra_fields(self) -> dict[str, Any]:
        return self._extra_fields

    def with_sections(self, sections: list[BookItem]) -> 'Book':
        return Book(sections, self._extra_fields)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Book):
            return NotImplemented

        return self._sections == other._sections and self._extra_fields == other._extra_fields

    def __repr__(self) -> str:
        return f'Book(sections={self._sections!r})'
