"""Sample tally test surface: a small lending library.

Run with ``tally examples/tally_library.py``. One test fails on purpose so
the report shows an error line.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field

import tally
from tally import assertions as check


@dataclass
class Book:
    id: int
    title: str
    copies: int
    author: str = ""
    year: int = 0


@dataclass
class Member:
    id: int
    name: str
    active: bool = True
    borrowed: list[int] = field(default_factory=list)


class Library:
    def __init__(self) -> None:
        self.books: dict[int, Book] = {}
        self.members: dict[int, Member] = {}
        self.history: list[int] = []

    def add_book(self, book: Book) -> None:
        if book.id in self.books:
            raise ValueError(f"Book {book.id} already exists")
        self.books[book.id] = book

    def register(self, member: Member) -> None:
        if member.id in self.members:
            raise ValueError(f"Member {member.id} already exists")
        self.members[member.id] = member

    def lend(self, book_id: int, member_id: int | None = None) -> bool:
        book = self.books.get(book_id)
        if book is None or book.copies == 0:
            return False
        if member_id is not None:
            member = self.members.get(member_id)
            if member is None or not member.active:
                return False
            member.borrowed.append(book_id)
        book.copies -= 1
        self.history.append(book_id)
        return True

    async def lend_async(self, book_id: int, member_id: int | None = None) -> bool:
        await asyncio.sleep(0.01)
        return self.lend(book_id, member_id)

    def by_author(self, author: str) -> list[Book]:
        return [b for b in self.books.values() if b.author == author]


class TitleIndex:
    """Shared, read-only reference data for the ``catalog`` collection."""

    def __init__(self) -> None:
        self.titles: dict[int, str] = {}

    def initialize(self) -> None:
        self.titles = {1: "Clean Code", 2: "Design Patterns", 3: "SICP"}

    def dispose(self) -> None:
        self.titles.clear()


@tally.collection_definition("catalog", TitleIndex)
class TitleIndexCollection:
    pass


@tally.test_class
class LibraryTests:
    @tally.method_init
    def setup(self) -> None:
        self.lib = Library()
        self.lib.add_book(Book(1, "Clean Code", 3, "Robert Martin", 2008))
        self.lib.add_book(Book(2, "Design Patterns", 1, "Gang of Four", 1994))
        self.lib.register(Member(1, "Alice"))

    @tally.method_cleanup
    def teardown(self) -> None:
        self.lib = None

    @tally.test
    @tally.priority(10)
    def add_book_increases_count(self) -> None:
        self.lib.add_book(Book(3, "SICP", 2))
        check.are_equal(3, len(self.lib.books))

    @tally.test
    @tally.priority(9)
    def add_duplicate_book_raises(self) -> None:
        try:
            self.lib.add_book(Book(1, "Dup", 1))
        except ValueError:
            return
        raise AssertionError("duplicate book was accepted")

    @tally.test
    @tally.test_data(1, True)
    @tally.test_data(99, False)
    @tally.priority(8)
    def lend_book(self, book_id: int, expected: bool) -> None:
        check.are_equal(expected, self.lib.lend(book_id))

    @tally.test
    @tally.test_data("Robert Martin", 1)
    @tally.test_data("Nobody", 0)
    def by_author(self, author: str, count: int) -> None:
        check.are_equal(count, len(self.lib.by_author(author)))

    @tally.test
    @tally.priority(7)
    def last_copy_cannot_be_lent_twice(self) -> None:
        self.lib.lend(2)
        check.is_false(self.lib.lend(2))

    @tally.test
    @tally.priority(6)
    async def lend_async_to_member(self) -> None:
        check.is_true(await self.lib.lend_async(1, 1))
        check.are_equal([1], self.lib.members[1].borrowed)

    @tally.test
    @tally.priority(5)
    async def inactive_member_cannot_borrow(self) -> None:
        self.lib.members[1].active = False
        check.is_false(await self.lib.lend_async(1, 1))

    @tally.test
    @tally.priority(1)
    def history_counts_every_loan(self) -> None:
        self.lib.lend(1)
        self.lib.lend(1)
        check.are_equal(3, len(self.lib.history))

    @tally.test
    @tally.ignore
    def not_run(self) -> None:
        raise RuntimeError("ignored tests never run")


@tally.test_class(collection="catalog")
class CatalogTitleTests:
    def __init__(self, catalog: TitleIndex) -> None:
        self.catalog = catalog

    @tally.test
    @tally.test_data(1, "Clean Code")
    @tally.test_data(3, "SICP")
    def title_lookup(self, book_id: int, title: str) -> None:
        check.are_equal(title, self.catalog.titles[book_id])


@tally.test_class(collection="catalog")
class CatalogSizeTests:
    def __init__(self, catalog: TitleIndex) -> None:
        self.catalog = catalog

    @tally.class_init
    def snapshot(self) -> None:
        self.size = len(self.catalog.titles)

    @tally.test
    def has_three_titles(self) -> None:
        check.are_equal(3, self.size)

    @tally.test
    def titles_are_not_empty(self) -> None:
        check.is_not_empty(self.catalog.titles)
