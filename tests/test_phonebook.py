import pytest

from phonybooker.contact import Contact
from phonybooker.phonebook import PhoneBook, format_column, format_row


def _contact(n):
    return Contact(f"first{n}", f"last{n}", f"nick{n}", f"phone{n}", f"secret{n}")


def test_new_phonebook_is_empty():
    book = PhoneBook()
    assert len(book) == 0
    assert list(book) == []
    assert book.capacity == 8


def test_add_in_order():
    book = PhoneBook()
    for n in range(3):
        book.add(_contact(n))
    assert len(book) == 3
    assert list(book) == [_contact(0), _contact(1), _contact(2)]
    assert book[1] == _contact(1)


def test_oldest_is_replaced_when_full():
    book = PhoneBook()
    for n in range(9):
        book.add(_contact(n))
    assert len(book) == 8
    assert book[0] == _contact(8)
    assert book[1] == _contact(1)
    assert book[7] == _contact(7)


def test_wraps_repeatedly():
    book = PhoneBook(capacity=2)
    for n in range(5):
        book.add(_contact(n))
    assert list(book) == [_contact(4), _contact(3)]


@pytest.mark.parametrize("index", [-1, 0, 8])
def test_getitem_out_of_range_on_empty(index):
    with pytest.raises(IndexError):
        PhoneBook()[index]


def test_getitem_beyond_filled():
    book = PhoneBook()
    book.add(_contact(0))
    assert len(book) == 1
    assert book[0] == _contact(0)
    with pytest.raises(IndexError):
        book[1]


def test_add_rejects_empty_field():
    book = PhoneBook()
    with pytest.raises(ValueError):
        book.add(Contact("a", "b", "", "d", "e"))
    assert len(book) == 0


@pytest.mark.parametrize("capacity", [0, -3])
def test_capacity_must_be_positive(capacity):
    with pytest.raises(ValueError):
        PhoneBook(capacity)


def test_format_column_short_text_unchanged():
    assert format_column("Ada") == "Ada"
    assert format_column("abcdefghij") == "abcdefghij"


def test_format_column_truncates_long_text():
    assert format_column("abcdefghijk") == "abcdefghi."
    result = format_column("x" * 40)
    assert len(result) == 10
    assert result.endswith(".")


def test_format_row_layout():
    row = format_row(3, Contact("Ada", "Lovelace", "averyveryverylongnick", "1", "2"))
    cells = row.split("|")
    assert len(cells) == 4
    assert all(len(cell) == 10 for cell in cells)
    assert [cell.strip() for cell in cells] == ["3", "Ada", "Lovelace", "averyvery."]