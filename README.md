# phonybooker

A small terminal phonebook that keeps up to eight contacts in memory, plus a
`megaphone` command that shouts whatever you give it.

## Installation

```
pip install .
```

## The phonebook

Start it with:

```
phonybooker
```

At the `Enter command >` prompt it accepts three commands:

| Command  | What it does                         |
|----------|--------------------------------------|
| `ADD`    | save a new contact                   |
| `SEARCH` | list saved contacts and show one     |
| `EXIT`   | leave the program                    |

Any other input prints `ERROR: command not found` and the list of commands.

`ADD` asks in turn for first name, last name, nickname, phone number and
darkest secret. An empty answer prints `ERROR: field must be non empty` and
the same question is asked again. The book holds eight contacts; once it is
full, each new contact replaces the oldest one.

`SEARCH` prints a table of index, first name, last name and nickname,
separated by `|`. Each column is ten characters wide and right-aligned; text
longer than ten characters is cut to nine characters followed by a `.`. It
then asks for an index. The answer is read as a whole number at the start of
the line (leading spaces and a sign are allowed); anything else prints
`ERROR: bad input`, and a number outside the table prints
`ERROR: index is out of range`. A valid index prints that contact's full
details. With no contacts saved, `SEARCH` prints `Phonebook is empty`.

Closing the input (Ctrl-D) at any prompt ends the session, just as `EXIT`
does.

## The megaphone

```
megaphone "shhhhh... I think the students are asleep..."
```

prints

```
SHHHHH... I THINK THE STUDENTS ARE ASLEEP...
```

The arguments are printed one after another with nothing in between, with
ASCII letters upper-cased and every other character left as it is. With no
arguments it prints `* LOUD AND UNBEARABLE FEEDBACK NOISE *`.

## Using it from Python

```python
from phonybooker.contact import Contact
from phonybooker.phonebook import PhoneBook, format_row
from phonybooker.megaphone import shout

book = PhoneBook(8)
book.add(Contact("Ada", "Lovelace", "Countess", "0000", "placeholder"))
for index, contact in enumerate(book):
    print(format_row(index, contact))

print(shout(["hello", " world"]))  # HELLO WORLD
```

- `phonybooker.contact.Contact` is a dataclass with the fields `first_name`,
  `last_name`, `nickname`, `phone_number` and `darkest_secret` (all default to
  `""`). `is_empty()` is true when the first name is empty.
- `phonybooker.phonebook.PhoneBook(capacity=8)` keeps at most `capacity`
  contacts (a non-positive capacity raises `ValueError`). `add()` raises
  `ValueError` if any field of the contact is empty, and otherwise overwrites
  the oldest slot once the book is full. The book supports `len()`, iteration
  and indexing; an index outside the stored contacts raises `IndexError`.
  `capacity` gives the number of slots.
- `format_column(text)` and `format_row(index, contact)` produce the table
  cells and lines that `SEARCH` prints.
- `phonybooker.cli.Session(phonebook=None, stdin=None, stdout=None)` runs the
  interactive loop with `run()` on any text streams, which makes it easy to
  drive from a script. `phonybooker.cli.main()` runs it on the standard
  streams.
- `phonybooker.megaphone.shout(words)` returns the shouted string, and
  `phonybooker.megaphone.main(argv=None)` prints it.

## What it does not do

Contacts live only in memory for the length of one session: nothing is saved
to disk, and every start begins with an empty book. Contacts cannot be edited
or deleted, and `SEARCH` does not filter by name; it always lists every saved
contact.

## Running the tests

```
pip install .[test]
pytest
```