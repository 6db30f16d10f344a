# cursorlist

`cursorlist` provides `CursorList`, a doubly linked list that keeps a
*current* position (a cursor). You move the cursor with `first`, `next`,
`last` and `prev`. You insert and remove at the front, at the back or at
the cursor.

## Installation

```
pip install .
```

To install the test suite's requirements as well:

```
pip install .[test]
pytest
```

## Usage

```python
from cursorlist.cursor_list import CursorList

items = CursorList([0, 2, 4])

items.first()          # 0, cursor on the first node
items.next()           # 2, cursor moves forward
items.current()        # 2, cursor stays where it is
items.push_current(3)  # inserts 3 after the cursor; the cursor moves to 3
list(items)            # [0, 2, 3, 4]

items.pop_current()    # 3; the cursor moves to the following node (4)
items.last()           # 4
items.prev()           # 2
items.pop_front()      # 0
items.pop_back()       # 4
len(items)             # 1

items.clean()
items.first()          # None: the list is empty
```

Navigation methods (`first`, `next`, `last`, `prev`, `current`) return
`None` when there is nothing to return, such as an empty list or moving
past either end. Once the cursor has moved off an end, `next` and `prev`
keep returning `None` until `first` or `last` puts it back on the list.
The `pop_*` methods also return `None` when there is no node to remove.

- Building a `CursorList` from items appends them in order with
  `push_back`, so the cursor ends on the last item.
- `push_front`, `push_back` and `push_current` always leave the cursor on
  the new node. `push_current` with no cursor replaces the list with a
  single new node.
- `pop_current` removes the node under the cursor and moves the cursor to
  the node after it. If there is none, the cursor moves to the node before it.
- Iterating over the list and `len()` do not move the cursor.

The list exposes its `head`, `tail` and `cursor` nodes as attributes.
`Node` is the list's node type: it holds `data`, `next` and `prev`.

## Commands

`cursorlist-demo` stores two `Movie` records (year, title, director) in a
list. It then walks the list from first to last and prints each title and
year:

```
cursorlist-demo
```

`cursorlist-grade` runs a scored set of behavioural checks against
`CursorList` and prints a partial score for each check, then a total out
of 70. The check messages are in Spanish:

```
cursorlist-grade
```

You can pass a check number (0–5) to run only that check:

```
cursorlist-grade 3
```

When you select a check and it earns its full score, the command prints
`SUCCESS` and stops; no total is printed for a single check.

The same checks are available from Python through
`cursorlist.grader.run_checks`, which returns a list of `CheckResult`
values and accepts an output stream and a `random.Random` to use.