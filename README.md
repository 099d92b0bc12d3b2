# drillbox

A collection of small, well-known programming drills, written as plain
Python functions and classes:

- **`drillbox.arrays`**: `pairs_summing_to` and `triplets_summing_to` a
  target, `unique_sorted`, `largest_common` element of two collections,
  `max_profit` (returns a `Trade` with `profit`, `buy_day` and `sell_day`,
  days numbered from 1), `merge_sorted`, `reverse_in_groups` of `k`, and
  `common_elements`.
- **`drillbox.matrix`**: `rotate_clockwise` (both dimensions 1 to 10),
  `spiral_order`, and `format_adjacency` for a tab-separated adjacency table.
- **`drillbox.singly`**: `LinkedList` with `append`, `prepend`, positional
  `insert` (positions from 1), `remove`, stack-style `pop`, in-place
  `reverse` and `nth_from_end`.
- **`drillbox.doubly`**: `DoublyLinkedList` with `append`, `prepend`,
  `insert`, `remove`, and iteration in both directions via `reversed()`.
- **`drillbox.queue_`**: a first-in first-out `Queue`; `dequeue` on an empty
  queue raises `QueueEmptyError`.
- **`drillbox.expressions`**: `is_balanced` bracket checking, `precedence`,
  and `to_postfix` conversion, which raises `ExpressionError` on bad input.
- **`drillbox.browser`**: `History` with `visit`, `back`, `forward` and the
  `current` page.
- **`drillbox.tokens`**: `TokenRegistry` of named `Token`s that expire after
  a time-to-live and can be renewed; `format_token` renders one.
- **`drillbox.timeslots`**: `merge_adjacent` slots, `to_utc` for IST, EST,
  JST and PST, and `common_starts` for meetings.
- **`drillbox.records`**: `Student` and `Contact` records with
  `format_student` and `format_contact`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Using the library

```python
from drillbox.arrays import unique_sorted, pairs_summing_to, max_profit
from drillbox.expressions import is_balanced, to_postfix
from drillbox.singly import LinkedList
from drillbox.queue_ import Queue, QueueEmptyError

unique_sorted([3, 1, 3, 2])      # [1, 2, 3]
pairs_summing_to([2, 3, 5, 6, 7], 8)   # [(2, 6), (3, 5)]
max_profit([2, 4, 3, 8, 3, 1, 4])      # Trade(profit=6, buy_day=1, sell_day=4)

is_balanced("{[()]}")            # True
to_postfix("a+b*c")              # "abc*+"

items = LinkedList([1, 2, 3])
items.append(4)
items.reverse()
list(items)                      # [4, 3, 2, 1]

queue = Queue()
queue.enqueue(10)
queue.dequeue()                  # 10
try:
    queue.dequeue()
except QueueEmptyError:
    pass
```

Browser history:

```python
from drillbox.browser import History

history = History("home")
history.visit("news")
history.back(1)        # 1 step taken, history.current == "home"
history.forward(1)     # history.current == "news"
```

Expiring tokens take a time-to-live in seconds and a clock to read the
current time from, which makes them easy to drive in tests:

```python
import time
from drillbox.tokens import TokenRegistry, format_token

registry = TokenRegistry(60, time.time)
issued = registry.generate("session")
print(format_token(issued))
registry.renew("session")
registry.active()
```

## Command line

Installing the package provides the `drillbox` command. It takes the name
of one interactive menu program and runs it on standard input and output:

```
drillbox list      # singly linked list menu
drillbox stack     # stack menu
drillbox doubly    # doubly linked list menu
drillbox tokens    # expiring token menu
drillbox browser   # browser history menu
```

## What it does not do

- The command covers only the five menus above; the array, matrix,
  expression, time-slot and record functions are used from Python only.
- Nothing is stored: lists, tokens and history live only for the run of a
  program.
- `drillbox.records` only holds and formats records; it has no interactive
  entry or lookup of students or contacts.