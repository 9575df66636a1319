# dsapractice

A small collection of classic data-structure and algorithm exercises, in plain
Python with no dependencies:

- `dsapractice.patterns`: text patterns (star triangles, number triangles,
  pyramids) returned as lists of rows, and a command that prints them
- `dsapractice.arrays`: matrix addition, largest element, resizing a list
- `dsapractice.search`: binary search and linear search
- `dsapractice.linked_list`: `LinkedList`, a singly linked list with insert and
  delete operations
- `dsapractice.circular`: `CircularLinkedList`, a circular singly linked list
- `dsapractice.stack`: `Stack`, a fixed-capacity stack with
  `StackOverflowError` and `StackUnderflowError`

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Usage

### Patterns

Each pattern function takes a number of rows and returns the rows as strings:

```python
from dsapractice.patterns import star_pyramid, number_triangle

star_pyramid(3)     # ['  *', ' ***', '*****']
number_triangle(3)  # ['1', '12', '123']
```

The functions are `star_triangle`, `inverted_star_triangle`,
`number_decrease`, `number_triangle`, `star_pyramid` and `number_pyramid`.

### Arrays

```python
from dsapractice.arrays import add_matrices, largest_number, resize

add_matrices([[1, 2], [3, 4]], [[10, 20], [30, 40]])  # [[11, 22], [33, 44]]
largest_number([1, 3, 5, 52, 5, 2, 6, 8])             # 52
resize([1, 2, 3], 5)                                  # [1, 2, 3, 0, 0]
resize([1, 2, 3], 2)                                  # [1, 2]
```

`add_matrices` raises `ValueError` when the shapes differ, `largest_number`
raises `ValueError` for an empty sequence, and `resize` raises `ValueError`
for a negative size.

### Searching

```python
from dsapractice.search import binary_search, linear_search

binary_search([2, 3, 5, 6, 7, 8, 9, 10], 7)  # 4
linear_search([1, 2, 3, 2], 2)               # [1, 3]
```

`binary_search` expects sorted input and raises `ValueError` when the element
is absent. `linear_search` returns every index where the element occurs, or an
empty list.

### Linked lists

```python
from dsapractice.linked_list import LinkedList

items = LinkedList([10, 11, 13, 14, 15])
items.insert_at_index(36565, 3)
items.insert_at_first(1)
items.insert_at_end(99)
items.delete_by_value(14)
items.delete_at_first()   # returns 1
items.delete_at_last()    # returns 99
items.delete_at_index(0)  # returns 10
print(list(items), len(items))
```

Index operations raise `IndexError` when out of range, deleting from an empty
list raises `IndexError`, and `delete_by_value` raises `ValueError` when the
value is not present.

```python
from dsapractice.circular import CircularLinkedList

ring = CircularLinkedList([10, 11, 12])
ring.append(13)
print(list(ring))  # [10, 11, 12, 13]; each value once
```

### Stack

```python
from dsapractice.stack import Stack, StackOverflowError

stack = Stack(2)
stack.push(1)
stack.push(2)
try:
    stack.push(3)
except StackOverflowError:
    print("full")
print(stack.pop(), stack.peek(1))  # 2 1
```

`peek(1)` is the top item; positions outside the stack raise `IndexError`.
Popping an empty stack raises `StackUnderflowError`.

## Command line

```
dsapractice-patterns PATTERN [ROWS]
```

`PATTERN` is one of `star`, `inverted-star`, `number-decrease`,
`number-triangle`, `pyramid` or `number-pyramid`. When `ROWS` is left out the
command asks for it on standard input. For example:

```
dsapractice-patterns pyramid 4
```

The other modules are libraries only and have no commands of their own.