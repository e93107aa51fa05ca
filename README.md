# algokit

Small, readable implementations of classic introductory algorithms and data
structures: number utilities, searching, list and string manipulation, a
bounded stack and a singly linked list. It also provides a menu-driven stack
program for the terminal.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `algokit.numbers`: `factorial`, `is_prime`, `prime_sum_pairs`, `circle_area`
  (uses π as 3.14159), `calculate` (operators `+`, `-`, `*`, `/`; any other
  operator raises `ValueError`, division by zero gives an infinity or NaN),
  `gcd`, `add`, `average` (1 to 100 values, otherwise `ValueError`),
  `fibonacci_triangle`, `reverse_digits`, `is_palindrome_number`, `swap`,
  `sum_natural`.
- `algokit.search`: `linear_search`, `binary_search`, `jump_search`. Each
  returns the index of the target, or `None` when the target is absent.
  `binary_search` and `jump_search` expect a sorted sequence.
- `algokit.arrays`: `min_max`, `sorted_union`, `intersection`,
  `selection_sort`, `bubble_sort`, `rotate_left`, `second_smallest`,
  `add_matrices`, `is_sparse`, `swap_adjacent` (needs an even number of
  values), `find_triplets`. Sorting functions return new lists.
- `algokit.strings`: `reverse_string`, `string_length`, `is_anagram`,
  `delete_character`, `remove_spaces`, `sort_characters`, `toggle_case`
  (ASCII letters only), `is_vowel`, `count_vowels` (returns a `VowelCount`
  with `vowels` and `others`), `remove_vowels`.
- `algokit.structures`: `BoundedStack` (default capacity 100; `push`, `pop`,
  `peek`, `len()`, iteration from top to bottom; raises `StackOverflow` and
  `StackUnderflow`) and `LinkedList` (`append`, in-place `reverse`,
  `nth_from_last`, iteration, `len()`, and `str()` in the form
  `10->20->NULL`).
- `algokit.cli`: `run_stack_menu(lines, out)` drives the stack menu from any
  iterable of input lines, and `main()` runs it on standard input.

## Examples

```python
from algokit.numbers import factorial, gcd
from algokit.search import binary_search
from algokit.structures import BoundedStack, LinkedList

factorial(5)                          # 120
gcd(12, 18)                           # 6
binary_search([2, 3, 4, 10, 40], 10)  # 3
binary_search([2, 3, 4, 10, 40], 5)   # None

stack = BoundedStack(capacity=2)
stack.push(1)
stack.push(2)
stack.pop()                           # 2

items = LinkedList([10, 20, 30])
items.reverse()
str(items)                            # "30->20->10->NULL"
items.nth_from_last(1)                # 10
```

## Interactive stack

```
algokit-stack
```

The program reads whitespace-separated choices from standard input and works
on a stack of up to 100 integers:

1. Push a value
2. Pop the top value
3. Show the stack size
4. Exit
5. Display the stack from top to bottom

It stops on choice 4 or when the input runs out. The stack lives only for
the session; nothing is saved between runs.