# interview-riddles

Solutions to classic coding-interview riddles. This is a small Python library
with no runtime dependencies.

## Installation

```
pip install .
pip install ".[test]"   # with the test requirements
```

## What is inside

| Module | Contents |
| --- | --- |
| `interview_riddles.strings` | `is_unique`, `is_unique_set`, `is_unique_sorted`, `one_away`, `is_rotation` |
| `interview_riddles.matrices` | `rotate` (90° clockwise, in place), `zero_matrix`, `format_matrix` |
| `interview_riddles.lists` | `remove_dups`, `remove_dups_quadratic`, `kth_to_last`, `partition`, `is_partitioned`, `add_digit_lists` |
| `interview_riddles.linked` | `Node`, `make_list`, `find_tail`, `connect`, `find_intersection`, `find_loop_start` |
| `interview_riddles.stacks` | `StackId`, `SharedArrayStack`, `StackTriple` (three stacks in one array), `MinStack`, `MultiStack` (stack of plates) |
| `interview_riddles.stack_sort` | `sort_stack`, `merge_sort_stack` (a stack is a list whose end is the top) |
| `interview_riddles.shelter` | `Animal`, `Dog`, `Cat`, `AnimalShelter` (dogs and cats handed out in arrival order) |
| `interview_riddles.calculator` | `tokenize`, `evaluate`, `evaluate_two_pass` for `+ - * /` without parentheses |
| `interview_riddles.water_divide` | `PointType`, `mark_water_divide`, `format_divide` |
| `interview_riddles.edit_distance` | `is_dist_1`, `has_pair_with_dist_1` |
| `interview_riddles.rumor` | `Meeting`, `merge_meetings`, `who_knows_it` |
| `interview_riddles.social` | `Person` (with `to_json` / `from_json`), `PersonCollection` (with `suggest_friends_for`) |
| `interview_riddles.operator_maximizer` | `Expression`, `MaxFinder` |
| `interview_riddles.reverse_list` | `list_length`, `make_range_list`, `is_sequential`, `reverse_with_copy`, `reverse_recursive`, `reverse_by_swapping`, `main` |

Empty or invalid input is reported with exceptions: popping an empty stack or
shelter raises `IndexError`, `find_loop_start` on a list without a loop raises
`ValueError`, and `Person.from_json` raises `ValueError` for malformed JSON.

## Examples

```python
from interview_riddles.strings import one_away, is_rotation
from interview_riddles.calculator import evaluate_two_pass
from interview_riddles.operator_maximizer import MaxFinder

one_away("pale", "ple")                       # True
is_rotation("waterbottle", "erbottlewat")     # True
evaluate_two_pass("2*3+5/6*3+15")             # 23.5
MaxFinder([3, 4, 5, 1]).find_max_operators()  # ("(3.0)*(4.0)*(5.0+1.0)", 72.0)
```

```python
from interview_riddles.social import Person, PersonCollection

people = PersonCollection()
people.add_person(Person("q", "Doe", "Jane", "jane@example.com", {"a", "b"}))
people.add_person(Person("a", "Roe", "Ann", "ann@example.com", {"q", "c"}))
people.add_person(Person("c", "Poe", "Cal", "cal@example.com", {"a", "b"}))
people.suggest_friends_for("q")   # [(2, "c")]
```

`suggest_friends_for` returns up to three `(common friend count, id)` pairs,
most common friends first.

## Command line

The linked-list reversal benchmark takes one or more list lengths. For each
length it times building the list and each of the three reversal methods, in
microseconds, and prints one line per length with the times and the time per
element:

```
reverse-list-bench 1000 10000 100000
```

The recursive method is limited by Python's recursion depth; when a list is too
long for it, its time is printed as `-1`.

## What the package does not do

`PersonCollection` keeps people in memory only: there is no storage on disk and
no HTTP server or other network interface in front of it. `Person.to_json` and
`Person.from_json` are the only serialisation provided.

## Running the tests

```
pytest
```