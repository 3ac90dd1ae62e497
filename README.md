# tddbook

Three small, independent pieces in one package:

- **`tddbook.calculator`** – parses and evaluates simple two-operand
  expressions such as `2 + 3`, `7 / 2` or `-3.5 * 2`.
- **`tddbook.bookswap`** – a WSGI web service for swapping books between
  users, with in-memory and SQLite-backed storage.
- **`tddbook.toolbox`** – utilities: an 8-bit integer division that formats
  its result, key-sorted map values, a thread-safe stack and a concurrent
  greeting demo.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Calculator

From the command line:

```
tddbook-calculator --expression "2 + 3"
```

prints `CALCULATION SUCCESS: 2 + 3 = 5.00`. An expression must be exactly
three whitespace-separated parts: a number, one of `+ - * /`, and a number.
Anything else (the wrong number of parts, an operand that is not a number,
an unknown operator, or division by zero) is printed to standard error as a
`CALCULATION ERROR` and the command exits with status 1.

From Python, the engine does the arithmetic, the validator checks input and
the parser ties them together:

```python
from tddbook.calculator.engine import Engine, Operation
from tddbook.calculator.parser import Parser
from tddbook.calculator.validator import Validator

engine = Engine()
engine.num_operands        # 2
engine.valid_operators     # ['+', '-', '/', '*']
engine.div(3.5, 2.0)       # 1.75
engine.process_operation(Operation(expression="2 + 3", operator="+", operands=(2.0, 3.0)))
# 'CALCULATION SUCCESS: 2 + 3 = 5.00'

parser = Parser(engine, Validator(engine.num_operands, engine.valid_operators))
parser.process_expression("7 / 2")
# 'CALCULATION SUCCESS: 7 / 2 = 3.50'
```

`Engine.div` raises `ZeroDivisionError` for a zero divisor, and
`Validator.check_input` raises `InputError` (a `ValueError`). The parser and
`Engine.process_operation` report every failure as `CalculationError` (from
`tddbook.calculator.formatting`), whose message names the offending
expression and the cause. `format_result` and `format_error` in the same
module build these messages.

## BookSwap service

Start the service:

```
tddbook-bookswap
```

It listens on `localhost:3000`. Options:

- `--books FILE` – JSON array of initial books
- `--users FILE` – JSON array of initial users
- `--host HOST` (default `localhost`) and `--port PORT` (default `3000`)

| Method | Path                      | Purpose                                          |
|--------|---------------------------|--------------------------------------------------|
| GET    | `/`                       | Welcome message and the list of available books  |
| GET    | `/books`                  | Available books                                  |
| POST   | `/books`                  | Add a book for an existing owner (JSON body)     |
| POST   | `/books/{id}?user={uid}`  | Swap an available book to a user                 |
| POST   | `/users`                  | Create a user (JSON body)                        |
| GET    | `/users/{id}`             | A user and the books they own                    |

Books have the fields `id`, `name`, `author`, `owner_id` and `status`
(`AVAILABLE` or `SWAPPED`); users have `id`, `name`, `address`, `post_code`
and `country`. A new book gets a fresh id and `AVAILABLE` status; a new user
gets a fresh id. Responses are JSON objects with any of the keys `message`,
`error`, `books` and `user`; keys with no value are left out. A body that is
not a JSON object of string fields is answered with status 422, an unknown
user with 400 or 404, and an unknown or already swapped book with 404.

The application object can also be built directly and served by any WSGI
server, with `Handler` and `create_app` from `tddbook.bookswap.web` and
storage from `tddbook.bookswap.memory` (`BookService`, `UserService`) or
`tddbook.bookswap.sql` (`SqlBookService`, `SqlUserService`, and
`create_schema` to set up the tables on a `sqlite3` connection).
`tddbook.bookswap.posting.StubbedPostingService` only logs posting orders.

### What it does not do

The `tddbook-bookswap` command keeps everything in memory: books and users
added while it runs are lost when it stops. It has no option to use the
SQLite stores; they are available only from Python. No books are actually
posted anywhere, and there is no authentication.

## Toolbox

```python
from tddbook.toolbox.table import divide
from tddbook.toolbox.sorting import SortDirection, get_sorted_values, get_values
from tddbook.toolbox.stack import Stack

divide(8, 4)                                              # '2.00'
divide(-128, 2)                                           # '-64.00'
get_sorted_values({2: "B", 1: "A"}, SortDirection.DESC)   # ['B', 'A']
get_values({2: "B", 1: "A"}, "asc")                       # ['A', 'B']

stack = Stack()
stack.push("a")
len(stack)                                                # 1
stack.pop()                                               # 'a'
```

`divide` takes integers from -128 to 127, raising `ValueError` outside that
range and `ZeroDivisionError` for a zero divisor. `get_sorted_values` raises
`ValueError` for a missing map or an unknown direction; `get_values` leaves
the map's own order for any direction other than `"asc"` or `"desc"`.
Popping an empty `Stack` raises `EmptyStackError`.

The greeting demo starts concurrent workers (three by default, set with
`--workers N`), prints what each one says in worker order, then says goodbye:

```
tddbook-greetings
```

From Python, `gather_greetings(n)` in `tddbook.toolbox.greetings` returns
the greetings keyed by worker id.