# toybox

A set of small command-line programs, each one a short and complete example of
one idea:

| Command               | Module                  | What it does                                                                      |
|-----------------------|-------------------------|-----------------------------------------------------------------------------------|
| `toybox-todos`        | `toybox.todos`          | Interactive todo list: list, add, mark done or in progress, and print as JSON     |
| `toybox-cons-list`    | `toybox.cons_list`      | Builds a cons list by prepending values, then prints its length and contents      |
| `toybox-platform`     | `toybox.platform_check` | Reports whether it is running on Linux                                            |
| `toybox-chaining`     | `toybox.chaining`       | Shows optional chaining that stops early and errors that propagate                |
| `toybox-concurrency`  | `toybox.concurrency`    | Runs asyncio patterns: sequential awaits, many tasks, gather, and first-completed |
| `toybox-balance`      | `toybox.balance`        | Looks up the balance of a Bitcoin address over HTTP                               |

## Installation

```console
pip install .
```

For the test suite:

```console
pip install ".[test]"
pytest
```

## The todo list

```console
toybox-todos
```

Each time round the program shows a numbered menu of commands (`List`, `Add`,
`Done`, `Progress`, `Save`) and reads a line; the choice may be the number or
the name of the command, in any case. Anything else is ignored. The program
stops when its input ends.

- `List` prints every item with its number.
- `Add` asks for the text of a new item; an empty line adds nothing.
- `Done` and `Progress` ask for an item number and set that item's status.
  A number with no item is ignored; text that is not a number raises
  `ValueError`.
- `Save` prints every item as compact JSON.

The same works from code:

```python
from toybox.todos import Status, TodoApp

app = TodoApp()
app.add("water the plants")
previous = app.mark(0, Status.DONE)   # None: the item had no status before
print(app.list())
print(app.to_json())
```

`TodoApp.mark` raises `IndexError` for an item number that is not on the list.
`TodoApp.run(reader, writer)` runs the interactive loop on any text streams.

Command words are parsed case-insensitively by `toybox.command_line.cmd`;
unknown words give `Command.NIL`:

```python
from toybox.command_line import Command, cmd

assert cmd("Save") is Command.SAVE
assert cmd("unknown") is Command.NIL
```

`toybox.prompting.get_text(prompt, reader, writer)` writes a prompt and
returns one line read back, without its line ending.

### What the todo list does not do

The list lives in memory only. `Save` prints JSON to standard output; nothing
is written to a file, and there is no way to load a list back in.

## Cons list

```python
from toybox.cons_list import ConsList

items = ConsList().prepend(1).prepend(2).prepend(3)
print(len(items))         # 3
print(items.stringify())  # 3, 2, 1, Nil
print(list(items))        # [3, 2, 1]
```

Elements must fit in an unsigned 32-bit integer; `prepend` raises `ValueError`
otherwise.

## Platform check

`toybox.platform_check.are_you_on_linux(system)` returns a sentence saying
whether `system` (by default the running one, as `platform.system()` names it)
is Linux. `toybox-platform` prints it along with a confirmation line.

## Chaining and errors

`toybox.chaining` holds the nested `Data`, `Foo` and `Bar` records.
`chaining_fail()` follows a chain whose first level is missing and returns
`None` without printing; `chaining_ok()` prints and returns the nested `baz`.

The parsing functions accept signed 32-bit integers only:

- `parse_and_sum()` returns `42`.
- `try_to_parse()` raises `ValueError`, because its second number is malformed.
- `different_errors(n, v)` adds the integer parsed from `n` to the first item
  of `v`, and raises `ValueError` when `n` is not a 32-bit integer or
  `EmptyVecError` when `v` is empty.

## Concurrency

`toybox-concurrency` runs each asyncio example in turn. The coroutines in
`toybox.concurrency` can be awaited on their own as well. Each `async_fn(n)`
waits `DELAY` seconds, prints `n` and returns it; `example_two`,
`example_three` and `example_four` return the numbers they ran,
`select_example` returns the number that finished first, and
`select_example_two` returns the order in which both finished.

## Address balance

```console
toybox-balance
```

`toybox.balance.get_address_balance(address, endpoint)` is a coroutine that
fetches `<endpoint>/<address>` and returns `chain_stats.funded_txo_sum` minus
`chain_stats.spent_txo_sum`, in satoshis. A missing or non-integer field counts
as zero. A failed request raises an `httpx.HTTPError`, and a body that is not
JSON raises `ValueError`; the command prints either error instead of a balance.