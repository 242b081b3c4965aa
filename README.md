# prefixcalc

prefixcalc reads an arithmetic expression written in prefix (Polish) notation
and builds an expression tree from it. It prints the value of the expression
and writes the tree as a Graphviz diagram.

## Expression format

An operator comes first and its two operands follow it. Brackets and
whitespace only separate tokens:

```
(+ (* 2 3) (/ 10 4))
```

The operators are `+`, `*` and `/`. A number is a token made only of digits
and dots that holds at least one digit. It is read up to the first character
that no longer forms a valid decimal. Division by zero gives an infinity, or
NaN for `0 / 0`.

## Command line

```
prefixcalc path/to/expression.txt
```

The command echoes the expression to standard error in yellow. It then
writes `graph_N.dot` into the graph directory and prints `result <value>`.
It runs `dot -Tpng` to make `graph_N.png` next to the `.dot` file. If
Graphviz is not installed, that step is logged and skipped. The exit status
is 0 on success and 1 in these cases:

- the file cannot be read;
- the expression ends before it is complete;
- the expression uses an operator the calculator does not know.

Options:

- `--log-file PATH`: the log file. The default is
  `../resources/logger/logger.log`. If the file cannot be opened, the command
  runs without logging.
- `--graph-dir DIR`: where the graph files go. The default is
  `../resources/graph_dump`. The directory must already exist. If it does not,
  the command reports the error and still prints the result.
- `--no-render`: write only the `.dot` file and do not run `dot`.

## Library use

```python
from prefixcalc.tree import parse, evaluate, write_dot

root = parse("(+ (* 2 3) (/ 10 4))")
print(evaluate(root))          # 8.5

with open("tree.dot", "w") as stream:
    write_dot(root, stream)
```

`prefixcalc.tree` also provides the following:

- `tokenize(text)`: yields the tokens of an expression.
- `is_number(token)`: tells whether a token is a number.
- `dump_tree(root, stream)`: writes only the node and edge statements.
- `generate_dot(root, directory, render)`: writes the next numbered
  `graph_N.dot` file into a directory and returns `N`. If `render` is true, it
  also runs Graphviz.

Trees are made of `Node` objects, with fields `type`, `value`, `left`,
`right` and `parent`. `parse` raises `ParseError` (a `ValueError`) when the
input runs out. `evaluate` raises `ValueError` for an unknown operator.

The other modules are these:

- `prefixcalc.logger`: `Logger(filename, min_level, auto_flush)` appends
  timestamped lines to a file. It becomes the current logger, which you can
  read with `get_logger()` and replace with `set_logger()`. Once its file grows
  past 1 MiB, it moves on to `<filename>_N.log`. It works as a context manager.
  `min_level` is stored, but it does not filter messages.
- `prefixcalc.file_data`: provides `read_text`, `count_lines` and
  `split_lines`.
- `prefixcalc.errors`: provides the `TreeErrorCode` values, their messages
  (`errors_messenger`), the `TreeError` exception and `format_error` for
  coloured reports.
- `prefixcalc.colour`: provides the ANSI codes in `Colour` and `paint(text,
  colour)`.

## What it does not do

The calculator has no subtraction, no unary minus and no negative number
literals. It also has no variables or functions. A `-` token is treated as an
unknown operator, so evaluating it fails.

## Tests

```
pip install .[test]
pytest
```