# alephlang

An evaluator for Aleph, a small language whose values are atoms, integers,
booleans, lists and sets. Programs are syntax trees built from the node
classes in `alephlang.syntax` and run by `alephlang.interpreter.Interpreter`.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Example

```python
import io

from alephlang.interpreter import Interpreter
from alephlang.syntax import (
    Assign, BinaryOp, Call, CollectionLiteral, FunctionDef, Literal,
    NodeType, Print, Ref, Return,
)
from alephlang.values import Atom, Int, Kind

out = io.StringIO()
interpreter = Interpreter(out)

result = interpreter.execute([
    Assign(("s",), (CollectionLiteral(Kind.SET, (Literal(Atom("a")), Literal(Atom("b")))),)),
    Print(Ref("s")),
    Print(BinaryOp(NodeType.UNION, Ref("s"), CollectionLiteral(Kind.SET, (Literal(Atom("c")),)))),
    FunctionDef("double", ("x",), Return(BinaryOp(NodeType.TIMES, Ref("x"), Literal(Int(2))))),
    Call("double", (Literal(Int(21)),)),
])

assert out.getvalue() == "\ns:{a,b}\n{a,b,c}"
assert result == Int(42)
```

## The pieces

### Values — `alephlang.values`

- `Atom`, `Int`, `Bool`, `ListValue` and `SetValue` are the runtime values;
  each has a `kind` from the `Kind` enumeration and a `copy()` method.
  Sets keep their elements in insertion order.
- `is_equal(a, b)` is the language's equality: atoms and integers by value,
  lists element by element, sets by membership regardless of order.
  Booleans never compare equal, and empty sets are not equal to each other.
- `compare(a, b)` returns 1, -1 or 0: integers by value, lists and sets by
  size; for atoms it returns 1 when `a` sorts after `b` and 0 otherwise.
- `cardinal(value)` and `list_size(value)` give the size of a set or a list,
  or -1 for any other value.
- `contains(collection, element)` tests set membership; only sets have
  members, and booleans are never found.
- `format_value(value)` renders a value the way `print` shows it:
  `[a,b]` for lists, `{a,b}` for sets, `true`/`false` for booleans.
- `AlephError` is raised wherever a program cannot be evaluated.

### Set and list operations — `alephlang.setops`

`union`, `intersection`, `difference` and `includes` work on sets;
`first`, `last`, `add_front` and `element_at` work on sets and lists;
`push` and `pop` work on lists. `first`, `last`, `pop` and `element_at`
return `None` when there is no such element. Operands of the wrong kind raise
`AlephError`. Results are new values: the operands are left as they were,
except that `push` and `pop` change the list they are given.

### Scopes — `alephlang.symtable`

`ScopeStack` holds one table of `Symbol` entries per scope. It starts with
no scope open. `enter` and `exit` open and close a scope (`scope` does both
as a context manager), `add` declares a name in the innermost scope and
raises `AlephError` on a redeclaration there, `find` searches from the
innermost scope outward, `lookup` finds a name or declares it, and `dump`
returns a listing of every scope for debugging.

### Syntax — `alephlang.syntax`

Node classes for every construct of the language: `Literal`, `Ref`,
`CollectionLiteral`, `BinaryOp`, `UnaryOp`, `Assign`, `If`, `While`,
`Foreach`, `Call`, `FunctionDef`, `Return`, `Print` and `Block`, with
`NodeType` naming the operators. Nodes are immutable and check their fields
when built.

### Running programs — `alephlang.interpreter`

`Interpreter(out)` opens a global scope; `print` output goes to `out`
(standard output by default).

- `execute(program)` runs a node or a sequence of statements and returns the
  value of the last one.
- `evaluate(node)` evaluates one node and returns its value; a `Return`
  outside any function gives its value.
- `define_function(name, params, body)` binds a user function to a name.
- `call(name, args)` calls a user function in a fresh scope with already
  evaluated arguments and returns the value it returned, or `None`.

Each `print` writes a newline and then the value; printing a variable writes
`name:value`, or `variable vacia` when it has no value.

## What it does not do

The package has no parser: it does not read Aleph program text, and there
is no command to run program files. Programs must be assembled from the
syntax node classes in Python.