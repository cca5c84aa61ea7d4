"""Syntax tree of Aleph programs."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import ClassVar, Optional, Tuple

from .values import Atom, Bool, Int, Kind


class NodeType(enum.IntEnum):
    """Tag of every syntax-tree node and every operator."""

    ELEM = 1
    SET = 2
    LIST = 3
    BOOL = 4
    LIST_EXPR = 5
    EXPR = 6
    UNION = 7
    INTER = 8
    DIFF = 9
    ID_REF = 10
    ASSIGN = 11
    LIST_ID = 12
    FIRST = 13
    ADD = 14
    LAST = 15
    SIZE = 16
    LIST_STMT = 17
    PRINT = 18
    INT = 19
    EQ = 20
    NEQ = 21
    GREATER = 22
    LESS = 23
    GREATER_EQUAL = 24
    LESS_EQUAL = 25
    MEMBER = 26
    SUBSET = 27
    IF = 28
    WHILE = 29
    FOREACH = 30
    FNCALL = 31
    FN = 32
    RETURN = 33
    GET = 34
    POP = 35
    PUSH = 36
    AND = 37
    OR = 38
    NOT = 39
    TIMES = ord("*")
    PLUS = ord("+")
    MINUS = ord("-")
    DIVIDE = ord("/")
    NEGATE = ord("u")


BINARY_OPERATORS = frozenset({
    NodeType.UNION, NodeType.INTER, NodeType.DIFF, NodeType.ADD,
    NodeType.GET, NodeType.PUSH, NodeType.PLUS, NodeType.MINUS,
    NodeType.TIMES, NodeType.DIVIDE, NodeType.AND, NodeType.OR,
    NodeType.EQ, NodeType.NEQ, NodeType.GREATER, NodeType.LESS,
    NodeType.GREATER_EQUAL, NodeType.LESS_EQUAL, NodeType.MEMBER,
    NodeType.SUBSET,
})
"""Operators that take a left and a right operand."""

UNARY_OPERATORS = frozenset({
    NodeType.FIRST, NodeType.LAST, NodeType.SIZE, NodeType.POP,
    NodeType.NOT, NodeType.NEGATE, NodeType.EXPR,
})
"""Operators that take a single operand."""


def _as_node(value: object, role: str) -> "Node":
    if not isinstance(value, Node):
        raise TypeError(f"{role} must be a syntax node, not {type(value).__name__}")
    return value


def _nodes(values, role: str) -> Tuple["Node", ...]:
    return tuple(_as_node(value, role) for value in values)


def _name(value: object, role: str) -> str:
    if not isinstance(value, str) or not value:
        raise TypeError(f"{role} must be a non-empty string")
    return value


class Node:
    """Base of all syntax-tree nodes."""

    __slots__ = ()
    node_type: ClassVar[NodeType]


@dataclass(frozen=True)
class Literal(Node):
    """A constant atom, integer or boolean."""

    value: object

    def __post_init__(self) -> None:
        if not isinstance(self.value, (Atom, Int, Bool)):
            raise TypeError("a literal holds an atom, an integer or a boolean")

    @property
    def node_type(self) -> NodeType:  # type: ignore[override]
        return NodeType(int(self.value.kind))


@dataclass(frozen=True)
class Ref(Node):
    """A reference to a named variable."""

    name: str
    node_type: ClassVar[NodeType] = NodeType.ID_REF

    def __post_init__(self) -> None:
        _name(self.name, "a variable name")


@dataclass(frozen=True)
class CollectionLiteral(Node):
    """A set or list written out element by element."""

    kind: Kind
    items: Tuple[Node, ...] = ()

    def __post_init__(self) -> None:
        if self.kind not in (Kind.SET, Kind.LIST):
            raise ValueError("a collection literal is a set or a list")
        object.__setattr__(self, "items", _nodes(self.items, "a collection item"))

    @property
    def node_type(self) -> NodeType:  # type: ignore[override]
        return NodeType(int(self.kind))


@dataclass(frozen=True)
class BinaryOp(Node):
    """An operator applied to two operands."""

    op: NodeType
    left: Node
    right: Node

    def __post_init__(self) -> None:
        op = NodeType(self.op)
        if op not in BINARY_OPERATORS:
            raise ValueError(f"{op.name} is not a binary operator")
        object.__setattr__(self, "op", op)
        _as_node(self.left, "the left operand")
        _as_node(self.right, "the right operand")

    @property
    def node_type(self) -> NodeType:  # type: ignore[override]
        return self.op


@dataclass(frozen=True)
class UnaryOp(Node):
    """An operator applied to one operand."""

    op: NodeType
    operand: Node

    def __post_init__(self) -> None:
        op = NodeType(self.op)
        if op not in UNARY_OPERATORS:
            raise ValueError(f"{op.name} is not a unary operator")
        object.__setattr__(self, "op", op)
        _as_node(self.operand, "the operand")

    @property
    def node_type(self) -> NodeType:  # type: ignore[override]
        return self.op


@dataclass(frozen=True)
class Assign(Node):
    """Parallel assignment of values to names: a, b = 1, 2.

    The counts may differ; the pairs are assigned in order and the
    imbalance is reported when the statement runs.
    """

    targets: Tuple[str, ...]
    values: Tuple[Node, ...]
    node_type: ClassVar[NodeType] = NodeType.ASSIGN

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "targets", tuple(_name(t, "an assignment target") for t in self.targets)
        )
        object.__setattr__(self, "values", _nodes(self.values, "an assigned value"))


@dataclass(frozen=True)
class If(Node):
    """A conditional with an optional else branch."""

    condition: Node
    body: Optional[Node] = None
    orelse: Optional[Node] = None
    node_type: ClassVar[NodeType] = NodeType.IF

    def __post_init__(self) -> None:
        _as_node(self.condition, "the condition")
        if self.body is not None:
            _as_node(self.body, "the body")
        if self.orelse is not None:
            _as_node(self.orelse, "the else branch")


@dataclass(frozen=True)
class While(Node):
    """A loop that runs its body while the condition holds."""

    condition: Node
    body: Optional[Node] = None
    node_type: ClassVar[NodeType] = NodeType.WHILE

    def __post_init__(self) -> None:
        _as_node(self.condition, "the condition")
        if self.body is not None:
            _as_node(self.body, "the body")


@dataclass(frozen=True)
class Foreach(Node):
    """A loop binding a variable to each element of a set or list."""

    var: str
    collection: Node
    body: Node
    node_type: ClassVar[NodeType] = NodeType.FOREACH

    def __post_init__(self) -> None:
        _name(self.var, "the loop variable")
        _as_node(self.collection, "the collection")
        _as_node(self.body, "the body")


@dataclass(frozen=True)
class Call(Node):
    """A call of a user-defined function."""

    name: str
    args: Tuple[Node, ...] = ()
    node_type: ClassVar[NodeType] = NodeType.FNCALL

    def __post_init__(self) -> None:
        _name(self.name, "a function name")
        object.__setattr__(self, "args", _nodes(self.args, "an argument"))


@dataclass(frozen=True)
class FunctionDef(Node):
    """The definition of a user function."""

    name: str
    params: Tuple[str, ...]
    body: Optional[Node] = None
    node_type: ClassVar[NodeType] = NodeType.FN

    def __post_init__(self) -> None:
        _name(self.name, "a function name")
        object.__setattr__(
            self, "params", tuple(_name(p, "a parameter name") for p in self.params)
        )
        if self.body is not None:
            _as_node(self.body, "the body")


@dataclass(frozen=True)
class Return(Node):
    """A return statement carrying a value."""

    value: Node
    node_type: ClassVar[NodeType] = NodeType.RETURN

    def __post_init__(self) -> None:
        _as_node(self.value, "the returned value")


@dataclass(frozen=True)
class Print(Node):
    """A print statement."""

    value: Node
    node_type: ClassVar[NodeType] = NodeType.PRINT

    def __post_init__(self) -> None:
        _as_node(self.value, "the printed value")


@dataclass(frozen=True)
class Block(Node):
    """A sequence of statements run in order."""

    statements: Tuple[Node, ...] = ()
    node_type: ClassVar[NodeType] = NodeType.LIST_STMT

    def __post_init__(self) -> None:
        object.__setattr__(self, "statements", _nodes(self.statements, "a statement"))

    def __len__(self) -> int:
        return len(self.statements)

    def __iter__(self):
        return iter(self.statements)