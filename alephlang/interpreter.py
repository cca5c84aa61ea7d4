"""Tree-walking evaluator for Aleph programs."""

from __future__ import annotations

import sys
from typing import Iterable, List, Optional, TextIO, Tuple, Union

from .setops import (
    add_front,
    difference,
    element_at,
    first,
    includes,
    intersection,
    last,
    pop,
    push,
    union,
)
from .symtable import ScopeStack
from .syntax import (
    Assign,
    BinaryOp,
    Block,
    Call,
    CollectionLiteral,
    Foreach,
    FunctionDef,
    If,
    Literal,
    Node,
    NodeType,
    Print,
    Ref,
    Return,
    UnaryOp,
    While,
)
from .values import (
    AlephError,
    Bool,
    Int,
    Kind,
    ListValue,
    SetValue,
    Value,
    cardinal,
    compare,
    contains,
    format_value,
    is_equal,
    list_size,
)

_SET_OPERATIONS = {
    NodeType.UNION: union,
    NodeType.INTER: intersection,
    NodeType.DIFF: difference,
}

_ARITHMETIC = frozenset({NodeType.PLUS, NodeType.MINUS, NodeType.TIMES, NodeType.DIVIDE})

_COMPARISONS = frozenset({
    NodeType.EQ, NodeType.NEQ, NodeType.GREATER, NodeType.LESS,
    NodeType.GREATER_EQUAL, NodeType.LESS_EQUAL,
})


class _ReturnSignal(Exception):
    """Carries a returned value out of the statements of a function body."""

    def __init__(self, value: Optional[Value]) -> None:
        super().__init__()
        self.value = value


def _truncating_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def _is_collection(value: object) -> bool:
    return isinstance(value, (ListValue, SetValue))


class Interpreter:
    """Evaluates syntax trees against a stack of scopes.

    A global scope is open from the start. Output of print statements goes
    to ``out``, standard output by default.
    """

    def __init__(self, out: Optional[TextIO] = None) -> None:
        self.out = sys.stdout if out is None else out
        self.scopes = ScopeStack()
        self.scopes.enter()

    def evaluate(self, node: Node) -> Optional[Value]:
        """Evaluate one node; a return outside any function yields its value."""
        try:
            return self._eval(node)
        except _ReturnSignal as signal:
            return signal.value

    def execute(self, program: Union[Node, Iterable[Node]]) -> Optional[Value]:
        """Run a program given as a node or a sequence of statements."""
        if not isinstance(program, Node):
            program = Block(tuple(program))
        return self.evaluate(program)

    def define_function(self, name: str, params: Iterable[str], body: Optional[Node]) -> None:
        """Bind a user function to a name in the scopes."""
        symbol = self.scopes.lookup(name)
        symbol.is_function = True
        symbol.params = tuple(params)
        symbol.body = body
        symbol.value = None
        symbol.kind = None

    def call(self, name: str, args: Iterable[Optional[Value]]) -> Optional[Value]:
        """Call a user function with evaluated arguments and return its result.

        Parameters and arguments are paired in order; surplus ones on either
        side are ignored. A body that does not return gives None.
        """
        args = list(args)
        with self.scopes.scope():
            symbol = self.scopes.find(name)
            if symbol is None:
                raise AlephError(f"undefined function {name!r}")
            if not symbol.is_function:
                raise AlephError(f"{name!r} is not a function")
            for param, arg in zip(symbol.params, args):
                local = self.scopes.add(param)
                local.value = None if arg is None else arg.copy()
                local.kind = None if arg is None else arg.kind
            if symbol.body is None:
                return None
            try:
                self._eval(symbol.body)
            except _ReturnSignal as signal:
                return None if signal.value is None else signal.value.copy()
            return None

    def _eval(self, node: Node) -> Optional[Value]:
        match node:
            case Literal(value=value):
                return value
            case Ref(name=name):
                return self._read(name)
            case CollectionLiteral():
                return self._collection(node)
            case BinaryOp():
                return self._binary(node)
            case UnaryOp():
                return self._unary(node)
            case Assign():
                return self._assign(node)
            case If():
                return self._if(node)
            case While():
                return self._while(node)
            case Foreach():
                return self._foreach(node)
            case Call(name=name, args=args):
                return self.call(name, [self._eval(arg) for arg in args])
            case FunctionDef(name=name, params=params, body=body):
                self.define_function(name, params, body)
                return None
            case Return(value=value):
                raise _ReturnSignal(self._eval(value))
            case Print():
                return self._print(node)
            case Block(statements=statements):
                result = None
                for statement in statements:
                    result = self._eval(statement)
                return result
        raise AlephError("Tipo de nodo desconocido")

    def _read(self, name: str) -> Value:
        symbol = self.scopes.lookup(name)
        if symbol.value is None:
            raise AlephError(f"variable {name!r} has no value")
        return symbol.value.copy()

    def _value(self, node: Node) -> Value:
        value = self._eval(node)
        if value is None:
            raise AlephError("expression has no value")
        return value

    def _collection(self, node: CollectionLiteral) -> Union[ListValue, SetValue]:
        items = [self._value(item) for item in node.items]
        return SetValue(items) if node.kind is Kind.SET else ListValue(items)

    def _assign(self, node: Assign) -> None:
        for target, expr in zip(node.targets, node.values):
            value = self._eval(expr)
            symbol = self.scopes.lookup(target)
            symbol.value = value
            symbol.kind = None if value is None else value.kind
        if len(node.targets) != len(node.values):
            raise AlephError("asignacion desvalanceada")
        return None

    def _binary(self, node: BinaryOp) -> Optional[Value]:
        op = node.op
        if op is NodeType.ADD:
            collection = self._eval(node.right)
            element = self._eval(node.left)
            return self._add(node, element, collection)
        left = self._eval(node.left)
        right = self._eval(node.right)
        if op in _SET_OPERATIONS:
            if not (isinstance(left, SetValue) and isinstance(right, SetValue)):
                raise AlephError("operandos de distinto tipo")
            return _SET_OPERATIONS[op](left, right)
        if op in _ARITHMETIC:
            return self._arithmetic(op, left, right)
        if op in _COMPARISONS:
            return Bool(self._compare(op, left, right))
        if op in (NodeType.AND, NodeType.OR):
            if not (isinstance(left, Bool) and isinstance(right, Bool)):
                raise AlephError("logical operands must be booleans")
            if op is NodeType.AND:
                return Bool(left.value and right.value)
            return Bool(left.value or right.value)
        if op is NodeType.GET:
            if not (_is_collection(left) and isinstance(right, Int)):
                raise AlephError("tipo de operando distinto de conj o lista ")
            return element_at(left, right.value)
        if op is NodeType.PUSH:
            if not isinstance(right, ListValue):
                raise AlephError("operando de tipo invalido")
            if left is None:
                raise AlephError("expression has no value")
            push(right, left)
            return None
        if op is NodeType.MEMBER:
            if not isinstance(right, SetValue):
                raise AlephError("membership needs a set on the right")
            return Bool(contains(right, left))
        if op is NodeType.SUBSET:
            if not isinstance(right, SetValue):
                raise AlephError("inclusion needs a set on the right")
            return Bool(includes(right, left))
        raise AlephError("Tipo de nodo desconocido")

    def _add(self, node: BinaryOp, element: Optional[Value], collection: Optional[Value]):
        if not _is_collection(collection):
            raise AlephError("tipo de operando distinto de conj o lista ")
        if element is None:
            raise AlephError("expression has no value")
        result = add_front(element, collection)
        if isinstance(node.right, Ref):
            symbol = self.scopes.find(node.right.name)
            if symbol is not None:
                symbol.value = result.copy()
                symbol.kind = result.kind
        return result

    @staticmethod
    def _arithmetic(op: NodeType, left: Optional[Value], right: Optional[Value]) -> Int:
        if not (isinstance(left, Int) and isinstance(right, Int)):
            raise AlephError("arithmetic operands must be integers")
        a, b = left.value, right.value
        if op is NodeType.PLUS:
            return Int(a + b)
        if op is NodeType.MINUS:
            return Int(a - b)
        if op is NodeType.TIMES:
            return Int(a * b)
        if b == 0:
            raise AlephError("Division por cero.")
        return Int(_truncating_div(a, b))

    @staticmethod
    def _compare(op: NodeType, left: Optional[Value], right: Optional[Value]) -> bool:
        if op is NodeType.EQ:
            return is_equal(left, right)
        if op is NodeType.NEQ:
            return not is_equal(left, right)
        if op is NodeType.GREATER:
            return compare(left, right) == 1
        if op is NodeType.LESS:
            return compare(left, right) == -1
        if op is NodeType.GREATER_EQUAL:
            return is_equal(left, right) or compare(left, right) == 1
        return is_equal(left, right) or compare(left, right) == -1

    def _unary(self, node: UnaryOp) -> Optional[Value]:
        op = node.op
        value = self._eval(node.operand)
        if op is NodeType.EXPR:
            return value
        if op in (NodeType.FIRST, NodeType.LAST):
            if not _is_collection(value):
                raise AlephError("tipo de operando distinto de conj o lista ")
            return first(value) if op is NodeType.FIRST else last(value)
        if op is NodeType.SIZE:
            if isinstance(value, SetValue):
                return Int(cardinal(value))
            if isinstance(value, ListValue):
                return Int(list_size(value))
            raise AlephError("tipo de operando distinto de conj o lista ")
        if op is NodeType.POP:
            if not isinstance(value, ListValue):
                raise AlephError("operando de tipo invalido")
            return pop(value)
        if op is NodeType.NEGATE:
            if not isinstance(value, Int):
                raise AlephError("operando de tipo invalido para el menos unario")
            return Int(-value.value)
        if op is NodeType.NOT:
            if not isinstance(value, Bool):
                raise AlephError("logical operand must be a boolean")
            return Bool(not value.value)
        raise AlephError("Tipo de nodo desconocido")

    def _condition(self, node: Node) -> bool:
        value = self._eval(node)
        if not isinstance(value, Bool):
            raise AlephError("condition must be a boolean")
        return value.value

    def _if(self, node: If) -> Optional[Value]:
        branch = node.body if self._condition(node.condition) else node.orelse
        return None if branch is None else self._eval(branch)

    def _while(self, node: While) -> Optional[Value]:
        if node.body is None:
            self._condition(node.condition)
            return None
        result = None
        while self._condition(node.condition):
            result = self._eval(node.body)
        return result

    def _foreach(self, node: Foreach) -> None:
        collection = self._eval(node.collection)
        if not _is_collection(collection):
            raise AlephError("El 'foreach' solo puede iterar sobre listas o conjuntos.")
        with self.scopes.scope():
            var = self.scopes.add(node.var)
            for item in collection.copy().items:
                var.value = item.copy()
                var.kind = item.kind
                self._eval(node.body)
        return None

    def _print(self, node: Print) -> Optional[Value]:
        self.out.write("\n")
        target = node.value
        if isinstance(target, Ref):
            symbol = self.scopes.find(target.name)
            if symbol is None:
                raise AlephError("Error: Variable no encontrada en ningun ambito.")
            if symbol.value is None:
                self.out.write("variable vacia")
                return None
            self.out.write(f"{symbol.name}:{format_value(symbol.value)}")
            return symbol.value.copy()
        value = self._eval(target)
        self.out.write(format_value(value))
        return value


def _params(names: Iterable[str]) -> Tuple[str, ...]:
    return tuple(names)


__all__: List[str] = ["Interpreter"]