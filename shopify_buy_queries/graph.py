"""Tree builder for GraphQL operations, serialized with graphql-core."""

from __future__ import annotations

import math
from typing import Any, Callable, Dict, List, Optional

from graphql import (
    ArgumentNode,
    BooleanValueNode,
    DocumentNode,
    EnumValueNode,
    FieldNode,
    FloatValueNode,
    InlineFragmentNode,
    IntValueNode,
    ListValueNode,
    NamedTypeNode,
    NameNode,
    NullValueNode,
    ObjectFieldNode,
    ObjectValueNode,
    OperationDefinitionNode,
    OperationType,
    SelectionSetNode,
    StringValueNode,
    ValueNode,
    print_ast,
)

Builder = Callable[["Node"], None]


class EnumValue(str):
    """Argument value printed as a bare enum literal instead of a string."""


def value_to_ast(value: Any) -> ValueNode:
    """Convert a python literal to a GraphQL value node."""
    if value is None:
        return NullValueNode()
    if isinstance(value, EnumValue):
        return EnumValueNode(value=str(value))
    if isinstance(value, bool):
        return BooleanValueNode(value=value)
    if isinstance(value, int):
        return IntValueNode(value=str(value))
    if isinstance(value, float):
        if not math.isfinite(value):
            raise TypeError(f"Cannot convert {value!r} to a GraphQL literal")
        return FloatValueNode(value=repr(value))
    if isinstance(value, str):
        return StringValueNode(value=value, block=False)
    if isinstance(value, dict):
        return ObjectValueNode(
            fields=tuple(
                ObjectFieldNode(name=NameNode(value=key), value=value_to_ast(item))
                for key, item in value.items()
            )
        )
    if isinstance(value, (list, tuple)):
        return ListValueNode(values=tuple(value_to_ast(item) for item in value))
    raise TypeError(f"Cannot convert {type(value).__name__} to a GraphQL literal")


class Node:
    """A selection node: a field, an inline fragment or an operation root."""

    def __init__(
        self,
        name: Optional[str] = None,
        args: Optional[Dict[str, Any]] = None,
        alias: Optional[str] = None,
        type_condition: Optional[str] = None,
    ) -> None:
        self.name = name
        self.args = dict(args or {})
        self.alias = alias
        self.type_condition = type_condition
        self.fields: List[Node] = []
        self.has_selection = False

    def add(
        self,
        name: str,
        callback: Optional[Builder] = None,
        *,
        args: Optional[Dict[str, Any]] = None,
        alias: Optional[str] = None,
    ) -> "Node":
        """Append a field, populating its sub-selection with `callback`."""
        child = Node(name, args=args, alias=alias)
        self.has_selection = True
        self.fields.append(child)
        if callback is not None:
            child.has_selection = True
            callback(child)
        return child

    def add_inline_fragment(self, type_name: str, callback: Builder) -> "Node":
        """Append a `... on Type { }` selection."""
        fragment = Node(type_condition=type_name)
        fragment.has_selection = True
        self.has_selection = True
        self.fields.append(fragment)
        callback(fragment)
        return fragment

    def field_names(self) -> List[str]:
        """Return the names of the direct children, fragments excluded."""
        return [f.name for f in self.fields if f.type_condition is None]

    def get(self, name: str) -> "Node":
        """Return the first direct child with the given name."""
        return next(f for f in self.fields if f.name == name)

    def selection_set(self) -> Optional[SelectionSetNode]:
        """Return the sub-selection, or None for a leaf field."""
        if not self.has_selection:
            return None
        return SelectionSetNode(selections=tuple(f.to_ast() for f in self.fields))

    def to_ast(self):
        """Return the graphql-core node for this selection."""
        if self.type_condition is not None:
            return InlineFragmentNode(
                type_condition=NamedTypeNode(name=NameNode(value=self.type_condition)),
                directives=(),
                selection_set=self.selection_set(),
            )
        return FieldNode(
            alias=NameNode(value=self.alias) if self.alias else None,
            name=NameNode(value=self.name),
            arguments=tuple(
                ArgumentNode(name=NameNode(value=key), value=value_to_ast(value))
                for key, value in self.args.items()
            ),
            directives=(),
            selection_set=self.selection_set(),
        )

    def __repr__(self) -> str:
        label = f"... on {self.type_condition}" if self.type_condition else self.name
        return f"<Node {label} fields={self.field_names()}>"


class Operation:
    """A query or mutation document."""

    def __init__(self, kind: str, callback: Optional[Builder] = None) -> None:
        self.kind = OperationType(kind)
        self.root = Node()
        self.root.has_selection = True
        if callback is not None:
            callback(self.root)

    def to_ast(self) -> DocumentNode:
        """Return the operation wrapped in a document."""
        return DocumentNode(
            definitions=(
                OperationDefinitionNode(
                    operation=self.kind,
                    name=None,
                    variable_definitions=(),
                    directives=(),
                    selection_set=self.root.selection_set(),
                ),
            )
        )

    def __str__(self) -> str:
        """Return the printed document."""
        return print_ast(self.to_ast())


class GraphClient:
    """Entry point for building query and mutation documents."""

    def query(self, callback: Optional[Builder] = None) -> Operation:
        """Build a query document, populating the root with `callback`."""
        return Operation("query", callback)

    def mutation(self, callback: Optional[Builder] = None) -> Operation:
        """Build a mutation document, populating the root with `callback`."""
        return Operation("mutation", callback)
