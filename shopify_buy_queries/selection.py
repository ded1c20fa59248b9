"""Field selectors, connection wrappers and the override mechanism.

A composer is invoked with an optional override list and returns an attach
function. The attach function writes the selection under a named field of a
parent `Node`. Override lists replace the defaults wholesale: ``None`` selects
the defaults, ``[]`` selects nothing at all.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, NamedTuple, Optional, Sequence, Tuple, Union

from shopify_buy_queries.exceptions import InvalidFieldSpec
from shopify_buy_queries.graph import Node

ROOT_PAGE_SIZE = 20
NESTED_PAGE_SIZE = 250

GID_PREFIX = "gid://"

Attach = Callable[..., None]


class Leaf(NamedTuple):
    """A scalar or object field selected by name."""

    name: str


class Nested(NamedTuple):
    """A field whose sub-selection is written by another composer."""

    name: str
    composer: Attach


FieldSpec = Union[Leaf, Nested]
FieldEntry = Union[str, FieldSpec, Tuple[str, Attach], Sequence[Any]]


def as_field_spec(entry: Any) -> FieldSpec:
    """Normalize one override entry to a `Leaf` or a `Nested`."""
    if isinstance(entry, (Leaf, Nested)):
        return entry
    if isinstance(entry, str):
        return Leaf(entry)
    if isinstance(entry, (tuple, list)) and len(entry) == 2:
        name, composer = entry
        # composer factories carry `defaults`; only their attach functions nest
        if isinstance(name, str) and callable(composer) and not hasattr(composer, "defaults"):
            return Nested(name, composer)
    raise InvalidFieldSpec(
        f"Expected a field name or a (name, composer) pair, got {entry!r}"
    )


def as_field_specs(entries: Iterable[Any]) -> Tuple[FieldSpec, ...]:
    """Normalize an override list, failing on the first malformed entry."""
    if isinstance(entries, str):
        raise InvalidFieldSpec(f"Expected a list of fields, got the string {entries!r}")
    return tuple(as_field_spec(entry) for entry in entries)


def global_id(type_name: str, id: Any) -> str:
    """Expand a bare id to a storefront global id for `type_name`."""
    id = str(id)
    if id.startswith(GID_PREFIX):
        return id
    return f"gid://shopify/{type_name}/{id}"


def add_fields(node: Node, fields: Iterable[FieldSpec]) -> None:
    """Write each field spec under `node`, in order."""
    for spec in fields:
        if isinstance(spec, Nested):
            spec.composer(node, spec.name)
        else:
            node.add(spec.name)


def field_selector(type_name: str, defaults: Iterable[FieldEntry]):
    """Build the composer for one entity type.

    Args:
        type_name: GraphQL type name, used for inline fragments and global ids.
        defaults: Field specs selected when the caller gives no override.

    Returns:
        A composer ``selector(fields=None) -> attach``. The attach function
        has the signature ``attach(parent, field_name, id=None)``; when `id`
        is given the entity is fetched through a ``node(id:)`` root field.
    """
    default_fields = as_field_specs(defaults)

    def selector(fields: Optional[Iterable[FieldEntry]] = None) -> Attach:
        selected = default_fields if fields is None else as_field_specs(fields)

        def fill(node: Node) -> None:
            add_fields(node, selected)

        def attach(parent: Node, field_name: str, id: Any = None) -> None:
            if id is None:
                parent.add(field_name, fill)
                return

            def by_id(node: Node) -> None:
                node.add("__typename")
                node.add_inline_fragment(type_name, fill)

            parent.add(field_name, by_id, args={"id": global_id(type_name, id)})

        attach.type_name = type_name
        attach.fields = selected
        return attach

    selector.type_name = type_name
    selector.defaults = default_fields
    return selector


def add_connection(
    parent: Node,
    field_name: str,
    page_size: int,
    fill_node: Callable[[Node], None],
) -> Node:
    """Write a Relay connection with a fixed pageInfo/edges wrapper."""

    def page_info(node: Node) -> None:
        node.add("hasNextPage")
        node.add("hasPreviousPage")

    def edges(node: Node) -> None:
        node.add("cursor")
        node.add("node", fill_node)

    def connection(node: Node) -> None:
        node.add("pageInfo", page_info)
        node.add("edges", edges)

    return parent.add(field_name, connection, args={"first": page_size})


def connection_selector(selector, page_size: int = NESTED_PAGE_SIZE):
    """Wrap an entity composer in a paginated connection.

    The returned composer takes the same override list as `selector` and
    returns ``attach(parent, field_name, page_size=None)``.
    """
    default_page_size = page_size

    def connection(fields: Optional[Iterable[FieldEntry]] = None) -> Attach:
        entity = selector(fields)

        def fill(node: Node) -> None:
            add_fields(node, entity.fields)

        def attach(parent: Node, field_name: str, page_size: Optional[int] = None) -> None:
            if page_size is None:
                page_size = default_page_size
            add_connection(parent, field_name, page_size, fill)

        attach.type_name = selector.type_name
        attach.fields = entity.fields
        attach.page_size = default_page_size
        return attach

    connection.type_name = selector.type_name
    connection.defaults = selector.defaults
    connection.page_size = default_page_size
    return connection
