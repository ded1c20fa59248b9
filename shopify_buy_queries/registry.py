"""Lookup of composers by entity name."""

from __future__ import annotations

import logging
from typing import Dict, List

import inflection
from graphql import print_ast
from memoization import cached

from shopify_buy_queries import queries
from shopify_buy_queries.exceptions import UnknownEntity
from shopify_buy_queries.graph import Node
from shopify_buy_queries.selection import add_connection, add_fields

logger = logging.getLogger(__name__)

# type name -> (composer, connection composer, connection field name)
ENTITIES = {
    "Image": (queries.image_query, queries.image_connection_query, "images"),
    "ProductOption": (queries.option_query, None, None),
    "SelectedOption": (queries.selected_option_query, None, None),
    "ProductVariant": (queries.variant_query, queries.variant_connection_query, "variants"),
    "Product": (queries.product_query, queries.product_connection_query, "products"),
    "Collection": (
        queries.collection_query,
        queries.collection_connection_query,
        "collections",
    ),
    "Attribute": (queries.custom_attribute_query, None, None),
    "ShippingRate": (queries.shipping_rate_query, None, None),
    "MailingAddress": (queries.mailing_address_query, None, None),
    "CheckoutLineItem": (
        queries.line_item_query,
        queries.line_item_connection_query,
        "lineItems",
    ),
    "Checkout": (queries.checkout_query, None, None),
}

ALIASES = {
    "Option": "ProductOption",
    "Variant": "ProductVariant",
    "CustomAttribute": "Attribute",
    "LineItem": "CheckoutLineItem",
}


def _lookup_table() -> Dict[str, str]:
    table = {}
    for name in list(ENTITIES) + list(ALIASES):
        type_name = ALIASES.get(name, name)
        table[name] = type_name
        table[inflection.underscore(name)] = type_name
    return table


LOOKUP = _lookup_table()


def entity_names() -> List[str]:
    """Return the registered GraphQL type names."""
    return list(ENTITIES)


def resolve_type_name(name: str) -> str:
    """Map a type name, alias or snake_case name to a registered type name."""
    type_name = LOOKUP.get(name) or LOOKUP.get(inflection.camelize(name))
    if type_name is None:
        raise UnknownEntity(name)
    return type_name


def get_composer(name: str, connection: bool = False):
    """Return the composer registered for `name`.

    Args:
        name: GraphQL type name (``"ProductVariant"``), alias (``"Variant"``)
            or snake_case name (``"product_variant"``).
        connection: Return the paginated connection composer instead.

    Raises:
        UnknownEntity: nothing is registered under `name`, or the entity has
            no connection composer.
    """
    type_name = resolve_type_name(name)
    composer, connection_composer, _ = ENTITIES[type_name]
    if connection:
        if connection_composer is None:
            raise UnknownEntity(f"{type_name} has no connection composer")
        composer = connection_composer
    logger.debug(f"Resolved {name!r} to {type_name} (connection={connection})")
    return composer


def connection_field_name(name: str) -> str:
    """Return the field an entity's connection is selected under, e.g. `variants`."""
    type_name = resolve_type_name(name)
    field_name = ENTITIES[type_name][2]
    if field_name is None:
        raise UnknownEntity(f"{type_name} has no connection composer")
    return field_name


@cached
def default_selection(name: str, connection: bool = False) -> str:
    """Return the printed default selection set of an entity."""
    composer = get_composer(name, connection=connection)
    node = Node()
    node.has_selection = True
    if connection:
        add_connection(
            node,
            connection_field_name(name),
            composer.page_size,
            lambda child: add_fields(child, composer.defaults),
        )
    else:
        add_fields(node, composer.defaults)
    return print_ast(node.selection_set())

