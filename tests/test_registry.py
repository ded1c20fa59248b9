"""Composer lookup by entity name."""

import pytest

from shopify_buy_queries import (
    UnknownEntity,
    default_selection,
    entity_names,
    get_composer,
    line_item_connection_query,
    variant_query,
)
from shopify_buy_queries.registry import ENTITIES, connection_field_name
from tests.conftest import squash


@pytest.mark.parametrize("name", ["ProductVariant", "product_variant", "Variant", "variant"])
def test_lookup_by_type_alias_or_snake_case(name):
    """All name forms resolve to the same composer."""
    assert get_composer(name) is variant_query


def test_connection_lookup():
    """Connection composers are looked up separately."""
    assert get_composer("line_item", connection=True) is line_item_connection_query


def test_entity_without_connection():
    """Entities without a connection raise UnknownEntity."""
    with pytest.raises(UnknownEntity):
        get_composer("Checkout", connection=True)
    with pytest.raises(UnknownEntity):
        connection_field_name("Checkout")


def test_unknown_entity():
    """Unregistered names raise UnknownEntity."""
    with pytest.raises(UnknownEntity):
        get_composer("Customer")


def test_registered_entities():
    """Every storefront entity is registered."""
    assert set(entity_names()) >= {
        "Product",
        "Collection",
        "ProductVariant",
        "Image",
        "Checkout",
        "MailingAddress",
        "ShippingRate",
        "Attribute",
        "CheckoutLineItem",
        "ProductOption",
    }


@pytest.mark.parametrize(
    "name, expected",
    [
        ("Image", "{ id src altText }"),
        ("Option", "{ id name values }"),
        ("ShippingRate", "{ handle price title }"),
        ("CustomAttribute", "{ key value }"),
        ("Collection", "{ id handle updatedAt title image { id src altText } }"),
    ],
)
def test_default_selection(name, expected):
    """Printed default selections."""
    assert squash(default_selection(name)) == squash(expected)


def test_default_connection_selection():
    """Printed default connection selection."""
    expected = """{
      images(first: 250) {
        pageInfo { hasNextPage hasPreviousPage }
        edges { cursor node { id src altText } }
      }
    }"""

    assert squash(default_selection("image", connection=True)) == squash(expected)


@pytest.mark.parametrize(
    "name, field_name, page_size",
    [
        ("Image", "images", 250),
        ("ProductVariant", "variants", 250),
        ("CheckoutLineItem", "lineItems", 250),
        ("Product", "products", 20),
        ("Collection", "collections", 20),
    ],
)
def test_connection_selection_uses_relation_field(name, field_name, page_size):
    """Connections print under the field the parent type exposes."""
    assert connection_field_name(name) == field_name
    assert squash(default_selection(name, connection=True)).startswith(
        f"{{{field_name}(first:{page_size}){{pageInfo{{hasNextPagehasPreviousPage}}edges{{cursornode{{"
    )


def test_every_connection_entity_is_covered():
    """Connection entities listed in the registry."""
    with_connections = {n for n, entry in ENTITIES.items() if entry[1] is not None}

    assert with_connections == {
        "Image", "ProductVariant", "CheckoutLineItem", "Product", "Collection"
    }


def test_default_selection_is_memoized():
    """Repeated lookups return the cached text."""
    assert default_selection("Product") is default_selection("Product")
