"""Tree builder and literal conversion."""

import pytest
from graphql import print_ast

from shopify_buy_queries import EnumValue, GraphClient, Node
from shopify_buy_queries.graph import value_to_ast
from tests.conftest import squash


def test_nested_literals():
    """Objects, lists, enums and scalars nest."""
    value = {"a": [1, True, None, 1.5, EnumValue("ASC")], "b": {"c": "d"}}

    assert squash(print_ast(value_to_ast(value))) == '{a:[1truenull1.5ASC]b:{c:"d"}}'


def test_strings_are_escaped():
    """Quotes are escaped."""
    assert print_ast(value_to_ast('say "hi"')) == '"say \\"hi\\""'


def test_unsupported_literal():
    """Arbitrary objects cannot be literals."""
    with pytest.raises(TypeError):
        value_to_ast(object())


def test_add_returns_child_and_runs_callback():
    """add() returns the child after populating it."""
    root = Node()
    shop = root.add("shop", lambda node: node.add("name"))

    assert root.field_names() == ["shop"]
    assert shop.field_names() == ["name"]
    assert root.get("shop") is shop


def test_alias_and_arguments():
    """Aliases and arguments are printed."""
    query = GraphClient().query(
        lambda root: root.add("products", alias="first", args={"first": 1, "reverse": True})
    )

    assert squash(str(query)) == "{first:products(first:1reverse:true)}"


def test_mutation_keyword():
    """Mutations keep their keyword."""
    mutation = GraphClient().mutation(lambda root: root.add("customerCreate", lambda n: n.add("id")))

    assert squash(str(mutation)) == "mutation{customerCreate{id}}"


def test_inline_fragment():
    """Inline fragments print with their type condition."""
    query = GraphClient().query(
        lambda root: root.add(
            "node",
            lambda node: node.add_inline_fragment("Shop", lambda shop: shop.add("name")),
            args={"id": "x"},
        )
    )

    assert squash(str(query)) == '{node(id:"x"){...onShop{name}}}'


@pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
def test_non_finite_floats_are_rejected(value):
    """NaN and infinities have no GraphQL literal."""
    with pytest.raises(TypeError):
        value_to_ast(value)
