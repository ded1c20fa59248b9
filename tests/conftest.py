"""Shared fixtures for the query composer tests."""

import re

import pytest

from shopify_buy_queries import Client, Config

SAMPLE_CONFIG = {
    "domain": "sendmecats.myshopify.com",
    "storefrontAccessToken": "abc123",
}


def squash(text: str) -> str:
    """Drop whitespace and commas so printed documents compare by tokens."""
    squashed = re.sub(r"[\s,]+", "", text)
    # anonymous queries may print with or without the keyword
    return re.sub(r"^query(?=\{)", "", squashed)


@pytest.fixture
def client():
    return Client(Config.from_dict(SAMPLE_CONFIG))


@pytest.fixture
def graphql_client(client):
    return client.graphql_client
