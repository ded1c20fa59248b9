"""Storefront client: builds query and mutation documents from the composers."""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Optional

from shopify_buy_queries.config import Config
from shopify_buy_queries.graph import GraphClient, Node, Operation
from shopify_buy_queries.queries import (
    checkout_query,
    collection_connection_query,
    collection_query,
    product_connection_query,
    product_query,
)

logger = logging.getLogger(__name__)


class Client:
    """Shopify storefront client."""

    def __init__(self, config: Config, graphql_client: Optional[GraphClient] = None) -> None:
        self.config = config
        self.graphql_client = graphql_client or GraphClient()

    def _built(self, operation: Operation) -> Operation:
        logger.debug(f"Built {operation.kind.value} for {self.config.domain}:\n{operation}")
        return operation

    def products_query(
        self, fields: Optional[Iterable[Any]] = None, page_size: Optional[int] = None
    ) -> Operation:
        """Return a query for the shop's products connection."""
        products = product_connection_query(fields)

        def shop(node: Node) -> None:
            products(node, "products", page_size)

        return self._built(self.graphql_client.query(lambda root: root.add("shop", shop)))

    def product_query(self, id: Any, fields: Optional[Iterable[Any]] = None) -> Operation:
        """Return a query for one product by global id."""
        product = product_query(fields)
        return self._built(self.graphql_client.query(lambda root: product(root, "node", id)))

    def collections_query(
        self, fields: Optional[Iterable[Any]] = None, page_size: Optional[int] = None
    ) -> Operation:
        """Return a query for the shop's collections connection."""
        collections = collection_connection_query(fields)

        def shop(node: Node) -> None:
            collections(node, "collections", page_size)

        return self._built(self.graphql_client.query(lambda root: root.add("shop", shop)))

    def collection_query(self, id: Any, fields: Optional[Iterable[Any]] = None) -> Operation:
        """Return a query for one collection by global id."""
        collection = collection_query(fields)
        return self._built(
            self.graphql_client.query(lambda root: collection(root, "node", id))
        )

    def checkout_query(self, id: Any, fields: Optional[Iterable[Any]] = None) -> Operation:
        """Return a query for one checkout by global id."""
        checkout = checkout_query(fields)
        return self._built(self.graphql_client.query(lambda root: checkout(root, "node", id)))

    def checkout_create_mutation(
        self, input: Dict[str, Any], fields: Optional[Iterable[Any]] = None
    ) -> Operation:
        """Return a checkoutCreate mutation selecting the created checkout."""
        checkout = checkout_query(fields)

        def checkout_create(node: Node) -> None:
            checkout(node, "checkout")

        return self._built(
            self.graphql_client.mutation(
                lambda root: root.add("checkoutCreate", checkout_create, args={"input": input})
            )
        )
