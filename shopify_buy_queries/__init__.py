"""Field-selection composers for the Shopify storefront GraphQL API."""

from shopify_buy_queries.client import Client
from shopify_buy_queries.config import Config
from shopify_buy_queries.exceptions import InvalidConfig, InvalidFieldSpec, UnknownEntity
from shopify_buy_queries.graph import EnumValue, GraphClient, Node, Operation
from shopify_buy_queries.queries import (
    checkout_query,
    collection_connection_query,
    collection_query,
    custom_attribute_query,
    image_connection_query,
    image_query,
    line_item_connection_query,
    line_item_query,
    mailing_address_query,
    option_query,
    product_connection_query,
    product_query,
    selected_option_query,
    shipping_rate_query,
    variant_connection_query,
    variant_query,
)
from shopify_buy_queries.registry import (
    connection_field_name,
    default_selection,
    entity_names,
    get_composer,
)
from shopify_buy_queries.selection import (
    NESTED_PAGE_SIZE,
    ROOT_PAGE_SIZE,
    Leaf,
    Nested,
    connection_selector,
    field_selector,
    global_id,
)
