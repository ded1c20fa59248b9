"""Default field lists and composers for the storefront entities."""

from __future__ import annotations

from shopify_buy_queries.selection import (
    NESTED_PAGE_SIZE,
    ROOT_PAGE_SIZE,
    connection_selector,
    field_selector,
)

IMAGE_FIELDS = ("id", "src", "altText")

image_query = field_selector("Image", IMAGE_FIELDS)
image_connection_query = connection_selector(image_query, NESTED_PAGE_SIZE)

OPTION_FIELDS = ("id", "name", "values")

option_query = field_selector("ProductOption", OPTION_FIELDS)

SELECTED_OPTION_FIELDS = ("name", "value")

selected_option_query = field_selector("SelectedOption", SELECTED_OPTION_FIELDS)

VARIANT_FIELDS = (
    "id",
    "title",
    "price",
    "weight",
    ("image", image_query()),
    ("selectedOptions", selected_option_query()),
)

variant_query = field_selector("ProductVariant", VARIANT_FIELDS)
variant_connection_query = connection_selector(variant_query, NESTED_PAGE_SIZE)

PRODUCT_FIELDS = (
    "id",
    "createdAt",
    "updatedAt",
    "descriptionHtml",
    "descriptionPlainSummary",
    "handle",
    "productType",
    "title",
    "vendor",
    "tags",
    "publishedAt",
    ("options", option_query()),
    ("images", image_connection_query()),
    ("variants", variant_connection_query()),
)

product_query = field_selector("Product", PRODUCT_FIELDS)
product_connection_query = connection_selector(product_query, ROOT_PAGE_SIZE)

COLLECTION_FIELDS = (
    "id",
    "handle",
    "updatedAt",
    "title",
    ("image", image_query()),
)

collection_query = field_selector("Collection", COLLECTION_FIELDS)
collection_connection_query = connection_selector(collection_query, ROOT_PAGE_SIZE)

CUSTOM_ATTRIBUTE_FIELDS = ("key", "value")

custom_attribute_query = field_selector("Attribute", CUSTOM_ATTRIBUTE_FIELDS)

SHIPPING_RATE_FIELDS = ("handle", "price", "title")

shipping_rate_query = field_selector("ShippingRate", SHIPPING_RATE_FIELDS)

MAILING_ADDRESS_FIELDS = (
    "address1",
    "address2",
    "city",
    "company",
    "country",
    "firstName",
    "formatted",
    "lastName",
    "latitude",
    "longitude",
    "phone",
    "province",
    "zip",
    "name",
    "countryCode",
    "provinceCode",
    "id",
)

mailing_address_query = field_selector("MailingAddress", MAILING_ADDRESS_FIELDS)

LINE_ITEM_FIELDS = (
    "title",
    ("variant", variant_query()),
    "quantity",
    ("customAttributes", custom_attribute_query()),
)

line_item_query = field_selector("CheckoutLineItem", LINE_ITEM_FIELDS)
line_item_connection_query = connection_selector(line_item_query, NESTED_PAGE_SIZE)

CHECKOUT_FIELDS = (
    "id",
    "ready",
    "note",
    "createdAt",
    "updatedAt",
    "requiresShipping",
    ("customAttributes", custom_attribute_query()),
    ("shippingLine", shipping_rate_query()),
    ("shippingAddress", mailing_address_query()),
    ("lineItems", line_item_connection_query()),
)

checkout_query = field_selector("Checkout", CHECKOUT_FIELDS)
