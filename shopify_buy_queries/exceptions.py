"""Exceptions for shopify-buy-queries."""


class InvalidFieldSpec(TypeError, ValueError):
    """Override entry is neither a field name nor a (name, composer) pair."""


class InvalidConfig(ValueError):
    """Client configuration failed validation."""


class UnknownEntity(KeyError):
    """No composer is registered under the given name."""
