"""Client configuration."""

from __future__ import annotations

from typing import Any, Mapping, Optional

import inflection
from jsonschema import Draft7Validator
from singer_sdk import typing as th

from shopify_buy_queries.exceptions import InvalidConfig

config_jsonschema = th.PropertiesList(
    th.Property(
        "domain",
        th.StringType,
        required=True,
        description="The shop domain, e.g. 'my-shop.myshopify.com'.",
    ),
    th.Property(
        "storefront_access_token",
        th.StringType,
        required=True,
        secret=True,
        description="The storefront access token of the shop.",
    ),
    th.Property(
        "api_version",
        th.StringType,
        description="The storefront API version, e.g. '2023-10'.",
    ),
).to_dict()


class Config:
    """Validated storefront client configuration."""

    def __init__(
        self,
        domain: str,
        storefront_access_token: str,
        api_version: Optional[str] = None,
    ) -> None:
        values = {
            "domain": domain,
            "storefront_access_token": storefront_access_token,
        }
        if api_version is not None:
            values["api_version"] = api_version
        self.validate(values)
        self.domain = domain
        self.storefront_access_token = storefront_access_token
        self.api_version = api_version

    @staticmethod
    def validate(values: Mapping[str, Any]) -> None:
        """Raise InvalidConfig with every schema violation in `values`."""
        validator = Draft7Validator(config_jsonschema)
        errors = sorted(validator.iter_errors(dict(values)), key=lambda e: list(e.path))
        if errors:
            raise InvalidConfig("; ".join(e.message for e in errors))

    @classmethod
    def from_dict(cls, mapping: Mapping[str, Any]) -> "Config":
        """Build a config from snake_case or camelCase keys."""
        values = {inflection.underscore(k): v for k, v in mapping.items()}
        unknown = sorted(set(values) - set(config_jsonschema["properties"]))
        if unknown:
            raise InvalidConfig(f"Unknown config keys: {', '.join(unknown)}")
        cls.validate(values)
        return cls(**values)

    @property
    def api_url(self) -> str:
        """Return the storefront GraphQL endpoint."""
        if self.api_version:
            return f"https://{self.domain}/api/{self.api_version}/graphql.json"
        return f"https://{self.domain}/api/graphql"

    def __repr__(self) -> str:
        return f"Config(domain={self.domain!r}, api_version={self.api_version!r})"
