"""Spring Boot release metadata client."""
from __future__ import annotations

import logging
from typing import Any

from common import http_client
from common.schema_validate import validate_payload
from versioning.models import Release, ReleaseCatalog

logger = logging.getLogger(__name__)

RELEASES_SCHEMA = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "type": "object",
    "required": ["_embedded"],
    "properties": {
        "_embedded": {
            "type": "object",
            "required": ["releases"],
            "properties": {
                "releases": {
                    "type": "array",
                    "items": {
                        "type": "object",
                        "required": ["version"],
                        "properties": {
                            "version": {"type": "string"},
                            "current": {"type": "boolean"},
                        },
                    },
                },
            },
        },
    },
}


def parse_releases(payload: Any) -> ReleaseCatalog:
    """Validate the release list document and build the catalog.

    Raises:
        ParseError: If the document does not match RELEASES_SCHEMA.
    """
    validate_payload(RELEASES_SCHEMA, payload, source="spring-boot metadata")
    return ReleaseCatalog(
        Release(version=item["version"], is_current=item.get("current", False))
        for item in payload["_embedded"]["releases"]
    )


def fetch_releases(config) -> ReleaseCatalog:
    """Fetch the Spring Boot release catalog from config.boot_url."""
    logger.info("Fetching Spring Boot metadata from %s", config.boot_url)
    payload = http_client.get_json(
        config.boot_url,
        context="spring-boot",
        insecure=config.insecure,
        timeout=config.timeout,
    )
    catalog = parse_releases(payload)
    logger.debug("Loaded %d spring-boot releases", len(catalog))
    return catalog
