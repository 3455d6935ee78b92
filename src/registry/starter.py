"""Spring Initializr (starter) metadata client and project type lookup."""
from __future__ import annotations

import logging
from typing import Any

from constants import Constants
from common import http_client
from common.schema_validate import validate_payload
from errors import TypeNotFound
from versioning.models import TypeCatalog, TypeEntry

logger = logging.getLogger(__name__)

STARTER_SCHEMA = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "type": "object",
    "required": ["type"],
    "properties": {
        "type": {
            "type": "object",
            "required": ["values"],
            "properties": {
                "values": {
                    "type": "array",
                    "items": {
                        "type": "object",
                        "required": ["id", "action"],
                        "properties": {
                            "id": {"type": "string"},
                            "name": {"type": "string"},
                            "action": {"type": "string"},
                        },
                    },
                },
            },
        },
    },
}


def parse_types(payload: Any) -> TypeCatalog:
    """Validate the starter metadata document and build the type catalog.

    Raises:
        ParseError: If the document does not match STARTER_SCHEMA.
    """
    validate_payload(STARTER_SCHEMA, payload, source="starter metadata")
    return TypeCatalog(
        TypeEntry(id=item["id"], action=item["action"], name=item.get("name"))
        for item in payload["type"]["values"]
    )


def fetch_types(config) -> TypeCatalog:
    """Fetch the project types offered by config.starter_url."""
    logger.info("Fetching Starter metadata from %s", config.starter_url)
    payload = http_client.get_json(
        config.starter_url,
        context="starter",
        insecure=config.insecure,
        timeout=config.timeout,
        headers={"Accept": Constants.STARTER_METADATA_ACCEPT},
    )
    return parse_types(payload)


def resolve_action(type_id: str, catalog: TypeCatalog) -> str:
    """Return the action of the first type whose id equals type_id (case-sensitive).

    Raises:
        TypeNotFound: If no type has that id.
    """
    for entry in catalog:
        if entry.id == type_id:
            return entry.action
    raise TypeNotFound(type_id, catalog.ids())
