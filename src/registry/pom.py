"""Project generation through the starter and POM property extraction."""
from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from typing import Dict, Sequence, Union

from common import http_client
from errors import ParseError

logger = logging.getLogger(__name__)


def project_url(starter_url: str, action: str) -> str:
    """Join the starter base URL and an action path."""
    return f"{starter_url}{action}"


def parse_properties(document: Union[bytes, str]) -> Dict[str, str]:
    """Return the <properties> of a POM in document order.

    Tag names are stripped of the POM namespace and values of surrounding
    whitespace; a POM without properties yields an empty mapping.

    Raises:
        ParseError: If document is not well-formed XML.
    """
    try:
        root = ET.fromstring(document)
    except ET.ParseError as exc:
        raise ParseError("project descriptor", f"malformed XML: {exc}") from exc
    ns = root.tag.split("}")[0] + "}" if root.tag.startswith("{") else ""
    properties: Dict[str, str] = {}
    node = root.find(f"{ns}properties")
    if node is None:
        return properties
    for child in node:
        key = child.tag[len(ns):] if ns and child.tag.startswith(ns) else child.tag
        properties[key] = (child.text or "").strip()
    return properties


def generate_properties(config, action: str, boot_version: str, dependencies: Sequence[str]) -> Dict[str, str]:
    """Generate a project for boot_version plus dependencies and read its build properties."""
    url = project_url(config.starter_url, action)
    params = {"BootVersion": boot_version, "dependencies": list(dependencies)}
    logger.info("Generating project from %s", url)
    res = http_client.safe_get(
        url,
        context="starter",
        insecure=config.insecure,
        timeout=config.timeout,
        params=params,
    )
    properties = parse_properties(res.content)
    logger.debug("Project descriptor declares %d properties", len(properties))
    return properties
