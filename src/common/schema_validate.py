"""JSON Schema validation helpers for the metadata payloads.

Wraps jsonschema Draft7 validation so wire documents are checked at the
boundary before they are turned into catalog objects.
"""

from __future__ import annotations

from typing import Any, Dict

from jsonschema import Draft7Validator
from jsonschema.exceptions import best_match

from errors import ParseError


def validate_payload(schema: Dict[str, Any], data: Any, *, source: str) -> None:
    """Validate data strictly and raise on the most relevant error.

    Args:
        schema: Draft-07 JSON Schema dict.
        data:   Decoded payload to validate.
        source: Payload name used in the error message.

    Raises:
        ParseError: If data does not conform to schema.
    """
    validator = Draft7Validator(schema)
    error = best_match(validator.iter_errors(data))
    if error is not None:
        path = "/".join(str(p) for p in error.absolute_path)
        raise ParseError(source, f"at '{path}': {error.message}")
