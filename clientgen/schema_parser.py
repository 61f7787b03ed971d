"""Resolve schema references and summarize property types.

Handles:
- $ref resolution against components.schemas (one hop)
- Type summaries for formats, refs, oneOf unions and arrays
- Property documentation for JSON request bodies

Nothing here raises on missing data: an unresolved reference or a property
without type information degrades to "no documentation" or "unknown".
"""

from __future__ import annotations

import logging

from .models import Components, RequestBody, Schema

logger = logging.getLogger(__name__)

JSON_MEDIA_TYPE = "application/json"
UNKNOWN = "unknown"


def resolve_ref(ref: str, components: Components | None) -> Schema | None:
    """Look up '#/components/schemas/<Name>' by the text after the last '/'.

    Returns None when the registry or the name is missing, and when the
    target is itself a reference (chains are not followed).
    """
    if components is None or components.schemas is None:
        return None

    name = ref.rsplit("/", 1)[-1]
    schema = components.schemas.get(name)
    if schema is None:
        logger.debug("Unresolved reference %s", ref)
        return None
    if schema.ref is not None:
        logger.debug("Reference %s points at another reference %s", ref, schema.ref)
        return None
    return schema


def summarize_type(prop: Schema) -> str:
    """Describe a property's shape in one string.

    First match wins: format, $ref, oneOf, items, then the bare type.
    Array items are summarized by their bare type only.
    """
    if prop.format is not None:
        return f"{prop.type or UNKNOWN} ({prop.format})"
    if prop.ref is not None:
        return f"ref -> {prop.ref}"
    if prop.one_of:
        return "oneOf"
    if prop.items is not None:
        return f"array<{prop.items.type or UNKNOWN}>"
    return prop.type or UNKNOWN


def effective_schema(schema: Schema, components: Components | None) -> Schema | None:
    """The schema a body actually uses: itself, or what its $ref points at."""
    if schema.ref is not None:
        return resolve_ref(schema.ref, components)
    return schema


def describe_body(
    request_body: RequestBody | None,
    components: Components | None,
) -> list[tuple[str, str]]:
    """Return (property name, type summary) pairs for a JSON request body, sorted by name."""
    if request_body is None:
        return []

    media = request_body.content.get(JSON_MEDIA_TYPE)
    if media is None:
        logger.debug(
            "No %s body among %s", JSON_MEDIA_TYPE, ", ".join(request_body.content)
        )
        return []
    if media.schema_ is None:
        return []

    schema = effective_schema(media.schema_, components)
    if schema is None or not schema.properties:
        return []

    return [(name, summarize_type(prop)) for name, prop in sorted(schema.properties.items())]
