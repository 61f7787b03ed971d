"""Load and parse the API description.

Reads a YAML (or JSON) document from disk or over HTTP and validates it
into a :class:`~clientgen.models.Document`.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import httpx
import yaml

from .errors import SpecLoadError
from .models import Document, parse_document

logger = logging.getLogger(__name__)

SPEC_PATH = Path("docs.yaml")


def load_spec(source: str | Path | None = None) -> dict[str, Any]:
    """Load the raw API document from a file path or an http(s) URL.

    JSON is tried first unless the file extension or content type says
    YAML; a ``.json`` file or JSON content type is never retried as YAML.
    """
    source = str(source or SPEC_PATH)
    if source.startswith(("http://", "https://")):
        content, hint = _fetch(source)
    else:
        try:
            content = Path(source).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise SpecLoadError(f"Cannot read {source}: {exc}") from exc
        hint = _hint_from_suffix(Path(source).suffix)

    spec = _parse_content(content, source, hint)
    if not isinstance(spec, dict):
        raise SpecLoadError(f"{source} does not contain a mapping at the top level")
    logger.debug("Loaded %s", source)
    return spec


def _hint_from_suffix(suffix: str) -> str:
    suffix = suffix.lower()
    if suffix == ".json":
        return "json"
    if suffix in (".yaml", ".yml"):
        return "yaml"
    return ""


def _parse_content(content: str, source: str, hint: str = "") -> Any:
    if hint != "yaml":
        try:
            return json.loads(content)
        except json.JSONDecodeError as exc:
            if hint == "json":
                raise SpecLoadError(f"Invalid JSON in {source}: {exc}") from exc

    try:
        return yaml.safe_load(content)
    except yaml.YAMLError as exc:
        raise SpecLoadError(f"Invalid YAML in {source}: {exc}") from exc


def _fetch(url: str) -> tuple[str, str]:
    try:
        response = httpx.get(url, timeout=30.0, follow_redirects=True)
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        raise SpecLoadError(
            f"HTTP {exc.response.status_code} fetching {url}"
        ) from exc
    except httpx.RequestError as exc:
        raise SpecLoadError(f"Failed to fetch {url}: {exc}") from exc

    content_type = response.headers.get("content-type", "")
    hint = ""
    if "json" in content_type:
        hint = "json"
    elif "yaml" in content_type or "yml" in content_type:
        hint = "yaml"
    return response.text, hint


def load_document(source: str | Path | None = None) -> Document:
    """Load and validate the API document."""
    return parse_document(load_spec(source))
