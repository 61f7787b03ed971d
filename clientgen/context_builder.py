"""Group operations by path into artifacts and build the root index.

Each distinct path template gets one Artifact located by its sanitized
segments. Methods are processed in lexicographic order: a GET stub replaces
whatever the artifact holds, every other method is appended. So for
{get, post} the file is the GET stub followed by the POST stub, while for
{delete, get} the GET stub overwrites the DELETE stub.
"""

from __future__ import annotations

import logging

from .codegen import BASE_URL, render_index, render_operation
from .models import Artifact, Document
from .naming import accessor_key, module_path, sanitized_segments

logger = logging.getLogger(__name__)


def build_exports(document: Document) -> list[tuple[str, str]]:
    """Return (accessor, module path) for every path, in path order.

    No deduplication: two templates that sanitize to the same segments give
    two export lines, and the later one wins when the index is loaded.
    """
    exports: list[tuple[str, str]] = []
    for path in sorted(document.paths):
        # The require() path uses the sanitized segments too, since that is
        # the directory the module is written to ("{id}" would not resolve).
        segments = sanitized_segments(path)
        exports.append((accessor_key(segments), module_path(segments)))
    return exports


def build_artifacts(
    document: Document,
    base_url: str = BASE_URL,
) -> tuple[list[Artifact], Artifact]:
    """Render every path of the document.

    Returns the per-path artifacts in path order and the root index artifact.
    """
    artifacts: dict[tuple[str, ...], Artifact] = {}

    for path in sorted(document.paths):
        # Keyed by on-disk location: "/users" and "/users/" share users/index.js
        location = tuple(s for s in sanitized_segments(path) if s)
        artifact = artifacts.setdefault(location, Artifact(location))

        for method, operation in sorted(document.paths[path].items()):
            code = render_operation(
                method,
                operation.summary,
                operation.request_body,
                document.components,
                path,
                base_url=base_url,
            )
            if method == "get":
                artifact.replace(code)
            else:
                artifact.append(code)
            logger.debug("Rendered %s %s", method.upper(), path)

    index = Artifact(())
    index.replace(render_index(build_exports(document)))
    return list(artifacts.values()), index
