"""Render templates and write generated output.

Renders one JavaScript stub per operation and the root index, then writes
the artifacts built by context_builder under <output_dir>/<module_name>/.
"""

from __future__ import annotations

import functools
import logging
from pathlib import Path
from typing import Iterable

import jinja2

from .errors import OutputError
from .models import Artifact, Components, RequestBody
from .schema_parser import describe_body

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).parent / "templates"
BASE_URL = "https://api.alice-snow.ru"
NO_DESCRIPTION = "No description"

# Method names that are not valid JavaScript function names
_RESERVED_WORDS = frozenset({"delete"})


@functools.lru_cache(maxsize=None)
def _environment() -> jinja2.Environment:
    return jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(TEMPLATE_DIR)),
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=jinja2.StrictUndefined,
    )


def _comment_text(summary: str | None) -> str:
    if summary is None:
        return NO_DESCRIPTION
    # The summary must stay on a single comment line
    return " ".join(summary.split())


def render_operation(
    method: str,
    summary: str | None,
    request_body: RequestBody | None,
    components: Components | None,
    full_path: str,
    base_url: str = BASE_URL,
) -> str:
    """Render the stub for one HTTP method at one path."""
    url = f"{base_url}{full_path}"
    env = _environment()

    if method == "get":
        return env.get_template("get.js.j2").render(
            summary=_comment_text(summary),
            url=url,
        )

    function_name = f"{method}_" if method in _RESERVED_WORDS else method
    return env.get_template("operation.js.j2").render(
        summary=_comment_text(summary),
        url=url,
        method=method,
        function_name=function_name,
        has_body=request_body is not None,
        properties=describe_body(request_body, components),
    )


def render_index(exports: Iterable[tuple[str, str]]) -> str:
    """Render the root index from (accessor, module path) pairs, in order."""
    return _environment().get_template("index.js.j2").render(exports=list(exports))


def _write(path: Path, content: str) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise OutputError(f"Cannot write {path}: {exc}") from exc
    logger.debug("Wrote %s", path)


def generate(
    artifacts: list[Artifact],
    index: Artifact,
    output_dir: str | Path,
    module_name: str,
) -> Path:
    """Write every artifact plus the root index and return the module root."""
    root = Path(output_dir) / module_name
    try:
        root.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise OutputError(f"Cannot create {root}: {exc}") from exc

    for artifact in artifacts:
        _write(root / artifact.relative_path, artifact.content)
    _write(root / index.relative_path, index.content)

    print(f"Generated {root} ({len(artifacts)} modules)")
    return root
