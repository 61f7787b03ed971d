"""Convert URL path templates to on-disk locations and export accessors.

  /users             -> users/index.js           module.exports['users']
  /users/{id}        -> users/_param_id/index.js module.exports['users']['_param_id']
  /users/{id}/posts  -> users/_param_id/posts/index.js

The same sanitized segments are used for the directory and for the accessor
key, so the two always agree.
"""

from __future__ import annotations


def sanitize_segment(segment: str) -> str:
    """Make a path segment safe as a directory name and accessor key."""
    return segment.replace("{", "_param_").replace("}", "")


def split_path(path: str) -> list[str]:
    """Strip one leading '/' and split the rest on '/'."""
    if path.startswith("/"):
        path = path[1:]
    return path.split("/")


def sanitized_segments(path: str) -> tuple[str, ...]:
    return tuple(sanitize_segment(part) for part in split_path(path))


def accessor_key(segments: tuple[str, ...] | list[str]) -> str:
    """Build the bracketed accessor, e.g. "['users']['_param_id']"."""
    return "".join(f"['{segment}']" for segment in segments)


def module_path(segments: tuple[str, ...] | list[str]) -> str:
    return "/".join(segments)
