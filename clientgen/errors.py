"""Exception hierarchy for clientgen.

Every error carries an ``exit_code`` that ``python -m clientgen`` exits with::

    GeneratorError   (exit 1)
    +-- SpecLoadError  (exit 2)
    +-- OutputError    (exit 3)

Missing optional data in the document (unresolved ``$ref``, non-JSON request
bodies, properties without type information) is never an error.
"""

from __future__ import annotations


class GeneratorError(Exception):
    """Base exception for all clientgen errors."""

    exit_code: int = 1


class SpecLoadError(GeneratorError):
    """Raised when the API document cannot be read, parsed or validated."""

    exit_code = 2


class OutputError(GeneratorError):
    """Raised when the output tree cannot be created or written."""

    exit_code = 3
