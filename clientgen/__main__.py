"""Entry point: python -m clientgen

Reads the API document (docs.yaml by default), generates the JavaScript
client tree under output/apiClient/.
"""

from __future__ import annotations

import logging
import os
import sys

from .codegen import generate
from .config import GeneratorConfig
from .context_builder import build_artifacts
from .errors import GeneratorError
from .loader import load_document


def main() -> None:
    logging.basicConfig(
        level=logging.DEBUG if os.environ.get("CLIENTGEN_DEBUG") else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    config = GeneratorConfig.from_env()
    try:
        document = load_document(config.spec)
        artifacts, index = build_artifacts(document, base_url=config.base_url)
        generate(artifacts, index, config.output_dir, config.module_name)
    except GeneratorError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(exc.exit_code)


if __name__ == "__main__":
    main()
