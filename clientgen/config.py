"""Generator settings.

Defaults live here as module constants; each can be overridden with an
environment variable:

  CLIENTGEN_SPEC        API document path or URL   (docs.yaml)
  CLIENTGEN_OUTPUT_DIR  directory for the module   (./output)
  CLIENTGEN_MODULE      generated module name      (apiClient)
  CLIENTGEN_BASE_URL    origin prepended to paths  (https://api.alice-snow.ru)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

from .codegen import BASE_URL
from .loader import SPEC_PATH

OUTPUT_DIR = "./output"
MODULE_NAME = "apiClient"


@dataclass(frozen=True)
class GeneratorConfig:
    spec: str = str(SPEC_PATH)
    output_dir: str = OUTPUT_DIR
    module_name: str = MODULE_NAME
    base_url: str = BASE_URL

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> GeneratorConfig:
        """Build a config from CLIENTGEN_* variables, falling back to defaults."""
        env = os.environ if environ is None else environ
        return cls(
            spec=env.get("CLIENTGEN_SPEC") or cls.spec,
            output_dir=env.get("CLIENTGEN_OUTPUT_DIR") or cls.output_dir,
            module_name=env.get("CLIENTGEN_MODULE") or cls.module_name,
            base_url=(env.get("CLIENTGEN_BASE_URL") or cls.base_url).rstrip("/"),
        )
