"""
Generator settings and their YAML loader.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

from ruamel.yaml import YAML

from .providers import DEFAULT_HASH_ALGORITHM, ContentHasher, SystemClock

logger = logging.getLogger(__name__)

_yaml = YAML(typ="safe")

CONFIG_FILE = "phpgen.yaml"
HASH_ALGO_ENV = "PHPGEN_HASH_ALGO"


class ConfigLoadError(ValueError):
    """Invalid configuration, with the offending field path."""
    pass


@dataclass
class GeneratorCfg:
    # identity written into the banner; None → producing document class
    generator: Optional[str] = None
    hash_algorithm: str = DEFAULT_HASH_ALGORITHM
    timezone: str = "UTC"
    # spaces per leading tab during canonicalization
    indent: int = 4
    strict_types: bool = False
    # run the echo optimizer over raw code blocks
    optimize_raw: bool = False

    def __post_init__(self):
        self._apply_env()

    def _apply_env(self) -> None:
        env = os.environ.get(HASH_ALGO_ENV)
        if env and env.strip():
            self.hash_algorithm = env.strip()

    @classmethod
    def from_dict(cls, d: Optional[Dict[str, Any]]) -> GeneratorCfg:
        d = d or {}
        if not isinstance(d, dict):
            raise ConfigLoadError(f"<root>: expected mapping, got {type(d).__name__}")

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(d) - known)
        if unknown:
            raise ConfigLoadError(f"<root>: unknown keys: {', '.join(map(str, unknown))}")

        cfg = cls()
        if "generator" in d:
            cfg.generator = None if d["generator"] is None else str(d["generator"])
        if "hash_algorithm" in d:
            cfg.hash_algorithm = str(d["hash_algorithm"])
        if "timezone" in d:
            cfg.timezone = str(d["timezone"])
        if "indent" in d:
            indent = d["indent"]
            if isinstance(indent, bool) or not isinstance(indent, int) or indent < 0:
                raise ConfigLoadError(f"indent: expected non-negative integer, got {indent!r}")
            cfg.indent = indent
        for flag in ("strict_types", "optimize_raw"):
            if flag in d:
                if not isinstance(d[flag], bool):
                    raise ConfigLoadError(f"{flag}: expected boolean, got {d[flag]!r}")
                setattr(cfg, flag, d[flag])

        cfg._apply_env()
        return cfg

    def make_clock(self) -> SystemClock:
        return SystemClock(self.timezone)

    def make_hasher(self) -> ContentHasher:
        return ContentHasher(self.hash_algorithm)


def load_generator_cfg(path: Optional[Path] = None) -> GeneratorCfg:
    """
    Load settings from a YAML file.

    A directory is searched for `phpgen.yaml`; a missing file gives defaults.
    """
    if path is None:
        return GeneratorCfg.from_dict({})

    path = Path(path)
    if path.is_dir():
        path = path / CONFIG_FILE
    if not path.is_file():
        logger.debug(f"No generator config at {path}, using defaults")
        return GeneratorCfg.from_dict({})

    raw = _yaml.load(path.read_text(encoding="utf-8"))
    cfg = GeneratorCfg.from_dict(raw)
    logger.info(f"Loaded generator config from {path}")
    return cfg


__all__ = ["GeneratorCfg", "ConfigLoadError", "load_generator_cfg", "CONFIG_FILE", "HASH_ALGO_ENV"]
