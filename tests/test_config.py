from __future__ import annotations

import textwrap

import pytest

from phpgen.config import (
    CONFIG_FILE,
    HASH_ALGO_ENV,
    ConfigLoadError,
    GeneratorCfg,
    load_generator_cfg,
)
from phpgen.providers import DEFAULT_HASH_ALGORITHM, ContentHasher


def write_cfg(root, body: str):
    path = root / CONFIG_FILE
    path.write_text(textwrap.dedent(body).lstrip(), encoding="utf-8")
    return path


def test_defaults_without_path():
    cfg = load_generator_cfg()
    assert cfg == GeneratorCfg()
    assert cfg.hash_algorithm == DEFAULT_HASH_ALGORITHM
    assert cfg.indent == 4


def test_missing_file_gives_defaults(tmp_path):
    assert load_generator_cfg(tmp_path / "absent.yaml") == GeneratorCfg()


def test_directory_is_searched_for_config(tmp_path):
    write_cfg(tmp_path, """
        generator: tools/models
        indent: 2
        strict_types: true
        optimize_raw: true
        hash_algorithm: sha1
    """)
    cfg = load_generator_cfg(tmp_path)
    assert cfg.generator == "tools/models"
    assert cfg.indent == 2
    assert cfg.strict_types is True
    assert cfg.optimize_raw is True
    assert isinstance(cfg.make_hasher(), ContentHasher)
    assert cfg.make_hasher().algorithm == "sha1"


def test_empty_file_gives_defaults(tmp_path):
    path = write_cfg(tmp_path, "")
    assert load_generator_cfg(path) == GeneratorCfg()


def test_unknown_key_is_rejected(tmp_path):
    path = write_cfg(tmp_path, """
        indent: 4
        tabs: false
    """)
    with pytest.raises(ConfigLoadError, match="tabs"):
        load_generator_cfg(path)


@pytest.mark.parametrize("raw", [{"indent": -1}, {"indent": "4"}, {"indent": True}])
def test_bad_indent(raw):
    with pytest.raises(ConfigLoadError, match="indent"):
        GeneratorCfg.from_dict(raw)


def test_flags_must_be_boolean():
    with pytest.raises(ConfigLoadError, match="strict_types"):
        GeneratorCfg.from_dict({"strict_types": "yes"})


def test_root_must_be_mapping():
    with pytest.raises(ConfigLoadError):
        GeneratorCfg.from_dict(["indent"])


def test_env_overrides_hash_algorithm(tmp_path, monkeypatch):
    write_cfg(tmp_path, "hash_algorithm: sha1\n")
    monkeypatch.setenv(HASH_ALGO_ENV, "md5")
    assert load_generator_cfg(tmp_path).hash_algorithm == "md5"


def test_clock_uses_configured_timezone():
    now = GeneratorCfg().make_clock().now()
    assert now.tzinfo is not None
    assert now.utcoffset().total_seconds() == 0


def test_env_applies_to_default_cfg(monkeypatch):
    monkeypatch.setenv(HASH_ALGO_ENV, " sha256 ")
    assert GeneratorCfg().hash_algorithm == "sha256"
    assert GeneratorCfg(hash_algorithm="md5").make_hasher().algorithm == "sha256"
