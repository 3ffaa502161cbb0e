# tests/test_config.py
import logging

import pydantic
import pytest
import yaml

from geomark.config.schemas import GlobalCfg
from geomark.core import get_logger, load_config, load_yaml, set_log_level


def write_yaml(path, obj):
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(obj, f, sort_keys=False)


def test_load_config_from_path(tmp_path):
    p = tmp_path / "geomark.yaml"
    write_yaml(p, {
        "engine": {"default_industry": "fintech", "default_aesthetic": "bold"},
        "logging": {"level": "DEBUG"},
        "export": {"out_dir": "out", "write_manifest": False},
    })
    cfg = load_config(str(p))
    assert isinstance(cfg, GlobalCfg)
    assert cfg.engine.default_industry == "fintech"
    assert cfg.engine.default_aesthetic == "bold"
    assert cfg.logging.level == "DEBUG"
    assert cfg.export.out_dir == "out"
    assert cfg.export.write_manifest is False
    assert cfg.export.qa is False


def test_partial_config_keeps_defaults(tmp_path):
    p = tmp_path / "geomark.yaml"
    write_yaml(p, {"export": {"qa": True}})
    cfg = load_config(str(p))
    assert cfg.export.qa is True
    assert cfg.engine.default_industry == "general"
    assert cfg.engine.default_aesthetic is None


def test_default_lookup_uses_repo_conf():
    cfg = load_config()
    assert cfg.engine.default_industry == "general"
    assert cfg.logging.level == "INFO"


def test_env_var_overrides_path(tmp_path, monkeypatch):
    p = tmp_path / "env.yaml"
    write_yaml(p, {"engine": {"default_industry": "health"}})
    monkeypatch.setenv("GEOMARK_CONFIG", str(p))
    assert load_config().engine.default_industry == "health"


def test_missing_explicit_path(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(str(tmp_path / "nope.yaml"))


def test_non_mapping_yaml(tmp_path):
    p = tmp_path / "list.yaml"
    p.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_yaml(str(p))
    with pytest.raises(ValueError):
        load_config(str(p))


def test_invalid_values_rejected(tmp_path):
    p = tmp_path / "bad.yaml"
    write_yaml(p, {"logging": {"level": "CHATTY"}})
    with pytest.raises(pydantic.ValidationError):
        load_config(str(p))

    write_yaml(p, {"engine": {"default_aesthetic": "vaporwave"}})
    with pytest.raises(pydantic.ValidationError):
        load_config(str(p))


def test_logger_namespace_and_idempotence():
    a = get_logger("radial")
    b = get_logger("radial")
    assert a is b
    assert a.name == "geomark.radial"
    assert get_logger("geomark.cli").name == "geomark.cli"

    root = logging.getLogger("geomark")
    handlers = list(root.handlers)
    get_logger("another")
    assert root.handlers == handlers
    assert root.propagate is False


def test_set_log_level():
    root = logging.getLogger("geomark")
    try:
        set_log_level("debug")
        assert root.level == logging.DEBUG
        set_log_level(logging.WARNING)
        assert root.level == logging.WARNING
    finally:
        set_log_level("INFO")


def test_log_file_handler(tmp_path):
    root = logging.getLogger("geomark")
    log_file = tmp_path / "logs" / "geomark.log"
    before = list(root.handlers)
    try:
        get_logger("filetest", log_file=str(log_file)).info("hello")
        assert log_file.exists()
        assert '"step":"geomark.filetest"' in log_file.read_text(encoding="utf-8")
    finally:
        for h in root.handlers:
            if h not in before:
                root.removeHandler(h)
                h.close()
