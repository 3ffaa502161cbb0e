import hashlib
import logging
import logging.handlers
import os
import sys
from typing import Optional

import yaml
from dotenv import load_dotenv
from pydantic import ValidationError

from geomark.config.schemas import GlobalCfg

BASE = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
ROOT_LOGGER = "geomark"

# ---------------- Logging ----------------


def get_logger(name=ROOT_LOGGER, log_file=None):
    """Return a logger under the ``geomark`` namespace.

    The namespace root is configured once with a JSON-line formatter; child
    loggers propagate to it. stderr is used so CLI output on stdout stays clean.
    """
    root = logging.getLogger(ROOT_LOGGER)
    if not root.handlers:
        root.setLevel(logging.INFO)
        fmt = logging.Formatter(
            '{"ts":"%(asctime)s","level":"%(levelname)s","step":"%(name)s","msg":"%(message)s"}'
        )
        sh = logging.StreamHandler(sys.stderr)
        sh.setFormatter(fmt)
        root.addHandler(sh)
        root.propagate = False
    if log_file and not any(
        isinstance(h, logging.handlers.RotatingFileHandler) for h in root.handlers
    ):
        os.makedirs(os.path.dirname(os.path.abspath(log_file)), exist_ok=True)
        fh = logging.handlers.RotatingFileHandler(log_file, maxBytes=5_000_000, backupCount=5)
        fh.setFormatter(root.handlers[0].formatter)
        root.addHandler(fh)
    if name == ROOT_LOGGER or name.startswith(ROOT_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


def set_log_level(level) -> None:
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    get_logger().setLevel(level)


log = get_logger("core")

# ---------------- Config ----------------


def load_yaml(path: str) -> dict:
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"YAML at {path} must be a mapping/object.")
    return data


def _config_path(path: Optional[str]) -> Optional[str]:
    if path:
        return path
    env_path = os.environ.get("GEOMARK_CONFIG")
    if env_path:
        return env_path
    for candidate in ("geomark.yaml", "geomark.example.yaml"):
        p = os.path.join(BASE, "conf", candidate)
        if os.path.exists(p):
            return p
    return None


def load_config(path: Optional[str] = None) -> GlobalCfg:
    """Load engine settings from YAML, falling back to defaults when no file exists.

    Lookup order: explicit ``path``, ``GEOMARK_CONFIG`` (also read from a
    ``.env`` at the repo root), ``conf/geomark.yaml``, ``conf/geomark.example.yaml``.
    """
    load_dotenv(os.path.join(BASE, ".env"))
    resolved = _config_path(path)
    if resolved is None:
        log.debug("No config file found, using defaults")
        return GlobalCfg()
    if not os.path.exists(resolved):
        raise FileNotFoundError(f"Configuration file missing: {resolved}")

    raw = load_yaml(resolved)
    try:
        cfg = GlobalCfg(**raw)
    except ValidationError as e:
        log.error(f"Config validation failed: {e}")
        raise
    return cfg


# ---------------- Hashing ----------------


def sha1_text(text: str) -> str:
    return hashlib.sha1(text.encode("utf-8", errors="surrogatepass")).hexdigest()
