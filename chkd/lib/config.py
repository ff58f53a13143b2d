"""
Configuration loader for chkd.

Reads `.chkd/chkd.env` from the repository root. Every key is optional; a
repository without the file gets the defaults.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from . import envparse

logger = logging.getLogger(__name__)

CONFIG_DIR = ".chkd"
CONFIG_FILE = "chkd.env"

DEFAULT_SPEC_PATH = "docs/SPEC.md"
DEFAULT_WORKFLOWS_PATH = ".chkd/workflows.yaml"
DEFAULT_LOCK_TIMEOUT = 10


@dataclass
class SpecConfig:
    """Repository-level configuration from .chkd/chkd.env"""
    repo_path: Path
    spec_path: Path                # Absolute path to SPEC.md
    workflows_path: Path           # Optional YAML workflow catalogue
    lock_timeout: int              # Seconds to wait for the document lock
    strict_validation: bool        # Refuse to mutate documents with format errors


def load_spec_config(repo_path: Path) -> SpecConfig:
    """Load .chkd/chkd.env (if present) and return SpecConfig.

    Raises:
        ValueError: if the env file has invalid syntax or values
    """
    repo_path = Path(repo_path)
    env_path = repo_path / CONFIG_DIR / CONFIG_FILE
    env = envparse.load_env(env_path) if env_path.exists() else {}

    lock_timeout = envparse.get_int(env, "LOCK_TIMEOUT", DEFAULT_LOCK_TIMEOUT)
    if lock_timeout < 0:
        logger.warning(f"LOCK_TIMEOUT {lock_timeout} is negative, using {DEFAULT_LOCK_TIMEOUT}")
        lock_timeout = DEFAULT_LOCK_TIMEOUT

    return SpecConfig(
        repo_path=repo_path,
        spec_path=repo_path / env.get("SPEC_PATH", DEFAULT_SPEC_PATH),
        workflows_path=repo_path / env.get("WORKFLOWS_PATH", DEFAULT_WORKFLOWS_PATH),
        lock_timeout=lock_timeout,
        strict_validation=envparse.get_bool(env, "STRICT_VALIDATION", True),
    )


def find_repo_root(start: Path) -> Path:
    """Walk up from start to the nearest directory with .chkd/ or docs/SPEC.md.

    Falls back to start itself.
    """
    start = Path(start).resolve()
    for candidate in (start, *start.parents):
        if (candidate / CONFIG_DIR).is_dir() or (candidate / DEFAULT_SPEC_PATH).exists():
            return candidate
    return start
