"""Runtime settings for the course store.

Resolution order per key: real environment variable > project .env file >
default. The .env file is optional; unreadable or malformed entries are
ignored.
"""
from __future__ import annotations
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, Mapping, Optional

ENV_PATH = Path(__file__).resolve().parent.parent / '.env'
KNOWN_KEYS = {'COURSEDB_ESTIMATE', 'COURSEDB_SORTED', 'COURSEDB_LOG_DIR', 'COURSEDB_LOG_LEVEL'}

DEFAULT_ESTIMATE = 20


def truthy(value: Optional[str], default: bool = True) -> bool:
    if value is None:
        return default
    return value.strip().lower() not in {"0", "false", "no", "off", ""}


def read_env_file(path: Path = ENV_PATH, keys: Iterable[str] = KNOWN_KEYS) -> Dict[str, str]:
    """Parse KEY=VALUE lines for the keys this project knows about."""
    wanted = set(keys)
    overrides: Dict[str, str] = {}
    if not path.exists():
        return overrides
    try:
        text = path.read_text(encoding='utf-8')
    except OSError:
        return overrides
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        k, v = line.split('=', 1)
        k = k.strip()
        if k in wanted:
            overrides[k] = v.strip().strip('"\'')
    return overrides


@dataclass
class Settings:
    """Resolved configuration.

    Attributes:
        estimate: capacity estimate used to size new tables.
        sorted_output: default ordering for listing commands.
        log_dir: when set, logs are also written to <log_dir>/coursedb.log.
        log_level: level name for the coursedb logger.
    """
    estimate: int = DEFAULT_ESTIMATE
    sorted_output: bool = True
    log_dir: Optional[str] = None
    log_level: str = 'WARNING'

    @classmethod
    def load(cls, environ: Optional[Mapping[str, str]] = None,
             env_file: Path = ENV_PATH) -> Settings:
        env = dict(read_env_file(env_file))
        env.update({k: v for k, v in (os.environ if environ is None else environ).items()
                    if k in KNOWN_KEYS})
        settings = cls()
        raw_estimate = env.get('COURSEDB_ESTIMATE')
        if raw_estimate is not None:
            try:
                settings.estimate = int(raw_estimate)
            except ValueError:
                pass  # keep default
        settings.sorted_output = truthy(env.get('COURSEDB_SORTED'), True)
        settings.log_dir = env.get('COURSEDB_LOG_DIR') or None
        settings.log_level = env.get('COURSEDB_LOG_LEVEL') or settings.log_level
        return settings
