"""Environment handling for CoolCalc.

Settings come from the process environment, optionally seeded from
`.env` files in the working directory. `.env.local` is read after `.env`
and wins over it; both override variables already set by the shell.
"""

import os
import logging
from pathlib import Path
from typing import List, Optional, Union

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

# Read in this order; later files override earlier ones
ENV_FILES = (".env", ".env.local")

TRUE_VALUES = frozenset({"true", "1", "yes", "on"})
FALSE_VALUES = frozenset({"false", "0", "no", "off"})


def load_environment(env_dir: Optional[Union[str, Path]] = None) -> List[str]:
    """Seed os.environ from the .env files found in ``env_dir``.

    Args:
        env_dir: Directory to look in (current directory if None)

    Returns:
        Names of the files that were read, in load order
    """
    base = Path(env_dir) if env_dir is not None else Path.cwd()
    loaded = [name for name in ENV_FILES if _load_file(base / name)]

    if loaded:
        logger.info(f"[ENV] Loaded {', '.join(loaded)} from {base}")
    else:
        logger.debug(f"[ENV] No .env files in {base}")
    return loaded


def _load_file(path: Path) -> bool:
    if not path.is_file():
        return False
    load_dotenv(path, override=True)
    return True


def get_env_str(key: str, default: Optional[str] = None) -> Optional[str]:
    """String setting, stripped; blank counts as unset."""
    value = os.getenv(key, "").strip()
    return value or default


def get_env_bool(key: str, default: bool = False) -> bool:
    """Boolean setting; unrecognised values fall back to ``default``."""
    value = (get_env_str(key) or "").lower()
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    if value:
        logger.warning(f"[ENV] Ignoring non-boolean {key}={value!r}, using {default}")
    return default
