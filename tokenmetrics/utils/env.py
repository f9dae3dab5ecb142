from __future__ import annotations

import os
from pathlib import Path


def load_env_file_if_present(path: str | Path = ".env", override: bool = False) -> dict[str, str]:
    """Read KEY=VALUE pairs from a .env file into os.environ, if the file exists.

    Enough for keeping TOKEN_METRICS_API_KEY out of shell history without
    pulling in python-dotenv. Blank lines and `#` comments are skipped, an
    optional leading `export ` is accepted and surrounding quotes are removed.
    Existing environment variables win unless `override` is set.

    Returns every pair found in the file, whether or not it was applied.
    """
    env_path = Path(path)
    if not env_path.is_file():
        return {}

    found: dict[str, str] = {}
    for raw in env_path.read_text(encoding="utf-8").splitlines():
        entry = raw.strip()
        if not entry or entry.startswith("#") or "=" not in entry:
            continue
        if entry.startswith("export "):
            entry = entry[len("export ") :]
        name, _, value = entry.partition("=")
        name = name.strip()
        value = value.strip()
        if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
            value = value[1:-1]
        if override or name not in os.environ:
            os.environ[name] = value
        found[name] = value
    return found
