"""Persistent frontend preferences for the Mini Cactpot calculator.

Two switches live in ~/.cactpot_settings.json: whether the per-line EV
table is shown, and whether the next-cell suggestion is cut down to a
single cell. The analyzer never reads this file; only the frontends do.
"""

import json
import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULTS = {
    "show_line_evs": False,
    "single_best_cell": False,
}


def _default_path():
    return Path.home() / ".cactpot_settings.json"


def load_settings(path=None):
    """Read preferences, falling back to DEFAULTS key by key.

    A missing or unreadable file yields the defaults. Keys not in DEFAULTS
    are dropped, and a stored value that is not a JSON boolean is ignored.
    """
    path = Path(path) if path is not None else _default_path()
    result = dict(DEFAULTS)
    try:
        data = json.loads(path.read_text())
    except FileNotFoundError:
        return result
    except (json.JSONDecodeError, OSError) as exc:
        logger.warning("Ignoring unreadable settings file %s: %s", path, exc)
        return result
    if not isinstance(data, dict):
        logger.warning("Ignoring settings file %s: not a JSON object", path)
        return result
    for key in DEFAULTS:
        if isinstance(data.get(key), bool):
            result[key] = data[key]
    return result


def save_settings(settings, path=None):
    """Write the known preference keys, replacing the old file in one step.

    The new content goes to a sibling ``.tmp`` file first, so a crash never
    leaves a half-written settings file behind. Write failures are logged
    and otherwise ignored.
    """
    path = Path(path) if path is not None else _default_path()
    payload = {key: bool(settings.get(key, default)) for key, default in DEFAULTS.items()}
    staging = path.with_name(path.name + ".tmp")
    try:
        staging.write_text(json.dumps(payload, indent=2, sort_keys=True))
        os.replace(staging, path)
    except OSError as exc:
        logger.warning("Could not save settings to %s: %s", path, exc)
        staging.unlink(missing_ok=True)
