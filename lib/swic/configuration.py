## Copyright (C) 2024  swic Contributors
##
## This program is free software; you can redistribute it and/or modify
## it under the terms of the GNU General Public License as published by
## the Free Software Foundation; either version 2 of the License, or
## (at your option) any later version.
##
## This program is distributed in the hope that it will be useful,
## but WITHOUT ANY WARRANTY; without even the implied warranty of
## MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
## GNU General Public License for more details.
##
## You should have received a copy of the GNU General Public License along
## with this program; if not, write to the Free Software Foundation, Inc.,
## 51 Franklin Street, Fifth Floor, Boston, MA 02110-1301 USA.

import json
import logging
import os

import yaml

from swic import __version__

logger = logging.getLogger(__name__)

_XDG_CONFIG_HOME = os.environ.get("XDG_CONFIG_HOME") or os.path.expanduser(os.path.join("~", ".config"))
_file_path = os.path.join(_XDG_CONFIG_HOME, "swic", "config.json")
_yaml_file_path = os.path.join(_XDG_CONFIG_HOME, "swic", "config.yaml")
_snapshot_file_path = os.path.join(_XDG_CONFIG_HOME, "swic", "snapshots.yaml")

_KEY_VERSION = "_version"
SAFE_MODE = "safe_mode"
SWAYMSG_PATH = "swaymsg_path"
REVERT_TIMEOUT = "revert_timeout"

# revert applied changes unless confirmed within revert_timeout seconds
DEFAULTS = {
    SAFE_MODE: True,
    SWAYMSG_PATH: "swaymsg",
    REVERT_TIMEOUT: 10.0,
}

_TYPES = {
    SAFE_MODE: (bool,),
    SWAYMSG_PATH: (str,),
    REVERT_TIMEOUT: (int, float),
}

_config = {}
# identifier -> {"device": sway description before the first change, "changed": [setting names]}
_snapshots = None


def _load():
    global _config
    loaded_config = {}
    if os.path.isfile(_yaml_file_path):
        try:
            with open(_yaml_file_path) as config_file:
                loaded_config = yaml.safe_load(config_file) or {}
        except Exception as e:
            logger.error("failed to load from %s: %s", _yaml_file_path, e)
    elif os.path.isfile(_file_path):
        try:
            with open(_file_path) as config_file:
                loaded_config = _convert_json(json.load(config_file))
        except Exception as e:
            logger.error("failed to load from %s: %s", _file_path, e)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("load => %s", loaded_config)
    _config = _cleanup_load(loaded_config)


def _convert_json(json_dict):
    # the old json file also held window settings next to the application section
    app = json_dict.get("app", {}) if isinstance(json_dict, dict) else {}
    return {k: v for k, v in app.items() if k in DEFAULTS}


def _cleanup_load(c):
    config = dict(DEFAULTS)
    if not isinstance(c, dict):
        logger.warning("ignoring configuration %r, expected a mapping", c)
        c = {}
    for key, value in c.items():
        if key not in DEFAULTS:
            continue
        # bool is an int, so do not let it pass for a number
        if not isinstance(value, _TYPES[key]) or (isinstance(value, bool) and bool not in _TYPES[key]):
            logger.warning("ignoring configuration %s = %r, using %r", key, value, DEFAULTS[key])
            continue
        config[key] = value
    if config[REVERT_TIMEOUT] < 0:
        logger.warning("ignoring negative %s %r", REVERT_TIMEOUT, config[REVERT_TIMEOUT])
        config[REVERT_TIMEOUT] = DEFAULTS[REVERT_TIMEOUT]
    config[REVERT_TIMEOUT] = float(config[REVERT_TIMEOUT])
    config[_KEY_VERSION] = __version__
    return config


def save():
    if not _config:
        return False
    dirname = os.path.dirname(_yaml_file_path)
    if not os.path.isdir(dirname):
        try:
            os.makedirs(dirname)
        except Exception:
            logger.error("failed to create %s", dirname)
            return False

    try:
        with open(_yaml_file_path, "w") as config_file:
            yaml.safe_dump(_config, config_file, default_flow_style=False)
        if logger.isEnabledFor(logging.INFO):
            logger.info("saved %s to %s", _config, _yaml_file_path)
        return True
    except Exception as e:
        logger.error("failed to save to %s: %s", _yaml_file_path, e)
        return False


def get(key):
    if not _config:
        _load()
    return _config.get(key, DEFAULTS.get(key))


def update(key, value, persist=True):
    assert key in DEFAULTS, key
    if not _config:
        _load()
    _config[key] = value
    if persist:
        save()


def _load_snapshots():
    global _snapshots
    _snapshots = {}
    if not os.path.isfile(_snapshot_file_path):
        return
    try:
        with open(_snapshot_file_path) as snapshot_file:
            loaded = yaml.safe_load(snapshot_file) or {}
    except Exception as e:
        logger.error("failed to load from %s: %s", _snapshot_file_path, e)
        return
    if not isinstance(loaded, dict):
        logger.warning("ignoring snapshots %r, expected a mapping", loaded)
        return
    for identifier, entry in loaded.items():
        if isinstance(entry, dict) and isinstance(entry.get("device"), dict) and isinstance(entry.get("changed"), list):
            _snapshots[str(identifier)] = entry
        else:
            logger.warning("ignoring malformed snapshot for %s", identifier)


def _save_snapshots():
    dirname = os.path.dirname(_snapshot_file_path)
    if not os.path.isdir(dirname):
        try:
            os.makedirs(dirname)
        except Exception:
            logger.error("failed to create %s", dirname)
            return False
    try:
        with open(_snapshot_file_path, "w") as snapshot_file:
            yaml.safe_dump(_snapshots, snapshot_file, default_flow_style=False)
        return True
    except Exception as e:
        logger.error("failed to save to %s: %s", _snapshot_file_path, e)
        return False


def get_snapshot(identifier):
    """The device description saved before the first change swic made to it, and the settings changed since."""
    if _snapshots is None:
        _load_snapshots()
    return _snapshots.get(identifier)


def record_change(identifier, document, setting_name):
    """Remember that a setting was changed; the description is only kept from the first change."""
    if _snapshots is None:
        _load_snapshots()
    entry = _snapshots.setdefault(identifier, {"device": document, "changed": []})
    if setting_name not in entry["changed"]:
        entry["changed"].append(setting_name)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("%s changed: %s", identifier, entry["changed"])
    return _save_snapshots()


def drop_snapshot(identifier):
    if _snapshots is None:
        _load_snapshots()
    if _snapshots.pop(identifier, None) is not None:
        return _save_snapshots()
    return False
