# -*- coding: utf-8 -*-
"""
Home-directory helpers.

`~` is the only shorthand understood: `~` alone and a leading `~/`.
Anything else (including `~user`) is taken literally.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union


APP_NAME = "sesh"

_UNSET = object()


def home_dir() -> Optional[Path]:
    """! @brief Current user's home directory, or None if it cannot be determined."""
    try:
        return Path.home()
    except (RuntimeError, KeyError):
        return None


def expand_tilde(path: str, home: Union[Optional[Path], object] = _UNSET) -> Path:
    """! @brief Expand a leading home-marker in @p path.

    @param path Path string as written in the config.
    @param home Home directory override; defaults to home_dir(). None means unknown.
    @return Expanded path, or the literal input if no expansion applies.
    """
    if home is _UNSET:
        home = home_dir()
    if home is None:
        return Path(path)

    if path == "~":
        return Path(home)
    if path.startswith("~/"):
        return Path(home) / path[2:]
    return Path(path)


def config_path() -> Optional[Path]:
    """! @brief Location of the main config file: ~/.config/sesh/sesh.toml."""
    home = home_dir()
    if home is None:
        return None
    return home / ".config" / APP_NAME / f"{APP_NAME}.toml"
