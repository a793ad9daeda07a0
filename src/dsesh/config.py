# -*- coding: utf-8 -*-
"""
Config model and recursive loader.

A config document looks like:

    import = ["work.toml", "~/.config/sesh/extra.toml"]

    [[session]]
    name = "dotfiles"
    path = "~/dotfiles"
    startup_command = "nvim"

Imports are loaded depth-first, in the order listed, before the file's own
sessions. Relative import paths are relative to the importing file.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Set

import tomli

from dsesh.errors import ConfigError
from dsesh.paths import expand_tilde


logger = logging.getLogger(__name__)


# ---------------------------
# Config model
# ---------------------------

@dataclass(frozen=True)
class Session:
    name: str
    startup_command: str
    path: Optional[str] = None

    @staticmethod
    def from_table(table: Any, source: Path, index: int) -> "Session":
        """! @brief Build a Session from one `[[session]]` table.

        Keys other than name/path/startup_command are ignored.

        @param table Parsed TOML table.
        @param source File the table came from (for error messages).
        @param index Position of the table in the file's session array.
        @throws ConfigError if a required key is missing or has the wrong type.
        """
        where = f"{source}: session #{index + 1}"
        if not isinstance(table, dict):
            raise ConfigError(f"{where}: expected a table, got {type(table).__name__}")

        for key in ("name", "startup_command"):
            if key not in table:
                raise ConfigError(f"{where}: missing required field '{key}'")
            if not isinstance(table[key], str):
                raise ConfigError(f"{where}: field '{key}' must be a string")

        path = table.get("path")
        if path is not None and not isinstance(path, str):
            raise ConfigError(f"{where}: field 'path' must be a string")

        return Session(name=table["name"], startup_command=table["startup_command"], path=path)


@dataclass
class ConfigDocument:
    imports: List[str] = field(default_factory=list)
    sessions: List[Session] = field(default_factory=list)

    @staticmethod
    def from_dict(data: Dict[str, Any], source: Path) -> "ConfigDocument":
        imports = data.get("import", [])
        if not isinstance(imports, list) or not all(isinstance(i, str) for i in imports):
            raise ConfigError(f"{source}: 'import' must be an array of strings")

        tables = data.get("session", [])
        if not isinstance(tables, list):
            raise ConfigError(f"{source}: 'session' must be an array of tables")

        return ConfigDocument(
            imports=list(imports),
            sessions=[Session.from_table(t, source, i) for i, t in enumerate(tables)],
        )

    @staticmethod
    def from_toml(path: Path) -> "ConfigDocument":
        """! @brief Read and validate one TOML config file (imports are not followed).

        @param path File to read.
        @return Parsed document.
        @throws ConfigError on I/O, syntax or schema errors.
        """
        try:
            with path.open("rb") as f:
                data = tomli.load(f)
        except OSError as e:
            raise ConfigError(f"Cannot read config {path}: {e.strerror or e}") from e
        except (tomli.TOMLDecodeError, UnicodeDecodeError) as e:
            raise ConfigError(f"Invalid TOML in {path}: {e}") from e
        return ConfigDocument.from_dict(data, path)


# ---------------------------
# Loader
# ---------------------------

def _resolve_import(importer: Path, entry: str) -> Path:
    """! @brief Resolve an import entry relative to the importing file's directory."""
    p = expand_tilde(entry)
    if not p.is_absolute():
        p = importer.parent / p
    return p


def load_config_recursive(path: Path, visited: Set[Path]) -> List[Session]:
    """! @brief Load @p path and everything it imports, depth-first.

    A file already in @p visited contributes nothing, which makes self-imports,
    cycles and diamonds terminate with each file read at most once.

    @param path Config file to load.
    @param visited Canonical paths already loaded in this pass (mutated).
    @return Sessions from imports (in import order) followed by local sessions.
    @throws ConfigError if any file in the tree is missing or invalid.
    """
    try:
        path = Path(path).resolve(strict=True)
    except (OSError, RuntimeError) as e:
        raise ConfigError(f"Cannot resolve config {path}: {e}") from e

    if path in visited:
        logger.debug("Skipping already loaded config %s", path)
        return []
    visited.add(path)

    logger.debug("Loading config %s", path)
    doc = ConfigDocument.from_toml(path)

    sessions: List[Session] = []
    for entry in doc.imports:
        target = _resolve_import(path, entry)
        logger.debug("%s imports %s", path, target)
        sessions.extend(load_config_recursive(target, visited))

    sessions.extend(doc.sessions)
    return sessions


def load_all_sessions(path: Path) -> List[Session]:
    """! @brief Load a config tree with a fresh visited set."""
    return load_config_recursive(path, set())
