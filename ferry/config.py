"""Loading of ferry configuration from TOML."""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any

from .authoring import Author, Authoring, AuthoringMode
from .errors import ConfigError, InvalidArgumentError


def _coerce_dict(value: Any) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}


def parse_authoring(data: dict[str, Any]) -> Authoring:
    """
    Build an Authoring policy from the ``[authoring]`` table of a config.

    The schema is intentionally small:

        [authoring]
        default = "Ferry Bot <bot@example.com>"
        mode = "allowed"
        allowlist = ["dev@example.com"]
    """
    table = _coerce_dict(data.get("authoring"))

    default = table.get("default")
    if not isinstance(default, str) or not default.strip():
        raise ConfigError("authoring.default is required")

    mode_raw = str(table.get("mode", AuthoringMode.PASS_THRU.value)).strip().lower()
    try:
        mode = AuthoringMode(mode_raw)
    except ValueError:
        choices = ", ".join(m.value for m in AuthoringMode)
        raise ConfigError(f"Unknown authoring.mode '{mode_raw}' (expected one of: {choices})") from None

    allowlist = table.get("allowlist", [])
    if not isinstance(allowlist, list) or not all(isinstance(e, str) for e in allowlist):
        raise ConfigError("authoring.allowlist must be a list of emails")

    try:
        return Authoring(
            default_author=Author.parse(default),
            mode=mode,
            allowlist=frozenset(e.strip() for e in allowlist),
        )
    except InvalidArgumentError as e:
        raise ConfigError(str(e)) from e


def load_authoring(path: Path) -> Authoring:
    """Load an authoring policy from a TOML file."""
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e
    return parse_authoring(data)
