"""Config profiles for storing furnidata source URLs."""
from __future__ import annotations

import re
import sys
from dataclasses import dataclass, field
from pathlib import Path

import click

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

_PROFILE_NAME_RE = re.compile(r"^[a-zA-Z0-9_-]+$")


@dataclass
class Profile:
    name: str
    url: str


@dataclass
class Config:
    default_profile: str | None = None
    profiles: dict[str, Profile] = field(default_factory=dict)


def get_config_path() -> Path:
    """Return the TOML config file path via click.get_app_dir."""
    return Path(click.get_app_dir("furnidata")) / "config.toml"


def load_config() -> Config:
    """Read TOML config. Returns empty Config if file missing."""
    path = get_config_path()
    if not path.exists():
        return Config()

    with open(path, "rb") as f:
        data = tomllib.load(f)

    config = Config(default_profile=data.get("default_profile"))
    for name, info in data.get("profiles", {}).items():
        config.profiles[name] = Profile(name=name, url=info["url"])
    return config


def _toml_string(value: str) -> str:
    """Quote value as a TOML basic string."""
    out = []
    for ch in value:
        if ch in ("\\", '"'):
            out.append("\\" + ch)
        elif ord(ch) < 0x20 or ord(ch) == 0x7F:
            out.append(f"\\u{ord(ch):04X}")
        else:
            out.append(ch)
    return '"' + "".join(out) + '"'


def save_config(config: Config) -> Path:
    """Write config to TOML; URLs may hold any character, so they are escaped."""
    path = get_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)

    lines: list[str] = []
    if config.default_profile:
        lines.append(f"default_profile = {_toml_string(config.default_profile)}")
    lines.append("")

    for name, profile in config.profiles.items():
        lines.append(f"[profiles.{name}]")
        lines.append(f"url = {_toml_string(profile.url)}")
        lines.append("")

    path.write_text("\n".join(lines), encoding="utf-8")
    return path


def validate_profile_name(name: str) -> bool:
    """Check that a profile name is a valid TOML bare key."""
    return bool(_PROFILE_NAME_RE.match(name))


def resolve_url(url: str | None, profile_name: str | None) -> str:
    """Resolve the furnidata URL: explicit URL > --profile > default profile.

    Raises click.UsageError with a helpful message if nothing resolves.
    """
    if url:
        return url

    config = load_config()

    name = profile_name or config.default_profile
    if name is None:
        raise click.UsageError(
            "No furnidata URL provided. Either:\n"
            "  1. Run 'furnidata init' to set up a profile\n"
            "  2. Pass a URL or --hotel explicitly\n"
            "  3. Pass --profile <name> to use a named profile"
        )

    profile = config.profiles.get(name)
    if profile is None:
        available = ", ".join(config.profiles) or "(none)"
        raise click.UsageError(
            f"Profile '{name}' not found. Available profiles: {available}"
        )

    return profile.url
