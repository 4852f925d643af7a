"""Repository settings stored in .beargit/config (INI sections, section.option keys).

Only the keys in SETTINGS are accepted; each has a built-in default, so a
repository without a config file behaves exactly like a fresh one.
"""

from __future__ import annotations

import configparser
import io
from typing import TYPE_CHECKING

from .constants import CONFIG_FILENAME, REQUIRED_MESSAGE_TOKEN
from .errors import InvalidConfigKeyError
from .util import read_text_safe, write_text_atomic

if TYPE_CHECKING:
    from .repo import Repository

SETTINGS = {
    "commit.requiredtoken": REQUIRED_MESSAGE_TOKEN,
}


def _split_key(key: str) -> tuple[str, str]:
    if key not in SETTINGS:
        known = ", ".join(sorted(SETTINGS))
        raise InvalidConfigKeyError(f"unknown config key: {key!r} (known: {known})")
    section, _, option = key.partition(".")
    return section, option


def _load(repo: "Repository") -> configparser.ConfigParser:
    repo.require_repo()
    # "GO BEARS!"-style values are kept verbatim, so no % interpolation.
    parser = configparser.ConfigParser(interpolation=None)
    text = read_text_safe(repo.control_dir / CONFIG_FILENAME)
    if text:
        parser.read_string(text)
    return parser


def get_setting(repo: "Repository", key: str) -> str:
    """Configured value for key, or its default."""
    section, option = _split_key(key)
    parser = _load(repo)
    value = parser.get(section, option, fallback="")
    return value if value.strip() else SETTINGS[key]


def set_setting(repo: "Repository", key: str, value: str) -> None:
    """Store value for key; a blank value drops the override."""
    section, option = _split_key(key)
    parser = _load(repo)
    if value.strip():
        if not parser.has_section(section):
            parser.add_section(section)
        parser.set(section, option, value)
    elif parser.has_section(section):
        parser.remove_option(section, option)
        if not parser.options(section):
            parser.remove_section(section)
    buf = io.StringIO()
    parser.write(buf)
    write_text_atomic(repo.control_dir / CONFIG_FILENAME, buf.getvalue())


def required_message_token(repo: "Repository") -> str:
    """Substring every commit message must contain."""
    return get_setting(repo, "commit.requiredtoken")
