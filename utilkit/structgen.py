"""User preference records and a generator of struct source from JSON samples."""

from __future__ import annotations

import argparse
import json
import os
from dataclasses import dataclass, field
from typing import Any

__all__ = [
    "Preferences",
    "UserPreferences",
    "go_type",
    "generate_go_struct",
    "generate_config_source",
    "main",
]

DEFAULT_INPUT = os.path.join("..", "config", "user_preferences.json")
DEFAULT_OUTPUT = os.path.join("..", "config", "auto_generated.go")

_SOURCE_TEMPLATE = """
// Code generated by generateconfig; DO NOT EDIT.

package config

type UserPreferences struct {
%s}
"""


@dataclass
class Preferences:
    """Language and timezone settings."""

    language: str = ""
    timezone: str = ""


@dataclass
class UserPreferences:
    """A user's stored preferences."""

    username: str = ""
    theme: str = ""
    notifications_enabled: bool = False
    preferences: Preferences = field(default_factory=Preferences)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> UserPreferences:
        """Build from a decoded JSON object; missing keys keep their defaults."""
        nested = data.get("preferences") or {}
        return cls(
            username=data.get("username", ""),
            theme=data.get("theme", ""),
            notifications_enabled=bool(data.get("notifications_enabled", False)),
            preferences=Preferences(
                language=nested.get("language", ""),
                timezone=nested.get("timezone", ""),
            ),
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON object form."""
        return {
            "username": self.username,
            "theme": self.theme,
            "notifications_enabled": self.notifications_enabled,
            "preferences": {
                "language": self.preferences.language,
                "timezone": self.preferences.timezone,
            },
        }


def _element_type(value: Any) -> str:
    if isinstance(value, list):
        return "[]interface {}"
    return go_type(value)


def go_type(value: Any) -> str:
    """Name the struct field type used for a decoded JSON value."""
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, (int, float)):
        return "float64"
    if isinstance(value, str):
        return "string"
    if isinstance(value, dict):
        return "struct"
    if isinstance(value, list):
        if value and value[0] is not None:
            return _element_type(value[0])
        return "interface{}"
    return "interface{}"


def _is_separator(ch: str) -> bool:
    if ord(ch) <= 0x7F:
        return not (ch.isalnum() or ch == "_")
    if ch.isalpha() or ch.isdigit():
        return False
    return ch.isspace()


def _title(key: str) -> str:
    out = []
    prev = " "
    for ch in key:
        out.append(ch.upper() if _is_separator(prev) else ch)
        prev = ch
    return "".join(out)


def generate_go_struct(prefix: str, obj: dict[str, Any]) -> str:
    """Render the field lines of a struct describing ``obj``, nesting as needed."""
    lines: list[str] = []
    for key, value in obj.items():
        name = _title(key)
        tag = f'`json:"{key},omitempty"`'
        if isinstance(value, dict):
            lines.append(f"{prefix}{name} struct {{\n")
            lines.append(generate_go_struct(prefix + "  ", value))
            lines.append(f"{prefix}}} {tag}\n")
        elif isinstance(value, list):
            if value and isinstance(value[0], dict):
                lines.append(f"{prefix}{name} []struct {{\n")
                lines.append(generate_go_struct(prefix + "  ", value[0]))
                lines.append(f"{prefix}}} {tag}\n")
            elif value:
                lines.append(f"{prefix}{name} []{go_type(value[0])} {tag}\n")
            else:
                lines.append(f"{prefix}{name} []interface{{}} {tag}\n")
        else:
            type_name = go_type(value)
            if type_name == "interface{}":
                type_name = "*" + type_name
            lines.append(f"{prefix}{name} {type_name} {tag}\n")
    return "".join(lines)


def generate_config_source(obj: dict[str, Any]) -> str:
    """Render a complete source file declaring ``UserPreferences`` for ``obj``."""
    return _SOURCE_TEMPLATE % generate_go_struct("    ", obj)


def main(argv: list[str] | None = None) -> int:
    """Read a JSON sample and write the generated struct source."""
    parser = argparse.ArgumentParser(description="Generate struct source from a JSON sample.")
    parser.add_argument("--input", default=DEFAULT_INPUT)
    parser.add_argument("--output", default=DEFAULT_OUTPUT)
    args = parser.parse_args(argv)

    try:
        with open(args.input, encoding="utf-8") as handle:
            text = handle.read()
    except OSError as exc:
        print(f"Error reading JSON file: {exc}")
        return 1

    try:
        obj = json.loads(text)
    except json.JSONDecodeError as exc:
        print(f"Error parsing JSON: {exc}")
        return 1
    if not isinstance(obj, dict):
        print("Error parsing JSON: top-level value is not an object")
        return 1

    try:
        with open(args.output, "w", encoding="utf-8") as handle:
            handle.write(generate_config_source(obj))
    except OSError as exc:
        print(f"Error writing Go file: {exc}")
        return 1

    print("Go structs generated successfully.")
    return 0