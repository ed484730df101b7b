"""Map URL query strings onto a user record and validate the result."""

from __future__ import annotations

import argparse
import re
from dataclasses import dataclass, field
from urllib.parse import unquote_plus

__all__ = [
    "QueryParamError",
    "ValidationError",
    "Coordinates",
    "Address",
    "User",
    "serialize_query_params",
    "validate_user",
    "main",
]

SAMPLE_QUERY = (
    "user_id=123&name=JohnDoe&age=30"
    "&address[city]=NewYork&address[state]=NY"
    "&address[coordinates][lat]=40.7128"
    "&address[coordinates][lng]=-74.0060"
    "&tags[]=go&tags[]=backend"
    "&metadata[key1]=value1&metadata[key2]=value2"
)

_INT_RE = re.compile(r"[+-]?[0-9]+")
_BAD_ESCAPE_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


class QueryParamError(ValueError):
    """Raised when a query string or one of its values cannot be parsed."""


class ValidationError(ValueError):
    """Raised when a parsed user fails validation."""


def _parse_int(text: str) -> int:
    if not _INT_RE.fullmatch(text):
        raise ValueError(f'parsing "{text}": invalid syntax')
    number = int(text)
    if not _INT64_MIN <= number <= _INT64_MAX:
        raise ValueError(f'parsing "{text}": value out of range')
    return number


def _parse_float(text: str) -> float:
    if not text or text != text.strip() or "_" in text:
        raise ValueError(f'parsing "{text}": invalid syntax')
    try:
        return float(text)
    except ValueError:
        pass
    try:
        return float.fromhex(text)
    except ValueError:
        raise ValueError(f'parsing "{text}": invalid syntax') from None


@dataclass
class Coordinates:
    """A latitude/longitude pair."""

    lat: float = 0.0
    lng: float = 0.0

    def to_db_value(self) -> str:
        """Encode as the ``"lat,lng"`` text stored in a database column."""
        return f"{self.lat:f},{self.lng:f}"

    @classmethod
    def from_db_value(cls, value: object) -> Coordinates:
        """Decode the ``"lat,lng"`` text produced by :meth:`to_db_value`."""
        if not isinstance(value, str):
            raise TypeError(f"failed to scan Coordinates: {value!r}")
        parts = value.split(",")
        if len(parts) != 2:
            raise ValueError(f"invalid Coordinates format: {value}")
        try:
            lat = _parse_float(parts[0])
        except ValueError as exc:
            raise ValueError(f"invalid latitude: {exc}") from None
        try:
            lng = _parse_float(parts[1])
        except ValueError as exc:
            raise ValueError(f"invalid longitude: {exc}") from None
        return cls(lat=lat, lng=lng)


@dataclass
class Address:
    """A postal address with optional coordinates."""

    city: str = "Default City"
    state: str = "Default State"
    coordinates: Coordinates = field(default_factory=Coordinates)


@dataclass
class User:
    """A user record built from query parameters."""

    id: int = 0
    name: str = "Default Name"
    age: int = 20
    tags: list[str] = field(default_factory=list)
    address: Address = field(default_factory=Address)
    metadata: dict[str, str] = field(default_factory=dict)


def _unescape(text: str) -> str:
    bad = _BAD_ESCAPE_RE.search(text)
    if bad:
        raise QueryParamError(f"invalid URL escape {text[bad.start():bad.start() + 3]!r}")
    return unquote_plus(text)


def _parse_query(raw_query: str) -> dict[str, list[str]]:
    params: dict[str, list[str]] = {}
    for pair in raw_query.split("&"):
        if not pair:
            continue
        if ";" in pair:
            raise QueryParamError("invalid semicolon separator in query")
        key, _, value = pair.partition("=")
        params.setdefault(_unescape(key), []).append(_unescape(value))
    return params


def _apply_nested(user: User, key: str, values: list[str]) -> None:
    parts = key.split("[")
    base = parts[0]
    sub = parts[1].rstrip("]")

    if base == "metadata":
        if len(parts) == 2:
            user.metadata[sub] = values[0]
    elif len(parts) > 2:
        leaf = parts[2].rstrip("]")
        if base == "address" and sub == "coordinates":
            if leaf == "lat":
                try:
                    user.address.coordinates.lat = _parse_float(values[0])
                except ValueError as exc:
                    raise QueryParamError(f"invalid latitude: {exc}") from None
            elif leaf == "lng":
                try:
                    user.address.coordinates.lng = _parse_float(values[0])
                except ValueError as exc:
                    raise QueryParamError(f"invalid longitude: {exc}") from None
    elif base == "address":
        if sub == "city":
            user.address.city = values[0]
        elif sub == "state":
            user.address.state = values[0]


def _apply_plain(user: User, key: str, values: list[str]) -> None:
    if key == "user_id":
        try:
            user.id = _parse_int(values[0])
        except ValueError as exc:
            raise QueryParamError(f"invalid user_id: {exc}") from None
    elif key == "name":
        user.name = values[0]
    elif key == "age":
        try:
            user.age = _parse_int(values[0])
        except ValueError as exc:
            raise QueryParamError(f"invalid age: {exc}") from None


def serialize_query_params(raw_query: str) -> User:
    """Parse ``raw_query`` into a :class:`User`, starting from default values.

    Supports ``tags[]`` lists, ``metadata[key]`` maps and nested
    ``address[...]`` fields including ``address[coordinates][lat|lng]``.
    Unknown keys are ignored.
    """
    params = _parse_query(raw_query)
    user = User()
    for key, values in params.items():
        if key.endswith("[]"):
            if key[:-2] == "tags":
                user.tags.extend(values)
        elif "[" in key:
            _apply_nested(user, key, values)
        else:
            _apply_plain(user, key, values)
    return user


def validate_user(user: User) -> None:
    """Check a parsed user, trimming its tags in place.

    Raises :class:`ValidationError` on the first problem found.
    """
    if not user.name.strip():
        raise ValidationError("name cannot be empty")
    if user.age <= 0:
        raise ValidationError("age must be greater than zero")
    for index, tag in enumerate(user.tags):
        user.tags[index] = tag.strip()
        if not user.tags[index]:
            raise ValidationError(f"tag at index {index} is empty")
    if not user.address.city.strip():
        raise ValidationError("address city cannot be empty")
    if not user.address.state.strip():
        raise ValidationError("address state cannot be empty")


def main(argv: list[str] | None = None) -> int:
    """Parse and validate a query string, printing the resulting user."""
    parser = argparse.ArgumentParser(description="Parse a query string into a user.")
    parser.add_argument("query", nargs="?", default=SAMPLE_QUERY)
    args = parser.parse_args(argv)

    try:
        user = serialize_query_params(args.query)
    except QueryParamError as exc:
        print(f"Error parsing query: {exc}")
        return 1
    try:
        validate_user(user)
    except ValidationError as exc:
        print(f"Validation failed: {exc}")
        return 1
    print(f"Parsed User: {user!r}")
    return 0