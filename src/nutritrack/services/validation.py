"""Input checks shared by the entity services."""

from collections.abc import Iterable, Mapping

from nutritrack.domain.errors import ClientInputError

RESERVED_FIELDS = frozenset({"_id", "email"})


def require_email(value: object) -> str:
    """Return the owner email or raise when it is missing or blank."""
    if not isinstance(value, str) or not value.strip():
        raise ClientInputError("Email is required.")
    return value


def missing_fields(payload: Mapping[str, object], fields: Iterable[str]) -> list[str]:
    """Return the names of fields that are absent or falsy."""
    return [name for name in fields if not payload.get(name)]


def extra_details(payload: Mapping[str, object]) -> dict[str, object]:
    """Return caller-supplied fields other than the reserved ones."""
    return {key: value for key, value in payload.items() if key not in RESERVED_FIELDS}
