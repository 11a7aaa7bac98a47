"""Field-level change detection for audit summaries.

Compares two serialised records (camelCase documents) and describes what
changed in a form short enough for a one-line audit summary.
"""

import json
import re
from dataclasses import dataclass
from typing import Any, Dict, FrozenSet, Iterable, List, Optional

IGNORED_FIELDS: FrozenSet[str] = frozenset({"createdAt", "updatedAt"})


@dataclass
class FieldChange:
    """A single top-level field that changed.

    Attributes:
        field: Document key that changed
        from_value: Previous value, formatted for display
        to_value: New value, formatted for display
    """

    field: str
    from_value: str
    to_value: str


def display_value(value: Any) -> str:
    """Format a value for display in a change summary.

    Example:
        >>> display_value(None), display_value(""), display_value([1, 2])
        ('—', '""', '[2 items]')
    """
    if value is None:
        return "—"
    if isinstance(value, str):
        return value or '""'
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, list):
        return f"[{len(value)} items]"
    return json.dumps(value, default=str)


def _canonical(value: Any) -> str:
    return json.dumps(value, sort_keys=True, default=str)


def diff_changes(
    before: Dict[str, Any],
    after: Dict[str, Any],
    ignore: Optional[Iterable[str]] = None,
) -> List[FieldChange]:
    """Compare two records and list their top-level differences.

    Nested values are compared by their JSON form. Timestamps are always
    ignored; ``ignore`` adds further keys to skip.

    Args:
        before: Previous version of the record
        after: Updated version of the record
        ignore: Extra keys to skip

    Returns:
        Changes in key order (keys of ``before`` first, then new keys)
    """
    skip = IGNORED_FIELDS | frozenset(ignore or ())
    keys = list(before) + [key for key in after if key not in before]

    changes = []
    for key in keys:
        if key in skip:
            continue
        old, new = before.get(key), after.get(key)
        if _canonical(old) == _canonical(new):
            continue
        changes.append(
            FieldChange(
                field=key, from_value=display_value(old), to_value=display_value(new)
            )
        )
    return changes


def format_field_name(field: str) -> str:
    """Turn a document key into words, dropping a trailing "Id".

    Example:
        >>> format_field_name("propertyAddress"), format_field_name("vendorId")
        ('property address', 'vendor')
    """
    cleaned = re.sub(r"Id$", "", field)
    return re.sub(r"([a-z])([A-Z])", r"\1 \2", cleaned).lower()


def summarise_changes(
    prefix: str, changes: List[FieldChange], max_fields: int = 4
) -> str:
    """Build a one-line summary of field changes.

    Example:
        >>> change = FieldChange("status", "draft", "approved")
        >>> summarise_changes("Updated budget", [change])
        'Updated budget: status draft → approved'
    """
    if not changes:
        return f"{prefix} (no field changes detected)"

    items = [
        f"{format_field_name(c.field)} {c.from_value} → {c.to_value}"
        for c in changes[:max_fields]
    ]
    remaining = len(changes) - max_fields
    if remaining > 0:
        items.append(f"+{remaining} more")
    return f"{prefix}: {', '.join(items)}"
