"""
Settings for template context generation.

Values are resolved with the following precedence (later wins):

1. ``LIBRARY_DEFAULTS`` from :mod:`codegen_core.defaults`
2. The ``GRAPHQL_CODEGEN_CORE`` Django setting, when Django is configured
3. Explicit overrides passed by the caller
"""

import logging
from dataclasses import dataclass, field, fields
from typing import Any, Optional

from django.conf import settings as django_settings

from .defaults import LIBRARY_DEFAULTS, SETTINGS_NAME

logger = logging.getLogger(__name__)


def _merge_settings_dicts(*dicts: Optional[dict[str, Any]]) -> dict[str, Any]:
    """
    Merge multiple settings dictionaries with later ones taking precedence.

    Args:
        *dicts: Variable number of dictionaries to merge

    Returns:
        Dict[str, Any]: Merged dictionary
    """
    result = {}
    for d in dicts:
        if d:
            result.update(d)
    return result


def _get_django_settings() -> dict[str, Any]:
    """Read the ``GRAPHQL_CODEGEN_CORE`` dict from Django settings, if any."""
    if not django_settings.configured:
        return {}
    config = getattr(django_settings, SETTINGS_NAME, None) or {}
    if not isinstance(config, dict):
        logger.warning(
            f"Ignoring {SETTINGS_NAME}: expected a dict, got {type(config).__name__}"
        )
        return {}
    return config


@dataclass(frozen=True)
class ContextSettings:
    """Settings consumed by :func:`schema_to_template_context`."""

    include_specified_directives: bool = True
    forced_types: tuple[str, ...] = field(default_factory=tuple)
    emit_events: bool = True

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ContextSettings":
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            logger.warning(f"Unknown codegen settings ignored: {sorted(unknown)}")
        values = {key: value for key, value in data.items() if key in known}
        if "forced_types" in values:
            values["forced_types"] = tuple(values["forced_types"] or ())
        return cls(**values)

    @classmethod
    def load(cls, overrides: Optional[dict[str, Any]] = None) -> "ContextSettings":
        """Resolve settings from defaults, Django settings and overrides."""
        merged = _merge_settings_dicts(
            LIBRARY_DEFAULTS, _get_django_settings(), overrides
        )
        return cls.from_dict(merged)
