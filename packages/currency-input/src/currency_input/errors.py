"""Exceptions raised while building a formatter.

Edits never raise; a rejected edit hands back the previous value instead.
"""

from __future__ import annotations


class ConfigurationError(ValueError):
    """A locale, currency, pattern or bound that cannot be used."""
