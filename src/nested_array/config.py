"""Process-wide settings read from the environment at import time."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Final

logger = logging.getLogger(__name__)

_TRUTHY: Final[frozenset[str]] = frozenset({"1", "true", "yes", "on"})
_FALSY: Final[frozenset[str]] = frozenset({"", "0", "false", "no", "off"})


@dataclass(frozen=True)
class Settings:
    """Knobs for the Python-specific corners of the container-likeness test.

    - `tuples_as_leaves`: tuples are opaque leaf values instead of nodes.
    - `jax_arrays_as_leaves`: jax arrays are opaque leaf values instead of nodes.
    """

    tuples_as_leaves: bool = False
    jax_arrays_as_leaves: bool = False


def _env_flag(environ: Mapping[str, str], name: str, default: bool) -> bool:
    raw = environ.get(name)
    if raw is None:
        return default
    token = raw.strip().lower()
    if token in _TRUTHY:
        return True
    if token in _FALSY:
        return False
    logger.warning("ignoring unrecognised value %r for %s; using %s", raw, name, default)
    return default


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    if environ is None:
        environ = os.environ
    return Settings(
        tuples_as_leaves=_env_flag(environ, "NESTED_ARRAY_TUPLES_AS_LEAVES", False),
        jax_arrays_as_leaves=_env_flag(environ, "NESTED_ARRAY_JAX_ARRAYS_AS_LEAVES", False),
    )


SETTINGS: Final[Settings] = load_settings()
