"""Action provider registration.

Call ``register_all_providers()`` once at import time to populate
PROVIDER_REGISTRY. Order matters: it is the catalog's enumeration order,
and the earliest candidate wins utility ties.
"""

from __future__ import annotations

from roguesim.ai.goals.base import register_provider
from roguesim.ai.goals.providers import HostileProvider, MeditateProvider, PotableProvider

_registered = False


def register_all_providers() -> None:
    """Register all built-in action providers (idempotent)."""
    global _registered
    if _registered:
        return
    _registered = True

    register_provider(MeditateProvider())
    register_provider(PotableProvider())
    register_provider(HostileProvider())
