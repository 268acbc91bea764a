"""Action catalog plugin system.

Each candidate source is an ActionProvider subclass registered in
PROVIDER_REGISTRY. ActionCatalog.build runs every registered provider to
produce this turn's scored candidates.
"""

from roguesim.ai.goals.base import ActionCatalog, ActionProvider, ScoredAction, PROVIDER_REGISTRY
from roguesim.ai.goals.registry import register_all_providers

# Auto-register all built-in providers on import
register_all_providers()

__all__ = [
    "ActionCatalog",
    "ActionProvider",
    "ScoredAction",
    "PROVIDER_REGISTRY",
]
