"""AI layer: perception, action catalog, GOAP planning and decision-making."""

from roguesim.ai.brain import DecisionDriver
from roguesim.ai.pathfinding import Pathfinder
from roguesim.ai.perception import Perception

__all__ = ["DecisionDriver", "Pathfinder", "Perception"]
