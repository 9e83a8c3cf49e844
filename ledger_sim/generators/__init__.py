"""Synthetic activity generators."""

from ledger_sim.generators.activity import ActivityGenerator
from ledger_sim.generators.base import BaseGenerator

__all__ = ["ActivityGenerator", "BaseGenerator"]
