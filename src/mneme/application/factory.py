"""
Scheduling Engine Factory
Centralizes building an engine from resolved configuration.
"""

import logging

from mneme.application.config import MnemeConfig
from mneme.application.scheduling.engine import SchedulingEngine
from mneme.domain.scheduling.ports import Clock
from mneme.domain.scheduling.weights import get_weight_set

logger = logging.getLogger(__name__)


def get_scheduling_engine(config: MnemeConfig, clock: Clock | None = None) -> SchedulingEngine:
    """
    Returns an engine bound to the configured weight set and timezone.
    """
    weights = get_weight_set(config.weights_version)
    logger.debug("Building engine: weights=%s tz=%s", weights.version, config.timezone)
    return SchedulingEngine(weights=weights, clock=clock, tz=config.get_tzinfo())
