"""Weighted multi-factor investor scoring."""

from .engine import calculate_investor_score, tier_for
from .weights import TIER_THRESHOLDS, WEIGHTS

__all__ = ["calculate_investor_score", "tier_for", "TIER_THRESHOLDS", "WEIGHTS"]
