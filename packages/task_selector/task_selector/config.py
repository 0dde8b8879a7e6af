from __future__ import annotations

from dataclasses import dataclass

from .models import DEFAULT_CATEGORIES


@dataclass(frozen=True)
class SolverConfig:
    categories: tuple[str, ...] = DEFAULT_CATEGORIES
    # Exhaustive strategies hand over to greedy above these sizes
    brute_force_max_tasks: int = 22
    meet_in_middle_max_tasks: int = 30
    word_bits: int = 64
    # How many inner iterations pass between cancellation checks
    poll_interval: int = 4096


DEFAULT_CONFIG = SolverConfig()


def resolve_config(config: SolverConfig | None) -> SolverConfig:
    return DEFAULT_CONFIG if config is None else config
