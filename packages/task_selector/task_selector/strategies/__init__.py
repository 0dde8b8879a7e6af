"""Solving strategies, one module each, registered by `Strategy` member."""

from ..models import Strategy
from .bitset_dp import bitset_dp
from .branch_and_bound import branch_and_bound
from .brute_force import brute_force
from .dynamic_programming import dynamic_programming
from .greedy import greedy
from .meet_in_middle import meet_in_the_middle

STRATEGIES = {
    Strategy.BRUTE_FORCE: brute_force,
    Strategy.DYNAMIC_PROGRAMMING: dynamic_programming,
    Strategy.MEET_IN_THE_MIDDLE: meet_in_the_middle,
    Strategy.BRANCH_AND_BOUND: branch_and_bound,
    Strategy.GREEDY: greedy,
    Strategy.BITSET_DP: bitset_dp,
}

__all__ = [
    "STRATEGIES",
    "bitset_dp",
    "branch_and_bound",
    "brute_force",
    "dynamic_programming",
    "greedy",
    "meet_in_the_middle",
]
