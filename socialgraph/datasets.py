"""Built-in sample social network.

Eleven users connected by eighteen friendships, each weighted by an
interaction strength between 3 and 21.
"""

from __future__ import annotations

from typing import Dict, List, Tuple

from .graphs import WeightedGraph

SAMPLE_USERS: Dict[int, str] = {
    0: "Alice",
    1: "Bob",
    2: "Charlie",
    3: "Diana",
    4: "Eve",
    5: "Frank",
    6: "Grace",
    7: "Hannah",
    8: "Ivan",
    9: "Judy",
    10: "Kevin",
}

# (src, dest, interaction strength)
SAMPLE_INTERACTIONS: List[Tuple[int, int, int]] = [
    (0, 1, 8), (0, 2, 21),
    (1, 2, 6), (1, 3, 5), (1, 4, 4),
    (2, 3, 7), (2, 4, 12),
    (2, 5, 11), (2, 6, 8),
    (3, 7, 9), (4, 8, 10),
    (5, 6, 5), (5, 7, 4), (6, 8, 6),
    (7, 8, 3), (5, 9, 15), (6, 10, 7),
    (9, 10, 9),
]

MAX_INTERACTION_STRENGTH = 21


def load_sample_network(invert: bool = True) -> WeightedGraph:
    """
    Build the sample network.

    Args:
        invert: If True (default), strengths are turned into friendship
            distances with bound MAX_INTERACTION_STRENGTH, so the strongest
            friendships are the shortest edges. If False, the raw strengths
            are used as weights.

    Returns:
        WeightedGraph with user names as labels.
    """
    if invert:
        return WeightedGraph.from_interactions(
            len(SAMPLE_USERS),
            SAMPLE_INTERACTIONS,
            labels=SAMPLE_USERS,
            max_strength=MAX_INTERACTION_STRENGTH,
        )
    return WeightedGraph(len(SAMPLE_USERS), SAMPLE_INTERACTIONS, labels=SAMPLE_USERS)
