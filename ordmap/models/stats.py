"""
Structural mutation counters kept by each balance policy.
"""

from dataclasses import dataclass


@dataclass
class TreeStats:
    """
    Counts of structural work done by a balance policy.

    Attributes:
        rotations: Single rotations performed (a double rotation counts as two).
        rebalances: AVL rebalance events or Red-Black rotation cases applied.
        recolors: Red-Black nodes whose color was flipped by a fix-up case.
    """

    rotations: int = 0
    rebalances: int = 0
    recolors: int = 0

    def reset(self) -> None:
        self.rotations = 0
        self.rebalances = 0
        self.recolors = 0

    def snapshot(self) -> "TreeStats":
        return TreeStats(self.rotations, self.rebalances, self.recolors)
