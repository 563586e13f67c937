"""
Abstract base classes and protocols for the ordered map.
"""

from ordmap.interfaces.balance_policy import BalancePolicy
from ordmap.interfaces.range_iterable import RangeIterable
from ordmap.interfaces.sorted_container import SortedContainer

__all__ = ["BalancePolicy", "RangeIterable", "SortedContainer"]
