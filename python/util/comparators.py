from dataclasses import dataclass
from typing import Any, Callable, Optional

Comparator = Callable[[Any, Any], int]


def cmp(x: Any, y: Any) -> int:
    """Return negative if x<y, zero if x==y, positive if x>y"""
    return int(x > y) - int(x < y)  # numpy bools do not support subtraction


def reverse(compare: Optional[Comparator] = None) -> Comparator:
    """Flip a comparator so selecting rank k gives the k-th largest instead of the k-th smallest

    Example:
        >>> reverse()(1, 2)
        1
    """
    compare = compare or cmp

    def _reversed(x: Any, y: Any) -> int:
        return compare(y, x)

    return _reversed


def by_key(key: Callable[[Any], Any], compare: Optional[Comparator] = None) -> Comparator:
    """Compare elements by key(element) instead of the elements themselves

    Example:
        >>> by_key(len)("abc", "de")
        1
    """
    compare = compare or cmp

    def _keyed(x: Any, y: Any) -> int:
        return compare(key(x), key(y))

    return _keyed


@dataclass
class CountingComparator():
    compare: Comparator = cmp
    calls: int = 0

    def __call__(self, x: Any, y: Any) -> int:
        self.calls += 1
        return self.compare(x, y)

    def reset(self) -> None:
        self.calls = 0
