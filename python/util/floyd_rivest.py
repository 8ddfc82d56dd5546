import math
from typing import Any, List, MutableSequence, Optional, Sequence, Tuple

from comparators import Comparator, cmp

SAMPLE_THRESHOLD = 600  # Windows wider than this are narrowed by sampling before partitioning
INSERTION_THRESHOLD = 20  # Windows this narrow are finished with an insertion pass


class OutOfRangeError(IndexError):
    pass


def select(seq: MutableSequence[Any], k: int, compare: Comparator) -> None:
    """Move the rank k element of seq to position k, in place

    After the call seq[k] holds the value that a full sort under compare would put there, every element
    before k compares no greater than it and every element after k compares no less. Nothing else about
    the order is guaranteed. Only element swaps are performed.

    Args:
        seq: Mutable, indexable sequence. Lists and 1-D numpy arrays both work
        k: 0-based rank to place. Must satisfy 0 <= k < len(seq)
        compare: Three-way comparator returning negative, zero or positive for less, equal or greater

    Raises:
        OutOfRangeError: seq is empty or k is outside [0, len(seq)). seq is left untouched

    Example:
        >>> v = [10, 7, 9, 7, 2, 8, 8, 1, 9, 4]
        >>> select(v, 3, cmp)
        >>> v[3]
        7
    """
    nth_element(seq, k, compare)


def nth_element(
    seq: MutableSequence[Any],
    k: int,
    compare: Optional[Comparator] = None,
    left: int = 0,
    right: Optional[int] = None,
) -> None:
    """Floyd-Rivest selection of the rank k element within the inclusive window [left, right]

    Same as select but compare defaults to natural ordering and the work can be restricted to a
    window of seq. Positions outside [left, right] are never read or written.

    Windows wider than SAMPLE_THRESHOLD first select k inside a narrow sample window around the
    expected position of the answer so that the following partition uses a near-perfect pivot.
    Each partition drops the side of the window that cannot contain k. The nesting is kept on an
    explicit stack of (left, right, narrowed) frames instead of the call stack.

    Args:
        seq: Mutable, indexable sequence
        k: 0-based rank to place. Must satisfy left <= k <= right
        compare: Three-way comparator. If None, use cmp
        left: First index of the window
        right: Last index of the window. If None, use len(seq) - 1

    Raises:
        OutOfRangeError: the bounds do not satisfy 0 <= left <= k <= right < len(seq)
    """
    if right is None:
        right = len(seq) - 1
    _check_bounds(len(seq), k, left, right)
    compare = compare or cmp
    frames = [(left, right, False)]
    while frames:
        left, right, narrowed = frames.pop()
        if right - left <= INSERTION_THRESHOLD:
            _insertion(seq, compare, left, right)
            continue
        if not narrowed and right - left > SAMPLE_THRESHOLD:
            sample_left, sample_right = _sample_bounds(k, left, right)
            frames.append((left, right, True))
            if (sample_left, sample_right) != (left, right):
                frames.append((sample_left, sample_right, False))
            continue
        j = _partition(seq, compare, left, right, k)
        if j < k:
            frames.append((j + 1, right, False))
        elif j > k:
            frames.append((left, j - 1, False))


def argselect(values: Sequence[Any], k: int, compare: Optional[Comparator] = None) -> List[int]:
    """Indices that would place the rank k element of values at position k. values is not modified

    Args:
        values: Indexable sequence or 1-D numpy array
        k: 0-based rank. Must satisfy 0 <= k < len(values)
        compare: Three-way comparator. If None, use cmp

    Returns:
        idxs: Permutation of range(len(values)). values[idxs[k]] is the rank k value, values at
            idxs[:k] compare no greater and values at idxs[k + 1:] compare no less

    Example:
        >>> argselect([30, 10, 20], 0)
        [1, 2, 0]
    """
    compare = compare or cmp
    idxs = list(range(len(values)))

    def _compare_at(a: int, b: int) -> int:
        return compare(values[a], values[b])

    nth_element(idxs, k, _compare_at)
    return idxs


def _check_bounds(n: int, k: int, left: int, right: int) -> None:
    if n == 0:
        raise OutOfRangeError(f"Cannot select from an empty sequence. Got k={k}")
    if not 0 <= k < n:
        raise OutOfRangeError(f"k={k} should be in [0, len(seq)={n})")
    if not 0 <= left <= k <= right < n:
        raise OutOfRangeError(
            f"Expected 0 <= left <= k <= right < len(seq). Got left={left}, k={k}, right={right}, len(seq)={n}"
        )


def _insertion(seq: MutableSequence[Any], compare: Comparator, left: int, right: int) -> None:
    """Sort seq[left:right + 1] with adjacent swaps"""
    for loc in range(left + 1, right + 1):
        i = loc
        while i > left and compare(seq[i - 1], seq[i]) > 0:
            seq[i - 1], seq[i] = seq[i], seq[i - 1]
            i -= 1


def _sample_bounds(k: int, left: int, right: int) -> Tuple[int, int]:
    """Window around k, about n ** (2/3) wide, whose rank k element estimates the rank k element of [left, right]

    The window is biased by sd toward the larger side so that k is expected to fall in the smaller
    part after partitioning around the estimate.
    """
    n = right - left + 1
    i = k - left
    z = math.log(n)
    s = 0.5 * math.exp(2 * z / 3)
    sd = 0.5 * math.sqrt(z * s * (n - s) / n) * cmp(i, n / 2)
    new_left = math.floor(k - i * s / n + sd)
    new_right = math.floor(k + (n - i) * s / n + sd)
    # Rounding can overshoot. k must stay inside and the window inside [left, right]
    return max(left, min(k, new_left)), min(right, max(k, new_right))


def _partition(seq: MutableSequence[Any], compare: Comparator, left: int, right: int, k: int) -> int:
    """Partition seq[left:right + 1] around the value at k and return its final position j

    The pivot is staged at left and the larger of seq[left], seq[right] is parked at right so both
    ends act as sentinels for the inward scans. Scans are also clamped to the window so a comparator
    that is not a total preorder cannot walk them out of bounds.
    """
    t = seq[k]
    i, j = left, right
    seq[left], seq[k] = seq[k], seq[left]
    if compare(seq[right], t) > 0:
        seq[right], seq[left] = seq[left], seq[right]
    while i < j:
        seq[i], seq[j] = seq[j], seq[i]
        i += 1
        j -= 1
        while i < right and compare(seq[i], t) < 0:
            i += 1
        while j > left and compare(seq[j], t) > 0:
            j -= 1
    if compare(seq[left], t) == 0:
        seq[left], seq[j] = seq[j], seq[left]
    else:
        j += 1
        seq[j], seq[right] = seq[right], seq[j]
    return j
