from typing import List, Sequence

from floyd_rivest import argselect


def argpartition(nums: Sequence[int], k: int) -> List[int]:
    """List version of np.argpartition(nums, k) backed by Floyd-Rivest selection

    nums is not modified. nums[idxs[k]] is the k-th smallest value, values at idxs[:k] are no greater
    and values at idxs[k:] are no smaller.

    Example:
        >>> nums = [5, 1, 4]
        >>> nums[argpartition(nums, 1)[1]]
        4
    """
    return argselect(nums, k)
