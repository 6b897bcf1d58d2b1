"""Binary searches over sorted, rotated and mountain-shaped sequences."""


def search_rotated(nums, target):
    """Index of ``target`` in a rotated ascending sequence, or -1."""
    low, high = 0, len(nums) - 1
    while low <= high:
        mid = (low + high) // 2
        if nums[mid] == target:
            return mid
        if nums[low] <= nums[mid]:
            if nums[low] <= target <= nums[mid]:
                high = mid - 1
            else:
                low = mid + 1
        elif nums[mid] <= target <= nums[high]:
            low = mid + 1
        else:
            high = mid - 1
    return -1


def search_insert(nums, target):
    """Index of ``target`` in sorted ``nums``, or where it would be inserted."""
    low, high = 0, len(nums)
    while low < high:
        mid = (low + high) // 2
        if nums[mid] == target:
            return mid
        if nums[mid] < target:
            low = mid + 1
        else:
            high = mid
    return low


def peak_index_in_mountain(arr):
    """Index of the peak of a mountain sequence, or -1 if none is found.

    Raises ValueError when the search has to look past the end of ``arr``,
    which happens only when ``arr`` is not a mountain.
    """
    low, high = 1, len(arr) - 1
    while low <= high:
        mid = (low + high) // 2
        if mid + 1 >= len(arr):
            raise ValueError("not a mountain array")
        if arr[mid - 1] < arr[mid] > arr[mid + 1]:
            return mid
        if arr[mid - 1] < arr[mid]:
            low = mid + 1
        else:
            high = mid - 1
    return -1