"""Singly linked lists and the classic puzzles over them."""

from dataclasses import dataclass
from itertools import zip_longest


@dataclass(eq=False, repr=False)
class ListNode:
    """One node of a singly linked list."""

    val: int = 0
    next: "ListNode | None" = None

    def __iter__(self):
        node = self
        while node is not None:
            yield node.val
            node = node.next

    def __repr__(self):
        return f"ListNode({list(self)!r})"


def build_list(values):
    """Link ``values`` into a list and return its head, or None when empty."""
    head = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def to_pylist(head):
    """Values of the list starting at ``head``, in order."""
    return [] if head is None else list(head)


def remove_nth_from_end(head, n):
    """Unlink the ``n``-th node counted from the end and return the new head."""
    if n < 1:
        raise ValueError("n must be at least 1")
    fast = head
    for _ in range(n):
        if fast is None:
            raise ValueError("n exceeds the length of the list")
        fast = fast.next
    if fast is None:
        return head.next
    slow = head
    while fast.next is not None:
        slow, fast = slow.next, fast.next
    slow.next = slow.next.next
    return head


def remove_elements(head, val):
    """Unlink every node holding ``val`` and return the new head."""
    while head is not None and head.val == val:
        head = head.next
    node = head
    while node is not None and node.next is not None:
        if node.next.val == val:
            node.next = node.next.next
        else:
            node = node.next
    return head


def reverse_list(head):
    """Reverse the list in place and return its new head."""
    previous = None
    while head is not None:
        head.next, previous, head = previous, head, head.next
    return previous


def merge_two_lists(list1, list2):
    """Splice two ascending lists into one ascending list."""
    dummy = ListNode()
    tail = dummy
    while list1 is not None and list2 is not None:
        if list1.val <= list2.val:
            tail.next, list1 = list1, list1.next
        else:
            tail.next, list2 = list2, list2.next
        tail = tail.next
    tail.next = list1 if list1 is not None else list2
    return dummy.next


def is_palindrome_list(head):
    """True if the list reads the same forwards and backwards."""
    values = to_pylist(head)
    return values == values[::-1]


def add_two_numbers(l1, l2):
    """Add two numbers stored as digit lists, least significant digit first."""
    dummy = ListNode()
    tail = dummy
    carry = 0
    for a, b in zip_longest(to_pylist(l1), to_pylist(l2), fillvalue=0):
        carry, digit = divmod(a + b + carry, 10)
        tail.next = ListNode(digit)
        tail = tail.next
    while carry:
        carry, digit = divmod(carry, 10)
        tail.next = ListNode(digit)
        tail = tail.next
    return dummy.next