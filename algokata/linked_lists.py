"""Singly linked list puzzles: merging, reversing, cycle and middle finding."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from functools import reduce


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list; nodes compare by identity."""

    val: int = 0
    next: ListNode | None = field(default=None, repr=False)

    def __iter__(self) -> Iterator[int]:
        """Yield the values from this node to the end of the list."""
        node: ListNode | None = self
        while node is not None:
            yield node.val
            node = node.next


def _nodes(head: ListNode | None) -> Iterator[ListNode]:
    while head is not None:
        yield head
        head = head.next


def build_list(values: Iterable[int]) -> ListNode | None:
    """Build a linked list holding ``values`` in order; empty input gives None."""
    dummy = ListNode()
    tail = dummy
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return dummy.next


def list_values(head: ListNode | None) -> list[int]:
    """Return the values of the list starting at ``head``."""
    return list(head) if head is not None else []


def add_two_numbers(l1: ListNode | None, l2: ListNode | None) -> ListNode | None:
    """Add two numbers stored as lists of decimal digits, least significant first."""
    dummy = ListNode()
    tail = dummy
    carry = 0
    while l1 is not None or l2 is not None or carry:
        total = carry
        if l1 is not None:
            total += l1.val
            l1 = l1.next
        if l2 is not None:
            total += l2.val
            l2 = l2.next
        carry, digit = divmod(total, 10)
        tail.next = ListNode(digit)
        tail = tail.next
    return dummy.next


def merge_two_lists(l1: ListNode | None, l2: ListNode | None) -> ListNode | None:
    """Splice two sorted lists into one sorted list; on ties ``l1`` goes first."""
    dummy = ListNode()
    tail = dummy
    while l1 is not None and l2 is not None:
        if l1.val <= l2.val:
            tail.next, l1 = l1, l1.next
        else:
            tail.next, l2 = l2, l2.next
        tail = tail.next
    tail.next = l1 if l1 is not None else l2
    return dummy.next


def has_cycle(head: ListNode | None) -> bool:
    """Return True if following ``next`` from ``head`` loops forever."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def get_intersection_node(
    head_a: ListNode | None, head_b: ListNode | None
) -> ListNode | None:
    """Return the first node shared by both lists, or None."""
    length_a = sum(1 for _ in _nodes(head_a))
    length_b = sum(1 for _ in _nodes(head_b))
    for _ in range(length_a - length_b):
        head_a = head_a.next
    for _ in range(length_b - length_a):
        head_b = head_b.next
    while head_a is not head_b:
        head_a = head_a.next
        head_b = head_b.next
    return head_a


def remove_elements(head: ListNode | None, val: int) -> ListNode | None:
    """Unlink every node holding ``val`` and return the new head."""
    dummy = ListNode(0, head)
    node = dummy
    while node.next is not None:
        if node.next.val == val:
            node.next = node.next.next
        else:
            node = node.next
    return dummy.next


def is_palindrome_list(head: ListNode | None) -> bool:
    """Return True if the list reads the same both ways; an empty list does not."""
    values = list_values(head)
    return bool(values) and values == values[::-1]


def reverse_list(head: ListNode | None) -> ListNode | None:
    """Reverse the list in place and return its new head."""
    previous: ListNode | None = None
    while head is not None:
        following = head.next
        head.next = previous
        previous, head = head, following
    return previous


def delete_middle(head: ListNode | None) -> ListNode | None:
    """Unlink the node at index ``length // 2`` and return the head.

    Raises ValueError for an empty list.
    """
    if head is None:
        raise ValueError("cannot delete the middle of an empty list")
    if head.next is None:
        return None
    slow = head
    fast = head.next.next
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    slow.next = slow.next.next
    return head


def reverse_k_group(head: ListNode | None, k: int) -> ListNode | None:
    """Reverse each full group of ``k`` nodes; a shorter tail is left as is.

    Raises ValueError when ``k`` is below 1.
    """
    if k < 1:
        raise ValueError(f"group size must be at least 1, got {k}")
    dummy = ListNode(0, head)
    group_prev = dummy
    while True:
        kth: ListNode | None = group_prev
        for _ in range(k):
            kth = kth.next
            if kth is None:
                return dummy.next
        group_next = kth.next
        previous, node = group_next, group_prev.next
        while node is not group_next:
            following = node.next
            node.next = previous
            previous, node = node, following
        first = group_prev.next
        group_prev.next = kth
        group_prev = first


def delete_duplicates(head: ListNode | None) -> ListNode | None:
    """Unlink repeated values from a sorted list so each value appears once."""
    node = head
    while node is not None and node.next is not None:
        if node.val == node.next.val:
            node.next = node.next.next
        else:
            node = node.next
    return head


def middle_node(head: ListNode | None) -> ListNode | None:
    """Return the middle node; for an even length, the second of the two."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
    return slow


def get_decimal_value(head: ListNode | None) -> int:
    """Read the list as binary digits, most significant first.

    Raises ValueError for an empty list.
    """
    if head is None:
        raise ValueError("an empty list holds no number")
    return reduce(lambda acc, bit: acc * 2 + bit, head)