"""Routines on singly linked lists."""

from __future__ import annotations

from typing import Optional

from algodrills.nodes import ListNode


def add_two_numbers(l1: Optional[ListNode], l2: Optional[ListNode]) -> Optional[ListNode]:
    """Add two numbers stored as reversed digit lists, returning a new digit list."""
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


def rotate_right(head: Optional[ListNode], k: int) -> Optional[ListNode]:
    """Rotate the list ``k`` places to the right and return the new head."""
    if k < 0:
        raise ValueError("rotation count must not be negative")
    if head is None:
        return None
    tail = head
    count = 1
    while tail.next is not None:
        tail = tail.next
        count += 1
    k %= count
    if k == 0:
        return head
    new_tail = head
    for _ in range(count - k - 1):
        new_tail = new_tail.next
    new_head = new_tail.next
    new_tail.next = None
    tail.next = head
    return new_head


def reverse_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse the list in place and return its new head."""
    previous = None
    while head is not None:
        head.next, previous, head = previous, head, head.next
    return previous


def reorder_list(head: Optional[ListNode]) -> None:
    """Reorder L0, L1, ..., Ln into L0, Ln, L1, Ln-1, ... in place."""
    if head is None:
        return
    mid = hare = head
    while hare is not None and hare.next is not None:
        hare = hare.next.next
        if hare is not None:
            mid = mid.next
    second = reverse_list(mid.next)
    mid.next = None
    first = head
    while first is not None and second is not None:
        first_next, second_next = first.next, second.next
        first.next = second
        second.next = first_next
        first, second = first_next, second_next


def odd_even_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Group nodes at odd positions before those at even positions, in place."""
    if head is None:
        return None
    odd = head
    even_head = even = head.next
    while even is not None and even.next is not None:
        odd.next = even.next
        odd = odd.next
        even.next = odd.next
        even = even.next
    odd.next = even_head
    return head