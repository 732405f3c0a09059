"""Singly linked lists and the classic operations on them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional


@dataclass(eq=False, repr=False)
class ListNode:
    """A node of a singly linked list."""

    val: Any = 0
    next: Optional["ListNode"] = None

    def __iter__(self) -> Iterator[Any]:
        """Yield the values from this node to the end of the list.

        A cyclic list yields values forever.
        """
        node: Optional[ListNode] = self
        while node is not None:
            yield node.val
            node = node.next

    def __repr__(self) -> str:
        return f"ListNode({self.val!r})"


def build_list(values: Iterable[Any]) -> Optional[ListNode]:
    """Build a linked list holding ``values`` and return its head."""
    dummy = ListNode()
    tail = dummy
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return dummy.next


def list_values(head: Optional[ListNode]) -> list:
    """Return the values of an acyclic list as a Python list."""
    return [] if head is None else list(head)


def add_two_numbers(l1: Optional[ListNode], l2: Optional[ListNode]) -> Optional[ListNode]:
    """Add two numbers stored as reversed decimal digits."""
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


def remove_nth_from_end(head: Optional[ListNode], n: int) -> Optional[ListNode]:
    """Unlink the ``n``-th node from the end and return the new head."""
    if n < 1:
        raise ValueError("n must be at least 1")
    dummy = ListNode(next=head)
    fast: Optional[ListNode] = dummy
    for _ in range(n):
        fast = fast.next
        if fast is None:
            raise ValueError("n is larger than the length of the list")
    slow = dummy
    while fast.next is not None:
        fast = fast.next
        slow = slow.next
    slow.next = slow.next.next
    return dummy.next


def merge_two_lists(list1: Optional[ListNode], list2: Optional[ListNode]) -> Optional[ListNode]:
    """Splice two sorted lists into one sorted list; ties take from ``list1`` first."""
    dummy = ListNode()
    tail = dummy
    while list1 is not None and list2 is not None:
        if list1.val <= list2.val:
            tail.next = list1
            list1 = list1.next
        else:
            tail.next = list2
            list2 = list2.next
        tail = tail.next
    tail.next = list1 if list1 is not None else list2
    return dummy.next


def swap_pairs(head: Optional[ListNode]) -> Optional[ListNode]:
    """Swap every two adjacent nodes and return the new head."""
    dummy = ListNode(next=head)
    prev = dummy
    while prev.next is not None and prev.next.next is not None:
        first = prev.next
        second = first.next
        first.next = second.next
        second.next = first
        prev.next = second
        prev = first
    return dummy.next


def has_cycle(head: Optional[ListNode]) -> bool:
    """Tell whether the list loops back on itself."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def detect_cycle(head: Optional[ListNode]) -> Optional[ListNode]:
    """Return the node where the cycle begins, or ``None`` if there is none."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            entry = head
            while entry is not slow:
                entry = entry.next
                slow = slow.next
            return entry
    return None


def _length(head: Optional[ListNode]) -> int:
    count = 0
    while head is not None:
        count += 1
        head = head.next
    return count


def get_intersection_node(
    head_a: Optional[ListNode], head_b: Optional[ListNode]
) -> Optional[ListNode]:
    """Return the first node shared by both lists, or ``None``."""
    len_a, len_b = _length(head_a), _length(head_b)
    for _ in range(len_a - len_b):
        head_a = head_a.next
    for _ in range(len_b - len_a):
        head_b = head_b.next
    while head_a is not None and head_b is not None:
        if head_a is head_b:
            return head_a
        head_a = head_a.next
        head_b = head_b.next
    return None


def reverse_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Reverse the list in place and return the new head."""
    prev = None
    while head is not None:
        head.next, prev, head = prev, head, head.next
    return prev


def is_palindrome(head: Optional[ListNode]) -> bool:
    """Tell whether the list reads the same in both directions."""
    values = list_values(head)
    return values == values[::-1]


def delete_node(node: ListNode) -> None:
    """Remove ``node`` from its list, given only that node."""
    successor = node.next
    if successor is None:
        raise ValueError("cannot delete the tail node")
    node.val = successor.val
    node.next = successor.next


def delete_duplicates(head: Optional[ListNode]) -> Optional[ListNode]:
    """Drop repeated values from a sorted list in place."""
    current = head
    while current is not None and current.next is not None:
        if current.val == current.next.val:
            current.next = current.next.next
        else:
            current = current.next
    return head


def swap_nodes(head: Optional[ListNode], k: int) -> Optional[ListNode]:
    """Swap the values of the ``k``-th node from the start and from the end."""
    if k < 1 or head is None:
        raise ValueError("k is out of range")
    fast = head
    for _ in range(k - 1):
        fast = fast.next
        if fast is None:
            raise ValueError("k is out of range")
    first = fast
    slow = head
    while fast.next is not None:
        slow = slow.next
        fast = fast.next
    first.val, slow.val = slow.val, first.val
    return head