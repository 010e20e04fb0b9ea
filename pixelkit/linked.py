"""A minimal singly linked list of nodes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional


@dataclass(eq=False)
class Node:
    """One element of a linked list: its content and the next node."""

    content: Any = None
    next: Optional["Node"] = None

    def __iter__(self) -> Iterator["Node"]:
        """Yield this node and every node after it, in order."""
        node: Optional[Node] = self
        while node is not None:
            yield node
            node = node.next


def push(head: Optional[Node], node: Node) -> Node:
    """Put ``node`` in front of ``head`` and return it as the new head."""
    node.next = head
    return node


def map_nodes(
    head: Optional[Node], func: Callable[[Node], Node]
) -> Optional[Node]:
    """A new list made of ``func`` applied to each node of ``head``.

    ``func`` returns a fresh node for each node it is given; whatever it
    sets as that node's ``next`` is replaced to chain the results in the
    original order.
    """
    if head is None:
        return None
    mapped = [func(node) for node in head]
    for current, following in zip(mapped, mapped[1:]):
        current.next = following
    mapped[-1].next = None
    return mapped[0]


def delete_all(
    head: Optional[Node], release: Optional[Callable[[Any], None]] = None
) -> None:
    """Unlink every node, passing each content to ``release`` in order."""
    node = head
    while node is not None:
        following = node.next
        if release is not None:
            release(node.content)
        node.content = None
        node.next = None
        node = following