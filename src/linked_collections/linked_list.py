"""Linked List implementation in Python."""

import logging
from copy import deepcopy
from typing import Any, Generic, Iterable, Iterator, Optional, TypeVar
import warnings
from weakref import ref

from .node import Node

logger = logging.getLogger(__name__)

T = TypeVar("T")


class NodeNotFoundError(ValueError):
    """Raised when a node handle does not belong to the list it is used on."""


class LinkedList(Generic[T], Iterable[Node[T]]):
    """Doubly linked list

    The list owns its nodes through the head and the forward links. The tail
    is cached as a weak reference for O(1) append.
    """

    def __init__(self, iterable: Optional[Iterable[T]] = None) -> None:
        self._head: Optional[Node[T]] = None
        self._tail: Optional["ref[Node[T]]"] = None
        self._size = 0
        if iterable is not None:
            for value in iterable:
                self.append(value)

    def sanity_check(self) -> None:
        """Check if the linked list is sane"""
        if not __debug__:
            warnings.warn("Sanity checks are disabled", RuntimeWarning)
            return
        if self._head is None:
            assert self._tail is None
            assert self._size == 0
            return
        assert self.tail is not None
        assert self._head.prev is None
        assert self.tail.next is None
        count = 1
        current = self._head
        assert current.owner is self
        while current.next is not None:
            assert current.next.prev is current
            assert current.next.owner is self
            current = current.next
            count += 1
        assert current is self.tail
        assert count == self._size, f"{count} != {self._size}"

    def _check_links(self, *nodes: Optional[Node[T]]) -> None:
        """Time complexity: O(1). Check the links around the given nodes."""
        if self._head is None:
            assert self._tail is None
            assert self._size == 0
        for node in nodes:
            if node is None:
                continue
            assert node.owner is self
            if node.prev is None:
                assert self._head is node
            else:
                assert node.prev.next is node
            if node.next is None:
                assert self.tail is node
            else:
                assert node.next.prev is node

    @property
    def head(self) -> Optional[Node[T]]:
        return self._head

    @property
    def tail(self) -> Optional[Node[T]]:
        if self._tail is None:
            return None
        return self._tail()

    @property
    def first(self) -> Optional[Node[T]]:
        """Time complexity: O(1)"""
        return self.head

    @property
    def last(self) -> Optional[Node[T]]:
        """Time complexity: O(1)"""
        return self.tail

    def __iter__(self) -> Iterator[Node[T]]:
        current = self._head
        while current is not None:
            yield current
            current = current.next

    def values(self) -> Iterator[T]:
        for node in self:
            yield node.value

    def is_empty(self) -> bool:
        return self._head is None

    def append(self, value: T) -> Node[T]:
        """Time complexity: O(1)"""
        node = Node(value)
        tail = self.tail
        if tail is None:
            self._head = node
        else:
            node.prev = tail
            tail.next = node
        node.attach(self)
        self._tail = ref(node)
        self._size += 1
        if __debug__:
            self._check_links(node)
        return node

    def node_at(self, index: int) -> Optional[Node[T]]:
        """Time complexity: O(index). Return None if the index is out of
        range, negative indices included.
        """
        if index < 0 or index >= self._size:
            return None
        current = self._head
        for _ in range(index):
            assert current is not None
            current = current.next
        return current

    def remove(self, node: Node[T]) -> T:
        """Time complexity: O(1). Unlink the node and return its value.

        Raises NodeNotFoundError if the node is not linked into this list.
        """
        if node.owner is not self:
            logger.debug("Rejecting removal of %r: not in list", node.value)
            raise NodeNotFoundError(f"{node!r} is not in this list")

        logger.debug("Removing %r from list of %d", node.value, self._size)
        prev = node.prev
        following = node.next
        if prev is None:
            self._head = following
        else:
            prev.next = following
        if following is None:
            self._tail = None if prev is None else ref(prev)
        else:
            following.prev = prev

        node.detach()
        self._size -= 1
        if __debug__:
            self._check_links(prev, following)
        return node.value

    def remove_all(self) -> None:
        """Time complexity: O(n). Every former node is detached."""
        logger.debug("Removing all %d nodes from linked list", self._size)
        current = self._head
        self._head = None
        self._tail = None
        self._size = 0
        while current is not None:
            following = current.next
            current.detach()
            current = following
        if __debug__:
            self._check_links()

    def __str__(self) -> str:
        return "[" + ", ".join(map(str, self.values())) + "]"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({list(self.values())!r})"

    def __len__(self) -> int:
        """Time complexity: O(1)"""
        return self._size

    def __copy__(self) -> "LinkedList[T]":
        new: LinkedList[T] = self.__class__()
        for value in self.values():
            new.append(value)
        return new

    def __deepcopy__(self, memo: dict[int, Any]) -> "LinkedList[T]":
        new: LinkedList[T] = self.__class__()
        memo[id(self)] = new
        for value in self.values():
            new.append(deepcopy(value, memo))
        return new
