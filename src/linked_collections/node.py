"""Node class for doubly linked list."""

from copy import deepcopy
from typing import TYPE_CHECKING, Any, Generic, Optional, TypeVar
from weakref import ref

if TYPE_CHECKING:
    from .linked_list import LinkedList

T = TypeVar("T")


class Node(Generic[T]):
    """A link in a LinkedList.

    The forward link owns the next node. The backward link and the owner are
    weak references, so a chain is freed as soon as its head is dropped.
    """

    next: Optional["Node[T]"]
    value: T

    def __init__(self, value: T) -> None:
        self.next = None
        self._prev: Optional["ref[Node[T]]"] = None
        self._owner: Optional["ref[LinkedList[Any]]"] = None
        self.value = value

    @property
    def prev(self) -> Optional["Node[T]"]:
        if self._prev is None:
            return None
        return self._prev()

    @prev.setter
    def prev(self, node: Optional["Node[T]"]) -> None:
        self._prev = None if node is None else ref(node)

    @property
    def owner(self) -> Optional["LinkedList[Any]"]:
        """The list this node is linked into, if any."""
        if self._owner is None:
            return None
        return self._owner()

    def attach(self, owner: "LinkedList[Any]") -> None:
        self._owner = ref(owner)

    def detach(self) -> None:
        """Clear both links and the owner."""
        self.next = None
        self._prev = None
        self._owner = None

    def __copy__(self) -> "Node[T]":
        """A detached node holding the same value."""
        return self.__class__(self.value)

    def __deepcopy__(self, memo: dict[int, Any]) -> "Node[T]":
        new: Node[T] = self.__class__(deepcopy(self.value, memo))
        memo[id(self)] = new
        return new

    def __repr__(self) -> str:
        return f"Node({self.value!r})"
