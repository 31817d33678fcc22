"""Linked Collections"""

from .linked_list import LinkedList, NodeNotFoundError
from .node import Node

__all__ = ["LinkedList", "Node", "NodeNotFoundError"]
