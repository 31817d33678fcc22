"""Unit tests for node.py"""

from copy import copy, deepcopy
import gc
import unittest
from weakref import ref

from linked_collections import LinkedList, Node, NodeNotFoundError


class TestNode(unittest.TestCase):
    def test_new_node_is_detached(self) -> None:
        node = Node((1, 2))
        self.assertEqual(node.value, (1, 2))
        self.assertIsNone(node.next)
        self.assertIsNone(node.prev)
        self.assertIsNone(node.owner)
        self.assertEqual(repr(node), "Node((1, 2))")

    def test_prev_does_not_keep_node_alive(self) -> None:
        first = Node("Apple")
        second = Node("Sony")
        second.prev = first
        self.assertIs(second.prev, first)
        weak_first = ref(first)
        del first
        gc.collect()
        self.assertIsNone(weak_first())
        self.assertIsNone(second.prev)

    def test_next_keeps_node_alive(self) -> None:
        first = Node("Apple")
        first.next = Node("Sony")
        weak_second = ref(first.next)
        gc.collect()
        self.assertIsNotNone(weak_second())

    def test_owner(self) -> None:
        linked_list = LinkedList([1])
        node = linked_list.first
        assert node is not None
        self.assertIs(node.owner, linked_list)
        node.detach()
        self.assertIsNone(node.owner)

    def test_identity(self) -> None:
        self.assertNotEqual(Node(1), Node(1))
        nodes = {Node([1]), Node([1])}
        self.assertEqual(len(nodes), 2)

    def test_copy_is_detached(self) -> None:
        linked_list = LinkedList([["Apple"], ["Sony"]])
        node = linked_list.node_at(1)
        assert node is not None
        for copied in (copy(node), deepcopy(node)):
            self.assertIsNone(copied.owner)
            self.assertIsNone(copied.prev)
            self.assertIsNone(copied.next)
            with self.assertRaises(NodeNotFoundError):
                linked_list.remove(copied)
        self.assertIs(copy(node).value, node.value)
        self.assertIsNot(deepcopy(node).value, node.value)
        self.assertEqual(len(linked_list), 2)
