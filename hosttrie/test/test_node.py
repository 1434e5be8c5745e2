#####################################################################################
#
#  Copyright (c) Crossbar.io Technologies GmbH
#  SPDX-License-Identifier: EUPL-1.2
#
#####################################################################################

import gc
import unittest

from hosttrie.node import Node, WILDCARD, canonical_label


class TestNode(unittest.TestCase):

    def test_create(self):
        node = Node()
        self.assertTrue(node.is_root())
        self.assertIsNone(node.parent)
        self.assertFalse(node.is_leaf)
        self.assertIsNone(node.payload)
        self.assertTrue(node.is_empty())

    def test_get_or_create_child(self):
        """
        A child is created once, linked to its parent and returned again
        on the next call.
        """
        root = Node()
        child = root.get_or_create_child('com')
        self.assertIs(child.parent, root)
        self.assertFalse(child.is_root())
        self.assertIs(root.get_or_create_child('com'), child)
        self.assertEqual(list(root), ['com'])
        self.assertFalse(root.is_empty())

    def test_get_child(self):
        root = Node()
        self.assertIsNone(root.get_child('com'))
        self.assertTrue(root.is_empty())
        child = root.get_or_create_child('com')
        self.assertIs(root.get_child('com'), child)

    def test_empty_label_is_wildcard(self):
        """
        The empty label and '*' share the single wildcard slot of a node.
        """
        self.assertEqual(canonical_label(''), WILDCARD)
        self.assertEqual(canonical_label('org'), 'org')

        root = Node()
        self.assertIsNone(root.wildcard())
        child = root.get_or_create_child('')
        self.assertIs(root.wildcard(), child)
        self.assertIs(root.get_or_create_child('*'), child)
        self.assertEqual(list(root), [WILDCARD])

    def test_mark_leaf(self):
        node = Node()
        node.mark_leaf(1)
        self.assertTrue(node.is_leaf)
        self.assertEqual(node.payload, 1)

        # last one wins
        node.mark_leaf(2)
        self.assertEqual(node.payload, 2)

        node.unmark_leaf()
        self.assertFalse(node.is_leaf)
        self.assertIsNone(node.payload)

    def test_falsy_payload(self):
        """
        The leaf flag, not the payload, tells whether a node is a leaf.
        """
        node = Node()
        node.mark_leaf(None)
        self.assertTrue(node.is_leaf)

    def test_remove_child(self):
        root = Node()
        child = root.get_or_create_child('com')
        self.assertIs(root.remove_child('com'), child)
        self.assertTrue(root.is_empty())
        self.assertIsNone(child.parent)
        self.assertIsNone(root.remove_child('com'))

    def test_parent_is_weak(self):
        """
        A child does not keep its parent alive.
        """
        root = Node()
        child = root.get_or_create_child('com')
        del root
        gc.collect()
        self.assertIsNone(child.parent)

    def test_items(self):
        root = Node()
        a = root.get_or_create_child('a')
        b = root.get_or_create_child('b')
        self.assertEqual(dict(root.items()), {'a': a, 'b': b})

    def test_repr(self):
        root = Node()
        root.get_or_create_child('b')
        root.get_or_create_child('a')
        self.assertEqual(repr(root), "Node(is_leaf=False, payload=None, children=['a', 'b'])")
