#####################################################################################
#
#  Copyright (c) Crossbar.io Technologies GmbH
#  SPDX-License-Identifier: EUPL-1.2
#
#####################################################################################

import weakref

__all__ = ('Node', 'WILDCARD', 'canonical_label')

WILDCARD = '*'
"""
Label of the wildcard slot. A wildcard child matches any single label
not present as an exact child of the same node.
"""


def canonical_label(label):
    """
    Map the empty label (as produced by leading-dot patterns like ``.org``)
    onto the wildcard label, so that each node has one wildcard slot only.
    """
    if label == '':
        return WILDCARD
    return label


class Node(object):
    """
    A node of the hostname trie.

    Children are owned by their parent. The parent is referenced weakly and
    only used to walk upwards when compacting the tree after a removal.
    """

    __slots__ = (
        'children',
        'is_leaf',
        'payload',
        '_parent',
        '__weakref__',
    )

    def __init__(self, parent=None):
        # map: label => Node
        self.children = {}

        # set when this node terminates an inserted pattern
        self.is_leaf = False

        # only meaningful while is_leaf is set
        self.payload = None

        self._parent = weakref.ref(parent) if parent is not None else None

    @property
    def parent(self):
        if self._parent is None:
            return None
        return self._parent()

    def is_root(self):
        return self._parent is None

    def get_or_create_child(self, label):
        label = canonical_label(label)
        child = self.children.get(label)
        if child is None:
            child = Node(parent=self)
            self.children[label] = child
        return child

    def get_child(self, label):
        return self.children.get(label)

    def wildcard(self):
        return self.children.get(WILDCARD)

    def mark_leaf(self, payload):
        self.is_leaf = True
        self.payload = payload

    def unmark_leaf(self):
        self.is_leaf = False
        self.payload = None

    def remove_child(self, label):
        child = self.children.pop(label, None)
        if child is not None:
            child._parent = None
        return child

    def is_empty(self):
        return not self.children

    def items(self):
        return self.children.items()

    def __iter__(self):
        return iter(self.children)

    def __repr__(self):
        return "{}(is_leaf={}, payload={!r}, children={})".format(
            self.__class__.__name__, self.is_leaf, self.payload, sorted(self.children))
