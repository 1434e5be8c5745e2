#####################################################################################
#
#  Copyright (c) Crossbar.io Technologies GmbH
#  SPDX-License-Identifier: EUPL-1.2
#
#####################################################################################

import sys

from click import unstyle
from txaio import make_logger

from hosttrie._rwlock import ReadWriteLock
from hosttrie._util import hl, hllabel, hlval
from hosttrie.node import Node, WILDCARD, canonical_label

__all__ = ('Trie', 'MULTI_LEVEL')

MULTI_LEVEL = '+'
"""
Leading label of a pattern that matches its suffix on its own or behind one
further label, e.g. ``+.foo.com`` matches ``foo.com`` and ``test.foo.com``
but not ``a.b.foo.com``. Explicit ``*`` labels after the suffix extend this
as usual, e.g. ``+.stun.*.*`` matches ``global.stun.website.com``.
"""

_INDENT = 10


def _expand(pattern):
    """
    Split a pattern into the label sequences it stands for.

    A leading ``+`` yields the suffix on its own plus the suffix behind a
    wildcard label. An empty suffix is dropped, so the root never becomes
    a leaf.
    """
    labels = [canonical_label(label) for label in pattern.split('.')]
    if labels[0] != MULTI_LEVEL:
        return [labels]
    rest = labels[1:]
    if rest:
        return [rest, [WILDCARD] + rest]
    return [[WILDCARD]]


class Trie(object):
    """
    Associative trie over dot-delimited keys such as hostnames.

    Labels are stored least specific first, so ``www.example.com`` is stored
    along the path ``com -> example -> www``. A lookup prefers an exact label
    over the wildcard at every level and backtracks to the wildcard only
    when the exact branch ends without a match.

    ``insert()`` and ``remove()`` are exclusive, lookups are shared between
    threads. ``walk()`` and the tree printer do not lock; callers must make
    sure no concurrent mutation happens while they run.
    """

    log = make_logger()

    def __init__(self):
        self._root = Node()
        self._lock = ReadWriteLock()

    @property
    def root(self):
        return self._root

    def insert(self, pattern, value):
        """
        Insert a pattern and store ``value`` on its leaf. Inserting the same
        pattern again replaces the value.

        :param pattern: Dot-delimited pattern, e.g. ``*.example.com``, ``.org``
            or ``+.foo.com``.
        :type pattern: str
        :param value: Arbitrary payload returned on a match.
        """
        if not pattern:
            self.log.warn("Ignoring empty pattern (value={value!r})",
                          log_category="HT301", value=value)
            return

        branches = _expand(pattern)
        with self._lock.write_locked():
            for labels in branches:
                self._insert(labels, value)

        self.log.debug("Inserted pattern '{pattern}' ({branches} branch(es))",
                       log_category="HT100", pattern=pattern, branches=len(branches))

    def _insert(self, labels, value):
        node = self._root
        for label in reversed(labels):
            node = node.get_or_create_child(label)
        node.mark_leaf(value)

    def search(self, key):
        """
        Find the most specific leaf matching ``key``.

        :param key: Dot-delimited key, e.g. a hostname.
        :type key: str

        :returns: The matching leaf node (see ``Node.payload``) or ``None``.
        :rtype: hosttrie.node.Node or None
        """
        if not key:
            return None

        labels = key.split('.')
        with self._lock.read_locked():
            return self._search(self._root, labels, len(labels))

    def _search(self, node, labels, remaining):
        if not remaining:
            return node if node.is_leaf else None

        label = labels[remaining - 1]

        child = node.get_child(label)
        if child is not None:
            found = self._search(child, labels, remaining - 1)
            if found is not None:
                return found

        if label != WILDCARD:
            child = node.wildcard()
            if child is not None:
                return self._search(child, labels, remaining - 1)

        return None

    def remove(self, pattern):
        """
        Remove a pattern previously inserted. Removing a pattern that is not
        present does nothing.

        :param pattern: The pattern exactly as given to ``insert()``.
        :type pattern: str
        """
        if not pattern:
            return

        with self._lock.write_locked():
            removed = [self._remove(labels) for labels in _expand(pattern)]

        if any(removed):
            self.log.debug("Removed pattern '{pattern}'", log_category="HT101", pattern=pattern)
        else:
            self.log.debug("Pattern '{pattern}' not present, nothing removed",
                           log_category="HT102", pattern=pattern)

    def _remove(self, labels):
        node = self._root
        for label in reversed(labels):
            node = node.get_child(label)
            if node is None:
                return False

        if not node.is_leaf:
            return False

        node.unmark_leaf()

        # walk back up, detaching the now dead branch
        detached = 0
        for label in labels:
            if node.is_leaf or not node.is_empty() or node.is_root():
                break
            parent = node.parent
            parent.remove_child(label)
            detached += 1
            node = parent

        if detached:
            self.log.debug("Compaction detached {count} node(s) up to '{label}'",
                           log_category="HT103", count=detached, label=labels[detached - 1])
        return True

    def get(self, key, default=None):
        node = self.search(key)
        if node is None:
            return default
        return node.payload

    def __setitem__(self, key, value):
        self.insert(key, value)

    def __delitem__(self, key):
        self.remove(key)

    def __contains__(self, key):
        return self.search(key) is not None

    def __len__(self):
        with self._lock.read_locked():
            return sum(1 for _, _, node in self.iter_walk() if node.is_leaf)

    def items(self):
        """
        The stored patterns and their values. Wildcard labels are given as
        ``*``; a ``+`` pattern shows up as the two patterns it expands to.
        """
        with self._lock.read_locked():
            return list(self._iterate(self._root, []))

    def _iterate(self, node, labels):
        for label, child in list(node.items()):
            path = [label] + labels
            if child.is_leaf:
                yield '.'.join(path), child.payload
            for item in self._iterate(child, path):
                yield item

    def keys(self):
        return [k for k, _ in self.items()]

    def values(self):
        return [v for _, v in self.items()]

    def iter_walk(self):
        """
        Post-order traversal of the tree, yielding ``(depth, label, node)``
        with children ahead of their parent. The root is not yielded; its
        children are at depth 0.
        """
        return self._walk(self._root, 0)

    def _walk(self, node, depth):
        for label, child in list(node.items()):
            for item in self._walk(child, depth + 1):
                yield item
            yield depth, label, child

    def walk(self, visitor):
        """
        Call ``visitor(depth, label, node)`` for every node in post-order.
        """
        for depth, label, node in self.iter_walk():
            visitor(depth, label, node)

    def format(self, color=False):
        """
        Render the tree sideways for debugging: children are printed above
        their parent and indented one level further to the right.
        """
        lines = []
        self._format(self._root, None, 0, lines)
        text = '\n'.join(lines)
        if not color:
            text = unstyle(text)
        return text

    def _format(self, node, label, space, lines):
        space += _INDENT
        for child_label, child in list(node.items()):
            self._format(child, child_label, space, lines)

        if label is None:
            text = hl('root', color='green', bold=True)
        elif node.is_leaf:
            text = '{}: {}'.format(hllabel(label, label == WILDCARD), hlval(node.payload))
        else:
            text = hllabel(label, label == WILDCARD)
        lines.append(' ' * space + text)

    def print_tree(self, file=None, color=False):
        print(self.format(color=color), file=file or sys.stdout)

    def __repr__(self):
        return "{}(items={})".format(self.__class__.__name__, dict(self.items()))
