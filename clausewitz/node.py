# -*- coding: utf-8 -*-
#
# This file is part of `clausewitz`, a library for Clausewitz engine definition files
#
# Copyright © 2026 by the clausewitz authors
#
# This module is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This module is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.


"""
This module defines a :class:`Node` class, to build simple tree structures
based on Python lists.

A Node owns its children: every list operation that puts a node in another
node sets the parent of that node, and every operation that takes a node out
unsets it. Subclasses can check every node that is added by reimplementing
:meth:`Node._adopt`.

"""

import weakref


DUMP_STYLES = {
    "ascii":   (" | ", "   ", " |-", " `-"),
    "round":   (" │ ", "   ", " ├╴", " ╰╴"),
}

DUMP_STYLE_DEFAULT = "round"


_NO_PARENT = lambda: None


class Node(list):
    """Node implements a simple tree type, based on Python :class:`list`.

    You can inherit of Node and add your own attributes and methods.

    A node can have child nodes and a :attr:`parent`. The parent is referred to
    with a weak reference, so a node tree does not contain circular references.
    (This also means that you need to keep a reference to a tree's root node,
    otherwise it will be garbage collected.)

    Adding nodes to a node sets the parent of the nodes, and removing nodes
    (using ``del``, :meth:`pop`, :meth:`remove`, :meth:`clear` or by replacing
    them) unsets the parent of the removed nodes. The parent is only meant to
    be inspected by the node that is adding or removing children; the tree is
    navigated from the top down.

    Iterating over a node yields the child nodes, just like the underlying
    Python list. Unlike Python's list, a node always evaluates to True, even if
    there are no children.

    Besides the usual methods, Node defines the ``/`` query operator, which
    iterates over the children that are instances of the specified class::

        for n in node / MyClass:
            # do_something with n, which is a child of node and
            # an instance of MyClass

    Instead of a subclass, a class instance or a tuple of more than one class
    may also be given. If a class instance is given, :meth:`body_equals` must
    return true for the compared nodes. (Child nodes are not compared when using
    a class instance to compare with.)

    """

    __slots__ = ('__weakref__', '_parent')

    def __repr__(self):
        c = "child" if len(self) == 1 else "children"
        return '<{} ({} {})>'.format(type(self).__name__, len(self), c)

    def __bool__(self):
        """Always True."""
        return True

    def __init__(self, *children):
        """Constructor.

        If children are given they are appended to the list, and their parent
        is set to this node.

        """
        self._parent = _NO_PARENT
        for node in children:
            self._adopt(node)
            list.append(self, node)

    @property
    def parent(self):
        """The parent Node or None; uses a weak reference."""
        return self._parent()

    @parent.setter
    def parent(self, node):
        self._parent = _NO_PARENT if node is None else weakref.ref(node)

    @parent.deleter
    def parent(self):
        self._parent = _NO_PARENT

    def _adopt(self, node):
        """Called for every node that is about to be added to this node.

        Sets the parent of the node to ourself. Reimplement this method to
        refuse certain nodes, by raising an exception before calling the
        super method.

        """
        node.parent = self

    def _release(self, node):
        """Called for every node that is taken out of this node."""
        del node.parent

    def is_root(self):
        """Return True if this node has no parent."""
        return self.parent is None

    __hash__ = object.__hash__

    def __eq__(self, other):
        """Identity compare to make Node.index robust and "faster"."""
        return self is other

    def __ne__(self, other):
        """Identity compare to make Node.index robust and "faster"."""
        return self is not other

    def copy(self, with_children=True):
        """Return a copy of this Node.

        If ``with_children`` is True (the default), child nodes are also
        copied.

        """
        children = (n.copy() for n in self) if with_children else ()
        return type(self)(*children)

    def append(self, node):
        """Append node to this node; the parent is set to this node."""
        self._adopt(node)
        list.append(self, node)

    def extend(self, nodes):
        """Append nodes to this node; the parent is set to this node."""
        for node in nodes:
            self.append(node)

    def __iadd__(self, nodes):
        """Implement ``node += nodes``, via :meth:`extend`."""
        self.extend(nodes)
        return self

    def __imul__(self, n):
        """Refuse ``node *= n``, a node can't own the same child twice."""
        raise TypeError("can't multiply the children of a {}".format(type(self).__name__))

    def insert(self, index, node):
        """Insert node in this node; the parent is set to this node."""
        self._adopt(node)
        list.insert(self, index, node)

    def pop(self, index=-1):
        """Remove and return the node at index; its parent is unset."""
        node = list.pop(self, index)
        self._release(node)
        return node

    def remove(self, node):
        """Remove the node (which is compared by identity); its parent is unset."""
        list.remove(self, node)
        self._release(node)

    def clear(self):
        """Remove all child nodes; their parent is unset."""
        for node in self:
            self._release(node)
        list.clear(self)

    def __setitem__(self, k, new):
        """Set self[k] to the node(s) in ``new``; the parent is set to this Node.

        The parent of the replaced node(s) is unset. If one of the new nodes
        is refused, nothing changes.

        """
        if isinstance(k, slice):
            new = tuple(new)
            old = list.__getitem__(self, k)
            for node in old:
                self._release(node)
            adopted = []
            try:
                for node in new:
                    self._adopt(node)
                    adopted.append(node)
                list.__setitem__(self, k, new)
            except Exception:
                for node in adopted:
                    self._release(node)
                for node in old:
                    node.parent = self
                raise
        else:
            old = list.__getitem__(self, k)
            if old is new:
                return
            self._adopt(new)
            self._release(old)
            list.__setitem__(self, k, new)

    def __delitem__(self, k):
        """Delete self[k]; the parent of the deleted node(s) is unset."""
        nodes = list.__getitem__(self, k)
        for node in nodes if isinstance(k, slice) else (nodes,):
            self._release(node)
        list.__delitem__(self, k)

    def equals(self, other):
        """Return True if we and other are equivalent.

        This is the case when we and the other have the same class, the same
        amount of children, :meth:`body_equals` returns True, and finally for
        all the children this method returns True.

        Before this method is called on all the children, this method calls
        :meth:`body_equals`; implement that method if you want to add more
        tests, e.g. for certain instance attributes.

        """
        return type(self) is type(other) and len(self) == len(other) and \
            self.body_equals(other) and \
            all(a.equals(b) for a, b in zip(self, other))

    def body_equals(self, other):
        """Implement this to add more :meth:`equals` tests, before all the
        children are compared.

        The default implementation returns True.

        """
        return True

    def __truediv__(self, other):
        """Iterate over children that inherit the specified class(es).

        If ``other`` is a :class:`Node` instance, the type must match and
        :meth:`body_equals` must return True. The argument may also be a
        :class:`type` or a :class:`tuple`, in which case it is used as argument
        for the :func:`isinstance` builtin function.

        """
        if isinstance(other, Node):
            predicate = lambda node: type(node) is type(other) and node.body_equals(other)
        elif isinstance(other, (tuple, type)):
            predicate = lambda node: isinstance(node, other)
        else:
            return NotImplemented
        return filter(predicate, self)

    def dump(self, file=None, style=None):
        """Display a graphical representation of the node and its contents.

        The file object defaults to stdout, and the style to "round". You can
        choose any style that's in the ``DUMP_STYLES`` dictionary.

        """
        d = DUMP_STYLES[style or DUMP_STYLE_DEFAULT]

        def dump_children(node, prefix):
            for n in node:
                last = int(n is node[-1])
                print(prefix + d[2 + last] + repr(n), file=file)
                dump_children(n, prefix + d[last])

        print(repr(self), file=file)
        dump_children(self, '')
