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
This module defines the :class:`Element` class.

An Element is a value in a Clausewitz document. Every Element class has a
:attr:`~Element.kind`, and the :data:`HIERARCHY` table determines for every
kind whether an element of that kind may be nested in a parent, and whether it
may have child elements. Every child that is added to an element passes
:meth:`Element.adopt`, which enforces these rules and makes sure that an
element never belongs to two parents at the same time.

To get the textual output of an element and all its child elements, use the
:meth:`~Element.write` method. Elements write themselves line by line, using
the :meth:`~Element.lines` method; block elements indent the lines of their
children.

:class:`Element` inherits from  :class:`~clausewitz.node.Node`, and thus from
:class:`list`, to build a reliable and easy to navigate tree structure.

"""

import collections
import enum
import reprlib

from ..errors import HierarchyError
from ..node import Node


class Kind(enum.Enum):
    """The closed set of value kinds that can appear in a document."""
    INTEGER = "integer"
    FLOAT = "float"
    DATE = "date"
    COLOR = "color"
    TEXT = "text"
    GROUP = "group"
    CONSTRUCTOR = "constructor"
    ROOT = "root"


#: Describes which relations an element kind may have.
Allowance = collections.namedtuple("Allowance", "parent children")
Allowance.parent.__doc__ = "True if an element of this kind may be nested in a parent."
Allowance.children.__doc__ = "True if an element of this kind may have child elements."


#: The hierarchy rules for every kind of element.
HIERARCHY = {
    Kind.INTEGER:     Allowance(parent=True, children=False),
    Kind.FLOAT:       Allowance(parent=True, children=False),
    Kind.DATE:        Allowance(parent=True, children=False),
    Kind.COLOR:       Allowance(parent=True, children=False),
    Kind.TEXT:        Allowance(parent=True, children=False),
    Kind.GROUP:       Allowance(parent=True, children=True),
    Kind.CONSTRUCTOR: Allowance(parent=True, children=True),
    Kind.ROOT:        Allowance(parent=False, children=True),
}


class ElementType(type):
    """Metaclass for Element.

    This meta class automatically adds an empty ``__slots__`` attribute if it
    is not defined in the class body, and refuses to create a class with a
    ``kind`` that is not in the :data:`HIERARCHY` table.

    """
    def __new__(cls, name, bases, namespace):
        kind = namespace.get('kind')
        if kind is not None and kind not in HIERARCHY:
            raise TypeError("{}: no hierarchy rules for kind {!r}".format(name, kind))
        if '__slots__' not in namespace:
            namespace['__slots__'] = ()
        return type.__new__(cls, name, bases, namespace)


class Element(Node, metaclass=ElementType):
    """Base class for all element types.

    Concrete element types set the :attr:`kind` class attribute. Classes
    without a kind are abstract and can't have parents or children.

    Child elements can be specified directly as arguments to the constructor.

    """
    kind = None     #: the :class:`Kind` of this element type
    head = None     #: the text before the children, if any
    tail = None     #: the text after the children, if any

    @classmethod
    def allowance(cls):
        """Return the :class:`Allowance` of this element type."""
        try:
            return HIERARCHY[cls.kind]
        except KeyError:
            raise TypeError("{} is an abstract element type".format(cls.__name__)) from None

    def adopt(self, node):
        """Make ourselves the parent of ``node``.

        Raises :class:`~clausewitz.errors.HierarchyError` if we can't have
        children, if the node can't be nested, or if the node already has a
        parent. Every element that is added to this element (via the
        constructor, :meth:`append`, :meth:`insert`, :meth:`extend` or item
        assignment) is checked by this method.

        """
        if not isinstance(node, Element):
            raise TypeError("can't add {!r} to an element".format(node))
        if not self.allowance().children:
            raise HierarchyError("{} can't have children".format(type(self).__name__))
        if not node.allowance().parent:
            raise HierarchyError("{} can't be nested".format(type(node).__name__))
        if node.parent is not None:
            raise HierarchyError(
                "{!r} already belongs to {!r}; remove it there first".format(node, node.parent))
        node.parent = self

    def _adopt(self, node):
        self.adopt(node)

    def __repr__(self):
        def result():
            # class name with last part module prepended
            cls = self.__class__
            mod = cls.__module__.split('.')[-1]
            yield "{}.{}".format(mod, cls.__name__)
            head = self.repr_head()
            if head is not None:
                yield head
            # child count
            if len(self):
                yield "({} child{})".format(len(self), '' if len(self) == 1 else 'ren')
        return "<{}>".format(" ".join(result()))

    def repr_head(self):
        """Return a representation for the head.

        The default implementation returns None.

        """
        return None

    def write_head(self):
        """Return the textual output that represents our ``head`` value.

        The default implementation just returns the ``head`` attribute,
        assuming it is text.

        """
        return self.head

    def write_tail(self):
        """Return the textual output that represents our ``tail`` value.

        The default implementation just returns the ``tail`` attribute,
        assuming it is text.

        """
        return self.tail

    def lines(self):
        """Yield the lines of the textual output of this element.

        The default implementation yields the output of :meth:`write_head`.
        Note that a line may contain a newline when a quoted string spans more
        than one line; indenting the lines never changes the contents of such
        a string.

        """
        yield self.write_head()

    def write(self):
        """Return the combined output of this node and its children.

        The lines are joined with a Unix newline, there is no newline at the
        end.

        """
        return '\n'.join(self.lines())


class ValueElement(Element):
    """Element that has a variable/writable :attr:`value`.

    This value must be given to the constructor, and can be modified later.
    Every value is checked using :meth:`check_value`; a TypeError is raised
    when it is not valid.

    """
    __slots__ = ('_value',)

    def __init__(self, value):
        super().__init__()
        self.value = value

    @property
    def value(self):
        """The value (payload) of this element."""
        return self._value

    @value.setter
    def value(self, value):
        if not self.check_value(value):
            raise TypeError("invalid value for {}: {}".format(type(self).__name__, repr(value)))
        self._value = value

    @classmethod
    def check_value(cls, value):
        """Returns whether the proposed value is valid.

        The default implementation refuses elements, which prevents mistakes
        like passing a child element instead of the value.

        """
        return not isinstance(value, Element)

    def repr_head(self):
        """Return a repr value for our value."""
        return reprlib.repr(self.value)

    def body_equals(self, other):
        """Compares the values, called by :meth:`Node.equals() <clausewitz.node.Node.equals>`."""
        return self.value == other.value

    def copy(self, with_children=True):
        """Copy the node."""
        return type(self)(self.value)


class Values(Element):
    """Base class for elements that own an ordered sequence of values.

    Besides the list methods, which all respect the hierarchy rules, a few
    convenience methods are provided that work by index or by child element.
    Child elements are always compared by identity, so the same content may
    appear more than once.

    """
    def add(self, value, index=None):
        """Add a value, at the end or at the specified index."""
        if index is None:
            self.append(value)
        else:
            self.insert(index, value)

    def delete(self, item):
        """Remove a value, specified by index or by the element itself.

        Does nothing if an element is given that is not a child of us.

        """
        if isinstance(item, Element):
            index = self.find(item)
            if index == -1:
                return
            item = index
        del self[item]

    def exchange(self, first, second):
        """Exchange the positions of two children.

        Both may be specified as index or as the child element itself. The
        children stay ours.

        """
        i, j = self._get_index(first), self._get_index(second)
        a, b = list.__getitem__(self, i), list.__getitem__(self, j)
        list.__setitem__(self, i, b)
        list.__setitem__(self, j, a)

    def _get_index(self, item):
        """Return the index of item, which may be an index or an element."""
        if isinstance(item, Element):
            index = self.find(item)
            if index == -1:
                raise ValueError("{!r} is not a child of {!r}".format(item, self))
            return index
        return item

    def find(self, value):
        """Return the index of the value, or -1 if it is not a child of us."""
        for index, node in enumerate(self):
            if node is value:
                return index
        return -1

    def contains_any(self, cls):
        """Return True if any of the children is an instance of ``cls``.

        The ``cls`` may also be a tuple of classes, like the standard Python
        :func:`isinstance`.

        """
        return any(isinstance(node, cls) for node in self)

    def contains_only(self, cls):
        """Return True if all children are an instance of ``cls``.

        Also returns True if there are no children.

        """
        return all(isinstance(node, cls) for node in self)

    def lines(self):
        """Yield the lines of all children."""
        for node in self:
            yield from node.lines()
