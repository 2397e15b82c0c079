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
Elements for Clausewitz engine definition files.

The leaf values are :class:`Integer`, :class:`Float`, :class:`Date`,
:class:`Color` and :class:`Text`. Values are grouped in a :class:`Group`, and
a :class:`Root` holds all the values of a document. A :class:`Constructor` is
an assignment like ``name = value``.

Example::

    >>> from clausewitz.dom.cw import *
    >>> r = Root(Constructor("name", Text("Foo Bar")), Constructor("flags", Group(Text("a"), Text("b"))))
    >>> print(r.write())
    name = "Foo Bar"
    flags = {
            a
            b
    }

To build a tree with less typing, use :func:`create_element_from_value`, or
its short alias :func:`s`::

    >>> s({"capital": 118, "color": [12, 240, 7]}).dump()
    <cw.Group (2 children)>
     ├╴<cw.Constructor 'capital' (2 children)>
     │  ├╴<cw.Text 'capital'>
     │  ╰╴<cw.Integer 118>
     ╰╴<cw.Constructor 'color' (2 children)>
        ├╴<cw.Text 'color'>
        ╰╴<cw.Group (3 children)>
           ├╴<cw.Integer 12>
           ├╴<cw.Integer 240>
           ╰╴<cw.Integer 7>

"""

import collections
import datetime
import decimal
import enum
import math
import re
import reprlib

from ..errors import HierarchyError, RenderError
from . import element
from .element import Kind


INT64_MIN = -2 ** 63
INT64_MAX = 2 ** 63 - 1

_unquoted_text = re.compile(r'[A-Za-z_][A-Za-z0-9_-]*')


def requires_quotes(text):
    """Return True if the text can't be written without quotes."""
    return not _unquoted_text.fullmatch(text)


def escape(text):
    """Escape ``=`` and ``\\`` with a backslash."""
    return re.sub(r'([=\\])', r'\\\1', text)


def format_float(value):
    """Return the float value in positional notation, always with a dot.

    Raises RenderError for infinity, NaN and negative numbers, which can't be
    read back.

    """
    value = float(value) + 0.0     # no -0.0
    if not math.isfinite(value):
        raise RenderError("can't write a non-finite number: {}".format(value))
    elif value < 0:
        raise RenderError("can't write a negative number: {}".format(value))
    text = format(decimal.Decimal(repr(value)), 'f')
    if '.' not in text:
        text += '.0'
    return text


class Quoting(enum.Enum):
    """How a :class:`Text` is written."""
    QUOTED = "quoted"           #: always between double quotes
    UNQUOTED = "unquoted"       #: never between quotes
    AUTOMATIC = "automatic"     #: quoted when needed


class Notation(enum.Enum):
    """How a :class:`Color` is written."""
    RGB = "rgb"     #: a group of three integers
    HEX = "hex"     #: a hexadecimal literal like ``0xff8000``


#: The value of a Color.
RGB = collections.namedtuple("RGB", "red green blue")


class Number(element.ValueElement):
    """Base class for Integer, Float and Date."""


class Integer(Number):
    """A 64-bit signed integer number.

    Negative numbers can be stored, but writing them raises RenderError.

    """
    kind = Kind.INTEGER

    @classmethod
    def check_value(cls, value):
        if isinstance(value, int) and not isinstance(value, bool):
            if not INT64_MIN <= value <= INT64_MAX:
                raise ValueError("integer out of 64-bit range: {}".format(value))
            return True
        return False

    def write_head(self):
        if self.value < 0:
            raise RenderError("can't write a negative number: {}".format(self.value))
        return str(self.value)


class Float(Number):
    """A floating point number, always written with a dot."""
    kind = Kind.FLOAT

    @classmethod
    def check_value(cls, value):
        return isinstance(value, (int, float)) and not isinstance(value, bool)

    def write_head(self):
        return format_float(self.value)


class Date(Number):
    """A date, written like ``1444.11.11``."""
    kind = Kind.DATE

    @classmethod
    def check_value(cls, value):
        return isinstance(value, datetime.date) and not isinstance(value, datetime.datetime)

    def write_head(self):
        return "{}.{}.{}".format(self.value.year, self.value.month, self.value.day)


class Color(element.ValueElement):
    """A color.

    The value is an :class:`RGB` named tuple, the :attr:`notation` determines
    how the color is written.

    """
    __slots__ = ('_notation',)
    kind = Kind.COLOR

    def __init__(self, red, green, blue, notation=Notation.HEX):
        self.notation = notation
        super().__init__(RGB(red, green, blue))

    @property
    def notation(self):
        """The :class:`Notation`."""
        return self._notation

    @notation.setter
    def notation(self, notation):
        self._notation = Notation(notation)

    @classmethod
    def check_value(cls, value):
        if isinstance(value, tuple) and len(value) == 3 and \
                all(isinstance(v, int) and not isinstance(v, bool) for v in value):
            if not all(0 <= v <= 255 for v in value):
                raise ValueError("color component out of range: {}".format(value))
            return True
        return False

    def repr_head(self):
        return "{} {}".format(tuple(self.value), self.notation.name)

    def body_equals(self, other):
        return self.value == other.value and self.notation is other.notation

    def copy(self, with_children=True):
        return type(self)(*self.value, self.notation)

    def write_head(self):
        return "0x{:02x}{:02x}{:02x}".format(*self.value)

    def lines(self):
        if self.notation is Notation.RGB:
            yield from Group(*map(Integer, self.value)).lines()
        else:
            yield self.write_head()


class Text(element.ValueElement):
    """A string.

    The :attr:`quoting` determines whether the text is written between
    double quotes. An ``UNQUOTED`` Text can't have a value that starts with a
    double quote.

    """
    __slots__ = ('_quoting',)
    kind = Kind.TEXT

    def __init__(self, value, quoting=Quoting.AUTOMATIC):
        self._quoting = Quoting(quoting)
        super().__init__(value)

    @property
    def value(self):
        """The text."""
        return self._value

    @value.setter
    def value(self, value):
        if not self.check_value(value):
            raise TypeError("invalid value for {}: {}".format(type(self).__name__, repr(value)))
        self._check_quoting(value, self._quoting)
        self._value = value

    @property
    def quoting(self):
        """The :class:`Quoting`."""
        return self._quoting

    @quoting.setter
    def quoting(self, quoting):
        quoting = Quoting(quoting)
        self._check_quoting(self._value, quoting)
        self._quoting = quoting

    @staticmethod
    def _check_quoting(value, quoting):
        if quoting is Quoting.UNQUOTED and value.startswith('"'):
            raise RenderError("unquoted text can't start with a double quote: {}".format(repr(value)))

    @classmethod
    def check_value(cls, value):
        return isinstance(value, str)

    def needs_quotes(self):
        """Return True if our value can't be written without quotes."""
        return requires_quotes(self.value)

    def body_equals(self, other):
        return self.value == other.value and self.quoting is other.quoting

    def copy(self, with_children=True):
        return type(self)(self.value, self.quoting)

    def write_head(self):
        value = self.value
        if self.quoting is Quoting.UNQUOTED:
            if requires_quotes(value):
                raise RenderError("text must be quoted: {}".format(repr(value)))
            return value
        elif self.quoting is Quoting.AUTOMATIC and not requires_quotes(value):
            return value
        if '"' in value:
            raise RenderError("text with a double quote can't be quoted: {}".format(repr(value)))
        return '"{}"'.format(escape(value))


class Container(element.Values):
    """Base class for Group and Root, with some helper methods."""

    def as_color(self):
        """Return a new :class:`Color` with ``RGB`` notation if we contain
        exactly three numbers in the range 0..255.

        An Integer or a Float without fraction is accepted. Returns None if
        the contents do not describe a color.

        """
        if len(self) != 3:
            return
        rgb = []
        for node in self:
            if isinstance(node, Integer):
                value = node.value
            elif isinstance(node, Float) and float(node.value).is_integer():
                value = int(node.value)
            else:
                return
            if not 0 <= value <= 255:
                return
            rgb.append(value)
        return Color(*rgb, Notation.RGB)

    def constructors(self, name=''):
        """Iterate over the Constructor children with the specified name.

        The name is compared case-insensitively. If the name is empty, all
        Constructor children are yielded.

        """
        name = name.lower()
        for node in self / Constructor:
            if not name or node.name.value.lower() == name:
                yield node

    def constructor(self, name):
        """Return the first Constructor with the specified name, or None."""
        for node in self.constructors(name):
            return node

    def constructor_count(self, name=''):
        """Return the number of Constructor children with the specified name."""
        return sum(1 for node in self.constructors(name))

    def delete_constructors(self, name=''):
        """Remove all Constructor children with the specified name.

        If the name is empty, all Constructor children are removed.

        """
        for node in list(self.constructors(name)):
            self.remove(node)


class Group(Container):
    """A list of values between ``{`` and ``}``."""
    kind = Kind.GROUP
    head = "{"
    tail = "}"
    indent = "\t"   #: the indent used for the child lines

    def lines(self):
        yield self.write_head()
        for line in super().lines():
            yield self.indent + line
        yield self.write_tail()


class Root(Container):
    """All the values of a document."""
    kind = Kind.ROOT


class Constructor(element.Element):
    """An assignment ``name = value``.

    A Constructor always has two children: the :attr:`name`, which is a
    :class:`Text`, and the :attr:`value`. If the name is given as a string, it
    is converted to a Text. The value may be any element that can be nested,
    other values are converted using :func:`create_element_from_value`.

    The children can be replaced, but the number of children can't be
    changed.

    """
    kind = Kind.CONSTRUCTOR

    def __init__(self, name, value):
        super().__init__(self._make_name(name), create_element_from_value(value))

    @staticmethod
    def _make_name(name):
        if isinstance(name, str):
            name = Text(name)
        if not isinstance(name, Text):
            raise HierarchyError("the name of a Constructor must be Text, not {!r}".format(name))
        return name

    @property
    def name(self):
        """The name, a :class:`Text`."""
        return self[0]

    @name.setter
    def name(self, name):
        self[0] = self._make_name(name)

    @property
    def value(self):
        """The value."""
        return self[1]

    @value.setter
    def value(self, value):
        self[1] = create_element_from_value(value)

    def repr_head(self):
        return reprlib.repr(self.name.value)

    def copy(self, with_children=True):
        return type(self)(self.name.copy(), self.value.copy())

    def _fixed(self, *args, **kwargs):
        raise HierarchyError("the children of a Constructor can only be replaced")

    append = insert = extend = pop = remove = clear = _fixed
    reverse = sort = __delitem__ = __iadd__ = __imul__ = _fixed

    def __setitem__(self, k, new):
        if isinstance(k, slice):
            self._fixed()
        if k in (0, -2):
            new = self._make_name(new)
        super().__setitem__(k, new)

    def lines(self):
        name = self.name.write_head()
        lines = self.value.lines()
        yield "{} = {}".format(name, next(lines))
        yield from lines


_element_mapping = {
    bool: lambda value: Text("yes" if value else "no"),
    int: Integer,
    float: Float,
    datetime.date: Date,
    str: Text,
    list: lambda value: Group(*map(create_element_from_value, value)),
    tuple: lambda value: Group(*map(create_element_from_value, value)),
    dict: lambda value: Group(*(Constructor(k, v) for k, v in value.items())),
}


def create_element_from_value(value):
    """Convert a regular Python value to a Clausewitz Element node.

    Python int, float, datetime.date or str values are converted into Integer,
    Float, Date or Text objects respectively. A bool becomes the Text ``yes``
    or ``no``. A list or tuple is converted into a Group, and a dict into a
    Group of Constructors. Element objects are returned unchanged.

    A KeyError is raised when there is no conversion for the value's type.

    """
    if isinstance(value, element.Element):
        return value
    return _element_mapping[type(value)](value)


def s(arg):
    """Same as :func:`create_element_from_value`."""
    return create_element_from_value(arg)
