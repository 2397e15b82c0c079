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
Simple helper functions to easily build DOM elements reading from text.

The nodes are read by a :class:`~clausewitz.lang.clausewitz.Parser` with the
default recognizers.

"""


from ..lang.clausewitz import Parser


_parser = Parser()


def cw_document(text):
    """Return a :class:`.cw.Root` from the text.

    Example::

        >>> from clausewitz.dom import read
        >>> node = read.cw_document('name = "Foo Bar"  color = { 12 240 7 }')
        >>> node.dump()
        <cw.Root (2 children)>
         ├╴<cw.Constructor 'name' (2 children)>
         │  ├╴<cw.Text 'name'>
         │  ╰╴<cw.Text 'Foo Bar'>
         ╰╴<cw.Constructor 'color' (2 children)>
            ├╴<cw.Text 'color'>
            ╰╴<cw.Group (3 children)>
               ├╴<cw.Integer 12>
               ├╴<cw.Integer 240>
               ╰╴<cw.Integer 7>
        >>> node[1].value.as_color()
        <cw.Color (12, 240, 7) RGB>

    This can also help you to create DOM element nodes that would otherwise be
    tedious to construct and type.

    """
    return _parser.document(text)


def cw(text):
    """Return one element from the text, or None if there is no value.

    Examples::

        >>> from clausewitz.dom import read
        >>> read.cw("1444.11.11")
        <cw.Date datetime.date(1444, 11, 11)>
        >>> read.cw("0xff8000")
        <cw.Color (255, 128, 0) HEX>

    """
    for node in cw_document(text):
        return node
