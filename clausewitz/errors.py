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
The exceptions raised by :mod:`clausewitz`.

All of them inherit from :class:`ClausewitzError`, so an application that
wants to skip a file that can't be handled only needs to catch that one.

"""


class ClausewitzError(Exception):
    """Base class for the errors raised by the clausewitz package."""


class HierarchyError(ClausewitzError):
    """Raised when a node can't be added to another node.

    This happens when the parent can't have children, when the child can't be
    nested in a parent, or when the child already belongs to a parent.

    """


class RenderError(ClausewitzError):
    """Raised when a node can't be written out as valid text."""


class ParseError(ClausewitzError):
    """Raised when text can't be read.

    The ``pos`` attribute holds the position in the text where reading failed,
    ``line`` and ``column`` hold the same position as line and column numbers,
    both starting at 1. They are None when the position is not known.

    """
    def __init__(self, message, pos=None, line=None, column=None):
        self.message = message
        self.pos = pos
        self.line = line
        self.column = column
        if line is not None:
            message = "{} (line {}, column {})".format(message, line, column)
        super().__init__(message)

    @classmethod
    def at(cls, message, text, pos):
        """Create a ParseError, computing line and column from ``text`` and ``pos``."""
        line = text.count('\n', 0, pos) + 1
        column = pos - text.rfind('\n', 0, pos)
        return cls(message, pos, line, column)
