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
The clausewitz module.

Read a definition file with :func:`load`, modify the values in the
:attr:`~clausewitz.document.Document.root` of the returned document, and
write it back with :func:`save`.

"""

from .pkginfo import version, version_string
from .document import Document, write_file
from .errors import ClausewitzError, HierarchyError, ParseError, RenderError


__all__ = (
    'load', 'save', 'Document', 'version', 'version_string',
    'ClausewitzError', 'HierarchyError', 'ParseError', 'RenderError',
)


def load(filename, encoding='utf-8-sig', parser=None):
    """Convenience function to read text from ``filename`` and return a
    :class:`~clausewitz.document.Document`.

    Raises :class:`OSError` if the file can't be read and
    :class:`~clausewitz.errors.ParseError` if the text can't be parsed.

    """
    return Document.load(filename, encoding, parser)


def save(document, filename, encoding='utf-8'):
    """Convenience function to write a Document or an element to ``filename``.

    Raises :class:`~clausewitz.errors.RenderError` if a value can't be written,
    in which case the file is not touched.

    """
    text = document.write()
    write_file(filename, text, encoding)
