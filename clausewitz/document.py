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
Loading and saving Clausewitz definition files.

A :class:`Document` holds the :class:`~clausewitz.dom.cw.Root` of a text. The
files are always read and written with Unix line endings, and the text does
not end with a line break.

"""

import logging

from .lang.clausewitz import Parser


logger = logging.getLogger(__name__)


def read_file(filename, encoding='utf-8-sig'):
    """Read the file and return its text.

    The default encoding drops a UTF-8 byte order mark, if present. All line
    endings are converted to a Unix newline. Raises :class:`OSError` if the
    file can't be read.

    """
    with open(filename, encoding=encoding) as f:
        text = f.read()
    logger.debug("read %d characters from %s", len(text), filename)
    return text


def write_file(filename, text, encoding='utf-8'):
    """Write the text to the file, with Unix newlines.

    No line break is added at the end. Raises :class:`OSError` if the file
    can't be written.

    """
    with open(filename, 'w', encoding=encoding, newline='\n') as f:
        f.write(text)
    logger.debug("wrote %d characters to %s", len(text), filename)


class Document:
    """A Clausewitz document.

    The ``text`` is read using the ``parser``, which is a default
    :class:`~clausewitz.lang.clausewitz.Parser` if not specified. The
    resulting tree is in the :attr:`root` attribute. Iterating over a Document
    yields the values of the root.

    Raises :class:`~clausewitz.errors.ParseError` if the text can't be read.

    """
    def __init__(self, text='', parser=None):
        self.parser = parser or Parser()
        self.root = self.parser.document(text)

    @classmethod
    def load(cls, filename, encoding='utf-8-sig', parser=None):
        """Read the file and return a Document."""
        logger.debug("loading %s", filename)
        return cls(read_file(filename, encoding), parser)

    def save(self, filename, encoding='utf-8'):
        """Write the document to the file."""
        logger.debug("saving %s", filename)
        write_file(filename, self.write(), encoding)

    def write(self):
        """Return the text of the document."""
        return self.root.write()

    def __iter__(self):
        return iter(self.root)

    def __len__(self):
        return len(self.root)

    def __repr__(self):
        return "<{} ({} values)>".format(type(self).__name__, len(self))
