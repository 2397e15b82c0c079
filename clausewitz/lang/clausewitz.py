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
Clausewitz language definition and reader.

Reading text is done in two stages. First the :class:`Clausewitz` language
definition splits the text in tokens, using *parce*. Then a :class:`Parser`
walks over the tokens using a :class:`Cursor`, and builds the DOM tree.

A Parser tries a number of recognizers in order on every value it encounters.
A recognizer is a callable that is called with the parser and the cursor as
arguments. If the current token is not a value the recognizer understands, it
must return None without moving the cursor. Otherwise it consumes the tokens
of the value and returns the element. For example::

    >>> from clausewitz.lang.clausewitz import Parser, DEFAULT_RECOGNIZERS
    >>> def read_yes(parser, cursor):
    ...     if cursor.at(a.Name) and cursor.token.text == "yes":
    ...         cursor.advance()
    ...         return cw.Integer(1)
    ...
    >>> p = Parser((read_yes,) + DEFAULT_RECOGNIZERS)
    >>> p.document("a = yes").dump()
    <cw.Root (1 child)>
     ╰╴<cw.Constructor 'a' (2 children)>
        ├╴<cw.Text 'a'>
        ╰╴<cw.Integer 1>

Reading never recovers from an error: the first problem raises a
:class:`~clausewitz.errors.ParseError` and no tree is returned.

"""

import datetime
import logging
import re

import parce
from parce import Language, lexicon, default_action
import parce.action as a

from clausewitz.dom import cw
from clausewitz.errors import ParseError


logger = logging.getLogger(__name__)


_hex_color = re.compile(r'0[xX]([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})')


class Clausewitz(Language):
    """Clausewitz engine definition file language definition."""
    @lexicon
    def root(cls):
        yield r'\s+', a.Whitespace
        yield r'#[^\n]*', a.Comment
        yield r'"', a.String.Start, cls.string
        yield r'\{', a.Delimiter.Brace.Start
        yield r'\}', a.Delimiter.Brace.End
        yield r'=', a.Operator.Assignment
        yield r'0[xX]\w*', a.Literal.Color
        yield r'\d+(?:\.\d+){0,2}(?![\w.])', a.Number
        yield r'[A-Za-z_][A-Za-z0-9_-]*', a.Name
        yield default_action, a.Text.Invalid

    @lexicon
    def string(cls):
        """A double-quoted string, only ``\\=`` and ``\\\\`` are escapes."""
        yield r'"', a.String.End, -1
        yield r'\\[=\\]', a.String.Escape
        yield r'\\', a.String.Escape.Invalid
        yield default_action, a.String


class Cursor:
    """The read position in the tokens of a text.

    One Cursor is shared by all the recognizers during one read, so every
    recognizer continues where the previous one stopped. The ``index``
    attribute is the index of the current token in ``tokens``.

    """
    def __init__(self, text, tokens):
        self.text = text
        self.tokens = tokens
        self.index = 0

    @property
    def token(self):
        """The current token, or None at the end of the text."""
        if self.index < len(self.tokens):
            return self.tokens[self.index]

    @property
    def pos(self):
        """The position of the current token in the text."""
        token = self.token
        return len(self.text) if token is None else token.pos

    def at_end(self):
        """Return True if all tokens are consumed."""
        return self.index >= len(self.tokens)

    def at(self, *actions):
        """Return True if the current token has one of the specified actions."""
        token = self.token
        return token is not None and token.action in actions

    def advance(self):
        """Return the current token (None at the end) and move to the next."""
        token = self.token
        if token is not None:
            self.index += 1
        return token

    def skip_whitespace(self):
        """Move over whitespace and comments."""
        while self.at(a.Whitespace, a.Comment):
            self.index += 1

    def error(self, message, pos=None):
        """Return a ParseError for the current (or the specified) position."""
        return ParseError.at(message, self.text, self.pos if pos is None else pos)


def read_number(parser, cursor):
    """Read an Integer, a Float or a Date, depending on the number of parts."""
    if not cursor.at(a.Number):
        return
    token = cursor.advance()
    parts = token.text.split('.')
    if len(parts) == 1:
        value = int(token.text)
        if not cw.INT64_MIN <= value <= cw.INT64_MAX:
            raise cursor.error("integer out of range: {}".format(token.text), token.pos)
        return cw.Integer(value)
    elif len(parts) == 2:
        return cw.Float(float(token.text))
    try:
        return cw.Date(datetime.date(*map(int, parts)))
    except ValueError:
        raise cursor.error("invalid date: {}".format(token.text), token.pos) from None


def read_color(parser, cursor):
    """Read a Color in hexadecimal notation, like ``0xff8000``."""
    if not cursor.at(a.Literal.Color):
        return
    token = cursor.advance()
    m = _hex_color.fullmatch(token.text)
    if not m:
        raise cursor.error("malformed hex color: {}".format(token.text), token.pos)
    red, green, blue = (int(g, 16) for g in m.groups())
    return cw.Color(red, green, blue, cw.Notation.HEX)


def read_text(parser, cursor):
    """Read a bare word or a double-quoted string."""
    if cursor.at(a.Name):
        return cw.Text(cursor.advance().text)
    if not cursor.at(a.String.Start):
        return
    start = cursor.advance()
    chars = []
    while True:
        token = cursor.advance()
        if token is None:
            raise cursor.error("unterminated string", start.pos)
        elif token.action is a.String.End:
            break
        elif token.action is a.String.Escape:
            chars.append(token.text[1])
        elif token.action is a.String.Escape.Invalid:
            raise cursor.error("invalid escape in string", token.pos)
        else:
            chars.append(token.text)
    return cw.Text(''.join(chars), cw.Quoting.QUOTED)


def read_group(parser, cursor):
    """Read a Group: ``{`` values ``}``."""
    if not cursor.at(a.Delimiter.Brace.Start):
        return
    start = cursor.advance()
    group = cw.Group()
    while True:
        cursor.skip_whitespace()
        if cursor.at_end():
            raise cursor.error("unterminated group", start.pos)
        elif cursor.at(a.Delimiter.Brace.End):
            cursor.advance()
            return group
        group.append(parser.read_value(cursor))


#: The recognizers a Parser uses by default, in this order.
DEFAULT_RECOGNIZERS = (
    read_number,
    read_color,
    read_text,
    read_group,
)


class Parser:
    """Reads text and builds a :class:`~clausewitz.dom.cw.Root`.

    The ``recognizers`` are tried in order for every value; by default
    :data:`DEFAULT_RECOGNIZERS` is used. The ``lexicon`` is the root lexicon
    that tokenizes the text, by default :attr:`Clausewitz.root`.

    A Parser keeps no state between reads, so one instance can be used to
    read many texts.

    """
    def __init__(self, recognizers=None, lexicon=None):
        self.recognizers = DEFAULT_RECOGNIZERS if recognizers is None else tuple(recognizers)
        self.lexicon = Clausewitz.root if lexicon is None else lexicon

    def tokenize(self, text):
        """Return a :class:`Cursor` for the tokens of the text."""
        tokens = list(parce.root(self.lexicon, text).tokens())
        return Cursor(text, tokens)

    def recognize(self, cursor):
        """Return the element of the first recognizer that accepts the current
        token, or None.

        """
        for recognizer in self.recognizers:
            node = recognizer(self, cursor)
            if node is not None:
                return node

    def read_value(self, cursor):
        """Read one value at the cursor.

        A Text followed by ``=`` and another value is turned into a
        :class:`~clausewitz.dom.cw.Constructor`.

        """
        cursor.skip_whitespace()
        node = self.recognize(cursor)
        if node is None:
            raise cursor.error("token must be a value")
        cursor.skip_whitespace()
        if isinstance(node, cw.Text) and cursor.at(a.Operator.Assignment):
            cursor.advance()
            cursor.skip_whitespace()
            if cursor.at_end() or cursor.at(a.Delimiter.Brace.End):
                raise cursor.error("constructor without value")
            node = cw.Constructor(node, self.read_value(cursor))
        return node

    def document(self, text):
        """Read the full text and return a :class:`~clausewitz.dom.cw.Root`."""
        cursor = self.tokenize(text)
        root = cw.Root()
        cursor.skip_whitespace()
        while not cursor.at_end():
            root.append(self.read_value(cursor))
        logger.debug("read %d values from %d tokens", len(root), len(cursor.tokens))
        return root
