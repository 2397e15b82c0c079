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
Test the Clausewitz language definition.
"""

### find clausewitz
import sys
sys.path.insert(0, '.')

import parce
import parce.action as a

from clausewitz.lang.clausewitz import Clausewitz, Parser


def tokens(text):
    return [(t.text, t.action) for t in parce.root(Clausewitz.root, text).tokens()
            if t.action is not a.Whitespace]


def test_main():
    assert tokens('name = "Foo Bar" # comment\n') == [
        ('name', a.Name),
        ('=', a.Operator.Assignment),
        ('"', a.String.Start),
        ('Foo Bar', a.String),
        ('"', a.String.End),
        ('# comment', a.Comment),
    ]
    assert tokens('{ 42 3.14 1444.11.30 0xff8000 }') == [
        ('{', a.Delimiter.Brace.Start),
        ('42', a.Number),
        ('3.14', a.Number),
        ('1444.11.30', a.Number),
        ('0xff8000', a.Literal.Color),
        ('}', a.Delimiter.Brace.End),
    ]


def test_strings():
    assert tokens(r'"a\=b\\c"') == [
        ('"', a.String.Start),
        ('a', a.String),
        (r'\=', a.String.Escape),
        ('b', a.String),
        (r'\\', a.String.Escape),
        ('c', a.String),
        ('"', a.String.End),
    ]
    assert (r'\n', a.String.Escape.Invalid) not in tokens(r'"a\n"')
    assert ('\\', a.String.Escape.Invalid) in tokens(r'"a\n"')


def test_invalid():
    # a number can't run into a word
    assert ('12', a.Number) not in tokens('12abc')
    assert ('@', a.Text.Invalid) in tokens('@ a')
    assert ('1.2.3', a.Number) not in tokens('1.2.3.4')


def test_cursor():
    cursor = Parser().tokenize("  # comment\n  value")
    assert not cursor.at(a.Name)
    cursor.skip_whitespace()
    assert cursor.at(a.Name)
    assert cursor.pos == 14
    token = cursor.advance()
    assert token.text == "value"
    assert cursor.at_end()
    assert cursor.token is None
    assert cursor.advance() is None
    assert cursor.pos == 19
    err = cursor.error("test")
    assert err.line == 2 and err.column == 8


if __name__ == "__main__" and 'test_main' in globals():
    test_main()
