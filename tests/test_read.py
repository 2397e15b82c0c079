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
Test reading text into DOM trees.
"""

### find clausewitz
import sys
sys.path.insert(0, '.')

import datetime

import pytest
import parce.action as a

from clausewitz.dom import cw, read
from clausewitz.errors import ParseError
from clausewitz.lang.clausewitz import Parser, DEFAULT_RECOGNIZERS


cw_doc = """
# a country definition
name = "Foo Bar"
capital = 118
tax = 0.25
start = 1444.11.11
color = { 12 240 7 }
map_color = 0xff8000
flags = {
    is_great_power  # comment inside a group
    has_navy
}
historical_rivals = { ENG FRA }
"""


def test_main():
    r = read.cw_document(cw_doc)
    assert isinstance(r, cw.Root)
    assert len(r) == 8
    assert r.contains_only(cw.Constructor)
    assert r.constructor("name").value.value == "Foo Bar"
    assert r.constructor("name").value.quoting is cw.Quoting.QUOTED
    assert r.constructor("capital").value.value == 118
    assert r.constructor("tax").value.value == 0.25
    assert r.constructor("start").value.value == datetime.date(1444, 11, 11)
    color = r.constructor("color").value
    assert isinstance(color, cw.Group)
    assert color.as_color().value == (12, 240, 7)
    map_color = r.constructor("map_color").value
    assert isinstance(map_color, cw.Color)
    assert map_color.value == (255, 128, 0)
    assert map_color.notation is cw.Notation.HEX
    flags = r.constructor("flags").value
    assert [t.value for t in flags] == ["is_great_power", "has_navy"]
    assert all(t.quoting is cw.Quoting.AUTOMATIC for t in flags)


def test_numbers():
    n = read.cw("42")
    assert isinstance(n, cw.Integer) and n.value == 42
    n = read.cw("3.14")
    assert isinstance(n, cw.Float) and n.value == 3.14
    n = read.cw("1444.11.30")
    assert isinstance(n, cw.Date) and n.value == datetime.date(1444, 11, 30)
    assert isinstance(read.cw("abc"), cw.Text)
    assert isinstance(read.cw("_1"), cw.Text)
    assert read.cw("9223372036854775807").value == 2 ** 63 - 1
    with pytest.raises(ParseError):
        read.cw("9223372036854775808")
    with pytest.raises(ParseError):
        read.cw("1444.13.1")
    with pytest.raises(ParseError):
        read.cw("12abc")


def test_colors():
    assert read.cw("0XFF0080").value == (255, 0, 128)
    with pytest.raises(ParseError):
        read.cw("0xff00")
    with pytest.raises(ParseError):
        read.cw("0xff00zz")
    with pytest.raises(ParseError):
        read.cw("0x")


def test_strings():
    t = read.cw(r'"a \= b \\ c"')
    assert t.value == r'a = b \ c'
    t = read.cw('"two\nlines"')
    assert t.value == "two\nlines"
    assert read.cw('""').value == ""
    with pytest.raises(ParseError):
        read.cw(r'"a \n b"')
    with pytest.raises(ParseError):
        read.cw('"unterminated')


def test_constructors():
    c = read.cw("a = { b = c }")
    assert isinstance(c, cw.Constructor)
    assert isinstance(c.value, cw.Group)
    assert c.value[0].name.value == "b"

    # assignments can be chained
    c = read.cw("a = b = c")
    assert isinstance(c.value, cw.Constructor)
    assert c.value.value.value == "c"

    c = read.cw('"quoted name" = 1')
    assert c.name.value == "quoted name"

    # only text can be a name
    r = read.cw_document("a = 1 b = 2")
    assert len(r) == 2
    with pytest.raises(ParseError):
        read.cw_document("1 = 2")
    with pytest.raises(ParseError):
        read.cw_document("a =")
    with pytest.raises(ParseError):
        read.cw_document("{ a = }")


def test_empty():
    assert len(read.cw_document("")) == 0
    assert len(read.cw_document("  \n\t# only a comment\n")) == 0
    assert read.cw("# nothing") is None
    assert len(read.cw("{}")) == 0


def test_errors():
    with pytest.raises(ParseError):
        read.cw_document("a = { b c")
    with pytest.raises(ParseError):
        read.cw_document("}")
    with pytest.raises(ParseError):
        read.cw_document("=")
    with pytest.raises(ParseError):
        read.cw_document("a = @")

    with pytest.raises(ParseError) as excinfo:
        read.cw_document('a = 1\nb = { "c }')
    err = excinfo.value
    assert err.pos == 12
    assert err.line == 2
    assert err.column == 7
    assert err.message == "unterminated string"
    assert "line 2, column 7" in str(err)


def read_yes_no(parser, cursor):
    """Read yes and no as an Integer."""
    if cursor.at(a.Name) and cursor.token.text in ("yes", "no"):
        return cw.Integer(int(cursor.advance().text == "yes"))


def test_recognizers():
    p = Parser((read_yes_no,) + DEFAULT_RECOGNIZERS)
    r = p.document("ai = yes human = no name = noname")
    assert r.constructor("ai").value.value == 1
    assert r.constructor("human").value.value == 0
    assert isinstance(r.constructor("name").value, cw.Text)

    # without the group recognizer, braces are not understood
    p = Parser(DEFAULT_RECOGNIZERS[:3])
    with pytest.raises(ParseError):
        p.document("a = { 1 }")
    assert isinstance(p.recognizers, tuple)


if __name__ == "__main__" and 'test_main' in globals():
    test_main()
