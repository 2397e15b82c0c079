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
Test the container methods of Group and Root.
"""

### find clausewitz
import sys
sys.path.insert(0, '.')

import pytest

from clausewitz.dom import cw
from clausewitz.errors import HierarchyError


def test_main():
    g = cw.Group()
    a, b, c = cw.Text("a"), cw.Text("b"), cw.Text("c")
    g.add(a)
    g.add(c)
    g.add(b, 1)
    assert list(g) == [a, b, c]
    assert g.find(b) == 1
    assert g.find(cw.Text("b")) == -1   # identity counts, not the value

    g.exchange(0, 2)
    assert list(g) == [c, b, a]
    g.exchange(c, a)
    assert list(g) == [a, b, c]
    assert all(n.parent is g for n in g)
    with pytest.raises(ValueError):
        g.exchange(a, cw.Text("x"))

    g.delete(b)
    assert b.parent is None
    assert list(g) == [a, c]
    g.delete(b)     # not a child anymore, does nothing
    assert len(g) == 2
    g.delete(0)
    assert a.parent is None
    assert list(g) == [c]

    g.clear()
    assert len(g) == 0
    assert c.parent is None


def test_ownership():
    g = cw.Group(cw.Integer(1))
    with pytest.raises(TypeError):
        g *= 2
    assert len(g) == 1

    # a refused slice assignment leaves the group unchanged
    other = cw.Group(cw.Integer(2))
    with pytest.raises(HierarchyError):
        g[0:1] = [other[0]]
    assert g[0].value == 1
    assert g[0].parent is g
    assert other[0].parent is other
    with pytest.raises(HierarchyError):
        cw.Group().append(g[0])

    # children can be reordered with a slice
    g.add(cw.Integer(3))
    first, second = g
    g[:] = [second, first]
    assert list(g) == [second, first]
    assert first.parent is g and second.parent is g

    # a node can't be added twice
    i = cw.Integer(4)
    with pytest.raises(HierarchyError):
        g[:] = [i, i]
    assert list(g) == [second, first]
    assert i.parent is None


def test_same_content():
    g = cw.Group(cw.Integer(1), cw.Integer(1))
    assert len(g) == 2
    g.delete(g[1])
    assert len(g) == 1


def test_contains():
    g = cw.Group()
    assert g.contains_only(cw.Number)
    assert not g.contains_any(cw.Number)
    g.add(cw.Integer(1))
    g.add(cw.Float(2.0))
    assert g.contains_only(cw.Number)
    assert g.contains_any(cw.Float)
    assert not g.contains_any(cw.Text)
    g.add(cw.Text("x"))
    assert not g.contains_only(cw.Number)
    assert g.contains_only((cw.Number, cw.Text))


def test_as_color():
    g = cw.Group(cw.Integer(255), cw.Integer(0), cw.Float(128.0))
    c = g.as_color()
    assert isinstance(c, cw.Color)
    assert c.value == (255, 0, 128)
    assert c.notation is cw.Notation.RGB
    assert c.parent is None
    assert len(g) == 3

    assert cw.Group(cw.Integer(1), cw.Integer(2)).as_color() is None
    assert cw.Group(cw.Integer(1), cw.Integer(2), cw.Integer(256)).as_color() is None
    assert cw.Group(cw.Integer(1), cw.Integer(2), cw.Float(0.5)).as_color() is None
    assert cw.Group(cw.Integer(1), cw.Integer(2), cw.Text("x")).as_color() is None
    assert cw.Group(cw.Integer(1), cw.Integer(2), cw.Integer(3), cw.Integer(4)).as_color() is None


def test_constructors():
    r = cw.Root(
        cw.Constructor("Flag", cw.Text("a")),
        cw.Integer(1),
        cw.Constructor("flag", cw.Text("b")),
        cw.Constructor("name", cw.Text("c")),
    )
    assert r.constructor_count() == 3
    assert r.constructor_count("FLAG") == 2
    assert r.constructor_count("other") == 0
    assert [c.value.value for c in r.constructors("flag")] == ["a", "b"]
    assert r.constructor("NAME") is r[3]
    assert r.constructor("other") is None

    flags = list(r.constructors("flag"))
    r.delete_constructors("flag")
    assert len(r) == 2
    assert all(c.parent is None for c in flags)
    r.delete_constructors()
    assert len(r) == 1
    assert isinstance(r[0], cw.Integer)


if __name__ == "__main__" and 'test_main' in globals():
    test_main()
