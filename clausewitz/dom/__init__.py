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
This module defines a DOM (Document Object Model) for Clausewitz engine
definition files.

The DOM is a simple tree structure where every value is represented by a node.
Blocks (``{`` ... ``}``) and the document itself are nodes with child nodes,
an assignment (``name = value``) is a Constructor node with exactly two
children.

This DOM is used in two ways:

1. Building a definition file from scratch, or modifying a file that was
   read. Every change is checked against the hierarchy rules, so the tree
   always has a valid structure.

2. Writing the tree back to text. The output can always be read again and
   results in the same tree, but comments and the original formatting are
   not preserved.

"""
