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
Meta-information about the clausewitz package.

This information is used by the install script.

"""

import collections
Version = collections.namedtuple("Version", "major minor patch")


## information
name = "clausewitz"
description = "Read, modify and write Clausewitz engine definition files"
long_description = \
    "The clausewitz library can read the definition files of games built on " \
    "the Clausewitz engine into a document tree, modify the tree and write " \
    "it back to valid text."
maintainer = "The clausewitz authors"
license = "GPL v3"

version = Version(0, 1, 0)

# the full version number as a string
version_string = "{}.{}.{}".format(*version)
