#!/usr/bin/python3
# -*- coding: utf-8 -*-

# Copyright © 2022-2026 EmojiTones contributors
#
# This file is part of EmojiTones.
#
# EmojiTones is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 3 of the License, or
# (at your option) any later version.
#
# EmojiTones is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program. If not, see <http://www.gnu.org/licenses/>.

import sys
import glob

from setuptools import setup, Command


#### custom test command ####

class TestCommand(Command):
    user_options = [] # required by Command

    def initialize_options(self):
        pass

    def finalize_options(self):
        pass

    def run(self):
        import pytest
        sys.exit(pytest.main(["--doctest-modules",
                              "--log-level=WARNING",
                              "--verbose",
                              "EmojiTones"]))


##### setup #####

setup(
    name = 'emojitones',
    version = '1.0.0', # here the package version is set
    license = 'GPL-3+',
    description = 'Skin tones for emoji and their reverse lookup',

    packages = ['EmojiTones', 'EmojiTones.test'],
    package_data = {'EmojiTones': ['data/*.csv', 'data/*.json']},
    data_files = [('share/doc/emojitones',
                      glob.glob('emojitones-defaults.conf.example')),
                 ],

    scripts = ['emojitones'],

    python_requires = '>=3.8',
    install_requires = ['orjson', 'packaging'],
    extras_require = {'test': ['pytest']},

    cmdclass = {
                'test': TestCommand,
                }
)
