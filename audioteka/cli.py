# -*- coding: utf-8 -*-
# Audioteka metadata provider – derived from Calibre-Web Automated
# Copyright (C) 2018-2025 Calibre-Web contributors
# Copyright (C) 2024-2025 Calibre-Web Automated contributors
# SPDX-License-Identifier: GPL-3.0-or-later
# See CONTRIBUTORS for full list of authors.

import sys
import argparse

from .constants import STABLE_VERSION as _STABLE_VERSION
from .locales import LOCALES


def version_info():
    return "Audioteka metadata provider version: %s" % _STABLE_VERSION


class CliParameter(object):

    def __init__(self):
        self.port = None
        self.host = None
        self.language = None
        self.logpath = None
        self.debug = False
        self.no_link = False

    def init(self, argv=None):
        self.arg_parser(argv)

    def arg_parser(self, argv=None):
        parser = argparse.ArgumentParser(description='Audiobookshelf custom metadata provider '
                                                     'serving book details scraped from Audioteka\n',
                                         prog='provider.py')
        parser.add_argument('-p', metavar='port', type=int,
                            help='port to listen on, overrides the PORT environment variable')
        parser.add_argument('-i', metavar='ip-address', help='Server IP-Address to listen')
        parser.add_argument('-l', metavar='language', choices=sorted(LOCALES),
                            help='catalog region to search, overrides the LANGUAGE environment variable')
        parser.add_argument('-o', metavar='path', help='path and name of the log file, e.g. /var/log/audioteka.log')
        parser.add_argument('-d', action='store_true', help='enable debug logging')
        parser.add_argument('-n', action='store_true', help='do not prepend the Audioteka link to descriptions')
        parser.add_argument('-v', '--version', action='version', help='Shows version number and exits',
                            version=version_info())
        args = parser.parse_args(sys.argv[1:] if argv is None else argv)

        self.port = args.p
        self.host = args.i
        self.language = args.l
        self.logpath = args.o
        self.debug = args.d
        self.no_link = args.n
