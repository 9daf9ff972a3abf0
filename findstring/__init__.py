"""
find-string — Search Executables for Embedded Strings
=====================================================
Recursively scans a directory for Mach-O and Windows PE images and reports
the ones whose strings, symbols or Objective-C methods contain a search term.
"""

__version__ = "1.0.0"
__author__ = "xs-labs"
__license__ = "MIT"
__description__ = "Search executables in a directory tree for embedded strings"
