"""File system tree representation driven by the exclusion policy.

This package provides the classes for building the filtered tree of a directory
and rendering it as the ASCII tree section of the document.
"""
