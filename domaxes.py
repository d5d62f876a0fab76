#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
# domaxes: Generators over the sibling axes of a DOM node.
#
from typing import Callable, Iterator
import logging

from xml.dom import Node

lg = logging.getLogger("domaxes")

__metadata__ = {
    "title"        : "domaxes",
    "description"  : "Generators over the sibling axes of a DOM node.",
    "rightsHolder" : "Steven J. DeRose",
    "creator"      : "http://viaf.org/viaf/50334488",
    "type"         : "http://purl.org/dc/dcmitype/Software",
    "language"     : "Python 3.11",
    "created"      : "2016-02-06",
    "modified"     : "2025-03",
    "publisher"    : "http://github.com/sderose",
    "license"      : "https://creativecommons.org/licenses/by-sa/3.0/"
}
__version__ = __metadata__['modified']


# These return a whole axis (possibly filtered), lazily.
# The node itself is never included.
#
def previousSiblings(node:Node, test:Callable=None) -> Iterator[Node]:
    cur = node.previousSibling
    while cur is not None:
        if test is None or test(cur): yield cur
        cur = cur.previousSibling
    return

def nextSiblings(node:Node, test:Callable=None) -> Iterator[Node]:
    cur = node.nextSibling
    while cur is not None:
        if test is None or test(cur): yield cur
        cur = cur.nextSibling
    return

def _isElement(node:Node) -> bool:
    return node.nodeType == Node.ELEMENT_NODE

def nextElements(node:Node) -> Iterator[Node]:
    """All following sibling Elements, nearest first.
    """
    return nextSiblings(node, test=_isElement)

def previousElements(node:Node) -> Iterator[Node]:
    """All preceding sibling Elements, nearest first.
    """
    return previousSiblings(node, test=_isElement)

# Equivalents named like XPath axes
#
def precedingSiblings(node:Node, test:Callable=None) -> Iterator[Node]:
    return previousSiblings(node, test=test)
def followingSiblings(node:Node, test:Callable=None) -> Iterator[Node]:
    return nextSiblings(node, test=test)
