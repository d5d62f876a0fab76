#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
# classset: CSS class handling for DOM elements.
#
import re
from collections.abc import MutableSet
from typing import Iterable, Iterator, List
import logging

from xml.dom import Node

from domenums import RWord
from domexceptions import InvalidNodeTypeError

lg = logging.getLogger("classset")

__metadata__ = {
    "title"        : "classset",
    "description"  : "CSS class handling for DOM elements.",
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

# HTML "ASCII whitespace" only; U+00A0 and the like stay inside tokens.
#
classSep = re.compile(r"[ \t\n\r\f]+")

def splitClasses(s:str) -> List[str]:
    return [ tok for tok in classSep.split(s) if tok ]


###############################################################################
#
class ClassSet(MutableSet):
    """A mutable set of class tokens that remembers insertion order,
    so writing it back doesn't shuffle the attribute. whatwg calls the
    equivalent a DOMTokenList (Element.classList), though it's not a list.

    str() gives the attribute form: tokens separated by single spaces.
    """
    def __init__(self, vals:Iterable[str]=None):
        self._tokens = {}
        if vals is None: return
        if isinstance(vals, str): vals = splitClasses(vals)
        for val in vals: self.add(val)

    def __contains__(self, token:object) -> bool:
        return token in self._tokens

    def __iter__(self) -> Iterator[str]:
        return iter(self._tokens)

    def __len__(self) -> int:
        return len(self._tokens)

    def add(self, token:str) -> None:
        self._tokens[token] = None

    def discard(self, token:str) -> None:
        self._tokens.pop(token, None)

    def toggle(self, token:str) -> bool:
        if token in self: self.discard(token)
        else: self.add(token)
        return token in self

    def __str__(self) -> str:
        return " ".join(self._tokens)

    def __repr__(self) -> str:
        return f"ClassSet({list(self._tokens)!r})"


###############################################################################
#
def _checkElement(node:Node) -> None:
    if node is None or node.nodeType != Node.ELEMENT_NODE:
        raise InvalidNodeTypeError(
            f"Class operations need an Element, not {type(node).__name__}.")

def classes(element:Node) -> str:
    """The raw class attribute, or "".
    """
    _checkElement(element)
    return element.getAttribute(RWord.CLASS_ATTR) or ""

def setClasses(element:Node, value:str) -> None:
    _checkElement(element)
    element.setAttribute(RWord.CLASS_ATTR, value)

def classSet(element:Node) -> ClassSet:
    """Split the class attribute on ASCII whitespace, dropping empty tokens.
    The result is a copy; use setClassSet() to store changes.
    """
    return ClassSet(splitClasses(classes(element)))

def setClassSet(element:Node, tokens:Iterable[str]) -> None:
    setClasses(element, " ".join(tokens))

def hasClass(element:Node, cssClass:str) -> bool:
    return cssClass in classSet(element)

def addClass(element:Node, cssClass:str) -> bool:
    """Add the class unless it's already there.
    Returns whether the attribute changed.
    """
    cs = classSet(element)
    if cssClass in cs: return False
    cs.add(cssClass)
    setClassSet(element, cs)
    return True

def removeClass(element:Node, cssClass:str) -> bool:
    """Remove the class if it's there.
    Returns whether the attribute changed.
    """
    cs = classSet(element)
    if cssClass not in cs: return False
    cs.discard(cssClass)
    setClassSet(element, cs)
    return True

def toggleClass(element:Node, cssClass:str) -> bool:
    """Returns whether the class is present afterwards.
    """
    cs = classSet(element)
    present = cs.toggle(cssClass)
    setClassSet(element, cs)
    return present
