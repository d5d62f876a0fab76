#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
# domextensions: Optionally hang the domextras helpers onto minidom classes.
#
import logging
from typing import Dict, List, Tuple

from xml.dom import minidom
from xml.dom.minicompat import NodeList, EmptyNodeList

import nodeprops
import domaxes
import classset
import domserialize

lg = logging.getLogger("domextensions")

__metadata__ = {
    "title"        : "domextensions",
    "description"  : "Optionally hang the domextras helpers onto minidom classes.",
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

descr = """
=Description=

After `patchMinidom()`, the helpers can be used as members:

    node.textContent = "new"
    print(elem.outerHTML, elem.innerHTML)
    elem.addClass("big")
    for sib in elem.nextElements(): ...

Names minidom already defines are left alone (and reported at INFO level).
`unpatchMinidom()` removes exactly what was added.
"""

def _classSetGet(self):
    return classset.classSet(self)
def _classSetSet(self, tokens):
    classset.setClassSet(self, tokens)

def _classesGet(self):
    return classset.classes(self)
def _classesSet(self, value):
    classset.setClasses(self, value)

# Class: { name: member }
#
_additions:Dict[type, Dict[str, object]] = {
    minidom.Node: {
        "textContent"     : property(nodeprops.textContent, nodeprops.setTextContent),
        "outerHTML"       : property(domserialize.outerHTML),
        "innerHTML"       : property(domserialize.innerHTML),
        "toXmlString"     : domserialize.toXmlString,
        "writeXmlString"  : domserialize.writeXmlString,
        "nextSiblings"    : domaxes.nextSiblings,
        "previousSiblings": domaxes.previousSiblings,
        "nextElements"    : domaxes.nextElements,
        "previousElements": domaxes.previousElements,
    },
    minidom.Element: {
        "classes"         : property(_classesGet, _classesSet),
        "classSet"        : property(_classSetGet, _classSetSet),
        "hasClass"        : classset.hasClass,
        "addClass"        : classset.addClass,
        "removeClass"     : classset.removeClass,
        "toggleClass"     : classset.toggleClass,
    },
    NodeList: {
        "outerHTML"       : property(domserialize.nodeListOuterHTML),
    },
    EmptyNodeList: {
        "outerHTML"       : property(domserialize.nodeListOuterHTML),
    },
}

_patched:List[Tuple[type, str]] = []

def patchMinidom() -> List[str]:
    """Add the helpers to minidom's classes. Returns the qualified
    names of what was added. Calling it again adds nothing.
    """
    added = []
    for cls, members in _additions.items():
        for name, member in members.items():
            if (cls, name) in _patched: continue
            if name in cls.__dict__ or hasattr(cls, name):
                lg.info("minidom %s already has '%s'; not patching.",
                    cls.__name__, name)
                continue
            setattr(cls, name, member)
            _patched.append((cls, name))
            added.append(f"{cls.__name__}.{name}")
    lg.debug("Patched %d members into minidom.", len(added))
    return added

def unpatchMinidom() -> None:
    while _patched:
        cls, name = _patched.pop()
        delattr(cls, name)

def isPatched() -> bool:
    return len(_patched) > 0
