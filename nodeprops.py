#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
# nodeprops: Null-safe accessors for DOM node properties.
#
#pylint: disable=W0212
#
from typing import Any, List
import logging

from xml.dom import Node
from xml.dom.minicompat import NodeList

lg = logging.getLogger("nodeprops")

__metadata__ = {
    "title"        : "nodeprops",
    "description"  : "Null-safe accessors for DOM node properties.",
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

Accessors for the usual DOM node properties, for use with `xml.dom.minidom`
(or anything that looks like it). Properties that the DOM allows to be null
come back as "" instead of None, so callers can concatenate, compare, and
split without checking first:

    from nodeprops import nodeName, namespaceURI, textContent
    ...
    if namespaceURI(node).startswith("http://www.w3.org/1999/xhtml"): ...

minidom has no `textContent` and no `baseURI`; `textContent()` and
`setTextContent()` implement the DOM Level 3 definitions, and `baseURI()`
returns "" unless the node happens to carry one.

`length()` gives the length of any of the DOM list types (NodeList,
NamedNodeMap, CharacterData, ...).
"""

# Node types whose textContent is the concatenation of their children's.
_containerTypes = (
    Node.ELEMENT_NODE,
    Node.ATTRIBUTE_NODE,
    Node.ENTITY_NODE,
    Node.ENTITY_REFERENCE_NODE,
    Node.DOCUMENT_FRAGMENT_NODE,
)

# Node types whose textContent is their own data.
_dataTypes = (
    Node.TEXT_NODE,
    Node.CDATA_SECTION_NODE,
    Node.COMMENT_NODE,
    Node.PROCESSING_INSTRUCTION_NODE,
)

# Node types for which DOM defines textContent as null.
_nullTextTypes = (
    Node.DOCUMENT_NODE,
    Node.DOCUMENT_TYPE_NODE,
    Node.NOTATION_NODE,
)


###############################################################################
# Basic properties
#
def nodeName(node:Node) -> str:
    return node.nodeName or ""

def nodeValue(node:Node) -> str:
    return node.nodeValue or ""

def nodeType(node:Node) -> int:
    return node.nodeType

def namespaceURI(node:Node) -> str:
    return node.namespaceURI or ""

def prefix(node:Node) -> str:
    return node.prefix or ""

def localName(node:Node) -> str:
    return node.localName or ""

def baseURI(node:Node) -> str:
    """minidom doesn't track base URIs, so fall back to the documentURI
    the document was loaded from (xml:base is not applied).
    """
    uri = getattr(node, "baseURI", None)
    if uri: return uri
    doc = node if node.nodeType == Node.DOCUMENT_NODE else node.ownerDocument
    if doc is None: return ""
    return getattr(doc, "documentURI", None) or ""


###############################################################################
# Tree links
#
def parentNode(node:Node) -> Node:
    return node.parentNode

def childNodes(node:Node) -> NodeList:
    """Never None, even for node types that can't have children.
    """
    chn = node.childNodes
    return chn if chn is not None else NodeList()

def firstChild(node:Node) -> Node:
    return node.firstChild

def lastChild(node:Node) -> Node:
    return node.lastChild

def nextSibling(node:Node) -> Node:
    return node.nextSibling

def previousSibling(node:Node) -> Node:
    return node.previousSibling

def attributes(node:Node) -> Any:
    """Returns the NamedNodeMap, or None for non-elements.
    """
    return getattr(node, "attributes", None)

def ownerDocument(node:Node) -> Node:
    return node.ownerDocument

def documentElement(doc:Node) -> Node:
    if doc is None: return None
    return doc.documentElement


###############################################################################
# textContent (DOM Level 3)
#
def textContent(node:Node) -> str:
    """Cat together the text of all descendants, leaving out comments and
    PIs. See https://www.w3.org/TR/DOM-Level-3-Core/core.html#Node3-textContent
    """
    nt = node.nodeType
    if nt in _dataTypes:
        return node.data or ""
    if nt == Node.ATTRIBUTE_NODE:
        return node.value or ""
    if nt in _containerTypes:
        buf = []
        for ch in childNodes(node):
            if ch.nodeType in (Node.COMMENT_NODE, Node.PROCESSING_INSTRUCTION_NODE):
                continue
            buf.append(textContent(ch))
        return "".join(buf)
    return ""

def setTextContent(node:Node, value:str) -> None:
    """Replace the node's content by a single text node (or by nothing,
    if value is empty). Leaves Document, DocumentType, and Notation alone.
    """
    if value is None: value = ""
    nt = node.nodeType
    if nt in _dataTypes:
        node.data = value
    elif nt == Node.ATTRIBUTE_NODE:
        node.value = value
    elif nt in _containerTypes:
        while node.firstChild is not None:
            node.removeChild(node.firstChild)
        if value:
            node.appendChild(node.ownerDocument.createTextNode(value))
    elif nt in _nullTextTypes:
        lg.debug("setTextContent ignored for nodeType %d.", nt)


###############################################################################
# Collection lengths
#
def length(obj:Any) -> int:
    """Length of a NodeList, NamedNodeMap, CharacterData, or other DOM
    collection. Uses the native 'length' property when there is one.
    """
    if obj is None: return 0
    try:
        return obj.length
    except AttributeError:
        return len(obj)


###############################################################################
# Small predicates and helpers
#
def isElement(node:Node) -> bool:
    return node is not None and node.nodeType == Node.ELEMENT_NODE

def isText(node:Node) -> bool:
    return node is not None and node.nodeType in (
        Node.TEXT_NODE, Node.CDATA_SECTION_NODE)

def childElements(node:Node) -> List[Node]:
    return [ ch for ch in childNodes(node) if ch.nodeType == Node.ELEMENT_NODE ]

def attribute(element:Node, name:str) -> str:
    """Like getAttribute(), but "" when the element has no such attribute
    (minidom already does that; other DOMs return None).
    """
    return element.getAttribute(name) or ""
