#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
# domserialize: XML string forms of DOM nodes (toXmlString, outer/innerHTML).
#
import sys
import io
import logging
from typing import IO, Iterable

from xml.dom import Node

from domenums import RWord, OutputKeys
from nodeprops import childNodes
from transformer import createTransformer

lg = logging.getLogger("domserialize")

__metadata__ = {
    "title"        : "domserialize",
    "description"  : "XML string forms of DOM nodes.",
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

Turn a DOM node into XML text:

    toXmlString(node)                   -- no XML declaration
    toXmlString(node, xmlDeclaration=True)
    writeXmlString(node, writer, xmlDeclaration=False)
    outerHTML(node)                     -- same as toXmlString(node)
    innerHTML(node)                     -- outerHTML of each child, catted

All of these go through a default Transformer (see `transformer.py`),
so errors from it propagate as-is.

==Usage (command line)==

    domserialize.py [options] file.xml...

parses each file and writes it back out to stdout.
"""


###############################################################################
#
def writeXmlString(node:Node, writer:IO, xmlDeclaration:bool=False) -> None:
    """Serialize the node to the given writer.
    """
    t = createTransformer()
    t.setOutputProperty(OutputKeys.OMIT_XML_DECLARATION,
        RWord.NO if xmlDeclaration else RWord.YES)
    t.transform(node, writer)

def toXmlString(node:Node, xmlDeclaration:bool=False) -> str:
    buf = io.StringIO()
    writeXmlString(node, buf, xmlDeclaration)
    return buf.getvalue()

def outerHTML(node:Node) -> str:
    return toXmlString(node)

def innerHTML(node:Node) -> str:
    return nodeListOuterHTML(childNodes(node))

def nodeListOuterHTML(nodes:Iterable[Node]) -> str:
    if nodes is None: return ""
    return "".join(outerHTML(n) for n in nodes)


###############################################################################
# Main
#
def processOptions(argv=None):
    import argparse
    parser = argparse.ArgumentParser(
        description="Parse XML file(s) and write them back out.")

    parser.add_argument(
        "--coalesce", action="store_true",
        help="Merge CDATA sections into ordinary text.")
    parser.add_argument(
        "--ignoreComments", action="store_true",
        help="Drop comments while parsing.")
    parser.add_argument(
        "--indent", type=int, metavar="N", default=None,
        help="Pretty-print, indenting N spaces per level.")
    parser.add_argument(
        "--inner", action="store_true",
        help="Write only the content of the document element.")
    parser.add_argument(
        "--oencoding", type=str, metavar="E", default="UTF-8",
        help="Use this character coding for output. Default: UTF-8.")
    parser.add_argument(
        "--omitDeclaration", action="store_true",
        help="Don't write an XML declaration.")
    parser.add_argument(
        "--verbose", "-v", action="count", default=0,
        help="Add more messages (repeatable).")
    parser.add_argument(
        "--version", action="version", version=__version__,
        help="Display version information, then exit.")

    parser.add_argument(
        "files", type=str, nargs="*",
        help="Path(s) to input file(s)")

    args0 = parser.parse_args(argv)
    if (args0.verbose):
        logging.basicConfig(level=logging.INFO - args0.verbose)
    return args0

def main(argv=None, out:IO=None) -> int:
    from dombuilder import DocumentBuilderFactory, parseXml

    args = processOptions(argv)
    if out is None:
        sys.stdout.reconfigure(encoding=args.oencoding,
            errors="xmlcharrefreplace")
        out = sys.stdout

    dbf = DocumentBuilderFactory(
        ignoringComments=args.ignoreComments, coalescing=args.coalesce)
    builder = dbf.newDocumentBuilder()

    t = createTransformer()
    t.setOutputProperty(OutputKeys.ENCODING, args.oencoding)
    if args.indent is not None:
        t.setOutputProperty(OutputKeys.INDENT, RWord.YES)
        t.setOutputProperty(OutputKeys.INDENT_AMOUNT, str(args.indent))
    if args.omitDeclaration:
        t.setOutputProperty(OutputKeys.OMIT_XML_DECLARATION, RWord.YES)

    if not args.files:
        lg.info("No files specified, reading stdin.")
        args.files.append(sys.stdin.buffer)

    for src in args.files:
        lg.info("Parsing '%s'.", src)
        doc = parseXml(src, builder=builder)
        if args.inner:
            out.write(innerHTML(doc.documentElement))
        else:
            t.transform(doc, out)
        out.write("\n")
        doc.unlink()
    return 0

if __name__ == "__main__":
    sys.exit(main())
