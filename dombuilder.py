#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
# dombuilder: Factories for documents and document builders, and parseXml().
# 2016-02-06: Written by Steven J. DeRose (based on my stuff back to the 80's).
#
#pylint: disable=W0212
#
import os
import logging
from typing import IO, Union

from xml.dom import minidom, expatbuilder, xmlbuilder
from xml.sax.saxutils import prepare_input_source
from xml.sax.xmlreader import InputSource

lg = logging.getLogger("dombuilder")

__metadata__ = {
    "title"        : "dombuilder",
    "rightsHolder" : "Steven J. DeRose",
    "creator"      : "http://viaf.org/viaf/50334488",
    "type"         : "http://purl.org/dc/dcmitype/Software",
    "language"     : "Python 3.11",
    "created"      : "2016-02-06",
    "modified"     : "2025-03",
    "publisher"    : "http://github.com/sderose",
    "license"      : "https://creativecommons.org/licenses/by-sa/3.0/"
}
__version__ = __metadata__["modified"]

descr = """
=Description=

This is the "glue" between a caller and the standard library's XML parser
(expat, as driven by `xml.dom.expatbuilder`) and DOM (`xml.dom.minidom`).
It follows the JAXP shape: a `DocumentBuilderFactory` holds the parser
features, and hands out `DocumentBuilder` objects that do the parsing.
Most callers need only the module-level functions.


==Usage==

You might have your XML in a file:

    from dombuilder import parseXml
    theDocument = parseXml("myFile.xml")
        OR
    theDocument = parseXml(Path("myFile.xml"))
        OR
    theDocument = parseXml("https://example.com/myFile.xml")
        OR
    with open("myFile.xml", "rb") as ifh:
        theDocument = parseXml(ifh)

or in a literal or variable:

    theDocument = parseXmlString("<p>Hello</p>")

A SAX `InputSource` works too (byte stream, character stream, or just
a system ID).

To change parser features, make a factory:

    from dombuilder import DocumentBuilderFactory
    dbf = DocumentBuilderFactory(ignoringComments=True, coalescing=True)
    theDocument = parseXml("myFile.xml", builder=dbf.newDocumentBuilder())

And to get an empty document:

    theDocument = createDocument()


==Features==

* namespaceAware (default True): Use the namespace-aware expat builder.
* ignoringComments (default False): Leave comments out of the tree.
* coalescing (default False): Turn CDATA sections into ordinary text,
merged with any adjacent text.


=Known bugs and limitations=

Parse errors come straight from expat (`xml.parsers.expat.ExpatError`),
and I/O or URL errors from the file system or urllib. None of them are
caught here.

Streams passed in by the caller are not closed; streams opened here
(for paths, URIs, and InputSources that only have a system ID) are.


=History=

* By Steven J. DeRose, ~Feb 2016.

* 2019-12-20: Split out of basedom.py (nee RealDOM.py).

* 2025-03: Rework as JAXP-style factories over expatbuilder and minidom.


=Ownership=

This work by Steven J. DeRose is licensed under a Creative Commons
Attribution-Share Alike 3.0 Unported License. For further information on
this license, see L<http://creativecommons.org/licenses/by-sa/3.0/>.

For the most recent version, see [http://www.derose.net/steve/utilities]
or [http://github.com/sderose].
"""

XmlSource = Union[str, os.PathLike, IO, InputSource]


###############################################################################
#
class DocumentBuilderFactory:
    """Holds parser features; makes DocumentBuilders that use them.
    """
    def __init__(
        self,
        namespaceAware:bool=True,
        ignoringComments:bool=False,
        coalescing:bool=False,
        domImpl=None,
        ):
        """
        @param namespaceAware: Use the namespace-aware builder.
        @param ignoringComments: Discard comments.
        @param coalescing: Turn CDATA sections into plain text.
        @param domImpl: a DOM implementation for createDocument();
            defaults to minidom's.
        """
        self.namespaceAware = namespaceAware
        self.ignoringComments = ignoringComments
        self.coalescing = coalescing
        self.domImpl = domImpl

    @classmethod
    def newInstance(cls) -> 'DocumentBuilderFactory':
        return cls()

    def makeOptions(self) -> xmlbuilder.Options:
        """Translate our features into the Options expatbuilder reads.
        """
        opts = xmlbuilder.Options()
        opts.namespaces = 1 if self.namespaceAware else 0
        opts.comments = not self.ignoringComments
        opts.cdata_sections = not self.coalescing
        return opts

    def newDocumentBuilder(self) -> 'DocumentBuilder':
        return DocumentBuilder(options=self.makeOptions(), domImpl=self.domImpl)


###############################################################################
#
class DocumentBuilder:
    """Parse XML (or make an empty Document) into minidom.
    A new expat parser is made for each parse, so one builder can be
    reused (though not from several threads at once).
    """
    def __init__(self, options:xmlbuilder.Options=None, domImpl=None):
        if options is None: options = xmlbuilder.Options()
        if domImpl is None: domImpl = minidom.getDOMImplementation()
        if not hasattr(domImpl, "createDocument"):
            raise AttributeError(
                f"domImpl passed ({domImpl}) has no createDocument().")
        self.options = options
        self.domImpl = domImpl

    def isNamespaceAware(self) -> bool:
        return bool(self.options.namespaces)

    def newDocument(self) -> minidom.Document:
        return self.domImpl.createDocument(None, None, None)

    def _makeBuilder(self) -> expatbuilder.ExpatBuilder:
        return expatbuilder.makeBuilder(self.options)

    def parseString(self, xmlText:Union[str, bytes]) -> minidom.Document:
        return self._makeBuilder().parseString(xmlText)

    def parse(self, source:XmlSource) -> minidom.Document:
        """Run the parser on a path, URI, stream, or InputSource.

        @param source: A str is taken as a system ID (a file path or URL).
        @return A minidom Document.
        """
        if not isinstance(source, (str, os.PathLike, InputSource)) \
            and not hasattr(source, "read"):
            raise TypeError(
                f"Cannot parse XML from a {type(source).__name__}.")

        if isinstance(source, os.PathLike):
            lg.info("Parsing file '%s'.", source)
            with open(source, "rb") as ifh:
                doc = self._makeBuilder().parseFile(ifh)
            doc.documentURI = os.fspath(source)
            return doc

        opened = (isinstance(source, str)
            or (isinstance(source, InputSource)
                and source.getByteStream() is None
                and source.getCharacterStream() is None))

        inSource = prepare_input_source(source)
        ifh = inSource.getCharacterStream()
        if ifh is None: ifh = inSource.getByteStream()
        lg.info("Parsing %s (systemId '%s').",
            type(source).__name__, inSource.getSystemId())
        try:
            doc = self._makeBuilder().parseFile(ifh)
        finally:
            if opened: ifh.close()
        if inSource.getSystemId():
            doc.documentURI = inSource.getSystemId()
        return doc


###############################################################################
# Module-level conveniences
#
def defaultDocumentBuilderFactory() -> DocumentBuilderFactory:
    return DocumentBuilderFactory.newInstance()

def defaultDocumentBuilder(
    builderFactory:DocumentBuilderFactory=None) -> DocumentBuilder:
    if builderFactory is None: builderFactory = defaultDocumentBuilderFactory()
    return builderFactory.newDocumentBuilder()

def createDocument(builder:DocumentBuilder=None,
    builderFactory:DocumentBuilderFactory=None) -> minidom.Document:
    """Creates a new, empty document, with the given builder, or else
    one from the given (or default) factory.
    """
    if builder is None: builder = defaultDocumentBuilder(builderFactory)
    return builder.newDocument()

def parseXml(source:XmlSource, builder:DocumentBuilder=None) -> minidom.Document:
    """Parses the XML document from a file path, URI, stream, or InputSource.
    """
    if builder is None: builder = defaultDocumentBuilder()
    return builder.parse(source)

def parseXmlString(xmlText:Union[str, bytes],
    builder:DocumentBuilder=None) -> minidom.Document:
    if builder is None: builder = defaultDocumentBuilder()
    return builder.parseString(xmlText)
