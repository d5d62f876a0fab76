#!/usr/bin/env python3
#
# domenums: Constants shared by the domextras modules.
#
from types import SimpleNamespace

__metadata__ = {
    "title"        : "domenums",
    "description"  : "Constants shared by the domextras modules.",
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


### Constants

RWord = SimpleNamespace(**{
    # Attribute names
    "CLASS_ATTR"     : "class",

    # Values for yes/no output properties
    "YES"            : "yes",
    "NO"             : "no",
})

# Names for Transformer.setOutputProperty(), as in TrAX.
#
OutputKeys = SimpleNamespace(**{
    "METHOD"               : "method",
    "VERSION"              : "version",
    "ENCODING"             : "encoding",
    "STANDALONE"           : "standalone",
    "INDENT"               : "indent",
    "INDENT_AMOUNT"        : "indent-amount",
    "OMIT_XML_DECLARATION" : "omit-xml-declaration",
})

# Values for the "method" output property.
OUTPUT_METHODS = ( "xml", "text" )
