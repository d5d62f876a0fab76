#!/usr/bin/env python3
#
# transformer: A TrAX-style serializer for minidom nodes.
#
#pylint: disable=W0212
#
import io
import os
import logging
from typing import Any, Dict, IO, Union
from xml.dom import Node
from xml.sax.saxutils import escape

from domenums import RWord, OutputKeys, OUTPUT_METHODS
from domexceptions import (NotSupportedError, TransformerError,
    TransformerConfigurationError)
from nodeprops import textContent

lg = logging.getLogger("transformer")

__metadata__ = {
    "title"        : "transformer",
    "description"  : "A TrAX-style serializer for minidom nodes",
    "rightsHolder" : "Steven J. DeRose",
    "creator"      : "http://viaf.org/viaf/50334488",
    "type"         : "http://purl.org/dc/dcmitype/Software",
    "language"     : "Python 3.11",
    "created"      : "2016-02-06 (within basedom)",
    "modified"     : "2025-03",
    "publisher"    : "http://github.com/sderose",
    "license"      : "https://creativecommons.org/licenses/by-sa/3.0/"
}
__version__ = __metadata__['modified']

descr = """
=Description=

The pieces of JAXP's `javax.xml.transform` that make sense for minidom:
a `TransformerFactory`, which hands out `Transformer` objects, and the
`Transformer.transform()` call that writes a node somewhere. The actual
writing is done by minidom's own `writexml()`; this module only adds the
XML declaration (or not), indentation settings, and output targets.

    from transformer import createTransformer
    from domenums import OutputKeys
    t = createTransformer()
    t.setOutputProperty(OutputKeys.OMIT_XML_DECLARATION, "yes")
    t.setOutputProperty(OutputKeys.INDENT, "yes")
    t.transform(doc, sys.stdout)

There is no XSLT engine in the standard library, so passing a stylesheet
`source` to `createTransformer()` raises `NotSupportedError`.

==Output properties==

    method                "xml" (default) or "text" (just the textContent)
    version               XML version for the declaration ("1.0")
    encoding              for the declaration and for file targets ("UTF-8")
    standalone            "yes" or "no"; omitted from the declaration if unset
    indent                "yes" or "no" (default)
    indent-amount         spaces per level when indenting (2)
    omit-xml-declaration  "yes" or "no" (default)
"""


###############################################################################
#
class OutputOptions:
    """Settings for Transformer. Callers can pass like-named
    keywords args, or construct and then call setOption().
    """
    def __init__(self, **kwargs):
        self.method:str = "xml"             # "xml" or "text"
        self.version:str = "1.0"            # For the XML declaration
        self.encoding:str = "UTF-8"         # Declaration and file output
        self.standalone:bool = None         # None: leave it out
        self.indent:bool = False            # Newlines and indentation
        self.indentAmount:int = 2           # Spaces per level
        self.omitXmlDeclaration:bool = False

        for k, v in kwargs.items():
            self.setOption(k, v)

    def setOption(self, k:str, v:Any) -> None:  # OutputOptions
        if k not in self.__dict__:
            raise KeyError(f"OutputOptions: Unknown option '{k}'.")
        if k == "method" and v not in OUTPUT_METHODS:
            raise ValueError(f"OutputOptions: method must be one of "
                f"{OUTPUT_METHODS}, not '{v}'.")
        if k == "standalone" and v is not None and not isinstance(v, bool):
            raise TypeError(f"OutputOptions: option 'standalone' expected "
                f"bool or None, not {type(v)}.")
        if self.__dict__[k] is not None and not isinstance(v, type(self.__dict__[k])):
            raise TypeError(f"OutputOptions: option '{k}' expected type "
                f"{type(self.__dict__[k])}, not {type(v)}.")
        self.__dict__[k] = v

    def copy(self) -> 'OutputOptions':
        oo = OutputOptions()
        oo.__dict__.update(self.__dict__)
        return oo

    @property
    def newl(self) -> str:
        return "\n" if self.indent else ""

    @property
    def addindent(self) -> str:
        return " " * self.indentAmount if self.indent else ""

    def declaration(self) -> str:
        buf = f'<?xml version="{self.version}"'
        if self.encoding:
            buf += f' encoding="{self.encoding}"'
        if self.standalone is not None:
            buf += f' standalone="{RWord.YES if self.standalone else RWord.NO}"'
        return buf + "?>"


# Map from OutputKeys names to (OutputOptions field, kind).
#
_propertyFields = {
    OutputKeys.METHOD               : ( "method",             str ),
    OutputKeys.VERSION              : ( "version",            str ),
    OutputKeys.ENCODING             : ( "encoding",           str ),
    OutputKeys.STANDALONE           : ( "standalone",         bool ),
    OutputKeys.INDENT               : ( "indent",             bool ),
    OutputKeys.INDENT_AMOUNT        : ( "indentAmount",       int ),
    OutputKeys.OMIT_XML_DECLARATION : ( "omitXmlDeclaration", bool ),
}

def _yesNo(key:str, value:str) -> bool:
    if value == RWord.YES: return True
    if value == RWord.NO: return False
    raise TransformerConfigurationError(
        f"Output property '{key}' must be 'yes' or 'no', not '{value}'.")


###############################################################################
#
class Transformer:
    """Serializes a node (and its subtree) to a writer or a file.
    Not thread-safe: output properties can change between calls.
    """
    def __init__(self, options:OutputOptions=None):
        self.options = options.copy() if options else OutputOptions()

    def setOutputProperty(self, key:str, value:str) -> None:
        if key not in _propertyFields:
            raise TransformerConfigurationError(
                f"Unknown output property '{key}'.")
        field, kind = _propertyFields[key]
        if kind is bool:
            value = _yesNo(key, value)
        elif kind is int:
            try:
                value = int(value)
            except (TypeError, ValueError) as e:
                raise TransformerConfigurationError(
                    f"Output property '{key}' needs an integer, not '{value}'.") from e
            if value < 0:
                raise TransformerConfigurationError(
                    f"Output property '{key}' cannot be negative ({value}).")
        try:
            self.options.setOption(field, value)
        except (KeyError, TypeError, ValueError) as e:
            raise TransformerConfigurationError(str(e)) from e
        lg.debug("Output property %s set to %r.", key, value)

    def getOutputProperty(self, key:str) -> str:
        if key not in _propertyFields:
            raise TransformerConfigurationError(
                f"Unknown output property '{key}'.")
        field, kind = _propertyFields[key]
        value = getattr(self.options, field)
        if value is None: return None
        if kind is bool: return RWord.YES if value else RWord.NO
        return str(value)

    def getOutputProperties(self) -> Dict[str, str]:
        return { k: self.getOutputProperty(k) for k in _propertyFields }

    def transform(self, node:Node, result:Union[IO, str, os.PathLike]) -> None:
        """Write 'node' to 'result', which is either something with a
        write() method, or a path to (over)write.
        """
        if node is None:
            raise TransformerError("Nothing to transform (node is None).")
        if isinstance(result, (str, os.PathLike)):
            # The file is only opened once the whole node has serialized.
            buf = io.StringIO()
            self._write(node, buf)
            lg.info("Writing %s to '%s'.", node.nodeName, result)
            with open(result, "w", encoding=self.options.encoding or "utf-8",
                errors="xmlcharrefreplace") as ofh:
                ofh.write(buf.getvalue())
            return
        if not callable(getattr(result, "write", None)):
            raise TypeError(f"Transform result must be a path or writable, "
                f"not {type(result).__name__}.")
        self._write(node, result)

    def _write(self, node:Node, writer:IO) -> None:
        fo = self.options
        if fo.method == "text":
            writer.write(textContent(node))
            return

        nt = node.nodeType
        if (nt not in (Node.DOCUMENT_NODE, Node.DOCUMENT_FRAGMENT_NODE,
            Node.ATTRIBUTE_NODE) and not hasattr(node, "writexml")):
            raise NotSupportedError(
                f"Cannot serialize node of type {nt} ({node.nodeName}).")

        if not fo.omitXmlDeclaration:
            writer.write(fo.declaration())
            writer.write(fo.newl)

        if nt in (Node.DOCUMENT_NODE, Node.DOCUMENT_FRAGMENT_NODE):
            for ch in node.childNodes:
                ch.writexml(writer, "", fo.addindent, fo.newl)
        elif nt == Node.ATTRIBUTE_NODE:
            writer.write(escape(node.value or "", { '"': "&quot;" }))
        else:
            node.writexml(writer, "", fo.addindent, fo.newl)


###############################################################################
#
class TransformerFactory:
    """Makes Transformers. 'outputDefaults' (OutputKeys names to string
    values) are applied to every new Transformer.
    """
    def __init__(self, outputDefaults:Dict[str, str]=None):
        self.outputDefaults = dict(outputDefaults or {})

    @classmethod
    def newInstance(cls) -> 'TransformerFactory':
        return cls()

    def newTransformer(self, source:Any=None) -> Transformer:
        if source is not None:
            raise NotSupportedError(
                "XSLT stylesheets are not supported; use newTransformer() "
                "with no source for plain serialization.")
        t = Transformer()
        for k, v in self.outputDefaults.items():
            t.setOutputProperty(k, v)
        return t


def createTransformer(source:Any=None, factory:TransformerFactory=None) -> Transformer:
    """Creates a new serializing transformer.
    """
    if factory is None: factory = TransformerFactory.newInstance()
    return factory.newTransformer(source)
