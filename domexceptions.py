#!/usr/bin/env python3
#
# https://developer.mozilla.org/en-US/docs/Web/API/DOMException
# https://webidl.spec.whatwg.org/#dfn-error-names-table
# https://docs.oracle.com/javase/8/docs/api/javax/xml/transform/TransformerException.html
#
# Errors from the parser (expat) and from I/O are not wrapped; only
# conditions detected here get these classes.
#
class DOMException(Exception):                  pass
DE = DOMException

class NotSupportedError(DE): pass     # operation not supported. (9)
class InvalidNodeTypeError(DE): pass  # bad node (or anc) for op. (24)

# Serializer configuration and failures (TrAX names).
#
class TransformerError(DE): pass
class TransformerConfigurationError(TransformerError): pass
