#!/usr/bin/env python3
#
import unittest
from xml.dom import Node

from dombuilder import parseXmlString
from domaxes import (nextSiblings, previousSiblings, nextElements,
    previousElements, followingSiblings, precedingSiblings)

tdoc = ("<body><h1>Title</h1>between<!-- c --><p id=\"a\"/>"
    "<?pi x?><p id=\"b\">-30-</p>tail</body>")


###############################################################################
#
class TestSiblingAxes(unittest.TestCase):
    def setUp(self):
        self.doc = parseXmlString(tdoc)
        self.body = self.doc.documentElement
        self.h1 = self.body.firstChild
        self.last = self.body.lastChild

    def test_nextSiblings(self):
        sibs = list(nextSiblings(self.h1))
        self.assertEqual(len(sibs), 6)
        self.assertIs(sibs[-1], self.last)
        self.assertEqual(list(followingSiblings(self.h1)), sibs)

    def test_previousSiblings(self):
        sibs = list(previousSiblings(self.last))
        self.assertEqual(len(sibs), 6)
        self.assertIs(sibs[-1], self.h1)
        self.assertEqual(list(precedingSiblings(self.last)), sibs)

    def test_filtered(self):
        texts = list(nextSiblings(self.h1,
            test=lambda n: n.nodeType == Node.TEXT_NODE))
        self.assertEqual([ t.data for t in texts ], [ "between", "tail" ])

    def test_nextElements(self):
        els = list(nextElements(self.h1))
        self.assertEqual([ e.getAttribute("id") for e in els ], [ "a", "b" ])
        for e in els:
            self.assertEqual(e.nodeType, Node.ELEMENT_NODE)

    def test_previousElements(self):
        els = list(previousElements(self.last))
        self.assertEqual([ e.nodeName for e in els ], [ "p", "p", "h1" ])
        self.assertEqual(els[0].getAttribute("id"), "b")

    def test_ends_of_chain(self):
        self.assertEqual(list(previousElements(self.h1)), [])
        self.assertEqual(list(nextElements(self.last)), [])
        self.assertEqual(list(nextElements(self.doc.documentElement)), [])

    def test_not_restartable(self):
        gen = nextElements(self.h1)
        self.assertEqual(len(list(gen)), 2)
        self.assertEqual(list(gen), [])

    def test_lazy(self):
        gen = nextElements(self.h1)
        first = next(gen)
        self.assertEqual(first.getAttribute("id"), "a")
        # Changes to the tree after the generator starts are seen.
        self.body.removeChild(self.body.childNodes[5])
        self.assertEqual(list(gen), [])


if __name__ == '__main__':
    unittest.main()
