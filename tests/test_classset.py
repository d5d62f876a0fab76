#!/usr/bin/env python3
#
import unittest

from dombuilder import parseXmlString
from domexceptions import InvalidNodeTypeError
from classset import (ClassSet, classes, setClasses, classSet, setClassSet,
    hasClass, addClass, removeClass, toggleClass)

tdoc = ('<div><p id="zork" class="big blue">Text</p><p id="plain"/>'
    '<p id="messy" class="  a&#9;b&#10;  a  "/></div>')


###############################################################################
#
class TestClassSetType(unittest.TestCase):
    def test_order_and_dups(self):
        cs = ClassSet(["b", "a", "b", "c"])
        self.assertEqual(list(cs), [ "b", "a", "c" ])
        self.assertEqual(len(cs), 3)
        self.assertEqual(str(cs), "b a c")

    def test_from_string(self):
        self.assertEqual(list(ClassSet(" x  y\tx ")), [ "x", "y" ])
        self.assertEqual(len(ClassSet()), 0)
        self.assertEqual(str(ClassSet()), "")

    def test_set_operations(self):
        cs = ClassSet("a b")
        cs.add("c")
        cs.discard("a")
        cs.discard("nonesuch")
        self.assertEqual(list(cs), [ "b", "c" ])
        with self.assertRaises(KeyError):
            cs.remove("nonesuch")
        self.assertTrue(cs.toggle("d"))
        self.assertFalse(cs.toggle("d"))
        self.assertEqual(cs, { "b", "c" })


###############################################################################
#
class TestElementClasses(unittest.TestCase):
    def setUp(self):
        self.doc = parseXmlString(tdoc)
        self.zork, self.plain, self.messy = self.doc.getElementsByTagName("p")

    def test_read(self):
        self.assertEqual(classes(self.zork), "big blue")
        self.assertEqual(list(classSet(self.zork)), [ "big", "blue" ])
        self.assertEqual(classes(self.plain), "")
        self.assertEqual(len(classSet(self.plain)), 0)
        self.assertEqual(list(classSet(self.messy)), [ "a", "b" ])
        self.assertTrue(hasClass(self.zork, "blue"))
        self.assertFalse(hasClass(self.zork, "bl"))

    def test_round_trip(self):
        setClassSet(self.plain, ClassSet(["x", "y", "z"]))
        self.assertEqual(self.plain.getAttribute("class"), "x y z")
        self.assertEqual(list(classSet(self.plain)), [ "x", "y", "z" ])

        setClassSet(self.messy, classSet(self.messy))
        self.assertEqual(self.messy.getAttribute("class"), "a b")

        setClasses(self.plain, "q")
        self.assertEqual(classes(self.plain), "q")

    def test_empty_set(self):
        setClassSet(self.zork, [])
        self.assertTrue(self.zork.hasAttribute("class"))
        self.assertEqual(self.zork.getAttribute("class"), "")

    def test_addClass(self):
        self.assertFalse(addClass(self.zork, "big"))
        self.assertEqual(self.zork.getAttribute("class"), "big blue")
        self.assertTrue(addClass(self.zork, "red"))
        self.assertEqual(self.zork.getAttribute("class"), "big blue red")
        self.assertFalse(addClass(self.zork, "red"))

        self.assertTrue(addClass(self.plain, "solo"))
        self.assertEqual(self.plain.getAttribute("class"), "solo")

    def test_removeClass(self):
        self.assertFalse(removeClass(self.zork, "nonesuch"))
        self.assertEqual(self.zork.getAttribute("class"), "big blue")
        self.assertTrue(removeClass(self.zork, "big"))
        self.assertEqual(self.zork.getAttribute("class"), "blue")
        self.assertFalse(removeClass(self.zork, "big"))

        # Nothing to remove, so no attribute gets created.
        self.assertFalse(removeClass(self.plain, "big"))
        self.assertFalse(self.plain.hasAttribute("class"))

    def test_unchanged_attribute_keeps_spacing(self):
        self.assertFalse(addClass(self.messy, "a"))
        self.assertEqual(self.messy.getAttribute("class"), "  a\tb\n  a  ")

    def test_only_ascii_whitespace_separates(self):
        p = parseXmlString('<p class="a&#160;b c"/>').documentElement
        self.assertEqual(list(classSet(p)), [ "a\u00a0b", "c" ])
        self.assertEqual(list(ClassSet("x\x1cy z\u3000w\fv")),
            [ "x\x1cy", "z\u3000w", "v" ])
        self.assertTrue(addClass(p, "d"))
        self.assertEqual(p.getAttribute("class"), "a\u00a0b c d")
        self.assertTrue(removeClass(p, "c"))
        self.assertEqual(p.getAttribute("class"), "a\u00a0b d")

    def test_toggleClass(self):
        self.assertFalse(toggleClass(self.zork, "big"))
        self.assertEqual(classes(self.zork), "blue")
        self.assertTrue(toggleClass(self.zork, "big"))
        self.assertEqual(classes(self.zork), "blue big")

    def test_non_elements(self):
        text = self.zork.firstChild
        with self.assertRaises(InvalidNodeTypeError):
            classSet(text)
        with self.assertRaises(InvalidNodeTypeError):
            addClass(self.doc, "x")
        with self.assertRaises(InvalidNodeTypeError):
            classes(None)


if __name__ == '__main__':
    unittest.main()
