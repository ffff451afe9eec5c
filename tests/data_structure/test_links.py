import unittest
from memspace.data_structure.links import Link


class TestLink(unittest.TestCase):

    def test_node_initialization(self):
        """Test that a new link starts detached."""
        link = Link("Test")
        self.assertEqual(link.value, "Test")
        self.assertIsNone(link.prev)
        self.assertIsNone(link.next)
        self.assertIsNone(link.owner)
        self.assertTrue(link.is_detached)

    def test_insert_after(self):
        """Test that insert_after links nodes in the forward direction."""
        link1 = Link("A")
        link2 = Link("B")
        link1.insert_after(link2)
        self.assertIs(link1.next, link2)
        self.assertIs(link2.prev, link1)
        self.assertIsNone(link2.next)

    def test_insert_before(self):
        """Test that insert_before links nodes in the backward direction."""
        link1 = Link("A")
        link2 = Link("B")
        link1.insert_before(link2)
        self.assertIs(link1.prev, link2)
        self.assertIs(link2.next, link1)
        self.assertIsNone(link2.prev)

    def test_insert_between(self):
        """Test inserting into the middle of a chain."""
        link1 = Link("A")
        link3 = Link("C")
        link1.insert_after(link3)
        link2 = Link("B")
        link3.insert_before(link2)
        self.assertIs(link1.next, link2)
        self.assertIs(link2.next, link3)
        self.assertIs(link3.prev, link2)
        self.assertIs(link2.prev, link1)

    def test_unlink(self):
        """Test that a link is removed from the chain and detached."""
        owner = object()
        link1 = Link("A", owner)
        link2 = Link("B", owner)
        link3 = Link("C", owner)
        link1.insert_after(link2)
        link2.insert_after(link3)
        link2.unlink()
        self.assertIs(link1.next, link3)
        self.assertIs(link3.prev, link1)
        self.assertTrue(link2.is_detached)
        self.assertIs(link1.owner, owner)

    def test_str_and_repr(self):
        link = Link("Hello")
        self.assertEqual(str(link), "Hello")
        self.assertEqual(repr(link), "Link('Hello')")

    def test_value_setter(self):
        """Test that the payload can be swapped without moving the link."""
        link1 = Link("A")
        link2 = Link("B")
        link1.insert_after(link2)
        link2.value = "C"
        self.assertEqual(link2.value, "C")
        self.assertIs(link1.next, link2)
