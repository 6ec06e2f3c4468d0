import unittest

from tabula.model import define_class, add_method, add_abstract, set_constructor, construct
from tabula.operators import add_operator
from tabula.render import to_display_string, describe

class DisplayStringTests(unittest.TestCase):

	def test_plain_values(self):
		for value, text in [
			("hello", "hello"),
			(42, "42"),
			(2.5, "2.5"),
			(True, "True"),
			(None, "None"),
			([1, "a"], "[1, 'a']"),
			((1,), "(1)"),
			({"k": [2]}, "{'k': [2]}"),
		]:
			with self.subTest(value=value):
				self.assertEqual(text, to_display_string(value))

	def test_instance_shows_public_fields(self):
		Point = define_class("Point")
		p = construct(Point, {"x": 1, "name": "origin", "_secret": 99})
		self.assertEqual("Point{x=1, name='origin'}", to_display_string(p))

	def test_tostring_handler_wins(self):
		Money = define_class("Money")
		add_operator(Money, "tostring", lambda m: "$%.2f" % m["amount"])
		self.assertEqual("$3.50", to_display_string(construct(Money, {"amount": 3.5})))
		self.assertEqual("[$1.00]", to_display_string([construct(Money, {"amount": 1})]))

	def test_cycles_are_cut(self):
		Node = define_class("Node")
		n = construct(Node, {"id": 1})
		n["next"] = n
		self.assertEqual("Node{id=1, next=Node{...}}", to_display_string(n))

	def test_classes_and_methods(self):
		Thing = define_class("Thing")
		add_method(Thing, "poke", lambda self: None)
		t = construct(Thing)
		self.assertEqual("<class Thing>", to_display_string(Thing))
		self.assertTrue(to_display_string(t.poke).startswith("<bound method"))
		self.assertEqual("<object>", to_display_string(_Opaque()))

class _Opaque:
	def __repr__(self): return "<object>"

class DescribeTests(unittest.TestCase):

	def test_describe(self):
		Shape = define_class("Shape")
		add_abstract(Shape, "area")
		add_method(Shape, "describe", lambda self: "a shape")
		add_operator(Shape, "lt", lambda a, b: False)
		Square = define_class("Square", Shape)
		add_method(Square, "area", lambda self: 4)
		set_constructor(Square, lambda cls: construct(cls))
		lines = describe(Square).splitlines()
		self.assertEqual("Square <- Shape", lines[0])
		self.assertIn("area", lines[1])
		self.assertIn("(Square)", lines[1])
		self.assertIn("describe", lines[2])
		self.assertIn("(Shape)", lines[2])
		self.assertEqual("    operators: lt", lines[3])
		self.assertEqual("    has a designated constructor", lines[4])
		self.assertIn("abstract", describe(Shape).splitlines()[1])

if __name__ == '__main__':
	unittest.main()
