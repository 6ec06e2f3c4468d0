import gc
import unittest

from tabula.model import (
	ClassDefinition, Instance, BoundMethod,
	define_class, add_method, add_abstract, abstract_method, set_constructor,
	construct, extend, new, resolve, invoke, send_each,
	class_of, fields_of, is_instance_of, is_abstract,
)
from tabula.ontology import (
	ConstructionError, MethodNotFoundError, PrivateFieldError,
	SealedClassError, OrphanedInstanceError,
)

def _counter_class():
	Counter = define_class("Counter")
	def increment(self):
		self["count"] += 1
		return self
	def get_count(self):
		return self["count"]
	add_method(Counter, "increment", increment)
	add_method(Counter, "get_count", get_count)
	return Counter

def _animal_family():
	Animal = define_class("Animal")
	add_method(Animal, "speak", lambda self: "...")
	add_method(Animal, "greet", lambda self: "%s says %s" % (self["name"], invoke(self, "speak")))
	Dog = define_class("Dog", Animal)
	add_method(Dog, "speak", lambda self: "woof")
	return Animal, Dog

class DefinitionTests(unittest.TestCase):
	""" Building class definitions and attaching behavior to them. """

	def test_define_class(self):
		base = define_class("Base")
		child = define_class("Child", base)
		self.assertIsInstance(base, ClassDefinition)
		self.assertIsNone(base.parent)
		self.assertIs(child.parent, base)
		self.assertEqual([child, base], child.lineage())
		self.assertEqual({}, dict(child.methods))

	def test_define_class_does_not_touch_parent_tables(self):
		base = define_class("Base")
		add_method(base, "m", lambda self: 1)
		define_class("Child", base)
		self.assertEqual(["m"], list(base.methods))

	def test_bad_definitions(self):
		with self.assertRaises(ValueError): define_class("")
		with self.assertRaises(ValueError): define_class(None)
		with self.assertRaises(TypeError): define_class("Orphan", parent="Base")
		with self.assertRaises(TypeError): add_method(define_class("X"), "m", 42)

	def test_last_write_wins(self):
		cls = define_class("Greeter")
		add_method(cls, "hello", lambda self: "first")
		add_method(cls, "hello", lambda self: "second")
		self.assertEqual("second", invoke(construct(cls), "hello"))

	def test_decorator_forms(self):
		cls = define_class("Decorated")
		@cls.method
		def bare(self): return "bare"
		@cls.method("renamed")
		def whatever(self): return "renamed"
		@cls.constructor
		def make(klass, n): return construct(klass, {"n": n})
		it = cls(3)
		self.assertEqual("bare", it.bare())
		self.assertEqual("renamed", it.renamed())
		self.assertEqual(3, it.n)
		self.assertFalse(cls.defines("whatever"))

class SealingTests(unittest.TestCase):
	""" A class's tables stop changing once the class sees use. """

	def test_construction_seals(self):
		cls = define_class("Sealed")
		self.assertFalse(cls.sealed)
		construct(cls)
		self.assertTrue(cls.sealed)
		with self.assertRaises(SealedClassError):
			add_method(cls, "late", lambda self: None)
		with self.assertRaises(SealedClassError):
			set_constructor(cls, lambda klass: construct(klass))

	def test_naming_a_parent_seals_it(self):
		base = define_class("Base")
		define_class("Child", base)
		self.assertTrue(base.sealed)
		with self.assertRaises(SealedClassError):
			add_abstract(base, "late")

	def test_explicit_seal(self):
		cls = define_class("Explicit")
		cls.seal()
		with self.assertRaises(SealedClassError):
			add_method(cls, "m", lambda self: None)

class ConstructionTests(unittest.TestCase):

	def test_construct_copies_shallowly(self):
		cls = define_class("Bag")
		nested = [1, 2]
		seed = {"items": nested, "size": 2}
		it = construct(cls, seed)
		it["size"] = 3
		it["items"].append(3)
		self.assertEqual(2, seed["size"])
		self.assertEqual([1, 2, 3], nested)
		self.assertIs(cls, class_of(it))

	def test_construct_needs_a_class(self):
		for bogon in (None, "Bag", {}, 42):
			with self.subTest(bogon=bogon):
				with self.assertRaises(ConstructionError):
					construct(bogon)
		self.assertTrue(issubclass(ConstructionError, TypeError))

	def test_chained_construction_preserves_parent_fields(self):
		Shape = define_class("Shape")
		set_constructor(Shape, lambda cls, name: construct(cls, {"name": name, "sides": 0}))
		Square = define_class("Square", Shape)
		set_constructor(Square, lambda cls, side: extend(new(Shape, "square"), cls, {"side": side, "sides": 4}))
		sq = Square(2)
		self.assertIs(Square, class_of(sq))
		self.assertEqual({"name": "square", "sides": 4, "side": 2}, dict(fields_of(sq)))

	def test_extend_refuses_strangers(self):
		a, b = define_class("A"), define_class("B")
		it = construct(a)
		with self.assertRaises(ConstructionError):
			extend(it, b)
		with self.assertRaises(ConstructionError):
			extend(it, None)
		self.assertIs(a, class_of(it))

	def test_extend_cannot_go_back_up(self):
		Animal, Dog = _animal_family()
		rex = construct(Dog, {"name": "Rex"})
		with self.assertRaises(ConstructionError):
			extend(rex, Animal)

	def test_inherited_constructor_builds_the_subclass(self):
		Animal = define_class("Animal")
		set_constructor(Animal, lambda cls, name: construct(cls, {"name": name}))
		Cat = define_class("Cat", Animal)
		tom = Cat("Tom")
		self.assertIs(Cat, class_of(tom))
		self.assertEqual("Tom", tom.name)

	def test_new_without_constructor(self):
		cls = define_class("Plain")
		it = new(cls, a=1, b=2)
		self.assertEqual({"a": 1, "b": 2}, dict(fields_of(it)))
		with self.assertRaises(ConstructionError):
			new(cls, 1)

	def test_constructor_must_deliver(self):
		cls = define_class("Liar")
		set_constructor(cls, lambda klass: "not an instance")
		with self.assertRaises(ConstructionError):
			cls()

	def test_orphaned_instance(self):
		cls = define_class("Ephemeral")
		it = construct(cls, {"x": 1})
		del cls
		gc.collect()
		with self.assertRaises(OrphanedInstanceError):
			class_of(it)
		self.assertEqual("<orphaned instance>", repr(it))
		self.assertEqual(1, it["x"])

class ResolutionTests(unittest.TestCase):
	""" Instance, then class, then the parent chain. """

	def test_inherited_method_sees_subclass_fields(self):
		Base = define_class("Base")
		add_method(Base, "shout", lambda self: self["word"].upper())
		Child = define_class("Child", Base)
		it = construct(Child, {"word": "hey"})
		self.assertIs(Base.methods["shout"], resolve(it, "shout"))
		self.assertEqual("HEY", invoke(it, "shout"))

	def test_override_beats_parent(self):
		Animal, Dog = _animal_family()
		rex = construct(Dog, {"name": "Rex"})
		self.assertIs(Dog.methods["speak"], resolve(rex, "speak"))
		self.assertEqual("Rex says woof", invoke(rex, "greet"))
		self.assertEqual("Generic says ...", invoke(construct(Animal, {"name": "Generic"}), "greet"))

	def test_instance_local_method_shadows_for_that_instance_only(self):
		Animal, Dog = _animal_family()
		rex = construct(Dog, {"name": "Rex"})
		fido = construct(Dog, {"name": "Fido"})
		fido["speak"] = lambda self: "%s sulks" % self["name"]
		self.assertEqual("Fido says Fido sulks", invoke(fido, "greet"))
		self.assertEqual("Rex says woof", invoke(rex, "greet"))
		self.assertIs(Dog.methods["speak"], resolve(rex, "speak"))

	def test_data_fields_do_not_shadow_methods(self):
		cls = define_class("Shadowy")
		add_method(cls, "size", lambda self: 10)
		it = construct(cls, {"size": 3})
		self.assertEqual(10, invoke(it, "size"))
		self.assertEqual(3, it.size)

	def test_not_found(self):
		Animal, Dog = _animal_family()
		rex = construct(Dog, {"name": "Rex"})
		self.assertIsNone(resolve(rex, "fly"))
		with self.assertRaises(MethodNotFoundError) as cm:
			invoke(rex, "fly")
		self.assertEqual("fly", cm.exception.method_name)
		self.assertEqual("Dog", cm.exception.class_name)
		with self.assertRaises(AttributeError):
			rex.fly()

	def test_counter_scenario(self):
		Counter = _counter_class()
		c = construct(Counter, {"count": 5})
		invoke(invoke(c, "increment"), "increment")
		self.assertEqual(7, invoke(c, "get_count"))
		self.assertEqual(9, c.increment().increment().get_count())

	def test_kinship(self):
		Animal, Dog = _animal_family()
		rex = construct(Dog, {"name": "Rex"})
		self.assertTrue(is_instance_of(rex, Dog))
		self.assertTrue(is_instance_of(rex, Animal))
		self.assertFalse(is_instance_of(construct(Animal), Dog))
		self.assertFalse(is_instance_of({"name": "Rex"}, Animal))
		self.assertTrue(Dog.is_subclass_of(Animal))
		self.assertFalse(Animal.is_subclass_of(Dog))

	def test_send_each(self):
		Animal, Dog = _animal_family()
		pack = [construct(Animal), construct(Dog)]
		self.assertEqual(["...", "woof"], send_each(pack, "speak"))

class AttributeTests(unittest.TestCase):
	""" The public face of an instance. """

	def test_fields_and_bound_methods(self):
		Counter = _counter_class()
		c = construct(Counter, {"count": 1})
		bound = c.increment
		self.assertIsInstance(bound, BoundMethod)
		self.assertIs(c, bound.receiver)
		bound()
		self.assertEqual(2, c.count)
		c.label = "tally"
		self.assertEqual("tally", c["label"])
		del c.label
		self.assertNotIn("label", c)
		with self.assertRaises(AttributeError):
			del c.label

	def test_private_fields(self):
		cls = define_class("Vault")
		add_method(cls, "peek", lambda self: self["_secret"])
		vault = construct(cls, {"_secret": 42})
		self.assertEqual(42, vault.peek())
		with self.assertRaises(PrivateFieldError):
			vault._secret
		with self.assertRaises(PrivateFieldError):
			vault._secret = 0
		with self.assertRaises(PrivateFieldError):
			del vault._secret
		self.assertEqual(42, vault["_secret"])

	def test_instances_in_fields_are_data(self):
		cls = define_class("Node")
		leaf = construct(cls)
		root = construct(cls, {"child": leaf, "kind": cls})
		self.assertIs(leaf, root.child)
		self.assertIs(cls, root.kind)

	def test_bound_methods_in_fields_keep_their_receiver(self):
		cls = define_class("Greeter")
		add_method(cls, "greet", lambda self, *more: (self["name"],) + more)
		a = construct(cls, {"name": "a"})
		b = construct(cls, {"name": "b"})
		a.callback = b.greet
		self.assertIsNone(resolve(a, "callback"))
		self.assertEqual(("b",), a.callback())
		self.assertEqual(("b", 1), a["callback"](1))

	def test_not_iterable_but_truthy(self):
		it = construct(define_class("Empty"))
		self.assertTrue(it)
		with self.assertRaises(TypeError):
			iter(it)
		self.assertIsInstance(it, Instance)

class AbstractTests(unittest.TestCase):

	def setUp(self):
		self.Shape = define_class("Shape")
		add_abstract(self.Shape, "area", "perimeter")
		self.Square = define_class("Square", self.Shape)
		add_method(self.Square, "area", lambda self: self["side"] ** 2)

	def test_stub_raises_with_name(self):
		blob = construct(self.Shape)
		with self.assertRaises(NotImplementedError) as cm:
			invoke(blob, "area")
		self.assertEqual(("area",), cm.exception.args)

	def test_override_does_not_raise(self):
		sq = construct(self.Square, {"side": 3})
		self.assertEqual(9, invoke(sq, "area"))
		with self.assertRaises(NotImplementedError):
			invoke(sq, "perimeter")

	def test_introspection(self):
		self.assertTrue(is_abstract(abstract_method("x")))
		self.assertFalse(is_abstract(lambda self: None))
		self.assertEqual(["area", "perimeter"], self.Shape.abstract_methods())
		self.assertEqual(["perimeter"], self.Square.abstract_methods())
		self.assertFalse(self.Square.is_concrete())
		self.assertEqual(["area", "perimeter"], self.Square.method_names())

if __name__ == '__main__':
	unittest.main()
