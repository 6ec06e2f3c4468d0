"""
Operator overloading.

Vector registers handlers for the arithmetic operators, negation, equality,
ordering (by length) and display. Each handler builds a new vector and leaves
its operands alone. Multiplying by a plain number scales; multiplying two
vectors gives their dot product. Python's operator syntax dispatches to the
handlers, so `Vector(1, 2) + Vector(3, 4)` reads the way one would hope.
"""
import math
from numbers import Number
from ..model import construct, new, class_of
from ..space import Realm

def define(realm:Realm):
	Vector = realm.define_class("Vector")

	@Vector.constructor
	def new_vector(cls, x=0, y=0):
		return construct(cls, {"x": x, "y": y})

	def _make(like, x, y):
		return new(class_of(like), x, y)

	@Vector.method
	def length(self):
		return math.hypot(self.x, self.y)

	@Vector.method
	def normalized(self):
		size = self.length()
		return _make(self, self.x / size, self.y / size)

	@Vector.operator("add")
	def vector_add(a, b):
		return _make(a, a.x + b.x, a.y + b.y)

	@Vector.operator("sub")
	def vector_sub(a, b):
		return _make(a, a.x - b.x, a.y - b.y)

	@Vector.operator("mul")
	def vector_mul(a, b):
		if isinstance(a, Number): a, b = b, a
		if isinstance(b, Number): return _make(a, a.x * b, a.y * b)
		return a.x * b.x + a.y * b.y

	@Vector.operator("div")
	def vector_div(a, k):
		return _make(a, a.x / k, a.y / k)

	@Vector.operator("unm")
	def vector_neg(a):
		return _make(a, -a.x, -a.y)

	@Vector.operator("eq")
	def vector_eq(a, b):
		return a.x == b.x and a.y == b.y

	@Vector.operator("lt")
	def vector_lt(a, b):
		return a.length() < b.length()

	@Vector.operator("le")
	def vector_le(a, b):
		return a.length() <= b.length()

	@Vector.operator("tostring")
	def vector_text(a):
		return "(%g, %g)" % (a.x, a.y)

	return {"Vector": Vector}

def run(realm:Realm) -> list[str]:
	Vector = define(realm)["Vector"]
	a, b = Vector(1, 2), Vector(3, 4)
	return [
		"%s + %s = %s" % (a, b, a + b),
		"%s - %s = %s" % (b, a, b - a),
		"%s * 2 = %s" % (a, a * 2),
		"2 * %s = %s" % (b, 2 * b),
		"%s . %s = %g" % (a, b, a * b),
		"-%s = %s" % (a, -a),
		"|%s| = %g" % (b, b.length()),
		"%s == %s ? %s" % (a + b, Vector(4, 6), a + b == Vector(4, 6)),
		"%s < %s ? %s" % (a, b, a < b),
		"operands untouched: %s and %s" % (a, b),
	]
