"""
Polymorphism and abstract methods.

Shape declares `area` and `perimeter` as abstract: invoking either on a
plain Shape raises NotImplementedError. Each concrete shape overrides them.
Shape's own `describe` calls `self.area()`, and because the receiver is
always the original instance, that call lands on the subclass's override.

Construction chains: a Square is built by the Rectangle constructor, which
is built on the Shape constructor, each stage extending the fields of the
last and re-tagging the instance with its own class.
"""
import math
from ..model import construct, extend, new, add_abstract, send_each
from ..space import Realm

def define(realm:Realm):
	Shape = realm.define_class("Shape")
	add_abstract(Shape, "area", "perimeter")

	@Shape.constructor
	def new_shape(cls, name):
		return construct(cls, {"name": name})

	@Shape.method
	def describe(self):
		return "%s: area %.2f, perimeter %.2f" % (self.name, self.area(), self.perimeter())

	@Shape.operator("lt")
	def smaller(a, b):
		return a.area() < b.area()

	Circle = realm.define_class("Circle", Shape)

	@Circle.constructor
	def new_circle(cls, radius):
		return extend(new(Shape, "circle"), cls, {"radius": radius})

	@Circle.method
	def area(self): return math.pi * self.radius ** 2

	@Circle.method
	def perimeter(self): return 2 * math.pi * self.radius

	Rectangle = realm.define_class("Rectangle", Shape)

	@Rectangle.constructor
	def new_rectangle(cls, width, height):
		return extend(new(Shape, "rectangle"), cls, {"width": width, "height": height})

	@Rectangle.method
	def area(self): return self.width * self.height

	@Rectangle.method
	def perimeter(self): return 2 * (self.width + self.height)

	Square = realm.define_class("Square", Rectangle)

	@Square.constructor
	def new_square(cls, side):
		return extend(new(Rectangle, side, side), cls, {"name": "square"})

	return {"Shape": Shape, "Circle": Circle, "Rectangle": Rectangle, "Square": Square}

def run(realm:Realm) -> list[str]:
	kinds = define(realm)
	shapes = [kinds["Circle"](1), kinds["Rectangle"](2, 3), kinds["Square"](2)]
	lines = send_each(shapes, "describe")
	lines.append("smallest first: " + ", ".join(s.name for s in sorted(shapes)))
	blob = kinds["Shape"]("blob")
	try:
		blob.area()
	except NotImplementedError as ex:
		lines.append("a bare Shape has no area: NotImplementedError(%s)" % ex)
	return lines
