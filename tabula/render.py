"""
Turning the object model into text.

`to_display_string` is the explicit, named counterpart of the `tostring`
operator: it honors a class's handler where there is one, and otherwise
spells out the public fields. `describe` lays out a class hierarchy for
humans, which the command line uses when auditing.
"""
from boozetools.support.foundation import Visitor
from .model import ClassDefinition, Instance, BoundMethod, class_of, fields_of, is_abstract
from .operators import find_handler, apply_operator

class Render(Visitor):
	""" Return a display string for a value. Nested strings get quoted; a top-level string plays itself. """
	def __init__(self):
		self._busy = set()

	def render(self, value, nested:bool=False) -> str:
		if hasattr(self, "visit_" + type(value).__name__):
			return self.visit(value, nested)
		return repr(value)

	def visit_Instance(self, it:Instance, nested:bool):
		if find_handler(it, "tostring") is not None:
			return str(apply_operator("tostring", it))
		name = class_of(it).name
		if id(it) in self._busy:
			return "%s{...}" % name
		self._busy.add(id(it))
		try:
			public = [(k, v) for k, v in fields_of(it).items() if not str(k).startswith("_")]
			return "%s{%s}" % (name, ", ".join("%s=%s" % (k, self.render(v, True)) for k, v in public))
		finally:
			self._busy.discard(id(it))

	def visit_ClassDefinition(self, cls:ClassDefinition, nested:bool):
		return "<class %s>" % cls.name

	def visit_BoundMethod(self, bm:BoundMethod, nested:bool):
		return repr(bm)

	def visit_str(self, s:str, nested:bool):
		return repr(s) if nested else s

	def visit_int(self, n:int, nested:bool): return str(n)
	def visit_float(self, n:float, nested:bool): return str(n)
	def visit_bool(self, b:bool, nested:bool): return str(b)
	def visit_NoneType(self, _, nested:bool): return "None"

	def visit_list(self, items:list, nested:bool):
		return "[%s]" % ", ".join(self.render(x, True) for x in items)

	def visit_tuple(self, items:tuple, nested:bool):
		return "(%s)" % ", ".join(self.render(x, True) for x in items)

	def visit_dict(self, d:dict, nested:bool):
		return "{%s}" % ", ".join("%s: %s" % (self.render(k, True), self.render(v, True)) for k, v in d.items())

def to_display_string(value) -> str:
	return Render().render(value)

###############################################################################

class Describe(Visitor):
	"""
	Lay out a class: its lineage on the first line, then every method it
	can resolve (with the class that supplies it), then its operators.
	"""
	def visit_ClassDefinition(self, cls:ClassDefinition) -> list[str]:
		lines = [" <- ".join(c.name for c in cls.lineage())]
		for name in cls.method_names():
			fn = cls.find_method(name)
			source = next(c for c in cls.lineage() if c.defines(name))
			flavor = "abstract" if is_abstract(fn) else "method"
			lines.append("    %-16s %-8s (%s)" % (name, flavor, source.name))
		ops = sorted(set(op for c in cls.lineage() for op in c.operators))
		if ops:
			lines.append("    operators: " + ", ".join(ops))
		if cls.find_constructor() is not None:
			lines.append("    has a designated constructor")
		return lines

def describe(cls:ClassDefinition) -> str:
	return "\n".join(Describe().visit(cls))
