"""
Operator overloading the way table-based languages do it: a class may
register one handler per operator symbol, and dispatch finds the handler
along the same class-then-parent chain that method lookup walks.

Binary operators assume both operands come from the same family of classes:
an instance on the right must be an instance of whichever class supplied
the handler, so siblings under a common base combine through a handler the
base defines, while strangers are refused. Plain Python values such as
numbers pass straight through to the handler, which is how a vector gets
scaled.

At the bottom of this module, Python's own operator syntax is wired onto
Instance, so that `a + b` means `apply_operator("add", a, b)` and so on.
"""
from .ontology import OperatorNotImplementedError, UnsupportedOperandError
from .model import ClassDefinition, Instance, class_of, METHOD

BINARY = frozenset(["add", "sub", "mul", "div", "mod", "pow", "idiv", "concat", "eq", "lt", "le"])
UNARY = frozenset(["unm", "len", "tostring"])
VARIADIC = frozenset(["call"])
SYMBOLS = BINARY | UNARY | VARIADIC

def add_operator(cls:ClassDefinition, op:str, fn:METHOD):
	if op not in SYMBOLS:
		raise ValueError("Unknown operator symbol %r" % (op,))
	if not callable(fn):
		raise TypeError("Handler for %r on %s must be callable, not %r" % (op, cls.name, fn))
	cls.check_open("operator", op)
	cls._operators[op] = fn

def find_handler(value, op:str):
	""" The handler `op` would dispatch to for this value, or None. """
	if isinstance(value, Instance):
		return class_of(value).find_operator(op)

def _type_name(value) -> str:
	return class_of(value).name if isinstance(value, Instance) else type(value).__name__

def apply_operator(op:str, lhs, *operands, **kwargs):
	"""
	Dispatch on the left operand's class. When only the right operand of
	a binary operator is an instance (as in `2 * v`) dispatch on that one
	instead, but still hand the operands to the handler in their given order.
	"""
	if op not in SYMBOLS:
		raise ValueError("Unknown operator symbol %r" % (op,))
	if op in BINARY:
		if len(operands) != 1 or kwargs:
			raise TypeError("Operator %r takes exactly one right operand" % op)
		rhs = operands[0]
		if isinstance(lhs, Instance): subject = lhs
		elif isinstance(rhs, Instance): subject = rhs
		else: raise UnsupportedOperandError(op, _type_name(lhs), _type_name(rhs))
	else:
		if op in UNARY and (operands or kwargs):
			raise TypeError("Operator %r takes no further operands" % op)
		if not isinstance(lhs, Instance):
			raise OperatorNotImplementedError(_type_name(lhs), op)
		subject = lhs
	cls = class_of(subject)
	owner = cls.locate_operator(op)
	if owner is None:
		raise OperatorNotImplementedError(cls.name, op)
	if op in BINARY and not all(map(_suits(owner), (lhs, rhs))):
		raise UnsupportedOperandError(op, _type_name(lhs), _type_name(rhs))
	return owner.operators[op](lhs, *operands, **kwargs)

def _suits(owner:ClassDefinition):
	def check(operand): return not isinstance(operand, Instance) or class_of(operand).is_subclass_of(owner)
	return check

###############################################################################

PYTHON_BINARY = {
	"__add__": "add",
	"__sub__": "sub",
	"__mul__": "mul",
	"__truediv__": "div",
	"__mod__": "mod",
	"__pow__": "pow",
	"__floordiv__": "idiv",
}

def _forward(op:str):
	def hook(self, other): return apply_operator(op, self, other)
	return hook

def _reflected(op:str):
	def hook(self, other): return apply_operator(op, other, self)
	return hook

def _compare(op:str):
	def hook(self, other): return bool(apply_operator(op, self, other))
	return hook

def _compare_reflected(op:str):
	# a > b is b < a, and a >= b is b <= a.
	def hook(self, other): return bool(apply_operator(op, other, self))
	return hook

def _equals(self, other):
	# Without a handler, or across unrelated classes, equality is identity.
	if not isinstance(other, Instance): return NotImplemented
	if self is other: return True
	owner = class_of(self).locate_operator("eq")
	if owner is None or not class_of(other).is_subclass_of(owner): return False
	return bool(apply_operator("eq", self, other))

def _negate(self): return apply_operator("unm", self)

def _hash(self):
	# Value equality on a mutable table rules out a stable hash.
	if find_handler(self, "eq") is not None:
		raise TypeError("unhashable instance of %s: it compares by value" % class_of(self).name)
	return object.__hash__(self)

def _length(self): return apply_operator("len", self)

def _call(self, *args, **kwargs): return apply_operator("call", self, *args, **kwargs)

def _text(self):
	if find_handler(self, "tostring") is None: return repr(self)
	return str(apply_operator("tostring", self))

def attach_operator_hooks(python_class:type):
	for dunder, op in PYTHON_BINARY.items():
		setattr(python_class, dunder, _forward(op))
		setattr(python_class, "__r" + dunder[2:], _reflected(op))
	python_class.__lt__ = _compare("lt")
	python_class.__le__ = _compare("le")
	python_class.__gt__ = _compare_reflected("lt")
	python_class.__ge__ = _compare_reflected("le")
	python_class.__eq__ = _equals
	python_class.__hash__ = _hash
	python_class.__neg__ = _negate
	python_class.__len__ = _length
	python_class.__call__ = _call
	python_class.__str__ = _text

attach_operator_hooks(Instance)
