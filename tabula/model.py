"""
The object model proper.

A class definition is a table of methods with (at most) one parent table
behind it. An instance is a table of fields tagged with the class that
supplies its behavior. Looking up a method walks from the instance's own
fields, to its class, to that class's parent, and so on up the chain.
Whatever the method is found on, it runs with the original instance as
its receiver, so a parent's method sees the subclass instance's fields.

A class seals itself the first time it is used: when something is
constructed from it, or when a child class names it as parent. After
that its tables do not change, so every instance of a class sees the
same behavior for as long as the class exists.
"""
import weakref
from types import MappingProxyType
from typing import Any, Callable, Mapping, Optional, Iterable
from .ontology import (
	MISSING, ConstructionError, MethodNotFoundError, PrivateFieldError,
	SealedClassError, OrphanedInstanceError,
)

METHOD = Callable[..., Any]
FIELDS = Mapping[str, Any]

class ClassDefinition:
	""" A named table of methods, optionally chained to exactly one parent. """
	_methods: dict[str, METHOD]
	_operators: dict[str, METHOD]
	_constructor: Optional[METHOD]

	def __init__(self, name:str, parent:Optional["ClassDefinition"]=None):
		if not isinstance(name, str) or not name:
			raise ValueError("A class needs a name, not %r" % (name,))
		if parent is not None and not isinstance(parent, ClassDefinition):
			raise TypeError("The parent of %s must be a class definition, not %r" % (name, parent))
		self.name = name
		self.parent = parent
		self._methods, self._operators = {}, {}
		self._constructor = None
		self._sealed = False
		if parent is not None: parent.seal()

	def __repr__(self): return "<class %s>" % self.name

	def __call__(self, *args, **kwargs) -> "Instance":
		return new(self, *args, **kwargs)

	@property
	def sealed(self) -> bool: return self._sealed

	def seal(self):
		self._sealed = True

	def check_open(self, kind:str, key:str):
		if self._sealed:
			raise SealedClassError("%s is sealed; cannot attach %s %r" % (self.name, kind, key))

	@property
	def methods(self) -> Mapping[str, METHOD]:
		""" Just the methods defined directly on this class. """
		return MappingProxyType(self._methods)

	@property
	def operators(self) -> Mapping[str, METHOD]:
		return MappingProxyType(self._operators)

	def defines(self, name:str) -> bool: return name in self._methods

	def lineage(self) -> list["ClassDefinition"]:
		""" This class, then its parent, and so on up to the root. """
		chain, cls = [], self
		while cls is not None:
			chain.append(cls)
			cls = cls.parent
		return chain

	def is_subclass_of(self, other:"ClassDefinition") -> bool:
		return any(cls is other for cls in self.lineage())

	def find_method(self, name:str) -> Optional[METHOD]:
		for cls in self.lineage():
			fn = cls._methods.get(name)
			if fn is not None: return fn

	def find_operator(self, op:str) -> Optional[METHOD]:
		owner = self.locate_operator(op)
		if owner is not None: return owner._operators[op]

	def locate_operator(self, op:str) -> Optional["ClassDefinition"]:
		""" The nearest class on the lineage with a handler for `op`. """
		for cls in self.lineage():
			if op in cls._operators: return cls

	def find_constructor(self) -> Optional[METHOD]:
		for cls in self.lineage():
			if cls._constructor is not None: return cls._constructor

	def method_names(self) -> list[str]:
		""" Every method name an instance of this class can resolve, nearest definition first. """
		names = {}
		for cls in self.lineage():
			for name in cls._methods: names.setdefault(name, cls)
		return list(names)

	def abstract_methods(self) -> list[str]:
		""" Names whose nearest definition is still an abstract stub. """
		return [name for name in self.method_names() if is_abstract(self.find_method(name))]

	def is_concrete(self) -> bool: return not self.abstract_methods()

	# Decorator forms of the module-level attachment functions:

	def method(self, name:str=None):
		""" Usable bare (`@cls.method`) or with an explicit name (`@cls.method("area")`). """
		if callable(name):
			add_method(self, name.__name__, name)
			return name
		def decorate(fn):
			add_method(self, name or fn.__name__, fn)
			return fn
		return decorate

	def operator(self, op:str):
		def decorate(fn):
			operators.add_operator(self, op, fn)
			return fn
		return decorate

	def constructor(self, fn):
		set_constructor(self, fn)
		return fn


class Instance:
	"""
	A table of fields tagged with the class that supplies its behavior.

	Item access (`it["x"]`) reads and writes the field table directly,
	and is how methods get at private state. Attribute access (`it.x`)
	is the public face: it yields field values and bound methods, and
	refuses any name that begins with an underscore.

	Python's operator syntax is wired on by the `operators` module.
	"""
	__slots__ = ("_fields", "_tag", "__weakref__")
	_fields: dict
	_tag: "weakref.ref[ClassDefinition]"

	def __init__(self, cls:ClassDefinition, fields:dict):
		object.__setattr__(self, "_fields", fields)
		object.__setattr__(self, "_tag", weakref.ref(cls))

	def __getitem__(self, key): return self._fields[key]
	def __setitem__(self, key, value): self._fields[key] = value
	def __delitem__(self, key): del self._fields[key]
	def __contains__(self, key): return key in self._fields

	# Subscripting is for fields, not for iteration.
	__iter__ = None

	def __getattr__(self, name:str):
		if name.startswith("_"):
			raise PrivateFieldError(name)
		value = self._fields.get(name, MISSING)
		if value is MISSING:
			value = class_of(self).find_method(name)
			if value is None:
				raise MethodNotFoundError(class_of(self).name, name)
		elif not _is_method(value):
			return value
		return BoundMethod(self, value)

	def __setattr__(self, name:str, value):
		if name.startswith("_"):
			raise PrivateFieldError(name)
		self._fields[name] = value

	def __delattr__(self, name:str):
		if name.startswith("_"):
			raise PrivateFieldError(name)
		try: del self._fields[name]
		except KeyError: raise AttributeError(name) from None

	def __bool__(self): return True

	def __repr__(self):
		cls = self._tag()
		return "<orphaned instance>" if cls is None else "<%s instance>" % cls.name


class BoundMethod:
	""" A method paired with the receiver it was looked up on. """
	__slots__ = ("receiver", "function")

	def __init__(self, receiver:Instance, function:METHOD):
		self.receiver = receiver
		self.function = function

	def __call__(self, *args, **kwargs):
		return self.function(self.receiver, *args, **kwargs)

	def __repr__(self):
		name = getattr(self.function, "__name__", "?")
		return "<bound method %s of %r>" % (name, self.receiver)

###############################################################################

def _is_method(value) -> bool:
	# Instances, classes and bound methods are callable too, but as field values they are data.
	return callable(value) and not isinstance(value, (Instance, ClassDefinition, BoundMethod, type))

def define_class(name:str, parent:ClassDefinition=None) -> ClassDefinition:
	return ClassDefinition(name, parent)

def add_method(cls:ClassDefinition, name:str, fn:METHOD):
	""" Last write wins within a class; a child's entry shadows its parent's. """
	if not callable(fn):
		raise TypeError("Method %r of %s must be callable, not %r" % (name, cls.name, fn))
	cls.check_open("method", name)
	cls._methods[name] = fn

def abstract_method(name:str) -> METHOD:
	def stub(receiver, *args, **kwargs):
		raise NotImplementedError(name)
	stub.__name__ = stub.__qualname__ = name
	stub.__isabstractmethod__ = True
	return stub

def is_abstract(fn) -> bool:
	return bool(getattr(fn, "__isabstractmethod__", False))

def add_abstract(cls:ClassDefinition, *names:str):
	for name in names:
		add_method(cls, name, abstract_method(name))

def set_constructor(cls:ClassDefinition, fn:METHOD):
	"""
	The designated constructor is called as fn(cls, *args, **kwargs)
	and must return an instance of cls. Subclasses inherit it.
	"""
	if not callable(fn):
		raise TypeError("Constructor of %s must be callable, not %r" % (cls.name, fn))
	cls.check_open("constructor", "new")
	cls._constructor = fn

###############################################################################

def construct(cls:ClassDefinition, initial_fields:FIELDS=None) -> Instance:
	"""
	Seed a fresh field table from the initial fields and tag it with the class.
	The copy is shallow: nested mutable values end up shared with the caller.
	"""
	if not isinstance(cls, ClassDefinition):
		raise ConstructionError("Cannot construct an instance of %r" % (cls,))
	cls.seal()
	return Instance(cls, dict(initial_fields or ()))

def extend(instance:Instance, subclass:ClassDefinition, fields:FIELDS=None) -> Instance:
	"""
	The second half of chained construction: take an instance a parent
	constructor produced, add or overwrite fields, and re-tag it.
	"""
	current = class_of(instance)
	if not isinstance(subclass, ClassDefinition) or not subclass.is_subclass_of(current):
		raise ConstructionError("Cannot re-tag a %s instance as %r" % (current.name, subclass))
	subclass.seal()
	instance._fields.update(fields or ())
	object.__setattr__(instance, "_tag", weakref.ref(subclass))
	return instance

def new(cls:ClassDefinition, *args, **kwargs) -> Instance:
	if not isinstance(cls, ClassDefinition):
		raise ConstructionError("Cannot construct an instance of %r" % (cls,))
	constructor = cls.find_constructor()
	if constructor is None:
		if args:
			raise ConstructionError("%s has no constructor to take positional arguments" % cls.name)
		return construct(cls, kwargs)
	instance = constructor(cls, *args, **kwargs)
	if not is_instance_of(instance, cls):
		raise ConstructionError("The constructor for %s produced %r instead" % (cls.name, instance))
	return instance

###############################################################################

def class_of(instance:Instance) -> ClassDefinition:
	if not isinstance(instance, Instance):
		raise TypeError("%r is not an instance of any defined class" % (instance,))
	cls = instance._tag()
	if cls is None:
		raise OrphanedInstanceError("This instance has outlived its class")
	return cls

def fields_of(instance:Instance) -> Mapping[str, Any]:
	""" A read-only view, private fields included. """
	class_of(instance)
	return MappingProxyType(instance._fields)

def is_instance_of(value, cls:ClassDefinition) -> bool:
	return isinstance(value, Instance) and class_of(value).is_subclass_of(cls)

def resolve(instance:Instance, name:str) -> Optional[METHOD]:
	"""
	Find the function that `name` means for this instance, or None.
	A method stored in the instance's own fields comes first;
	plain data fields never shadow a method.
	"""
	local = instance._fields.get(name, MISSING) if isinstance(instance, Instance) else MISSING
	if local is not MISSING and _is_method(local): return local
	return class_of(instance).find_method(name)

def invoke(instance:Instance, name:str, *args, **kwargs):
	fn = resolve(instance, name)
	if fn is None:
		raise MethodNotFoundError(class_of(instance).name, name)
	return fn(instance, *args, **kwargs)

def send_each(instances:Iterable[Instance], name:str, *args, **kwargs) -> list:
	""" Polymorphic broadcast: invoke the same method name on each instance in turn. """
	return [invoke(it, name, *args, **kwargs) for it in instances]

# Installs Python's operator syntax on Instance.
from . import operators  # NOQA
