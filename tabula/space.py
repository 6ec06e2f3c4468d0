"""
Realms are the registries where class definitions live by name.

A program that refers to its classes by name wants two things: the same
name must not be defined twice in one place, and a nested scope may shadow
an outer one. The booze-tools symbol table already does exactly that, so a
Realm is a thin wrapper around one NameSpace that remembers the order of
definitions and speaks in terms of classes.
"""
from typing import Optional, Union
from boozetools.support.symtab import NameSpace, NoSuchSymbol, SymbolAlreadyExists
from .ontology import ClassAlreadyDefinedError, UnknownClassError
from .model import ClassDefinition, define_class
from .diagnostics import Report

PARENT = Union[ClassDefinition, str, None]

class Realm:
	def __init__(self, name:str="root", *, report:Report=None, outer:"Realm"=None):
		self.name = name
		self.outer = outer
		self.report = report or Report(verbose=0)
		if outer is None:
			self._namespace = NameSpace(place=self)
		else:
			self._namespace = outer._namespace.new_child(self)
		self._order = []
		self._inner = []

	def __repr__(self): return "<Realm %s>" % self.name

	def child(self, name:str) -> "Realm":
		inner = Realm(name, report=self.report, outer=self)
		self._inner.append(inner)
		return inner

	def realms(self) -> list["Realm"]:
		""" This realm, then every realm nested within it, depth first. """
		found = [self]
		for inner in self._inner: found.extend(inner.realms())
		return found

	def define_class(self, name:str, parent:PARENT=None) -> ClassDefinition:
		""" Define a class and install it here. The parent may be given by name. """
		if name in self._namespace.local:
			raise ClassAlreadyDefinedError(name)
		if isinstance(parent, str):
			parent = self.find(parent)
		return self.install(define_class(name, parent))

	def install(self, cls:ClassDefinition) -> ClassDefinition:
		assert isinstance(cls, ClassDefinition), cls
		try: self._namespace[cls.name] = cls
		except SymbolAlreadyExists: raise ClassAlreadyDefinedError(cls.name) from None
		self._order.append(cls)
		if cls.parent is None:
			self.report.info("[%s] defined %s" % (self.name, cls.name))
		else:
			self.report.info("[%s] defined %s, a kind of %s" % (self.name, cls.name, cls.parent.name))
		return cls

	def find(self, name:str) -> ClassDefinition:
		""" Look through this realm and then the enclosing ones. """
		try: return self._namespace[name]
		except NoSuchSymbol: raise UnknownClassError(name) from None

	__getitem__ = find

	def __contains__(self, name:str) -> bool:
		try: self.find(name)
		except UnknownClassError: return False
		else: return True

	def classes(self) -> list[ClassDefinition]:
		""" The classes defined directly in this realm, in order of definition. """
		return list(self._order)

	def get(self, name:str) -> Optional[ClassDefinition]:
		try: return self.find(name)
		except UnknownClassError: return None
