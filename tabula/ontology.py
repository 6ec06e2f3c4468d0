"""
These most-fundamental bits are separate from the rest to avoid
various circular-import scenarios: the sentinel for "nothing here"
and the family of exceptions the object model raises.

Each exception also derives from the nearest built-in that a Python
programmer would reach for, so that (for instance) a failed method
lookup can be caught as an AttributeError.
"""

MISSING = object()

class ObjectModelError(Exception):
	""" Root of everything the object model complains about. """

class ConstructionError(ObjectModelError, TypeError):
	""" Tried to build (or re-tag) an instance without a suitable class. """

class MethodNotFoundError(ObjectModelError, AttributeError):
	def __init__(self, class_name:str, method_name:str):
		super().__init__("%s has no method %r" % (class_name, method_name))
		self.class_name = class_name
		self.method_name = method_name

class PrivateFieldError(ObjectModelError, AttributeError):
	def __init__(self, field_name:str):
		super().__init__("Access to private field %r is blocked" % field_name)
		self.field_name = field_name

class OperatorNotImplementedError(ObjectModelError, TypeError):
	def __init__(self, class_name:str, op:str):
		super().__init__("%s does not implement operator %r" % (class_name, op))
		self.class_name = class_name
		self.op = op

class UnsupportedOperandError(ObjectModelError, TypeError):
	def __init__(self, op:str, lhs_name:str, rhs_name:str):
		super().__init__("Operator %r cannot combine %s with %s" % (op, lhs_name, rhs_name))
		self.op = op

class SealedClassError(ObjectModelError):
	""" The method and operator tables of a class stop changing once it sees use. """

class OrphanedInstanceError(ObjectModelError, ReferenceError):
	""" The class this instance was tagged with no longer exists. """

class ClassAlreadyDefinedError(ObjectModelError, KeyError): pass
class UnknownClassError(ObjectModelError, KeyError): pass
