"""
An audit for class hierarchies.

Abstract methods are not enforced when an instance is constructed; a stub
only complains once somebody invokes it. That is fine for a base class
nobody means to instantiate, but a leaf class (one nothing else in the realm
inherits from) is presumably meant to be instantiated, so any abstract stub
still visible from a leaf is probably an oversight. This pass finds those
ahead of time and reports them.

Auditing a realm covers the realms nested within it too, so a base class
whose subclasses live in an inner realm still counts as having children.
"""
from boozetools.support.foundation import Visitor
from .model import ClassDefinition
from .space import Realm
from .diagnostics import Report

class Auditor(Visitor):
	def __init__(self, report:Report):
		self._report = report

	def audit(self, realm:Realm):
		self.visit(realm)

	def visit_Realm(self, realm:Realm):
		classes = [cls for each in realm.realms() for cls in each.classes()]
		parents = set(id(cls.parent) for cls in classes if cls.parent is not None)
		for cls in classes:
			self.visit(cls, id(cls) in parents)

	def visit_ClassDefinition(self, cls:ClassDefinition, has_children:bool):
		missing = cls.abstract_methods()
		if not missing:
			self._report.info("%s: complete" % cls.name)
		elif has_children:
			self._report.info("%s: abstract base, leaves %s to subclasses" % (cls.name, ", ".join(missing)))
		else:
			self._report.unimplemented_abstract(cls.name, missing)

def audit_realm(realm:Realm, report:Report=None) -> Report:
	report = report or realm.report
	Auditor(report).audit(realm)
	return report
