"""
Encapsulation.

The counter keeps its tally in a private field, `_count`. Attribute access
from outside (`c._count`) is refused; the only way in is through the public
methods, which reach the field through item access on their receiver.
Each mutator returns the receiver, so calls chain:

	Counter(5).increment().increment().get_count()  # => 7
"""
from ..model import construct
from ..space import Realm

def define(realm:Realm):
	Counter = realm.define_class("Counter")

	@Counter.constructor
	def new_counter(cls, count=0):
		return construct(cls, {"_count": count})

	@Counter.method
	def increment(self, by=1):
		self["_count"] += by
		return self

	@Counter.method
	def decrement(self, by=1):
		self["_count"] -= by
		return self

	@Counter.method
	def reset(self):
		self["_count"] = 0
		return self

	@Counter.method
	def get_count(self):
		return self["_count"]

	@Counter.operator("tostring")
	def counter_text(self):
		return "Counter(%d)" % self["_count"]

	return {"Counter": Counter}

def run(realm:Realm) -> list[str]:
	Counter = define(realm)["Counter"]
	lines = []
	c = Counter(5)
	lines.append("start at %s" % c)
	lines.append("after two increments: %d" % c.increment().increment().get_count())
	lines.append("after decrement by 3: %d" % c.decrement(3).get_count())
	other = Counter()
	lines.append("a second counter is independent: %d" % other.increment().get_count())
	try:
		c._count
	except AttributeError as ex:
		lines.append("peeking inside: %s" % ex)
	return lines
