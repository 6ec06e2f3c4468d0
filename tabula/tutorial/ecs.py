"""
An entity-component system, for illustration only.

Entities are bags of components; systems are objects with an `update`
method that visit every entity carrying the components they care about.
System declares `update` abstract and each concrete system overrides it,
so the world can drive them all polymorphically.

This shows the object model at work in a slightly larger arrangement.
It is not a real scheduler: there is no component removal, no batching of
queries, no ordering guarantee beyond insertion order, and no error handling.
"""
from ..model import construct, add_abstract, invoke
from ..space import Realm

def define(realm:Realm):
	World = realm.define_class("World")

	@World.constructor
	def new_world(cls):
		return construct(cls, {"entities": [], "systems": [], "clock": 0.0})

	@World.method
	def spawn(self, name, **components):
		entity = construct(Entity, {"name": name, "components": dict(components)})
		self.entities.append(entity)
		return entity

	@World.method
	def add_system(self, system):
		self.systems.append(system)
		return self

	@World.method
	def query(self, *kinds):
		return [e for e in self.entities if all(k in e.components for k in kinds)]

	@World.method
	def update(self, dt):
		self["clock"] += dt
		for system in self.systems:
			invoke(system, "update", self, dt)

	Entity = realm.define_class("Entity")

	@Entity.method
	def get(self, kind):
		return self.components[kind]

	Position = realm.define_class("Position")

	@Position.operator("tostring")
	def position_text(p):
		return "(%g, %g)" % (p.x, p.y)

	System = realm.define_class("System")
	add_abstract(System, "update")

	Movement = realm.define_class("Movement", System)

	@Movement.method("update")
	def move(self, world, dt):
		for e in world.query("position", "velocity"):
			pos, vel = e.get("position"), e.get("velocity")
			pos.x += vel["dx"] * dt
			pos.y += vel["dy"] * dt

	Gravity = realm.define_class("Gravity", System)

	@Gravity.method("update")
	def fall(self, world, dt):
		for e in world.query("velocity", "mass"):
			e.get("velocity")["dy"] -= self.g * dt

	return {
		"World": World, "Entity": Entity, "Position": Position,
		"System": System, "Movement": Movement, "Gravity": Gravity,
	}

def run(realm:Realm) -> list[str]:
	kinds = define(realm)
	Position = kinds["Position"]
	world = kinds["World"]()
	world.add_system(kinds["Gravity"](g=9.8)).add_system(kinds["Movement"]())
	world.spawn("rock", position=Position(x=0, y=10), velocity={"dx": 1, "dy": 0}, mass=5)
	world.spawn("balloon", position=Position(x=0, y=0), velocity={"dx": 0, "dy": 1})
	world.spawn("sign", position=Position(x=3, y=3))
	lines = []
	for tick in range(3):
		world.update(0.5)
		where = ", ".join("%s at %s" % (e.name, e.get("position")) for e in world.entities)
		lines.append("t=%.1f: %s" % (world.clock, where))
	return lines
