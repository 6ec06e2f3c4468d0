"""
Inheritance.

Dog and Cat inherit from Animal. Animal's `describe` is inherited unchanged;
`speak` is overridden in each subclass. A method assigned directly to one
instance shadows the class method for that instance alone.
"""
from ..model import construct, extend, new
from ..space import Realm

def define(realm:Realm):
	Animal = realm.define_class("Animal")

	@Animal.constructor
	def new_animal(cls, name, sound="..."):
		return construct(cls, {"name": name, "sound": sound})

	@Animal.method
	def speak(self):
		return "%s makes a sound: %s" % (self.name, self.sound)

	@Animal.method
	def describe(self):
		return "%s says: %s" % (self.name, self.speak())

	Dog = realm.define_class("Dog", Animal)

	@Dog.constructor
	def new_dog(cls, name, breed):
		return extend(new(Animal, name, "woof"), cls, {"breed": breed})

	@Dog.method
	def speak(self):
		return "%s the %s barks: %s!" % (self.name, self.breed, self.sound.capitalize())

	@Dog.method
	def fetch(self):
		return "%s fetches the ball." % self.name

	Cat = realm.define_class("Cat", Animal)

	@Cat.method
	def speak(self):
		return "%s purrs." % self.name

	return {"Animal": Animal, "Dog": Dog, "Cat": Cat}

def run(realm:Realm) -> list[str]:
	kinds = define(realm)
	generic = kinds["Animal"]("Generic")
	rex = kinds["Dog"]("Rex", "beagle")
	fido = kinds["Dog"]("Fido", "poodle")
	tom = kinds["Cat"]("Tom", "meow")
	fido.speak = lambda self: "%s refuses to bark." % self.name
	lines = [it.describe() for it in (generic, rex, fido, tom)]
	lines.append(rex.fetch())
	return lines
