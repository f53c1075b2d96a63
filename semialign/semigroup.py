"""
A semigroup is nothing more than an associative binary operation.
`salign` uses one to settle what to do when both sides are present.
"""
import operator

class Semigroup:
	def __init__(self, concat, name: str = "semigroup"):
		self._concat = concat
		self._name = name
	def concat(self, x, y): return self._concat(x, y)
	def __repr__(self): return "<%s>" % self._name

semigroup_sum = Semigroup(operator.add, "sum")
semigroup_product = Semigroup(operator.mul, "product")
semigroup_min = Semigroup(min, "min")
semigroup_max = Semigroup(max, "max")
semigroup_first = Semigroup(lambda x, y: x, "first")
semigroup_last = Semigroup(lambda x, y: y, "last")

# Strings, lists and tuples all concatenate with `+`.
# The distinction from `semigroup_sum` is only one of intent.
semigroup_concat = Semigroup(operator.add, "concat")
