"""
The union of two values: exactly one of "this", "that", or "both".

	This(a)     -- only the left-hand side was present
	That(b)     -- only the right-hand side was present
	Both(a, b)  -- both sides were present

Everything in the align machinery reports its findings in these terms,
and everything that consumes those findings goes through `fold`, which
insists on a handler for each of the three cases.
"""
from .option import Option, some, NOTHING

class These[A, B]:
	""" Abstract. Exactly one of the three subclasses below is ever instantiated. """
	__slots__ = ()

	def fold(self, on_this, on_that, on_both):
		raise NotImplementedError(type(self))

	def _key(self) -> tuple: raise NotImplementedError(type(self))
	def __eq__(self, other):
		return type(self) is type(other) and self._key() == other._key()
	def __ne__(self, other): return not self == other
	def __hash__(self): return hash((type(self).__name__, self._key()))
	def __repr__(self):
		return "%s(%s)" % (type(self).__name__, ", ".join(map(repr, self._key())))

	def bimap(self, f, g) -> "These":
		return self.fold(lambda a: This(f(a)), lambda b: That(g(b)), lambda a, b: Both(f(a), g(b)))

	def map(self, g) -> "These":
		""" Map the right-hand side only. """
		return self.bimap(_identity, g)

	def map_left(self, f) -> "These":
		return self.bimap(f, _identity)

	def swap(self) -> "These":
		return self.fold(That, This, lambda a, b: Both(b, a))

	def left(self) -> Option:
		return self.fold(some, lambda b: NOTHING, lambda a, b: some(a))

	def right(self) -> Option:
		return self.fold(lambda a: NOTHING, some, lambda a, b: some(b))

	def is_this(self): return False
	def is_that(self): return False
	def is_both(self): return False

class This[A, B](These[A, B]):
	__slots__ = ("value",)
	def __init__(self, value: A): self.value = value
	def _key(self): return (self.value,)
	def fold(self, on_this, on_that, on_both): return on_this(self.value)
	def is_this(self): return True

class That[A, B](These[A, B]):
	__slots__ = ("value",)
	def __init__(self, value: B): self.value = value
	def _key(self): return (self.value,)
	def fold(self, on_this, on_that, on_both): return on_that(self.value)
	def is_that(self): return True

class Both[A, B](These[A, B]):
	__slots__ = ("this", "that")
	def __init__(self, this: A, that: B):
		self.this = this
		self.that = that
	def _key(self): return (self.this, self.that)
	def fold(self, on_this, on_that, on_both): return on_both(self.this, self.that)
	def is_both(self): return True

def _identity(x): return x

# The lower-case constructors read better when passed around as functions.
def this_(a) -> These: return This(a)
def that(b) -> These: return That(b)
def both(a, b) -> These: return Both(a, b)

###############################################################################

def assoc(t: These) -> These:
	"""
	Re-associate to the left:
		These[A, These[B, C]] -> These[These[A, B], C]
	This is the shape-shuffle in the associativity law of Semialign.
	"""
	return t.fold(
		lambda a: This(This(a)),
		lambda bc: bc.fold(
			lambda b: This(That(b)),
			That,
			lambda b, c: Both(That(b), c),
		),
		lambda a, bc: bc.fold(
			lambda b: This(Both(a, b)),
			lambda c: Both(This(a), c),
			lambda b, c: Both(Both(a, b), c),
		),
	)

def unassoc(t: These) -> These:
	""" The inverse of `assoc`: These[These[A, B], C] -> These[A, These[B, C]] """
	return t.fold(
		lambda ab: ab.fold(
			This,
			lambda b: That(This(b)),
			lambda a, b: Both(a, This(b)),
		),
		lambda c: That(That(c)),
		lambda ab, c: ab.fold(
			lambda a: Both(a, That(c)),
			lambda b: That(Both(b, c)),
			lambda a, b: Both(a, Both(b, c)),
		),
	)
