"""
An optional value: either `Some(value)` or the one-and-only `NOTHING`.

Python's own `None` will not do for absence, because `None` is a perfectly
good value to align. So `Some(None)` is present, and only `NOTHING` is absent.
"""
from typing import Iterable

class Option[A]:
	__slots__ = ()
	def is_some(self) -> bool: raise NotImplementedError(type(self))
	def is_none(self) -> bool: return not self.is_some()
	def fold(self, on_none, on_some): raise NotImplementedError(type(self))
	def map(self, f) -> "Option": return self.fold(lambda: NOTHING, lambda a: Some(f(a)))
	def get_or_else(self, default): return self.fold(lambda: default, lambda a: a)

class Some[A](Option[A]):
	__slots__ = ("value",)
	def __init__(self, value: A): self.value = value
	def is_some(self): return True
	def fold(self, on_none, on_some): return on_some(self.value)
	def __eq__(self, other): return isinstance(other, Some) and self.value == other.value
	def __hash__(self): return hash((Some, self.value))
	def __repr__(self): return "some(%r)" % (self.value,)

class _Nothing(Option):
	__slots__ = ()
	def is_some(self): return False
	def fold(self, on_none, on_some): return on_none()
	def __repr__(self): return "none"
	def __eq__(self, other): return isinstance(other, _Nothing)
	def __hash__(self): return hash(_Nothing)
	def __reduce__(self): return "NOTHING"

NOTHING = _Nothing()
none = NOTHING

def some(value) -> Option: return Some(value)

def cat_options(options: Iterable[Option]) -> list:
	""" The present values, in order. Absent ones drop out. """
	return [o.value for o in options if o.is_some()]
