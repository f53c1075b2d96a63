"""
A sequence with at least one element, by construction: a head, and a tail that may be empty.
"""
from typing import Sequence

class NonEmpty[A]:
	__slots__ = ("head", "tail")

	def __init__(self, head: A, tail: Sequence[A] = ()):
		assert not isinstance(tail, (str, bytes)), tail
		self.head = head
		self.tail = tuple(tail)

	@staticmethod
	def of(items: Sequence) -> "NonEmpty":
		""" Precondition: `items` has something in it. """
		assert len(items), "A non-empty sequence needs at least one element."
		return NonEmpty(items[0], tuple(items[1:]))

	def __len__(self): return 1 + len(self.tail)
	def __iter__(self):
		yield self.head
		yield from self.tail
	def __getitem__(self, index: int):
		return self.to_list()[index]
	def __eq__(self, other):
		return isinstance(other, NonEmpty) and self.head == other.head and self.tail == other.tail
	def __hash__(self): return hash((NonEmpty, self.head, self.tail))
	def __repr__(self): return "NonEmpty(%r, %r)" % (self.head, list(self.tail))

	def map(self, f) -> "NonEmpty":
		return NonEmpty(f(self.head), [f(x) for x in self.tail])

	def to_list(self) -> list: return [self.head, *self.tail]
