"""
Mapping over a container, one object per container family.

A Semialign instance holds one of these rather than re-implementing `map`.
Inputs are never mutated; every `map` builds a fresh container.
"""
from typing import Mapping, Sequence
from .option import Option
from .nonempty import NonEmpty

class Functor:
	def map(self, fa, f): raise NotImplementedError(type(self))

class OptionFunctor(Functor):
	def map(self, fa: Option, f) -> Option: return fa.map(f)

class SequenceFunctor(Functor):
	""" Takes any sequence. Always gives back a list. """
	def map(self, fa: Sequence, f) -> list: return [f(a) for a in fa]

class NonEmptyFunctor(Functor):
	def map(self, fa: NonEmpty, f) -> NonEmpty: return fa.map(f)

class RecordFunctor(Functor):
	""" Maps the values of a string-keyed mapping; the keys stay put. """
	def map(self, fa: Mapping[str, object], f) -> dict:
		return {k: f(v) for k, v in fa.items()}
