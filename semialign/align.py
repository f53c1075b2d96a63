"""
The Align type class extends Semialign with a value `nil`, which acts as a unit with regard to `align`.

In addition to the Semialign laws, Align instances must satisfy:

1. Right identity: F.align(fa, F.nil()) == F.map(fa, this_)
2. Left identity:  F.align(F.nil(), fa) == F.map(fa, that)

There is no Align for non-empty sequences, since there is no such thing as an empty one.

The rest of this module is combinators that work for any Align instance,
plus a few which only make sense for sequences.

Adapted from http://hackage.haskell.org/package/these-0.8/docs/Data-Align.html
"""
from typing import Sequence
from .these import These
from .option import Option, some, NOTHING, cat_options
from .semigroup import Semigroup
from . import semialign

class Align(semialign.Semialign):
	def nil(self):
		""" The empty container, which is the unit for `align` """
		raise NotImplementedError(type(self))

class OptionAlign(semialign.OptionSemialign, Align):
	def nil(self) -> Option: return NOTHING

class SequenceAlign(semialign.SequenceSemialign, Align):
	def nil(self) -> list: return []

class RecordAlign(semialign.RecordSemialign, Align):
	def nil(self) -> dict: return {}

option = OptionAlign()
sequence = SequenceAlign()
record = RecordAlign()

###############################################################################

def salign(F: Align, S: Semigroup):
	"""
	Align two structures, using a semigroup to combine values where both sides are present.

	>>> from semialign.semigroup import semigroup_sum
	>>> salign(sequence, semigroup_sum)([1, 2, 3], [4, 5])
	[5, 7, 3]
	"""
	def resolve(t: These): return t.fold(semialign.identity, semialign.identity, S.concat)
	return lambda fx, fy: F.align_with(fx, fy, resolve)

def pad_zip(F: Align):
	"""
	Align two structures, using `none` to fill blanks.
	It is similar to `zip`, but it doesn't discard elements.

	>>> pad_zip(sequence)([1, 2, 3], [4, 5])
	[(some(1), some(4)), (some(2), some(5)), (some(3), none)]
	"""
	zip_with = pad_zip_with(F)
	return lambda fa, fb: zip_with(fa, fb, _pair)

def pad_zip_with(F: Align):
	"""
	Align two structures by applying a function to each pair of aligned elements,
	using `none` to fill blanks. Both arguments are present exactly where
	both sides had an element; otherwise exactly one of them is.
	"""
	def zip_with(fa, fb, f):
		return F.align_with(fa, fb, lambda t: t.fold(
			lambda a: f(some(a), NOTHING),
			lambda b: f(NOTHING, some(b)),
			lambda a, b: f(some(a), some(b)),
		))
	return zip_with

def _pair(a, b): return a, b

def lpad_zip_with(xs: Sequence, ys: Sequence, f) -> list:
	"""
	Apply `f` to pairs of elements at the same index in two sequences.
	The result is exactly as long as `ys`: if `xs` is short, it is padded with `none`,
	and if `xs` is long, the excess is dropped.

	>>> lpad_zip_with([1, 2, 3], "abcd", lambda ma, b: ma.fold(lambda: "*", str) + b)
	['1a', '2b', '3c', '*d']
	"""
	return cat_options(pad_zip_with(sequence)(xs, ys, lambda ma, mb: mb.map(lambda b: f(ma, b))))

def lpad_zip(xs: Sequence, ys: Sequence) -> list:
	"""
	Pairs of `(Option x, y)`, exactly as long as `ys`.

	>>> lpad_zip([1, 2], ["a", "b", "c"])
	[(some(1), 'a'), (some(2), 'b'), (none, 'c')]
	"""
	return lpad_zip_with(xs, ys, _pair)

def rpad_zip_with(xs: Sequence, ys: Sequence, f) -> list:
	""" Mirror-image of `lpad_zip_with`: the result is exactly as long as `xs`. """
	return lpad_zip_with(ys, xs, lambda mb, a: f(a, mb))

def rpad_zip(xs: Sequence, ys: Sequence) -> list:
	"""
	Pairs of `(x, Option y)`, exactly as long as `xs`.

	>>> rpad_zip([1, 2, 3], ["a", "b"])
	[(1, some('a')), (2, some('b')), (3, none)]
	"""
	return rpad_zip_with(xs, ys, _pair)
