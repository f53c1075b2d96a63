"""
The Semialign type class: functors supporting a zip which takes the *union*
of non-uniform shapes rather than the intersection. Where plain `zip` would
quietly throw away the excess, `align` reports it as `This` or `That`.

Every instance must satisfy these laws:

1. F.align(fa, fa) == F.map(fa, lambda a: both(a, a))
2. F.align(F.map(fa, f), F.map(fb, g)) == F.map(F.align(fa, fb), lambda t: t.bimap(f, g))
3. F.align_with(fa, fb, f) == F.map(F.align(fa, fb), f)
4. F.map(F.align(fa, F.align(fb, fc)), assoc) == F.align(F.align(fa, fb), fc)

Nothing enforces them at run-time. The `laws` module checks them, and so do the tests.

Instances are plain objects. Whoever wants to align something picks the
instance for that container family and passes it along explicitly.

Adapted from http://hackage.haskell.org/package/these-0.8/docs/Data-Align.html
"""
from typing import Mapping, Sequence
from .these import This, That, Both
from .option import Option, Some, NOTHING
from .nonempty import NonEmpty
from .functor import Functor, OptionFunctor, SequenceFunctor, NonEmptyFunctor, RecordFunctor

def identity(x): return x

class Semialign:
	"""
	Abstract. Concrete instances supply `align_with` and the functor for their container family.
	All operations are total: there is no combination of inputs that is an error.
	"""
	functor: Functor

	def __init__(self, functor: Functor):
		self.functor = functor

	def map(self, fa, f):
		return self.functor.map(fa, f)

	def align(self, fa, fb):
		return self.align_with(fa, fb, identity)

	def align_with(self, fa, fb, f):
		raise NotImplementedError(type(self))

###############################################################################

class OptionSemialign(Semialign):
	def __init__(self): super().__init__(OptionFunctor())

	def align_with(self, fa: Option, fb: Option, f) -> Option:
		"""
		If neither side is present, there is nothing to report, and `f` is not called.

		>>> from semialign.option import some, none
		>>> option.align_with(some(1), some("a"), lambda t: t.fold(str, identity, lambda a, b: str(a) + b))
		some('1a')
		>>> option.align_with(none, none, repr)
		none
		"""
		if fa.is_some():
			if fb.is_some(): return Some(f(Both(fa.value, fb.value)))
			else: return Some(f(This(fa.value)))
		elif fb.is_some():
			return Some(f(That(fb.value)))
		else:
			return NOTHING

def _align_sequences(fa: Sequence, fb: Sequence, f) -> list:
	a_len, b_len = len(fa), len(fb)
	common = min(a_len, b_len)
	fc = [f(Both(fa[i], fb[i])) for i in range(common)]
	if a_len > b_len: fc.extend(f(This(fa[i])) for i in range(common, a_len))
	else: fc.extend(f(That(fb[i])) for i in range(common, b_len))
	return fc

class SequenceSemialign(Semialign):
	"""
	Pairs up elements by index. The result is as long as the longer input,
	and the longer input's surplus comes through in its original order.
	"""
	def __init__(self): super().__init__(SequenceFunctor())

	def align_with(self, fa: Sequence, fb: Sequence, f) -> list:
		return _align_sequences(fa, fb, f)

class NonEmptySemialign(Semialign):
	""" The heads are always both present. The tails align like any other sequence. """
	def __init__(self): super().__init__(NonEmptyFunctor())

	def align_with(self, fa: NonEmpty, fb: NonEmpty, f) -> NonEmpty:
		return NonEmpty(f(Both(fa.head, fb.head)), _align_sequences(fa.tail, fb.tail, f))

class RecordSemialign(Semialign):
	"""
	The union of two string-keyed mappings. Every key of either side appears exactly once.
	Left-hand keys come first, then keys only the right-hand side has,
	but that is an accident of `dict` and nobody should depend on it.
	"""
	def __init__(self): super().__init__(RecordFunctor())

	def align_with(self, fa: Mapping[str, object], fb: Mapping[str, object], f) -> dict:
		fc = {}
		for key, a in fa.items():
			fc[key] = f(Both(a, fb[key])) if key in fb else f(This(a))
		for key, b in fb.items():
			if key not in fa: fc[key] = f(That(b))
		return fc

###############################################################################

option = OptionSemialign()
sequence = SequenceSemialign()
non_empty = NonEmptySemialign()
record = RecordSemialign()
