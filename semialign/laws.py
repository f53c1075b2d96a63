"""
Checking the laws of Semialign and Align against sample data.

The laws are equations between containers, so checking one is a matter of
computing both sides and comparing them. Each disagreement becomes a
`Violation` in the report. This cannot prove an instance lawful, but it
catches the usual ways of getting alignment wrong: dropping the excess,
swapping sides, inventing keys, and the like.
"""
from itertools import product
from typing import NamedTuple, Sequence
from .these import both, this_, that, assoc
from .option import some, none
from .nonempty import NonEmpty
from .semialign import Semialign
from .diagnostics import Report, Violation
from . import semialign, align

class Specimen(NamedTuple):
	instance: Semialign
	samples: Sequence

# Every family has an empty-ish sample and samples of uneven size.
SPECIMENS = {
	"option": Specimen(align.option, (none, some(1), some(2))),
	"sequence": Specimen(align.sequence, ([], [1], [1, 2, 3], [4, 5])),
	"non_empty": Specimen(semialign.non_empty, (NonEmpty(1), NonEmpty(1, [2, 3]), NonEmpty(7, [8]))),
	"record": Specimen(align.record, ({}, {"a": 1}, {"a": 1, "b": 2}, {"b": 3, "c": 4})),
}

def _f(a): return a * 10
def _g(b): return -b
def _describe(t): return t.fold(lambda a: "L%s" % a, lambda b: "R%s" % b, lambda a, b: "B%s%s" % (a, b))

class LawChecker:
	def __init__(self, family:str, F:Semialign, report:Report):
		self.family = family
		self.F = F
		self.report = report

	def _compare(self, law:str, expected, actual):
		if expected != actual:
			self.report.issue(Violation(self.family, law, expected, actual))

	def self_alignment(self, fa):
		F = self.F
		self._compare("self-alignment", F.map(fa, lambda a: both(a, a)), F.align(fa, fa))

	def naturality(self, fa, fb):
		F = self.F
		expected = F.map(F.align(fa, fb), lambda t: t.bimap(_f, _g))
		self._compare("naturality", expected, F.align(F.map(fa, _f), F.map(fb, _g)))

	def align_with(self, fa, fb):
		F = self.F
		self._compare("align-with", F.map(F.align(fa, fb), _describe), F.align_with(fa, fb, _describe))

	def associativity(self, fa, fb, fc):
		F = self.F
		expected = F.align(F.align(fa, fb), fc)
		self._compare("associativity", expected, F.map(F.align(fa, F.align(fb, fc)), assoc))

	def identity(self, fa):
		F = self.F
		self._compare("right-identity", F.map(fa, this_), F.align(fa, F.nil()))
		self._compare("left-identity", F.map(fa, that), F.align(F.nil(), fa))

	def check(self, samples:Sequence):
		report = self.report
		report.info("Checking", self.family, "over", len(samples), "samples.")
		for fa in samples:
			self.self_alignment(fa)
		for fa, fb in product(samples, repeat=2):
			self.naturality(fa, fb)
			self.align_with(fa, fb)
		for fa, fb, fc in product(samples, repeat=3):
			self.associativity(fa, fb, fc)
		if isinstance(self.F, align.Align):
			for fa in samples:
				self.identity(fa)
		else:
			report.info("   ", self.family, "has no nil, so the identity laws do not apply.", level=2)

def check_laws(family:str, F:Semialign, samples:Sequence, report:Report) -> bool:
	""" Return True if no new violations turned up. """
	before = len(report.issues)
	LawChecker(family, F, report).check(samples)
	return len(report.issues) == before

def check_family(family:str, report:Report) -> bool:
	specimen = SPECIMENS[family]
	return check_laws(family, specimen.instance, specimen.samples, report)
