"""
Tests for the law-checker, the report it fills in, and the command line on top.
"""
import io
import unittest
from collections import OrderedDict
from contextlib import redirect_stderr, redirect_stdout
from typing import NamedTuple

from semialign import laws, diagnostics, cmdline
from semialign.these import this_, that, both, This, Both
from semialign.option import some, none
from semialign.nonempty import NonEmpty
from semialign.render import render
from semialign.align import SequenceAlign

class Truncating(SequenceAlign):
	""" What people write when they forget the point: a plain zip. """
	def align_with(self, fa, fb, f):
		return [f(Both(a, b)) for a, b in zip(fa, fb)]

class Lopsided(SequenceAlign):
	""" Reports everything from the right as if it came from the left. """
	def align_with(self, fa, fb, f):
		return super().align_with(fa, fb, lambda t: f(t.fold(This, This, Both)))

class Pair(NamedTuple):
	left: object
	right: object

class LawCheckerTests(unittest.TestCase):

	def test_built_in_instances_are_lawful(self):
		for family in laws.SPECIMENS:
			with self.subTest(family=family):
				report = diagnostics.Report()
				self.assertTrue(laws.check_family(family, report))
				report.assert_no_issues("The %s instance should be lawful." % family)

	def test_truncation_is_caught(self):
		report = diagnostics.Report(max_issues=1000)
		ok = laws.check_laws("truncating", Truncating(), [[], [1], [1, 2]], report)
		self.assertFalse(ok)
		self.assertTrue(report.sick())
		self.assertIn("right-identity", {v.law for v in report.issues})
		self.assertIn("left-identity", {v.law for v in report.issues})

	def test_wrong_side_is_caught(self):
		report = diagnostics.Report(max_issues=1000)
		laws.check_laws("lopsided", Lopsided(), [[], [1], [1, 2]], report)
		broken = {v.law for v in report.issues}
		self.assertIn("left-identity", broken)
		self.assertNotIn("right-identity", broken)
		self.assertTrue(all(v.family == "lopsided" for v in report.issues))

	def test_too_many_issues(self):
		report = diagnostics.Report(max_issues=2)
		with self.assertRaises(diagnostics.TooManyIssues):
			laws.check_laws("lopsided", Lopsided(), [[], [1], [1, 2]], report)
		self.assertEqual(2, len(report.issues))

	def test_assert_no_issues(self):
		report = diagnostics.Report(max_issues=1000)
		laws.check_laws("lopsided", Lopsided(), [[1]], report)
		with redirect_stderr(io.StringIO()) as err:
			with self.assertRaises(AssertionError):
				report.assert_no_issues("Lopsided is not lawful.")
		self.assertIn("lopsided broke the left-identity law.", err.getvalue())

	def test_verbose_report_talks(self):
		report = diagnostics.Report(verbose=2)
		with redirect_stderr(io.StringIO()) as err:
			laws.check_family("non_empty", report)
		self.assertIn("Checking non_empty", err.getvalue())
		self.assertIn("has no nil", err.getvalue())

	def test_quiet_report_does_not(self):
		with redirect_stderr(io.StringIO()) as err:
			laws.check_family("sequence", diagnostics.Report())
		self.assertEqual("", err.getvalue())

class RenderTests(unittest.TestCase):

	def test_these(self):
		self.assertEqual('[<1|"a">, <2|>]', render([both(1, "a"), this_(2)]))
		self.assertEqual('<|"b">', render(that("b")))

	def test_containers(self):
		self.assertEqual("some <1|>", render(some(this_(1))))
		self.assertEqual("none", render(none))
		self.assertEqual('{"a": <1|2>}', render({"a": both(1, 2)}))
		self.assertEqual("{<1|2>, <3|>}", render(NonEmpty(both(1, 2), [this_(3)])))
		self.assertEqual("(some 1, none)", render((some(1), none)))

	def test_container_subclasses(self):
		self.assertEqual('{"a": <1|2>}', render(OrderedDict(a=both(1, 2))))
		self.assertEqual("(<1|>, none)", render(Pair(this_(1), none)))

	def test_anything_else_is_repr(self):
		self.assertEqual("1.5", render(1.5))
		self.assertEqual("None", render(None))

class CommandLineTests(unittest.TestCase):

	def run_main(self, *argv):
		with redirect_stderr(io.StringIO()) as err, redirect_stdout(io.StringIO()) as out:
			status = cmdline.main(list(argv))
		return status, out.getvalue(), err.getvalue()

	def test_no_arguments_prints_usage(self):
		status, out, err = self.run_main()
		self.assertEqual(0, status)
		self.assertIn("usage: semialign", out)

	def test_all_families(self):
		status, out, err = self.run_main("all")
		self.assertEqual(0, status)
		self.assertIn("Looks lawful to me.", err)

	def test_some_families_verbosely(self):
		status, out, err = self.run_main("sequence", "record", "-v")
		self.assertEqual(0, status)
		self.assertIn("Checking sequence", err)
		self.assertIn("Checking record", err)
		self.assertNotIn("Checking option", err)

	def test_unknown_family(self):
		with self.assertRaises(SystemExit):
			self.run_main("tree")

if __name__ == '__main__':
	unittest.main()
