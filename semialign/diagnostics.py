import sys, random
from typing import NamedTuple, Any
from .render import render

class TooManyIssues(Exception):
	pass

class Violation(NamedTuple):
	""" One law, broken once, by one instance. """
	family: str
	law: str
	expected: Any
	actual: Any

	def illustrate(self) -> str:
		return "\n".join([
			"%s broke the %s law." % (self.family, self.law),
			"   expected: %s" % render(self.expected),
			"     actual: %s" % render(self.actual),
		])

def _outburst():
	oaths = ['Drat', 'Fiddlesticks', 'Good Grief', 'Rats', 'Curses', 'Great Scott', 'Mercy']
	resignations = [
		'The algebra does not hold.',
		'Somebody dropped an element.',
		'These are not the values you are looking for.',
	]
	return "%s! %s" % (random.choice(oaths), random.choice(resignations))

class Report:
	""" Collects law violations, and sometimes talks about what it's doing. """
	_issues : list[Violation]

	def __init__(self, *, verbose:int = 0, max_issues=10):
		self._verbose = verbose or 0   # Because None is incomparable.
		self._issues = []
		self._max_issues = max_issues

	def sick(self): return bool(self._issues)

	@property
	def issues(self) -> list[Violation]: return list(self._issues)

	def issue(self, it:Violation):
		self._issues.append(it)
		if len(self._issues) == self._max_issues:
			raise TooManyIssues(self)

	def info(self, *args, level=1):
		if self._verbose >= level:
			print(*args, file=sys.stderr)

	def complain_to_console(self):
		""" Emit all the issues to the console. """
		for v in self._issues:
			print(v.illustrate(), file=sys.stderr)
		print("%d law violation(s)." % len(self._issues), file=sys.stderr)

	def assert_no_issues(self, message):
		""" Does what it says on the tin """
		if self._issues:
			self.complain_to_console()
			raise AssertionError(_outburst()+" "+message)
