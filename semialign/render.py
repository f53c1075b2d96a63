"""
Human-readable text for aligned structures, as used in law-violation reports.

`repr` would do in a pinch, but nested These-within-lists-within-dicts get hard to read.
This renders them compactly:

	[1, 2] aligned with ["a"]   -->   [<1|"a">, <2|>]

where <a|> is This(a), <|b> is That(b), and <a|b> is Both(a, b).
"""
from boozetools.support.foundation import Visitor
from .these import This, That, Both
from .option import Some, _Nothing
from .nonempty import NonEmpty

class Render(Visitor):
	""" Return a string representation of the term. """

	def __call__(self, it) -> str: return self.visit(it)

	@staticmethod
	def visit_object(it): return repr(it)

	def tour(self, items): return ", ".join(map(self, items))

	def visit_This(self, t: This): return "<%s|>" % self(t.value)
	def visit_That(self, t: That): return "<|%s>" % self(t.value)
	def visit_Both(self, t: Both): return "<%s|%s>" % (self(t.this), self(t.that))

	def visit_Some(self, o: Some): return "some %s" % self(o.value)
	@staticmethod
	def visit__Nothing(_): return "none"

	def visit_NonEmpty(self, ne: NonEmpty): return "{%s}" % self.tour(ne)
	def visit_list(self, xs: list): return "[%s]" % self.tour(xs)
	def visit_tuple(self, xs: tuple): return "(%s)" % self.tour(xs)
	def visit_dict(self, d: dict):
		return "{%s}" % ", ".join("%s: %s" % (self(k), self(v)) for k, v in d.items())

	@staticmethod
	def visit_str(s: str): return '"%s"' % s.replace('"', '\\"')

render = Render()
