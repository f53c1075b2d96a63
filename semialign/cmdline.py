"""
This checks the Semialign and Align laws for the built-in instances.

{0}

For example:

    semialign sequence record

will check the laws for those two container families, and

    semialign all -vv

will check every family while saying a great deal about it.

    semialign -h

will explain all the arguments.
"""
import sys, argparse
from .laws import SPECIMENS

FAMILIES = sorted(SPECIMENS)

parser = argparse.ArgumentParser(
	prog="semialign",
	description="Check the alignment laws for the built-in container instances.",
)
parser.add_argument("family", nargs="*", help="which container families to check: %s, or all (the default)." % ", ".join(FAMILIES))
parser.add_argument('-v', "--verbose", action="count", default=0, help="Say what is being checked. Repeat for more detail.")
parser.add_argument('-m', "--max-issues", type=int, default=10, help="Give up after this many violations.")

def run(args):
	from .diagnostics import Report, TooManyIssues
	from .laws import check_family
	report = Report(verbose=args.verbose, max_issues=args.max_issues)
	unknown = [f for f in args.family if f not in SPECIMENS and f != "all"]
	if unknown:
		parser.error("no such family: %s" % ", ".join(unknown))
	families = FAMILIES if not args.family or "all" in args.family else args.family
	try:
		for family in families:
			check_family(family, report)
	except TooManyIssues:
		report.complain_to_console()
		print(" *"*35, file=sys.stderr)
		print("Giving up after a few issues. One crisis at a time, eh?", file=sys.stderr)
		return 1
	if report.sick():
		report.complain_to_console()
		return 1
	report.info("Checked:", ", ".join(families))
	print("Looks lawful to me.", file=sys.stderr)
	return 0

def main(argv=None):
	argv = sys.argv[1:] if argv is None else argv
	if argv:
		return run(parser.parse_args(argv))
	else:
		print(__doc__.strip().format(parser.format_usage()))
		return 0
