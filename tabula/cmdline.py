"""
Worked examples for the tabula object model.

{0}

For example:

    tabula vectors

will run the operator-overloading tutorial and print what it does.

    tabula --check

will audit every tutorial's class hierarchy without running anything.

    tabula -h

will explain all the arguments.
"""
import sys, argparse
from .tutorial import counter, animals, shapes, vectors, ecs

DEMOS = {
	"counter": counter,
	"animals": animals,
	"shapes": shapes,
	"vectors": vectors,
	"ecs": ecs,
}

parser = argparse.ArgumentParser(
	prog="tabula",
	description="Run (or audit) the worked examples for the tabula object model.",
)
parser.add_argument("demo", nargs="*", help="which tutorials to run; all of them if none is named.")
parser.add_argument('-c', "--check", action="count", help="Audit the class hierarchies but do not run the examples. Repeat for more detail.")
parser.add_argument('-l', "--list", action="store_true", help="List the available tutorials.")
parser.add_argument('-v', "--verbose", action="store_true", help="Trace class definitions as they happen.")

def run(args):
	from .diagnostics import Report, TooManyIssues
	from .space import Realm
	from .check import audit_realm
	if args.list:
		for name, module in DEMOS.items():
			print("%-10s %s" % (name, module.__doc__.strip().splitlines()[0]))
		return
	unknown = [name for name in args.demo if name not in DEMOS]
	if unknown:
		print("No such tutorial: %s. Try --list." % ", ".join(unknown), file=sys.stderr)
		return 2
	report = Report(verbose=args.check or args.verbose)
	root = Realm("tabula", report=report)
	try:
		for name in args.demo or DEMOS:
			realm = root.child(name)
			if args.check:
				DEMOS[name].define(realm)
				audit_realm(realm, report)
			else:
				print("== %s ==" % name)
				for line in DEMOS[name].run(realm):
					print(line)
	except TooManyIssues:
		report.complain_to_console()
		print("Giving up after a few issues. One crisis at a time, eh?", file=sys.stderr)
		return 1
	if report.sick():
		report.complain_to_console()
		return 1
	if args.check:
		print("Looks plausible to me.", file=sys.stderr)

def main():
	if len(sys.argv) > 1:
		sys.exit(run(parser.parse_args()))
	else:
		print(__doc__.strip().format(parser.format_usage()))
