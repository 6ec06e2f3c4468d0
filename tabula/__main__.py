"""
Worked examples for the tabula object model.

{0}

For example:

    py -m tabula shapes

will run the polymorphism tutorial and print what it does.

    py -m tabula -h

will explain all the arguments.
"""
import sys
from tabula.cmdline import parser, run

parser.prog = "py -m tabula"

if len(sys.argv) > 1:
	sys.exit(run(parser.parse_args()))
else:
	print(__doc__.strip().format(parser.format_usage()))
