"""
Tracing and issue-reporting for whatever drives the object model.

Nothing here uses the logging module: a Report prints its chatter to
stderr when asked to be verbose, and otherwise collects issues until
somebody decides to complain about them.
"""
import sys, random
from typing import Sequence

class TooManyIssues(Exception):
	pass

def _outburst():
	particle = ["Oh, ", "Well, ", "Aw, ", "", ""]
	minced_oaths = [
		'Ack', 'Blargh', 'Confound it', 'Crikey', 'Curses', 'Drat',
		'Fiddlesticks', 'Good Grief', 'Great Scott', 'Heavens', 'Nuts', 'Rats',
	]
	resignations = [
		'I am undone.',
		'I cannot continue.',
		'I need to ask for help.',
	]
	return "%s%s! %s"%tuple(map(random.choice, (particle, minced_oaths, resignations)))

class Issue:
	""" One complaint: an introduction, the names of the guilty parties, and perhaps some advice. """
	def __init__(self, intro:str, guilty:Sequence[str]=(), footer:Sequence[str]=()):
		self.intro, self.guilty, self.footer = intro, list(guilty), list(footer)
	def also(self, name:str): self.guilty.append(name)
	def as_text(self):
		lines = [self.intro]
		lines.extend("   - " + g for g in self.guilty)
		lines.extend(self.footer)
		return '\n'.join(lines)

class Report:
	issues : list[Issue]

	def __init__(self, *, verbose:int=0, max_issues=10):
		self._verbose = verbose or 0   # Because None is incomparable.
		self.issues = []
		self._max_issues = max_issues

	def ok(self): return not self.issues
	def sick(self): return bool(self.issues)

	def issue(self, it:Issue):
		self.issues.append(it)
		if len(self.issues) == self._max_issues:
			raise TooManyIssues(self)

	def reset(self):
		self.issues.clear()

	def info(self, *args):
		if self._verbose:
			print(*args, file=sys.stderr)

	def complain_to_console(self):
		""" Emit all the issues to the console. """
		_bemoan(self.issues)

	def assert_no_issues(self, message):
		""" Does what it says on the tin """
		if self.issues:
			self.complain_to_console()
			raise AssertionError(_outburst()+" "+message)

	# Methods the audit pass invokes:

	def unimplemented_abstract(self, class_name:str, method_names:Sequence[str]):
		intro = "Class %s looks concrete but never overrides some abstract methods:" % class_name
		footer = ["Invoking one of these on a %s will raise NotImplementedError." % class_name]
		self.issue(Issue(intro, method_names, footer))

def _bemoan(issues):
	""" Emit all the issues to the console. """
	if issues:
		print("*"*60, file=sys.stderr)
		print(_outburst(), file=sys.stderr)
	for i in issues:
		print("  -"*20, file=sys.stderr)
		print(i.as_text(), file=sys.stderr)
	sys.stderr.flush()
