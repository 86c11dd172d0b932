"""
# POSIX TZ strings as found in the footer of TZif files.

# The rule describes the offsets in effect after the last transition recorded in
# the file; for example, `PST8PDT,M3.2.0,M11.1.0` for America/Los_Angeles.

# [ Elements ]
# /parse/
	# Construct a &Rule from a TZ string.
# /Rule/
	# The standard and daylight offsets along with the dates and times of
	# the transitions between them.
"""
import re
import operator

from . import gregorian

class FormatError(ValueError):
	"""
	# The TZ string could not be parsed.
	"""

_name = r'(?:<[+\-0-9A-Za-z]+>|[A-Za-z]{3,})'
_offset = r'[+-]?\d{1,3}(?::\d{1,2}){0,2}'
_date = r'(?:M\d{1,2}\.\d\.\d|J\d{1,3}|\d{1,3})'

pattern = re.compile(
	rf'(?P<std>{_name})(?P<stdoff>{_offset})'
	rf'(?:(?P<dst>{_name})(?P<dstoff>{_offset})?'
	rf'(?:,(?P<start>{_date})(?:/(?P<starttime>{_offset}))?'
	rf',(?P<end>{_date})(?:/(?P<endtime>{_offset}))?)?)?'
)

#: Transition time used when the rule does not specify one.
default_time = 2 * 3600

def seconds(string):
	"""
	# Convert `[+-]hh[:mm[:ss]]` to seconds.
	"""
	sign = 1
	if string[:1] in ('+', '-'):
		sign = -1 if string[0] == '-' else 1
		string = string[1:]

	parts = [int(x) for x in string.split(':')]
	parts.extend([0] * (3 - len(parts)))
	h, m, s = parts
	if m > 59 or s > 59:
		raise FormatError("minutes and seconds must be less than 60: " + repr(string))

	return sign * ((h * 3600) + (m * 60) + s)

def date(string):
	"""
	# Parse a transition date into a tuple whose first item identifies the form:
	# `'M'` for month-week-weekday, `'J'` for a leap day ignorant day of year,
	# and `''` for a zero-based day of year.
	"""
	if string[0] == 'M':
		month, week, day = map(int, string[1:].split('.'))
		if not (1 <= month <= 12 and 1 <= week <= 5 and 0 <= day <= 6):
			raise FormatError("invalid month-week-weekday date: " + repr(string))
		return ('M', month, week, day)
	elif string[0] == 'J':
		n = int(string[1:])
		if not (1 <= n <= 365):
			raise FormatError("julian day out of range: " + repr(string))
		return ('J', n)
	else:
		n = int(string)
		if not (0 <= n <= 365):
			raise FormatError("day of year out of range: " + repr(string))
		return ('', n)

def day_of_year(transition, year):
	"""
	# Resolve a transition date produced by &date to days since the epoch for
	# the given &year.
	"""
	january = gregorian.days_from_date((year, 1, 1))
	form = transition[0]

	if form == 'J':
		n = transition[1]
		d = january + n - 1
		if n >= 60 and gregorian.year_is_leap(year):
			# February 29th is never counted.
			d += 1
		return d
	elif form == '':
		return january + transition[1]

	month, week, day = transition[1:]
	first = gregorian.days_from_date((year, month, 1))
	d = first + ((day - gregorian.weekday(first)) % 7) + ((week - 1) * 7)

	# Week five designates the last such weekday in the month.
	last = first + gregorian.days_in_month(year, month)
	while d >= last:
		d -= 7
	return d

class Rule(tuple):
	"""
	# A POSIX TZ rule: `(standard, daylight, start, start_time, end, end_time)`.

	# The daylight offset and transitions are &None when the rule has no
	# daylight savings period.
	"""
	__slots__ = ()

	standard = property(operator.itemgetter(0))
	daylight = property(operator.itemgetter(1))
	start = property(operator.itemgetter(2))
	start_time = property(operator.itemgetter(3))
	end = property(operator.itemgetter(4))
	end_time = property(operator.itemgetter(5))

	def __repr__(self):
		return '<%s: %s/%s>' %(self.__class__.__name__, self.standard, self.daylight)

	def transitions(self, year):
		"""
		# The UTC seconds of the start and end of daylight savings in &year.

		# The start is expressed in standard time and the end in daylight time.
		"""
		start = (day_of_year(self.start, year) * 86400) + self.start_time
		end = (day_of_year(self.end, year) * 86400) + self.end_time
		return (start - self.standard[0], end - self.daylight[0])

	def find(self, pit):
		"""
		# Get the offset in effect at the UTC seconds, &pit.
		"""
		if self.daylight is None:
			return self.standard

		year = gregorian.date_from_days((pit + self.standard[0]) // 86400)[0]
		start, end = self.transitions(year)

		if start < end:
			isdst = start <= pit < end
		else:
			# Southern hemisphere; daylight savings spans the new year.
			isdst = not (end <= pit < start)

		return self.daylight if isdst else self.standard

def parse(string, Offset=tuple):
	"""
	# Construct a &Rule from the TZ &string.

	# [ Parameters ]
	# /string/
		# The POSIX TZ string; for instance, `CET-1CEST,M3.5.0,M10.5.0/3`.
	# /Offset/
		# Constructor used to build the offsets from `(magnitude, abbreviation, type)`.
	"""
	m = pattern.fullmatch(string)
	if m is None:
		raise FormatError("unrecognized TZ string: " + repr(string))

	fields = m.groupdict()
	std_name = fields['std'].strip('<>')
	# POSIX offsets are positive west of Greenwich.
	std_offset = -seconds(fields['stdoff'])
	standard = Offset((std_offset, std_name, 'std'))

	if fields['dst'] is None:
		return Rule((standard, None, None, None, None, None))

	if fields['dstoff'] is None:
		dst_offset = std_offset + 3600
	else:
		dst_offset = -seconds(fields['dstoff'])
	daylight = Offset((dst_offset, fields['dst'].strip('<>'), 'dst'))

	if fields['start'] is None:
		raise FormatError("daylight savings without transition rules: " + repr(string))

	start_time = default_time
	if fields['starttime'] is not None:
		start_time = seconds(fields['starttime'])

	end_time = default_time
	if fields['endtime'] is not None:
		end_time = seconds(fields['endtime'])

	return Rule((
		standard, daylight,
		date(fields['start']), start_time,
		date(fields['end']), end_time,
	))
