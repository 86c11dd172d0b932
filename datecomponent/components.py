"""
# Calendar-aware difference between two zoned instants.

# &calculate expresses the distance between two &types.Instant objects both as
# calendar components, years through seconds, and as flat interval totals.

#!/pl/python
	la = library.zone('America/Los_Angeles')
	start = library.instant(la, 2022, 3, 13, 1, 59, 59)
	end = library.instant(la, 2022, 3, 13, 3, 0, 0)
	assert components.calculate(start, end).second == 1

# Years, months and days are measured on the civil calendar of the earlier
# instant's zone. Hours, minutes and seconds are taken from the exact duration
# so that daylight savings transitions do not add or remove time that did not
# elapse.
"""
import collections

from . import gregorian
from . import types

fields = (
	'year',
	'month',
	'week',
	'modulo_days',
	'day',
	'hour',
	'minute',
	'second',
	'interval_seconds',
	'interval_minutes',
	'interval_hours',
	'interval_days',
	'invert',
)

class DateComponent(collections.namedtuple('DateComponent', fields)):
	"""
	# The difference between two instants.

	# [ Properties ]
	# /year/
		# Number of years.
	# /month/
		# Number of months remaining after the years; `0` through `11`.
	# /week/
		# Number of whole weeks in &day.
	# /modulo_days/
		# Number of days remaining when using weeks.
	# /day/
		# Number of days remaining after the years and months.
	# /hour/
		# Number of hours; the exact elapsed hours modulo a day.
	# /minute/
		# Number of minutes; the exact elapsed minutes modulo an hour.
	# /second/
		# Number of seconds; the exact elapsed seconds modulo a minute.
	# /interval_seconds/
		# Total number of seconds between the instants.
	# /interval_minutes/
		# Total number of whole minutes between the instants.
	# /interval_hours/
		# Total number of whole hours between the instants.
	# /interval_days/
		# Total number of whole days, 86400 seconds, between the instants.
	# /invert/
		# Whether the first instant follows the second; a negative interval.
	"""
	__slots__ = ()

def nearest_day_before(zone, year, month, day, hour=0, minute=0, second=0):
	"""
	# Construct the instant in &zone for the latest valid day that does not exceed
	# &day in the &month of the &year; 2021-02-30 becomes 2021-02-28.

	# The time of day is preserved. An ambiguous local time selects the earlier
	# instant, and a local time inside a gap is moved past the gap by
	# &views.Zone.normalize rather than by changing the day.

	# [ Parameters ]
	# /zone/
		# The &views.Zone presenting the civil fields.
	# /day/
		# The requested day of the month; may exceed the length of the month.
		# Days past &gregorian.max_days_in_month start the walk at the last day.
	"""
	for d in range(min(day, gregorian.max_days_in_month), 0, -1):
		local = types.local_seconds(year, month, d, hour, minute, second)
		if local is not None:
			return types.Instant((zone.normalize(local), zone))

	raise ValueError("no valid day at or before %d in %04d-%02d" %(day, year, month))

def elapsed_days(anchor, end):
	"""
	# The number of whole civil days from &anchor to &end.

	# The date difference is reduced by one when the time of day of &end has
	# not yet reached that of &anchor.
	"""
	days = gregorian.days_from_date(end.select('date')) - gregorian.days_from_date(anchor.select('date'))
	if days > 0 and end.select('timeofday') < anchor.select('timeofday'):
		days -= 1
	return days

def calculate(former, latter, abs=abs, divmod=divmod):
	"""
	# Returns a &DateComponent describing the difference between &former and &latter.

	# The earlier of the two is the start of the interval and its zone is used to
	# present the civil fields of both. &DateComponent.invert is &True when &former
	# is the later instant.
	"""
	duration = former.measure(latter)
	if duration >= 0:
		start, end, invert = former, latter, False
	else:
		start, end, invert = latter, former, True

	zone = start.zone
	end = end.relocate(zone)

	sy, sm, sd, sH, sM, sS = start.select('datetime')
	ey, em, ed = end.select('date')

	year = ey - sy
	month = em - sm

	# The anchor is start's day and time of day in the month the days are counted
	# from: end's month, or the one before it when end has not reached start's day.
	ay, am = ey, em
	if ed < sd:
		month -= 1
		ay, am = gregorian.previous_month(ay, am)

	anchor = nearest_day_before(zone, ay, am, sd, sH, sM, sS)
	if anchor.follows(end):
		# Same day of the month, but end's time of day is earlier.
		month -= 1
		ay, am = gregorian.previous_month(ay, am)
		anchor = nearest_day_before(zone, ay, am, sd, sH, sM, sS)

	day = elapsed_days(anchor, end)

	if month < 0:
		month += 12
		year -= 1

	week, modulo_days = divmod(day, 7)

	return DateComponent(
		year = year,
		month = month,
		week = week,
		modulo_days = modulo_days,
		day = day,
		hour = abs(duration.hours) % 24,
		minute = abs(duration.minutes) % 60,
		second = abs(duration.seconds) % 60,
		interval_seconds = abs(duration.seconds),
		interval_minutes = abs(duration.minutes),
		interval_hours = abs(duration.hours),
		interval_days = abs(duration.days),
		invert = invert,
	)
