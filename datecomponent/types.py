"""
# Time domain classes for zoned points in time and the exact distance between them.

#!python
	la = views.Zone.open('America/Los_Angeles')
	pit, = types.Instant.of(la, 2022, 3, 13, 1, 59, 59)
	later = types.Instant.from_unix(1647165600, la)

	# # Exact, signed difference in seconds.
	assert pit.measure(later).seconds == 1
	assert pit.leads(later) == True

# [ Elements ]

# /Instant/
	# A UTC second paired with the zone used to present it.
# /Duration/
	# The signed number of seconds between two &Instant objects.
"""
import operator

from . import gregorian

seconds_in_minute = 60
seconds_in_hour = 60 * seconds_in_minute
seconds_in_day = 24 * seconds_in_hour

def local_seconds(year, month, day, hour=0, minute=0, second=0):
	"""
	# Convert civil fields to local seconds since the epoch.

	# Returns &None when the date does not exist in the calendar or a time field
	# is out of range. Gaps are not checked; &views.Zone.resolve does that.
	"""
	if not gregorian.date_is_valid(year, month, day):
		return None
	if not (0 <= hour < 24 and 0 <= minute < 60 and 0 <= second < 60):
		return None

	days = gregorian.days_from_date((year, month, day))
	return (days * seconds_in_day) + (hour * seconds_in_hour) + (minute * seconds_in_minute) + second

class Duration(int):
	"""
	# Signed number of seconds between two instants.

	# The unit properties truncate toward zero, so the magnitude of each is the
	# floor of the absolute elapsed time divided by the unit.
	"""
	__slots__ = ()

	def __repr__(self):
		return '%s(%d)' %(self.__class__.__name__, self)

	def truncate(self, unit):
		"""
		# The whole number of &unit sized periods in the duration, keeping the sign.
		"""
		q = abs(self) // unit
		return q if self >= 0 else -q

	@property
	def seconds(self):
		return int(self)

	@property
	def minutes(self):
		return self.truncate(seconds_in_minute)

	@property
	def hours(self):
		return self.truncate(seconds_in_hour)

	@property
	def days(self):
		return self.truncate(seconds_in_day)

class Instant(tuple):
	"""
	# A point in time, UTC seconds, with an attached &views.Zone.

	# Ordering and distance only consider the seconds; the zone controls
	# the civil fields produced by &select.
	"""
	__slots__ = ()

	seconds = property(operator.itemgetter(0))
	zone = property(operator.itemgetter(1))

	def __repr__(self):
		y, m, d, H, M, S = self.select('datetime')
		offset = self.zone.find(self.seconds)
		return f"(instant@'{y:04}-{m:02}-{d:02}T{H:02}:{M:02}:{S:02} {offset}')"

	@classmethod
	def from_unix(Class, seconds, zone):
		return Class((seconds, zone))

	@classmethod
	def of(Class, zone, year, month, day, hour=0, minute=0, second=0):
		"""
		# Construct the instants that present the given civil fields in &zone.

		# Returns a tuple ordered from earliest to latest: empty when the date does
		# not exist or the time falls into a gap, two items in an overlap.
		"""
		local = local_seconds(year, month, day, hour, minute, second)
		if local is None:
			return ()

		return tuple(Class((x, zone)) for x in zone.resolve(local))

	def relocate(self, zone):
		"""
		# The same point in time presented by &zone.
		"""
		return self.__class__((self.seconds, zone))

	def select(self, container='datetime', divmod=divmod):
		"""
		# Retrieve the civil fields of the instant in its zone.

		# [ Parameters ]
		# /container/
			# `'date'` for `(year, month, day)`, `'timeofday'` for
			# `(hour, minute, second)`, or `'datetime'` for both.
		"""
		local, offset = self.zone.localize(self.seconds)
		days, second_of_day = divmod(local, seconds_in_day)

		if container == 'date':
			return gregorian.date_from_days(days)

		hour, second_of_hour = divmod(second_of_day, seconds_in_hour)
		timeofday = (hour,) + divmod(second_of_hour, seconds_in_minute)
		if container == 'timeofday':
			return timeofday
		elif container == 'datetime':
			return gregorian.date_from_days(days) + timeofday

		raise ValueError("unknown container: " + repr(container))

	def measure(self, other):
		"""
		# The signed &Duration from this instant to &other.
		"""
		return Duration(other.seconds - self.seconds)

	def leads(self, other):
		"""
		# Whether this instant occurs before &other.
		"""
		return self.seconds < other.seconds

	def follows(self, other):
		"""
		# Whether this instant occurs after &other.
		"""
		return self.seconds > other.seconds
