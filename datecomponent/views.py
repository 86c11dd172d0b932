"""
# Access to timezone views for adjusting UTC seconds in and out of local forms.

# Usage:

#!syntax/python
	from datecomponent import views
	z = views.Zone.open("America/Los_Angeles")
	local, offset = z.localize(1647165600)

# Local seconds are UTC seconds with the offset applied; resolving a local time
# back into UTC may yield no instant (a gap), one, or two (an overlap).
"""
import os
import os.path
import functools
import importlib.resources

from . import tzif
from . import gregorian
from . import tzrule

class ZoneNotFoundError(LookupError):
	"""
	# No zone data exists for the requested key.
	"""

	def __init__(self, key):
		super().__init__(key)
		self.key = key

	def __str__(self):
		return "no time zone data for " + repr(self.key)

class Zone(object):
	"""
	# An ordered sequence of transition times whose ranges correspond to a
	# particular offset.

	# [ Properties ]
	# /transitions/
		# The UTC seconds at which the offsets change.
	# /offsets/
		# The &Offset taking effect at the corresponding transition.
	# /default/
		# The &Offset of the &Zone before the first transition.
	# /rule/
		# The &tzrule.Rule governing times after the last transition, if any.
	"""

	class Offset(tuple):
		"""
		# Offsets are constructed by a tuple of the form: `(offset, abbreviation, type)`.
		# Primarily, the type signifies whether or not the offset is daylight
		# savings or not.

		# &Offset instances are usually extracted from &Zone objects which
		# build a sequence of transitions for subsequent searching.
		"""
		__slots__ = ()

		@property
		def magnitude(self):
			"""
			# The offset in seconds from UTC.
			"""
			return self[0]

		@property
		def abbreviation(self):
			"""
			# The Offset's timezone abbreviation; such as UTC, GMT, and EST.
			"""
			return self[1]

		@property
		def type(self):
			"""
			# Field used to identify if the &Offset is daylight savings time.
			"""
			return self[2]

		@property
		def is_dst(self):
			"""
			# Whether or not the &Offset is referring to a daylight savings time
			# offset.
			"""
			return self.type == 'dst'

		def __hash__(self):
			return self[0].__hash__()

		def __str__(self):
			return '%s%s%d' %(
				self.abbreviation,
				"+" if self.magnitude >= 0 else "-",
				abs(self.magnitude)
			)

		def __repr__(self):
			return '<%s(%s: %d)>' %(self.__class__.__name__, self.abbreviation, self.magnitude)

		def __eq__(self, ob):
			return tuple(self) == tuple(ob)

		@classmethod
		def from_tzinfo(Class, tzinfo):
			"""
			# Construct an Offset instance from a &.tzif.tzinfo tuple.
			"""
			return Class(
				(
					tzinfo.tz_offset,
					tzinfo.tz_abbrev.decode('ascii'),
					'dst' if tzinfo.tz_isdst else 'std',
				)
			)

	def __init__(self, transitions, offsets, default, name, rule=None):
		self.transitions = transitions
		self.offsets = offsets
		self.default = default
		self.name = name
		self.rule = rule

	def __repr__(self):
		return '<%s: %s[%d/%d]>' %(
			self.__class__.__name__,
			self.name,
			len(self.transitions),
			len(self.offsets),
		)

	def __str__(self):
		return str(self.name)

	import bisect
	def find(self, pit, search=bisect.bisect):
		"""
		# Get the appropriate offset in the zone for the UTC seconds, &pit.
		# If the &pit precedes the first transition, the &default will be returned.
		# After the last transition, the &rule decides when present.

		# Returns an offset for the timestamp according to the Zone's transition times.
		"""
		idx = search(self.transitions, pit) - 1
		if idx < 0:
			if self.rule is not None and not self.transitions:
				return self.rule.find(pit)
			return self.default

		if idx == len(self.transitions) - 1 and self.rule is not None:
			return self.rule.find(pit)

		return self.offsets[idx]

	def edges(self, start, stop, search=bisect.bisect_left):
		"""
		# The UTC seconds of the transitions occurring in `[start, stop)`, including
		# those produced by the &rule after the last recorded transition.
		"""
		t = self.transitions
		r = list(t[search(t, start):search(t, stop)])

		if self.rule is not None and self.rule.daylight is not None:
			last = t[-1] if t else None
			first_year = gregorian.date_from_days(start // 86400)[0]
			final_year = gregorian.date_from_days(stop // 86400)[0]

			for year in range(first_year - 1, final_year + 2):
				for x in self.rule.transitions(year):
					if start <= x < stop and (last is None or x > last):
						r.append(x)
			r.sort()

		return r
	del bisect

	def localize(self, pit):
		"""
		# Given &pit, UTC seconds, return the local seconds and the &Offset
		# used to produce them.
		"""
		offset = self.find(pit)
		return (pit + offset[0], offset)

	def resolve(self, local, window=86400):
		"""
		# Identify the UTC seconds whose localized form is &local.

		# Returns a tuple ordered from earliest to latest. The tuple is empty when
		# &local falls into a gap and has two items when it falls into an overlap.

		# [ Parameters ]
		# /local/
			# Local seconds; the civil time in the zone expressed in seconds
			# since the epoch.
		# /window/
			# The distance searched on either side of &local for the offsets that
			# may apply. Must exceed the largest offset magnitude of the zone.
		"""
		find = self.find
		magnitudes = {
			find(local - window)[0],
			find(local)[0],
			find(local + window)[0],
		}

		return tuple(sorted(set(
			local - m for m in magnitudes
			if find(local - m)[0] == m
		)))

	def normalize(self, local, window=86400):
		"""
		# Resolve &local to a single UTC instant.

		# Ambiguous local times select the earlier instant. Local times inside a gap
		# are interpreted using the offset in effect immediately before the
		# transition that opened it, which moves them forward by the size of the gap.
		"""
		candidates = self.resolve(local, window=window)
		if candidates:
			return candidates[0]

		find = self.find
		for t in self.edges(local - window, local + window + 1):
			before = find(t - 1)[0]
			if t + before <= local < t + find(t)[0]:
				return local - before

		return local - find(local - window)[0]

	@classmethod
	def fixed(Class, offset, abbreviation='UTC', name=None):
		"""
		# Construct a zone whose offset never changes.
		"""
		o = Class.Offset((offset, abbreviation, 'std'))
		return Class((), (), o, name or abbreviation)

	@classmethod
	def from_tzif_data(Class, tzd, name=None, lru_cache=functools.lru_cache):
		# Re-use prior created offsets.
		zb = lru_cache(maxsize=None)(Class.Offset.from_tzinfo)

		types, transitions, leaps, footer = tzd

		transition_offsets = [zb(x[1]) for x in transitions]
		transition_points = [x[0] for x in transitions]

		rule = None
		if footer:
			rule = tzrule.parse(footer, Offset=Class.Offset)

		default = types[0]

		return Class(transition_points, transition_offsets, zb(default), name, rule=rule)

	@classmethod
	def from_file(Class, filepath, name=None):
		return Class.from_tzif_data(
			tzif.get_timezone_data(filepath),
			name = name or filepath
		)

	@classmethod
	def from_package(Class, key, package='tzdata'):
		"""
		# Load the zone from the `zoneinfo` resources of the &package distribution.
		"""
		try:
			resource = importlib.resources.files(package).joinpath('zoneinfo')
		except ModuleNotFoundError:
			raise ZoneNotFoundError(key)

		for part in key.split('/'):
			resource = resource.joinpath(part)

		if not resource.is_file():
			raise ZoneNotFoundError(key)

		return Class.from_tzif_data(tzif.from_bytes(resource.read_bytes()), name=key)

	@staticmethod
	def validate(key, _normpath=os.path.normpath):
		"""
		# Check that the zone &key is a relative path that stays within the
		# zone directories.
		"""
		if not key or key.startswith('/') or key.startswith('\\'):
			raise ZoneNotFoundError(key)

		if _normpath(key) != key.replace('\\', '/') or key.split('/')[0] == '..':
			raise ZoneNotFoundError(key)

	@classmethod
	def open(Class, fp=None, _isabs=os.path.isabs, _exists=os.path.exists):
		"""
		# Open the zone identified by &fp.

		# When &fp is not given, the `TZ` environment variable is used, then
		# &tzif.tzdefault, then UTC.
		"""
		if not fp:
			fp = os.environ.get(tzif.tzenviron)
			if fp and fp.startswith(':'):
				fp = fp[1:]

		if not fp:
			if _exists(tzif.tzdefault):
				return Class.from_file(tzif.tzdefault)
			return Class.fixed(0, 'UTC')

		if _isabs(fp):
			if not _exists(fp):
				raise ZoneNotFoundError(fp)
			return Class.from_file(fp)

		Class.validate(fp)
		path = tzif.system_timezone_file(fp)
		if path is None:
			return Class.from_package(fp)

		return Class.from_file(path, name=fp)
