"""
# Primary public module.

# Provides access to &calculate and its result type, &DateComponent, along with
# the zone and instant constructors needed to use it.
"""
import functools

from . import views
from . import types
from .components import DateComponent, calculate, nearest_day_before

__shortname__ = 'libdc'

Instant = types.Instant
Duration = types.Duration

#: Coordinated Universal Time.
utc = views.Zone.fixed(0, 'UTC')

def zone(name:str=None,
		zone_open=functools.lru_cache()(views.Zone.open),
	) -> views.Zone:
	"""
	# Return a Zone object for localizing UTC seconds and resolving local times.

	# Zones are cached by &name; repeated calls return the same object.
	"""
	return zone_open(name)

def instant(zone, year, month, day, hour=0, minute=0, second=0) -> types.Instant:
	"""
	# Construct the single instant presenting the given civil fields in &zone.

	# Raises &ValueError when the civil time does not exist or is ambiguous.
	# &types.Instant.of provides access to all candidates.
	"""
	candidates = types.Instant.of(zone, year, month, day, hour, minute, second)
	if len(candidates) != 1:
		raise ValueError(
			"%04d-%02d-%02dT%02d:%02d:%02d resolves to %d instants in %s: %r" %(
				year, month, day, hour, minute, second,
				len(candidates), zone, candidates,
			)
		)

	return candidates[0]

def unix(seconds, zone=utc) -> types.Instant:
	"""
	# Construct an instant from Unix seconds presented by &zone.
	"""
	return types.Instant.from_unix(seconds, zone)
