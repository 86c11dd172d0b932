"""
# Read TZif, time zone information, files (zic output).

# Versions 1 through 4 are supported. For version 2 and later, the 64-bit data
# block and the POSIX TZ footer are used; the leading version 1 block is skipped.

# ! WARNING:
	# This module is intended for internal use only.
	# The protocol is subject to change without warning.
"""
import os
import os.path
import struct
import collections

magic = b'TZif'
tzdir = '/usr/share/zoneinfo'
tzdefault = '/etc/localtime'
tzenviron = 'TZ'
tzdirenviron = 'TZDIR'

#: Directories searched for zone files after &tzdirenviron.
tzpath = (
	tzdir,
	'/usr/lib/zoneinfo',
	'/usr/share/lib/zoneinfo',
	'/etc/zoneinfo',
)

class FormatError(ValueError):
	"""
	# The data is not a TZif file or is truncated.
	"""

header_fields = (
	'tzh_ttisutcnt',   # The number of UT/local indicators stored in the file.
	'tzh_ttisstdcnt',  # The number of standard/wall indicators stored in the file.
	'tzh_leapcnt',     # The number of leap seconds for which data is stored in the file.
	'tzh_timecnt',     # The number of "transition times" for which data is stored in the file.
	'tzh_typecnt',     # The number of "local time types" for which data is stored in the file (must not be zero).
	'tzh_charcnt',     # The number of characters of "time zone abbreviation strings" stored in the file.
)
tzinfo_header = collections.namedtuple('tzinfo_header', header_fields)

# Magic, version, and fifteen reserved bytes precede the counts.
prefix_struct = struct.Struct("!4sc15x")
header_struct = struct.Struct("!" + (len(header_fields) * "l"))

ttinfo_fields = (
	'tt_utoff',
	'tt_isdst',
	'tt_desigidx',
)
tzinfo_ttinfo = collections.namedtuple('tzinfo_ttinfo', ttinfo_fields)
ttinfo_struct = struct.Struct("!lbB")

# Transition times and leap records differ in width between the blocks.
transtime_struct_v1 = struct.Struct("!l")
leappairs_struct_v1 = struct.Struct("!ll")

transtime_struct_v2 = struct.Struct("!q")
leappairs_struct_v2 = struct.Struct("!ql")

def parse_header(data, offset):
	"""
	# Unpack the header starting at &offset.

	# Returns the version character and the &tzinfo_header.
	"""
	end = offset + prefix_struct.size + header_struct.size
	if len(data) < end:
		raise FormatError("truncated header")

	ident, version = prefix_struct.unpack_from(data, offset)
	if ident != magic:
		raise FormatError("not a TZif file")

	header = tzinfo_header(*header_struct.unpack_from(data, offset + prefix_struct.size))
	if header.tzh_typecnt == 0:
		raise FormatError("no local time types")

	return version, header, end

def block_size(header, transtime_struct, leappairs_struct):
	"""
	# The number of bytes used by the data block described by &header.
	"""
	return (
		(header.tzh_timecnt * transtime_struct.size) +
		header.tzh_timecnt +
		(header.tzh_typecnt * ttinfo_struct.size) +
		header.tzh_charcnt +
		(header.tzh_leapcnt * leappairs_struct.size) +
		header.tzh_ttisstdcnt +
		header.tzh_ttisutcnt
	)

def parse_block(data, offset, header, transtime_struct, leappairs_struct):
	"""
	# Parse the data block following a header.

	# Returns tuple of: (transtimes, types, leaps, isstd, isut, timeinfo)
	# See tzfile(5) for information about the fields(it's cryptically fun).
	"""
	if len(data) < offset + block_size(header, transtime_struct, leappairs_struct):
		raise FormatError("truncated data block")

	y = memoryview(data)[offset:]

	end = header.tzh_timecnt * transtime_struct.size
	size = transtime_struct.size
	transtimes = tuple([
		transtime_struct.unpack(y[x:x+size])[0]
		for x in range(0, end, size)
	])
	y = y[end:]

	# unsigned char's
	types = tuple(bytes(y[:header.tzh_timecnt]))
	y = y[header.tzh_timecnt:]

	end = ttinfo_struct.size * header.tzh_typecnt
	timetypinfo = [
		tzinfo_ttinfo(*ttinfo_struct.unpack(y[x:x+ttinfo_struct.size]))
		for x in range(0, end, ttinfo_struct.size)
	]
	y = y[end:]

	abbr = bytes(y[:header.tzh_charcnt])
	y = y[header.tzh_charcnt:]

	end = leappairs_struct.size * header.tzh_leapcnt
	leaps = tuple([
		leappairs_struct.unpack(y[x:x+leappairs_struct.size])
		for x in range(0, end, leappairs_struct.size)
	])
	y = y[end:]

	isstd = tuple(bytes(y[:header.tzh_ttisstdcnt]))
	y = y[header.tzh_ttisstdcnt:]

	isut = tuple(bytes(y[:header.tzh_ttisutcnt]))

	##
	# Resolve the designation index. Append a NUL terminator to the
	# string to guarantee that abbr.find() will not return -1.
	abbr += b'\0'
	timeinfo = tuple([
		(abbr[x.tt_desigidx:abbr.find(b'\0', x.tt_desigidx)], x.tt_utoff, x.tt_isdst)
		for x in timetypinfo
	])

	for t in types:
		if t >= len(timeinfo):
			raise FormatError("transition type index out of range")

	return (transtimes, types, leaps, isstd, isut, timeinfo)

def parse(data):
	"""
	# Given TZif data, identify the version and unpack the timezone information.

	# Returns tuple of: (version, block, footer) where the block is the tuple
	# produced by &parse_block and footer is the POSIX TZ string or &None.
	"""
	version, header, offset = parse_header(data, 0)

	if version == b'\0':
		block = parse_block(data, offset, header, transtime_struct_v1, leappairs_struct_v1)
		return (1, block, None)

	# Skip the version 1 block; the second header describes 64-bit data.
	offset += block_size(header, transtime_struct_v1, leappairs_struct_v1)
	version, header, offset = parse_header(data, offset)
	block = parse_block(data, offset, header, transtime_struct_v2, leappairs_struct_v2)
	offset += block_size(header, transtime_struct_v2, leappairs_struct_v2)

	footer = bytes(data[offset:])
	end = footer.find(b'\n', 1)
	if footer[:1] != b'\n' or end == -1:
		raise FormatError("missing footer")
	footer = footer[1:end]

	return (int(version.decode('ascii')), block, footer.decode('ascii') or None)

tzinfo = collections.namedtuple('tzinfo', (
	'tz_abbrev',
	'tz_offset',
	'tz_isdst',
	'tz_isstd',
	'tz_isut',
))

def structure(tzif):
	"""
	# Given the parse fields from &parse, make a more accessible structure.

	# Returns tuple of: (local_time_types, transitions, leaps, footer) where
	# transitions is a list of (transition_time, tzinfo) pairs ordered by time.
	"""
	version, (transtimes, types, leaps, isstd, isut, timeinfo), footer = tzif

	ltt = []
	for i, x in enumerate(timeinfo):
		ttyp = tzinfo(
			tz_abbrev = x[0],
			tz_offset = x[1],
			tz_isdst = bool(x[2]),
			tz_isstd = bool(isstd[i]) if i < len(isstd) else False,
			tz_isut = bool(isut[i]) if i < len(isut) else False,
		)
		ltt.append(ttyp)

	r = list(zip(transtimes, map(ltt.__getitem__, types)))
	# order by the transition time
	r.sort(key = lambda x: x[0])
	return tuple(ltt), r, leaps, footer

def from_bytes(data):
	"""
	# Get the structured timezone data out of the given bytes.
	"""
	return structure(parse(data))

def get_timezone_data(filepath):
	"""
	# Get the structured timezone data out of the specified file.
	"""
	with open(filepath, 'rb') as f:
		return from_bytes(f.read())

def system_timezone_file(relativepath, path=None, _join=os.path.join, _isfile=os.path.isfile):
	"""
	# Find the zone file identified by &relativepath in the search path.

	# The &tzdirenviron directory is consulted before &tzpath.
	# Returns &None when no directory has the file.
	"""
	if path is None:
		path = tzpath
		environ_dir = os.environ.get(tzdirenviron)
		if environ_dir:
			path = (environ_dir,) + path

	for directory in path:
		candidate = _join(directory, relativepath)
		if _isfile(candidate):
			return candidate
	return None
