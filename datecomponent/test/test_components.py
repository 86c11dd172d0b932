"""
# Check &components.calculate against fixed calendars and the daylight savings
# transitions of Los Angeles, Paris, and Sydney.
"""
from .. import components
from .. import library

utc = library.utc
calculate = components.calculate
instant = library.instant

def expect(test, dc, **fields):
	for k, v in fields.items():
		test/(k, getattr(dc, k)) == (k, v)

def zeros(**fields):
	r = dict.fromkeys(components.fields, 0)
	r['invert'] = False
	r.update(fields)
	return r

class CountingZone(object):
	"""
	# Zone wrapper recording the local times given to &normalize.
	"""

	def __init__(self, zone):
		self.zone = zone
		self.probes = []

	def normalize(self, local, window=86400):
		self.probes.append(local)
		return self.zone.normalize(local, window=window)

	def __getattr__(self, name):
		return getattr(self.zone, name)

def test_fields(test):
	test/components.DateComponent._fields == components.fields
	dc = components.DateComponent(**zeros())
	test/dc.invert == False
	test/len(dc) == 13

def test_next_year(test):
	pacific = library.zone('US/Pacific')
	for start, end in [(1998, 1999), (1999, 2000), (2000, 2001), (2009, 2010)]:
		for z in (utc, pacific):
			dc = calculate(instant(z, start, 1, 1), instant(z, end, 1, 1))
			test/dc.year == 1
			test/dc.month == 0
			test/dc.day == 0
			test/dc.invert == False

def test_previous_year(test):
	shanghai = library.zone('Asia/Shanghai')
	for start, end in [(1999, 1998), (2000, 1999), (2001, 2000), (2010, 2009)]:
		for z in (utc, shanghai):
			dc = calculate(instant(z, start, 1, 1), instant(z, end, 1, 1))
			test/dc.year == 1
			test/dc.invert == True

def test_next_month(test):
	tokyo = library.zone('Asia/Tokyo')
	for month in range(1, 12):
		for z in (utc, tokyo):
			dc = calculate(instant(z, 2020, month, 1), instant(z, 2020, month + 1, 1))
			test/dc.year == 0
			test/dc.month == 1
			test/dc.day == 0

	dc = calculate(instant(utc, 2020, 12, 1), instant(utc, 2021, 1, 1))
	expect(test, dc, year=0, month=1, day=0)

def test_previous_month(test):
	kolkata = library.zone('Asia/Kolkata')
	for month in range(2, 13):
		for z in (utc, kolkata):
			dc = calculate(instant(z, 2020, month, 1), instant(z, 2020, month - 1, 1))
			test/dc.month == 1
			test/dc.invert == True

def test_next_week(test):
	midway = library.zone('Pacific/Midway')
	for d in (7, 14, 21):
		for z in (utc, midway):
			dc = calculate(instant(z, 2020, 12, d), instant(z, 2020, 12, d + 7))
			expect(test, dc, week=1, modulo_days=0, day=7, invert=False)

def test_previous_week(test):
	lome = library.zone('Africa/Lome')
	for d in (14, 21, 28):
		for z in (utc, lome):
			dc = calculate(instant(z, 2020, 12, d), instant(z, 2020, 12, d - 7))
			expect(test, dc, week=1, modulo_days=0, day=7, invert=True)

def test_next_day(test):
	dc = calculate(instant(utc, 2020, 12, 31), instant(utc, 2021, 1, 1))
	expect(test, dc, year=0, month=0, day=1, interval_days=1, interval_hours=24)

	dc = calculate(instant(utc, 2021, 1, 1), instant(utc, 2020, 12, 31))
	expect(test, dc, day=1, invert=True)

def test_next_hour_minute_second(test):
	paris = library.zone('Europe/Paris')
	for z in (utc, paris):
		start = instant(z, 2020, 12, 31, 23, 59, 59)
		dc = calculate(start, instant(z, 2021, 1, 1, 0, 59, 59))
		expect(test, dc, hour=1, interval_hours=1, interval_minutes=60, day=0)

		dc = calculate(start, instant(z, 2021, 1, 1, 0, 0, 59))
		expect(test, dc, minute=1, interval_minutes=1, interval_seconds=60)

		dc = calculate(start, instant(z, 2021, 1, 1))
		expect(test, dc, second=1, interval_seconds=1, interval_minutes=0, year=0)

		dc = calculate(instant(z, 2021, 1, 1), start)
		expect(test, dc, second=1, interval_seconds=1, invert=True)

def test_year_month_day_hour_minute_second(test):
	start = instant(utc, 2020, 1, 6)
	end = instant(utc, 2021, 2, 14, 1, 1, 1)
	seconds = end.seconds - start.seconds

	expected = dict(
		year = 1,
		month = 1,
		week = 1,
		modulo_days = 1,
		day = 8,
		hour = 1,
		minute = 1,
		second = 1,
		interval_seconds = seconds,
		interval_minutes = seconds // 60,
		interval_hours = seconds // 3600,
		interval_days = seconds // 86400,
	)

	test/calculate(start, end) == components.DateComponent(invert=False, **expected)
	test/calculate(end, start) == components.DateComponent(invert=True, **expected)

def test_symmetry(test):
	la = library.zone('America/Los_Angeles')
	pairs = [
		(instant(utc, 2020, 2, 29, 12, 30, 45), instant(utc, 2021, 3, 31, 14, 45, 30)),
		(instant(utc, 2023, 1, 31), instant(utc, 2023, 3, 1, 5)),
		(instant(la, 2022, 3, 12, 2, 30), instant(la, 2022, 11, 6, 3)),
	]
	for a, b in pairs:
		forward = calculate(a, b)
		backward = calculate(b, a)
		test/forward.invert == False
		test/backward.invert == True
		test/forward._replace(invert=True) == backward

def test_zero_interval(test):
	pit = instant(utc, 2022, 1, 1)
	test/calculate(pit, pit) == components.DateComponent(**zeros())

	# The same instant presented by different zones.
	t = 1672531200
	ny = library.unix(t, library.zone('America/New_York'))
	london = library.unix(t, library.zone('Europe/London'))
	test/calculate(ny, london) == components.DateComponent(**zeros())

def test_flat_totals(test):
	a = instant(utc, 2019, 5, 17, 3, 4, 5)
	for b in [
		instant(utc, 2019, 5, 17, 3, 4, 6),
		instant(utc, 2020, 8, 1, 0, 0, 0),
		instant(utc, 2018, 1, 1, 23, 59, 59),
	]:
		dc = calculate(a, b)
		s = abs(b.seconds - a.seconds)
		test/dc.interval_seconds == s
		test/dc.interval_minutes == s // 60
		test/dc.interval_hours == s // 3600
		test/dc.interval_days == s // 86400
		test/dc.day == dc.week * 7 + dc.modulo_days
		test/dc.hour == dc.interval_hours % 24
		test/dc.minute == dc.interval_minutes % 60
		test/dc.second == dc.interval_seconds % 60

def test_month_borrow(test):
	dc = calculate(instant(utc, 2020, 1, 31), instant(utc, 2020, 2, 1))
	expect(test, dc, year=0, month=0, day=1, interval_days=1)

	# Big month to small month and back.
	dc = calculate(instant(utc, 2023, 1, 31), instant(utc, 2023, 2, 28))
	expect(test, dc, month=0, day=28)

	dc = calculate(instant(utc, 2024, 1, 31), instant(utc, 2024, 2, 29))
	expect(test, dc, month=0, day=29)

	dc = calculate(instant(utc, 2023, 1, 31), instant(utc, 2023, 3, 1))
	expect(test, dc, month=1, day=1)

	dc = calculate(instant(utc, 2023, 7, 31), instant(utc, 2023, 8, 1))
	expect(test, dc, month=0, day=1, interval_days=1)

	dc = calculate(instant(utc, 2023, 2, 28), instant(utc, 2023, 3, 1))
	expect(test, dc, month=0, day=1, interval_days=1)

def test_month_borrow_across_year(test):
	dc = calculate(instant(utc, 2022, 12, 15), instant(utc, 2023, 1, 10))
	expect(test, dc, year=0, month=0, day=26)

	dc = calculate(instant(utc, 2022, 12, 31, 23, 59, 59), instant(utc, 2023, 1, 1))
	expect(test, dc, year=0, month=0, day=0, second=1, interval_seconds=1)

	dc = calculate(instant(utc, 2023, 12, 31, 23, 59, 59), instant(utc, 2023, 1, 1))
	expect(test, dc, year=0, month=11, day=30, hour=23, minute=59, second=59, invert=True)

def test_leap_day(test):
	dc = calculate(instant(utc, 2020, 2, 28), instant(utc, 2020, 3, 1))
	expect(test, dc, interval_days=2, invert=False)

	dc = calculate(instant(utc, 2024, 2, 28), instant(utc, 2024, 3, 1))
	expect(test, dc, interval_days=2, month=0, day=2)

	dc = calculate(instant(utc, 2023, 2, 28), instant(utc, 2023, 3, 1))
	expect(test, dc, interval_days=1)

	dc = calculate(instant(utc, 2020, 2, 29, 12, 30, 45), instant(utc, 2021, 3, 31, 14, 45, 30))
	expect(test, dc, year=1, month=1, day=2, hour=2, minute=14, second=45)

def test_exact_years(test):
	dc = calculate(instant(utc, 2022, 1, 1), instant(utc, 2023, 1, 1))
	expect(test, dc, year=1, month=0, day=0, interval_days=365)

	dc = calculate(instant(utc, 2020, 1, 1), instant(utc, 2021, 1, 1))
	expect(test, dc, year=1, month=0, day=0, interval_days=366)

	la = library.zone('America/Los_Angeles')
	dc = calculate(instant(la, 2022, 1, 1), instant(la, 2023, 1, 1))
	expect(test, dc, year=1, month=0, day=0, hour=0, minute=0, second=0)

def test_large_span(test):
	dc = calculate(instant(utc, 1000, 1, 1), instant(utc, 3000, 1, 1))
	expect(test, dc, year=2000, month=0, day=0, invert=False)

def test_small_span_day_boundary(test):
	dc = calculate(instant(utc, 2023, 3, 1, 23), instant(utc, 2023, 3, 2, 1))
	expect(test, dc, day=0, hour=2, interval_hours=2)

	dc = calculate(instant(utc, 2023, 3, 31, 23), instant(utc, 2023, 4, 1, 1))
	expect(test, dc, month=0, day=0, hour=2)

def test_date_line(test):
	auckland = library.zone('Pacific/Auckland')
	la = library.zone('America/Los_Angeles')

	a = instant(auckland, 2023, 1, 1)
	b = instant(la, 2022, 12, 31)

	dc = calculate(a, b)
	test/dc.invert == True
	test/dc.interval_hours > 0

	dc = calculate(b, a)
	test/dc.invert == False
	test/dc.interval_hours > 0

def test_dst_start_los_angeles(test):
	la = library.zone('America/Los_Angeles')
	dc = calculate(instant(la, 2022, 3, 13, 1, 59, 59), instant(la, 2022, 3, 13, 3))
	test/dc == components.DateComponent(**zeros(second=1, interval_seconds=1))

	dc = calculate(instant(la, 2022, 3, 14, 1, 30), instant(la, 2022, 3, 14, 3, 30))
	expect(test, dc, hour=2)

def test_dst_end_los_angeles(test):
	la = library.zone('America/Los_Angeles')
	dc = calculate(instant(la, 2022, 11, 6, 0, 59, 59), instant(la, 2022, 11, 6, 2))
	test/dc == components.DateComponent(**zeros(
		hour=2, second=1,
		interval_seconds=7201, interval_minutes=120, interval_hours=2,
	))

	dc = calculate(instant(la, 2022, 11, 6, 0, 30), instant(la, 2022, 11, 6, 2, 30))
	expect(test, dc, hour=3, interval_hours=3, day=0)

def test_dst_start_sydney(test):
	sydney = library.zone('Australia/Sydney')
	dc = calculate(instant(sydney, 2022, 10, 2, 1, 59, 59), instant(sydney, 2022, 10, 2, 3))
	test/dc == components.DateComponent(**zeros(second=1, interval_seconds=1))

def test_dst_paris(test):
	paris = library.zone('Europe/Paris')
	dc = calculate(instant(paris, 2022, 3, 27, 1, 59, 59), instant(paris, 2022, 3, 27, 3))
	test/dc == components.DateComponent(**zeros(second=1, interval_seconds=1))

	dc = calculate(instant(paris, 2022, 10, 30, 3), instant(paris, 2022, 10, 30, 1, 59, 59))
	test/dc == components.DateComponent(**zeros(
		hour=2, second=1,
		interval_seconds=7201, interval_minutes=120, interval_hours=2,
		invert=True,
	))

def test_dst_anchor_in_gap(test):
	"""
	# The day count is anchored at a time of day that does not exist
	# on the end's date.
	"""
	la = library.zone('America/Los_Angeles')
	dc = calculate(instant(la, 2022, 2, 13, 2, 30), instant(la, 2022, 3, 13, 12))
	expect(test, dc, year=0, month=1, day=0)

	dc = calculate(instant(la, 2022, 2, 13, 2, 30), instant(la, 2022, 3, 14, 4))
	expect(test, dc, month=1, day=1)

def test_nearest_day_before(test):
	nearest = components.nearest_day_before
	test/nearest(utc, 2023, 2, 30).select('date') == (2023, 2, 28)
	test/nearest(utc, 2024, 2, 30).select('date') == (2024, 2, 29)
	test/nearest(utc, 2023, 1, 32).select('date') == (2023, 1, 31)
	test/nearest(utc, 2023, 4, 15, 6, 7, 8).select() == (2023, 4, 15, 6, 7, 8)
	test/ValueError ^ (lambda: nearest(utc, 2023, 13, 1))
	test/ValueError ^ (lambda: nearest(utc, 2023, 1, 0))

def test_nearest_day_before_probes(test):
	z = CountingZone(utc)
	components.nearest_day_before(z, 2023, 2, 31)
	test/len(z.probes) == 1

	z = CountingZone(utc)
	test/ValueError ^ (lambda: components.nearest_day_before(z, 2023, 1, 31, 24))
	test/len(z.probes) == 0

def test_nearest_day_before_calendar_walk(test):
	"""
	# The walk toward a valid day is bounded by the longest month.
	"""
	from .. import types
	local_seconds = types.local_seconds
	calls = []
	def counting(*args):
		calls.append(args)
		return local_seconds(*args)

	types.local_seconds = counting
	test.exits.callback(setattr, types, 'local_seconds', local_seconds)

	pit = components.nearest_day_before(utc, 2023, 2, 5000)
	test/pit.select('date') == (2023, 2, 28)
	test/len(calls) <= 31
	test/len(calls) == 4

	del calls[:]
	test/ValueError ^ (lambda: components.nearest_day_before(utc, 2023, 2, 5000, 24))
	test/len(calls) == 31

def test_nearest_day_before_gap(test):
	la = library.zone('America/Los_Angeles')
	pit = components.nearest_day_before(la, 2022, 3, 13, 2, 30)
	# The day is kept; the time is moved past the gap.
	test/pit.select('date') == (2022, 3, 13)
	test/pit.select('timeofday') == (3, 30, 0)

def test_nearest_day_before_ambiguous(test):
	la = library.zone('America/Los_Angeles')
	pit = components.nearest_day_before(la, 2022, 11, 6, 1, 30)
	test/pit.select() == (2022, 11, 6, 1, 30, 0)
	test/(pit.seconds in [x.seconds for x in library.Instant.of(la, 2022, 11, 6, 1, 30)]) == True

if __name__ == '__main__':
	import sys; from contention import engine
	engine.execute(sys.modules[__name__])
