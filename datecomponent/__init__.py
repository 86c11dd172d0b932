"""
[ About ]
---------

datecomponent computes the difference between two points in time, each attached
to a time zone, in two forms at once: calendar components, years through
seconds, and flat totals of days, hours, minutes, and seconds.

The surface functionality is provided by &.library:

#!/pl/python
	from datecomponent import library as libdc

	la = libdc.zone('America/Los_Angeles')
	start = libdc.instant(la, 2020, 1, 6)
	end = libdc.instant(la, 2021, 2, 14, 1, 1, 1)
	diff = libdc.calculate(start, end)
	assert (diff.year, diff.month, diff.day) == (1, 1, 8)
	assert (diff.week, diff.modulo_days) == (1, 1)

[ Calendar Components ]
-----------------------

Years, months, and days are measured on the calendar of the earlier instant's
zone. When the end has not reached the day of the month of the start, a month is
borrowed and the days are counted from the same day of the previous month. Days
that do not exist in that month fall back to the nearest valid day:

#!/pl/python
	jan31 = libdc.instant(libdc.utc, 2023, 1, 31)
	mar01 = libdc.instant(libdc.utc, 2023, 3, 1)
	diff = libdc.calculate(jan31, mar01)
	assert (diff.month, diff.day) == (1, 1) # Feb 28th, then one day.

The day count is only advanced by whole days; two seconds across midnight is
zero days.

[ Daylight Savings ]
--------------------

Hours, minutes, and seconds are taken from the exact duration rather than
subtracting clock readings. One second before the spring forward transition
to the first second after it is one second:

#!/pl/python
	start = libdc.instant(la, 2022, 3, 13, 1, 59, 59)
	end = libdc.instant(la, 2022, 3, 13, 3, 0, 0)
	assert libdc.calculate(start, end).second == 1

[ Time Zones ]
--------------

Zones are read from TZif files. The `TZDIR` directory is searched first, then
the system's zoneinfo directories, and finally the `tzdata` distribution.
`TZ` selects the zone returned by `libdc.zone()` when no name is given.
"""
__pkg_bottom__ = True
