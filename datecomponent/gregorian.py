"""
# Proleptic Gregorian calendar functions and data.

# Day counts are relative to the Unix epoch, 1970-01-01, so that they can be
# combined with UTC seconds without further adjustment.
"""

#: number of years in a gregorian cycle.
years_in_cycle = 400

#: number of months in a year.
months_in_year = 12

#: number of days in the longest month.
max_days_in_month = 31

#: Definition of a year in terms of gregorian month-to-days.
calendar_year = (
	31, 28, 31, 30,
	31, 30, 31, 31,
	30, 31, 30, 31
)

#: Definition of a leap year in terms of gregorian month-to-days.
calendar_leap = (calendar_year[0], calendar_year[1] + 1) + calendar_year[2:] # Feb29

#: Number of days in a full gregorian cycle.
days_in_cycle = (years_in_cycle * 365) + (years_in_cycle // 4) - (years_in_cycle // 100) + 1

##
# Days between 0000-03-01 and 1970-01-01. The internal count starts in March
# so that the leap day is the last day of the shifted year.
epoch_offset = 719468

#: Weekday of the epoch; 0 is Sunday.
epoch_weekday = 4

def year_is_leap(y):
	"""
	# Given a gregorian calendar year, determine whether it is a leap year.
	"""
	if y % 4 == 0 and (y % 400 == 0 or not y % 100 == 0):
		return True
	return False

def days_in_month(year, month):
	"""
	# The number of days in the &month of the &year. &month is one-based.
	"""
	if year_is_leap(year):
		return calendar_leap[month-1]
	return calendar_year[month-1]

def date_is_valid(year, month, day):
	"""
	# Whether the given date exists in the calendar.
	"""
	if month < 1 or month > months_in_year:
		return False
	return 1 <= day <= days_in_month(year, month)

def days_from_date(date, divmod=divmod):
	"""
	# Convert a Gregorian date in the common form, (year, month, day), to the number
	# of days since the Unix epoch.
	"""
	year, month, day = date
	if month <= 2:
		year -= 1
	cycles, year_of_cycle = divmod(year, years_in_cycle)
	month_of_year = (month + 9) % months_in_year # March is zero.
	day_of_year = (153 * month_of_year + 2) // 5 + day - 1
	day_of_cycle = (year_of_cycle * 365) + (year_of_cycle // 4) - (year_of_cycle // 100) + day_of_year
	return (cycles * days_in_cycle) + day_of_cycle - epoch_offset

def date_from_days(days, divmod=divmod):
	"""
	# Convert the given days since the Unix epoch into a Gregorian date in the
	# common form: (year, month, day).
	"""
	cycles, day_of_cycle = divmod(days + epoch_offset, days_in_cycle)
	year_of_cycle = (
		day_of_cycle
		- day_of_cycle // 1460
		+ day_of_cycle // 36524
		- day_of_cycle // (days_in_cycle - 1)
	) // 365
	day_of_year = day_of_cycle - ((365 * year_of_cycle) + (year_of_cycle // 4) - (year_of_cycle // 100))
	month_of_year = (5 * day_of_year + 2) // 153
	day = day_of_year - (153 * month_of_year + 2) // 5 + 1
	month = month_of_year + 3 if month_of_year < 10 else month_of_year - 9
	year = (cycles * years_in_cycle) + year_of_cycle
	if month <= 2:
		year += 1
	return (year, month, day)

def weekday(days):
	"""
	# The day of the week of the given days since the epoch; Sunday is zero.
	"""
	return (days + epoch_weekday) % 7

def previous_month(year, month):
	"""
	# The (year, month) pair preceding the given one.
	"""
	if month == 1:
		return (year - 1, months_in_year)
	return (year, month - 1)
