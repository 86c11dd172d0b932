"""
# Measure the execution time of &.components.calculate for a set of
# representative intervals and print the mean time per call.

# The number of iterations may be given as the first argument.
"""
import sys
import timeit
from .. import library
from .. import project

def cases(zone):
	utc = library.utc
	return [
		('calculate simple',
			library.instant(utc, 2023, 1, 1), library.instant(utc, 2023, 1, 2)),
		('calculate cross month',
			library.instant(utc, 2023, 1, 31), library.instant(utc, 2023, 2, 1)),
		('calculate cross year',
			library.instant(utc, 2022, 12, 31, 23, 59, 59), library.instant(utc, 2023, 1, 1)),
		('calculate daylight saving',
			library.instant(zone, 2023, 3, 12, 1, 30), library.instant(zone, 2023, 3, 12, 3, 30)),
	]

def measure(iterations, zone, calculate=library.calculate):
	for title, start, end in cases(zone):
		elapsed = timeit.timeit(lambda: calculate(start, end), number=iterations)
		yield title, (elapsed / iterations) * 1000000000

def main(argv):
	iterations = int(argv[1]) if len(argv) > 1 else 10000
	zone = library.zone('America/Los_Angeles')

	sys.stdout.write("%s %s: %d iterations\n" %(project.name, project.version, iterations))

	for title, nanoseconds in measure(iterations, zone):
		sys.stdout.write("%-28s %12.0f ns\n" %(title, nanoseconds))

if __name__ == '__main__':
	main(sys.argv)
