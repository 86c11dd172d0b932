identity = 'http://fault.io/project/python/datecomponent'
name = 'datecomponent'
abstract = 'Calendar-aware differences between zoned instants.'
icon = '⌛'
study = 'horology'

version_info = (0, 1, 0)
version = '.'.join(map(str, version_info))
