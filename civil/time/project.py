identity = 'http://civil.dev/project/python/civil.time'
name = 'time'
abstract = 'Calendar field composition and zone transition engine over millisecond instants.'
icon = '⌛'
study = 'horology'

controller = 'civil.dev'
contact = 'mailto:maintainers@civil.dev'

version_info = (0, 3, 0)
version = '.'.join(map(str, version_info))
