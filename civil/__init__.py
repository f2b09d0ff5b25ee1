"""
# Civil time: calendar systems, calendar fields, and time zone transitions over
# integer millisecond instants.
"""
