"""
General utility functions for the dashpanel command line.

This module contains argument parsing helpers that are not specific to the
layout engine, turning command line strings into sizes and padding values.
"""

import re


_NUMBER = r'\d+(?:\.\d+)?'


def _to_number(value_str):
	"""Convert a numeric string to int when it has no fractional part."""
	value = float(value_str)
	return int(value) if value.is_integer() else value


def parse_size(size_str):
	"""
	Parse a panel size string into a (width, height) tuple.

	Supports:
	- 'WIDTHxHEIGHT': '800x600', '1200X900', '640.5x480'
	- A single number sets the width only, height defaults to 0: '800'

	Returns None if parsing fails.
	"""
	if not size_str:
		return None

	size_str = size_str.strip().lower()

	# Reject embedded whitespace
	if ' ' in size_str:
		return None

	if re.match(rf'^{_NUMBER}$', size_str):
		return (_to_number(size_str), 0)

	match = re.match(rf'^({_NUMBER})x({_NUMBER})$', size_str)
	if not match:
		return None

	return (_to_number(match.group(1)), _to_number(match.group(2)))


def parse_width_list(widths_str, height=0):
	"""
	Parse a comma separated list of widths into a list of (width, height) sizes.

	Examples:
	- '400,688,1200' -> [(400, 0), (688, 0), (1200, 0)]
	- '687' -> [(687, 0)]

	Returns None if any entry fails to parse or the list is empty.
	"""
	if not widths_str:
		return None

	sizes = []
	for part in widths_str.split(','):
		part = part.strip()
		if not re.match(rf'^{_NUMBER}$', part):
			return None
		sizes.append((_to_number(part), height))

	return sizes


def parse_padding(padding_str):
	"""
	Parse a padding string into 1, 2 or 4 non-negative numbers.

	Examples:
	- '10' -> 10
	- '5,10' -> (5, 10)
	- '1,2,3,4' -> (1, 2, 3, 4)    # left, top, right, bottom

	Returns None if parsing fails.
	"""
	if not padding_str:
		return None

	parts = [part.strip() for part in padding_str.split(',')]
	if len(parts) not in (1, 2, 4):
		return None
	if not all(re.match(rf'^{_NUMBER}$', part) for part in parts):
		return None

	values = tuple(_to_number(part) for part in parts)
	return values[0] if len(values) == 1 else values


def format_size(width, height):
	"""
	Format a size for display.

	Examples:
	- (800, 600) -> "800x600"
	- (640.5, 480) -> "640.5x480"
	"""
	return f"{width:g}x{height:g}"
