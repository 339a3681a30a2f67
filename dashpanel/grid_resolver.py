"""
Grid resolution for dashboard panels.

Pure functions that turn panel configuration, item placements and an inner
content width into pixel rectangles. There are two layout modes:

GRID MODE:
	Items sit at absolute (row, column) cells. Columns share the inner width
	evenly, clamped to the column size limits, and rows follow the columns
	through the aspect ratio, clamped to the row size limits.

SINGLE-COLUMN MODE:
	Used when the ideal column size falls below the minimum column size.
	Items are ordered by (row, column) and stacked vertically in one column.
	Declared positions only act as the sort key.

Nothing here mutates its inputs; every result is recomputed per pass.
"""

from __future__ import annotations

from typing import Any, NamedTuple

from . import constants
from .widget import Rect, SizeLimits

# -------
# Input and output records
# -------

class PanelConfig(NamedTuple):
	aspect_ratio: float = constants.DEFAULT_ASPECT_RATIO
	column_count: int = constants.DEFAULT_COLUMN_COUNT
	min_row_size: float = constants.DEFAULT_MIN_ROW_SIZE
	min_column_size: float = constants.DEFAULT_MIN_COLUMN_SIZE
	max_row_size: float = constants.DEFAULT_MAX_ROW_SIZE
	max_column_size: float = constants.DEFAULT_MAX_COLUMN_SIZE
	row_spacing: int = constants.DEFAULT_ROW_SPACING
	column_spacing: int = constants.DEFAULT_COLUMN_SPACING

class ItemPlacement(NamedTuple):
	row: int = constants.DEFAULT_ROW
	column: int = constants.DEFAULT_COLUMN
	row_span: int = constants.DEFAULT_ROW_SPAN
	column_span: int = constants.DEFAULT_COLUMN_SPAN

class LayoutEntry(NamedTuple):
	"""One item to arrange: the item itself, its placement and its own size limits."""
	item: Any
	placement: ItemPlacement = ItemPlacement()
	limits: SizeLimits = SizeLimits()

class LayoutData(NamedTuple):
	single_column: bool
	column_size: float
	row_size: float

class Arrangement(NamedTuple):
	"""The result of one placement pass.

	rects holds (item, Rect) pairs in the order the items were visited.
	extent is the sizer height: the final cursor in single-column mode, or the
	height of the occupied rows plus the vertical box sum in grid mode.
	"""
	data: LayoutData
	rects: tuple
	extent: float
	max_row: int | None = None

# -------

def compute_layout_data(config: PanelConfig, inner_width: float) -> LayoutData:
	"""Decide the layout mode and the effective cell size for an inner width.

	The inner width is the offset width minus border and padding.
	"""
	column_count = config.column_count
	fixed_space = config.column_spacing * (column_count - 1)
	ideal_column_size = (inner_width - fixed_space) / column_count

	min_column_size = config.min_column_size
	max_column_size = config.max_column_size
	if ideal_column_size < min_column_size:
		column_size = max(min_column_size, min(inner_width, max_column_size))
		return LayoutData(True, column_size, config.min_row_size)

	column_size = max(min_column_size, min(ideal_column_size, max_column_size))
	ideal_row_size = column_size * config.aspect_ratio
	row_size = max(config.min_row_size, min(ideal_row_size, config.max_row_size))
	return LayoutData(False, column_size, row_size)

def placement_sort_key(entry: LayoutEntry):
	return (entry.placement.row, entry.placement.column)

def span_size(span: int, cell_size: float, spacing: float) -> float:
	"""Size of a run of cells including the spacing between them."""
	return span * cell_size + (span - 1) * spacing

def arrange(config: PanelConfig, entries, inner_width: float,
		left: float = 0, top: float = 0, vertical_box: float = 0) -> Arrangement | None:
	"""Compute a rectangle for every entry and the total content extent.

	Args:
		config: The panel configuration snapshot
		entries: LayoutEntry records in container order
		inner_width: Offset width minus the horizontal box sum
		left, top: Padding offsets applied to every rectangle
		vertical_box: Vertical box sum added to the grid mode extent

	Returns:
		An Arrangement, or None when there is nothing to arrange.
	"""
	entries = tuple(entries)
	if not entries:
		return None

	data = compute_layout_data(config, inner_width)
	if data.single_column:
		return _arrange_single_column(config, data, entries, left, top)
	return _arrange_grid(config, data, entries, left, top, vertical_box)

def _arrange_single_column(config, data, entries, left, top):
	row_spacing = config.row_spacing
	rects = []
	y = top
	# Sort a snapshot; the container order is left alone
	for entry in sorted(entries, key=placement_sort_key):
		size = span_size(entry.placement.row_span, data.row_size, row_spacing)
		width, height = entry.limits.clamp(data.column_size, size)
		rects.append((entry.item, Rect(left, y, width, height)))
		y += size + row_spacing
	return Arrangement(data, tuple(rects), y)

def _arrange_grid(config, data, entries, left, top, vertical_box):
	column_size, row_size = data.column_size, data.row_size
	row_spacing = config.row_spacing
	column_spacing = config.column_spacing
	max_column = config.column_count - 1
	max_row = 0
	rects = []
	for entry in entries:
		placement = entry.placement

		# Rows are unbounded, so the row and its span are used as declared
		row, row_span = placement.row, placement.row_span
		y = row * (row_size + row_spacing)
		height = span_size(row_span, row_size, row_spacing)
		max_row = max(max_row, row + row_span - 1)

		# Pull the origin column onto the grid and stop the span at its right edge.
		# The spacing term keeps the declared span.
		column, column_span = placement.column, placement.column_span
		adj_column = min(column, max_column)
		adj_column_span = min(column_span, max_column - adj_column + 1)
		x = adj_column * (column_size + column_spacing)
		width = adj_column_span * column_size + (column_span - 1) * column_spacing

		# The item's own limits win over the cell size
		width, height = entry.limits.clamp(width, height)
		rects.append((entry.item, Rect(left + x, top + y, width, height)))

	extent = span_size(max_row + 1, row_size, row_spacing) + vertical_box
	return Arrangement(data, tuple(rects), extent, max_row)
