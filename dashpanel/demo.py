"""
Demo dashboard and geometry dump helpers.

Builds a small dashboard of coloured tiles and prints how the panel resolves
it at different sizes, without any platform-specific rendering.
"""

from __future__ import annotations

from .dashboard_panel import DashboardPanel
from .grid_resolver import compute_layout_data
from .messaging import flush_messages
from .widget import Widget

# (name, row, column, row_span, column_span)
EXAMPLE_TILES = (
	("red-1",    0,  0, 2, 4),
	("green-1",  0,  4, 4, 4),
	("blue-1",   0,  8, 2, 2),
	("yellow-1", 0, 10, 2, 2),
	("red-2",    2,  0, 2, 2),
	("green-2",  2,  2, 4, 2),
	("blue-2",   2,  8, 2, 4),
	("yellow-2", 4,  0, 2, 2),
	("red-3",    4,  4, 2, 4),
	("green-3",  4,  8, 2, 2),
	("blue-3",   4, 10, 2, 2),
)

def build_example_dashboard(**config):
	"""Build the example dashboard panel.

	Args:
		**config: Panel configuration overrides (column_count, aspect_ratio, ...)

	Returns:
		DashboardPanel: An unattached panel holding the example tiles
	"""
	config.setdefault('max_row_size', 100)
	panel = DashboardPanel("main", **config)
	tiles = []
	for name, row, column, row_span, column_span in EXAMPLE_TILES:
		tile = Widget(name)
		DashboardPanel.set_placement(tile, row=row, column=column,
				row_span=row_span, column_span=column_span)
		tiles.append(tile)
	panel.set_children(tiles)
	return panel

def dump_widget_geometry(panel, indent="  "):
	for child in panel.children:
		x, y, w, h = child.offset_rect
		placement = DashboardPanel.item_placement(child)
		print(f"{indent}{child.name or child.__class__.__name__}: "
			f"cell=({placement.row},{placement.column}) span=({placement.row_span},{placement.column_span}) "
			f"x={x:g}, y={y:g}, width={w:g}, height={h:g}")

def run_demo(sizes=((1200, 800), (688, 600), (687, 600)), padding=0, **config):
	"""Lay out the example dashboard at each size and print the results."""
	panel = build_example_dashboard(**config)
	panel.set_padding(padding)
	panel.attach()
	flush_messages()

	print("Dashboard Panel Demo")
	print("====================")
	print(f"Columns: {panel.column_count}, spacing: {panel.row_spacing}x{panel.column_spacing}, "
		f"aspect ratio: {panel.aspect_ratio:g}")
	print(f"Panel size limits: {tuple(panel.size_limits)}")

	for width, height in sizes:
		panel.set_offset_geometry(0, 0, width, height)
		flush_messages()

		data = compute_layout_data(panel.panel_config(), width - panel.box_sizing.horizontal_sum)
		mode = "single-column" if data.single_column else "grid"
		print(f"\nLayout at {width}x{height}:")
		print(f"  Mode: {mode}, column size: {data.column_size:g}, row size: {data.row_size:g}")
		print(f"  Sizer height: {panel.sizer_height:g}")
		dump_widget_geometry(panel, "    ")

	panel.detach()
	return panel

if __name__ == "__main__":
	run_demo()
