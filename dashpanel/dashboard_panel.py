"""
A layout widget for building interactive dashboards.

DashboardPanel arranges its children on a grid with a fixed number of columns
and an effectively unbounded number of rows. Each child declares its origin
cell and span through the attached placement properties:

	DashboardPanel.set_row(widget, 2)
	DashboardPanel.set_column_span(widget, 4)

When the panel is too narrow for column_count columns at min_column_size, the
children are stacked in a single column ordered by (row, column) instead.

Configuration changes fall in two groups. Changes that only affect the row
axis or the aspect ratio request an update of the existing layout. Changes
that affect the column axis request a layout, which also recomputes the size
limits the panel reports to its own parent.
"""

from __future__ import annotations

import math

from . import constants
from .grid_resolver import ItemPlacement, LayoutEntry, PanelConfig, arrange
from .messaging import LAYOUT_REQUEST, Message, has_pending_messages, post_message, send_message
from .properties import Property, clamp_int_lower, clamp_lower
from .widget import Widget

# -------
# Change handlers
# -------

def _on_visual_changed(owner, old_value, new_value):
	owner.update()

def _on_structural_changed(owner, old_value, new_value):
	post_message(owner, LAYOUT_REQUEST)

def _on_widget_changed(owner, old_value, new_value):
	"""Relayout the panel that holds a widget whose placement changed."""
	parent = getattr(owner, 'parent', None)
	if isinstance(parent, DashboardPanel):
		parent.update()

# -------
# Attached placement properties
# -------

row_property = Property(
	value=constants.DEFAULT_ROW,
	coerce=clamp_int_lower(0),
	changed=_on_widget_changed,
)

column_property = Property(
	value=constants.DEFAULT_COLUMN,
	coerce=clamp_int_lower(0),
	changed=_on_widget_changed,
)

row_span_property = Property(
	value=constants.DEFAULT_ROW_SPAN,
	coerce=clamp_int_lower(1),
	changed=_on_widget_changed,
)

column_span_property = Property(
	value=constants.DEFAULT_COLUMN_SPAN,
	coerce=clamp_int_lower(1),
	changed=_on_widget_changed,
)

# -------

class DashboardPanel(Widget):
	"""A grid layout widget for dashboard tiles."""

	# The row height relative to the column width. Lower bound 0.
	aspect_ratio = Property(
		value=constants.DEFAULT_ASPECT_RATIO,
		coerce=clamp_lower(0),
		changed=_on_visual_changed,
	)

	# Number of columns; the number of rows is unbounded. Integer, lower bound 1.
	column_count = Property(
		value=constants.DEFAULT_COLUMN_COUNT,
		coerce=clamp_int_lower(1),
		changed=_on_structural_changed,
	)

	# Rows and columns are never sized below these. They take precedence over
	# the maximums when in conflict.
	min_row_size = Property(
		value=constants.DEFAULT_MIN_ROW_SIZE,
		coerce=clamp_lower(0),
		changed=_on_visual_changed,
	)

	min_column_size = Property(
		value=constants.DEFAULT_MIN_COLUMN_SIZE,
		coerce=clamp_lower(0),
		changed=_on_structural_changed,
	)

	max_row_size = Property(
		value=constants.DEFAULT_MAX_ROW_SIZE,
		coerce=clamp_lower(0),
		changed=_on_visual_changed,
	)

	max_column_size = Property(
		value=constants.DEFAULT_MAX_COLUMN_SIZE,
		coerce=clamp_lower(0),
		changed=_on_structural_changed,
	)

	# Fixed spacing between cells. Integer, lower bound 0.
	row_spacing = Property(
		value=constants.DEFAULT_ROW_SPACING,
		coerce=clamp_int_lower(0),
		changed=_on_visual_changed,
	)

	column_spacing = Property(
		value=constants.DEFAULT_COLUMN_SPACING,
		coerce=clamp_int_lower(0),
		changed=_on_structural_changed,
	)

	def __init__(self, name: str | None = None, **config):
		super().__init__(name)
		self.sizer_height = 0
		for key, value in config.items():
			if not isinstance(getattr(type(self), key, None), Property):
				raise TypeError(f"Unknown dashboard panel option: {key}")
			setattr(self, key, value)

	# --- attached placement properties

	@staticmethod
	def get_row(widget) -> int:
		return row_property.get(widget)

	@staticmethod
	def set_row(widget, value) -> None:
		row_property.set(widget, value)

	@staticmethod
	def get_column(widget) -> int:
		return column_property.get(widget)

	@staticmethod
	def set_column(widget, value) -> None:
		column_property.set(widget, value)

	@staticmethod
	def get_row_span(widget) -> int:
		return row_span_property.get(widget)

	@staticmethod
	def set_row_span(widget, value) -> None:
		row_span_property.set(widget, value)

	@staticmethod
	def get_column_span(widget) -> int:
		return column_span_property.get(widget)

	@staticmethod
	def set_column_span(widget, value) -> None:
		column_span_property.set(widget, value)

	@staticmethod
	def set_placement(widget, row=None, column=None, row_span=None, column_span=None) -> None:
		"""Set any of the four placement values of a widget in one call."""
		if row is not None:
			row_property.set(widget, row)
		if column is not None:
			column_property.set(widget, column)
		if row_span is not None:
			row_span_property.set(widget, row_span)
		if column_span is not None:
			column_span_property.set(widget, column_span)

	@staticmethod
	def item_placement(widget) -> ItemPlacement:
		return ItemPlacement(
			row_property.get(widget),
			column_property.get(widget),
			row_span_property.get(widget),
			column_span_property.get(widget),
		)

	def panel_config(self) -> PanelConfig:
		"""Snapshot of the current panel configuration."""
		return PanelConfig(
			aspect_ratio=self.aspect_ratio,
			column_count=self.column_count,
			min_row_size=self.min_row_size,
			min_column_size=self.min_column_size,
			max_row_size=self.max_row_size,
			max_column_size=self.max_column_size,
			row_spacing=self.row_spacing,
			column_spacing=self.column_spacing,
		)

	# --- message handlers

	def on_child_added(self, msg):
		if self.is_attached:
			send_message(msg.child, Message(constants.MSG_AFTER_ATTACH))
		self.update()

	def on_child_removed(self, msg):
		if self.is_attached:
			send_message(msg.child, Message(constants.MSG_BEFORE_DETACH))
		msg.child.clear_offset_geometry()
		self.update()

	def on_child_moved(self, msg):
		pass

	def on_after_show(self, msg):
		self.update(True)

	def on_after_attach(self, msg):
		post_message(self, LAYOUT_REQUEST)

	def on_child_shown(self, msg):
		self.update()

	def on_resize(self, msg):
		if self.is_visible:
			if msg.width < 0 or msg.height < 0:
				rect = self.offset_rect
				self._layout_children(rect.width, rect.height)
			else:
				self._layout_children(msg.width, msg.height)

	def on_update_request(self, msg):
		# A pending layout request runs the pass instead
		if has_pending_messages(self, constants.MSG_LAYOUT_REQUEST):
			return
		if self.is_visible:
			rect = self.offset_rect
			self._layout_children(rect.width, rect.height)

	def on_layout_request(self, msg):
		if self.is_attached:
			self._setup_geometry()

	# --- layout

	def _setup_geometry(self):
		"""Update the panel's own size limits, then relayout the children."""
		box = self.box_sizing
		min_width = self.min_column_size + box.horizontal_sum
		min_height = self.min_row_size + box.vertical_sum
		max_width = math.inf
		max_height = math.inf
		self.set_size_limits(min_width, min_height, max_width, max_height)

		# The parent may need to make room for the new limits
		if self.parent is not None:
			send_message(self.parent, LAYOUT_REQUEST)

		self.update(True)

	def _layout_children(self, offset_width, offset_height):
		"""Lay out the children inside the given offset size."""
		if not self._children:
			return

		box = self.box_sizing
		entries = [
			LayoutEntry(child, self.item_placement(child), child.size_limits)
			for child in self._children
		]
		arrangement = arrange(
			self.panel_config(), entries,
			offset_width - box.horizontal_sum,
			left=box.padding_left, top=box.padding_top,
			vertical_box=box.vertical_sum,
		)

		for child, rect in arrangement.rects:
			child.set_offset_geometry(*rect)
		self.sizer_height = arrangement.extent

		if constants.DEBUG_LAYOUT:
			data = arrangement.data
			mode = "single-column" if data.single_column else "grid"
			print(f"{self!r} layout {offset_width}x{offset_height}: mode={mode}, "
				f"column_size={data.column_size}, row_size={data.row_size}, "
				f"items={len(arrangement.rects)}, extent={arrangement.extent}")
