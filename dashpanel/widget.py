"""
A minimal widget tree for hosting layout panels.

Widgets own an ordered list of children, hold a non-owning reference to their
parent, track attachment and visibility, carry their own size limits and box
sizing, and receive their final rectangle through set_offset_geometry(). All
lifecycle notifications are delivered as messages through process_message().
"""

from __future__ import annotations

import math
from typing import NamedTuple
from weakref import ref

from .constants import (
	MSG_AFTER_ATTACH, MSG_AFTER_SHOW, MSG_BEFORE_DETACH, MSG_BEFORE_HIDE,
	MSG_CHILD_ADDED, MSG_CHILD_HIDDEN, MSG_CHILD_MOVED, MSG_CHILD_REMOVED, MSG_CHILD_SHOWN,
	MSG_LAYOUT_REQUEST, MSG_RESIZE, MSG_UPDATE_REQUEST,
)
from .messaging import (
	ChildMessage, Message, ResizeMessage, UPDATE_REQUEST,
	clear_message_data, discard_message, post_message, send_message,
)

# -------
# Geometry value types
# -------

class Rect(NamedTuple):
	x: float
	y: float
	width: float
	height: float

class SizeLimits(NamedTuple):
	min_width: float = 0
	min_height: float = 0
	max_width: float = math.inf
	max_height: float = math.inf

	def clamp(self, width, height):
		"""Clamp a size to these limits. The minimum wins over the maximum."""
		return (
			max(self.min_width, min(width, self.max_width)),
			max(self.min_height, min(height, self.max_height)),
		)

class BoxSizing(NamedTuple):
	"""Padding and border widths, each stored as (left, top, right, bottom)."""
	padding: tuple = (0, 0, 0, 0)
	border: tuple = (0, 0, 0, 0)

	@property
	def padding_left(self):
		return self.padding[0]

	@property
	def padding_top(self):
		return self.padding[1]

	@property
	def horizontal_sum(self):
		return self.padding[0] + self.padding[2] + self.border[0] + self.border[2]

	@property
	def vertical_sum(self):
		return self.padding[1] + self.padding[3] + self.border[1] + self.border[3]

def expand_box_argument(value):
	"""Expand a single value, a pair or a 4-tuple to (left, top, right, bottom)."""
	if not isinstance(value, (list, tuple)):
		return (value,) * 4
	if len(value) == 1:
		return (value[0],) * 4
	if len(value) == 2:
		return (value[0], value[1]) * 2
	if len(value) == 4:
		return tuple(value)
	raise ValueError(f"Invalid box value {value!r}: expected 1, 2 or 4 values")

# -------

class Widget:
	"""A node in the widget tree."""

	def __init__(self, name: str | None = None):
		self.name = name
		self._parent_ref = None
		self._children = []
		self._attached = False
		self._hidden = False
		self._size_limits = SizeLimits()
		self._box_sizing = BoxSizing()
		# [x, y] and [width, height] of the last offset geometry
		self._offset_pos = [0, 0]
		self._offset_size = [0, 0]
		self._has_geometry = False

	def __repr__(self):
		label = f" {self.name!r}" if self.name else ""
		return f"<{self.__class__.__name__}{label}>"

	# --- tree

	@property
	def parent(self) -> Widget | None:
		return self._parent_ref() if self._parent_ref is not None else None

	@property
	def children(self) -> tuple:
		return tuple(self._children)

	@property
	def child_count(self) -> int:
		return len(self._children)

	def child_at(self, index: int) -> Widget:
		return self._children[index]

	def child_index(self, child) -> int:
		try:
			return self._children.index(child)
		except ValueError:
			return -1

	def add_child(self, child: Widget) -> None:
		self.insert_child(len(self._children), child)

	def insert_child(self, index: int, child: Widget) -> None:
		"""Insert a child, moving it if it already belongs to this widget."""
		if child is self:
			raise ValueError("A widget cannot be added to itself")
		current = self.child_index(child)
		if current != -1:
			index = max(0, min(index, len(self._children) - 1))
			if index != current:
				self._children.insert(index, self._children.pop(current))
				send_message(self, ChildMessage(MSG_CHILD_MOVED, child))
			return
		if child.parent is not None:
			child.parent.remove_child(child)
		index = max(0, min(index, len(self._children)))
		self._children.insert(index, child)
		child._parent_ref = ref(self)
		send_message(self, ChildMessage(MSG_CHILD_ADDED, child))

	def remove_child(self, child: Widget) -> None:
		index = self.child_index(child)
		if index == -1:
			raise ValueError(f"{child!r} is not a child of {self!r}")
		del self._children[index]
		child._parent_ref = None
		send_message(self, ChildMessage(MSG_CHILD_REMOVED, child))

	def set_children(self, children) -> None:
		"""Replace all children with the given sequence, in order."""
		for child in tuple(self._children):
			self.remove_child(child)
		for child in children:
			self.add_child(child)

	def dispose(self) -> None:
		clear_message_data(self)
		if self.parent is not None:
			self.parent.remove_child(self)
		for child in tuple(self._children):
			child.dispose()

	# --- attachment and visibility

	@property
	def is_attached(self) -> bool:
		return self._attached

	@property
	def is_hidden(self) -> bool:
		return self._hidden

	@property
	def is_visible(self) -> bool:
		if not self._attached or self._hidden:
			return False
		parent = self.parent
		return parent is None or parent.is_visible

	def attach(self) -> None:
		"""Attach this widget as the root of a live tree."""
		assert self.parent is None, "Only a root widget can be attached"
		if not self._attached:
			send_message(self, Message(MSG_AFTER_ATTACH))

	def detach(self) -> None:
		assert self.parent is None, "Only a root widget can be detached"
		if self._attached:
			send_message(self, Message(MSG_BEFORE_DETACH))

	def show(self) -> None:
		if not self._hidden:
			return
		self._hidden = False
		if self.parent is not None:
			send_message(self.parent, ChildMessage(MSG_CHILD_SHOWN, self))
		if self.is_visible:
			send_message(self, Message(MSG_AFTER_SHOW))

	def hide(self) -> None:
		if self._hidden:
			return
		if self.is_visible:
			send_message(self, Message(MSG_BEFORE_HIDE))
		self._hidden = True
		if self.parent is not None:
			send_message(self.parent, ChildMessage(MSG_CHILD_HIDDEN, self))

	# --- size limits and box sizing

	@property
	def size_limits(self) -> SizeLimits:
		return self._size_limits

	def set_size_limits(self, min_width=0, min_height=0, max_width=math.inf, max_height=math.inf) -> None:
		self._size_limits = SizeLimits(min_width, min_height, max_width, max_height)

	@property
	def box_sizing(self) -> BoxSizing:
		return self._box_sizing

	def set_padding(self, padding) -> None:
		self._box_sizing = self._box_sizing._replace(padding=expand_box_argument(padding))

	def set_border(self, border) -> None:
		self._box_sizing = self._box_sizing._replace(border=expand_box_argument(border))

	# --- geometry

	@property
	def offset_rect(self) -> Rect:
		return Rect(self._offset_pos[0], self._offset_pos[1], self._offset_size[0], self._offset_size[1])

	@property
	def has_offset_geometry(self) -> bool:
		return self._has_geometry

	def set_offset_geometry(self, x, y, width, height) -> None:
		"""Set the widget rectangle, sending a resize message if the size changed."""
		resized = self._offset_size[0] != width or self._offset_size[1] != height or not self._has_geometry
		self._offset_pos[0] = x
		self._offset_pos[1] = y
		self._offset_size[0] = width
		self._offset_size[1] = height
		self._has_geometry = True
		if resized and self.is_visible:
			send_message(self, ResizeMessage(MSG_RESIZE, width, height))

	def clear_offset_geometry(self) -> None:
		self._offset_pos[:] = (0, 0)
		self._offset_size[:] = (0, 0)
		self._has_geometry = False

	def update(self, immediate: bool = False) -> None:
		"""Request a layout update, now or on the next message flush.

		An immediate update supersedes one that is still queued.
		"""
		if immediate:
			discard_message(self, MSG_UPDATE_REQUEST)
			send_message(self, UPDATE_REQUEST)
		else:
			post_message(self, UPDATE_REQUEST)

	# --- message dispatch

	def process_message(self, msg) -> None:
		kind = msg.type
		if kind == MSG_RESIZE:
			self.on_resize(msg)
		elif kind == MSG_UPDATE_REQUEST:
			self.on_update_request(msg)
		elif kind == MSG_LAYOUT_REQUEST:
			self.on_layout_request(msg)
		elif kind == MSG_CHILD_ADDED:
			self.on_child_added(msg)
		elif kind == MSG_CHILD_REMOVED:
			self.on_child_removed(msg)
		elif kind == MSG_CHILD_MOVED:
			self.on_child_moved(msg)
		elif kind == MSG_CHILD_SHOWN:
			self.on_child_shown(msg)
		elif kind == MSG_CHILD_HIDDEN:
			self.on_child_hidden(msg)
		elif kind == MSG_AFTER_ATTACH:
			self._attached = True
			self.on_after_attach(msg)
			for child in tuple(self._children):
				send_message(child, msg)
		elif kind == MSG_BEFORE_DETACH:
			for child in tuple(self._children):
				send_message(child, msg)
			self.on_before_detach(msg)
			self._attached = False
		elif kind == MSG_AFTER_SHOW:
			self.on_after_show(msg)
			for child in tuple(self._children):
				if not child.is_hidden:
					send_message(child, msg)
		elif kind == MSG_BEFORE_HIDE:
			for child in tuple(self._children):
				if not child.is_hidden:
					send_message(child, msg)
			self.on_before_hide(msg)

	# Default handlers do nothing; layout widgets override what they need.

	def on_resize(self, msg): pass
	def on_update_request(self, msg): pass
	def on_layout_request(self, msg): pass
	def on_child_added(self, msg): pass
	def on_child_removed(self, msg): pass
	def on_child_moved(self, msg): pass
	def on_child_shown(self, msg): pass
	def on_child_hidden(self, msg): pass
	def on_after_attach(self, msg): pass
	def on_before_detach(self, msg): pass
	def on_after_show(self, msg): pass
	def on_before_hide(self, msg): pass
