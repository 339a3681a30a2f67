"""Unit tests for the widget tree and message delivery."""

import gc
import math
import os
import sys
import unittest

# Add project root to path for imports
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from dashpanel import messaging
from dashpanel.constants import MSG_CHILD_ADDED, MSG_CHILD_MOVED, MSG_CHILD_REMOVED, MSG_RESIZE
from dashpanel.messaging import (
	Message, LAYOUT_REQUEST, UPDATE_REQUEST,
	clear_message_data, clear_pending_messages, discard_message,
	flush_messages, has_pending_messages, post_message, send_message,
)
from dashpanel.widget import BoxSizing, Rect, SizeLimits, Widget, expand_box_argument


class RecordingWidget(Widget):
	"""Widget that records every message it processes."""

	def __init__(self, name=None):
		super().__init__(name)
		self.received = []

	def process_message(self, msg):
		self.received.append(msg)
		super().process_message(msg)

	def types(self):
		return [msg.type for msg in self.received]


class TestMessaging(unittest.TestCase):
	"""Test sending, posting and conflation."""

	def setUp(self):
		messaging.clear_pending_messages()

	def tearDown(self):
		messaging.clear_pending_messages()

	def test_send_is_immediate(self):
		"""Sent messages are processed at once."""
		widget = RecordingWidget()
		send_message(widget, UPDATE_REQUEST)
		self.assertEqual(widget.types(), ['update-request'])
		self.assertFalse(has_pending_messages())

	def test_post_waits_for_flush(self):
		"""Posted messages are processed on flush."""
		widget = RecordingWidget()
		post_message(widget, UPDATE_REQUEST)
		self.assertEqual(widget.received, [])
		self.assertEqual(flush_messages(), 1)
		self.assertEqual(widget.types(), ['update-request'])

	def test_conflation(self):
		"""Repeated update and layout requests collapse while pending."""
		widget = RecordingWidget()
		for _ in range(3):
			post_message(widget, UPDATE_REQUEST)
			post_message(widget, LAYOUT_REQUEST)
		self.assertEqual(flush_messages(), 2)
		self.assertEqual(widget.types(), ['update-request', 'layout-request'])

	def test_conflation_is_per_handler(self):
		"""Requests for different handlers are all delivered."""
		first, second = RecordingWidget(), RecordingWidget()
		post_message(first, UPDATE_REQUEST)
		post_message(second, UPDATE_REQUEST)
		self.assertEqual(flush_messages(), 2)

	def test_other_messages_not_conflated(self):
		"""Only update and layout requests are conflated."""
		widget = RecordingWidget()
		post_message(widget, Message('custom'))
		post_message(widget, Message('custom'))
		self.assertEqual(flush_messages(), 2)

	def test_messages_posted_during_flush(self):
		"""Messages posted while flushing are delivered in the same flush."""
		class Chaining(RecordingWidget):
			def on_layout_request(self, msg):
				post_message(self, UPDATE_REQUEST)

		widget = Chaining()
		post_message(widget, LAYOUT_REQUEST)
		flush_messages()
		self.assertEqual(widget.types(), ['layout-request', 'update-request'])

	def test_clear_message_data(self):
		"""Pending messages for a handler can be dropped."""
		first, second = RecordingWidget(), RecordingWidget()
		post_message(first, UPDATE_REQUEST)
		post_message(second, UPDATE_REQUEST)
		clear_message_data(first)
		self.assertFalse(has_pending_messages(first))
		self.assertTrue(has_pending_messages(second))

	def test_pending_by_type(self):
		"""Pending messages can be looked up and dropped by type."""
		widget = RecordingWidget()
		post_message(widget, UPDATE_REQUEST)
		post_message(widget, LAYOUT_REQUEST)
		self.assertTrue(has_pending_messages(widget, 'layout-request'))

		discard_message(widget, 'update-request')
		self.assertFalse(has_pending_messages(widget, 'update-request'))
		self.assertTrue(has_pending_messages(widget, 'layout-request'))

		clear_pending_messages()
		self.assertFalse(has_pending_messages())

	def test_immediate_update_replaces_queued(self):
		"""An immediate update drops the queued one."""
		widget = RecordingWidget()
		widget.update()
		widget.update(True)
		self.assertFalse(has_pending_messages(widget))
		self.assertEqual(flush_messages(), 0)
		self.assertEqual(widget.types(), ['update-request'])


class TestWidgetTree(unittest.TestCase):
	"""Test parent and child management."""

	def setUp(self):
		messaging.clear_pending_messages()

	def test_add_and_remove(self):
		"""Children are tracked in order and notify the parent."""
		parent = RecordingWidget('parent')
		a, b = Widget('a'), Widget('b')
		parent.add_child(a)
		parent.add_child(b)
		self.assertEqual(parent.children, (a, b))
		self.assertIs(a.parent, parent)
		self.assertEqual(parent.child_count, 2)
		self.assertIs(parent.child_at(1), b)

		parent.remove_child(a)
		self.assertEqual(parent.children, (b,))
		self.assertIsNone(a.parent)
		self.assertEqual(parent.types(), [MSG_CHILD_ADDED, MSG_CHILD_ADDED, MSG_CHILD_REMOVED])

	def test_insert_moves_existing_child(self):
		"""Inserting a current child moves it."""
		parent = RecordingWidget('parent')
		a, b, c = Widget('a'), Widget('b'), Widget('c')
		parent.set_children([a, b, c])
		parent.insert_child(0, c)
		self.assertEqual(parent.children, (c, a, b))
		self.assertEqual(parent.types()[-1], MSG_CHILD_MOVED)

	def test_reparenting(self):
		"""Adding a child to another widget removes it from the first."""
		first, second = Widget('first'), Widget('second')
		child = Widget('child')
		first.add_child(child)
		second.add_child(child)
		self.assertEqual(first.children, ())
		self.assertIs(child.parent, second)

	def test_invalid_operations(self):
		"""Removing a stranger or adding a widget to itself raises."""
		widget = Widget()
		with self.assertRaises(ValueError):
			widget.remove_child(Widget())
		with self.assertRaises(ValueError):
			widget.add_child(widget)

	def test_parent_reference_is_not_owning(self):
		"""A child does not keep its parent alive."""
		parent = Widget('parent')
		child = Widget('child')
		parent.add_child(child)
		del parent
		gc.collect()
		self.assertIsNone(child.parent)

	def test_attach_and_visibility(self):
		"""Attachment and visibility follow the tree."""
		root = Widget('root')
		child = Widget('child')
		root.add_child(child)
		self.assertFalse(child.is_visible)

		root.attach()
		self.assertTrue(root.is_attached)
		self.assertTrue(child.is_attached)
		self.assertTrue(child.is_visible)

		root.hide()
		self.assertFalse(child.is_visible)
		root.show()
		self.assertTrue(child.is_visible)

		root.detach()
		self.assertFalse(child.is_attached)


class TestGeometry(unittest.TestCase):
	"""Test geometry value types and offset geometry."""

	def setUp(self):
		messaging.clear_pending_messages()

	def test_expand_box_argument(self):
		"""Box values expand to (left, top, right, bottom)."""
		self.assertEqual(expand_box_argument(5), (5, 5, 5, 5))
		self.assertEqual(expand_box_argument((5,)), (5, 5, 5, 5))
		self.assertEqual(expand_box_argument((1, 2)), (1, 2, 1, 2))
		self.assertEqual(expand_box_argument([1, 2, 3, 4]), (1, 2, 3, 4))
		with self.assertRaises(ValueError):
			expand_box_argument((1, 2, 3))

	def test_box_sizing_sums(self):
		"""Box sums include padding and border on both sides."""
		box = BoxSizing(padding=(1, 2, 3, 4), border=(1, 1, 1, 1))
		self.assertEqual(box.horizontal_sum, 6)
		self.assertEqual(box.vertical_sum, 8)
		self.assertEqual(box.padding_left, 1)
		self.assertEqual(box.padding_top, 2)

	def test_size_limits_clamp(self):
		"""Minimums win over maximums when clamping."""
		limits = SizeLimits(10, 20, 100, 15)
		self.assertEqual(limits.clamp(500, 5), (100, 20))
		self.assertEqual(SizeLimits().max_height, math.inf)

	def test_offset_geometry(self):
		"""Setting geometry resizes visible widgets only."""
		widget = RecordingWidget()
		widget.set_offset_geometry(1, 2, 30, 40)
		self.assertEqual(widget.offset_rect, Rect(1, 2, 30, 40))
		self.assertNotIn(MSG_RESIZE, widget.types())

		widget.attach()
		widget.set_offset_geometry(1, 2, 50, 40)
		self.assertEqual(widget.received[-1], (MSG_RESIZE, 50, 40))

		widget.set_offset_geometry(5, 5, 50, 40)
		self.assertEqual(widget.received[-1].type, MSG_RESIZE)
		self.assertEqual(widget.types().count(MSG_RESIZE), 1)

		widget.clear_offset_geometry()
		self.assertFalse(widget.has_offset_geometry)
		self.assertEqual(widget.offset_rect, Rect(0, 0, 0, 0))


if __name__ == '__main__':
	unittest.main(verbosity=2)
