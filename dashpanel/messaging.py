"""
Message delivery between widgets.

Messages are either sent (dispatched immediately) or posted (queued until the
next call to flush_messages). Posted update and layout requests are
conflated: while one is pending for a handler, further posts of the same type
to that handler are dropped, so any number of invalidations between two ticks
produce at most one layout pass.
"""

from __future__ import annotations

from collections import deque
from typing import Any, NamedTuple

from .constants import CONFLATABLE_MESSAGES, MSG_LAYOUT_REQUEST, MSG_RESIZE, MSG_UPDATE_REQUEST

# -------

class Message(NamedTuple):
	type: str

class ChildMessage(NamedTuple):
	type: str
	child: Any

class ResizeMessage(NamedTuple):
	"""A resize notification. Negative sizes mean "measure the widget now"."""
	type: str
	width: float
	height: float

	@classmethod
	def unknown_size(cls):
		return cls(MSG_RESIZE, -1, -1)

UPDATE_REQUEST = Message(MSG_UPDATE_REQUEST)
LAYOUT_REQUEST = Message(MSG_LAYOUT_REQUEST)

# ---

_pending = deque()		# (handler, message) pairs awaiting delivery

def send_message(handler, msg) -> None:
	"""Deliver a message to the handler immediately."""
	handler.process_message(msg)

def post_message(handler, msg) -> None:
	"""Queue a message for delivery on the next flush."""
	if msg.type in CONFLATABLE_MESSAGES:
		for pending_handler, pending_msg in _pending:
			if pending_handler is handler and pending_msg.type == msg.type:
				return
	_pending.append((handler, msg))

def has_pending_messages(handler=None, msg_type=None) -> bool:
	"""Whether messages are queued, optionally for one handler and one type."""
	return any(
		(handler is None or pending_handler is handler)
		and (msg_type is None or pending_msg.type == msg_type)
		for pending_handler, pending_msg in _pending
	)

def discard_message(handler, msg_type) -> None:
	"""Drop pending messages of one type addressed to the handler."""
	kept = [entry for entry in _pending if entry[0] is not handler or entry[1].type != msg_type]
	_pending.clear()
	_pending.extend(kept)

def clear_message_data(handler) -> None:
	"""Drop every pending message addressed to the handler."""
	kept = [entry for entry in _pending if entry[0] is not handler]
	_pending.clear()
	_pending.extend(kept)

def clear_pending_messages() -> None:
	"""Drop every pending message without delivering it."""
	_pending.clear()

def flush_messages() -> int:
	"""Deliver pending messages until the queue is empty.

	Messages posted while flushing are delivered in the same flush, after
	those that were already queued. Returns the number of messages delivered.
	"""
	count = 0
	while _pending:
		handler, msg = _pending.popleft()
		handler.process_message(msg)
		count += 1
	return count
