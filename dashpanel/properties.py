"""
Typed, coerced attribute storage with change notification.

A Property holds a default value, a coercion function and a change handler.
Values are stored per owner, so the same Property can describe configuration
on the class that declares it (as a descriptor) or "attached" placement data
on arbitrary foreign objects (through get/set).
"""

from __future__ import annotations

import math
from typing import Any, Callable, Generic, Optional, TypeVar
from weakref import WeakKeyDictionary

Owner = TypeVar('Owner')
Value = TypeVar('Value')

_NOT_FOUND = object()

# -------
# Coercion helpers
# -------

def _truncate(value) -> int:
	"""Truncate toward zero. Non-finite values truncate to 0."""
	if isinstance(value, float) and not math.isfinite(value):
		return 0
	return int(value)

def clamp_lower(bound):
	"""Coercer that clamps a number to a lower bound."""
	def coerce(owner, value):
		return max(bound, value)
	return coerce

def clamp_int_lower(bound: int):
	"""Coercer that truncates a number to an integer and clamps it to a lower bound."""
	def coerce(owner, value):
		return max(bound, _truncate(value))
	return coerce

# -------

class Property(Generic[Owner, Value]):
	"""A typed attribute with a default value, coercion and a change hook.

	Writes never fail: the coercer saturates out-of-range input to the
	nearest legal value. The changed handler is called as
	``changed(owner, old_value, new_value)`` only when the coerced value
	differs from the current one.
	"""

	def __init__(self, *, value: Value,
			coerce: Optional[Callable[[Owner, Any], Value]] = None,
			changed: Optional[Callable[[Owner, Value, Value], None]] = None):
		self.value = value
		self.coerce = coerce
		self.changed = changed
		self.name = None
		self._values = WeakKeyDictionary()

	def __set_name__(self, owner, name):
		if self.name is None:
			self.name = name

	def __get__(self, instance, owner=None):
		if instance is None:
			# Accessed on the class, hand back the descriptor itself
			return self
		return self.get(instance)

	def __set__(self, instance, value):
		self.set(instance, value)

	def __repr__(self):
		return f"{self.__class__.__name__}({self.name or '<unnamed>'}, value={self.value!r})"

	def get(self, owner: Owner) -> Value:
		"""Get the current value for the owner, or the default if never set."""
		value = self._values.get(owner, _NOT_FOUND)
		return self.value if value is _NOT_FOUND else value

	def set(self, owner: Owner, value: Any) -> None:
		"""Coerce and store a value, notifying the changed handler on change."""
		old_value = self.get(owner)
		if self.coerce is not None:
			value = self.coerce(owner, value)
		self._values[owner] = value
		if self.changed is not None and value != old_value:
			self.changed(owner, old_value, value)

	def has_value(self, owner: Owner) -> bool:
		return owner in self._values

	def clear(self, owner: Owner) -> None:
		"""Forget a stored value, reverting the owner to the default."""
		self._values.pop(owner, None)
