"""
Constants and configuration defaults for the dashboard panel.
"""

import math
import os

# Panel configuration defaults
DEFAULT_ASPECT_RATIO = 1			# row height = aspect ratio * column width
DEFAULT_COLUMN_COUNT = 12
DEFAULT_MIN_ROW_SIZE = 50
DEFAULT_MIN_COLUMN_SIZE = 50
DEFAULT_MAX_ROW_SIZE = math.inf
DEFAULT_MAX_COLUMN_SIZE = math.inf
DEFAULT_ROW_SPACING = 8
DEFAULT_COLUMN_SPACING = 8

# Item placement defaults
DEFAULT_ROW = 0
DEFAULT_COLUMN = 0
DEFAULT_ROW_SPAN = 1
DEFAULT_COLUMN_SPAN = 1

# Message types
MSG_UPDATE_REQUEST = 'update-request'
MSG_LAYOUT_REQUEST = 'layout-request'
MSG_RESIZE = 'resize'
MSG_CHILD_ADDED = 'child-added'
MSG_CHILD_REMOVED = 'child-removed'
MSG_CHILD_MOVED = 'child-moved'
MSG_CHILD_SHOWN = 'child-shown'
MSG_CHILD_HIDDEN = 'child-hidden'
MSG_AFTER_ATTACH = 'after-attach'
MSG_BEFORE_DETACH = 'before-detach'
MSG_AFTER_SHOW = 'after-show'
MSG_BEFORE_HIDE = 'before-hide'

# Posted messages of these types collapse into one while pending
CONFLATABLE_MESSAGES = frozenset((MSG_UPDATE_REQUEST, MSG_LAYOUT_REQUEST))

# Debug tracing of layout passes
DEBUG_LAYOUT = os.environ.get('DASHPANEL_DEBUG', '') not in ('', '0')
