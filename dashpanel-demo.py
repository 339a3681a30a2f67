"""
dashpanel-demo.py - dashboard panel layout demo entry point

Builds the example dashboard (eleven coloured tiles on a twelve column grid)
and prints how the panel resolves it at one or more panel sizes: the layout
mode, the cell sizes, the sizer height and the rectangle of every tile.

Features:
- Grid mode and single-column fallback at any width
- Panel configuration overrides from the command line
- Padding support (1, 2 or 4 values)
- Layout pass tracing with --debug
"""

import sys, argparse

from dashpanel import constants
from dashpanel.demo import run_demo
from utilities import parse_size, parse_width_list, parse_padding

# --- Core Functions ---

def parse_arguments(argv=None):
	"""Parse command line arguments."""
	parser = argparse.ArgumentParser(
		description='Dashboard panel layout demo',
		formatter_class=argparse.RawDescriptionHelpFormatter,
		epilog="""
Examples:
  --size 1200x800          Lay out once at 1200x800
  --size 1200x800 --size 687x600
                           Lay out at several sizes in turn
  --widths 400,688,1200    Lay out at several widths (height 0)
  --padding 10             10px padding on every side
  --padding 1,2,3,4        left, top, right, bottom padding
Note: below (min column size * columns + spacing) the panel stacks its tiles.
		""".strip()
	)

	def size_type(value):
		size = parse_size(value)
		if size is None:
			raise argparse.ArgumentTypeError(f"Invalid size '{value}', expected WIDTHxHEIGHT")
		return size

	def widths_type(value):
		sizes = parse_width_list(value)
		if sizes is None:
			raise argparse.ArgumentTypeError(f"Invalid width list '{value}', expected e.g. 400,688,1200")
		return sizes

	def padding_type(value):
		padding = parse_padding(value)
		if padding is None:
			raise argparse.ArgumentTypeError(f"Invalid padding '{value}', expected 1, 2 or 4 numbers")
		return padding

	sizes_group = parser.add_mutually_exclusive_group()
	sizes_group.add_argument('--size', type=size_type, action='append', metavar='WxH',
			help='Panel size to lay out at (repeatable)')
	sizes_group.add_argument('--widths', type=widths_type, metavar='W1,W2,...',
			help='Comma separated panel widths to lay out at')

	parser.add_argument('--columns', type=float, default=None,
			help=f'Column count (default: {constants.DEFAULT_COLUMN_COUNT})')
	parser.add_argument('--aspect-ratio', type=float, default=None,
			help=f'Row height relative to column width (default: {constants.DEFAULT_ASPECT_RATIO})')
	parser.add_argument('--spacing', type=float, default=None,
			help=f'Row and column spacing (default: {constants.DEFAULT_ROW_SPACING})')
	parser.add_argument('--max-row-size', type=float, default=100,
			help='Maximum row size (default: 100)')
	parser.add_argument('--padding', type=padding_type, default=0,
			help='Panel padding: 1, 2 or 4 comma separated values')
	parser.add_argument('--debug', action='store_true',
			help='Trace every layout pass')

	return parser.parse_args(argv)

# --- Main Logic ---

def main(argv=None):
	args = parse_arguments(argv)

	if args.debug:
		constants.DEBUG_LAYOUT = True

	config = {'max_row_size': args.max_row_size}
	if args.columns is not None:
		config['column_count'] = args.columns
	if args.aspect_ratio is not None:
		config['aspect_ratio'] = args.aspect_ratio
	if args.spacing is not None:
		config['row_spacing'] = args.spacing
		config['column_spacing'] = args.spacing

	if args.size:
		sizes = args.size
	elif args.widths:
		sizes = args.widths
	else:
		sizes = ((1200, 800), (688, 600), (687, 600))

	run_demo(sizes, padding=args.padding, **config)
	return 0

if __name__ == '__main__':
	sys.exit(main())
