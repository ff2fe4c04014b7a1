from logging import getLogger

logger = getLogger("chartmarks")

LOGGER_PREFIX = "[COMPILE_MARKS]"

# pixel size allotted to one ordinal category when no scale overrides it
DEFAULT_BAND_WIDTH = 21

# bars and rects are inset by one pixel so adjacent bands do not touch
BAND_INSET = -1

# provisional: quantitative text with no x channel is right aligned this far
# from the group edge
TEXT_QUANTITATIVE_X_OFFSET = -5

# provisional: ticks sit a third of a band before the band midpoint and span
# two thirds of it
TICK_OFFSET_BAND_DIVISOR = 3
TICK_SIZE_BAND_DIVISOR = 1.5

DEFAULT_NUMBER_FORMAT = "s"
DEFAULT_STROKE_WIDTH = 2
DEFAULT_FONT_SIZE = 10

DEFAULT_COLOR = "#4682b4"
DEFAULT_SIZE = 30
DEFAULT_SHAPE = "circle"
DEFAULT_TEXT = "Abc"

STACK_START_SUFFIX = "_start"
STACK_END_SUFFIX = "_end"
BIN_START_SUFFIX = "_start"
BIN_END_SUFFIX = "_end"
BIN_MID_SUFFIX = "_mid"
