"""
Fixed parsing and output rules.

This file exists to make capacity limits and format markers explicit and enforceable.
"""

RELATION_MARKER = "@relation"
ATTRIBUTE_MARKER = "@attribute"
DATA_MARKER = "@data"
COMMENT_MARKER = "%"

MAX_ROWS = 10_000
MAX_COLUMNS = 100
MAX_TOKENS = 100
MAX_TOKEN_LENGTH = 100

RELATION_SUFFIX = ".arff"
MINMAX_PREFIX = "MinMax"
NORMALIZED_PREFIX = "MinMaxNormalize"

FLOAT_FORMAT = "{:.6f}"
VALUE_SEPARATOR = " "

CLASS_FLAG = "-c"
ATTRIBUTE_FLAG_PREFIX = "-"
