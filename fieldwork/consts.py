import os
import re

DEBUG: bool = os.getenv("FIELDWORK_DEBUG", "false").lower() in ("1", "true")
PYCHARM_HOSTED = os.getenv("PYCHARM_HOSTED", "0") == "1"
NON_INTERACTIVE_WIDTH = 160

MATCH_ALL = ".*"
DEFAULT_COMMENT_MARKER = ";"

PLACEHOLDER_RE = re.compile(r"\{([^}]+)\}")
INI_SECTION_RE = re.compile(r"^\[([^\]]+)\]$")
INI_KEY_VALUE_RE = re.compile(r"^([^=]+)=(.*)$")
COLOR_RE = re.compile(r"(\x1b\[(?:\d;?)*m)")
# Used by the cli to split `--var NAME=VALUE`
ASSIGNMENT_RE = re.compile(r"(?P<name>[^=]+)=(?P<value>.*)")

# Fuzzy "did you mean" suggestions for fields that weren't found
MAX_SUGGESTION_DISTANCE = 2
