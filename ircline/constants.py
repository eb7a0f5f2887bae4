CONFIG_FILE = "ircline_config.json"

COMMAND_PREFIX = "/"
CHANNEL_PREFIX = "#"
NICK_ADDRESS_SUFFIX = ": "

TIMESTAMP_FORMAT = "%H:%M"
WRAP_COLUMN = 72
WRAP_INDENT = 7

SENTINEL_COMMAND_INDEX = 0

PROMPT_COLOR = "\033[33m"
PROMPT_RESET = "\033[0m"
PROMPT_SUFFIX = "> "
