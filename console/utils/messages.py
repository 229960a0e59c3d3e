BANNER_TEMPLATE = "[{marker}] This program is using {api}!"

PROMPT_TEMPLATE = "Use {keyword} if you don't know the commands.\n--> "

SYMBOL_PROMPT = "Enter pair symbol (e.g., btcidr): "

CLEAR_SCREEN = "\x1b[3;J\x1b[H\x1b[2J"

HELP_TITLE = "[i] Command List"

# (marker, command, description); "*" needs no argument, "=" asks for a pair
HELP_ENTRIES = (
    ("*", "clear", "Clear prompt"),
    ("*", "servertime", "Provide server time on exchange"),
    ("*", "pairs", "Provide available pairs on exchange"),
    ("=", "ticker", "Provide ticker information for a pair"),
    ("=", "trades", "Provide recent trades for a pair"),
    ("=", "depth", "Provide order book depth for a pair"),
)

UNKNOWN_COMMAND_TEXT = "Unknown command"

CLEARING_TEXT = "Clearing prompt."

FETCH_FAILED_TEMPLATE = "Unable to fetch data: {error}"

PARSE_FAILED_TEMPLATE = "Error parsing {kind} data: {error}"

PRICE_PARSE_FAILED_TEMPLATE = "Error parsing price: {error}"
