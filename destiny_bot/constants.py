"""
Bot-wide constants for the Destiny Trials bot.

Keeps user-facing strings and table layout values in one place.
"""

class CommandConstants:
    """Keywords and fixed replies shared by the command handlers."""
    
    # Text argument that switches any command into help mode
    HELP_KEYWORD = 'help'
    
    TRIALS_HELP = (
        "Inspect a given player's last fireteam in Trials of Osiris, along"
        " with their stats and equipment"
    )
    XUR_HELP = "Inspect Xur's inventory"
    XUR_UNAVAILABLE = 'Xur is not available at the moment...'
    GENERIC_FAILURE = '❌ Something went wrong while talking to the Destiny services. Please try again later.'

class TableConstants:
    """Layout values for the fixed-width report table."""
    
    COLUMN_GAP = '  '
    SECTION_SEPARATOR = '|'
    RATING_WIDTH = 4
    RATIO_WIDTH = 4
    RATIO_FILL = '0'
    CODE_BLOCK = '```'
    
    # Subclass shown when the last character could not be inspected
    UNKNOWN_SUBCLASS = 'Unknown'

class ProfileConstants:
    """Constants for Trials Report profile links."""
    
    # The site redirects Xbox players from the PlayStation path
    DEFAULT_PLATFORM_PATH = 'ps'
