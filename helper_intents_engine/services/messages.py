"""Message keys of the locale string tables.

Templates use ``str.format`` positional fields; the comment next to each key
lists the arguments handlers pass.
"""

# Welcome
WELCOME_SPEECH = "WELCOME_SPEECH"
WELCOME_DISPLAY = "WELCOME_DISPLAY"
WELCOME_FEATURES_SPEECH = "WELCOME_FEATURES_SPEECH"
WELCOME_FEATURES_DISPLAY = "WELCOME_FEATURES_DISPLAY"

# No-input back-off
NO_INPUT_FIRST = "NO_INPUT_FIRST"
NO_INPUT_SECOND = "NO_INPUT_SECOND"
NO_INPUT_FINAL = "NO_INPUT_FINAL"

# Placeholders spoken before a helper prompt
CONFIRMATION_PLACEHOLDER = "CONFIRMATION_PLACEHOLDER"
DATE_TIME_PLACEHOLDER = "DATE_TIME_PLACEHOLDER"
PERMISSION_PLACEHOLDER = "PERMISSION_PLACEHOLDER"
PLACE_PLACEHOLDER = "PLACE_PLACEHOLDER"
SIGN_IN_PLACEHOLDER = "SIGN_IN_PLACEHOLDER"

# Confirmation
CONFIRMATION_PROMPT = "CONFIRMATION_PROMPT"
CONFIRMATION_SUCCESS = "CONFIRMATION_SUCCESS"
CONFIRMATION_FAILURE = "CONFIRMATION_FAILURE"

# Date and time
DATE_TIME_INITIAL_PROMPT = "DATE_TIME_INITIAL_PROMPT"
DATE_TIME_DATE_PROMPT = "DATE_TIME_DATE_PROMPT"
DATE_TIME_TIME_PROMPT = "DATE_TIME_TIME_PROMPT"
DATE_TIME_SUCCESS = "DATE_TIME_SUCCESS"  # day, month, hours, minutes
DATE_TIME_FAILURE = "DATE_TIME_FAILURE"

# Permission
PERMISSION_CONTEXT = "PERMISSION_CONTEXT"
PERMISSION_SUCCESS_NAME = "PERMISSION_SUCCESS_NAME"  # display name
PERMISSION_SUCCESS = "PERMISSION_SUCCESS"
PERMISSION_LOCATION = "PERMISSION_LOCATION"  # formatted location
PERMISSION_DENIED = "PERMISSION_DENIED"

# Place
PLACE_REQUEST = "PLACE_REQUEST"
PLACE_CONTEXT = "PLACE_CONTEXT"
PLACE_SUCCESS = "PLACE_SUCCESS"  # formatted location
PLACE_FAILURE = "PLACE_FAILURE"

# Sign in
SIGN_IN_CONTEXT = "SIGN_IN_CONTEXT"
SIGN_IN_NO_SCREEN = "SIGN_IN_NO_SCREEN"
SIGN_IN_GUEST = "SIGN_IN_GUEST"
SIGN_IN_SUCCESS = "SIGN_IN_SUCCESS"
SIGN_IN_FAILURE = "SIGN_IN_FAILURE"

ALL_MESSAGE_KEYS: frozenset[str] = frozenset(
    value
    for name, value in dict(globals()).items()
    if name.isupper() and isinstance(value, str)
)

# Chips offered after most turns; labels are matched by training phrases, so
# they are not localized.
SUGGESTIONS: tuple[str, ...] = (
    "confirmation",
    "date time",
    "permissions",
    "place",
    "sign in",
)
