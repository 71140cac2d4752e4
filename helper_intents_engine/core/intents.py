"""Intent names and platform protocol constants."""

from enum import Enum


class IntentType(str, Enum):
    """Dialogflow intent display names handled by the webhook."""

    WELCOME = "Default Welcome Intent"
    NO_INPUT = "actions_intent_no_input"
    ASK_CONFIRMATION = "askForConfirmation"
    HANDLE_CONFIRMATION = "actions_intent_confirmation"
    ASK_DATE_TIME = "askForDateTime"
    HANDLE_DATE_TIME = "actions_intent_datetime"
    ASK_PERMISSION = "askForPermissions"
    HANDLE_PERMISSION = "actions_intent_permission"
    ASK_PLACE = "askForPlace"
    HANDLE_PLACE = "actions_intent_place"
    ASK_SIGN_IN = "askForSignIn"
    HANDLE_SIGN_IN = "actions_intent_sign_in"


class HelperIntent(str, Enum):
    """Platform-rendered helper intents a response may request."""

    CONFIRMATION = "actions.intent.CONFIRMATION"
    DATETIME = "actions.intent.DATETIME"
    PERMISSION = "actions.intent.PERMISSION"
    PLACE = "actions.intent.PLACE"
    SIGN_IN = "actions.intent.SIGN_IN"


# The intent the platform triggers with the user's answer to each helper.
PROMPT_REPLY_INTENTS: dict[HelperIntent, IntentType] = {
    HelperIntent.CONFIRMATION: IntentType.HANDLE_CONFIRMATION,
    HelperIntent.DATETIME: IntentType.HANDLE_DATE_TIME,
    HelperIntent.PERMISSION: IntentType.HANDLE_PERMISSION,
    HelperIntent.PLACE: IntentType.HANDLE_PLACE,
    HelperIntent.SIGN_IN: IntentType.HANDLE_SIGN_IN,
}

# @type values of the helper value specs.
VALUE_SPEC_TYPES: dict[HelperIntent, str] = {
    HelperIntent.CONFIRMATION: "type.googleapis.com/google.actions.v2.ConfirmationValueSpec",
    HelperIntent.DATETIME: "type.googleapis.com/google.actions.v2.DateTimeValueSpec",
    HelperIntent.PERMISSION: "type.googleapis.com/google.actions.v2.PermissionValueSpec",
    HelperIntent.PLACE: "type.googleapis.com/google.actions.v2.PlaceValueSpec",
    HelperIntent.SIGN_IN: "type.googleapis.com/google.actions.v2.SignInValueSpec",
}
PLACE_DIALOG_SPEC_TYPE = "type.googleapis.com/google.actions.v2.PlaceValueSpec.PlaceDialogSpec"

PERMISSION_NAME = "NAME"
PERMISSION_DEVICE_PRECISE_LOCATION = "DEVICE_PRECISE_LOCATION"

CAPABILITY_SCREEN_OUTPUT = "actions.capability.SCREEN_OUTPUT"

SIGN_IN_STATUS_OK = "OK"


class VerificationStatus(str, Enum):
    """Account tier reported by the platform for the current user."""

    VERIFIED = "VERIFIED"
    GUEST = "GUEST"


__all__ = [
    "IntentType",
    "HelperIntent",
    "VerificationStatus",
    "PROMPT_REPLY_INTENTS",
    "VALUE_SPEC_TYPES",
    "PLACE_DIALOG_SPEC_TYPE",
    "PERMISSION_NAME",
    "PERMISSION_DEVICE_PRECISE_LOCATION",
    "CAPABILITY_SCREEN_OUTPUT",
    "SIGN_IN_STATUS_OK",
]
