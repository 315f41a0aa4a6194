"""Form definitions and submission handling."""

from formkit.forms.definitions import (
    FieldDefinition,
    FormDefinition,
    FormNotFoundError,
    UnknownFieldError,
    get_form,
    list_forms,
)
from formkit.forms.messenger import Messenger
from formkit.forms.service import FieldMessage, FormService, LiveValidationDisabled
