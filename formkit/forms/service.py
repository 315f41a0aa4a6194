"""
Form Service

Runs live and final validation for a registered form and persists
accepted submissions to the form's configuration target.
"""

import logging
from dataclasses import dataclass

from formkit.config.constants import VALID_MESSAGE
from formkit.db.stores import ConfigStore
from formkit.forms.definitions import FormDefinition, get_form
from formkit.forms.messenger import Messenger
from formkit.logic.validators import get_validator
from formkit.logic.validators.submission import (
    SubmissionInput,
    SubmissionResult,
    validate_submission,
)

logger = logging.getLogger(__name__)


class LiveValidationDisabled(Exception):
    """Raised when live validation is requested for a field that has none."""


@dataclass(frozen=True)
class FieldMessage:
    """Validity message for one field, addressed by its element selector."""

    field: str
    selector: str
    valid: bool
    message: str


class FormService:
    """
    Form handling for the employee settings forms.

    Collaborators are passed in explicitly: the config store that receives
    accepted submissions and the messenger for the current request.
    """

    def __init__(self, config_store: ConfigStore, messenger: Messenger):
        self.config_store = config_store
        self.messenger = messenger

    def validate_field(self, form_id: str, field_name: str, value) -> FieldMessage:
        """
        Validate a single field while the user is typing.

        Calls are independent: responses can arrive out of order and the
        client may briefly show a message for an older value.
        """
        form = get_form(form_id)
        field = form.get_field(field_name)
        if not field.live_validation:
            raise LiveValidationDisabled(
                f"Field '{field_name}' on form '{form_id}' has no live validation"
            )

        result = get_validator(field.validator).validate(value)
        return FieldMessage(
            field=field.name,
            selector=field.selector,
            valid=result.valid,
            message=VALID_MESSAGE if result.valid else field.live_error,
        )

    def submit(self, form_id: str, data: SubmissionInput) -> SubmissionResult:
        """Validate a submission and save it if every field passes."""
        form = get_form(form_id)
        result = validate_submission(data, form.name_policy)
        if not result.valid:
            return result

        self._save(form, data)
        self.messenger.add_status(form.success_message)
        return result

    def get_config(self, form_id: str) -> dict:
        form = get_form(form_id)
        return self.config_store.get(form.config_name)

    def _save(self, form: FormDefinition, data: SubmissionInput):
        self.config_store.save(form.config_name, data.as_config())
        logger.info(f"Saved submission of '{form.form_id}' to '{form.config_name}'")
