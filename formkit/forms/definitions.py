"""
Form Definitions

Typed descriptions of the employee settings forms: which configuration
each one writes to, which full name policy it enforces, and the display
metadata for every field. Renderers read these; validation happens in
the form service.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from formkit.config.constants import (
    CONFIG_SETTINGS,
    CONFIG_SETTINGS_AJAX,
    GENDER_OPTIONS,
    PHONE_DISPLAY_PATTERN,
)


class FormNotFoundError(LookupError):
    """Raised when a form id is not registered."""


class UnknownFieldError(LookupError):
    """Raised when a field name does not exist on a form."""


@dataclass(frozen=True)
class FieldDefinition:
    """One input on a form."""

    name: str
    title: str
    input_type: str
    element_id: Optional[str] = None
    validator: Optional[str] = None
    size: Optional[int] = None
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    display_pattern: Optional[str] = None
    options: Dict[str, str] = field(default_factory=dict)
    live_error: Optional[str] = None

    @property
    def selector(self) -> Optional[str]:
        """Target id for per-field messages, e.g. `#name`."""
        return f"#{self.element_id}" if self.element_id else None

    @property
    def live_validation(self) -> bool:
        return self.live_error is not None

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "title": self.title,
            "type": self.input_type,
            "element_id": self.element_id,
            "validator": self.validator,
            "size": self.size,
            "min_length": self.min_length,
            "max_length": self.max_length,
            "pattern": self.display_pattern,
            "options": dict(self.options),
            "live_validation": self.live_validation,
        }


@dataclass(frozen=True)
class FormDefinition:
    """A settings form and the configuration it saves to."""

    form_id: str
    title: str
    config_name: str
    name_policy: str
    fields: Tuple[FieldDefinition, ...]
    success_message: str

    def get_field(self, name: str) -> FieldDefinition:
        for f in self.fields:
            if f.name == name:
                return f
        raise UnknownFieldError(f"Form '{self.form_id}' has no field '{name}'")

    @property
    def live_validation(self) -> bool:
        return any(f.live_validation for f in self.fields)

    def to_dict(self) -> dict:
        return {
            "form_id": self.form_id,
            "title": self.title,
            "config_name": self.config_name,
            "name_policy": self.name_policy,
            "live_validation": self.live_validation,
            "fields": [f.to_dict() for f in self.fields],
        }


def _gender_field() -> FieldDefinition:
    return FieldDefinition(
        name="gender",
        title="Gender",
        input_type="radios",
        options=dict(GENDER_OPTIONS),
    )


SETTINGS_FORM = FormDefinition(
    form_id="custom_form_config",
    title="Employee settings",
    config_name=CONFIG_SETTINGS,
    name_policy="lenient",
    fields=(
        FieldDefinition(
            name="fullname", title="Full Name", input_type="textfield",
            validator="fullname_lenient", size=25, max_length=25,
        ),
        FieldDefinition(
            name="phone", title="Phone Number", input_type="tel",
            validator="phone", size=10, min_length=10, max_length=10,
        ),
        FieldDefinition(
            name="email", title="Email ID", input_type="email",
            validator="email", size=30,
        ),
        _gender_field(),
    ),
    success_message="The configuration options have been saved.",
)

SETTINGS_FORM_AJAX = FormDefinition(
    form_id="custom_form_config_ajax",
    title="Employee settings (live validation)",
    config_name=CONFIG_SETTINGS_AJAX,
    name_policy="strict",
    fields=(
        FieldDefinition(
            name="fullname", title="Full Name", input_type="textfield",
            element_id="name", validator="fullname_strict", size=25,
            max_length=30, live_error="Invalid Name.",
        ),
        FieldDefinition(
            name="phone", title="Phone Number", input_type="tel",
            element_id="phone", validator="phone", size=10, max_length=10,
            display_pattern=PHONE_DISPLAY_PATTERN,
            live_error="Invalid mobile number.",
        ),
        FieldDefinition(
            name="email", title="Email ID", input_type="email",
            element_id="email", validator="email", size=30,
            live_error="Invalid email address.",
        ),
        _gender_field(),
    ),
    success_message="Form Submitted Successfully",
)

# Registry of built-in forms
_FORMS: Dict[str, FormDefinition] = {
    SETTINGS_FORM.form_id: SETTINGS_FORM,
    SETTINGS_FORM_AJAX.form_id: SETTINGS_FORM_AJAX,
}


def get_form(form_id: str) -> FormDefinition:
    """Get a form definition by id."""
    form = _FORMS.get(form_id)
    if form is None:
        raise FormNotFoundError(f"Form not found: {form_id}")
    return form


def list_forms() -> List[FormDefinition]:
    return list(_FORMS.values())

