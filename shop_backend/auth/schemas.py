"""
Request schemas for the auth endpoints (pydantic)

Validation is not fail-fast: every bad field yields one message.
"""

from typing import Annotated

import email_validator
from email_validator import EmailNotValidError, validate_email
from pydantic import AfterValidator, BaseModel, BeforeValidator, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from shop_backend.errors import ValidationError

# Staff and test accounts live on internal hosts (owner@localhost,
# owner@shop.local, owner@shop.test); email-validator rejects these
# special-use names unless they are removed from its list.
for _name in ('local', 'localhost', 'test'):
    if _name in email_validator.SPECIAL_USE_DOMAIN_NAMES:
        email_validator.SPECIAL_USE_DOMAIN_NAMES.remove(_name)


def check_email(value):
    """Return ``value`` if it is a syntactically valid address, else raise ValueError.

    Only syntax is checked: no DNS lookup, no public-deliverability rules.
    """
    try:
        validate_email(value, check_deliverability=False, globally_deliverable=False)
    except EmailNotValidError as e:
        raise ValueError(str(e))
    return value


def _strip(value):
    return value.strip() if isinstance(value, str) else value


Email = Annotated[str, BeforeValidator(_strip), AfterValidator(check_email)]


class LoginRequest(BaseModel):
    email: Email
    password: str = Field(min_length=1)


class RegisterRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    email: Email
    password: str = Field(min_length=8)
    first_name: str = Field(alias='firstName', min_length=1)
    last_name: str = Field(alias='lastName', min_length=1)
    phone: str = Field(min_length=1)

    @field_validator('first_name', 'last_name', 'phone', mode='before')
    @classmethod
    def strip_text(cls, value):
        return _strip(value)


# Field name (as sent by the client) -> label used in messages
FIELD_LABELS = {
    'email': 'Email',
    'password': 'Password',
    'firstName': 'First name',
    'first_name': 'First name',
    'lastName': 'Last name',
    'last_name': 'Last name',
    'phone': 'Phone',
}

_REQUIRED_TYPES = {'missing'}


def _message_for(error):
    field = str(error['loc'][0]) if error['loc'] else ''
    label = FIELD_LABELS.get(field, field)
    value = error.get('input')

    if error['type'] in _REQUIRED_TYPES or value is None or value == '':
        return f'{label} is required'
    if field == 'email':
        return 'Invalid email'
    if error['type'] == 'string_too_short':
        min_length = error.get('ctx', {}).get('min_length')
        return f'{label} must be at least {min_length} characters'
    if error['type'] == 'string_type':
        return f'{label} must be a string'
    return f'{label} is invalid'


def parse_body(schema, data):
    """Validate ``data`` against ``schema`` or raise our ValidationError."""
    if not isinstance(data, dict):
        data = {}
    try:
        return schema.model_validate(data)
    except PydanticValidationError as exc:
        messages = []
        for error in exc.errors():
            message = _message_for(error)
            if message not in messages:
                messages.append(message)
        raise ValidationError(messages)
