"""
Request Schemas

Form bodies use bracketed nested field names (``user[name]``); each schema
knows how to pull its fields out of a submitted form.
"""

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator


def _nested(form, field):
    return form.get(f'user[{field}]', '')


class LoginCredentials(BaseModel):
    """Submitted login form."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1, max_length=80)
    password: str = Field(min_length=1)

    @classmethod
    def from_form(cls, form):
        return cls.model_validate({
            'name': _nested(form, 'name'),
            'password': _nested(form, 'password'),
        })


class Registration(BaseModel):
    """Submitted registration form."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1, max_length=80)
    password: str = Field(min_length=1)
    password_confirmation: str

    @model_validator(mode='after')
    def passwords_match(self):
        if self.password != self.password_confirmation:
            raise ValueError("Password confirmation doesn't match Password.")
        return self

    @classmethod
    def from_form(cls, form):
        return cls.model_validate({
            'name': _nested(form, 'name').strip(),
            'password': _nested(form, 'password'),
            'password_confirmation': _nested(form, 'password_confirmation'),
        })


_FIELD_LABELS = {
    'name': 'Name',
    'password': 'Password',
    'password_confirmation': 'Password confirmation',
}


def error_messages(exc: ValidationError):
    """Flatten a ValidationError into human-readable messages."""
    messages = []
    for error in exc.errors():
        loc = error.get('loc') or ()
        if loc:
            label = _FIELD_LABELS.get(loc[0], str(loc[0]))
            if error['type'] == 'string_too_short':
                messages.append(f"{label} can't be blank.")
            elif error['type'] == 'string_too_long':
                messages.append(f'{label} is too long.')
            else:
                messages.append(f'{label} is invalid.')
        else:
            # model-level validator; pydantic prefixes "Value error, "
            messages.append(error['msg'].removeprefix('Value error, '))
    return messages
