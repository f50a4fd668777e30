"""Shared fixtures: sample forms and sessions."""

import pytest

from flowform.core.state import Session
from flowform.forms.models import FieldType, FormDefinition, FormField, ValidationRule
from helpers import make_form, make_session


@pytest.fixture
def contact_form() -> FormDefinition:
    return make_form(
        FormField(id="name", name="name", label="Full Name", type=FieldType.TEXT, required=True, order=0),
        FormField(id="email", name="email", label="Email", type=FieldType.EMAIL, required=True, order=1),
    )


@pytest.fixture
def signup_form() -> FormDefinition:
    return make_form(
        FormField(id="f_name", name="fullName", label="Full Name", type=FieldType.TEXT, order=0),
        FormField(id="f_email", name="email", label="Email Address", type=FieldType.EMAIL, order=1),
        FormField(
            id="f_age",
            name="age",
            label="Age",
            type=FieldType.NUMBER,
            order=2,
            validation=ValidationRule(min=18, max=120),
        ),
        FormField(
            id="f_size",
            name="shirtSize",
            label="Shirt Size",
            type=FieldType.ENUM,
            order=3,
            validation=ValidationRule(options=("S", "M", "L", "XL")),
        ),
        FormField(
            id="f_notes",
            name="notes",
            label="Notes",
            type=FieldType.LONG_TEXT,
            required=False,
            order=4,
            description="Anything else we should know",
        ),
        form_id="signup",
        name="Event Signup",
        description="Register for the annual meetup",
    )


@pytest.fixture
def empty_session() -> Session:
    return make_session()
