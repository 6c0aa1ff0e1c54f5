# domain/steps/registrant.py
from __future__ import annotations

from domain.operators import BASE_OPERATORS
from domain.steps.base import (
    FieldDefinition,
    FieldType,
    Optionality,
    RecordDefinition,
    StepDefinition,
    StepType,
)

_ORGANIZER_KEY = FieldDefinition("organizerKey", FieldType.STRING, "Webinar Organizer's Key")
_WEBINAR_KEY = FieldDefinition("webinarKey", FieldType.STRING, "Webinar's Key")
_REGISTRANT_KEY = FieldDefinition("registrantKey", FieldType.STRING, "Registrant's Key")


CREATE_REGISTRANT = StepDefinition(
    step_id="CreateRegistrantStep",
    name="Create a GoTo Webinar Registrant",
    expression="create a goto webinar registrant",
    type=StepType.ACTION,
    expected_fields=[
        _ORGANIZER_KEY,
        _WEBINAR_KEY,
        FieldDefinition("registrant", FieldType.MAP, "A map of field names to field values"),
    ],
    expected_records=[
        RecordDefinition(
            id="registrant",
            fields=[
                FieldDefinition("registrantKey", FieldType.STRING, "The Registrant's registrant key"),
                FieldDefinition("joinUrl", FieldType.STRING, "The Registrant's join URL"),
            ],
            dynamic_fields=True,
        ),
    ],
)


DELETE_REGISTRANT = StepDefinition(
    step_id="DeleteRegistrantStep",
    name="Delete a GoTo Webinar Registrant",
    expression="delete a goto webinar registrant",
    type=StepType.ACTION,
    expected_fields=[_ORGANIZER_KEY, _WEBINAR_KEY, _REGISTRANT_KEY],
    expected_records=[RecordDefinition(id="registrant", dynamic_fields=True)],
)


REGISTRANT_FIELD_EQUALS = StepDefinition(
    step_id="RegistrantFieldEqualsStep",
    name="Check a field on a GoTo Webinar Registrant",
    expression=(
        "the (?<field>[a-zA-Z0-9_-]+) field on goto webinar registrant (?<registrantKey>[a-zA-Z0-9_-]+) "
        "should (?<operator>be set|not be set|be less than|be greater than|be one of|be|contain"
        "|not be one of|not be|not contain|match|not match) ?(?<expectation>.+)?"
    ),
    type=StepType.VALIDATION,
    expected_fields=[
        _ORGANIZER_KEY,
        _WEBINAR_KEY,
        _REGISTRANT_KEY,
        FieldDefinition("field", FieldType.STRING, "Field name to check"),
        FieldDefinition(
            "operator",
            FieldType.STRING,
            f"Check Logic ({', '.join(BASE_OPERATORS)})",
            Optionality.OPTIONAL,
        ),
        FieldDefinition("expectation", FieldType.ANYSCALAR, "Expected field value", Optionality.OPTIONAL),
    ],
    expected_records=[
        RecordDefinition(
            id="registrant",
            fields=[
                FieldDefinition("registrantKey", FieldType.STRING, "Registrant's Key"),
                FieldDefinition("firstName", FieldType.STRING, "Registrant's First Name"),
                FieldDefinition("lastName", FieldType.STRING, "Registrant's Last Name"),
                FieldDefinition("email", FieldType.STRING, "Registrant's Email"),
            ],
            dynamic_fields=True,
        ),
    ],
)
