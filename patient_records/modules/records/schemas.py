from datetime import date, datetime
from typing import Annotated
from pydantic import BaseModel, ConfigDict, AfterValidator, ValidationInfo, model_validator
from pydantic.alias_generators import to_camel
from patient_records.modules.records.models import STATUS_VALUES

REQUIRED_FIELDS = (
    "first_name", "last_name", "date_of_birth", "status",
    "street", "city", "state", "zip_code",
)
INVALID_STATUS = "Invalid status. Must be one of: " + ", ".join(STATUS_VALUES)

def _required(v: str, info: ValidationInfo) -> str:
    if not v:
        raise ValueError(f"Missing required field: {to_camel(info.field_name)}")
    return v

def _status(v: str) -> str:
    if v not in STATUS_VALUES:
        raise ValueError(INVALID_STATUS)
    return v

def _date_of_birth(v: str) -> str:
    try:
        dob = date.fromisoformat(v)
    except ValueError:
        raise ValueError("Invalid dateOfBirth. Expected a date in YYYY-MM-DD format") from None
    if dob > date.today():
        raise ValueError("dateOfBirth cannot be in the future")
    return dob.isoformat()

def _blank_to_none(v: str | None) -> str | None:
    return v or None

RequiredText = Annotated[str, AfterValidator(_required)]
Status = Annotated[str, AfterValidator(_required), AfterValidator(_status)]
DateOfBirth = Annotated[str, AfterValidator(_required), AfterValidator(_date_of_birth)]
OptionalText = Annotated[str | None, AfterValidator(_blank_to_none)]

class _RecordIn(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
    )

class RecordCreate(_RecordIn):
    first_name: RequiredText
    middle_name: OptionalText = None
    last_name: RequiredText
    date_of_birth: DateOfBirth
    status: Status
    street: RequiredText
    city: RequiredText
    state: RequiredText
    zip_code: RequiredText

class RecordUpdate(_RecordIn):
    """Partial update. Supplied fields are validated exactly like on create."""

    first_name: RequiredText | None = None
    middle_name: OptionalText = None
    last_name: RequiredText | None = None
    date_of_birth: DateOfBirth | None = None
    status: Status | None = None
    street: RequiredText | None = None
    city: RequiredText | None = None
    state: RequiredText | None = None
    zip_code: RequiredText | None = None

    @model_validator(mode="after")
    def _no_null_required(self):
        for name in sorted(self.model_fields_set):
            if name in REQUIRED_FIELDS and getattr(self, name) is None:
                raise ValueError(f"{to_camel(name)} cannot be null")
        return self

class RecordOut(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    id: int
    first_name: str
    middle_name: str | None
    last_name: str
    date_of_birth: str
    status: str
    street: str
    city: str
    state: str
    zip_code: str
    created_at: datetime
    updated_at: datetime

class MessageOut(BaseModel):
    message: str
