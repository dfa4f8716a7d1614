from marshmallow import Schema, fields, validate

from models.author import GENDERS
from models.schemas.common import ResourceSchema

FULLNAME_MSG = "Full name is required and must be 1-50 characters"
COUNTRY_MSG = "Country is required and must be 1-50 characters"
GENDER_MSG = "Gender must be one of the predefined categories"
BIRTHDATE_MSG = "Birth date is required"


class AuthorSchema(ResourceSchema):
    UPDATE_MESSAGES = {
        FULLNAME_MSG: "Full name must be 1-50 characters",
        COUNTRY_MSG: "Country must be 1-50 characters",
        GENDER_MSG: "Invalid gender",
    }

    fullname = fields.String(
        required=True,
        validate=validate.Length(min=1, max=50, error=FULLNAME_MSG),
        error_messages={"required": FULLNAME_MSG, "null": FULLNAME_MSG, "invalid": FULLNAME_MSG},
    )
    country = fields.String(
        required=True,
        validate=validate.Length(min=1, max=50, error=COUNTRY_MSG),
        error_messages={"required": COUNTRY_MSG, "null": COUNTRY_MSG, "invalid": COUNTRY_MSG},
    )
    gender = fields.String(
        required=True,
        validate=validate.OneOf(GENDERS, error=GENDER_MSG),
        error_messages={"required": GENDER_MSG, "null": GENDER_MSG, "invalid": GENDER_MSG},
    )
    # Free-form; only presence is checked
    birthdate = fields.String(
        required=True,
        validate=validate.Length(min=1, error=BIRTHDATE_MSG),
        error_messages={"required": BIRTHDATE_MSG, "null": BIRTHDATE_MSG, "invalid": BIRTHDATE_MSG},
    )


class AuthorOutSchema(Schema):
    id = fields.String()
    fullname = fields.String()
    country = fields.String()
    gender = fields.String()
    birthdate = fields.String()
    created_at = fields.DateTime(data_key="createdAt")
    updated_at = fields.DateTime(data_key="updatedAt")
