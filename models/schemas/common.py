from datetime import date

from marshmallow import Schema, EXCLUDE, ValidationError, pre_load

ISBN_PATTERN = r"^[0-9]{10}$|^[0-9]{13}$"


def validate_publication_year(value: int) -> None:
    # Upper bound moves with the calendar, so it can't be a static Range
    if value < 1000 or value > date.today().year:
        raise ValidationError("Publication year must be between 1000 and current year")


def flatten_errors(messages) -> list:
    """
    Turn marshmallow's {field: [msg, ...]} mapping into [{field, message}, ...].
    Schema-level errors ("_schema") are reported against the request body.
    """
    if isinstance(messages, (list, str)):
        messages = {"body": messages}
    details = []
    for field, errors in messages.items():
        if field == "_schema":
            field = "body"
        if isinstance(errors, dict):
            # nested payloads are not part of either resource; keep them readable anyway
            for sub in flatten_errors(errors):
                details.append({"field": f"{field}.{sub['field']}", "message": sub["message"]})
            continue
        if isinstance(errors, str):
            errors = [errors]
        for message in errors:
            details.append({"field": field, "message": message})
    return details


class ResourceSchema(Schema):
    """
    Base for resource schemas.

    - strings are trimmed before validation
    - fields named in OPTIONAL_FIELDS are dropped when null or empty
    - unknown keys (including id and timestamps) are ignored on load
    """

    OPTIONAL_FIELDS: tuple = ()
    # create-time message -> wording reported for partial updates
    UPDATE_MESSAGES: dict = {}

    class Meta:
        unknown = EXCLUDE

    @pre_load
    def _normalize(self, data, **kwargs):
        if not isinstance(data, dict):
            return data
        cleaned = {}
        for key, value in data.items():
            if isinstance(value, str):
                value = value.strip()
            if key in self.OPTIONAL_FIELDS and (value is None or value == ""):
                continue
            cleaned[key] = value
        return cleaned
