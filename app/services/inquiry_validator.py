from typing import Any, Mapping, Union

from pydantic import BaseModel, ValidationError

from app.core.constants import REQUIRED_INQUIRY_FIELDS
from app.core.exceptions import InvalidInquiryError
from app.schemas.ranking import Inquiry


class InquiryValidator:
    """Turn untrusted inquiry input into an :class:`Inquiry`.

    Every attribute is required and must be non-blank.  Missing values are
    rejected rather than treated as "match anything".
    """

    @staticmethod
    def validate(payload: Union[Inquiry, BaseModel, Mapping[str, Any]]) -> Inquiry:
        if isinstance(payload, Inquiry):
            return payload
        if isinstance(payload, BaseModel):
            data = payload.model_dump()
        else:
            data = dict(payload)

        missing = [
            name
            for name in REQUIRED_INQUIRY_FIELDS
            if not _present(data.get(name, data.get(_camel(name))))
        ]
        if missing:
            raise InvalidInquiryError(
                f"Inquiry is missing required attribute(s): {', '.join(missing)}"
            )

        try:
            return Inquiry.model_validate(data)
        except ValidationError as exc:
            raise InvalidInquiryError(
                f"Invalid inquiry: {exc.errors()[0]['msg']}"
            ) from exc


def _present(value: Any) -> bool:
    if value is None:
        return False
    return not (isinstance(value, str) and not value.strip())


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)
