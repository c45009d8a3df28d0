import pytest

from app.core.exceptions import InvalidInquiryError
from app.schemas.ranking import Inquiry, InquiryRequest
from app.services.inquiry_validator import InquiryValidator

_VALID = {
    "customer_name": "John Doe",
    "communication_method": "Text",
    "lead_source": "Organic",
    "destination": "Mars",
    "launch_location": "Dallas-Fort Worth Launch Complex",
}


class TestInquiryValidator:
    def test_accepts_complete_mapping(self):
        inquiry = InquiryValidator.validate(_VALID)

        assert isinstance(inquiry, Inquiry)
        assert inquiry.destination == "Mars"

    def test_accepts_camel_case_keys(self):
        inquiry = InquiryValidator.validate(
            {
                "customerName": "John Doe",
                "communicationMethod": "Text",
                "leadSource": "Organic",
                "destination": "Mars",
                "launchLocation": "Dallas-Fort Worth Launch Complex",
            }
        )

        assert inquiry.customer_name == "John Doe"
        assert inquiry.launch_location == "Dallas-Fort Worth Launch Complex"

    def test_accepts_request_model(self):
        inquiry = InquiryValidator.validate(InquiryRequest(**_VALID))

        assert inquiry.lead_source == "Organic"

    def test_passes_inquiry_through(self):
        inquiry = Inquiry(**_VALID)

        assert InquiryValidator.validate(inquiry) is inquiry

    def test_strips_surrounding_whitespace(self):
        inquiry = InquiryValidator.validate({**_VALID, "destination": "  Mars "})

        assert inquiry.destination == "Mars"

    @pytest.mark.parametrize("field", sorted(_VALID))
    def test_missing_attribute_is_rejected(self, field):
        data = {k: v for k, v in _VALID.items() if k != field}

        with pytest.raises(InvalidInquiryError) as exc_info:
            InquiryValidator.validate(data)

        assert field in exc_info.value.detail

    @pytest.mark.parametrize("blank", [None, "", "   "])
    def test_blank_attribute_is_rejected(self, blank):
        with pytest.raises(InvalidInquiryError):
            InquiryValidator.validate({**_VALID, "destination": blank})

    def test_non_string_attribute_is_rejected(self):
        with pytest.raises(InvalidInquiryError):
            InquiryValidator.validate({**_VALID, "lead_source": 42})
