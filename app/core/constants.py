from app.schemas.common import BookingStatus

CONFIRMED_STATUS: str = BookingStatus.CONFIRMED.value
CANCELLED_STATUS: str = BookingStatus.CANCELLED.value
PENDING_STATUS: str = BookingStatus.PENDING.value

# Customer service ratings are recorded on a 0-5 scale
MAX_SERVICE_RATING: float = 5.0

# Inquiry attributes that must be present for a scoring run
REQUIRED_INQUIRY_FIELDS: tuple = (
    "customer_name",
    "communication_method",
    "lead_source",
    "destination",
    "launch_location",
)

SUMMARY_CACHE_KEY: str = "agent_summaries:all"
