class AgentRankingError(Exception):
    """Base class for all agent-ranking domain exceptions.

    Every custom exception in this module inherits from here so that a
    single ``except AgentRankingError`` clause can catch any domain
    error.
    """

    def __init__(self, detail: str = "An error occurred"):
        self.detail = detail
        super().__init__(detail)


class InvalidInquiryError(AgentRankingError):
    """Raised when an inquiry is missing a required attribute.

    Missing attributes are never coerced to wildcards; the run is
    rejected before any data is read.
    """

    def __init__(self, detail: str = "Invalid inquiry"):
        super().__init__(detail)


class AgentNotFoundError(AgentRankingError):
    """Raised when a requested agent does not exist."""

    def __init__(self, detail: str = "Agent not found"):
        super().__init__(detail)


class DataUnavailableError(AgentRankingError):
    """Raised when the agent/booking data source cannot be read."""

    def __init__(self, detail: str = "Agent data source unavailable"):
        super().__init__(detail)


class DataIntegrityError(AgentRankingError):
    """Raised when snapshot records are malformed or inconsistent.

    Covers rows that fail schema validation as well as broken references
    (a booking pointing at an unknown assignment, two bookings for one
    assignment, an assignment pointing at an unknown agent).
    """

    def __init__(self, detail: str = "Agent data failed integrity checks"):
        super().__init__(detail)


class InvalidScoringConfigError(AgentRankingError):
    """Raised when the scoring weights or normalisation constants are unusable."""

    def __init__(self, detail: str = "Invalid scoring configuration"):
        super().__init__(detail)
