class EventDashboardError(Exception):
    """Base class for event dashboard errors."""


class ValidationError(EventDashboardError):
    """A required event field is missing."""


class NotFoundError(EventDashboardError):
    """No event with the requested id exists."""

    def __init__(self, record_id: int):
        super().__init__(f"No event with id {record_id}")
        self.record_id = record_id
