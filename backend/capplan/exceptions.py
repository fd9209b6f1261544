"""Domain errors raised by services and mapped to HTTP responses in main."""


class CapPlanError(Exception):
    """Base class for service-level failures."""

    status_code = 400

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail


class NotFoundError(CapPlanError):
    status_code = 404

    def __init__(self, entity: str, entity_id: str) -> None:
        super().__init__(f"{entity} not found")
        self.entity = entity
        self.entity_id = entity_id


class ValidationFailure(CapPlanError):
    status_code = 422


class ConflictError(CapPlanError):
    status_code = 409
