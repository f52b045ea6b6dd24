"""
Errors raised by domain entities and services.

Each class corresponds to one HTTP outcome in the exception handlers: bad
input, a missing thing inside an owned item, or a rule that forbids the
operation in the item's current state.
"""


class DomainError(Exception):
    """Root of the domain error hierarchy. `message` is safe to show to the user."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(DomainError):
    """Input that can never be valid, such as zero marks or an option letter outside A-D."""

    def __init__(self, message: str, field: str | None = None, value: object = None) -> None:
        super().__init__(message)
        self.field = field
        self.value = value


class EntityNotFoundError(DomainError):
    """Something inside an owned item is missing: a question, or results before submission."""

    def __init__(self, entity_type: str, entity_id: object) -> None:
        super().__init__(f"{entity_type} with id {entity_id} not found")
        self.entity_type = entity_type
        self.entity_id = entity_id


class BusinessRuleViolationError(DomainError):
    """The request is well formed but the item's state forbids it, e.g. a second submission."""

    def __init__(self, rule: str, message: str | None = None) -> None:
        super().__init__(message or f"Business rule violated: {rule}")
        self.rule = rule


class InvariantViolationError(DomainError):
    """An entity was built in a state it must never be in, e.g. a graded answer with no mark."""

    def __init__(self, aggregate: str, invariant: str) -> None:
        super().__init__(f"{aggregate} invariant broken: {invariant}")
        self.aggregate = aggregate
        self.invariant = invariant
