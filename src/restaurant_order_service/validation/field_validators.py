"""Validators shared by the dish and order chains."""

from restaurant_order_service.exceptions import ConstraintError, NotFoundError, ValidationError
from restaurant_order_service.repositories.memory_repositories import InMemoryRepository
from restaurant_order_service.validation.chain import RequestContext, Validator, is_present


def body_has(field_name: str, article: str = "A", require_string: bool = False) -> Validator:
    """Build a presence validator for one payload field.

    The accepted value is copied into ``context.values`` for later validators
    and the handler.

    Args:
        field_name: Key inside the ``data`` envelope
        article: Article used in the error message ("A" or "An")
        require_string: Whether the supplied value must also be a string

    Returns:
        Validator raising ValidationError when the field is missing
    """

    def validator(context: RequestContext) -> None:
        value = context.data.get(field_name)
        if not is_present(value):
            raise ValidationError(f"{article} '{field_name}' property is required.")
        if require_string and not isinstance(value, str):
            raise ValidationError(f"{article} '{field_name}' property must be a string.")
        context.values[field_name] = value

    validator.__name__ = f"body_has_{field_name}"
    return validator


def record_exists(repository: InMemoryRepository, label: str) -> Validator:
    """Build an existence validator for the record named in the path.

    Args:
        repository: Repository to search
        label: Human name used in the error message (e.g. "Dish")

    Returns:
        Validator raising NotFoundError on a miss and attaching the record on a hit
    """

    def validator(context: RequestContext) -> None:
        record = repository.get(context.path_id)
        if record is None:
            raise NotFoundError(f"{label} id not found: {context.path_id}")
        context.record = record

    validator.__name__ = f"{label.lower()}_exists"
    return validator


def body_id_matches_path(param_name: str) -> Validator:
    """Build the validator guarding against an update changing a record's id.

    A body id that is absent, None or empty always passes. Any other value must
    equal the path id. The first mismatch halts the chain.

    Args:
        param_name: Route parameter name used in the error message

    Returns:
        Validator raising ConstraintError on a mismatch
    """

    def validator(context: RequestContext) -> None:
        body_id = context.data.get("id")
        if body_id is not None and body_id != "" and body_id != context.path_id:
            raise ConstraintError(f"id {body_id} must match {param_name} provided in parameters")

    validator.__name__ = "body_id_matches_path"
    return validator

