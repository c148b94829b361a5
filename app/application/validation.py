"""
Payload validation for user operations.

Validators never raise on bad input: they return ``Ok`` with the parsed
value or ``Err`` carrying every issue found, in field order.
"""
# Standard library imports
from typing import Any

# External package imports
from pydantic import ValidationError

# Local application imports
from ..core.errors import issues_from_errors
from ..domain.models.user import UNSET, UserPatch
from ..domain.result import Err, Failure, Ok, Result, ValidationIssue
from .dto.user_dto import UserCreateRequest, UserUpdateRequest

EMPTY_PATCH_ISSUE = ValidationIssue(
    path=("email", "password"),
    message="At least one field must be provided",
)


def validate_create(payload: Any) -> Result:
    """
    Validate a create payload
    
    Args:
        payload: Decoded JSON body, None when the request had no body
        
    Returns:
        Ok(UserCreateRequest) or Err with validation issues
    """
    try:
        request = UserCreateRequest.model_validate({} if payload is None else payload)
    except ValidationError as e:
        return Err(Failure.validation(issues_from_errors(e.errors())))
    return Ok(request)


def validate_update(payload: Any) -> Result:
    """
    Validate an update payload into a patch
    
    Absent fields and an empty password stay UNSET; an explicit null is
    reported as a type error on that field. An empty patch is rejected
    before it can reach the store.
    
    Returns:
        Ok(UserPatch) or Err with validation issues
    """
    try:
        request = UserUpdateRequest.model_validate({} if payload is None else payload)
    except ValidationError as e:
        return Err(Failure.validation(issues_from_errors(e.errors())))
    
    patch = UserPatch(
        email=request.email if request.email else UNSET,
        password=request.password if request.password else UNSET,
    )
    if patch.is_empty():
        return Err(Failure.validation([EMPTY_PATCH_ISSUE]))
    return Ok(patch)
