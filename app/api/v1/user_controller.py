# Standard library imports
import logging
from typing import Any, List, Optional, Union

# External package imports
from fastapi import APIRouter, Body, status
from fastapi.responses import JSONResponse, PlainTextResponse, Response

# Local application imports
from ...application.dto.user_dto import MessageResponse, UserResponse
from ...application.use_cases.user import (
    CreateUserUseCase,
    ListUsersUseCase,
    GetUserUseCase,
    UpdateUserUseCase,
    DeleteUserUseCase,
)
from ...core.errors import classify_exception, normalize_error
from ...di.container import get_container
from ...domain.result import Err, Failure, FailureKind
from ...utils.object_id import is_valid_object_id

logger = logging.getLogger(__name__)

INVALID_USER_ID = "Invalid user id."
USER_NOT_FOUND = "User not found."
USER_DELETED = "User deleted successfully."

router = APIRouter(tags=["Users"])


def _example(message: str, description: str) -> dict:
    return {
        "description": description,
        "content": {"application/json": {"example": {"message": message}}},
    }


def _text_example(text: str, description: str) -> dict:
    return {
        "description": description,
        "content": {"text/plain": {"example": text}},
    }


SERVER_ERROR_DOC = _example("Internal server error.", "Internal server error")
INVALID_ID_DOC = _text_example(INVALID_USER_ID, "Malformed user ID")
NOT_FOUND_DOC = _text_example(USER_NOT_FOUND, "User not found")


def failure_response(failure: Failure, error: Optional[BaseException] = None) -> JSONResponse:
    """
    Build the JSON error response for a classified failure.
    
    Unclassified failures are logged with their cause; the client only ever
    sees the normalized message.
    """
    if failure.kind is FailureKind.UNCLASSIFIED:
        logger.error(f"Unhandled failure: {failure.detail}", exc_info=error)
    normalized = normalize_error(failure)
    return JSONResponse(status_code=normalized.status, content={"message": normalized.message})


def _exception_response(error: Exception) -> JSONResponse:
    return failure_response(classify_exception(error), error)


def _invalid_id_response(user_id: str) -> PlainTextResponse:
    logger.debug(f"Rejected malformed user id {user_id!r}")
    return PlainTextResponse(INVALID_USER_ID, status_code=status.HTTP_400_BAD_REQUEST)


def _not_found_response(user_id: str) -> PlainTextResponse:
    logger.debug(f"User {user_id} not found")
    return PlainTextResponse(USER_NOT_FOUND, status_code=status.HTTP_404_NOT_FOUND)


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_200_OK,
    summary="Create a new user",
    responses={
        400: _example(
            "email: Invalid email; password: Required.",
            "Bad request. Invalid input data or duplicated email.",
        ),
        500: SERVER_ERROR_DOC,
    },
)
@router.post("/", response_model=UserResponse, include_in_schema=False)
async def create_user(payload: Any = Body(default=None)) -> Union[UserResponse, Response]:
    """
    Create a new user
    
    Args:
        payload: JSON body with email and password
        
    Returns:
        UserResponse with the created user (never the password)
    """
    container = get_container()
    create_user_use_case = container.get(CreateUserUseCase)
    
    try:
        result = await create_user_use_case.execute(payload)
    except Exception as exception:
        return _exception_response(exception)
    
    if isinstance(result, Err):
        return failure_response(result.failure)
    logger.info(f"Created user {result.value.id}")
    return result.value


@router.get(
    "",
    response_model=List[UserResponse],
    summary="Get a list of users",
    responses={500: SERVER_ERROR_DOC},
)
@router.get("/", response_model=List[UserResponse], include_in_schema=False)
async def list_users() -> Union[List[UserResponse], Response]:
    """
    List all users (excluding password)
    
    Returns:
        List of UserResponse objects
    """
    container = get_container()
    list_users_use_case = container.get(ListUsersUseCase)
    
    try:
        result = await list_users_use_case.execute()
    except Exception as exception:
        return _exception_response(exception)
    
    if isinstance(result, Err):
        return failure_response(result.failure)
    return result.value


@router.get(
    "/{user_id}",
    response_model=UserResponse,
    summary="Get a user by ID",
    responses={400: INVALID_ID_DOC, 404: NOT_FOUND_DOC, 500: SERVER_ERROR_DOC},
)
async def get_user(user_id: str) -> Union[UserResponse, Response]:
    """
    Get a user by ID (excluding password)
    
    Args:
        user_id: ID of the user to retrieve
        
    Returns:
        UserResponse with user information
    """
    if not is_valid_object_id(user_id):
        return _invalid_id_response(user_id)
    
    container = get_container()
    get_user_use_case = container.get(GetUserUseCase)
    
    try:
        result = await get_user_use_case.execute(user_id)
    except Exception as exception:
        return _exception_response(exception)
    
    if isinstance(result, Err):
        return failure_response(result.failure)
    if result.value is None:
        return _not_found_response(user_id)
    return result.value


@router.put(
    "/{user_id}",
    response_model=UserResponse,
    summary="Update a user by ID",
    responses={
        400: {
            "description": "Malformed user ID (text), or invalid input data (JSON)",
            "content": {
                "text/plain": {"example": INVALID_USER_ID},
                "application/json": {
                    "example": {"message": "email, password: At least one field must be provided."}
                },
            },
        },
        404: NOT_FOUND_DOC,
        500: SERVER_ERROR_DOC,
    },
)
async def update_user(user_id: str, payload: Any = Body(default=None)) -> Union[UserResponse, Response]:
    """
    Update a user's email and/or password
    
    Args:
        user_id: ID of the user to update
        payload: JSON body with email and/or password
        
    Returns:
        UserResponse with the updated user (never the password)
    """
    if not is_valid_object_id(user_id):
        return _invalid_id_response(user_id)
    
    container = get_container()
    update_user_use_case = container.get(UpdateUserUseCase)
    
    try:
        result = await update_user_use_case.execute(user_id, payload)
    except Exception as exception:
        return _exception_response(exception)
    
    if isinstance(result, Err):
        return failure_response(result.failure)
    if result.value is None:
        return _not_found_response(user_id)
    logger.info(f"Updated user {user_id}")
    return result.value


@router.delete(
    "/{user_id}",
    response_model=MessageResponse,
    summary="Delete a user by ID",
    responses={400: INVALID_ID_DOC, 404: NOT_FOUND_DOC, 500: SERVER_ERROR_DOC},
)
async def delete_user(user_id: str) -> Union[MessageResponse, Response]:
    """
    Delete a user by ID
    
    Args:
        user_id: ID of the user to delete
        
    Returns:
        MessageResponse confirming the deletion
    """
    if not is_valid_object_id(user_id):
        return _invalid_id_response(user_id)
    
    container = get_container()
    delete_user_use_case = container.get(DeleteUserUseCase)
    
    try:
        result = await delete_user_use_case.execute(user_id)
    except Exception as exception:
        return _exception_response(exception)
    
    if isinstance(result, Err):
        return failure_response(result.failure)
    if not result.value:
        return _not_found_response(user_id)
    logger.info(f"Deleted user {user_id}")
    return MessageResponse(message=USER_DELETED)
