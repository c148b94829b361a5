from .user_dto import MessageResponse, UserCreateRequest, UserResponse, UserUpdateRequest

__all__ = [
    "UserCreateRequest",
    "UserUpdateRequest",
    "UserResponse",
    "MessageResponse",
]
