from app.schemas.common import (
    ApiResponse,
    ErrorDetail,
    ErrorResponse,
    MetaResponse,
    create_error_response,
    create_success_response,
)
from app.schemas.user_group import (
    RemoveMemberResponse,
    UserGroupDetailResponse,
    UserGroupMembersResponse,
    UserInGroupResponse,
)

__all__ = [
    "ApiResponse",
    "MetaResponse",
    "ErrorDetail",
    "ErrorResponse",
    "create_success_response",
    "create_error_response",
    "UserInGroupResponse",
    "UserGroupDetailResponse",
    "UserGroupMembersResponse",
    "RemoveMemberResponse",
]
