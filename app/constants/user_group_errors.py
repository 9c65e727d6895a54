from enum import Enum


class UserGroupErrorCode(str, Enum):
    USER_GROUP_NOT_FOUND = "USER_GROUP_NOT_FOUND"
    USER_NOT_FOUND = "USER_NOT_FOUND"
