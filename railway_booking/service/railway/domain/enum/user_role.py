from enum import StrEnum


class UserRole(StrEnum):
    PASSENGER = 'passenger'
    STAFF = 'staff'
