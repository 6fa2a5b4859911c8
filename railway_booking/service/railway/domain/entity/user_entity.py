from typing import List, Optional

import attrs

from railway_booking.platform.exception.exceptions import ForbiddenError
from railway_booking.service.railway.domain.enum.user_role import UserRole


@attrs.define
class User:
    user_id: str
    name: str
    email: str
    role: UserRole = attrs.field(default=UserRole.PASSENGER, converter=UserRole)
    designation: Optional[str] = None  # staff only
    booking_ids: List[str] = attrs.field(factory=list)  # passenger only

    @classmethod
    def passenger(cls, *, user_id: str, name: str, email: str) -> 'User':
        return cls(user_id=user_id, name=name, email=email, role=UserRole.PASSENGER)

    @classmethod
    def staff(cls, *, user_id: str, name: str, email: str, designation: str) -> 'User':
        return cls(
            user_id=user_id,
            name=name,
            email=email,
            role=UserRole.STAFF,
            designation=designation,
        )

    def display_info(self) -> str:
        return f'User: {self.name} ({self.email})'

    def validate_role(self, role: UserRole) -> None:
        if self.role != role:
            raise ForbiddenError(f'Only {role.value} users can perform this operation')

    def remember_booking(self, booking_id: str) -> None:
        if booking_id not in self.booking_ids:
            self.booking_ids.append(booking_id)
