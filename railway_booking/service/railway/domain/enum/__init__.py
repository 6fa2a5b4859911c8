"""Railway Domain Enums"""

from railway_booking.service.railway.domain.enum.booking_status import BookingStatus
from railway_booking.service.railway.domain.enum.user_role import UserRole

__all__ = ['BookingStatus', 'UserRole']
