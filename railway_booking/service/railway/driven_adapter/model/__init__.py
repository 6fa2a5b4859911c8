from railway_booking.service.railway.driven_adapter.model.railway_record import (
    BookingRecord,
    TrainRecord,
    UserRecord,
)

__all__ = ['BookingRecord', 'TrainRecord', 'UserRecord']
