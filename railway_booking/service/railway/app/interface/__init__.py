from railway_booking.service.railway.app.interface.i_notifier import INotifier
from railway_booking.service.railway.app.interface.i_railway_state_repo import IRailwayStateRepo

__all__ = ['INotifier', 'IRailwayStateRepo']
