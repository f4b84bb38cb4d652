class ReservationError(Exception):
    """Base error for reservation data that cannot be reconciled."""


class UnknownReservationScope(ReservationError, ValueError):
    def __init__(self, scope):
        super(UnknownReservationScope, self).__init__(
            'unknown reservation scope: {!r}'.format(scope))
        self.scope = scope
