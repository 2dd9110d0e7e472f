"""Court bookings: the availability checker and the booking workflow."""
