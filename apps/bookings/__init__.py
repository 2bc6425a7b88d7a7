"""Bookings app package.

This app encapsulates the booking domain: the booking model, the pure
availability engine and status state machine under ``domain/``, and the
services that run the conflict check and the insert as one atomic unit
under a row lock on the listing.
"""
