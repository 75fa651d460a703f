"""Bookings app package.

This app encapsulates the booking domain: public booking requests, the
owner approval workflow and front-desk check-in/check-out. Bookings
ensure atomicity and enforce date overlap constraints via database
transactions, a condo row lock and, on PostgreSQL, an exclusion
constraint.
"""
