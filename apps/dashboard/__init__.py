"""Dashboard app package.

Read-only aggregates for owners and front desks, plus the public
availability lookup used by the booking page.
"""
