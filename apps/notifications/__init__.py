"""Notifications app package.

Guest emails for booking decisions are delivered through an outbox:
domain events published after commit insert a delivery row and enqueue a
Celery task that renders and sends the email. Delivery failures are
recorded on the row and never reach the booking workflow.
"""
