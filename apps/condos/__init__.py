"""Condos app package.

Owns the condo lifecycle: provisioning a condo together with its paired
front-desk account, partial updates, owner-controlled status changes and
deletion that removes the front-desk account but never the owner.
"""
