"""
Shared Kernel

Base classes and utilities shared across all domain apps: the error
taxonomy, time range value objects, domain events and the unit of work
that publishes them after commit.
"""
