"""
Data access layer.

Repositories hide SQL from the services.  They operate on a
connection owned by the caller so that a service operation made of
several queries still commits once.
"""
