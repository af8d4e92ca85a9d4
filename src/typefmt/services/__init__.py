"""Service layer — name resolution and formatting operations.

Every public service method returns a :class:`ServiceResult`.
"""
