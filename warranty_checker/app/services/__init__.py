"""
Service layer abstraction.

Each service encapsulates the logic for one concern (record storage,
warranty lookup, form rendering, messages) so API handlers stay thin.
"""
