# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the business logic behind the routes:
# - models/: Pydantic schemas for data validation
# - services/: Jobs, devices, detection tasks and object storage
#
# Routes stay thin; services raise app exceptions that the exception
# handlers turn into response envelopes.
# =============================================================================
