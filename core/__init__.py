# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the business logic behind the HTTP layer:
# - models/: Pydantic schemas for request validation
# - assessments/: Deterministic psychology questionnaire scoring
# - services/: Membership checks, invitation lifecycle, daily question flow,
#   crisis logging
#
# Routers stay thin; rules live here so they can be tested without HTTP.
# =============================================================================
