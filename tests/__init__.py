# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the Pest Detection API:
# - test_models.py: Pydantic model validation
# - test_utils.py: ID/key generation and upload validation
# - test_storage_service.py: boto3 storage wrapper
# - test_auth.py: JWT issue/validate and auth routes
# - test_api.py: Endpoint tests through TestClient
# - test_jobs.py: Upload job lifecycle endpoints
# - test_middleware.py: Middleware chain and error envelopes
#
# Run tests with: pytest
# =============================================================================
