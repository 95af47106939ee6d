"""
Integration tests for the ChatterJoy service.

Exercise the FastAPI app end to end through TestClient with the inference
providers faked at the HTTP transport and the push relay mocked.
"""
