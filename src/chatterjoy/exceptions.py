"""
Custom exceptions for the ChatterJoy service.

Provider transport failures are deliberately absent here: they travel as
explicit outcome values (see chatterjoy.models.outcomes) so the pipeline
decides to continue or abort by inspection. These exceptions cover the
failures that end a request before or outside the pipeline.
"""


class ChatterJoyError(Exception):
    """
    Base exception for all service errors.
    
    Carries a human-readable message plus structured details for logging.
    """
    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class InputValidationError(ChatterJoyError):
    """
    Raised when a required request field is missing or blank.
    
    Reported as 400 and never retried. No provider call is issued.
    """
    pass


class ConfigurationError(ChatterJoyError):
    """
    Raised when a credential needed by the requested route is absent or unusable.
    
    Reported as 500. Only the dependent route stops working; the process
    keeps serving everything else.
    """
    pass


class PushDeliveryError(ChatterJoyError):
    """
    Raised when Firebase Cloud Messaging rejects or fails to send a message.
    """
    pass
