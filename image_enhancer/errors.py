"""
Error hierarchy for the image enhancer.
Every failure of an enhancement attempt maps to one human-readable message.
"""


class EnhancerError(Exception):
    """Base exception for enhancer errors"""
    def __init__(self, message):
        self.message = message
        super().__init__(self.message)


class ConfigurationError(EnhancerError):
    """Process configuration is invalid"""
    pass


class MissingApiKeyError(ConfigurationError):
    """No API key available at startup"""
    def __init__(self, names):
        super().__init__(
            message=f"API key not set. Define one of: {', '.join(names)}"
        )


class LocalIOError(EnhancerError):
    """Uploaded file could not be read as an image"""
    def __init__(self, message="Error reading the file."):
        super().__init__(message)


class ValidationError(EnhancerError):
    """Action attempted in a state that does not allow it"""
    pass


class RequestInFlight(EnhancerError):
    """An enhancement request is already outstanding"""
    def __init__(self):
        super().__init__("An enhancement is already in progress.")


class EnhancementFailed(EnhancerError):
    """Remote enhancement failed"""
    def __init__(self, message="Failed to enhance the image. Please check the logs for more details."):
        super().__init__(message)


class NoImageInResponse(EnhancementFailed):
    """Model answered without any inline image part"""
    pass


class RateLimited(EnhancerError):
    """Remote service signalled a rate or quota limit"""
    def __init__(self, message="Request limit exceeded. Please try again later."):
        super().__init__(message)
