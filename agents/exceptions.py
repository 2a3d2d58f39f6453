"""
Exception hierarchy for the brand analysis and generation pipeline.

Only FetchError is fatal to an analysis. Stylesheet and structured-data
failures are recovered where they happen and never surface as exceptions.
"""

from typing import Optional, Dict, Any


class BrandKitError(Exception):
    """Base exception for all pipeline errors"""

    def __init__(
        self,
        message: str,
        cause: Optional[Exception] = None,
        context: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.cause = cause
        self.context = context or {}

    def __str__(self):
        parts = [self.message]
        if self.cause:
            parts.append(f" (caused by: {type(self.cause).__name__}: {str(self.cause)})")
        if self.context:
            parts.append(f" Context: {self.context}")
        return "".join(parts)


# === Analysis exceptions ===

class FetchError(BrandKitError):
    """The page itself could not be retrieved (non-2xx or network failure)"""

    def __init__(self, url: str, message: str, status: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.url = url
        self.status = status


# === Generation exceptions ===

class GenerationError(BrandKitError):
    """Base for failures in the brand guidelines generation stage"""
    pass


class AIGenerationError(GenerationError):
    """AI model failed to generate content"""
    pass


class AIRateLimitError(AIGenerationError):
    """AI API rate limit exceeded"""
    pass


class AIInvalidResponseError(AIGenerationError):
    """AI returned invalid or unparseable response"""
    pass
