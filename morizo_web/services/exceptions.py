from __future__ import annotations

from typing import Optional


class ServiceError(RuntimeError):
    """Base class for service-layer errors."""

class ASRError(ServiceError):
    """Errors from the ASR adapter."""

class UpstreamError(ServiceError):
    """Errors talking to the Morizo AI backend (transport or non-2xx)."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code
