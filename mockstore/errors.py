"""
Taxonomie d'erreurs commune aux deux passerelles.

Chaque erreur porte un `kind`; la table STATUS_BY_KIND est l'unique
correspondance vers les codes HTTP (utilisée par app_setup.exception_handlers).
"""
from typing import Dict


class AppError(Exception):
    kind = "internal"
    default_message = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AppError):
    kind = "validation"
    default_message = "Invalid input"


class AuthenticationFailure(AppError):
    kind = "authentication"
    default_message = "Invalid credentials"


class Forbidden(AuthenticationFailure):
    # Identité authentifiable mais rôle insuffisant
    kind = "forbidden"
    default_message = "Forbidden: Admins only"


class NotFound(AppError):
    kind = "not_found"
    default_message = "Not found"


class PreconditionFailed(AppError):
    kind = "precondition"
    default_message = "Precondition failed"


class UpstreamUnavailable(AppError):
    kind = "upstream_unavailable"
    default_message = "Upstream service unavailable"


STATUS_BY_KIND: Dict[str, int] = {
    ValidationError.kind: 400,
    AuthenticationFailure.kind: 401,
    Forbidden.kind: 403,
    NotFound.kind: 404,
    PreconditionFailed.kind: 400,
    UpstreamUnavailable.kind: 503,
    AppError.kind: 500,
}


def status_for(exc: AppError) -> int:
    return STATUS_BY_KIND.get(exc.kind, 500)


def error_body(exc: AppError) -> Dict[str, str]:
    return {"error": exc.kind, "detail": exc.message}
