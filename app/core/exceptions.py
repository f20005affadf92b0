# app/core/exceptions.py
"""
Errores de dominio del portafolio.

Todos heredan de HTTPException para que los servicios los lancen igual que el
resto de la app y FastAPI los convierta en respuestas sin manejo extra.
"""

from typing import Any, Dict, Iterable, List, Optional
from fastapi import HTTPException, status


class PortfolioError(HTTPException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Solicitud inválida"

    def __init__(self, detail: Any = None, headers: Optional[Dict[str, str]] = None):
        super().__init__(
            status_code=self.status_code,
            detail=detail if detail is not None else self.default_detail,
            headers=headers,
        )


class ValidationError(PortfolioError):
    default_detail = "Error de validación"

    def __init__(self, errors: List[Dict[str, str]]):
        self.errors = errors
        super().__init__({"message": self.default_detail, "errors": errors})

    @property
    def fields(self) -> List[str]:
        return [e["field"] for e in self.errors]


class InvalidOwners(PortfolioError):
    default_detail = "Uno o más propietarios no existen o están inactivos."

    def __init__(self, owner_ids: Iterable[str]):
        self.owner_ids = list(owner_ids)
        super().__init__({"message": self.default_detail, "owners": self.owner_ids})


class InvestmentCapExceeded(PortfolioError):
    default_detail = "El monto invertido no puede superar $1,000,000 para usuarios no administradores."


class EmailAlreadyRegistered(PortfolioError):
    default_detail = "Email ya registrado"


class Forbidden(PortfolioError):
    status_code = status.HTTP_403_FORBIDDEN
    default_detail = "Acceso denegado. No eres propietario de esta inversión."


class ForbiddenOwnerSet(Forbidden):
    default_detail = "Solo puedes crear inversiones en las que seas propietario."


class ForbiddenOwnerRemoval(Forbidden):
    default_detail = "No puedes quitarte como propietario de esta inversión."


class NotFound(PortfolioError):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Inversión no encontrada"


class InvestmentInactive(PortfolioError):
    status_code = status.HTTP_409_CONFLICT
    default_detail = "La inversión fue eliminada y no puede modificarse."


class Unauthorized(PortfolioError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "Token inválido"

    def __init__(self, detail: Any = None):
        super().__init__(detail, headers={"WWW-Authenticate": "Bearer"})


class InvalidCredentials(Unauthorized):
    default_detail = "Credenciales incorrectas"


class AccountInactive(Unauthorized):
    default_detail = "La cuenta está desactivada. Contacta al administrador."
