"""
Eccezioni Custom per l'applicazione.
Progetto: Invoice Manager

Definisce eccezioni specifiche del dominio per una gestione
centralizzata degli errori.

NOTA: BusinessValidationError è distinta da pydantic.ValidationError.
- pydantic.ValidationError: errori di formato/tipo nei dati di input (gestiti da FastAPI → 422)
- BusinessValidationError: errori dei form (campo → messaggio), gestiti dal nostro handler → 422
"""

from typing import Any, Dict, Optional

__all__ = [
    "AppException",
    "NotFoundError",
    "BusinessValidationError",
    "StoreNotInitializedError",
]


class AppException(Exception):
    """
    Base exception per l'applicazione.

    Tutte le eccezioni custom ereditano da questa classe base.

    Attributes:
        status_code: HTTP status code da restituire al client
        error_code: Identificativo univoco dell'errore per il frontend
        detail: Messaggio di errore leggibile per l'utente
        extra: Dizionario con dati aggiuntivi per il frontend
    """

    status_code: int = 500
    error_code: str = "INTERNAL_SERVER_ERROR"

    def __init__(
        self,
        detail: str,
        error_code: Optional[str] = None,
        extra: Optional[Dict[str, Any]] = None,
    ) -> None:
        self.detail = detail
        self.error_code = error_code if error_code is not None else self.error_code
        self.extra = extra
        self.status_code = self.__class__.status_code
        super().__init__(detail)


class NotFoundError(AppException):
    """
    Eccezione sollevata quando una risorsa non viene trovata.

    Utilizzata quando un'entità cercata non esiste nell'archivio.
    """

    status_code: int = 404
    error_code: str = "RESOURCE_NOT_FOUND"

    def __init__(
        self,
        detail: str = "Resource not found",
        error_code: Optional[str] = None,
        extra: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(detail, error_code, extra)


class BusinessValidationError(ValueError, AppException):
    """
    Eccezione sollevata quando un form non supera la validazione.

    I messaggi per campo sono in ``errors`` (e in ``extra["errors"]``),
    con le stesse chiavi usate dal frontend (es. ``clientId``, ``items``).

    Esempi di utilizzo:
        - "Please select a client"
        - "Price must be greater than zero"
    """

    status_code: int = 422
    error_code: str = "FORM_VALIDATION_ERROR"

    def __init__(
        self,
        detail: str = "Validation failed",
        error_code: Optional[str] = None,
        extra: Optional[Dict[str, Any]] = None,
        errors: Optional[Dict[str, str]] = None,
    ) -> None:
        self.errors: Dict[str, str] = dict(errors or {})
        if self.errors:
            extra = {**(extra or {}), "errors": self.errors}
        # Chiama AppException.__init__ direttamente per evitare ValueError
        AppException.__init__(self, detail, error_code, extra)


class StoreNotInitializedError(RuntimeError):
    """
    Errore di programmazione: archivio usato fuori dal ciclo di vita dell'app.

    Non è un AppException: non deve diventare una risposta 4xx, ma
    interrompere subito la richiesta (500 + log).
    """
