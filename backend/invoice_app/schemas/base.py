"""
Schema base condiviso
Progetto: Invoice Manager

I record sono persistiti e serializzati in camelCase (es. ``invoiceNumber``),
gli attributi Python restano in snake_case.

NaN e infinito sono rifiutati: non hanno una rappresentazione JSON e
verrebbero salvati come null, rendendo illeggibile l'intera collezione.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base per tutti gli schemi: alias camelCase, input accettato con entrambi i nomi."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        allow_inf_nan=False,
    )


class StrictCamelModel(CamelModel):
    """Come CamelModel ma rifiuta campi sconosciuti (payload di create/update)."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        allow_inf_nan=False,
        extra="forbid",
    )
