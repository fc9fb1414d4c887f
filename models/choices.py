"""Closed value sets shared by several models."""

from enum import Enum
from typing import Type


class BrazilianState(str, Enum):
    """Federative units (UF codes)."""

    AC = "AC"
    AL = "AL"
    AP = "AP"
    AM = "AM"
    BA = "BA"
    CE = "CE"
    DF = "DF"
    ES = "ES"
    GO = "GO"
    MA = "MA"
    MT = "MT"
    MS = "MS"
    MG = "MG"
    PA = "PA"
    PB = "PB"
    PR = "PR"
    PE = "PE"
    PI = "PI"
    RJ = "RJ"
    RN = "RN"
    RS = "RS"
    RO = "RO"
    RR = "RR"
    SC = "SC"
    SP = "SP"
    SE = "SE"
    TO = "TO"

    @property
    def label(self) -> str:
        return f"{self.value} - {STATE_NAMES[self.value]}"


STATE_NAMES = {
    "AC": "Acre",
    "AL": "Alagoas",
    "AP": "Amapá",
    "AM": "Amazonas",
    "BA": "Bahia",
    "CE": "Ceará",
    "DF": "Distrito Federal",
    "ES": "Espírito Santo",
    "GO": "Goiás",
    "MA": "Maranhão",
    "MT": "Mato Grosso",
    "MS": "Mato Grosso do Sul",
    "MG": "Minas Gerais",
    "PA": "Pará",
    "PB": "Paraíba",
    "PR": "Paraná",
    "PE": "Pernambuco",
    "PI": "Piauí",
    "RJ": "Rio de Janeiro",
    "RN": "Rio Grande do Norte",
    "RS": "Rio Grande do Sul",
    "RO": "Rondônia",
    "RR": "Roraima",
    "SC": "Santa Catarina",
    "SP": "São Paulo",
    "SE": "Sergipe",
    "TO": "Tocantins",
}


def choice_value(choices: Type[Enum], value) -> str:
    """
    Coerce `value` to the plain string of a member of `choices`.

    "" means "not chosen yet" and is always accepted.

    Raises:
        ValueError: If value is neither "" nor a member value
    """
    if value is None or value == "":
        return ""
    if isinstance(value, choices):
        return value.value
    try:
        return choices(value).value
    except ValueError:
        raise ValueError(
            f"{value!r} is not a valid {choices.__name__}"
        ) from None
