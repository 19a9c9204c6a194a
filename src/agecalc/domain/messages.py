"""User-facing text (pt-BR, the single supported locale)."""

from __future__ import annotations

from agecalc.domain.types import FormField

REQUIRED: dict[str, str] = {
    FormField.FIRST_NAME: "Informe o nome",
    FormField.LAST_NAME: "Informe o sobrenome",
    FormField.EMAIL: "Informe o email",
    FormField.DAY: "Informe o dia",
    FormField.MONTH: "Informe o mês",
    FormField.YEAR: "Informe o ano",
}

LABELS: dict[str, str] = {
    FormField.FIRST_NAME: "NOME",
    FormField.LAST_NAME: "SOBRENOME",
    FormField.EMAIL: "EMAIL",
    FormField.DAY: "DIA",
    FormField.MONTH: "MÊS",
    FormField.YEAR: "ANO",
}

MIN_NAME_LENGTH = "Mínimo 2 letras"
INVALID_EMAIL = "Email inválido"
DIGITS_ONLY = "Somente números"
INVALID_DAY = "Dia inválido"
INVALID_MONTH = "Mês inválido"
FOUR_DIGIT_YEAR = "Use 4 dígitos"
YEAR_TOO_OLD = "Ano muito antigo"
FUTURE_YEAR = "Futuro não permitido"

INVALID_DATE = "Data inválida."
FUTURE_DATE = "A data deve ser no passado."

PERSON_FALLBACK = "A pessoa"
UNITS = ("anos", "meses", "dias")
PLACEHOLDER = "--"


def max_days(limit: int) -> str:
    return f"Máx: {limit} dias"


def summary(name: str, years: int, months: int, days: int) -> str:
    """Success sentence shown after a successful submit."""
    return f"{name} tem {years} anos, {months} meses e {days} dias."
