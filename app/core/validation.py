"""Field-level validation that collects every problem before failing.

Each check returns a ``{field: message}`` map; callers raise
``ValidationError`` with the whole map when it is not empty.
"""
from typing import Any, Collection, Dict, Mapping, Optional

from app.core.domain_types import AccountType

_NON_NEGATIVE_MESSAGES = {
    "price": "O preço não pode ser um valor negativo.",
    "area": "A área não pode ser um valor negativo.",
    "condo_fee": "O condomínio não pode ser um valor negativo.",
    "iptu": "O IPTU não pode ser um valor negativo.",
    "bedrooms": "Número de quartos inválido.",
    "suites": "Número de suítes inválido.",
    "bathrooms": "Número de banheiros inválido.",
    "garage_spots": "Número de vagas inválido.",
}

_REQUIRED_TEXT_MESSAGES = {
    "title": "O título é obrigatório.",
    "city": "A cidade é obrigatória.",
}

PROFESSIONAL_BASE_FIELDS = (
    "phone",
    "document_type",
    "document_number",
    "document_url",
    "years_of_experience",
    "service_regions",
    "specialties",
    "contact_preference",
)

PROFESSIONAL_TYPE_FIELDS = {
    AccountType.CORRETOR: ("creci_number", "creci_state", "proof_of_address_url"),
    AccountType.IMOBILIARIA: (
        "company_name",
        "cnpj",
        "creci_number",
        "creci_state",
        "proof_of_address_url",
        "team_size",
    ),
}


def validate_property_data(
    data: Mapping[str, Any],
    allowed_types: Optional[Collection[str]] = None,
) -> Dict[str, str]:
    """Check a complete (or fully merged) property record."""
    errors: Dict[str, str] = {}

    for field, message in _REQUIRED_TEXT_MESSAGES.items():
        if not str(data.get(field) or "").strip():
            errors[field] = message

    for field, message in _NON_NEGATIVE_MESSAGES.items():
        value = data.get(field)
        if value is not None and value < 0:
            errors[field] = message

    bedrooms, suites = data.get("bedrooms"), data.get("suites")
    if "suites" not in errors and suites and bedrooms is not None and suites > bedrooms:
        errors["suites"] = "O número de suítes não pode ser maior que o de quartos."

    if allowed_types is not None and data.get("type") not in allowed_types:
        errors["type"] = "Tipo de imóvel inválido."

    return errors


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def missing_professional_fields(account_type: str, data: Mapping[str, Any]) -> Dict[str, str]:
    """Required fields for a professional validation submission that are blank."""
    required = PROFESSIONAL_BASE_FIELDS + PROFESSIONAL_TYPE_FIELDS.get(AccountType(account_type), ())
    return {field: "Campo obrigatório." for field in required if _is_blank(data.get(field))}
