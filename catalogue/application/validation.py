from typing import Dict, List, NamedTuple, Optional
from catalogue.domain.models import NAME_MAX_LENGTH, DESCRIPTION_MAX_LENGTH

class FieldError(NamedTuple):
    field: str
    message: str

class ProductValidationError(Exception):
    """Raised by create when the payload breaks a field rule"""

    def __init__(self, errors: List[FieldError]):
        super().__init__("; ".join(f"{e.field}: {e.message}" for e in errors))
        self.errors = errors

    def as_dict(self) -> Dict[str, List[str]]:
        grouped: Dict[str, List[str]] = {}
        for error in self.errors:
            grouped.setdefault(error.field, []).append(error.message)
        return grouped

def _check_text(
    field: str,
    value: Optional[str],
    max_length: int,
    required_message: str,
    length_message: str,
) -> Optional[FieldError]:
    # Whitespace-only counts as missing
    if value is None or not value.strip():
        return FieldError(field, required_message)
    if len(value) > max_length:
        return FieldError(field, length_message)
    return None

def validate_product(name: Optional[str], description: Optional[str]) -> List[FieldError]:
    """Return every field rule broken by a create payload, empty when valid"""
    checks = [
        _check_text(
            "name", name, NAME_MAX_LENGTH,
            "Product name is required",
            f"Name must be between 1 and {NAME_MAX_LENGTH} characters",
        ),
        _check_text(
            "description", description, DESCRIPTION_MAX_LENGTH,
            "Product description is required",
            f"Description must be between 1 and {DESCRIPTION_MAX_LENGTH} characters",
        ),
    ]
    return [error for error in checks if error is not None]
