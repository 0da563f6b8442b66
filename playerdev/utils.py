from typing import List, Dict, Any, Optional

NUMERIC_FIELDS = [
    'calendar_age', 'height_cm', 'previous_height_cm', 'weight_kg', 'previous_weight_kg',
    'body_fat_percent', 'training_days', 'injury_days', 'matches', 'minutes',
    'total_distance_m', 'sprint_distance_m', 'sprint_10m_sec', 'sprint_30m_sec',
    'cod_left_sec', 'cod_right_sec', 'club_rating_10m', 'club_rating_30m',
]

REQUIRED_TEXT_FIELDS = ['first_name', 'last_name']
REQUIRED_NUMERIC_FIELDS = ['calendar_age', 'height_cm', 'weight_kg']


def _field_label(field: str) -> str:
    return field.replace('_', ' ').capitalize()


def parse_optional_number(value: Any) -> Optional[float]:
    """Convert a form value to float; blank values become None, not 0"""
    if value is None:
        return None
    if isinstance(value, str):
        value = value.strip().replace(',', '.')
        if not value:
            return None
    return float(value)


def validate_player_data(data: Dict[str, Any]) -> List[str]:
    """Validate player form data and return list of errors"""
    errors = []

    # Required fields
    for field in REQUIRED_TEXT_FIELDS:
        if not data.get(field) or not str(data.get(field)).strip():
            errors.append(f"{_field_label(field)} is required")

    numbers = {}
    for field in NUMERIC_FIELDS:
        try:
            numbers[field] = parse_optional_number(data.get(field))
        except (ValueError, TypeError):
            errors.append(f"{_field_label(field)} must be a valid number")
            continue
        if numbers[field] is not None and numbers[field] < 0:
            errors.append(f"{_field_label(field)} must be non-negative")

    for field in REQUIRED_NUMERIC_FIELDS:
        if field in numbers and not numbers[field]:
            errors.append(f"{_field_label(field)} is required")

    for field in ('club_rating_10m', 'club_rating_30m'):
        rating = numbers.get(field)
        if rating is not None and not 1 <= rating <= 10:
            errors.append(f"{_field_label(field)} must be between 1 and 10")

    training_days = numbers.get('training_days')
    injury_days = numbers.get('injury_days')
    if training_days is not None and injury_days is not None and injury_days > training_days:
        errors.append("Injury days cannot exceed training days")

    return errors


def clean_player_data(data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Normalise raw form data into Player fields.

    Numeric strings are converted to floats and blank values to None so that
    an empty form field is never mistaken for a measured zero. Call
    ``validate_player_data`` first; invalid numbers raise ValueError here.
    """
    cleaned = {}
    for key, value in data.items():
        if key in NUMERIC_FIELDS:
            cleaned[key] = parse_optional_number(value)
        elif isinstance(value, str):
            cleaned[key] = value.strip() or None
        else:
            cleaned[key] = value
    return cleaned
