"""
Record Validation Schemas
Explicit field lists per table; anything not named here never reaches a row
"""
from typing import Dict, Any, Tuple, Optional, List

from app.models.enums import RecordStatus, BookingStatus, ContactStatus, enum_values
from app.models.contact import DEFAULT_SUBJECT
from app.utils.validation import Validator

Result = Tuple[bool, Dict[str, str], Dict[str, Any]]

TRUE_STRINGS = ('true', '1', 'yes', 'on')


def _text(data: Dict[str, Any], key: str, max_length: int = None, errors: Dict[str, str] = None) -> Optional[str]:
    """Stripped text; with ``errors`` an over-long value is reported instead of cut"""
    value = data.get(key)
    if value is None:
        return None
    if errors is not None and max_length and len(str(value).strip()) > max_length:
        errors[key] = f'{key} must be at most {max_length} characters'
        return None
    return Validator.sanitize_input(value, max_length) or None


def _required_text(data, key, errors, label=None, max_length=None):
    value = _text(data, key, max_length, errors)
    if not value and key not in errors:
        errors[key] = f'{label or key} is required'
    return value


def _int(data, key, errors, default=None, minimum=None):
    value = data.get(key)
    if value is None or value == '':
        return default
    if isinstance(value, bool) or (isinstance(value, float) and not value.is_integer()):
        errors[key] = f'{key} must be a whole number'
        return default
    try:
        number = int(value)
    except (ValueError, TypeError):
        errors[key] = f'{key} must be a whole number'
        return default
    if minimum is not None and number < minimum:
        errors[key] = f'{key} must be at least {minimum}'
    return number


def _float(data, key, errors, default=None, minimum=None, maximum=None):
    value = data.get(key)
    if value is None or value == '':
        return default
    try:
        number = float(value)
    except (ValueError, TypeError):
        errors[key] = f'{key} must be a number'
        return default
    if minimum is not None and number < minimum:
        errors[key] = f'{key} must be at least {minimum}'
    if maximum is not None and number > maximum:
        errors[key] = f'{key} must be at most {maximum}'
    return number


def _bool(data, key, default=False):
    value = data.get(key)
    if value is None:
        return default
    if isinstance(value, str):
        return value.strip().lower() in TRUE_STRINGS
    return bool(value)


def _string_list(data, key, errors) -> List[str]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        errors[key] = f'{key} must be a list'
        return []
    return [str(item).strip() for item in value if item is not None and str(item).strip()]


def _choice(data, key, choices, errors, default=None):
    value = data.get(key)
    if value is None or value == '':
        return default
    value = str(value).strip().lower()
    if value not in choices:
        errors[key] = f'{key} must be one of: {", ".join(choices)}'
    return value


def _record_status(data, errors):
    return _choice(data, 'status', enum_values(RecordStatus), errors, default=RecordStatus.ACTIVE.value)


class Schemas:
    """Validation schemas for every writable table"""

    # ===== Public submissions =====

    @staticmethod
    def validate_booking_submission(data: Dict[str, Any]) -> Result:
        """
        Validate a public booking request

        Returns:
            (is_valid, errors, cleaned_data)
        """
        errors = {}
        cleaned_data = {}

        cleaned_data['name'] = _required_text(data, 'name', errors, 'Name', 120)
        cleaned_data['email'] = _required_text(data, 'email', errors, 'Email', 120)
        cleaned_data['phone'] = _required_text(data, 'phone', errors, 'Phone', 30)

        if cleaned_data['email'] and not Validator.validate_email(cleaned_data['email']):
            errors['email'] = 'Invalid email format'

        if cleaned_data['phone'] and not Validator.validate_phone(cleaned_data['phone']):
            errors['phone'] = 'Invalid phone number format'

        raw_date = data.get('date')
        if raw_date is None or not str(raw_date).strip():
            errors['date'] = 'Date is required'
        else:
            travel_date = Validator.parse_date(raw_date)
            if travel_date is None:
                errors['date'] = 'Date must be in YYYY-MM-DD format'
            cleaned_data['date'] = travel_date

        raw_persons = data.get('persons')
        if raw_persons is None or str(raw_persons).strip() in ('', '0'):
            errors['persons'] = 'Persons is required'
        else:
            cleaned_data['persons'] = _int(data, 'persons', errors, minimum=1)

        cleaned_data['message'] = _text(data, 'message', 5000, errors)

        # Package may be referenced by id or, from the website form, by its title
        package_id = data.get('packageId', data.get('package_id'))
        cleaned_data['package_id'] = str(package_id).strip() if package_id else None
        cleaned_data['package_label'] = _text(data, 'packageLabel', 200, errors)

        return len(errors) == 0, errors, cleaned_data

    @staticmethod
    def validate_contact_submission(data: Dict[str, Any]) -> Result:
        """Validate a public contact message"""
        errors = {}
        cleaned_data = {}

        cleaned_data['name'] = _required_text(data, 'name', errors, 'Name', 120)
        cleaned_data['email'] = _required_text(data, 'email', errors, 'Email', 120)
        cleaned_data['message'] = _required_text(data, 'message', errors, 'Message', 5000)

        if cleaned_data['email'] and not Validator.validate_email(cleaned_data['email']):
            errors['email'] = 'Invalid email format'

        cleaned_data['phone'] = _text(data, 'phone', 30, errors)
        cleaned_data['subject'] = _text(data, 'subject', 200, errors) or DEFAULT_SUBJECT

        return len(errors) == 0, errors, cleaned_data

    # ===== Status changes =====

    @staticmethod
    def validate_booking_status(data: Dict[str, Any]) -> Result:
        errors = {}
        status = _choice(data, 'status', enum_values(BookingStatus), errors)
        if status is None and 'status' not in errors:
            errors['status'] = 'status is required'
        return len(errors) == 0, errors, {'status': status}

    @staticmethod
    def validate_contact_status(data: Dict[str, Any]) -> Result:
        errors = {}
        status = _choice(data, 'status', enum_values(ContactStatus), errors)
        if status is None and 'status' not in errors:
            errors['status'] = 'status is required'
        return len(errors) == 0, errors, {'status': status}

    # ===== Catalogue records (full replace on update) =====

    @staticmethod
    def validate_package(data: Dict[str, Any]) -> Result:
        """Validate a package create/update payload"""
        errors = {}
        cleaned_data = {}

        cleaned_data['title'] = _required_text(data, 'title', errors, 'Title', 200)
        cleaned_data['slug'] = Validator.slugify(_text(data, 'slug') or cleaned_data['title'] or '')
        cleaned_data['location'] = _text(data, 'location', 200)
        cleaned_data['category'] = _text(data, 'category', 100)
        cleaned_data['description'] = _text(data, 'description')
        cleaned_data['duration'] = _text(data, 'duration', 100)
        cleaned_data['main_image_url'] = _text(data, 'main_image_url', 500)

        cleaned_data['price'] = _float(data, 'price', errors, default=0.0, minimum=0)
        cleaned_data['days'] = _int(data, 'days', errors, default=1, minimum=1)
        cleaned_data['nights'] = _int(data, 'nights', errors, default=0, minimum=0)
        cleaned_data['rating'] = _float(data, 'rating', errors, minimum=0, maximum=5)

        cleaned_data['itinerary'] = Schemas._itinerary(data, errors)
        cleaned_data['inclusions'] = _string_list(data, 'inclusions', errors)
        cleaned_data['exclusions'] = _string_list(data, 'exclusions', errors)

        cleaned_data['status'] = _record_status(data, errors)
        cleaned_data['featured'] = _bool(data, 'featured')

        # Gallery is only replaced when the payload names it
        if 'images' in data:
            cleaned_data['images'] = _string_list(data, 'images', errors)

        return len(errors) == 0, errors, cleaned_data

    @staticmethod
    def _itinerary(data, errors) -> List[Dict[str, Any]]:
        value = data.get('itinerary')
        if value is None:
            return []
        if not isinstance(value, list):
            errors['itinerary'] = 'itinerary must be a list'
            return []

        days = []
        for index, entry in enumerate(value, start=1):
            if not isinstance(entry, dict):
                errors['itinerary'] = f'itinerary entry {index} must be an object'
                continue
            entry_errors = {}
            day = _int(entry, 'day', entry_errors, default=index, minimum=1)
            if entry_errors:
                errors['itinerary'] = f'itinerary entry {index}: day must be a positive number'
                continue
            days.append({
                'day': day,
                'title': _text(entry, 'title', 200) or f'Day {day}',
                'description': _text(entry, 'description') or ''
            })
        return days

    @staticmethod
    def validate_place(data: Dict[str, Any]) -> Result:
        """Validate a place create/update payload"""
        errors = {}
        cleaned_data = {}

        cleaned_data['name'] = _required_text(data, 'name', errors, 'Name', 200)
        cleaned_data['slug'] = Validator.slugify(_text(data, 'slug') or cleaned_data['name'] or '')
        cleaned_data['region'] = _text(data, 'region', 100)
        cleaned_data['short_description'] = _text(data, 'short_description', 500)
        cleaned_data['description'] = _text(data, 'description')
        cleaned_data['hero_image_url'] = _text(data, 'hero_image_url', 500)
        cleaned_data['gallery'] = _string_list(data, 'gallery', errors)
        cleaned_data['status'] = _record_status(data, errors)
        cleaned_data['featured'] = _bool(data, 'featured')
        cleaned_data['ordering'] = _int(data, 'ordering', errors, default=0)

        return len(errors) == 0, errors, cleaned_data

    @staticmethod
    def validate_cab(data: Dict[str, Any]) -> Result:
        """Validate a cab create/update payload"""
        errors = {}
        cleaned_data = {}

        cleaned_data['name'] = _required_text(data, 'name', errors, 'Name', 200)
        cleaned_data['slug'] = Validator.slugify(_text(data, 'slug') or cleaned_data['name'] or '')
        cleaned_data['type'] = (_text(data, 'type', 50) or 'sedan').lower()
        cleaned_data['description'] = _text(data, 'description')
        cleaned_data['capacity'] = _int(data, 'capacity', errors, default=4, minimum=1)
        cleaned_data['luggage_capacity'] = _int(data, 'luggage_capacity', errors, default=2, minimum=0)
        cleaned_data['base_fare'] = _float(data, 'base_fare', errors, minimum=0)
        cleaned_data['per_km_rate'] = _float(data, 'per_km_rate', errors, minimum=0)
        cleaned_data['tags'] = _string_list(data, 'tags', errors)
        cleaned_data['main_image_url'] = _text(data, 'main_image_url', 500)
        cleaned_data['status'] = _record_status(data, errors)
        cleaned_data['featured'] = _bool(data, 'featured')
        cleaned_data['ordering'] = _int(data, 'ordering', errors, default=0)

        return len(errors) == 0, errors, cleaned_data

    @staticmethod
    def validate_service(data: Dict[str, Any]) -> Result:
        """Validate a service create/update payload"""
        errors = {}
        cleaned_data = {}

        cleaned_data['title'] = _required_text(data, 'title', errors, 'Title', 200)
        cleaned_data['description'] = _text(data, 'description')
        cleaned_data['icon'] = _text(data, 'icon', 100)
        cleaned_data['status'] = _record_status(data, errors)

        return len(errors) == 0, errors, cleaned_data
