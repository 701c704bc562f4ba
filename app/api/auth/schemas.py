"""
Authentication validation schemas
"""
from typing import Optional, Dict, Any, Tuple

from app.utils.validation import Validator


class AuthSchemas:
    """Validation schemas for authentication endpoints"""
    
    @staticmethod
    def validate_login(data: Dict[str, Any]) -> Tuple[bool, Optional[Dict[str, str]], Optional[Dict[str, Any]]]:
        """
        Validate login data
        
        Returns:
            Tuple of (is_valid, errors, cleaned_data)
        """
        errors = {}
        cleaned_data = {}
        
        email = str(data.get('email') or '').strip().lower()
        if not email:
            errors['email'] = 'Email is required'
        else:
            cleaned_data['email'] = email
        
        password = data.get('password') or ''
        if not password:
            errors['password'] = 'Password is required'
        else:
            cleaned_data['password'] = password
        
        return len(errors) == 0, errors, cleaned_data
    
    @staticmethod
    def validate_registration(data: Dict[str, Any]) -> Tuple[bool, Optional[Dict[str, str]], Optional[Dict[str, Any]]]:
        """
        Validate account registration data
        
        Returns:
            Tuple of (is_valid, errors, cleaned_data)
        """
        errors = {}
        cleaned_data = {}
        
        email = str(data.get('email') or '').strip().lower()
        if not email:
            errors['email'] = 'Email is required'
        elif not Validator.validate_email(email):
            errors['email'] = 'Invalid email format'
        else:
            cleaned_data['email'] = email
        
        name = str(data.get('name') or '').strip()
        cleaned_data['name'] = name or email.split('@')[0]
        
        password = data.get('password') or ''
        confirm_password = data.get('confirmPassword')
        
        if not password:
            errors['password'] = 'Password is required'
        elif len(password) < 8:
            errors['password'] = 'Password must be at least 8 characters'
        elif not AuthSchemas._validate_password_strength(password):
            errors['password'] = 'Password must contain at least one letter and one number'
        else:
            cleaned_data['password'] = password
        
        if confirm_password is not None and confirm_password != password:
            errors['confirmPassword'] = 'Passwords do not match'
        
        return len(errors) == 0, errors, cleaned_data
    
    @staticmethod
    def _validate_password_strength(password: str) -> bool:
        has_letter = any(ch.isalpha() for ch in password)
        has_digit = any(ch.isdigit() for ch in password)
        return has_letter and has_digit
