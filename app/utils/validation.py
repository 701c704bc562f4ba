import re
from datetime import date, datetime
from typing import Optional


class Validator:
    """Input validation helpers"""
    
    @staticmethod
    def validate_email(email: str) -> bool:
        """Validate email format"""
        pattern = r'^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$'
        return re.match(pattern, email) is not None
    
    @staticmethod
    def validate_phone(phone: str) -> bool:
        """Validate phone number format"""
        # Remove common formatting characters and the international prefix
        cleaned = re.sub(r'[\s\-\(\)\.]', '', phone)
        if cleaned.startswith('+'):
            cleaned = cleaned[1:]
        # Check if it's 7-15 digits
        return cleaned.isdigit() and 7 <= len(cleaned) <= 15
    
    @staticmethod
    def parse_date(value) -> Optional[date]:
        """Parse an ISO date (or datetime) string, None if it is not one"""
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, date):
            return value
        try:
            text = str(value).strip()
            if 'T' in text:
                return datetime.fromisoformat(text.replace('Z', '+00:00')).date()
            return date.fromisoformat(text)
        except (ValueError, TypeError):
            return None
    
    @staticmethod
    def slugify(text: str) -> Optional[str]:
        """URL slug: lower case, runs of other characters collapsed to '-'"""
        slug = re.sub(r'[^a-z0-9]+', '-', (text or '').lower().strip())
        return slug.strip('-') or None
    
    @staticmethod
    def sanitize_input(text: str, max_length: int = None) -> str:
        """Sanitize user input"""
        if not text:
            return ""
        
        # Remove leading/trailing whitespace
        text = str(text).strip()
        
        # Truncate if needed
        if max_length and len(text) > max_length:
            text = text[:max_length]
        
        return text
