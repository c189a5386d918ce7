"""
Data formatting utilities
"""

import re
from typing import Optional, Union


class Formatters:
    """Data formatting utilities"""
    
    @staticmethod
    def format_price(amount: Union[int, float]) -> str:
        """Format price for display: 1299 -> $1,299"""
        if float(amount).is_integer():
            return f"${int(amount):,}"
        return f"${amount:,.2f}"
    
    @staticmethod
    def mask_phone(phone: Optional[str]) -> str:
        """Mask phone number, keeping the last 4 digits"""
        if not phone:
            return ""
        
        digits = re.sub(r'\D', '', phone)
        return f"***{digits[-4:]}"
    
    @staticmethod
    def mask_email(email: Optional[str]) -> str:
        """Mask email, keeping the first character and the domain"""
        if not email or '@' not in email:
            return ""
        
        username, domain = email.rsplit('@', 1)
        return f"{username[:1]}***@{domain}"
    
    @staticmethod
    def is_email(email: Optional[str]) -> bool:
        if not email:
            return False
        username, _, domain = email.rpartition('@')
        return bool(username) and bool(domain)
    
    @staticmethod
    def has_phone_digits(phone: Optional[str]) -> bool:
        return bool(phone) and len(re.sub(r'\D', '', phone)) >= 4
