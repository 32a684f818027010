"""Catalog of currencies offered by the converter UI."""
from typing import Dict


# code -> display metadata
_CURRENCIES: Dict[str, Dict[str, str]] = {
    'USD': {'name': 'US Dollar', 'symbol': '$', 'flag': '🇺🇸'},
    'EUR': {'name': 'Euro', 'symbol': '€', 'flag': '🇪🇺'},
    'GBP': {'name': 'British Pound', 'symbol': '£', 'flag': '🇬🇧'},
    'JPY': {'name': 'Japanese Yen', 'symbol': '¥', 'flag': '🇯🇵'},
    'AUD': {'name': 'Australian Dollar', 'symbol': 'A$', 'flag': '🇦🇺'},
    'CAD': {'name': 'Canadian Dollar', 'symbol': 'C$', 'flag': '🇨🇦'},
    'CHF': {'name': 'Swiss Franc', 'symbol': 'Fr', 'flag': '🇨🇭'},
    'CNY': {'name': 'Chinese Yuan', 'symbol': '¥', 'flag': '🇨🇳'},
    'SEK': {'name': 'Swedish Krona', 'symbol': 'kr', 'flag': '🇸🇪'},
    'NZD': {'name': 'New Zealand Dollar', 'symbol': 'NZ$', 'flag': '🇳🇿'},
    'MXN': {'name': 'Mexican Peso', 'symbol': '$', 'flag': '🇲🇽'},
    'SGD': {'name': 'Singapore Dollar', 'symbol': 'S$', 'flag': '🇸🇬'},
    'HKD': {'name': 'Hong Kong Dollar', 'symbol': 'HK$', 'flag': '🇭🇰'},
    'NOK': {'name': 'Norwegian Krone', 'symbol': 'kr', 'flag': '🇳🇴'},
    'INR': {'name': 'Indian Rupee', 'symbol': '₹', 'flag': '🇮🇳'},
    'BRL': {'name': 'Brazilian Real', 'symbol': 'R$', 'flag': '🇧🇷'},
    'RUB': {'name': 'Russian Ruble', 'symbol': '₽', 'flag': '🇷🇺'},
    'KRW': {'name': 'South Korean Won', 'symbol': '₩', 'flag': '🇰🇷'},
    'TRY': {'name': 'Turkish Lira', 'symbol': '₺', 'flag': '🇹🇷'},
    'ZAR': {'name': 'South African Rand', 'symbol': 'R', 'flag': '🇿🇦'},
    'PLN': {'name': 'Polish Zloty', 'symbol': 'zł', 'flag': '🇵🇱'},
    'DKK': {'name': 'Danish Krone', 'symbol': 'kr', 'flag': '🇩🇰'},
    'CZK': {'name': 'Czech Koruna', 'symbol': 'Kč', 'flag': '🇨🇿'},
    'HUF': {'name': 'Hungarian Forint', 'symbol': 'Ft', 'flag': '🇭🇺'},
    'ILS': {'name': 'Israeli Shekel', 'symbol': '₪', 'flag': '🇮🇱'},
    'CLP': {'name': 'Chilean Peso', 'symbol': '$', 'flag': '🇨🇱'},
    'PHP': {'name': 'Philippine Peso', 'symbol': '₱', 'flag': '🇵🇭'},
    'AED': {'name': 'UAE Dirham', 'symbol': 'د.إ', 'flag': '🇦🇪'},
    'COP': {'name': 'Colombian Peso', 'symbol': '$', 'flag': '🇨🇴'},
    'SAR': {'name': 'Saudi Riyal', 'symbol': '﷼', 'flag': '🇸🇦'},
    'MYR': {'name': 'Malaysian Ringgit', 'symbol': 'RM', 'flag': '🇲🇾'},
    'RON': {'name': 'Romanian Leu', 'symbol': 'lei', 'flag': '🇷🇴'},
    'THB': {'name': 'Thai Baht', 'symbol': '฿', 'flag': '🇹🇭'},
    'BGN': {'name': 'Bulgarian Lev', 'symbol': 'лв', 'flag': '🇧🇬'},
    'HRK': {'name': 'Croatian Kuna', 'symbol': 'kn', 'flag': '🇭🇷'},
    'ISK': {'name': 'Icelandic Krona', 'symbol': 'kr', 'flag': '🇮🇸'},
    'UYU': {'name': 'Uruguayan Peso', 'symbol': '$U', 'flag': '🇺🇾'},
}


def list_supported() -> Dict[str, Dict[str, str]]:
    """Return the supported currencies keyed by code.

    A fresh copy is returned on every call; callers may mutate it freely.
    """
    return {code: dict(meta) for code, meta in _CURRENCIES.items()}
