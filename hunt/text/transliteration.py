"""
Best-effort transliteration of non-ASCII text to ASCII.

Lookup order for each non-ASCII character:
1. active substitution table (keys are lowercase, uppercase input is
   looked up by its lowercase form; case is folded later anyway)
2. Unicode compatibility decomposition (NFKD) keeping ASCII letters/digits,
   which folds diacritics: "ą" -> "a", "ö" -> "o"
3. dropped

Tables:
- default (option None): letters NFKD cannot decompose ("ł", "ß", "ø", ...)
- "german": umlauts as digraphs ("ä" -> "ae"), on top of default
- "cyrillic": Latin phonetic transliteration ("й" -> "j"), on top of default

Examples:
    >>> transliterate("łódź Börse")
    'lodz Borse'
    >>> transliterate("Börse", "german")
    'Boerse'
    >>> transliterate("Карта сайта", "cyrillic")
    'karta sajta'
"""

import unicodedata
from typing import Dict, Optional

from ..exceptions import ConfigurationError

DEFAULT_TABLE: Dict[str, str] = {
    'ł': 'l', 'ß': 'ss', 'æ': 'ae', 'ø': 'o', 'œ': 'oe', 'đ': 'd', 'ð': 'd',
    'þ': 'th', 'ı': 'i', 'ħ': 'h', 'ŀ': 'l', 'ŧ': 't', 'ĸ': 'k', 'ŋ': 'n',
}

GERMAN_TABLE: Dict[str, str] = {
    **DEFAULT_TABLE,
    'ä': 'ae', 'ö': 'oe', 'ü': 'ue', 'ß': 'ss',
}

CYRILLIC_TABLE: Dict[str, str] = {
    **DEFAULT_TABLE,
    'а': 'a', 'б': 'b', 'в': 'v', 'г': 'g', 'д': 'd', 'е': 'e', 'ё': 'e',
    'ж': 'zh', 'з': 'z', 'и': 'i', 'й': 'j', 'к': 'k', 'л': 'l', 'м': 'm',
    'н': 'n', 'о': 'o', 'п': 'p', 'р': 'r', 'с': 's', 'т': 't', 'у': 'u',
    'ф': 'f', 'х': 'h', 'ц': 'c', 'ч': 'ch', 'ш': 'sh', 'щ': 'sch',
    'ъ': '', 'ы': 'y', 'ь': '', 'э': 'e', 'ю': 'yu', 'я': 'ya',
    # Ukrainian / Belarusian
    'і': 'i', 'ї': 'yi', 'є': 'ye', 'ґ': 'g', 'ў': 'u',
}

TRANSLITERATION_TABLES: Dict[str, Dict[str, str]] = {
    'cyrillic': CYRILLIC_TABLE,
    'german': GERMAN_TABLE,
}


def _fold(char: str) -> str:
    decomposed = unicodedata.normalize('NFKD', char)
    return ''.join(c for c in decomposed if c.isascii() and c.isalnum())


def transliterate(text: str, option: Optional[str] = None) -> str:
    """
    Map non-ASCII characters to ASCII using the table selected by option.

    Non-ASCII whitespace becomes a plain space so tokenization still splits
    on it. Characters without an ASCII equivalent are dropped.

    Args:
        text: Input text
        option: None, "cyrillic" or "german" (validated by HuntConfig)

    Returns:
        ASCII-only text

    Raises:
        ConfigurationError: Unknown option
    """
    if not option:
        table = DEFAULT_TABLE
    elif option in TRANSLITERATION_TABLES:
        table = TRANSLITERATION_TABLES[option]
    else:
        raise ConfigurationError(
            f"Unknown transliteration option: {option}. "
            f"Valid options: {', '.join(sorted(TRANSLITERATION_TABLES))}"
        )

    if text.isascii():
        return text

    result = []
    for char in text:
        if char.isascii():
            result.append(char)
        elif char.isspace():
            result.append(' ')
        else:
            replacement = table.get(char)
            if replacement is None:
                replacement = table.get(char.lower())
            if replacement is None:
                replacement = _fold(char)
            result.append(replacement)
    return ''.join(result)
