import unicodedata


def normalize_text(text: str) -> str:
    """Canonical lookup form: trimmed and lowercased."""
    return (text or "").strip().lower()


def fold_diacritics(text: str) -> str:
    """Strip combining marks ("está" -> "esta")."""
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(c for c in decomposed if not unicodedata.combining(c))
