# app/utils/conditions.py


def parse_conditions(raw: str | None) -> list[str] | None:
    """
    Split a comma-separated conditions field into labels.

    Tokens are stripped and empty tokens dropped, so "clean, sealed",
    "clean,sealed" and "clean, , sealed," all give ["clean", "sealed"].
    Returns None when nothing is left.
    """
    if raw is None:
        return None
    tokens = [token.strip() for token in raw.split(",")]
    conditions = [token for token in tokens if token]
    return conditions or None
