def _omit_zero(fields: dict[str, int]) -> dict[str, int]:
    """Drop zero-valued entries, the way the report has always been printed."""
    return {key: value for key, value in fields.items() if value}
