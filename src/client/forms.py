# src/client/forms.py

import math
import re

FORM_FIELDS = ("name", "description", "imageUrl", "imdb", "metaScore")
NUMERIC_FIELDS = ("imdb", "metaScore")

# Ведущий числовой литерал в духе parseFloat: только ASCII-цифры, без "_"
LEADING_NUMBER = re.compile(r"\s*([+-]?(?:Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?))")


def parse_number(text) -> float:
    """Ведущее число из строки, как parseFloat; NaN если числа нет."""
    if text is None:
        return math.nan
    match = LEADING_NUMBER.match(str(text))
    if match is None:
        return math.nan
    return float(match.group(1).replace("Infinity", "inf"))


def to_json_value(value):
    # NaN и бесконечности в JSON не бывает, браузер отправляет их как null
    if isinstance(value, float) and not math.isfinite(value):
        return None
    return value


def build_film_payload(form: dict) -> dict:
    payload = {}
    for field in FORM_FIELDS:
        value = form.get(field, "")
        if field in NUMERIC_FIELDS:
            value = to_json_value(parse_number(value))
        payload[field] = value
    return payload
