# application/services/raw_json.py
from __future__ import annotations

import json
from typing import Any, Dict


def loads_preserving_numbers(text: str) -> Any:
    """
    JSON を数値リテラルを文字列のまま残して読み込む

    GoTo Webinar の registrantKey などは 19 桁の整数で返るため、
    float に変換すると桁落ちする。数値はソース上の表記そのままの str になる。
    """
    return json.loads(text, parse_int=str, parse_float=str, parse_constant=str)


def decode_object(text: str) -> Dict[str, Any]:
    if not text or not text.strip():
        return {}
    data = loads_preserving_numbers(text)
    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object, got {type(data).__name__}")
    return data
