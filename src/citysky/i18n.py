"""Simple three-language (en/ja/ko) label helper."""

_STRINGS: dict[str, dict[str, str]] = {
    "weekday_0": {"en": "Mon", "ja": "月", "ko": "월"},
    "weekday_1": {"en": "Tue", "ja": "火", "ko": "화"},
    "weekday_2": {"en": "Wed", "ja": "水", "ko": "수"},
    "weekday_3": {"en": "Thu", "ja": "木", "ko": "목"},
    "weekday_4": {"en": "Fri", "ja": "金", "ko": "금"},
    "weekday_5": {"en": "Sat", "ja": "土", "ko": "토"},
    "weekday_6": {"en": "Sun", "ja": "日", "ko": "일"},
    "day": {"en": "day", "ja": "昼", "ko": "낮"},
    "night": {"en": "night", "ja": "夜", "ko": "밤"},
    "uv_low": {"en": "Low", "ja": "弱い", "ko": "낮음"},
    "uv_moderate": {"en": "Moderate", "ja": "中程度", "ko": "보통"},
    "uv_high": {"en": "High", "ja": "強い", "ko": "높음"},
    "uv_very_high": {"en": "Very High", "ja": "非常に強い", "ko": "매우 높음"},
    "unknown_city": {
        "en": "Unknown city: {city}",
        "ja": "都市が見つかりません: {city}",
        "ko": "도시를 찾을 수 없어요: {city}",
    },
    "error_when": {
        "en": "Invalid time, expected YYYY-MM-DD HH:MM ({error})",
        "ja": "時刻の形式が正しくありません。YYYY-MM-DD HH:MM で入力してください ({error})",
        "ko": "시각 형식이 올바르지 않아요. YYYY-MM-DD HH:MM 으로 입력하세요 ({error})",
    },
}


def t(key: str, lang: str) -> str:
    """Return the translated string for key in lang.

    Falls back to 'en', then to the key itself if not found.
    """
    entry = _STRINGS.get(key)
    if entry is None:
        return key
    return entry.get(lang) or entry.get("en") or key


def weekday_label(weekday: int, lang: str) -> str:
    """Short weekday name, Monday=0."""
    return t(f"weekday_{weekday % 7}", lang)
