"""Simple two-language (ko/en) translation helper."""

_STRINGS: dict[str, dict[str, str]] = {
    "page_title": {
        "ko": "오러리 시계",
        "en": "Orrery Clock",
    },
    "label_body": {
        "ko": "천체",
        "en": "Body",
    },
    "label_style": {
        "ko": "표기 방식",
        "en": "Layout",
    },
    "label_longitude": {
        "ko": "경도 (선택)",
        "en": "Longitude (optional)",
    },
    "label_date": {
        "ko": "날짜",
        "en": "Date",
    },
    "label_time": {
        "ko": "시각",
        "en": "Time",
    },
    "label_timezone": {
        "ko": "시간대",
        "en": "Timezone",
    },
    "label_parse": {
        "ko": "타임스탬프 해석",
        "en": "Parse a timestamp",
    },
    "heading_now": {
        "ko": "지금",
        "en": "Now",
    },
    "heading_convert": {
        "ko": "날짜 변환",
        "en": "Convert a date",
    },
    "btn_refresh": {
        "ko": "↺ 새로고침",
        "en": "↺ Refresh",
    },
    "constants": {
        "ko": "틱 {tick:.1f}초 · 1년 {days:.2f}일",
        "en": "tick {tick:.1f}s · {days:.2f} days per year",
    },
    "no_year": {
        "ko": "1년이 2일보다 짧아 연/일 표기가 없습니다.",
        "en": "The year is shorter than two days, so only canonical time is shown.",
    },
    "parsed_utc": {
        "ko": "UTC 시각: {utc}",
        "en": "UTC: {utc}",
    },
    "error_parse": {
        "ko": "해석할 수 없는 타임스탬프예요. ({error})",
        "en": "Could not parse the timestamp. ({error})",
    },
    "error_config": {
        "ko": "설정 값이 잘못되어 기본값을 사용해요. ({error})",
        "en": "Invalid settings, using defaults. ({error})",
    },
    "error_time": {
        "ko": "이 시간대에 존재하지 않거나 모호한 시각이에요. ({error})",
        "en": "That time does not exist or is ambiguous in this timezone. ({error})",
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
