"""Simple two-language (ko/en) translation helper."""

_STRINGS: dict[str, dict[str, str]] = {
    "title": {
        "ko": "네버랜드 나침반",
        "en": "Neverland Compass",
    },
    "found_headline": {
        "ko": "네버랜드를 찾았어요!",
        "en": "You found Neverland!",
    },
    "found_hint": {
        "ko": "{star}이(가) 바로 거기 있어요!",
        "en": "{star} is right there!",
    },
    "point_headline": {
        "ko": "휴대폰을 {direction} 방향, {alt}° 위로 향하세요",
        "en": "Point your phone at {direction}, {alt}° up",
    },
    "hint_warmer": {
        "ko": "가까워지고 있어요...",
        "en": "Getting warmer...",
    },
    "hint_searching": {
        "ko": "{star}을(를) 찾는 중...",
        "en": "Searching for {star}...",
    },
    "look_headline": {
        "ko": "{direction} 방향, 지평선 위 {alt}°를 보세요",
        "en": "Look {direction}, {alt}° above horizon",
    },
    "below_horizon": {
        "ko": "{star}은(는) 지금 지평선 아래에 있어요",
        "en": "{star} is below the horizon right now",
    },
    "rise_set": {
        "ko": "뜨는 시각 {rise} · 지는 시각 {set}",
        "en": "Rises {rise} · Sets {set}",
    },
    "never_sets": {
        "ko": "{star}은(는) 이곳에서 지지 않아요",
        "en": "{star} never sets here",
    },
    "never_rises": {
        "ko": "{star}은(는) 이곳에서 뜨지 않아요",
        "en": "{star} never rises here",
    },
    "device_marker": {
        "ko": "휴대폰 방향",
        "en": "Device",
    },
    "horizon": {
        "ko": "지평선",
        "en": "Horizon",
    },
}


def t(key: str, lang: str, **kwargs: object) -> str:
    """Return the translated string for key in lang, formatted with kwargs.

    Falls back to 'en', then to the key itself if not found.
    """
    entry = _STRINGS.get(key)
    if entry is None:
        return key
    text = entry.get(lang) or entry.get("en") or key
    return text.format(**kwargs) if kwargs else text
