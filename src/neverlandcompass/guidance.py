"""Human-readable pointing guidance for the locator screen."""

from neverlandcompass.i18n import t
from neverlandcompass.models import Guidance, PointingComparison, StarFix

# Below this error the searcher is told they are close.
WARMER_THRESHOLD_DEG = 45.0


def describe_position(fix: StarFix, lang: str = "en") -> Guidance:
    """Where to look, for users without a compass sensor."""
    pos = fix.position
    if not pos.is_visible:
        return Guidance(headline=t("below_horizon", lang, star=fix.star.name))
    return Guidance(
        headline=t(
            "look_headline", lang, direction=fix.compass, alt=round(pos.alt_deg)
        )
    )


def describe_pointing(
    fix: StarFix, comparison: PointingComparison, lang: str = "en"
) -> Guidance:
    """Feedback for a user sweeping their phone across the sky.

    Args:
        fix: Target star position.
        comparison: Result of compare_pointing against the fix.
        lang: Language code ('ko' or 'en').

    Returns:
        Guidance with a headline and a hint line.
    """
    name = fix.star.name
    if comparison.is_pointing:
        return Guidance(
            headline=t("found_headline", lang),
            hint=t("found_hint", lang, star=name),
        )

    if comparison.distance_deg < WARMER_THRESHOLD_DEG:
        hint = t("hint_warmer", lang)
    else:
        hint = t("hint_searching", lang, star=name)
    return Guidance(
        headline=t(
            "point_headline",
            lang,
            direction=fix.compass,
            alt=round(fix.position.alt_deg),
        ),
        hint=hint,
    )


def describe_schedule(fix: StarFix, lang: str = "en") -> str:
    """Rise/set line, or whether the star stays up or down all day."""
    pos = fix.position
    if pos.rise_time is not None and pos.set_time is not None:
        return t("rise_set", lang, rise=pos.rise_time, set=pos.set_time)
    # No horizon crossing: altitude sign is the same all day.
    key = "never_sets" if pos.is_visible else "never_rises"
    return t(key, lang, star=fix.star.name)
