from ratings import RatingSource

SEPARATOR = "───────────────"
GUIDE_HEADER = "ℹ️  Parents Guide"

EMOJIS = {
    RatingSource.COMMON_SENSE: "👶",
    RatingSource.IMDB: "⭐",
    RatingSource.TMDB: "🎥",
    RatingSource.MC: "Ⓜ️",
    RatingSource.MC_USERS: "👤",
    RatingSource.RT: "🍅",
    RatingSource.RT_USERS: "🍿",
}


def get_emoji_for_source(source):
    return EMOJIS.get(source)


def prefixed(source, text):
    emoji = get_emoji_for_source(source)
    return f"{emoji} {text}" if emoji else text


def format_ratings_card(ratings, guide_text=None):
    lines = [SEPARATOR]

    # Common Sense goes first, ahead of the scores
    common_sense = next((r for r in ratings if r.source is RatingSource.COMMON_SENSE), None)
    if common_sense:
        lines.append(prefixed(common_sense.source, common_sense.value))

    standard = sorted((r for r in ratings if r.source.rank is not None), key=lambda r: r.source.rank)
    for rating in standard:
        lines.append(prefixed(rating.source, f"{rating.source.value:<9}: {rating.value}"))

    advisory = next(
        (r for r in ratings if r.source in (RatingSource.CRINGEMDB, RatingSource.CERTIFICATION)),
        None,
    )
    if advisory:
        lines.extend(line.strip() for line in advisory.value.split("\n") if line.strip())

    if guide_text:
        lines.append(SEPARATOR)
        lines.append(GUIDE_HEADER)
        lines.append(guide_text)

    lines.append(SEPARATOR)
    return "\n".join(lines)
