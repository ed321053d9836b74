"""Asset catalog: avatar appearance and the conversational sound library.

The bot number (1-100) picks the look. Bots 1-20 have their own face on
the default body; the rest share one of four faces and have their own
body. Every bot has its own billboard image.
"""

from __future__ import annotations

from dataclasses import dataclass

from avatar_bot.errors import ErrorCode, ParameterError

BOT_NUMBER_RANGE = (1, 100)
DEFAULT_BODY = "defaultAvatar_body"

# Upper bot number (inclusive) -> shared face
_SHARED_FACES = (
    (40, "superhero"),
    (60, "amber"),
    (80, "ron"),
    (100, "angie"),
)

SOUND_CLIP_DIR = "sounds/Cocktail+Party+Snippets/Raws"

SOUND_CLIPS = (
    "AB1", "Anchorman2", "B1", "B1", "Bale1", "Bandcamp", "Big1", "Big2",
    "Brian1", "Buster1", "CES1", "CES2", "CES3", "CES4", "Carrie1", "Carrie3",
    "Charlotte1", "EN1", "EN2", "EN3", "Eugene1", "Francesco1", "Italian1",
    "Japanese1", "Leigh1", "Lucille1", "Lucille2", "MeanGirls", "Murray2",
    "Nigel1", "PennyLane", "Pitt1", "Ricardo", "SN", "Sake1", "Samantha1",
    "Samantha2", "Spicoli1", "Supernatural", "Swearengen1", "TheDude", "Tony",
    "Triumph1", "Uma1", "Walken1", "Walken2", "Z1", "Z2",
)  # fmt: skip


@dataclass(frozen=True)
class Appearance:
    """Model URLs for one bot."""

    bot_number: int
    face_model_url: str
    skeleton_model_url: str
    billboard_url: str


def face_and_body(bot_number: int) -> tuple[str, str]:
    """File prefixes of the face and body models for a bot number.

    Raises:
        ParameterError: If bot_number is outside [1, 100].
    """
    low, high = BOT_NUMBER_RANGE
    if not low <= bot_number <= high:
        raise ParameterError(
            "bot_number",
            f"Bot number must be between {low} and {high}",
            value=bot_number,
            code=ErrorCode.OUT_OF_RANGE,
        )

    if bot_number <= 20:
        return f"bot{bot_number}", DEFAULT_BODY

    face = next(face for upper, face in _SHARED_FACES if bot_number <= upper)
    return face, f"bot{bot_number}"


def resolve_appearance(bot_number: int, base_url: str) -> Appearance:
    """Build the model URLs for a bot.

    Args:
        bot_number: Bot number in [1, 100].
        base_url: Asset server root, without trailing slash.

    Returns:
        Appearance with face, skeleton and billboard URLs.
    """
    base_url = base_url.rstrip("/")
    face, body = face_and_body(bot_number)
    return Appearance(
        bot_number=bot_number,
        face_model_url=f"{base_url}/meshes/{face}.fst",
        skeleton_model_url=f"{base_url}/meshes/{body}.fst",
        billboard_url=f"{base_url}/meshes/billboards/bot{bot_number}.png",
    )


def sound_urls(base_url: str) -> list[str]:
    """URLs of every clip in the sound library, in library order."""
    base_url = base_url.rstrip("/")
    return [f"{base_url}/{SOUND_CLIP_DIR}/{name}.raw" for name in SOUND_CLIPS]
