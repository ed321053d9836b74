"""Unit tests for the asset catalog."""

from __future__ import annotations

import pytest

from avatar_bot.assets import (
    DEFAULT_BODY,
    SOUND_CLIPS,
    face_and_body,
    resolve_appearance,
    sound_urls,
)
from avatar_bot.errors import ErrorCode, ParameterError

BASE = "https://assets.example.test"


class TestFaceAndBody:
    """Tests for bot number to model mapping."""

    @pytest.mark.parametrize(
        ("bot_number", "face", "body"),
        [
            (1, "bot1", DEFAULT_BODY),
            (20, "bot20", DEFAULT_BODY),
            (21, "superhero", "bot21"),
            (40, "superhero", "bot40"),
            (41, "amber", "bot41"),
            (60, "amber", "bot60"),
            (61, "ron", "bot61"),
            (80, "ron", "bot80"),
            (81, "angie", "bot81"),
            (100, "angie", "bot100"),
        ],
    )
    def test_boundaries(self, bot_number: int, face: str, body: str) -> None:
        assert face_and_body(bot_number) == (face, body)

    @pytest.mark.parametrize("bot_number", [0, -3, 101])
    def test_out_of_range(self, bot_number: int) -> None:
        with pytest.raises(ParameterError) as exc_info:
            face_and_body(bot_number)

        assert exc_info.value.code == ErrorCode.OUT_OF_RANGE
        assert exc_info.value.details["parameter"] == "bot_number"


class TestResolveAppearance:
    """Tests for appearance URLs."""

    def test_personal_face(self) -> None:
        look = resolve_appearance(7, BASE)

        assert look.bot_number == 7
        assert look.face_model_url == f"{BASE}/meshes/bot7.fst"
        assert look.skeleton_model_url == f"{BASE}/meshes/defaultAvatar_body.fst"
        assert look.billboard_url == f"{BASE}/meshes/billboards/bot7.png"

    def test_shared_face(self) -> None:
        look = resolve_appearance(55, BASE + "/")

        assert look.face_model_url == f"{BASE}/meshes/amber.fst"
        assert look.skeleton_model_url == f"{BASE}/meshes/bot55.fst"
        assert look.billboard_url == f"{BASE}/meshes/billboards/bot55.png"


class TestSoundLibrary:
    """Tests for the sound library."""

    def test_library_size(self) -> None:
        assert len(SOUND_CLIPS) == 48
        # B1 is listed twice
        assert SOUND_CLIPS.count("B1") == 2

    def test_urls(self) -> None:
        urls = sound_urls(BASE)

        assert len(urls) == len(SOUND_CLIPS)
        assert urls[0] == f"{BASE}/sounds/Cocktail+Party+Snippets/Raws/AB1.raw"
        assert urls[-1].endswith("/Z2.raw")
