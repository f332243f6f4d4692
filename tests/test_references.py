"""Tests for reference resolution."""

import logging

import pytest

from mediaembed.exceptions import NoMatchForReferenceError
from mediaembed.models.descriptor import PlayableDescriptor
from mediaembed.resolvers.references import (
    is_bare_id,
    join_tokens_for,
    match_reference,
    resolve_reference,
    resolve_references,
    split_references,
)


class TestClassification:
    """Bare id vs URL/filename heuristic."""

    @pytest.mark.parametrize("reference", ["dQw4w9WgXcQ", "347119375", "x9yl448", "a-b_c"])
    def test_bare_ids(self, reference):
        assert is_bare_id(reference)

    @pytest.mark.parametrize(
        "reference",
        ["https://youtu.be/dQw4w9WgXcQ", "youtube.com/watch?v=x", "clip.mp4", "dai.ly/x9yl448"],
    )
    def test_urls_and_filenames(self, reference):
        assert not is_bare_id(reference)

    def test_split_on_comma_space(self):
        assert split_references("a.com/1, b.com/2") == ["a.com/1", "b.com/2"]

    def test_comma_without_space_is_one_reference(self):
        assert split_references("a.com/1,b.com/2") == ["a.com/1,b.com/2"]


class TestYouTube:
    @pytest.mark.parametrize(
        "url",
        [
            "https://www.youtube.com/watch?v=dQw4w9WgXcQ",
            "http://www.youtube.com/watch?v=dQw4w9WgXcQ",
            "https://youtube.com/watch?v=dQw4w9WgXcQ",
            "http://youtube.com/watch?v=dQw4w9WgXcQ",
            "youtube.com/watch?v=dQw4w9WgXcQ",
            "https://youtu.be/dQw4w9WgXcQ",
            "https://www.youtube.com/embed/dQw4w9WgXcQ",
            "https://youtube.com/shorts/dQw4w9WgXcQ",
            "https://m.youtube.com/watch?v=dQw4w9WgXcQ",
            "https://www.youtube.com/watch?v=dQw4w9WgXcQ&t=120",
        ],
    )
    def test_canonical_urls(self, youtube, url):
        descriptor = resolve_reference(youtube, url)
        assert descriptor.normalized_id == "dQw4w9WgXcQ"
        assert descriptor.type == "video"

    def test_video_and_playlist_accumulate(self, youtube):
        url = "https://www.youtube.com/watch?v=dQw4w9WgXcQ&list=PLx0sYbCqOb8TBPRdmBHs5Iftvv9TPboYG"
        descriptor = resolve_reference(youtube, url)
        assert descriptor.normalized_id == "dQw4w9WgXcQ?list=PLx0sYbCqOb8TBPRdmBHs5Iftvv9TPboYG"
        # Type reflects the last rule applied
        assert descriptor.type == "list"
        assert descriptor.categories == ("video", "list")
        assert descriptor.join_tokens == ("/", "?", "&amp;")

    def test_short_url_with_playlist(self, youtube):
        descriptor = resolve_reference(youtube, "https://youtu.be/dQw4w9WgXcQ?list=PLabc")
        assert descriptor.normalized_id == "dQw4w9WgXcQ?list=PLabc"

    def test_playlist_only_uses_videoseries(self, youtube):
        descriptor = resolve_reference(youtube, "https://www.youtube.com/playlist?list=PLabc")
        assert descriptor.normalized_id == "list=PLabc"
        assert descriptor.type == "list"
        assert descriptor.join_tokens == ("/videoseries?", "?", "&amp;")


class TestOtherProviders:
    def test_vimeo(self, vimeo):
        assert resolve_reference(vimeo, "https://vimeo.com/347119375").normalized_id == "347119375"
        assert resolve_reference(vimeo, "https://player.vimeo.com/video/76979871").normalized_id == "76979871"

    def test_dailymotion(self, dailymotion):
        assert resolve_reference(dailymotion, "https://www.dailymotion.com/video/x9yl448").normalized_id == "x9yl448"
        assert resolve_reference(dailymotion, "https://dai.ly/x9yl448").normalized_id == "x9yl448"

    def test_soundcloud_keeps_track_url(self, soundcloud):
        descriptor = resolve_reference(soundcloud, "https://soundcloud.com/forss/flickermood")
        assert descriptor.normalized_id == "https://soundcloud.com/forss/flickermood"
        assert descriptor.join_tokens[0] == "/?url="

    def test_bandcamp_album_and_track(self, bandcamp):
        descriptor = resolve_reference(
            bandcamp, "https://bandcamp.com/EmbeddedPlayer/album=1536701931/size=large/track=2464524163"
        )
        assert descriptor.normalized_id == "album=1536701931/track=2464524163"
        assert descriptor.type == "track"

    def test_bandcamp_track_only(self, bandcamp):
        descriptor = resolve_reference(bandcamp, "https://bandcamp.com/EmbeddedPlayer/track=2464524163")
        assert descriptor.normalized_id == "track=2464524163"
        assert descriptor.type == "track"


class TestMatching:
    def test_first_rule_without_join_token_wins(self, make_profile):
        profile = make_profile(
            rules=[
                {"category": "first", "pattern": r"example\.com/(\w+)", "capture": 1},
                {"category": "second", "pattern": r"example\.com/(\w+)", "capture": 1, "prefix": "x"},
            ]
        )
        descriptor = match_reference(profile, "https://example.com/abc")
        assert descriptor.normalized_id == "abc"
        assert descriptor.type == "first"

    def test_join_token_accumulates(self, make_profile):
        profile = make_profile(
            rules=[
                {"category": "a", "pattern": r"a=(\d+)", "capture": 1, "prefix": "A", "join_token": "-"},
                {"category": "b", "pattern": r"b=(\d+)", "capture": 1, "prefix": "B"},
            ]
        )
        descriptor = match_reference(profile, "example.com/?a=1&b=2")
        assert descriptor.normalized_id == "A1-B2"
        assert descriptor.type == "b"

    def test_accumulating_rule_alone(self, make_profile):
        profile = make_profile(
            rules=[
                {"category": "a", "pattern": r"a=(\d+)", "capture": 1, "join_token": "-"},
                {"category": "b", "pattern": r"b=(\d+)", "capture": 1},
            ]
        )
        descriptor = match_reference(profile, "example.com/?a=1")
        assert descriptor.normalized_id == "1"
        assert descriptor.type == "a"

    def test_capture_index(self, make_profile):
        profile = make_profile(
            rules=[{"category": "v", "pattern": r"example\.com/(u)/(\w+)", "capture": 2}]
        )
        assert match_reference(profile, "example.com/u/xyz").normalized_id == "xyz"

    def test_no_match(self, youtube):
        assert match_reference(youtube, "https://vimeo.com/1") is None


class TestResolveReferences:
    def test_multiple_references_in_order(self, youtube):
        result = resolve_references(
            youtube, "https://youtu.be/AAAAAAAAAAA, https://youtu.be/BBBBBBBBBBB"
        )
        assert list(result) == ["https://youtu.be/AAAAAAAAAAA", "https://youtu.be/BBBBBBBBBBB"]
        assert result["https://youtu.be/BBBBBBBBBBB"].normalized_id == "BBBBBBBBBBB"

    def test_bare_id_with_fallback(self, youtube):
        result = resolve_references(youtube, "dQw4w9WgXcQ", fallback=True)
        assert result == {
            "dQw4w9WgXcQ": PlayableDescriptor(normalized_id="dQw4w9WgXcQ", type="id")
        }

    def test_bare_id_without_fallback_is_reported(self, youtube, caplog):
        issues = []
        with caplog.at_level(logging.WARNING):
            result = resolve_references(youtube, "dQw4w9WgXcQ", issues=issues)
        assert result == {}
        assert len(issues) == 1
        assert isinstance(issues[0], NoMatchForReferenceError)
        assert "dQw4w9WgXcQ" in caplog.text

    def test_unmatched_url_is_absent(self, youtube):
        issues = []
        result = resolve_references(youtube, "https://vimeo.com/1, https://youtu.be/dQw4w9WgXcQ", issues=issues)
        assert list(result) == ["https://youtu.be/dQw4w9WgXcQ"]
        assert issues[0].reference == "https://vimeo.com/1"

    def test_join_tokens_reset_between_references(self, youtube):
        result = resolve_references(
            youtube, "https://www.youtube.com/playlist?list=PL1, https://youtu.be/AAAAAAAAAAA"
        )
        tokens = [d.join_tokens for d in result.values()]
        assert tokens == [("/videoseries?", "?", "&amp;"), ("/", "?", "&amp;")]
        assert youtube.join_tokens == ("/", "?", "&amp;")

    def test_resolution_is_idempotent(self, youtube):
        refs = "https://www.youtube.com/watch?v=dQw4w9WgXcQ&list=PLabc, https://youtu.be/AAAAAAAAAAA"
        assert resolve_references(youtube, refs) == resolve_references(youtube, refs)


class TestJoinTokensFor:
    def test_default_tokens(self, youtube):
        descriptor = PlayableDescriptor(normalized_id="x", type="video", categories=("video",))
        assert join_tokens_for(youtube, descriptor) == youtube.join_tokens

    def test_standalone_join_only_for_single_category(self, youtube):
        accumulated = PlayableDescriptor(
            normalized_id="x?list=y", type="list", categories=("video", "list")
        )
        assert join_tokens_for(youtube, accumulated)[0] == "/"
