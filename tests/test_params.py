"""Tests for player parameter resolution."""

import pytest

from mediaembed.exceptions import InvalidParamValueError
from mediaembed.resolvers.params import attribute_name, override_text, resolve_params


class TestHelpers:
    def test_attribute_name(self):
        assert attribute_name("ui-logo") == "ui_logo"
        assert attribute_name("autoplay") == "autoplay"

    @pytest.mark.parametrize(
        "value,expected",
        [(None, ""), (True, "true"), (False, "false"), (1, "1"), ("red", "red"), ("", "")],
    )
    def test_override_text(self, value, expected):
        assert override_text(value) == expected


class TestStoredPreferences:
    def test_defaults_emit_nothing(self, youtube):
        """Should emit no parameter when every preference is at its default."""
        assert resolve_params(youtube) == []

    def test_changed_preference_is_emitted(self, youtube):
        """Should emit stored preferences that differ from the default."""
        assert resolve_params(youtube, stored={"youtube_autoplay": "1"}) == ["autoplay=1"]

    def test_preference_equal_to_default_is_skipped(self, youtube):
        assert resolve_params(youtube, stored={"youtube_controls": "1"}) == []

    def test_forced_parameter_always_emitted(self, bandcamp):
        """Forced parameters are emitted even at their default."""
        assert resolve_params(bandcamp) == ["size=large"]

    def test_color_hash_is_stripped(self, vimeo):
        """Should drop the leading # of stored colors."""
        assert resolve_params(vimeo, stored={"vimeo_color": "#ff0000"}) == ["color=ff0000"]

    def test_hyphenated_parameter_uses_param_name_in_key(self, dailymotion):
        params = resolve_params(dailymotion, stored={"dailymotion_ui-logo": "false"})
        assert params == ["ui-logo=false"]


class TestOverrides:
    def test_override_emitted_even_when_default(self, youtube):
        """Overrides are emitted even when equal to the default."""
        assert resolve_params(youtube, overrides={"controls": "1"}) == ["controls=1"]

    def test_override_wins_over_preference(self, youtube):
        """Should prefer the attribute over the stored value."""
        params = resolve_params(
            youtube, overrides={"autoplay": "0"}, stored={"youtube_autoplay": "1"}
        )
        assert params == ["autoplay=0"]

    def test_hyphenated_parameter_via_underscore_attribute(self, dailymotion):
        assert resolve_params(dailymotion, overrides={"ui_logo": "false"}) == ["ui-logo=false"]

    def test_boolean_override(self, dailymotion):
        assert resolve_params(dailymotion, overrides={"mute": True}) == ["mute=true"]

    def test_type_tag_is_not_enforced(self, youtube):
        """Type tags like "number" do not restrict values."""
        assert resolve_params(youtube, overrides={"start": "abc"}) == ["start=abc"]

    def test_color_override_hash_stripped(self, soundcloud):
        assert resolve_params(soundcloud, overrides={"color": "#123456"}) == ["color=123456"]

    def test_schema_order_is_kept(self, youtube):
        """Parameters follow the schema order, not the override order."""
        params = resolve_params(
            youtube,
            overrides={"start": "30", "autoplay": "1"},
            stored={"youtube_rel": "0"},
        )
        assert params == ["autoplay=1", "rel=0", "start=30"]

    def test_unknown_attributes_are_ignored(self, youtube):
        assert resolve_params(youtube, overrides={"width": "480", "bogus": "1"}) == []


class TestInvalidValues:
    def test_invalid_value_reported_and_omitted(self, youtube):
        """Should report and drop a value outside the valid list."""
        issues = []
        params = resolve_params(youtube, overrides={"autoplay": "2", "loop": "1"}, issues=issues)
        assert params == ["loop=1"]
        assert len(issues) == 1
        issue = issues[0]
        assert isinstance(issue, InvalidParamValueError)
        assert issue.param == "autoplay"
        assert issue.value == "2"
        assert issue.message == 'Unknown attribute value for "autoplay". Valid values are: "0", "1".'

    def test_invalid_value_skips_preference_too(self, youtube):
        """An invalid override does not fall back to the preference."""
        params = resolve_params(
            youtube, overrides={"autoplay": "yes"}, stored={"youtube_autoplay": "1"}
        )
        assert params == []

    def test_empty_string_is_a_valid_value(self, bandcamp):
        # artwork accepts "", but an empty override means "not set"
        assert resolve_params(bandcamp, overrides={"artwork": ""}) == ["size=large"]

    def test_forced_parameter_override(self, bandcamp):
        assert resolve_params(bandcamp, overrides={"size": "small"}) == ["size=small"]

    def test_invalid_forced_parameter_is_omitted(self, bandcamp):
        issues = []
        assert resolve_params(bandcamp, overrides={"size": "huge"}, issues=issues) == []
        assert issues[0].valid == ["large", "small"]
