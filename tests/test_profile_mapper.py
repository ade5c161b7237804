"""
Tests for mapping Strava token responses to user profiles.
"""

from strava_credentials.core.domain import UserProfileEmail, UserProfileName
from strava_credentials.core.profile_mapper import (
    create_profile,
    parse_token_response,
)


class TestCreateProfile:
    """Tests for create_profile."""

    def test_complete_athlete(self, sample_token_response):
        """Test every athlete field is mapped."""
        profile = create_profile(sample_token_response)

        assert profile is not None
        assert profile.id == "42"
        assert profile.display_name == "joe"
        assert profile.provider == "Strava"
        assert profile.emails == [UserProfileEmail(value="j@x.com", type="public")]
        assert [photo.value for photo in profile.photos] == ["http://p"]
        assert profile.name == UserProfileName(
            given_name="Joe", family_name="Doe", middle_name=""
        )

    def test_minimal_athlete(self):
        """Test an athlete with only an id yields a bare profile."""
        profile = create_profile({"athlete": {"id": 7}})

        assert profile is not None
        assert profile.id == "7"
        assert profile.display_name == ""
        assert profile.emails is None
        assert profile.photos is None
        assert profile.name is None

    def test_missing_id_returns_none(self):
        """Test an athlete without id is rejected."""
        assert create_profile({"athlete": {"username": "joe"}}) is None

    def test_missing_athlete_returns_none(self):
        """Test a response without athlete is rejected."""
        assert create_profile({"access_token": "a9b723"}) is None

    def test_athlete_wrong_shape_returns_none(self):
        """Test athlete must be an object."""
        assert create_profile({"athlete": [42]}) is None
        assert create_profile({"athlete": "42"}) is None

    def test_non_integer_id_returns_none(self):
        """Test id must be an integer."""
        assert create_profile({"athlete": {"id": "42"}}) is None
        assert create_profile({"athlete": {"id": 4.2}}) is None
        assert create_profile({"athlete": {"id": 42.0}}) is None
        assert create_profile({"athlete": {"id": True}}) is None

    def test_non_mapping_response_returns_none(self):
        """Test the response itself must be an object."""
        assert create_profile([]) is None
        assert create_profile(None) is None

    def test_name_requires_both_parts(self):
        """Test name is omitted when only one part is present."""
        first_only = create_profile({"athlete": {"id": 1, "firstname": "Joe"}})
        last_only = create_profile({"athlete": {"id": 1, "lastname": "Doe"}})

        assert first_only.name is None
        assert last_only.name is None

    def test_wrong_typed_optional_fields_are_dropped(self):
        """Test optional fields of the wrong type degrade to missing."""
        profile = create_profile(
            {
                "athlete": {
                    "id": 3,
                    "username": 12,
                    "email": None,
                    "profile": {"url": "http://p"},
                    "firstname": "Joe",
                    "lastname": ["Doe"],
                }
            }
        )

        assert profile is not None
        assert profile.display_name == ""
        assert profile.emails is None
        assert profile.photos is None
        assert profile.name is None

    def test_does_not_modify_input(self, sample_token_response):
        """Test mapping leaves the raw response untouched."""
        before = dict(sample_token_response["athlete"])

        create_profile(sample_token_response)

        assert sample_token_response["athlete"] == before


class TestParseTokenResponse:
    """Tests for parse_token_response."""

    def test_keeps_token_fields_as_extras(self, sample_token_response):
        """Test unrelated token fields are tolerated."""
        response = parse_token_response(sample_token_response)

        assert response is not None
        assert response.athlete.id == 42
        assert response.model_extra["access_token"] == "a9b723"
