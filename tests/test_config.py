from canship.config import Settings


def test_defaults_match_public_geocoder():
    config = Settings(_env_file=None)

    assert config.geocoder_base_url == "https://nominatim.openstreetmap.org"
    assert config.geocoder_result_limit == 8
    assert config.geocoder_country_code == "ca"
    assert config.debounce_seconds == 0.3
    assert config.route_leg_tier == "standard"


def test_allowed_origins_accept_comma_separated_values():
    config = Settings(_env_file=None, frontend_allowed_origins="http://a.test, http://b.test")

    assert config.frontend_allowed_origins == ("http://a.test", "http://b.test")


def test_geocoder_url_trailing_slash_is_removed():
    config = Settings(_env_file=None, geocoder_base_url="https://geo.test/")

    assert config.geocoder_base_url == "https://geo.test"
