import dataclasses

import pytest

from sitefolio.models import SiteConfig, SocialLink
from sitefolio.utils.exceptions import ConfigValidationError


def make_config(**overrides):
    settings = {
        "site_title": "Jane Doe",
        "manifest_name": "Jane Doe Portfolio",
        "manifest_short_name": "Jane",
        "manifest_start_url": "/",
        "manifest_background_color": "#ffffff",
        "manifest_theme_color": "#000000",
        "manifest_display": "standalone",
        "manifest_icon": "assets/icon.png",
        "author_name": "Jane Doe",
        "heading": "Back-End Developer",
        "social_links": (
            SocialLink(icon="fa-envelope", name="Email", url="mailto:jane@example.com"),
            SocialLink(icon="fa-github", name="Github", url="https://github.com/jane"),
        ),
    }
    settings.update(overrides)
    return SiteConfig(**settings)


class TestSiteConfig:
    """Test construction of the site configuration record"""

    def test_deterministic(self):
        """Should build equal records from identical input"""
        assert make_config() == make_config()

    def test_immutable(self):
        """Should not allow changing fields once built"""
        config = make_config()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.site_title = "Someone else"
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.social_links[0].url = "https://example.com"

    def test_links_list_stored_as_tuple(self):
        """Should detach social links from a list given by the caller"""
        links = [
            SocialLink(icon="fa-github", name="Github", url="https://github.com/jane")
        ]
        config = make_config(social_links=links)
        links.append(
            SocialLink(icon="fa-code", name="Code", url="https://example.com/code")
        )
        assert isinstance(config.social_links, tuple)
        assert len(config.social_links) == 1

    def test_links_order_preserved(self):
        """Should keep social links in given order"""
        names = ["Email", "Codepen", "Portfolio", "Github"]
        links = [
            SocialLink(icon="fa-link", name=name, url=f"https://example.com/{name}")
            for name in names
        ]
        config = make_config(social_links=links)
        assert [link.name for link in config.social_links] == names

    def test_no_links(self):
        """Should accept a site without social links"""
        assert make_config(social_links=()).social_links == ()


class TestShortName:
    """Test manifest short name length limit"""

    def test_twelve_chars(self):
        """Should accept a 12 characters short name"""
        assert make_config(manifest_short_name="a" * 12).manifest_short_name == "a" * 12

    def test_thirteen_chars(self):
        """Should reject a 13 characters short name"""
        with pytest.raises(ConfigValidationError) as exc_info:
            make_config(manifest_short_name="a" * 13)
        assert exc_info.value.field == "manifest_short_name"
        assert "13 characters" in str(exc_info.value)

    def test_counts_characters(self):
        """Should count characters, not bytes"""
        assert make_config(manifest_short_name="é" * 12)


class TestDisplay:
    """Test manifest display mode"""

    @pytest.mark.parametrize(
        "display", ["fullscreen", "standalone", "minimal-ui", "browser"]
    )
    def test_allowed(self, display):
        """Should accept every display mode"""
        assert make_config(manifest_display=display).manifest_display == display

    @pytest.mark.parametrize("display", ["popup", "Standalone", ""])
    def test_rejected(self, display):
        """Should reject unknown display modes"""
        with pytest.raises(ConfigValidationError) as exc_info:
            make_config(manifest_display=display)
        assert exc_info.value.field == "manifest_display"


class TestSocialLinksUrl:
    """Test social links URL validation on construction"""

    @pytest.mark.parametrize(
        "url", ["mailto:jane@example.com", "https://codepen.io/jane"]
    )
    def test_accepted(self, url):
        """Should accept mailto and https links"""
        config = make_config(
            social_links=[SocialLink(icon="fa-link", name="Link", url=url)]
        )
        assert config.social_links[0].url == url

    def test_ftp_rejected(self):
        """Should reject ftp links, naming the faulty link"""
        links = [
            SocialLink(icon="fa-github", name="Github", url="https://github.com/jane"),
            SocialLink(icon="fa-file", name="Files", url="ftp://files.example.com"),
        ]
        with pytest.raises(ConfigValidationError) as exc_info:
            make_config(social_links=links)
        assert exc_info.value.field == "social_links[1].url"
        assert str(exc_info.value).startswith("social_links[1].url: ")

    def test_malformed_rejected(self):
        """Should reject links that are not URIs"""
        with pytest.raises(ConfigValidationError):
            make_config(
                social_links=[SocialLink(icon="fa-link", name="Link", url="not a url")]
            )

    def test_error_is_value_error(self):
        """Should be catchable as ValueError"""
        with pytest.raises(ValueError):
            make_config(
                social_links=[
                    SocialLink(icon="fa-link", name="Link", url="ftp://example.com")
                ]
            )


class TestFieldTypes:
    """Test type checks on direct construction"""

    @pytest.mark.parametrize(
        "name, value",
        [
            ("manifest_short_name", 12),
            ("manifest_display", None),
            ("site_title", ["Jane"]),
            ("manifest_icon", b"icon.png"),
        ],
    )
    def test_not_a_string(self, name, value):
        """Should reject non-string values with ConfigValidationError"""
        with pytest.raises(ConfigValidationError) as exc_info:
            make_config(**{name: value})
        assert exc_info.value.field == name
        assert "expected a string" in exc_info.value.reason

    def test_links_not_a_sequence(self):
        """Should reject social links which are not a sequence"""
        with pytest.raises(ConfigValidationError) as exc_info:
            make_config(social_links=None)
        assert exc_info.value.field == "social_links"

    def test_link_not_a_social_link(self):
        """Should reject social links given as plain mappings"""
        with pytest.raises(ConfigValidationError) as exc_info:
            make_config(
                social_links=[
                    {"icon": "fa-github", "name": "Github", "url": "https://x.org"}
                ]
            )
        assert exc_info.value.field == "social_links[0]"

    def test_link_field_not_a_string(self):
        """Should name the social link field holding a non-string"""
        links = [
            SocialLink(icon="fa-github", name="Github", url="https://github.com/jane"),
            SocialLink(icon="fa-link", name=None, url="https://example.com"),
        ]
        with pytest.raises(ConfigValidationError) as exc_info:
            make_config(social_links=links)
        assert exc_info.value.field == "social_links[1].name"
