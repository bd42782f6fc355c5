from dataclasses import dataclass, field, fields

from sitefolio.constants import DISPLAY_MODES, MANIFEST_SHORT_NAME_MAX_LENGTH
from sitefolio.utils.exceptions import ConfigValidationError
from sitefolio.utils.uris import check_link_url


def check_string_fields(record, prefix: str = ""):
    """raise ConfigValidationError on the first str-annotated field not holding a str"""
    for item in fields(record):
        if item.type not in (str, "str"):
            continue
        value = getattr(record, item.name)
        if not isinstance(value, str):
            raise ConfigValidationError(
                f"{prefix}{item.name}",
                f"expected a string, got {type(value).__name__}",
            )


@dataclass(frozen=True, kw_only=True)
class SocialLink:
    # icon-font glyph identifier, ie. `fa-github`
    icon: str
    name: str
    url: str


@dataclass(frozen=True, kw_only=True)
class SiteConfig:
    """Branding and navigation details of a site, read by its generator

    Validated once on construction and never mutated afterwards."""

    # <title>
    site_title: str

    # web app manifest
    manifest_name: str
    manifest_short_name: str
    manifest_start_url: str
    manifest_background_color: str
    manifest_theme_color: str
    manifest_display: str
    manifest_icon: str

    author_name: str
    heading: str

    # display order
    social_links: tuple[SocialLink, ...] = field(default_factory=tuple)

    def __post_init__(self):
        check_string_fields(self)

        if not isinstance(self.social_links, list | tuple):
            raise ConfigValidationError(
                "social_links",
                "expected a sequence of SocialLink, "
                f"got {type(self.social_links).__name__}",
            )
        for index, link in enumerate(self.social_links):
            if not isinstance(link, SocialLink):
                raise ConfigValidationError(
                    f"social_links[{index}]",
                    f"expected a SocialLink, got {type(link).__name__}",
                )
            check_string_fields(link, prefix=f"social_links[{index}].")

        # frozen: a list passed in must not remain mutable from outside
        object.__setattr__(self, "social_links", tuple(self.social_links))

        if len(self.manifest_short_name) > MANIFEST_SHORT_NAME_MAX_LENGTH:
            raise ConfigValidationError(
                "manifest_short_name",
                f"`{self.manifest_short_name}` is {len(self.manifest_short_name)} "
                f"characters long, max is {MANIFEST_SHORT_NAME_MAX_LENGTH}",
            )

        if self.manifest_display not in DISPLAY_MODES:
            raise ConfigValidationError(
                "manifest_display",
                f"`{self.manifest_display}` is not one of {', '.join(DISPLAY_MODES)}",
            )

        for index, link in enumerate(self.social_links):
            try:
                check_link_url(link.url)
            except ValueError as exc:
                raise ConfigValidationError(
                    f"social_links[{index}].url", str(exc)
                ) from exc
