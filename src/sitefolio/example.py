"""Example site: a front-end developer landing page"""

from sitefolio.models import SiteConfig, SocialLink

SITE_CONFIG = SiteConfig(
    site_title="María Morales",
    manifest_name="Identity",
    manifest_short_name="Landing",
    manifest_start_url="/",
    manifest_background_color="#663399",
    manifest_theme_color="#663399",
    manifest_display="standalone",
    manifest_icon="src/assets/img/website-icon.png",
    author_name="María Morales",
    heading="Front-End Developer",
    social_links=(
        SocialLink(
            icon="fa-envelope-o",
            name="Email",
            url="mailto:mariamoralespadron@gmail.com",
        ),
        SocialLink(
            icon="fa-codepen",
            name="Codepen",
            url="https://codepen.io/maremarismaria",
        ),
        SocialLink(
            icon="fa-code",
            name="Portfolio",
            url="https://mariamorales.dev/playground",
        ),
        SocialLink(
            icon="fa-github",
            name="Github",
            url="https://github.com/maremarismaria",
        ),
    ),
)
