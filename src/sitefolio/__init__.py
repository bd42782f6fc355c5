from sitefolio.models import SiteConfig, SocialLink
from sitefolio.utils.exceptions import ConfigValidationError

__all__ = ["ConfigValidationError", "SiteConfig", "SocialLink"]
