class ConfigValidationError(ValueError):
    """A site configuration field holds an unacceptable value

    Raised while loading or constructing the configuration. `field` is the
    offending field name, using `social_links[i].url` notation for links."""

    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        super().__init__(f"{field}: {reason}")
