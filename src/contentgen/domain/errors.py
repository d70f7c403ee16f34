class ContentGenError(Exception):
    """Base error for the content generator."""


class ContentRootError(ContentGenError):
    pass


class ArtifactWriteError(ContentGenError):
    pass


class SettingsError(ContentGenError):
    pass
