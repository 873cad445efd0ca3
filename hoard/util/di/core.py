"""Configuration providers."""

from dishka import Scope, provide

from hoard.config import AuthSettings, InvitationSettings, Settings
from hoard.util.di.base import ProviderBase


class ConfigProvider(ProviderBase):
    """Settings, read once per container from the environment and `.env`.

    The nested sections are provided on their own so services depend only
    on the part of the configuration they use.
    """

    scope = Scope.APP

    @provide
    def get_settings(self) -> Settings:
        """Provide application settings."""
        return Settings()

    @provide
    def get_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide token verification settings."""
        return settings.auth

    @provide
    def get_invitation_settings(self, settings: Settings) -> InvitationSettings:
        """Provide invite expiry and token settings."""
        return settings.invitations
