"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from tenancy.config import InvitationSettings, MembershipSettings, Settings
from tenancy.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_invitation_settings(self, settings: Settings) -> InvitationSettings:
        """Provide invitation settings."""
        return settings.invitations

    @provide(scope=Scope.APP)
    def provide_membership_settings(self, settings: Settings) -> MembershipSettings:
        """Provide membership settings."""
        return settings.membership
