"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations around one shared
Supabase client.
"""

from typing import TYPE_CHECKING

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from supabase import Client
    from modules.auth.interfaces import IAuthService
    from modules.users.interfaces import IUserService
    from modules.users.repository import UserRepository
    from modules.events.interfaces import IEventService
    from modules.events.repository import EventRepository
    from modules.passes.interfaces import IPassService
    from modules.passes.repository import PassRepository
    from modules.rendering.interfaces import IPassRenderer
    from modules.notifications.interfaces import (
        IImageUploader,
        IMessagingChannel,
        IPassDeliveryService,
    )
    from modules.notifications.dispatcher import NotificationDispatcher


class ServiceContainer:
    """
    Container for all service instances.

    Services are created lazily on first access and cached as singletons
    within the container. Use reset() to clear them for testing.
    """

    def __init__(self) -> None:
        self._db: "Client | None" = None
        self._auth_service: "IAuthService | None" = None
        self._user_repository: "UserRepository | None" = None
        self._user_service: "IUserService | None" = None
        self._event_repository: "EventRepository | None" = None
        self._event_service: "IEventService | None" = None
        self._pass_repository: "PassRepository | None" = None
        self._pass_service: "IPassService | None" = None
        self._renderer: "IPassRenderer | None" = None
        self._uploader: "IImageUploader | None" = None
        self._messaging: "IMessagingChannel | None" = None
        self._dispatcher: "NotificationDispatcher | None" = None
        self._delivery_service: "IPassDeliveryService | None" = None

    @property
    def db(self) -> "Client":
        """Get the shared Supabase client."""
        if self._db is None:
            from shared.database import get_supabase_client
            self._db = get_supabase_client()
        return self._db

    @property
    def auth(self) -> "IAuthService":
        """Get the auth service instance."""
        if self._auth_service is None:
            from modules.auth.service import get_auth_service
            self._auth_service = get_auth_service()
        return self._auth_service

    @property
    def user_repository(self) -> "UserRepository":
        if self._user_repository is None:
            from modules.users.repository import UserRepository
            self._user_repository = UserRepository(self.db)
        return self._user_repository

    @property
    def users(self) -> "IUserService":
        """Get the user service instance."""
        if self._user_service is None:
            from modules.users.service import UserService
            self._user_service = UserService(
                repository=self.user_repository,
                auth=self.auth,
            )
        return self._user_service

    @property
    def event_repository(self) -> "EventRepository":
        if self._event_repository is None:
            from modules.events.repository import EventRepository
            self._event_repository = EventRepository(self.db)
        return self._event_repository

    @property
    def events(self) -> "IEventService":
        """Get the event service instance."""
        if self._event_service is None:
            from modules.events.service import EventService
            self._event_service = EventService(repository=self.event_repository)
        return self._event_service

    @property
    def pass_repository(self) -> "PassRepository":
        if self._pass_repository is None:
            from modules.passes.repository import PassRepository
            self._pass_repository = PassRepository(self.db)
        return self._pass_repository

    @property
    def passes(self) -> "IPassService":
        """Get the pass service instance."""
        if self._pass_service is None:
            from modules.passes.service import PassService
            from shared.config import get_settings
            self._pass_service = PassService(
                passes=self.pass_repository,
                events=self.event_repository,
                one_per_user=get_settings().passes_one_per_user,
            )
        return self._pass_service

    @property
    def renderer(self) -> "IPassRenderer":
        """Get the pass renderer instance."""
        if self._renderer is None:
            from modules.rendering.renderer import PassRenderer
            from shared.config import get_settings
            self._renderer = PassRenderer(temp_dir=get_settings().pass_temp_dir)
        return self._renderer

    @property
    def uploader(self) -> "IImageUploader":
        """Get the image uploader instance."""
        if self._uploader is None:
            from modules.notifications.uploader import SupabaseStorageUploader
            from shared.config import get_settings
            self._uploader = SupabaseStorageUploader(
                self.db, get_settings().supabase_storage_bucket
            )
        return self._uploader

    @property
    def messaging(self) -> "IMessagingChannel":
        """Get the messaging channel instance."""
        if self._messaging is None:
            from modules.notifications.whatsapp import WhatsAppChannel
            from shared.config import get_settings
            settings = get_settings()
            self._messaging = WhatsAppChannel(
                api_url=settings.whatsapp_api_url,
                phone_number_id=settings.whatsapp_phone_number_id,
                access_token=settings.whatsapp_access_token,
                template_name=settings.whatsapp_template_name,
                template_language=settings.whatsapp_template_language,
                timeout=settings.whatsapp_timeout,
            )
        return self._messaging

    @property
    def dispatcher(self) -> "NotificationDispatcher":
        """Get the notification dispatcher instance."""
        if self._dispatcher is None:
            from modules.notifications.dispatcher import NotificationDispatcher
            from shared.config import get_settings
            settings = get_settings()
            self._dispatcher = NotificationDispatcher(
                renderer=self.renderer,
                uploader=self.uploader,
                channel=self.messaging,
                min_delay=settings.dispatch_min_delay,
                max_delay=settings.dispatch_max_delay,
            )
        return self._dispatcher

    @property
    def delivery(self) -> "IPassDeliveryService":
        """Get the pass delivery service instance."""
        if self._delivery_service is None:
            from modules.notifications.service import PassDeliveryService
            self._delivery_service = PassDeliveryService(
                passes=self.pass_repository,
                events=self.event_repository,
                users=self.user_repository,
                dispatcher=self.dispatcher,
            )
        return self._delivery_service

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self.__init__()


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    The next call to get_container() creates a fresh container with new
    service instances. Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_auth_service() -> "IAuthService":
    """FastAPI dependency for auth service."""
    return get_container().auth


def get_user_service() -> "IUserService":
    """FastAPI dependency for user service."""
    return get_container().users


def get_event_service() -> "IEventService":
    """FastAPI dependency for event service."""
    return get_container().events


def get_pass_service() -> "IPassService":
    """FastAPI dependency for pass service."""
    return get_container().passes


def get_pass_renderer() -> "IPassRenderer":
    """FastAPI dependency for the pass renderer."""
    return get_container().renderer


def get_delivery_service() -> "IPassDeliveryService":
    """FastAPI dependency for pass delivery."""
    return get_container().delivery
