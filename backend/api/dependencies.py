"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations.

The container owns the external client handles (Supabase, Stripe). It is
opened in the application lifespan and closed at shutdown; dependency
functions read it from `request.app.state`.
"""

import logging
from typing import TYPE_CHECKING, Optional

from fastapi import Request

from shared.config import Settings

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    import stripe
    from supabase import Client

    from modules.auth.interfaces import IAuthService
    from modules.billing.interfaces import IBillingService, IPaymentProvider
    from modules.comments.interfaces import ICommentService
    from modules.favorites.interfaces import IFavoriteService
    from modules.lessons.interfaces import ILessonService
    from modules.reports.interfaces import IReportService
    from modules.users.interfaces import IUserService

logger = logging.getLogger(__name__)


class ServiceContainer:
    """
    Container for all service instances.

    Client handles are created by open() and dropped by close(). Services
    are created lazily on first access and cached within the container.
    """

    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self._db: "Client | None" = None
        self._stripe: "stripe.StripeClient | None" = None
        self._auth_service: "IAuthService | None" = None
        self._user_service: "IUserService | None" = None
        self._lesson_service: "ILessonService | None" = None
        self._comment_service: "ICommentService | None" = None
        self._favorite_service: "IFavoriteService | None" = None
        self._report_service: "IReportService | None" = None
        self._payment_provider: "IPaymentProvider | None" = None
        self._billing_service: "IBillingService | None" = None

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    def open(self) -> None:
        """
        Create the client handles.

        Raises:
            RuntimeError: If the store connection settings are missing
            ValueError: If the identity service credential is malformed
        """
        import stripe

        from modules.auth.service import AuthService
        from shared.database import create_store_client

        self._db = create_store_client(self.settings)
        if self.settings.stripe_secret_key:
            # httpx backs both the sync and the async request paths
            self._stripe = stripe.StripeClient(
                self.settings.stripe_secret_key,
                http_client=stripe.HTTPXClient(),
            )
        else:
            logger.warning("STRIPE_SECRET_KEY not set; payment endpoints are disabled")
        self._auth_service = AuthService.from_settings(self.settings)
        logger.info("Service container opened")

    def close(self) -> None:
        """Drop all client handles and cached services."""
        self.reset()
        self._db = None
        self._stripe = None
        logger.info("Service container closed")

    @property
    def is_open(self) -> bool:
        return self._db is not None

    @property
    def db(self) -> "Client":
        """The Supabase client handle."""
        if self._db is None:
            raise RuntimeError("Service container is not open")
        return self._db

    @property
    def stripe_client(self) -> "stripe.StripeClient":
        """The Stripe client handle."""
        if self._stripe is None:
            from modules.billing.exceptions import PaymentProviderUnavailableError
            raise PaymentProviderUnavailableError("Payment provider not configured")
        return self._stripe

    # -------------------------------------------------------------------------
    # Services
    # -------------------------------------------------------------------------

    @property
    def auth(self) -> "IAuthService":
        """Get the auth service instance."""
        if self._auth_service is None:
            from modules.auth.service import AuthService
            self._auth_service = AuthService.from_settings(self.settings)
        return self._auth_service

    @property
    def users(self) -> "IUserService":
        """Get the user service instance."""
        if self._user_service is None:
            from modules.users.repository import UserRepository
            from modules.users.service import UserService
            self._user_service = UserService(UserRepository(self.db))
        return self._user_service

    @property
    def lessons(self) -> "ILessonService":
        """Get the lesson service instance."""
        if self._lesson_service is None:
            from modules.lessons.repository import LessonRepository
            from modules.lessons.service import LessonService
            self._lesson_service = LessonService(LessonRepository(self.db))
        return self._lesson_service

    @property
    def comments(self) -> "ICommentService":
        """Get the comment service instance."""
        if self._comment_service is None:
            from modules.comments.repository import CommentRepository
            from modules.comments.service import CommentService
            self._comment_service = CommentService(CommentRepository(self.db))
        return self._comment_service

    @property
    def favorites(self) -> "IFavoriteService":
        """Get the favorite service instance."""
        if self._favorite_service is None:
            from modules.favorites.repository import FavoriteRepository
            from modules.favorites.service import FavoriteService
            self._favorite_service = FavoriteService(FavoriteRepository(self.db))
        return self._favorite_service

    @property
    def reports(self) -> "IReportService":
        """Get the report service instance."""
        if self._report_service is None:
            from modules.reports.repository import ReportRepository
            from modules.reports.service import ReportService
            self._report_service = ReportService(ReportRepository(self.db))
        return self._report_service

    @property
    def payment_provider(self) -> "IPaymentProvider":
        """Get the payment provider instance."""
        if self._payment_provider is None:
            from modules.billing.provider import StripePaymentProvider
            self._payment_provider = StripePaymentProvider(
                self.stripe_client,
                currency=self.settings.payment_currency,
            )
        return self._payment_provider

    @property
    def billing(self) -> "IBillingService":
        """Get the billing service instance."""
        if self._billing_service is None:
            from modules.billing.repository import PaymentRepository
            from modules.billing.service import BillingService
            self._billing_service = BillingService(
                payments=PaymentRepository(self.db),
                provider=self.payment_provider,
                lessons=self.lessons,
                users=self.users,
                settings=self.settings,
            )
        return self._billing_service

    def reset(self) -> None:
        """
        Reset all cached services.

        Client handles are kept; services are rebuilt on next access.
        """
        self._auth_service = None
        self._user_service = None
        self._lesson_service = None
        self._comment_service = None
        self._favorite_service = None
        self._report_service = None
        self._payment_provider = None
        self._billing_service = None


def get_container(request: Request) -> ServiceContainer:
    """Get the service container attached to the running application."""
    container: Optional[ServiceContainer] = getattr(request.app.state, "container", None)
    if container is None:
        raise RuntimeError("No service container attached to the application")
    return container


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_auth_service(request: Request) -> "IAuthService":
    """FastAPI dependency for auth service."""
    return get_container(request).auth


def get_user_service(request: Request) -> "IUserService":
    """FastAPI dependency for user service."""
    return get_container(request).users


def get_lesson_service(request: Request) -> "ILessonService":
    """FastAPI dependency for lesson service."""
    return get_container(request).lessons


def get_comment_service(request: Request) -> "ICommentService":
    """FastAPI dependency for comment service."""
    return get_container(request).comments


def get_favorite_service(request: Request) -> "IFavoriteService":
    """FastAPI dependency for favorite service."""
    return get_container(request).favorites


def get_report_service(request: Request) -> "IReportService":
    """FastAPI dependency for report service."""
    return get_container(request).reports


def get_billing_service(request: Request) -> "IBillingService":
    """FastAPI dependency for billing service."""
    return get_container(request).billing
