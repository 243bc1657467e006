"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from hostel_menu.adapters.pdf_report_renderer import ReportlabMenuRenderer
from hostel_menu.adapters.supabase_event_repository import SupabaseEventRepository
from hostel_menu.adapters.supabase_feedback_repository import (
    SupabaseFeedbackRepository,
)
from hostel_menu.adapters.supabase_menu_repository import SupabaseMenuRepository
from hostel_menu.adapters.supabase_profile_repository import (
    SupabaseProfileRepository,
)
from hostel_menu.adapters.supabase_session_repository import (
    SupabaseSessionRepository,
)
from hostel_menu.adapters.supabase_system_settings_repository import (
    SupabaseSystemSettingsRepository,
)
from hostel_menu.adapters.supabase_vote_repository import SupabaseVoteRepository
from hostel_menu.config import Settings
from hostel_menu.services.events import EventService
from hostel_menu.services.feedback import FeedbackService
from hostel_menu.services.finalization import FinalizationService
from hostel_menu.services.menu import MenuService
from hostel_menu.services.profiles import ProfileService
from hostel_menu.services.reports import ReportService
from hostel_menu.services.sessions import SessionService
from hostel_menu.services.system_settings import SystemSettingsService
from hostel_menu.services.voting import VotingService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    session_service: SessionService
    menu_service: MenuService
    voting_service: VotingService
    finalization_service: FinalizationService
    report_service: ReportService
    profile_service: ProfileService
    feedback_service: FeedbackService
    event_service: EventService
    system_settings_service: SystemSettingsService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    session_repository = SupabaseSessionRepository(supabase_client)
    menu_repository = SupabaseMenuRepository(supabase_client)
    vote_repository = SupabaseVoteRepository(supabase_client)
    profile_repository = SupabaseProfileRepository(supabase_client)
    session_service = SessionService(session_repository)
    return AppContainer(
        settings=resolved_settings,
        session_service=session_service,
        menu_service=MenuService(menu_repository, session_repository),
        voting_service=VotingService(
            vote_repository=vote_repository,
            menu_repository=menu_repository,
            session_repository=session_repository,
            profile_repository=profile_repository,
        ),
        finalization_service=FinalizationService(menu_repository, session_service),
        report_service=ReportService(
            session_service=session_service,
            menu_repository=menu_repository,
            renderer=ReportlabMenuRenderer(),
            title=resolved_settings.report_title,
        ),
        profile_service=ProfileService(profile_repository, vote_repository),
        feedback_service=FeedbackService(
            SupabaseFeedbackRepository(supabase_client), profile_repository
        ),
        event_service=EventService(SupabaseEventRepository(supabase_client)),
        system_settings_service=SystemSettingsService(
            SupabaseSystemSettingsRepository(supabase_client)
        ),
    )
