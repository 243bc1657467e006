"""JSON shapes for domain objects."""

from hostel_menu.domain.events import HostelEvent
from hostel_menu.domain.feedback import Feedback
from hostel_menu.domain.menu import MenuItem, group_by_day
from hostel_menu.domain.profiles import Profile
from hostel_menu.domain.sessions import VotingSession


def serialize_session(session: VotingSession) -> dict[str, object]:
    return {
        "id": str(session.id),
        "title": session.title,
        "start_date": session.start_date.isoformat(),
        "end_date": session.end_date.isoformat(),
        "status": session.status.value,
        "created_at": session.created_at.isoformat() if session.created_at else None,
    }


def serialize_item(item: MenuItem) -> dict[str, object]:
    return {
        "id": str(item.id),
        "session_id": str(item.session_id),
        "date_served": item.date_served.isoformat(),
        "meal_type": item.meal_type.value,
        "mess_type": item.mess_type.value,
        "name": item.name,
        "description": item.description,
        "is_selected": item.is_selected,
        "vote_count": item.vote_count,
    }


def serialize_grouped(items: list[MenuItem]) -> dict[str, dict[str, list[object]]]:
    """Nest items as {date: {meal_type: [item, ...]}}."""
    return {
        day.isoformat(): {
            meal.value: [serialize_item(item) for item in meal_items]
            for meal, meal_items in meals.items()
        }
        for day, meals in group_by_day(items).items()
    }


def serialize_profile(profile: Profile) -> dict[str, object]:
    return {
        "id": str(profile.id),
        "full_name": profile.full_name,
        "role": profile.role.value,
        "mess_type": profile.mess_type.value if profile.mess_type else None,
        "reg_number": profile.reg_number,
        "served_mess_types": [value.value for value in profile.served_mess_types],
        "assigned_caterer_id": (
            str(profile.assigned_caterer_id) if profile.assigned_caterer_id else None
        ),
    }


def serialize_feedback(feedback: Feedback) -> dict[str, object]:
    return {
        "id": str(feedback.id),
        "student_id": str(feedback.student_id),
        "caterer_id": str(feedback.caterer_id),
        "message": feedback.message,
        "response": feedback.response,
        "created_at": (
            feedback.created_at.isoformat() if feedback.created_at else None
        ),
        "caterer_name": feedback.caterer_name,
        "student_name": feedback.student_name,
    }


def serialize_event(event: HostelEvent) -> dict[str, object]:
    return {
        "id": str(event.id),
        "title": event.title,
        "description": event.description,
        "date": event.date.isoformat(),
        "location": event.location,
        "image_url": event.image_url,
    }
