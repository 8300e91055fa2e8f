from datetime import timedelta

import pytest

from models.entities import Event
from views.helpers.badges import (
    badge_color,
    complete_status_display,
    confidence_badge_class,
    contextual_info,
    friendly_status_message,
    polling_deadline_info,
    role_badge_class,
    success_rate_badge_class,
)


def crowdfunding_event(**overrides):
    values = dict(
        id=1,
        title="Jazz Night",
        status="threshold",
        is_ticketed=True,
        threshold_type="revenue",
        threshold_revenue_cents=250000,
        current_revenue_cents=137500,
    )
    values.update(overrides)
    return Event(**values)


@pytest.mark.parametrize("event, format, expected", [
    (Event(id=1, title="x", status="confirmed", is_ticketed=True), "badge", "Open for Registration"),
    (Event(id=1, title="x", status="confirmed"), "compact", "Event Ready"),
    (Event(id=1, title="x", status="polling"), "detailed", "Collecting feedback from attendees"),
    (crowdfunding_event(), "badge", "Crowdfunding Active"),
    (Event(id=1, title="x", status="threshold", threshold_type="attendee_count"), "compact", "Checking Interest"),
    (Event(id=1, title="x", status="threshold"), "badge", "Building Momentum"),
    (Event(id=1, title="x", status="draft"), "compact", "Planning Stage"),
    (Event(id=1, title="x", status="canceled"), "badge", "Canceled"),
])
def test_friendly_status_message(event, format, expected):
    assert friendly_status_message(event, format) == expected


def test_unknown_format_falls_back_per_status():
    assert friendly_status_message(Event(id=1, title="x", status="confirmed", is_ticketed=True), "poster") == "Ready to Go"
    assert friendly_status_message(Event(id=1, title="x", status="polling"), "poster") == "Collecting Votes"


def test_unknown_status():
    assert friendly_status_message(Event(id=1, title="x", status="archived")) == "Status Unknown"


def test_revenue_threshold_without_tickets_is_not_crowdfunding():
    event = crowdfunding_event(is_ticketed=False, taxation_type="ticketless")
    assert friendly_status_message(event, "badge") == "Building Momentum"


def test_crowdfunding_progress():
    assert contextual_info(crowdfunding_event()) == "Raised $1375 of $2500 goal ($1125 to go)"
    reached = crowdfunding_event(current_revenue_cents=300000)
    assert contextual_info(reached) == "Goal reached! Raised $3000 of $2500"
    assert contextual_info(crowdfunding_event(current_revenue_cents=None)) == "Funding goal: $2500"


def test_interest_progress():
    event = Event(id=1, title="x", status="threshold", threshold_type="attendee_count",
                  threshold_count=8, participant_count=5)
    assert contextual_info(event) == "Waiting for 3 more people to sign up"
    event.participant_count = 7
    assert contextual_info(event) == "Waiting for 1 more person to sign up"
    event.participant_count = 9
    assert contextual_info(event) == "Interest goal reached! 9 people signed up"


def test_generic_threshold_progress():
    event = Event(id=1, title="x", status="threshold", threshold_count=10, participant_count=4)
    assert contextual_info(event) == "Need 6 more people"
    event.participant_count = 9
    assert contextual_info(event) == "Need 1 more person"
    event.participant_count = 10
    assert contextual_info(event) == "Threshold reached!"


def test_polling_deadline_info(now):
    assert polling_deadline_info(now + timedelta(days=2, hours=3), now) == "Polling closes in 2 days"
    assert polling_deadline_info(now + timedelta(hours=1, minutes=5), now) == "Polling closes in 1 hour"
    assert polling_deadline_info(now + timedelta(minutes=30), now) == "Polling closes in 30 minutes"
    assert polling_deadline_info(now - timedelta(minutes=1), now) == "Polling has ended"
    assert polling_deadline_info("2025-06-03T12:00:00Z", now) == "Polling closes in 2 days"
    assert polling_deadline_info("next tuesday", now) == "Polling deadline soon"
    assert polling_deadline_info(None, now) == "Polling in progress"


def test_confirmed_context():
    ticketed = Event(id=1, title="x", status="confirmed", is_ticketed=True, available_tickets=5)
    assert contextual_info(ticketed) == "5 tickets remaining"
    ticketed.available_tickets = 0
    assert contextual_info(ticketed) == "Registration required"
    free = Event(id=1, title="x", status="confirmed", participant_count=1)
    assert contextual_info(free) == "1 person attending"
    free.participant_count = 0
    assert contextual_info(free) is None


def test_complete_status_display_for_crowdfunding():
    display = complete_status_display(crowdfunding_event(), "badge")
    assert display.primary == "Crowdfunding Active"
    assert display.has_context is True
    assert display.icon == "💰"
    assert display.css_class == "bg-purple-100 text-purple-800"
    assert display.color == "violet"


def test_complete_status_display_without_context():
    display = complete_status_display(Event(id=1, title="x", status="confirmed"))
    assert display.secondary is None
    assert display.has_context is False
    assert display.color == "green"


def test_badge_classes():
    assert role_badge_class("admin") == "bg-blue-100 text-blue-800"
    assert role_badge_class("member") == "bg-gray-100 text-gray-800"
    assert success_rate_badge_class(96) == "bg-green-100 text-green-800"
    assert success_rate_badge_class(85) == "bg-yellow-100 text-yellow-800"
    assert success_rate_badge_class(10) == "bg-red-100 text-red-800"
    assert success_rate_badge_class("n/a") == "bg-gray-100 text-gray-800"
    assert confidence_badge_class(0.95) == "bg-green-100 text-green-800"
    assert confidence_badge_class(0.6) == "bg-orange-100 text-orange-800"
    assert confidence_badge_class(0.2) == "bg-red-100 text-red-800"


def test_badge_color():
    assert badge_color("bg-yellow-100 text-yellow-800") == "orange"
    assert badge_color("bg-teal-100") == "gray"
    assert badge_color("") == "gray"
