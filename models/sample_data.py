"""
Sample planner data for local runs.

Builds a small workspace: a few people, events in different states and
one poll of each kind. Persistence is outside this app, so pages work
against this data through the in-memory repositories.
"""

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Optional

from models.entities import Event, Poll, PollOption, User
from models.repositories import InMemoryRelationshipRepository, InMemoryUserRepository


@dataclass
class Workspace:
    """Everything the pages read and change."""
    users: InMemoryUserRepository
    relationships: InMemoryRelationshipRepository
    events: dict = field(default_factory=dict)  # event_id -> Event
    polls: dict = field(default_factory=dict)  # poll_id -> Poll


def build_sample_workspace(now: Optional[datetime] = None) -> Workspace:
    now = now or datetime.now(timezone.utc)

    alex = User(id="u-alex", name="Alex Rivera", username="alex")
    sam = User(id="u-sam", name="Sam Chen", username="samc")
    jordan = User(id="u-jordan", name="Jordan Lee", username="jordanlee")
    casey = User(id="u-casey", name="Casey Morgan", username="casey")
    taylor = User(id="u-taylor", name="Taylor Brooks", username="tbrooks")

    users = InMemoryUserRepository([alex, sam, jordan, casey, taylor])
    relationships = InMemoryRelationshipRepository()
    relationships.set_preference(jordan, "request")
    relationships.set_preference(casey, "closed")
    relationships.block(taylor, alex)

    movie_night = Event(
        id="e-movie-night",
        title="Summer Movie Night",
        start_at=now + timedelta(days=21),
        status="polling",
        participant_count=5,
        polling_deadline=now + timedelta(days=3),
    )
    brunch = Event(
        id="e-brunch",
        title="Board Game Brunch",
        start_at=now + timedelta(days=35),
        status="threshold",
        threshold_type="attendee_count",
        threshold_count=8,
        participant_count=5,
    )
    fundraiser = Event(
        id="e-jazz",
        title="Jazz Night Fundraiser",
        start_at=now + timedelta(days=60),
        status="threshold",
        is_ticketed=True,
        taxation_type="ticketed_event",
        threshold_type="revenue",
        threshold_revenue_cents=250000,
        current_revenue_cents=137500,
        participant_count=22,
    )
    picnic = Event(
        id="e-picnic",
        title="Spring Picnic",
        start_at=now - timedelta(days=40),
        status="confirmed",
        participant_count=12,
    )

    for event in (movie_night, brunch, fundraiser, picnic):
        for user in (alex, sam, jordan, casey, taylor):
            relationships.add_participant(event, user)

    # Alex and Sam already keep up with each other
    relationships.create_from_shared_event(alex, sam, picnic, "Met at Spring Picnic")

    polls = [
        Poll(
            id="p-movie",
            title="What should we watch?",
            poll_type="movie",
            voting_system="approval",
            phase="voting_with_suggestions",
            event_id=movie_night.id,
        ),
        Poll(
            id="p-music",
            title="Opening song",
            poll_type="music_track",
            voting_system="ranked",
            phase="list_building",
            event_id=movie_night.id,
            options=[
                PollOption(id="o-song-1", title="Moon River", description="Audrey Hepburn - Breakfast at Tiffany's"),
                PollOption(id="o-song-2", title="As Time Goes By", description="Dooley Wilson - Casablanca"),
            ],
        ),
        Poll(
            id="p-date",
            title="Which Saturday works?",
            poll_type="date_selection",
            voting_system="binary",
            phase="voting",
            event_id=brunch.id,
            options=[
                PollOption(id="o-date-1", title=(now + timedelta(days=35)).date().isoformat()),
                PollOption(id="o-date-2", title=(now + timedelta(days=42)).date().isoformat()),
            ],
        ),
        Poll(
            id="p-snacks",
            title="Rate the snack ideas",
            poll_type="general",
            voting_system="star",
            phase="voting_only",
            event_id=movie_night.id,
            options=[
                PollOption(id="o-snack-1", title="Popcorn bar"),
                PollOption(id="o-snack-2", title="Nachos", description="With three salsas"),
            ],
        ),
        Poll(
            id="p-place",
            title="Where should we meet?",
            poll_type="places",
            voting_system="approval",
            phase="voting_with_suggestions",
            event_id=brunch.id,
            options=[
                PollOption(
                    id="o-place-1",
                    title="The Meeple Cafe",
                    description="12 Market St",
                    external_id="place-meeple",
                    external_data={
                        "title": "The Meeple Cafe",
                        "status": "open",
                        "categories": ["cafe", "restaurant", "food", "point_of_interest", "establishment"],
                        "rating": {"value": 4.6, "count": 1834},
                        "sections": {
                            "hero": {"price_level": 2},
                            "details": {
                                "formatted_address": "12 Market St",
                                "phone": "(555) 010-2040",
                                "website": "https://meeple.example.com",
                                "opening_hours": {
                                    "open_now": True,
                                    "weekday_text": [
                                        "Monday: Closed",
                                        "Saturday: 9:00 AM - 11:00 PM",
                                        "Sunday: 9:00 AM - 9:00 PM",
                                    ],
                                },
                            },
                        },
                        "external_urls": {"maps": "https://maps.google.com/?q=The+Meeple+Cafe"},
                    },
                ),
                PollOption(
                    id="o-place-2",
                    title="Riverside Park Pavilion",
                    external_id="place-pavilion",
                    external_data={
                        "title": "Riverside Park Pavilion",
                        "metadata": {
                            "address": "400 River Rd",
                            "rating": 4.3,
                            "user_ratings_total": 212,
                            "price_level": 0,
                            "business_status": "OPERATIONAL",
                            "types": ["park", "tourist_attraction", "point_of_interest"],
                        },
                    },
                ),
            ],
        ),
    ]

    return Workspace(
        users=users,
        relationships=relationships,
        events={e.id: e for e in (movie_night, brunch, fundraiser, picnic)},
        polls={p.id: p for p in polls},
    )
