"""
Controllers layer - widget state in st.session_state and parent callbacks.
"""

from controllers.option_search_controller import OptionSearchController
from controllers.voting_controller import VotingController
from controllers.relationship_controller import RelationshipButtonController, ConnectModalController
from controllers.image_picker_controller import ImagePickerController
from controllers.username_controller import UsernameController
from controllers.planner_controller import PlannerController

__all__ = [
    "OptionSearchController",
    "VotingController",
    "RelationshipButtonController",
    "ConnectModalController",
    "ImagePickerController",
    "UsernameController",
    "PlannerController",
]
