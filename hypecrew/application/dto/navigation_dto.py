"""
Navigation DTOs.
"""

from typing import List

from hypecrew.application.dto.base_dto import BaseDTO
from hypecrew.application.session.navigation import ScreenState, Tab, View


class NavItemDTO(BaseDTO):
    tab: Tab
    label: str
    active: bool = False


class ScreenResponseDTO(BaseDTO):
    """What the shell should render for the requested tab."""

    tab: Tab
    view: View
    title: str
    show_apply_button: bool = False
    nav: List[NavItemDTO] = []

    @classmethod
    def from_state(cls, screen: ScreenState) -> "ScreenResponseDTO":
        return cls(
            tab=screen.tab,
            view=screen.view,
            title=screen.title,
            show_apply_button=screen.show_apply_button,
            nav=[NavItemDTO(tab=item.tab, label=item.label, active=item.active) for item in screen.nav],
        )
