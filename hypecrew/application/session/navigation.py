"""
Navigation shell.
Decides which view a tab shows from the session's auth state and role.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from hypecrew.domain.models.profile import UserRole


class Tab(str, Enum):
    BROWSE = "browse"
    POST = "post"
    MESSAGES = "messages"
    PROFILE = "profile"


class View(str, Enum):
    LOADING = "loading"
    LANDING = "landing"
    AUTH_REQUIRED = "auth_required"
    BROWSE_GIGS = "browse_gigs"
    POST_GIG = "post_gig"
    COMING_SOON = "coming_soon"


APP_TITLE = "HypeCrew"


@dataclass(frozen=True)
class TabScreen:
    view: View
    title: str
    show_apply_button: bool = False


# Role-keyed tables: every UserRole must appear in each of them.
BROWSE_SCREENS: Dict[UserRole, TabScreen] = {
    UserRole.PERFORMER: TabScreen(View.BROWSE_GIGS, "Available Gigs", show_apply_button=True),
    UserRole.CLIENT: TabScreen(View.BROWSE_GIGS, "Browse Performers"),
}

POST_SCREENS: Dict[UserRole, TabScreen] = {
    UserRole.PERFORMER: TabScreen(View.BROWSE_GIGS, "Find Gigs", show_apply_button=True),
    UserRole.CLIENT: TabScreen(View.POST_GIG, "Post a Gig"),
}

POST_TAB_LABELS: Dict[UserRole, str] = {
    UserRole.PERFORMER: "Find Gigs",
    UserRole.CLIENT: "Post Gig",
}

# Shown while the profile has not loaded (or does not exist yet).
NO_PROFILE_SCREENS: Dict[Tab, TabScreen] = {
    Tab.BROWSE: TabScreen(View.BROWSE_GIGS, "Browse Performers"),
    Tab.POST: TabScreen(View.BROWSE_GIGS, "Post a Gig"),
}

COMING_SOON_SCREENS: Dict[Tab, TabScreen] = {
    Tab.MESSAGES: TabScreen(View.COMING_SOON, "Messages"),
    Tab.PROFILE: TabScreen(View.COMING_SOON, "Profile"),
}


@dataclass(frozen=True)
class NavItem:
    tab: Tab
    label: str
    active: bool = False


@dataclass(frozen=True)
class ScreenState:
    """What the front-end should render for the requested tab."""

    tab: Tab
    view: View
    title: str
    show_apply_button: bool = False
    nav: List[NavItem] = field(default_factory=list)


def nav_items(role: Optional[UserRole], active: Tab) -> List[NavItem]:
    """Bottom navigation bar for `role` with `active` highlighted."""
    post_label = POST_TAB_LABELS[role] if role is not None else POST_TAB_LABELS[UserRole.CLIENT]
    labels = [
        (Tab.BROWSE, "Browse"),
        (Tab.POST, post_label),
        (Tab.MESSAGES, "Messages"),
        (Tab.PROFILE, "Profile"),
    ]
    return [NavItem(tab, label, tab is active) for tab, label in labels]


def tab_screen(tab: Tab, role: Optional[UserRole]) -> TabScreen:
    """Screen for an authenticated user on `tab`."""
    if tab in COMING_SOON_SCREENS:
        return COMING_SOON_SCREENS[tab]
    if role is None:
        return NO_PROFILE_SCREENS[tab]
    if tab is Tab.BROWSE:
        return BROWSE_SCREENS[role]
    return POST_SCREENS[role]


def resolve_screen(
    tab: Tab,
    authenticated: bool,
    loading: bool,
    role: Optional[UserRole],
) -> ScreenState:
    """
    Resolve the screen for a tab request.

    Anonymous visitors see the landing page; asking for any tab while
    signed out answers AUTH_REQUIRED so the client can open the sign-in form.
    """
    if loading:
        return ScreenState(tab=tab, view=View.LOADING, title=APP_TITLE)

    if not authenticated:
        view = View.LANDING if tab is Tab.BROWSE else View.AUTH_REQUIRED
        return ScreenState(tab=tab, view=view, title=APP_TITLE)

    screen = tab_screen(tab, role)
    return ScreenState(
        tab=tab,
        view=screen.view,
        title=screen.title,
        show_apply_button=screen.show_apply_button,
        nav=nav_items(role, tab),
    )
