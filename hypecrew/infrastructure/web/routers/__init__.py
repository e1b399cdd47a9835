from . import auth, gigs, navigation, profiles, applications

__all__ = ["auth", "gigs", "navigation", "profiles", "applications"]
